"""
Unit tests for Node adjacency.
"""

import pytest

from graphwalk import EdgeNotFoundError, Node


class TestIdentity:

    def test_name(self):
        """get_name and the name property return the constructor name."""
        node = Node("A")
        assert node.get_name() == "A"
        assert node.name == "A"

    def test_name_is_read_only(self):
        """The name cannot be reassigned."""
        with pytest.raises(AttributeError):
            Node("A").name = "B"

    def test_same_name_distinct_nodes(self):
        """Nodes built directly are distinct even with equal names."""
        assert Node("A") != Node("A")


class TestUndirectedEdges:

    def test_edge_is_symmetric(self):
        """Both endpoints see each other with the same weight."""
        a, b = Node("A"), Node("B")
        a.add_undirected_edge_to_node(b, 7)
        assert a.get_neighbors() == [b]
        assert b.get_neighbors() == [a]
        assert a.get_weight(b) == 7
        assert b.get_weight(a) == 7

    def test_repeat_overwrites_weight(self):
        """Adding the same edge again keeps one entry and the last weight."""
        a, b = Node("A"), Node("B")
        a.add_undirected_edge_to_node(b, 7)
        b.add_undirected_edge_to_node(a, 3)
        assert a.degree() == 1
        assert a.get_weight(b) == 3
        assert b.get_weight(a) == 3

    def test_no_self_entry_by_default(self):
        """A node never lists itself unless a self-loop is added."""
        a, b = Node("A"), Node("B")
        a.add_undirected_edge_to_node(b, 1)
        assert not a.has_neighbor(a)

    def test_explicit_self_loop(self):
        """A self-loop is stored as a single adjacency entry."""
        a = Node("A")
        a.add_undirected_edge_to_node(a, 2)
        assert a.get_neighbors() == [a]
        assert a.get_weight(a) == 2

    def test_zero_weight(self):
        """Zero is a valid weight."""
        a, b = Node("A"), Node("B")
        a.add_undirected_edge_to_node(b, 0)
        assert a.get_weight(b) == 0

    def test_missing_edge_raises(self):
        """Weight lookup for a non-neighbour raises EdgeNotFoundError."""
        a, b = Node("A"), Node("B")
        with pytest.raises(EdgeNotFoundError) as exc:
            a.get_weight(b)
        assert "'A'" in str(exc.value)
        assert "'B'" in str(exc.value)

    def test_missing_edge_is_lookup_error(self):
        """EdgeNotFoundError can be caught as a LookupError."""
        with pytest.raises(LookupError):
            Node("A").get_weight(Node("B"))

    def test_neighbors_is_a_copy(self):
        """Mutating the returned list does not touch adjacency."""
        a, b = Node("A"), Node("B")
        a.add_undirected_edge_to_node(b, 1)
        a.get_neighbors().clear()
        assert a.degree() == 1
