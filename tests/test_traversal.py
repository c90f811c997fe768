"""
Unit tests for breadth-first and depth-first search.
"""

import networkx as nx
import pytest

from graphwalk import Graph, Node, NodeVisitor, RecordingVisitor


class CountingVisitor(NodeVisitor):

    def __init__(self):
        self.counts = {}

    def visit(self, node):
        self.counts[node.name] = self.counts.get(node.name, 0) + 1


class TestBreadthFirstSearch:

    def test_abcd_layers(self, abcd_graph):
        """A first, then B and C (one hop), then D (two hops)."""
        v = RecordingVisitor()
        abcd_graph.breadth_first_search("A", v)
        assert v.names[0] == "A"
        assert set(v.names[1:3]) == {"B", "C"}
        assert v.names[3] == "D"

    def test_passes_registered_nodes(self, abcd_graph):
        """The visitor receives the graph's own Node objects."""
        v = RecordingVisitor()
        abcd_graph.breadth_first_search("A", v)
        assert all(abcd_graph.get_node(n.name) is n for n in v.nodes)

    @pytest.mark.parametrize("seed", range(8))
    def test_hop_distance_non_decreasing(self, seed, make_random_graph, to_networkx):
        """Every reachable node once, in non-decreasing hop distance."""
        g = make_random_graph(12, edge_probability=0.25, seed=seed)
        hops = nx.single_source_shortest_path_length(to_networkx(g), "n0")

        v = RecordingVisitor()
        g.breadth_first_search("n0", v)

        assert sorted(v.names) == sorted(hops)
        assert len(v.names) == len(set(v.names))
        layers = [hops[name] for name in v.names]
        assert layers == sorted(layers)

    def test_unreachable_not_visited(self, abcd_graph):
        """Nodes outside the start's component are never visited."""
        abcd_graph.add_undirected_edge("X", "Y", 1)
        v = RecordingVisitor()
        abcd_graph.breadth_first_search("A", v)
        assert "X" not in v.names and "Y" not in v.names

    def test_unknown_start_is_created(self):
        """An unknown start name becomes a node and is visited alone."""
        g = Graph()
        v = RecordingVisitor()
        g.breadth_first_search("ghost", v)
        assert v.names == ["ghost"]
        assert g.contains_node("ghost")

    def test_plain_callable_visitor(self, abcd_graph):
        """A bare function works as a visitor."""
        seen = []
        abcd_graph.breadth_first_search("D", seen.append)
        assert seen[0].name == "D"
        assert len(seen) == 4

    def test_duck_typed_visitor(self, abcd_graph):
        """Any object with a visit method works as a visitor."""

        class Duck:
            def __init__(self):
                self.names = []

            def visit(self, node):
                self.names.append(node.name)

        duck = Duck()
        abcd_graph.breadth_first_search("A", duck)
        assert len(duck.names) == 4

    def test_rejects_non_visitor(self, abcd_graph):
        """Objects that cannot visit are a TypeError."""
        with pytest.raises(TypeError):
            abcd_graph.breadth_first_search("A", 42)

    def test_self_loop_visited_once(self):
        """A self-loop does not revisit its node."""
        g = Graph()
        g.add_undirected_edge("A", "A", 1)
        g.add_undirected_edge("A", "B", 1)
        v = CountingVisitor()
        g.breadth_first_search("A", v)
        assert v.counts == {"A": 1, "B": 1}

    def test_linked_unregistered_node_is_visited(self, abcd_graph):
        """A node linked in by hand is handed to the visitor as itself."""
        outsider = Node("X")
        abcd_graph.get_node("D").add_undirected_edge_to_node(outsider, 1)

        v = RecordingVisitor()
        abcd_graph.breadth_first_search("A", v)
        assert v.nodes[-1] is outsider
        assert not abcd_graph.contains_node("X")

    def test_same_named_nodes_visited_separately(self, abcd_graph):
        """A foreign node named like a graph node is visited as itself."""
        own_b = abcd_graph.get_node("B")
        foreign_b = Node("B")
        abcd_graph.get_node("D").add_undirected_edge_to_node(foreign_b, 1)

        v = RecordingVisitor()
        abcd_graph.breadth_first_search("A", v)
        assert v.names.count("B") == 2
        assert any(n is own_b for n in v.nodes)
        assert v.nodes[-1] is foreign_b


class TestDepthFirstSearch:

    def test_push_all_order(self):
        """Neighbours are pushed in adjacency order and popped LIFO."""
        g = Graph()
        g.add_undirected_edge("A", "B", 1)
        g.add_undirected_edge("A", "C", 1)
        g.add_undirected_edge("B", "C", 1)
        v = RecordingVisitor()
        g.depth_first_search("A", v)
        assert v.names == ["A", "C", "B"]

    def test_abcd_order(self, abcd_graph):
        """A; push B, C; pop C; push B, A, D; pop D, then B."""
        v = RecordingVisitor()
        abcd_graph.depth_first_search("A", v)
        assert v.names == ["A", "C", "D", "B"]

    def test_start_visited_first(self, abcd_graph):
        """The start node is always the first visit."""
        v = RecordingVisitor()
        abcd_graph.depth_first_search("B", v)
        assert v.names[0] == "B"

    def test_dense_graph_visits_once(self):
        """Nodes pushed many times are still visited once."""
        g = Graph()
        names = "ABCDEF"
        for i, a in enumerate(names):
            for b in names[i + 1:]:
                g.add_undirected_edge(a, b, 1)
        v = CountingVisitor()
        g.depth_first_search("A", v)
        assert v.counts == {name: 1 for name in names}

    @pytest.mark.parametrize("seed", range(8))
    def test_visits_reachable_set(self, seed, make_random_graph, to_networkx):
        """DFS visits exactly the start's connected component."""
        g = make_random_graph(10, edge_probability=0.15, seed=seed, connected=False)
        component = nx.node_connected_component(to_networkx(g), "n0")

        v = RecordingVisitor()
        g.depth_first_search("n0", v)

        assert len(v.names) == len(set(v.names))
        assert set(v.names) == component

    def test_unknown_start_is_created(self):
        """An unknown start name becomes the only node and is visited."""
        g = Graph()
        v = RecordingVisitor()
        g.depth_first_search("ghost", v)
        assert v.names == ["ghost"]
        assert g.node_count() == 1

    def test_linked_unregistered_node_is_visited(self, abcd_graph):
        """A node linked in by hand is handed to the visitor as itself."""
        outsider = Node("X")
        abcd_graph.get_node("B").add_undirected_edge_to_node(outsider, 1)

        v = RecordingVisitor()
        abcd_graph.depth_first_search("A", v)
        assert v.nodes[-1] is outsider
        assert len(v.nodes) == 5

    def test_same_named_nodes_visited_separately(self, abcd_graph):
        """A foreign node named like a graph node is visited as itself."""
        own_d = abcd_graph.get_node("D")
        foreign_d = Node("D")
        abcd_graph.get_node("B").add_undirected_edge_to_node(foreign_d, 1)

        v = RecordingVisitor()
        abcd_graph.depth_first_search("A", v)
        visited_d = [n for n in v.nodes if n.name == "D"]
        assert len(visited_d) == 2
        assert visited_d[0] is own_d
        assert visited_d[1] is foreign_d
