"""
node.py — Graph Node
====================
A named vertex holding weighted adjacency to other vertices.

Design decisions:
  - Identity is the object itself.  Two nodes with the same name are the
    same node only when both came out of `Graph.get_or_create_node`.
  - Adjacency is a plain dict `{Node: weight}` so neighbour iteration is
    O(degree) and weight lookup is O(1).
  - `add_undirected_edge_to_node` is the ONLY writer of `adj`; both
    endpoints are updated together in one call.
"""

from typing import Dict, List

from graphwalk.graph.errors import EdgeNotFoundError


class Node:
    """
    Attributes:
        name : Immutable identity shown to callers.
        adj  : {neighbour Node: integer weight}.  Weights are expected to be
               >= 0 for Dijkstra / Prim–Jarnik; this is not enforced.
    """

    __slots__ = ("_name", "adj")

    def __init__(self, name: str):
        self._name: str            = name
        self.adj: Dict["Node", int] = {}

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------
    def get_neighbors(self) -> List["Node"]:
        """Every node with an adjacency entry, in insertion order."""
        return list(self.adj)

    def get_weight(self, neighbor: "Node") -> int:
        try:
            return self.adj[neighbor]
        except KeyError:
            raise EdgeNotFoundError(self._name, _name_of(neighbor)) from None

    def has_neighbor(self, neighbor: "Node") -> bool:
        return neighbor in self.adj

    def degree(self) -> int:
        return len(self.adj)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_undirected_edge_to_node(self, other: "Node", weight: int) -> None:
        """
        Connect self ↔ other with `weight`.  Calling again for the same
        pair overwrites the weight on both sides (last write wins).
        """
        self.adj[other] = weight
        other.adj[self] = weight

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(name={self._name!r}, degree={len(self.adj)})"


def _name_of(obj) -> str:
    return obj.get_name() if isinstance(obj, Node) else repr(obj)
