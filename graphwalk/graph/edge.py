"""
edge.py — Weighted Edge
=======================
Transient (origin, destination, weight) triple.  Prim–Jarnik keeps these
in its heap frontier and `Graph.edges()` hands them out as a read-only
view of the adjacency.  The persistent representation is still the pair
of symmetric adjacency entries on the two nodes.

Ordering compares `weight` only, so two edges of equal weight compare
equal and heapq never has to compare Node objects.
"""

from dataclasses import dataclass, field
from typing import Optional

from graphwalk.graph.node import Node


@dataclass(order=True, frozen=True)
class Edge:
    weight:      int
    origin:      Node = field(compare=False)
    destination: Node = field(compare=False)

    def other_end(self, node: Node) -> Optional[Node]:
        """Given one endpoint, return the other. None if node isn't an endpoint."""
        if node is self.origin:
            return self.destination
        if node is self.destination:
            return self.origin
        return None

    def __repr__(self) -> str:
        return f"Edge({self.origin.name} ↔ {self.destination.name}, w={self.weight})"
