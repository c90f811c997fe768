"""
graphwalk
=========
In-memory undirected weighted graphs with BFS, DFS, Dijkstra and
Prim–Jarnik.

    from graphwalk import Graph

    g = Graph()
    g.add_undirected_edge("A", "B", 1)
    g.dijkstra("A")
"""

import logging

from graphwalk.graph import (
    Graph,
    Node,
    Edge,
    NodeVisitor,
    FunctionVisitor,
    RecordingVisitor,
    GraphError,
    EdgeNotFoundError,
    EmptyGraphError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "NodeVisitor",
    "FunctionVisitor",
    "RecordingVisitor",
    "GraphError",
    "EdgeNotFoundError",
    "EmptyGraphError",
]
