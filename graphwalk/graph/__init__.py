"""
graph/
-----
Core data layer.  Public API:

    from graphwalk.graph import Graph, Node, Edge
    from graphwalk.graph import NodeVisitor, RecordingVisitor
"""

from graphwalk.graph.errors  import GraphError, EdgeNotFoundError, EmptyGraphError
from graphwalk.graph.node    import Node
from graphwalk.graph.edge    import Edge
from graphwalk.graph.visitor import NodeVisitor, FunctionVisitor, RecordingVisitor, as_visitor
from graphwalk.graph.graph   import Graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "NodeVisitor",       "FunctionVisitor",   "RecordingVisitor",  "as_visitor",
    "GraphError",        "EdgeNotFoundError", "EmptyGraphError",
]
