"""
errors.py — Graph Exceptions
=============================
Every failure in this library is a programming-contract violation, never
a transient condition, so nothing here is retried or swallowed.

    GraphError
      ├── EdgeNotFoundError   (also a LookupError)
      └── EmptyGraphError     (also a ValueError)
"""


class GraphError(Exception):
    """Base class for all graph errors."""


class EdgeNotFoundError(GraphError, LookupError):
    """Weight requested for a node that is not an adjacency entry."""

    def __init__(self, origin: str, destination: str):
        self.origin      = origin
        self.destination = destination
        super().__init__(f"No edge from '{origin}' to '{destination}'")


class EmptyGraphError(GraphError, ValueError):
    """Operation needs at least one node but the graph has none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot run {operation} on an empty graph")
