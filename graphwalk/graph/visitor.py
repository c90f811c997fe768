"""
visitor.py — Node Visitors
==========================
A visitor is a single-method callback fired once per node the first time
a traversal discovers it.  Plain functions work too; `as_visitor` wraps
them so the traversal code only ever calls `.visit(node)`.
"""

from abc import ABC, abstractmethod
from typing import Callable, List

from graphwalk.graph.node import Node


class NodeVisitor(ABC):

    @abstractmethod
    def visit(self, node: Node) -> None:
        ...


class FunctionVisitor(NodeVisitor):
    """Adapts any `fn(node)` callable."""

    def __init__(self, fn: Callable[[Node], None]):
        self.fn = fn

    def visit(self, node: Node) -> None:
        self.fn(node)


class RecordingVisitor(NodeVisitor):
    """Collects every visited node in visitation order."""

    def __init__(self):
        self.nodes: List[Node] = []

    def visit(self, node: Node) -> None:
        self.nodes.append(node)

    @property
    def names(self) -> List[str]:
        return [n.name for n in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)


def as_visitor(obj) -> NodeVisitor:
    """
    Normalise `obj` into something with a `visit(node)` method.

    Accepts a NodeVisitor, any duck-typed object exposing `visit`, or a
    bare callable.  Anything else is a TypeError.
    """
    if isinstance(obj, NodeVisitor):
        return obj
    if callable(getattr(obj, "visit", None)):
        return FunctionVisitor(obj.visit)
    if callable(obj):
        return FunctionVisitor(obj)
    raise TypeError(f"Expected a visitor or callable, got {type(obj).__name__}")
