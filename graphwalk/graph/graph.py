"""
graph.py — Graph Container
===========================
Single source of truth for the graph.  Owns every Node by name and hosts
the four algorithms.

Responsibilities:
  1. Get-or-create node lookup               (names are unique)
  2. Undirected weighted edges               (via Node.add_undirected_edge_to_node)
  3. Traversals                              (BFS, DFS with a visitor)
  4. Shortest-path costs                     (Dijkstra)
  5. Minimum spanning tree                   (Prim–Jarnik → new Graph)

Design decisions:
  - Nodes are stored in a plain dict `{name: Node}`; this dict is the only
    owner, so every node an edge can reach is registered here as long as
    edges are only added between nodes from the same graph.  Traversals
    follow adjacency, not this dict, and hand back the Node objects they
    actually reached.
  - The algorithms live in `graphwalk.algorithms` as step generators.
    The methods here run them with detail=False and turn the steps into
    visitor calls or return values.
  - Nothing here locks.  A Graph is meant to be built, then queried, from
    one thread.
"""

import logging
from typing import Dict, List, Optional, Tuple

from graphwalk import config
from graphwalk.algorithms.bfs import bfs
from graphwalk.algorithms.dfs import dfs
from graphwalk.algorithms.dijkstra import dijkstra as _dijkstra
from graphwalk.algorithms.prim_jarnik import prim_jarnik as _prim_jarnik
from graphwalk.graph.edge import Edge
from graphwalk.graph.errors import EmptyGraphError
from graphwalk.graph.node import Node
from graphwalk.graph.visitor import as_visitor

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        nodes : {name: Node}
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def get_or_create_node(self, name: str) -> Node:
        """
        Return the Node called `name`, creating and registering it first if
        needed.  Repeated calls return the identical object.
        """
        node = self.nodes.get(name)
        if node is None:
            node = Node(name)
            self.nodes[name] = node
            logger.debug(f"Created node '{name}' ({len(self.nodes)} total)")
        return node

    def get_node(self, name: str) -> Optional[Node]:
        return self.nodes.get(name)

    def contains_node(self, name: str) -> bool:
        return name in self.nodes

    def get_all_nodes(self) -> List[Node]:
        """Snapshot of every registered node; order unspecified."""
        return list(self.nodes.values())

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_undirected_edge(
        self,
        a: str,
        b: str,
        weight: Optional[int] = None,
    ) -> Tuple[Node, Node]:
        """
        Get-or-create both endpoints and connect them.  Last write wins.
        Without a `weight`, config.DEFAULT_EDGE_WEIGHT is read at call time.
        """
        if weight is None:
            weight = config.DEFAULT_EDGE_WEIGHT
        node_a = self.get_or_create_node(a)
        node_b = self.get_or_create_node(b)
        node_a.add_undirected_edge_to_node(node_b, weight)
        return node_a, node_b

    def edges(self) -> List[Edge]:
        """
        Every undirected edge exactly once, oriented in registration order.

        An edge to a linked node that is not registered in this graph is
        still listed, once, oriented from the registered endpoint.  Edges
        between two unregistered nodes are not reachable from here and are
        left out.
        """
        order = {node: i for i, node in enumerate(self.nodes.values())}
        result = []
        for node in self.nodes.values():
            for nbr, weight in node.adj.items():
                rank = order.get(nbr)
                if rank is None or rank >= order[node]:
                    result.append(Edge(weight, node, nbr))
        return result

    # ==================================================================
    # TRAVERSALS
    # ==================================================================
    def breadth_first_search(self, start_name: str, visitor) -> None:
        """
        Visit every node reachable from `start_name` exactly once, in
        non-decreasing hop distance.  The start node is visited first and
        is created if it does not exist yet.

        `visitor` is a NodeVisitor, anything with `visit(node)`, or a
        plain callable.
        """
        self._drive(bfs(self, start_name, detail=False), as_visitor(visitor), "BFS")

    def depth_first_search(self, start_name: str, visitor) -> None:
        """
        Pre-order DFS with an explicit stack.  All neighbours are pushed
        and the visited check happens at pop time, so each node is visited
        once even if it was pushed many times.
        """
        self._drive(dfs(self, start_name, detail=False), as_visitor(visitor), "DFS")

    def _drive(self, steps, visitor, label: str) -> None:
        # Hand over the Node objects the walk reached; a name may not resolve
        # to the same object, or to anything, in self.nodes.
        count = 0
        for step in steps:
            if step.discovered is not None:
                visitor.visit(step.discovered_node)
                count += 1
        logger.debug(f"{label} visited {count} node(s)")

    # ==================================================================
    # SHORTEST PATHS
    # ==================================================================
    def dijkstra(self, start_name: str) -> Dict[Node, int]:
        """
        Minimum total edge weight from `start_name` to every reachable
        node.  Unreachable nodes are absent; the start maps to 0.
        Requires non-negative weights.
        """
        final_step = _last(_dijkstra(self, start_name, detail=False))
        costs = dict(final_step.node_costs)
        logger.debug(f"Dijkstra from '{start_name}' reached {len(costs)} node(s)")
        return costs

    # ==================================================================
    # SPANNING TREE
    # ==================================================================
    def prim_jarnik(self) -> "Graph":
        """
        Build a new Graph holding a minimum spanning tree of the component
        that contains an arbitrary start node.

        Raises:
            EmptyGraphError – the graph has no nodes.
        """
        if not self.nodes:
            raise EmptyGraphError("Prim-Jarnik")

        final_step = _last(_prim_jarnik(self, detail=False))

        tree = Graph()
        tree.get_or_create_node(final_step.visited[0])
        for origin, destination, weight in final_step.tree_edges:
            tree.add_undirected_edge(origin, destination, weight)

        if tree.node_count() < self.node_count():
            logger.warning(
                f"Graph is disconnected: spanning tree covers {tree.node_count()} "
                f"of {self.node_count()} node(s)"
            )
        logger.debug(
            f"Prim-Jarnik tree: {tree.node_count()} node(s), "
            f"{tree.edge_count()} edge(s), total weight {tree.total_weight()}"
        )
        return tree

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges())

    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges())

    def __contains__(self, name) -> bool:
        return name in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _last(steps):
    step = None
    for step in steps:
        pass
    return step
