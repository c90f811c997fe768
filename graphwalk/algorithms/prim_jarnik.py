"""
prim_jarnik.py — Prim–Jarnik Minimum Spanning Tree
====================================================
Generator-based Prim–Jarnik over a lazy-deletion heap of Edge objects.

Grows a single tree from an arbitrary start node (the first node the
graph registered).  Each round pops the cheapest frontier edge; if its
destination is already in the tree the edge is discarded, otherwise it
joins the tree and the new node's outgoing edges to non-tree nodes are
pushed.  By the cut property every accepted edge is the lightest one
crossing the tree boundary at that moment.

The algorithm never restarts, so on a disconnected graph the result
spans only the start node's component.

Yields a Step at:
  1. Start node joins the tree, its edges seed the heap
  2. Pop an edge into the tree  →  accepted, destination discovered
  3. Pop an edge whose destination is in the tree  →  skip (detail runs only)
  4. Heap empty  →  final step carrying every tree edge
"""

import heapq
from typing import TYPE_CHECKING, Generator, List, Optional, Set

from graphwalk.algorithms.step import Step, StepBuilder
from graphwalk.graph.edge import Edge
from graphwalk.graph.errors import EmptyGraphError

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph
    from graphwalk.graph.node import Node


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def PrimJarnik(graph):",                                # 0
    "    start ← any node; tree ← {start}",                  # 1
    "    pq ← [edges out of start]",                         # 2
    "    while pq is not empty:",                            # 3
    "        (u, v, w) ← pq.pop_min()",                      # 4
    "        if v in tree: continue",                        # 5
    "        tree.add(v); mst.add_edge(u, v, w)",            # 6
    "        for (x, w') in adj(v):",                        # 7
    "            if x not in tree: pq.push((v, x, w'))",     # 8
    "    return mst",                                        # 9
]


def _edge_label(edge: Edge) -> str:
    return f"{edge.origin.name}-{edge.destination.name}:{edge.weight}"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def prim_jarnik(
    graph: "Graph",
    source: Optional[str] = None,
    detail: bool = True,
) -> Generator[Step, None, None]:
    """
    Args:
        graph  : Graph to span.  Must hold at least one node.
        source : Optional start node name; defaults to the first registered
                 node.  An unknown name is created, like every other algorithm.
        detail : Include frontier / visited snapshots on every step.

    Raises:
        EmptyGraphError – graph has no nodes and no source was given.
    """
    if source is not None:
        start = graph.get_or_create_node(source)
    elif graph.nodes:
        start = next(iter(graph.nodes.values()))
    else:
        raise EmptyGraphError("Prim-Jarnik")

    sb = StepBuilder(detail=detail)

    in_tree: Set["Node"] = {start}
    pq: List[Edge]    = [Edge(w, start, nbr) for nbr, w in start.adj.items() if nbr is not start]
    heapq.heapify(pq)

    sb.set_current(start.name)
    sb.visit(start)
    sb.set_frontier(pq, label=_edge_label)
    sb.pseudocode_line = 2
    sb.explanation = (
        f"Start the tree at '{start.name}' and push its {len(pq)} edge(s) "
        f"onto the priority queue."
    )
    yield sb.build()

    # --- main loop ---
    while pq:
        edge = heapq.heappop(pq)
        sb.examine_edge()
        dest = edge.destination

        if dest in in_tree:
            if detail:
                sb.set_frontier(pq, label=_edge_label)
                sb.pseudocode_line = 5
                sb.explanation = (
                    f"Pop {_edge_label(edge)}: '{dest.name}' is already in the "
                    f"tree. Skip."
                )
                yield sb.build()
            continue

        in_tree.add(dest)
        for nbr, w in dest.adj.items():
            if nbr not in in_tree:
                heapq.heappush(pq, Edge(w, dest, nbr))

        sb.set_current(edge.origin.name)
        sb.visit(dest)
        sb.accept_edge(edge.origin.name, dest.name, edge.weight)
        sb.set_frontier(pq, label=_edge_label)
        sb.pseudocode_line = 6
        sb.explanation = (
            f"Pop {_edge_label(edge)}: the lightest edge leaving the tree. "
            f"Add '{dest.name}' to the tree."
        )
        yield sb.build()

    total = sum(w for _, _, w in sb.tree_edges)
    sb.pseudocode_line = 9
    sb.explanation = (
        f"Priority queue empty. Tree spans {len(in_tree)} node(s) with "
        f"{len(sb.tree_edges)} edge(s), total weight {total}."
    )
    yield sb.build(is_final=True)
