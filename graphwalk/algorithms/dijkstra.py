"""
dijkstra.py — Dijkstra's Shortest-Path Costs
==============================================
Generator-based Dijkstra using a lazy-deletion min-heap (heapq).

The heap holds PathCandidate(cost, node) entries.  Nothing is ever
decreased in place: every relaxation pushes a new candidate, and a
candidate whose node is already finalised is discarded when popped.
That stale-entry skip replaces a separate "is it in the frontier?" check.
Finalised nodes are tracked by identity, never by name.

Yields a Step at:
  1. Seed the heap with (start, 0)          (detail runs only)
  2. Pop a stale candidate  →  skip         (detail runs only)
  3. Pop a fresh candidate  →  distance is FINAL
  4. Heap empty  →  final step with every finalised distance

Correctness note: Dijkstra requires non-negative weights.  Negative
weights are not rejected; the resulting costs are simply not guaranteed
to be minimal.  Unreachable nodes never appear in `distances`.
"""

import heapq
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Generator, List

from graphwalk.algorithms.step import Step, StepBuilder

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph
    from graphwalk.graph.node import Node


# ---------------------------------------------------------------------------
# Frontier entry
# ---------------------------------------------------------------------------
@dataclass(order=True, frozen=True)
class PathCandidate:
    """Tentative cumulative `cost` of reaching `node`. Ordered by cost only."""

    cost: int
    node: "Node" = field(compare=False)

    @property
    def name(self) -> str:
        return self.node.name

    def __str__(self) -> str:
        return f"{self.node.name}:{self.cost}"


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start):",                       # 0
    "    final ← {}",                                    # 1
    "    pq ← [(0, start)]",                             # 2
    "    while pq is not empty:",                        # 3
    "        (d, node) ← pq.pop_min()",                  # 4
    "        if node in final: continue",                # 5
    "        final[node] ← d",                           # 6
    "        for (neighbour, w) in adj(node):",          # 7
    "            if neighbour not in final:",            # 8
    "                pq.push((d + w, neighbour))",       # 9
    "    return final",                                  # 10
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(
    graph: "Graph",
    source: str,
    detail: bool = True,
) -> Generator[Step, None, None]:

    start = graph.get_or_create_node(source)
    sb    = StepBuilder(detail=detail)

    final: Dict["Node", int]    = {}
    pq:    List[PathCandidate]  = [PathCandidate(0, start)]

    if detail:
        sb.set_current(start.name)
        sb.set_frontier(pq)
        sb.pseudocode_line = 2
        sb.explanation = f"Seed the priority queue with '{start.name}' at cost 0."
        yield sb.build()

    # --- main loop ---
    while pq:
        candidate = heapq.heappop(pq)

        # stale entry
        if candidate.node in final:
            if detail:
                sb.set_frontier(pq)
                sb.pseudocode_line = 5
                sb.explanation = (
                    f"Pop {candidate}: stale, '{candidate.name}' already "
                    f"finalised at {final[candidate.node]}. Skip."
                )
                yield sb.build()
            continue

        cost = candidate.cost
        node = candidate.node
        final[node] = cost

        for nbr, weight in node.adj.items():
            sb.examine_edge()
            if nbr in final:
                continue
            heapq.heappush(pq, PathCandidate(cost + weight, nbr))

        sb.set_current(node.name)
        sb.finalise(node, cost)
        sb.set_frontier(pq)
        sb.pseudocode_line = 6
        sb.explanation = (
            f"Pop '{node.name}' with cost {cost}, the smallest in the queue. "
            f"This cost is now FINAL."
        )
        yield sb.build()

    sb.pseudocode_line = 10
    sb.explanation = (
        f"Priority queue empty. Costs finalised for {len(final)} node(s)."
    )
    yield sb.build(is_final=True)
