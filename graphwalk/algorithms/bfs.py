"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Start node discovered  →  visited immediately, enqueued
  2. Dequeue a node  →  CURRENT          (detail runs only)
  3. Unseen neighbour  →  visited + enqueued
  4. Final step  →  full visitation order

A node is marked visited the moment it is enqueued, so it is discovered
exactly once and nodes come out in non-decreasing hop distance.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator.
"""

from collections import deque
from typing import TYPE_CHECKING, Generator, List

from graphwalk.algorithms.step import Step, StepBuilder

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start, visitor):",             # 0
    "    visited ← {start}; visit(start)",         # 1
    "    queue ← [start]",                         # 2
    "    while queue is not empty:",               # 3
    "        node ← queue.dequeue()",              # 4
    "        for neighbour in adj(node):",         # 5
    "            if neighbour not visited:",       # 6
    "                visited.add(neighbour)",      # 7
    "                visit(neighbour)",            # 8
    "                queue.enqueue(neighbour)",    # 9
]


def _name(node) -> str:
    return node.name


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    graph: "Graph",
    source: str,
    detail: bool = True,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every discovery during BFS execution.

    Args:
        graph  : The graph to search.  An unknown `source` is created.
        source : Starting node name.
        detail : Include frontier / visited snapshots on every step.

    Yields:
        Step – `discovered` is set on exactly one step per reachable node.
    """
    start = graph.get_or_create_node(source)
    sb    = StepBuilder(detail=detail)

    visited = {start}
    queue   = deque([start])

    # --- initialisation step ---
    sb.set_current(start.name)
    sb.visit(start)
    sb.set_frontier(queue, label=_name)
    sb.pseudocode_line = 1
    sb.explanation = (
        f"Start at '{start.name}': visit it, mark it visited and enqueue it. "
        f"BFS explores layer by layer from here."
    )
    yield sb.build()

    # --- main loop ---
    while queue:
        node = queue.popleft()

        if detail:
            sb.set_current(node.name)
            sb.set_frontier(queue, label=_name)
            sb.pseudocode_line = 4
            sb.explanation = (
                f"Dequeue '{node.name}'. BFS always expands the node that was "
                f"discovered earliest (FIFO)."
            )
            yield sb.build()

        for nbr in node.get_neighbors():
            sb.examine_edge()
            if nbr in visited:
                continue

            visited.add(nbr)
            queue.append(nbr)

            sb.set_current(node.name)
            sb.visit(nbr)
            sb.set_frontier(queue, label=_name)
            sb.pseudocode_line = 8
            sb.explanation = (
                f"Edge {node.name}→{nbr.name}: '{nbr.name}' is NEW. "
                f"Visit it and enqueue it behind the current layer."
            )
            yield sb.build()

    # --- exhausted ---
    sb.pseudocode_line = 3
    sb.explanation = (
        f"Queue is empty. {len(sb.visited)} node(s) reachable from '{start.name}'."
    )
    yield sb.build(is_final=True)
