"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Policy: every neighbour is pushed, visited or not, and the visited check
happens at pop time.  A node can therefore sit on the stack several
times at once, but it is visited only on its first pop.  This is a
pre-order traversal whose order differs from recursive DFS; callers may
rely on that order, so it must not be "tidied" into a filtered push.

Yields a Step at:
  1. Push start onto stack                (detail runs only)
  2. Pop an unvisited node  →  visited
  3. Pop an already visited node  →  skip (detail runs only)
  4. Stack empty  →  final step
"""

from typing import TYPE_CHECKING, Generator, List

from graphwalk.algorithms.step import Step, StepBuilder

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start, visitor):",          # 0
    "    stack ← [start]",                      # 1
    "    visited ← {}",                         # 2
    "    while stack is not empty:",            # 3
    "        node ← stack.pop()",               # 4
    "        if node in visited: continue",     # 5
    "        visit(node); visited.add(node)",   # 6
    "        for neighbour in adj(node):",      # 7
    "            stack.push(neighbour)",        # 8
]


def _name(node) -> str:
    return node.name


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    graph: "Graph",
    source: str,
    detail: bool = True,
) -> Generator[Step, None, None]:

    start = graph.get_or_create_node(source)
    sb    = StepBuilder(detail=detail)

    stack   = [start]
    visited = set()

    if detail:
        sb.set_current(start.name)
        sb.set_frontier(stack, label=_name)
        sb.pseudocode_line = 1
        sb.explanation = (
            f"Initialise: push '{start.name}' onto the stack. "
            f"DFS dives as deep as possible before backtracking."
        )
        yield sb.build()

    # --- main loop ---
    while stack:
        node = stack.pop()

        # already visited (can happen because neighbours are pushed unconditionally)
        if node in visited:
            if detail:
                sb.set_frontier(stack, label=_name)
                sb.pseudocode_line = 5
                sb.explanation = f"Pop '{node.name}': already visited, skip."
                yield sb.build()
            continue

        visited.add(node)
        sb.set_current(node.name)
        sb.visit(node)
        sb.set_frontier(stack, label=_name)
        sb.pseudocode_line = 6
        sb.explanation = (
            f"Pop '{node.name}' and visit it, then push all "
            f"{node.degree()} of its neighbour(s)."
        )
        yield sb.build()

        for nbr in node.get_neighbors():
            sb.examine_edge()
            stack.append(nbr)

    sb.pseudocode_line = 3
    sb.explanation = (
        f"Stack empty. {len(sb.visited)} node(s) reachable from '{start.name}'."
    )
    yield sb.build(is_final=True)
