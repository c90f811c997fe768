"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the library knows about.

    from graphwalk.algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, tags, …),
        …
    }

Every `fn` is a step generator with the signature
`fn(graph, source, detail=True)`.  Graph methods and the Recorder both
drive these generators; adding an algorithm means writing the generator
and adding one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from graphwalk.algorithms.bfs         import bfs         as _bfs,         PSEUDOCODE as _bfs_pc
from graphwalk.algorithms.dfs         import dfs         as _dfs,         PSEUDOCODE as _dfs_pc
from graphwalk.algorithms.dijkstra    import dijkstra    as _dijkstra,    PSEUDOCODE as _dij_pc
from graphwalk.algorithms.prim_jarnik import prim_jarnik as _prim,        PSEUDOCODE as _prim_pc
from graphwalk.algorithms.step        import Step, StepBuilder


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # one entry per pseudocode line
    tags:              List[str] = field(default_factory=list)
    needs_source:      bool     = True        # False → source is optional (Prim–Jarnik)
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Visits nodes in order of hop count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(E)",
        description="Dives deep before backtracking. Pushes every neighbour, visits on first pop.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O(E log E)", complexity_space="O(E)",
        description="Finalises the cheapest frontier node first. Needs non-negative weights.",
    ),

    "prim_jarnik": AlgoInfo(
        key="prim_jarnik", label="Prim–Jarnik MST", fn=_prim, pseudocode=_prim_pc,
        tags=["weighted", "spanning-tree"],
        needs_source=False,
        complexity_time="O(E log E)", complexity_space="O(E)",
        description="Grows one tree by always taking the lightest edge leaving it.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Step",
    "StepBuilder",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
