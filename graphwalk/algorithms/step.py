"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of one event in a run:

    • Which node was just discovered / finalised
    • The visitation order so far
    • The current frontier (queue, stack or heap contents)
    • Finalised distances (Dijkstra) or tree edges (Prim–Jarnik)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - The display fields are keyed by node NAMES so a recorded run can be
    exported without dragging the graph along.  Names are not identity,
    so the Node objects the algorithm actually walked travel alongside
    in `discovered_node` and `node_costs`; Graph methods read those and
    never re-resolve a name.
  - Snapshots are immutable: sequences are tuples and mappings are
    read-only proxies over private copies.
  - The generator is the only writer; Graph methods and the Recorder are
    pure readers.
  - Full collection snapshots cost O(V) per step.  Generators take a
    `detail` flag; with detail=False only the per-event fields and the
    final step carry data, which keeps Graph.* calls linear-ish.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple


TreeEdge = Tuple[str, str, int]     # (origin, destination, weight)

_EMPTY: Mapping = MappingProxyType({})


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current_node    : Name of the node being expanded right now.
        discovered      : Name of the node visited / finalised by THIS step, else None.
        discovered_node : The Node object behind `discovered`.
        visited         : Names in visitation (or finalisation) order so far.
        frontier        : Snapshot of the queue / stack / heap.  Heap entries
                          render as "name:cost".
        distances       : {name: cost} finalised so far (Dijkstra).
        node_costs      : {Node: cost} finalised so far (Dijkstra).
        tree_edges      : Edges accepted into the spanning tree so far (Prim–Jarnik).
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text.
        metrics         : Running tally: nodes_visited, edges_examined, frontier_size.
        is_final        : True on the very last step.
    """

    step_number:      int                  = 0
    current_node:     Optional[str]        = None
    discovered:       Optional[str]        = None
    discovered_node:  Any                  = field(default=None, repr=False, compare=False)
    visited:          Tuple[str, ...]      = ()
    frontier:         Tuple[str, ...]      = ()
    distances:        Mapping[str, int]    = field(default_factory=lambda: _EMPTY)
    node_costs:       Mapping[Any, int]    = field(default_factory=lambda: _EMPTY, repr=False, compare=False)
    tree_edges:       Tuple[TreeEdge, ...] = ()
    pseudocode_line:  int                  = 0
    explanation:      str                  = ""
    metrics:          Mapping[str, Any]    = field(default_factory=lambda: _EMPTY)
    is_final:         bool                 = False


def _frozen(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that algorithms use to construct Steps cleanly.

    Usage inside an algorithm generator:
        sb = StepBuilder(detail=True)
        sb.visit(node)
        sb.set_frontier(queue, label=lambda n: n.name)
        sb.explanation = "Node A was dequeued first."
        yield sb.build()

    The builder owns the running visitation order and the step counter,
    so each algorithm keeps exactly one builder for the whole run.
    """

    def __init__(self, detail: bool = True):
        self.detail = detail
        self.step_number = 0
        self.visited:     List[str]       = []
        self.distances:   Dict[str, int]  = {}
        self.node_costs:  Dict[Any, int]  = {}
        self.tree_edges:  List[TreeEdge]  = []
        self.metrics:     Dict[str, Any]  = {"nodes_visited": 0, "edges_examined": 0, "frontier_size": 0}
        self._clear_event()

    def _clear_event(self):
        self.current_node:    Optional[str] = None
        self.discovered:      Optional[str] = None
        self.discovered_node: Any           = None
        self.frontier:        List[str]     = []
        self.pseudocode_line: int           = 0
        self.explanation:     str           = ""

    # -- helpers --
    def set_current(self, name: str):
        self.current_node = name

    def visit(self, node):
        self.discovered      = node.name
        self.discovered_node = node
        self.visited.append(node.name)
        self.metrics["nodes_visited"] = len(self.visited)

    def finalise(self, node, cost: int):
        self.visit(node)
        self.distances[node.name] = cost
        self.node_costs[node]     = cost

    def accept_edge(self, origin: str, destination: str, weight: int):
        self.tree_edges.append((origin, destination, weight))

    def examine_edge(self):
        self.metrics["edges_examined"] += 1

    def set_frontier(self, entries, label: Callable[[Any], str] = str):
        size = len(entries)
        self.metrics["frontier_size"] = size
        self.metrics["peak_frontier"] = max(self.metrics.get("peak_frontier", 0), size)
        if self.detail:
            self.frontier = [label(e) for e in entries]

    def build(self, is_final: bool = False) -> Step:
        full = self.detail or is_final
        step = Step(
            step_number=self.step_number,
            current_node=self.current_node,
            discovered=self.discovered,
            discovered_node=self.discovered_node,
            visited=tuple(self.visited) if full else (),
            frontier=tuple(self.frontier),
            distances=_frozen(self.distances) if full else _EMPTY,
            node_costs=_frozen(self.node_costs) if full else _EMPTY,
            tree_edges=tuple(self.tree_edges) if full else (),
            pseudocode_line=self.pseudocode_line,
            explanation=self.explanation,
            metrics=_frozen(self.metrics),
            is_final=is_final,
        )
        self.step_number += 1
        self._clear_event()
        return step
