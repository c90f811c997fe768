"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps, full detail), then computes
summary metrics for it.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", graph=g, source="A")
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()
    rec.export()                     # plain-dict snapshot

Comparison:
    Run two Recorders on the SAME graph, then compare(rec1, rec2).
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Generator, List, Optional

from graphwalk import config
from graphwalk.algorithms import AlgoInfo, get_algorithm
from graphwalk.algorithms.step import Step
from graphwalk.graph.graph import Graph

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    source:          str   = ""
    nodes_visited:   int   = 0
    edges_examined:  int   = 0
    total_steps:     int   = 0          # number of Steps yielded
    peak_frontier:   int   = 0          # largest queue / stack / heap seen
    result_cost:     int   = 0          # sum of distances (Dijkstra) or tree weight (Prim–Jarnik)
    wall_time_ms:    float = 0.0


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes:    str = ""   # which run visited fewer nodes
    winner_edges:    str = ""
    winner_frontier: str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps     : Full list of Steps from the run.
        metrics   : Computed RunMetrics (available after run_to_completion).
        max_steps : Abort the run once this many steps were buffered.
    """

    def __init__(self, max_steps: int = config.MAX_RECORDED_STEPS):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.max_steps: int                  = max_steps

        self._algo_info:  Optional[AlgoInfo] = None
        self._source:     Optional[str]      = None
        self._generator:  Optional[Generator[Step, None, None]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, graph: Graph, source: Optional[str] = None) -> None:
        """Initialise the generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        if info.needs_source and source is None:
            raise ValueError(f"{info.label} needs a source node")

        self._algo_info = info
        self._source    = source
        self.steps      = []
        self.metrics    = None

        self._generator = info.fn(graph, source, detail=True)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        # One start() allows exactly one run, even if that run fails.
        started = time.monotonic()
        generator, self._generator = self._generator, None
        try:
            for step in generator:
                if len(self.steps) >= self.max_steps:
                    raise RuntimeError(
                        f"{self._algo_info.label} exceeded {self.max_steps} recorded steps"
                    )
                self.steps.append(step)
        finally:
            generator.close()

        wall_ms = (time.monotonic() - started) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            f"Recorded {self.metrics.algo_key}: {self.metrics.total_steps} steps "
            f"in {self.metrics.wall_time_ms} ms"
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps and self.steps[-1].is_final else None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "source":   self._source,
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps": [
                {
                    "step_number":     s.step_number,
                    "current_node":    s.current_node,
                    "discovered":      s.discovered,
                    "visited":         list(s.visited),
                    "frontier":        list(s.frontier),
                    "distances":       dict(s.distances),
                    "tree_edges":      [list(e) for e in s.tree_edges],
                    "pseudocode_line": s.pseudocode_line,
                    "explanation":     s.explanation,
                    "is_final":        s.is_final,
                }
                for s in self.steps
            ],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        if last is None:
            result_cost = 0
        elif last.tree_edges:
            result_cost = sum(w for _, _, w in last.tree_edges)
        else:
            result_cost = sum(last.distances.values())

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            source=self._source if self._source is not None else (last.visited[0] if last and last.visited else ""),
            nodes_visited=len(last.visited) if last else 0,
            edges_examined=last.metrics.get("edges_examined", 0) if last else 0,
            total_steps=len(self.steps),
            peak_frontier=last.metrics.get("peak_frontier", 0) if last else 0,
            result_cost=result_cost,
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited, l.algo_label, r.algo_label),
        winner_edges=winner(l.edges_examined, r.edges_examined, l.algo_label, r.algo_label),
        winner_frontier=winner(l.peak_frontier, r.peak_frontier, l.algo_label, r.algo_label),
    )
