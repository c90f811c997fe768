"""
engine/
-------
Recording layer.

    from graphwalk.engine import Recorder, compare
"""

from graphwalk.engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
