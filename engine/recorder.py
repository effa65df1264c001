"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete sorting run (all Frames, no delays), then computes
the metrics the performance chart and Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start(algorithm="merge", values=[5, 3, 8, 1])
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algorithm), runs both to
    completion on the SAME array, then calls compare(rec1, rec2).
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from algorithms import AlgoInfo, Algorithm, get_algorithm
from algorithms.step import Frame
from engine.context import RunContext
from engine.stepper import Stepper


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    size:          int   = 0
    comparisons:   int   = 0
    swaps:         int   = 0
    accesses:      int   = 0
    total_steps:   int   = 0          # frames produced, excluding the initial one
    wall_time_ms:  float = 0.0        # wall-clock time to run to completion
    sorted_ok:     bool  = False      # final array is non-decreasing


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algorithm compared less
    winner_swaps:       str = ""
    winner_accesses:    str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames   : Full list of Frames from the run.
        metrics  : Computed RunMetrics (available after run_to_completion).
        stepper  : The underlying Stepper (if you want step-by-step access).
    """

    def __init__(self):
        self.frames:   List[Frame]          = []
        self.metrics:  Optional[RunMetrics] = None
        self.stepper:  Optional[Stepper]    = None

        self._algo_info:  Optional[AlgoInfo]   = None
        self._ctx:        Optional[RunContext] = None
        self._initial:    List[float]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algorithm: Union[Algorithm, str], values: Iterable[float]) -> None:
        """Initialise a run on a private copy of `values`."""
        self._algo_info = get_algorithm(algorithm)
        self._initial   = list(values)
        self._ctx       = RunContext(self._initial)
        self.frames     = []
        self.metrics    = None

        self.stepper = Stepper()
        self.stepper.start(self._ctx, self._algo_info.algorithm)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every frame, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.perf_counter()
        self.stepper.jump_to_end()
        wall_ms = (time.perf_counter() - started) * 1000

        self.frames = list(self.stepper.frames)
        self._ctx.counters.set_elapsed(wall_ms)
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "initial":  list(self._initial),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "frames":   [f.to_dict() for f in self.frames],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        stats = self._ctx.counters.snapshot()
        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            size=len(self._ctx.array),
            comparisons=stats.comparisons,
            swaps=stats.swaps,
            accesses=stats.accesses,
            total_steps=max(0, len(self.frames) - 1),
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=self._ctx.array.is_sorted(),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
        winner_accesses=winner(l.accesses, r.accesses),
    )
