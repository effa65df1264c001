"""
counters.py — Instrumentation Counters
=======================================
Running totals every algorithm step feeds:

    comparisons  – one per element-vs-element (or element-vs-pivot) test
    swaps        – one per exchange, plus one per "movement" (see below)
    accesses     – array reads / writes
    elapsed_ms   – stamped by the controller when the run ends

A movement is how insertion sort's shifts and merge sort's right-buffer
writes are tallied: it bumps `swaps` so the stats panel shows data moving,
even though no two elements trade places.

Every mutation calls `on_change` with a fresh StatsSnapshot, which is how
the stats panel stays live.
"""

from typing import Callable, Optional

from algorithms.step import StatsSnapshot


class Counters:

    def __init__(self, on_change: Optional[Callable[[StatsSnapshot], None]] = None):
        self.on_change = on_change
        self.comparisons: int   = 0
        self.swaps:       int   = 0
        self.accesses:    int   = 0
        self.elapsed_ms:  float = 0.0

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps       = 0
        self.accesses    = 0
        self.elapsed_ms  = 0.0
        self._notify()

    def record_compare(self) -> None:
        self.comparisons += 1
        self._notify()

    def record_swap(self) -> None:
        # a swap touches two elements
        self.swaps    += 1
        self.accesses += 2
        self._notify()

    def record_access(self, n: int = 1) -> None:
        self.accesses += n
        self._notify()

    def record_movement(self, accesses: int = 0) -> None:
        self.swaps    += 1
        self.accesses += accesses
        self._notify()

    def set_elapsed(self, elapsed_ms: float) -> None:
        self.elapsed_ms = elapsed_ms
        self._notify()

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            comparisons=self.comparisons,
            swaps=self.swaps,
            accesses=self.accesses,
            elapsed_ms=self.elapsed_ms,
        )

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
