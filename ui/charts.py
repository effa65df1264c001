"""
charts.py — Chart Data
=======================
Data series for the two charts on the page.  Drawing is left to Chart.js
in the browser; these functions only produce the numbers and labels.

  • complexity_curves  – theoretical growth of each algorithm for n = 10..100
  • performance_bars   – comparisons / swaps / time of the last run
"""

import math
from typing import Any, Dict, Iterable, List, Optional

from algorithms.step import StatsSnapshot


# n log n rounded to whole operations first; quick and heap scale that
def _n_log_n(n: int) -> int:
    return round(n * math.log2(max(2, n)))


# dataset label, growth function, line colour
_CURVES = [
    ("O(n²) - Bubble / Selection / Insertion", lambda n: n * n,                       "#ef4444"),
    ("O(n log n) - Merge",                     _n_log_n,                                "#06b6d4"),
    ("O(n log n) - Quick",                     lambda n: round(_n_log_n(n) * 0.9),      "#3b82f6"),
    ("O(n log n) - Heap",                      lambda n: round(_n_log_n(n) * 1.05),     "#8b5cf6"),
]


def complexity_curves(sizes: Optional[Iterable[int]] = None) -> Dict[str, Any]:
    """Labels + one dataset per curve, ready for a Chart.js line chart."""
    labels: List[int] = list(sizes) if sizes is not None else list(range(10, 101))
    return {
        "labels": labels,
        "datasets": [
            {"label": label, "data": [fn(n) for n in labels], "borderColor": color}
            for label, fn, color in _CURVES
        ],
    }


def performance_bars(stats: Optional[StatsSnapshot] = None) -> Dict[str, Any]:
    """Bar-chart data for the last run; zeros before any run has finished."""
    stats = stats or StatsSnapshot()
    return {
        "labels": ["Comparisons", "Swaps", "Time (ms)"],
        "data": [stats.comparisons, stats.swaps, round(stats.elapsed_ms, 2)],
        "colors": ["#16a34a", "#ef4444", "#f59e0b"],
    }
