"""
step.py — Highlight Descriptors & Frame Snapshot
=================================================
Every sorting algorithm is a generator that yields a Highlight each time
it wants the bars redrawn.  A Highlight says which indices to colour and
why:

    • Comparing(indices)          – bars being compared (amber)
    • Swapping(first, second)     – bars just exchanged (red)
    • SortedFrom(index)           – suffix [index, n) is in final position
    • SortedUpTo(index)           – prefix [0, index] is in final position
    • CustomColors({i: "#hex"})   – explicit per-bar colours

A Frame is what the driver hands the renderer: the Highlight plus a
frozen copy of the array and the counters at that instant.

Design decisions:
  - All variants are frozen dataclasses.  The renderer dispatches on the
    class, so adding a variant means teaching `ui.canvas` about it.
  - Swapping may also carry the sorted region that the same step closes
    (selection puts a minimum in place, heap sort retires the root).
  - A Frame is a SNAPSHOT.  The generator is the only writer of the array;
    drivers and renderers are pure readers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Comparing:
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class Swapping:
    first:       int
    second:      int
    sorted_from: Optional[int] = None
    sorted_upto: Optional[int] = None


@dataclass(frozen=True)
class SortedFrom:
    index: int


@dataclass(frozen=True)
class SortedUpTo:
    index: int


@dataclass(frozen=True)
class CustomColors:
    colors: Mapping[int, str] = field(default_factory=dict)


Highlight = Union[Comparing, Swapping, SortedFrom, SortedUpTo, CustomColors]


# ---------------------------------------------------------------------------
# Counter snapshot carried by every frame
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StatsSnapshot:
    comparisons: int   = 0
    swaps:       int   = 0
    accesses:    int   = 0
    elapsed_ms:  float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "accesses":    self.accesses,
            "elapsed_ms":  round(self.elapsed_ms, 2),
        }


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        step_number : 0-based index of this frame within the run.
        values      : The array as it looked when the highlight was emitted.
        highlight   : What to colour, or None for a plain redraw.
        stats       : Counters at the same instant.
        is_final    : True on the frame that closes a completed run.
    """

    step_number: int                 = 0
    values:      Tuple[float, ...]   = ()
    highlight:   Optional[Highlight] = None
    stats:       StatsSnapshot       = field(default_factory=StatsSnapshot)
    is_final:    bool                = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number": self.step_number,
            "values":      list(self.values),
            "highlight":   highlight_to_dict(self.highlight),
            "stats":       self.stats.to_dict(),
            "is_final":    self.is_final,
        }


# ---------------------------------------------------------------------------
# Wire form
# ---------------------------------------------------------------------------
def highlight_to_dict(highlight: Optional[Highlight]) -> Optional[Dict[str, Any]]:
    """JSON-ready form of a highlight, tagged by `kind`."""
    if highlight is None:
        return None
    if isinstance(highlight, Comparing):
        return {"kind": "comparing", "indices": list(highlight.indices)}
    if isinstance(highlight, Swapping):
        return {
            "kind":        "swapping",
            "indices":     [highlight.first, highlight.second],
            "sorted_from": highlight.sorted_from,
            "sorted_upto": highlight.sorted_upto,
        }
    if isinstance(highlight, SortedFrom):
        return {"kind": "sorted_from", "index": highlight.index}
    if isinstance(highlight, SortedUpTo):
        return {"kind": "sorted_upto", "index": highlight.index}
    if isinstance(highlight, CustomColors):
        return {"kind": "custom_colors", "colors": {str(k): v for k, v in highlight.colors.items()}}
    raise TypeError(f"Not a highlight: {highlight!r}")
