"""
merge.py — Merge Sort
======================
Top-down merge sort over a[l..r] (inclusive bounds).

Each merge copies both halves into scratch buffers and writes the
winners back one at a time.  Ties take the left element (`<=`), which
keeps equal values in their original order.

Accounting:
  - copying the halves       → len(left) + len(right) accesses
  - each front-vs-front test → 1 comparison
  - each write-back          → 1 access
  - a write from the right   → additionally a movement (1 swap)

If the run is cancelled in the middle of a merge, whatever is still in
the buffers is written back without further steps, so the array keeps
every original element.
"""

from typing import TYPE_CHECKING, Iterator, List

from algorithms.step import Comparing, Highlight

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",                   # 0
    "    if l ≥ r: return",                       # 1
    "    m ← ⌊(l + r) / 2⌋",                      # 2
    "    merge_sort(a, l, m)",                    # 3
    "    merge_sort(a, m+1, r)",                  # 4
    "    L ← a[l..m];  R ← a[m+1..r]",            # 5
    "    while L and R:",                         # 6
    "        a[k++] ← L[0] ≤ R[0] ? L.pop() : R.pop()",  # 7
    "    drain L, then R, into a[k..r]",          # 8
]


def merge_sort(ctx: "RunContext") -> Iterator[Highlight]:
    yield from _merge_sort(ctx, 0, len(ctx.array) - 1)


def _merge_sort(ctx: "RunContext", l: int, r: int) -> Iterator[Highlight]:
    if l >= r:
        return
    m = (l + r) // 2

    yield from _merge_sort(ctx, l, m)
    if ctx.stop_requested:
        return
    yield from _merge_sort(ctx, m + 1, r)
    if ctx.stop_requested:
        return
    yield from _merge(ctx, l, m, r)


def _merge(ctx: "RunContext", l: int, m: int, r: int) -> Iterator[Highlight]:
    a = ctx.array
    stats = ctx.counters

    left = a[l:m + 1]
    right = a[m + 1:r + 1]
    stats.record_access(len(left) + len(right))

    i = j = 0
    k = l
    try:
        while i < len(left) and j < len(right):
            stats.record_compare()
            yield Comparing((k,))

            if left[i] <= right[j]:
                a[k] = left[i]
                i += 1
                stats.record_access()
            else:
                a[k] = right[j]
                j += 1
                stats.record_access()
                stats.record_movement()
            k += 1
            yield Comparing((k - 1,))

        while i < len(left):
            a[k] = left[i]
            i += 1
            k += 1
            stats.record_access()
            yield Comparing((k - 1,))

        while j < len(right):
            a[k] = right[j]
            j += 1
            k += 1
            stats.record_access()
            yield Comparing((k - 1,))
    finally:
        if k <= r:
            a[k:r + 1] = left[i:] + right[j:]
