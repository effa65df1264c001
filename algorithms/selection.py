"""
selection.py — Selection Sort
==============================
Scan the unsorted suffix for its minimum, then swap it into place.
Every scan step is a comparison against the current minimum, so the
total is n(n-1)/2 regardless of input order.
"""

from typing import TYPE_CHECKING, Iterator, List

from algorithms.step import Comparing, Highlight, SortedUpTo, Swapping

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                     # 0
    "    for i in 0 .. n-2:",                     # 1
    "        min ← i",                            # 2
    "        for j in i+1 .. n-1:",               # 3
    "            if a[j] < a[min]: min ← j",      # 4
    "        if min ≠ i:",                        # 5
    "            swap(a[i], a[min])",             # 6
    "        a[0..i] is in place",                # 7
]


def selection_sort(ctx: "RunContext") -> Iterator[Highlight]:
    a = ctx.array
    stats = ctx.counters
    n = len(a)

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            stats.record_compare()
            yield Comparing((min_idx, j))
            if a[j] < a[min_idx]:
                min_idx = j

        if min_idx != i:
            ctx.swap(i, min_idx)
            yield Swapping(i, min_idx, sorted_upto=i)
        else:
            yield SortedUpTo(i)
