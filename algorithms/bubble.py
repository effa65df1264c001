"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Highlight at every meaningful event:
  1. Compare a[j] with a[j+1]          →  Comparing(j, j+1)
  2. Exchange them if out of order     →  Swapping(j, j+1)
  3. End of a pass                     →  SortedFrom(n-i-1)

No early exit on a swap-free pass: the comparison count is always
n(n-1)/2, which is what the complexity chart promises.
"""

from typing import TYPE_CHECKING, Iterator, List

from algorithms.step import Comparing, Highlight, SortedFrom, Swapping

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                        # 0
    "    n ← len(a)",                             # 1
    "    for i in 0 .. n-2:",                     # 2
    "        for j in 0 .. n-i-2:",               # 3
    "            if a[j] > a[j+1]:",              # 4
    "                swap(a[j], a[j+1])",         # 5
    "        a[n-i-1] is in place",               # 6
]


def bubble_sort(ctx: "RunContext") -> Iterator[Highlight]:
    a = ctx.array
    stats = ctx.counters
    n = len(a)

    for i in range(n - 1):
        for j in range(n - i - 1):
            stats.record_compare()
            yield Comparing((j, j + 1))

            if a[j] > a[j + 1]:
                ctx.swap(j, j + 1)
                yield Swapping(j, j + 1)

        yield SortedFrom(n - i - 1)
