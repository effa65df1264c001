"""
insertion.py — Insertion Sort
==============================
Grow a sorted prefix one element at a time.  The element being inserted
(the key) walks left past every larger neighbour.

Accounting:
  - reading the key                      → 1 access
  - each test against a left neighbour   → 1 comparison
  - each shift                           → 1 access for the write, plus a
                                           movement (1 swap + 1 access)
  - dropping the key into its slot       → 1 access

The key travels by exchanging places with the neighbour it passes, so at
every yielded frame the array holds exactly the original elements.  The
counters still tally a shift, not a swap, per step.
"""

from typing import TYPE_CHECKING, Iterator, List

from algorithms.step import Comparing, Highlight, SortedUpTo

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                     # 0
    "    for i in 1 .. n-1:",                     # 1
    "        key ← a[i]",                         # 2
    "        j ← i - 1",                          # 3
    "        while j ≥ 0 and a[j] > key:",        # 4
    "            a[j+1] ← a[j]",                  # 5
    "            j ← j - 1",                      # 6
    "        a[j+1] ← key",                       # 7
]


def insertion_sort(ctx: "RunContext") -> Iterator[Highlight]:
    a = ctx.array
    stats = ctx.counters
    n = len(a)

    for i in range(1, n):
        key = a[i]
        stats.record_access()
        j = i - 1

        while j >= 0:
            stats.record_compare()
            yield Comparing((j, j + 1))

            if a[j] > key:
                # a[j+1] holds the key; shift a[j] right past it
                a[j + 1], a[j] = a[j], key
                stats.record_access()
                stats.record_movement(accesses=1)
                j -= 1
            else:
                break

        a[j + 1] = key
        stats.record_access()
        yield SortedUpTo(i)
