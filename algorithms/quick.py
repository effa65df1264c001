"""
quick.py — Quick Sort (Lomuto)
===============================
The pivot is always the last element of the range.  That is deliberate:
the same input always animates the same way.

_partition() is itself a generator; its return value (the pivot's final
index) comes back through `yield from`.
"""

from typing import TYPE_CHECKING, Generator, Iterator, List

from algorithms.step import Comparing, Highlight, Swapping

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def quick_sort(a, l, r):",                   # 0
    "    if l ≥ r: return",                       # 1
    "    p ← partition(a, l, r)",                 # 2
    "    quick_sort(a, l, p-1)",                  # 3
    "    quick_sort(a, p+1, r)",                  # 4
    "def partition(a, l, r):",                    # 5
    "    pivot ← a[r];  i ← l - 1",               # 6
    "    for j in l .. r-1:",                     # 7
    "        if a[j] < pivot:",                   # 8
    "            i ← i + 1;  swap(a[i], a[j])",   # 9
    "    swap(a[i+1], a[r]);  return i + 1",      # 10
]


def quick_sort(ctx: "RunContext") -> Iterator[Highlight]:
    yield from _quick_sort(ctx, 0, len(ctx.array) - 1)


def _quick_sort(ctx: "RunContext", l: int, r: int) -> Iterator[Highlight]:
    if l >= r:
        return

    p = yield from _partition(ctx, l, r)
    if ctx.stop_requested:
        return
    yield from _quick_sort(ctx, l, p - 1)
    if ctx.stop_requested:
        return
    yield from _quick_sort(ctx, p + 1, r)


def _partition(ctx: "RunContext", l: int, r: int) -> Generator[Highlight, None, int]:
    a = ctx.array
    stats = ctx.counters

    pivot = a[r]
    stats.record_access()
    i = l - 1

    for j in range(l, r):
        stats.record_compare()
        yield Comparing((j, r))
        if a[j] < pivot:
            i += 1
            ctx.swap(i, j)
            yield Swapping(i, j)

    ctx.swap(i + 1, r)
    yield Swapping(i + 1, r)
    return i + 1
