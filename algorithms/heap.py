"""
heap.py — Heap Sort
====================
Build a max-heap in place, then repeatedly move the root behind the
shrinking heap.  Child comparisons inside heapify are counted but not
animated; only the swaps produce frames.
"""

from typing import TYPE_CHECKING, Iterator, List

from algorithms.step import Highlight, Swapping

if TYPE_CHECKING:
    from engine.context import RunContext


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                          # 0
    "    for i in n/2-1 down to 0:",              # 1
    "        heapify(a, n, i)",                   # 2
    "    for i in n-1 down to 1:",                # 3
    "        swap(a[0], a[i])",                   # 4
    "        heapify(a, i, 0)",                   # 5
    "def heapify(a, size, i):",                   # 6
    "    largest ← max of i, 2i+1, 2i+2 (< size)",  # 7
    "    if largest ≠ i:",                        # 8
    "        swap(a[i], a[largest])",             # 9
    "        heapify(a, size, largest)",          # 10
]


def heap_sort(ctx: "RunContext") -> Iterator[Highlight]:
    n = len(ctx.array)

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(ctx, n, i)
        if ctx.stop_requested:
            return

    for i in range(n - 1, 0, -1):
        ctx.swap(0, i)
        yield Swapping(0, i, sorted_from=i)
        yield from _heapify(ctx, i, 0)
        if ctx.stop_requested:
            return


def _heapify(ctx: "RunContext", size: int, i: int) -> Iterator[Highlight]:
    a = ctx.array
    stats = ctx.counters

    largest = i
    left, right = 2 * i + 1, 2 * i + 2
    if left < size:
        stats.record_compare()
        if a[left] > a[largest]:
            largest = left
    if right < size:
        stats.record_compare()
        if a[right] > a[largest]:
            largest = right

    if largest != i:
        ctx.swap(i, largest)
        yield Swapping(i, largest)
        if ctx.stop_requested:
            return
        yield from _heapify(ctx, size, largest)
