"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import Algorithm, REGISTRY, get_algorithm

Algorithm is a closed Enum; REGISTRY maps every member to an AlgoInfo
card.  The engine, the stepper and the UI panels all consume AlgoInfo, so
adding an algorithm is: write the generator, add an Enum member, add one
entry here.  The import-time check below refuses a registry with gaps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Union

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc


class Algorithm(str, Enum):
    BUBBLE    = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE     = "merge"
    QUICK     = "quick"
    HEAP      = "heap"


class UnknownAlgorithmError(ValueError):
    pass


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    algorithm:         Algorithm
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function, fn(ctx)
    pseudocode:        List[str]              # lines for the side-panel
    complexity_time:   str                    # e.g. "O(n²)"
    complexity_space:  str                    # e.g. "O(1)"
    stable:            bool
    description:       str                    = ""
    tags:              List[str]              = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.algorithm.value


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[Algorithm, AlgoInfo] = {

    Algorithm.BUBBLE: AlgoInfo(
        algorithm=Algorithm.BUBBLE, label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        tags=["quadratic", "in-place", "comparison"],
        description="Repeatedly steps through the list, compares adjacent elements and swaps if out of order.",
    ),

    Algorithm.SELECTION: AlgoInfo(
        algorithm=Algorithm.SELECTION, label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=False,
        tags=["quadratic", "in-place", "comparison"],
        description="Selects the minimum of the unsorted part and swaps it into its final position.",
    ),

    Algorithm.INSERTION: AlgoInfo(
        algorithm=Algorithm.INSERTION, label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        tags=["quadratic", "in-place", "adaptive", "comparison"],
        description="Builds the sorted list by inserting each element into its correct place.",
    ),

    Algorithm.MERGE: AlgoInfo(
        algorithm=Algorithm.MERGE, label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        complexity_time="O(n log n)", complexity_space="O(n)", stable=True,
        tags=["divide-and-conquer", "comparison"],
        description="Divides the array in halves, sorts each, and merges the sorted halves.",
    ),

    Algorithm.QUICK: AlgoInfo(
        algorithm=Algorithm.QUICK, label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n)", complexity_space="O(log n)", stable=False,
        tags=["divide-and-conquer", "in-place", "comparison"],
        description="Divide & conquer by partitioning around the last element as pivot.",
    ),

    Algorithm.HEAP: AlgoInfo(
        algorithm=Algorithm.HEAP, label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        complexity_time="O(n log n)", complexity_space="O(1)", stable=False,
        tags=["in-place", "comparison"],
        description="Builds a max-heap and repeatedly moves the maximum behind the heap.",
    ),
}

_missing = set(Algorithm) - set(REGISTRY)
if _missing:
    raise RuntimeError(f"Algorithms without a registry entry: {sorted(a.value for a in _missing)}")


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def parse_algorithm(key: Union[Algorithm, str]) -> Algorithm:
    """Algorithm member for an Enum value or its string key."""
    if isinstance(key, Algorithm):
        return key
    try:
        return Algorithm(str(key).strip().lower())
    except ValueError:
        raise UnknownAlgorithmError(f"Unknown algorithm: {key!r}") from None


def get_algorithm(key: Union[Algorithm, str]) -> AlgoInfo:
    """Return the AlgoInfo card; raises UnknownAlgorithmError for unknown keys."""
    return REGISTRY[parse_algorithm(key)]


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in declaration order."""
    return [REGISTRY[a] for a in Algorithm]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [info for info in list_algorithms() if tag in info.tags]


__all__ = [
    "Algorithm",
    "AlgoInfo",
    "REGISTRY",
    "UnknownAlgorithmError",
    "parse_algorithm",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
