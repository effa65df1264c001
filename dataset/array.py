"""
array.py — Working Array & Generator
=====================================
The one sequence of numbers a run sorts.  Algorithms mutate it in place,
the renderer reads it, the controller owns it.

Responsibilities:
  1. Index / slice access for the sorting generators
  2. Fixed length: no write may grow or shrink the array
  3. Generation factory       (random, reversed, nearly sorted, few unique)
  4. Serialisation round-trip (to_dict / from_dict)

Design decisions:
  - A thin wrapper over a plain list.  Slices read back as lists so the
    merge step can copy its halves into scratch buffers.
  - Regeneration never edits an existing WorkingArray; the controller
    installs a fresh one between runs.
"""

import random
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from config import Settings, get_settings


# ---------------------------------------------------------------------------
# Distributions offered by the generator
# ---------------------------------------------------------------------------
class Distribution(Enum):
    RANDOM        = "random"
    REVERSED      = "reversed"
    NEARLY_SORTED = "nearly_sorted"
    FEW_UNIQUE    = "few_unique"


# ---------------------------------------------------------------------------
# WorkingArray
# ---------------------------------------------------------------------------
class WorkingArray:
    """
    Attributes:
        _values : the underlying list.  Its length is fixed at construction.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = ()):
        self._values: List[float] = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            value = list(value)
            if len(range(*index.indices(len(self._values)))) != len(value):
                raise ValueError("WorkingArray length is fixed; slice assignment must not resize it")
        self._values[index] = value

    def __eq__(self, other) -> bool:
        if isinstance(other, WorkingArray):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"WorkingArray({self._values!r})"

    def swap(self, i: int, j: int) -> None:
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def to_list(self) -> List[float]:
        return list(self._values)

    def snapshot(self) -> tuple:
        return tuple(self._values)

    def copy(self) -> "WorkingArray":
        return WorkingArray(self._values)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self._values, self._values[1:]))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"values": list(self._values), "size": len(self._values)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkingArray":
        return cls(data.get("values", []))


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate(
    size: int,
    distribution: Distribution = Distribution.RANDOM,
    seed: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> WorkingArray:
    """
    Build a fresh WorkingArray of `size` integers in [value_min, value_max].

    Raises ValueError when `size` is outside the configured range.
    """
    settings = settings or get_settings()
    if not settings.size_min <= size <= settings.size_max:
        raise ValueError(
            f"Array size must be between {settings.size_min} and {settings.size_max}, got {size}"
        )
    if not isinstance(distribution, Distribution):
        distribution = Distribution(distribution)

    rng = random.Random(seed)
    lo, hi = settings.value_min, settings.value_max

    if distribution is Distribution.REVERSED:
        values = sorted((rng.randint(lo, hi) for _ in range(size)), reverse=True)
    elif distribution is Distribution.NEARLY_SORTED:
        values = sorted(rng.randint(lo, hi) for _ in range(size))
        # a handful of random transpositions
        for _ in range(max(1, size // 10) if size > 1 else 0):
            i, j = rng.randrange(size), rng.randrange(size)
            values[i], values[j] = values[j], values[i]
    elif distribution is Distribution.FEW_UNIQUE:
        pool = [rng.randint(lo, hi) for _ in range(5)]
        values = [rng.choice(pool) for _ in range(size)]
    else:
        values = [rng.randint(lo, hi) for _ in range(size)]

    return WorkingArray(values)
