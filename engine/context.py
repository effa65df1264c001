"""
context.py — Per-Run Context
=============================
Bundles the three things a sorting generator touches: the working array,
the counters, and the cancellation token.  One context per run; two
contexts never share any of the three, so runs (and tests) stay isolated.
"""

from typing import Iterable, Optional, Union

from dataset import WorkingArray
from engine.cancel import CancellationToken
from engine.counters import Counters


class RunContext:
    """
    Attributes:
        array    : The WorkingArray being sorted, mutated in place.
        counters : Instrumentation for this run.
        token    : Cancellation flag checked between steps.
    """

    def __init__(
        self,
        array: Union[WorkingArray, Iterable[float]],
        counters: Optional[Counters] = None,
        token: Optional[CancellationToken] = None,
    ):
        self.array:    WorkingArray      = array if isinstance(array, WorkingArray) else WorkingArray(array)
        self.counters: Counters          = counters if counters is not None else Counters()
        self.token:    CancellationToken = token if token is not None else CancellationToken()

    @property
    def stop_requested(self) -> bool:
        return self.token.is_stop_requested()

    def swap(self, i: int, j: int) -> None:
        """Exchange two elements and count it."""
        self.array.swap(i, j)
        self.counters.record_swap()

    def __len__(self) -> int:
        return len(self.array)
