"""
cancel.py — Cooperative Cancellation Token
===========================================
A single flag the outside world sets to ask the running algorithm to stop.
Algorithms never get pre-empted: the driver reads the flag every time a
step resumes and, if set, closes the generator so any pending recursion
unwinds.  The array is left wherever the run got to.

Only the controller may call reset(), and only when a new run starts.
"""


class CancellationToken:

    __slots__ = ("_stop",)

    def __init__(self):
        self._stop = False

    def request_stop(self) -> None:
        self._stop = True

    def is_stop_requested(self) -> bool:
        return self._stop

    def reset(self) -> None:
        self._stop = False

    def __repr__(self) -> str:
        return f"CancellationToken(stop_requested={self._stop})"
