"""
host.py — Event-Loop Host for the Web App
==========================================
Flask handles each request on its own worker thread, but a run is a
long-lived asyncio task.  ControllerHost gives the RunController a home:
one asyncio loop on one daemon thread.  Request handlers talk to it only
through the thread-safe methods below, which hop onto the loop before
touching the controller, so the controller itself stays single-threaded.

FrameSink is the render / report-stats pair the controller calls.  It
keeps the latest Frame and StatsSnapshot behind a lock so /api/state can
read them from any request thread.
"""

import asyncio
import logging
import threading
from typing import Any, Dict, Iterable, Optional, Union

from algorithms import Algorithm, parse_algorithm
from algorithms.step import Frame, StatsSnapshot
from config import Settings, get_settings
from dataset import WorkingArray
from engine.controller import RunController, RunResult

logger = logging.getLogger(__name__)

_CALL_TIMEOUT_S = 5.0


# ---------------------------------------------------------------------------
# FrameSink
# ---------------------------------------------------------------------------
class FrameSink:
    """Latest-frame buffer shared between the loop thread and request threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._frame: Optional[Frame] = None
        self._stats: StatsSnapshot = StatsSnapshot()
        self._version: int = 0

    def render(self, frame: Frame) -> None:
        with self._lock:
            self._frame = frame
            self._stats = frame.stats
            self._version += 1

    def report_stats(self, stats: StatsSnapshot) -> None:
        with self._lock:
            self._stats = stats

    def latest(self):
        """(version, frame, stats) as one consistent read."""
        with self._lock:
            return self._version, self._frame, self._stats


# ---------------------------------------------------------------------------
# ControllerHost
# ---------------------------------------------------------------------------
class ControllerHost:
    """
    Attributes:
        sink        : FrameSink the controller renders into.
        controller  : The RunController; touch it only from the loop thread.
        last_result : Result of the most recent finished run.
    """

    def __init__(self, array: Union[WorkingArray, Iterable[float]], settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.sink = FrameSink()
        self.last_result: Optional[RunResult] = None
        self.controller = RunController(
            array,
            render=self.sink.render,
            report_stats=self.sink.report_stats,
            settings=self.settings,
            on_finish=self._on_finish,
        )
        self.sink.render(Frame(values=self.controller.array.snapshot()))

        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="sort-runner", daemon=True)
        self._thread.start()

    # ------------------------------------------------------------------
    # Thread-safe API
    # ------------------------------------------------------------------
    def start(self, algorithm: Union[Algorithm, str]) -> bool:
        """Start a run; False if one is already in flight."""
        algo = parse_algorithm(algorithm)
        return self._call(self._start(algo))

    def stop(self) -> None:
        self._loop.call_soon_threadsafe(self.controller.request_stop)

    def regenerate(self, values: Union[WorkingArray, Iterable[float]]) -> None:
        """Stop any run, wait for it to drain, then install `values`."""
        self._call(self.controller.regenerate(values), timeout=None)

    def set_speed(self, speed: float) -> None:
        self._loop.call_soon_threadsafe(setattr, self.controller, "speed", float(speed))

    def values(self):
        return self._call(self._values())

    @property
    def is_running(self) -> bool:
        return self.controller.is_running

    def state(self) -> Dict[str, Any]:
        version, frame, stats = self.sink.latest()
        result = self.last_result
        return {
            "version":     version,
            "state":       self.controller.state.value,
            "algorithm":   self.controller.algorithm.value if self.controller.algorithm else None,
            "speed":       self.controller.speed,
            "frame":       frame.to_dict() if frame else None,
            "stats":       stats.to_dict(),
            "last_result": result.to_dict() if result else None,
        }

    def shutdown(self) -> None:
        self.stop()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=_CALL_TIMEOUT_S)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def _call(self, coro, timeout: Optional[float] = _CALL_TIMEOUT_S):
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result(timeout)

    async def _start(self, algo: Algorithm) -> bool:
        return self.controller.start(algo) is not None

    async def _values(self):
        return self.controller.array.to_list()

    def _on_finish(self, result: RunResult) -> None:
        self.last_result = result
