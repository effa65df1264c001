"""
controller.py — Run Controller
===============================
Owns the working array, the counters and the cancellation token, and
drives one algorithm at a time on the asyncio event loop.

State machine:
    IDLE      →  start()          →  RUNNING
    RUNNING   →  request_stop()   →  STOPPING
    RUNNING   →  (run returns)    →  IDLE
    STOPPING  →  (run observes)   →  IDLE

Driver loop, once per step:
    check token  →  advance generator  →  render Frame  →  await suspend_step(speed)

Mutation and counting happen only inside the generator, between two
awaits, so the renderer always sees a consistent array.  The speed is
read on every step, never cached.

Whatever ends a run (completion, cancellation, or an exception) the
controller stamps the elapsed time, reports final stats, and goes back to
IDLE.  start() while a run is in flight is a no-op.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from algorithms import Algorithm, get_algorithm, parse_algorithm
from algorithms.step import Frame, SortedFrom, StatsSnapshot
from config import Settings, get_settings
from dataset import WorkingArray
from engine.cancel import CancellationToken
from engine.context import RunContext
from engine.counters import Counters
from engine.scheduler import suspend_step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States & results
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    STOPPING = "stopping"


class RunOutcome(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED    = "failed"


@dataclass(frozen=True)
class RunResult:
    algorithm:   Algorithm
    outcome:     RunOutcome
    stats:       StatsSnapshot
    total_steps: int
    error:       Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "algorithm":   self.algorithm.value,
            "outcome":     self.outcome.value,
            "stats":       self.stats.to_dict(),
            "total_steps": self.total_steps,
            "error":       self.error,
        }


RenderSink = Callable[[Frame], None]
StatsSink = Callable[[StatsSnapshot], None]


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        array        : The WorkingArray the next run sorts.
        counters     : Shared Counters; reset at every start().
        token        : Shared CancellationToken; cleared at every start().
        speed        : Speed-slider value, may be changed at any time.
        state        : Current RunState.
        last_result  : RunResult of the most recent finished run.
        render       : Render sink, called with a Frame after every step.
        on_finish    : Optional callback(RunResult) once a run is back to IDLE.
    """

    def __init__(
        self,
        array: Union[WorkingArray, Iterable[float]],
        render: Optional[RenderSink] = None,
        report_stats: Optional[StatsSink] = None,
        speed: Optional[float] = None,
        settings: Optional[Settings] = None,
        on_finish: Optional[Callable[[RunResult], None]] = None,
    ):
        self.settings:    Settings          = settings or get_settings()
        self.array:       WorkingArray      = array if isinstance(array, WorkingArray) else WorkingArray(array)
        self.counters:    Counters          = Counters(on_change=report_stats)
        self.token:       CancellationToken = CancellationToken()
        self.speed:       float             = self.settings.default_speed if speed is None else speed
        self.render:      Optional[RenderSink] = render
        self.on_finish:   Optional[Callable[[RunResult], None]] = on_finish

        self.state:       RunState              = RunState.IDLE
        self.algorithm:   Optional[Algorithm]   = None
        self.last_result: Optional[RunResult]   = None
        self.steps_taken: int                   = 0

        self._task:       Optional[asyncio.Task] = None
        self._started_at: float                  = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, algorithm: Union[Algorithm, str]) -> Optional[asyncio.Task]:
        """
        Begin a run on the running event loop.

        Returns the driving Task, or None if a run is already in flight.
        Raises UnknownAlgorithmError for an unknown algorithm key.
        """
        algo = parse_algorithm(algorithm)
        if self.state is not RunState.IDLE:
            logger.debug("start(%s) ignored: controller is %s", algo.value, self.state.value)
            return None

        self.counters.reset()
        self.token.reset()
        self.algorithm   = algo
        self.steps_taken = 0
        self._started_at = time.perf_counter()
        self.state       = RunState.RUNNING

        logger.info("Run started: %s on %d elements", algo.value, len(self.array))
        self._task = asyncio.get_running_loop().create_task(self._drive(algo))
        return self._task

    def request_stop(self) -> None:
        """Ask the in-flight run to stop at its next suspend point."""
        if self.state is RunState.RUNNING:
            self.state = RunState.STOPPING
            logger.info("Stop requested")
        self.token.request_stop()

    async def wait(self) -> Optional[RunResult]:
        """Wait for the in-flight run (if any) and return the latest result."""
        if self._task is not None:
            await asyncio.shield(self._task)
        return self.last_result

    async def regenerate(self, values: Union[WorkingArray, Iterable[float]]) -> None:
        """
        Install a new array.  A run in flight is stopped and awaited first
        so nothing mutates the old array from under a suspended step.
        """
        # a start() can land while we wait, so keep stopping until idle;
        # nothing may await between the last check and the install
        while self.is_running:
            self.request_stop()
            await self.wait()
        self.array = values if isinstance(values, WorkingArray) else WorkingArray(values)
        self.counters.reset()
        self._emit(Frame(values=self.array.snapshot(), stats=self.counters.snapshot()))

    @property
    def is_running(self) -> bool:
        return self.state is not RunState.IDLE

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------
    async def _drive(self, algo: Algorithm) -> RunResult:
        ctx = RunContext(self.array, counters=self.counters, token=self.token)
        steps = get_algorithm(algo).fn(ctx)
        outcome = RunOutcome.COMPLETED
        error = None

        try:
            while True:
                if self.token.is_stop_requested():
                    steps.close()
                    outcome = RunOutcome.CANCELLED
                    break
                try:
                    highlight = next(steps)
                except StopIteration:
                    break

                self.steps_taken += 1
                self._emit(Frame(
                    step_number=self.steps_taken,
                    values=ctx.array.snapshot(),
                    highlight=highlight,
                    stats=self.counters.snapshot(),
                ))
                await suspend_step(self.speed, self.settings)
        except Exception as exc:
            logger.exception("Run of %s failed after %d steps", algo.value, self.steps_taken)
            steps.close()
            outcome = RunOutcome.FAILED
            error = f"{type(exc).__name__}: {exc}"
        finally:
            self.counters.set_elapsed((time.perf_counter() - self._started_at) * 1000)
            self.state = RunState.IDLE

        if outcome is RunOutcome.COMPLETED:
            try:
                self._emit(Frame(
                    step_number=self.steps_taken + 1,
                    values=ctx.array.snapshot(),
                    highlight=SortedFrom(0),
                    stats=self.counters.snapshot(),
                    is_final=True,
                ))
            except Exception as exc:
                logger.exception("Render sink failed on the final frame of %s", algo.value)
                outcome = RunOutcome.FAILED
                error = f"{type(exc).__name__}: {exc}"

        result = RunResult(
            algorithm=algo,
            outcome=outcome,
            stats=self.counters.snapshot(),
            total_steps=self.steps_taken,
            error=error,
        )
        self.last_result = result
        logger.info(
            "Run %s: %s (%d comparisons, %d swaps, %d accesses, %.2f ms)",
            outcome.value, algo.value, result.stats.comparisons, result.stats.swaps,
            result.stats.accesses, result.stats.elapsed_ms,
        )
        if self.on_finish is not None:
            self.on_finish(result)
        return result

    def _emit(self, frame: Frame) -> None:
        if self.render is not None:
            self.render(frame)
