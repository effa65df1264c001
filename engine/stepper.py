"""
stepper.py — Step-by-Step Playback Engine
==========================================
Manual playback of a sorting run, no event loop and no delays: the UI
asks for the next frame and the Stepper advances the algorithm's
generator exactly one step.  Every Frame it has produced is buffered, and
each Frame carries its own copy of the array, so rewinding is a lookup
rather than an undo.

State machine:
    IDLE     →  start()   →  PAUSED
    PAUSED   →  play()    →  PLAYING
    PLAYING  →  pause()   →  PAUSED
    PLAYING  →  (exhausted or stopped) → FINISHED
    any      →  reset()   →  IDLE

Thread safety:
  This class is NOT thread-safe.  The web layer serialises access with a
  lock; tests drive it from a single thread.
"""

import time
from enum import Enum
from typing import Callable, Iterator, List, Optional, Union

from algorithms import Algorithm, get_algorithm
from algorithms.step import Frame, Highlight, SortedFrom
from config import Settings, get_settings
from engine.context import RunContext
from engine.scheduler import delay_for


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        frames      : Every Frame produced so far (buffer for rewind).
        current_idx : Index into `frames` that is currently displayed.
        speed       : Speed-slider value used by tick() during auto-play.
        cancelled   : True once the run was stopped before completing.
        on_step     : Optional callback(Frame) fired every time the current
                      frame changes.  The UI hooks its re-render here.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Frame], None]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings:    Settings     = settings or get_settings()
        self._generator:  Optional[Iterator[Highlight]] = None
        self._ctx:        Optional[RunContext] = None
        self.algorithm:   Optional[Algorithm]  = None
        self.frames:      List[Frame]  = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = self.settings.default_speed
        self.cancelled:   bool         = False
        self.on_step:     Optional[Callable[[Frame], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, ctx: RunContext, algorithm: Union[Algorithm, str]) -> None:
        """Attach a fresh run and show its initial state as frame 0."""
        info = get_algorithm(algorithm)
        ctx.counters.reset()
        ctx.token.reset()

        self._ctx        = ctx
        self.algorithm   = info.algorithm
        self._generator  = info.fn(ctx)
        self.frames      = []
        self.frames.append(self._frame(None))
        self.cancelled   = False
        self.state       = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        if self._generator is not None:
            self._generator.close()
        self._generator  = None
        self._ctx        = None
        self.algorithm   = None
        self.frames      = []
        self.current_idx = -1
        self.cancelled   = False
        self.state       = StepperState.IDLE

    def request_stop(self) -> None:
        if self._ctx is not None:
            self._ctx.token.request_stop()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.frames):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, running forward if needed."""
        while idx >= len(self.frames):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.frames):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to frame 0."""
        if self.frames:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Run the algorithm out and jump to the final frame."""
        while self._fetch_next():
            pass
        if self.frames:
            self._goto(len(self.frames) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state is StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    def tick(self) -> bool:
        """
        Call periodically (e.g. every 20 ms).  If playing and the delay for
        the current speed has elapsed, advances one step.  Returns True if a
        step was taken.
        """
        if self.state is not StepperState.PLAYING:
            return False
        now = time.monotonic()
        if (now - self._last_tick) * 1000 >= delay_for(self.speed, self.settings):
            self._last_tick = now
            if not self.next_step():
                self.state = StepperState.FINISHED
                return False
            return True
        return False

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> Optional[Frame]:
        if 0 <= self.current_idx < len(self.frames):
            return self.frames[self.current_idx]
        return None

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    @property
    def context(self) -> Optional[RunContext]:
        return self._ctx

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Advance the generator one step and buffer the resulting Frame."""
        if self._generator is None:
            return False
        if self._ctx.stop_requested:
            self._generator.close()
            self._generator = None
            self.cancelled  = True
            return False
        try:
            highlight = next(self._generator)
        except StopIteration:
            # close the run with an all-sorted frame
            self._generator = None
            self.frames.append(self._frame(SortedFrom(0), is_final=True))
            return True
        self.frames.append(self._frame(highlight))
        return True

    def _frame(self, highlight: Optional[Highlight], is_final: bool = False) -> Frame:
        return Frame(
            step_number=len(self.frames),
            values=self._ctx.array.snapshot(),
            highlight=highlight,
            stats=self._ctx.counters.snapshot(),
            is_final=is_final,
        )

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.frames[idx] if 0 <= idx < len(self.frames) else None)

    def _notify(self, frame: Optional[Frame]) -> None:
        if self.on_step and frame is not None:
            self.on_step(frame)
