"""
engine/
-------
Instrumentation, cancellation, scheduling, and the run drivers.

    from engine import RunController, Stepper, Recorder, compare
"""

from engine.cancel     import CancellationToken
from engine.counters   import Counters
from engine.context    import RunContext
from engine.scheduler  import delay_for, suspend_step, SPEED_PRESETS
from engine.controller import RunController, RunState, RunOutcome, RunResult
from engine.stepper    import Stepper, StepperState
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare
from engine.host       import ControllerHost, FrameSink

__all__ = [
    "CancellationToken",
    "Counters",
    "RunContext",
    "delay_for",
    "suspend_step",
    "SPEED_PRESETS",
    "RunController",
    "RunState",
    "RunOutcome",
    "RunResult",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "ControllerHost",
    "FrameSink",
]
