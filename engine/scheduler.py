"""
scheduler.py — Step Scheduler
==============================
The only place a run gives control back to the event loop.

    delay_for(speed)       – speed slider value → milliseconds
    await suspend_step(s)  – sleep for delay_for(s)

The mapping is inverse-linear: the top of the speed range gives the
minimum delay, and the delay grows linearly as speed drops.  The speed is
read by the caller on every step, so moving the slider mid-run takes
effect on the very next step.

suspend_step() does not look at the cancellation token; the driver
checks it after every resume.
"""

import asyncio
import math
from typing import Optional

from config import Settings, get_settings


# ---------------------------------------------------------------------------
# Speed presets (speed-slider values)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   10,     # teaching mode
    "medium": 50,
    "fast":   85,     # demo mode
    "turbo":  100,
}


def delay_for(speed: float, settings: Optional[Settings] = None) -> int:
    """Milliseconds to wait after a step at the given speed."""
    settings = settings or get_settings()
    try:
        value = float(speed)
    except (TypeError, ValueError):
        raise ValueError(f"Speed must be a number, got {speed!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Speed must be finite, got {speed!r}")

    value = min(max(value, settings.speed_min), settings.speed_max)
    span = settings.max_delay_ms - settings.min_delay_ms
    return int(round(settings.max_delay_ms - (value / settings.speed_max) * span))


async def suspend_step(speed: float, settings: Optional[Settings] = None) -> None:
    await asyncio.sleep(delay_for(speed, settings) / 1000)
