"""Tests for counters, cancellation, the step scheduler and the run context."""

import asyncio

import pytest

from config import Settings
from dataset import WorkingArray
from engine import CancellationToken, Counters, RunContext, SPEED_PRESETS, delay_for, suspend_step


class TestCounters:
    def test_swap_touches_two_elements(self):
        c = Counters()
        c.record_swap()
        assert (c.swaps, c.accesses) == (1, 2)

    def test_movement_counts_as_swap(self):
        c = Counters()
        c.record_movement()
        c.record_movement(accesses=1)
        assert (c.swaps, c.accesses) == (2, 1)

    def test_reset(self):
        c = Counters()
        c.record_compare()
        c.record_access(3)
        c.set_elapsed(12.5)
        c.reset()
        snap = c.snapshot()
        assert (snap.comparisons, snap.swaps, snap.accesses, snap.elapsed_ms) == (0, 0, 0, 0.0)

    def test_every_change_is_reported(self):
        seen = []
        c = Counters(on_change=seen.append)
        c.record_compare()
        c.record_swap()
        assert len(seen) == 2
        assert seen[-1].comparisons == 1
        assert seen[-1].swaps == 1


class TestCancellationToken:
    def test_request_and_reset(self):
        token = CancellationToken()
        assert not token.is_stop_requested()
        token.request_stop()
        token.request_stop()
        assert token.is_stop_requested()
        token.reset()
        assert not token.is_stop_requested()


class TestScheduler:
    def test_endpoints(self):
        s = Settings()
        assert delay_for(100, s) == 20
        assert delay_for(1, s) == 693
        assert delay_for(50, s) == 360

    def test_out_of_range_is_clamped(self):
        s = Settings()
        assert delay_for(0, s) == delay_for(1, s)
        assert delay_for(-40, s) == 693
        assert delay_for(1000, s) == 20

    def test_numeric_strings_accepted(self):
        assert delay_for("100", Settings()) == 20

    def test_non_numeric_speed_rejected(self):
        with pytest.raises(ValueError):
            delay_for("fast", Settings())
        with pytest.raises(ValueError):
            delay_for(None, Settings())

    @pytest.mark.parametrize("speed", [float("nan"), float("inf"), "-inf", "nan"])
    def test_non_finite_speed_rejected(self, speed):
        with pytest.raises(ValueError):
            delay_for(speed, Settings())

    def test_faster_means_shorter(self):
        s = Settings()
        delays = [delay_for(SPEED_PRESETS[k], s) for k in ("slow", "medium", "fast", "turbo")]
        assert delays == sorted(delays, reverse=True)

    def test_suspend_step_with_zero_delay(self, instant):
        asyncio.run(suspend_step(50, instant))


class TestRunContext:
    def test_wraps_plain_lists(self):
        ctx = RunContext([3, 1, 2])
        assert isinstance(ctx.array, WorkingArray)
        assert len(ctx) == 3

    def test_swap_is_counted(self):
        ctx = RunContext([3, 1])
        ctx.swap(0, 1)
        assert ctx.array == [1, 3]
        assert ctx.counters.swaps == 1

    def test_contexts_are_isolated(self):
        a, b = RunContext([1]), RunContext([1])
        a.token.request_stop()
        a.counters.record_compare()
        assert not b.stop_requested
        assert b.counters.comparisons == 0
