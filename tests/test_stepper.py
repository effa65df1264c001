"""Tests for manual step-through playback and the run recorder."""

import pytest

from algorithms import UnknownAlgorithmError
from algorithms.step import Comparing, SortedFrom
from engine import Recorder, RunContext, Stepper, StepperState, compare


class TestStepper:
    def test_start_shows_initial_array(self):
        stepper = Stepper()
        stepper.start(RunContext([3, 1, 2]), "bubble")
        frame = stepper.current_frame
        assert stepper.state is StepperState.PAUSED
        assert frame.step_number == 0
        assert frame.highlight is None
        assert frame.values == (3, 1, 2)

    def test_next_and_rewind(self):
        stepper = Stepper()
        stepper.start(RunContext([3, 1, 2]), "bubble")
        assert stepper.next_step()
        assert stepper.current_frame.highlight == Comparing((0, 1))
        assert stepper.next_step()
        assert stepper.current_frame.values == (1, 3, 2)

        stepper.rewind()
        assert stepper.current_idx == 0
        assert stepper.current_frame.values == (3, 1, 2)

    def test_prev_at_start(self):
        stepper = Stepper()
        stepper.start(RunContext([2, 1]), "selection")
        assert not stepper.prev_step()

    def test_jump_to_end(self):
        stepper = Stepper()
        stepper.start(RunContext([3, 1, 2]), "bubble")
        stepper.jump_to_end()

        last = stepper.current_frame
        assert stepper.is_finished
        assert last.is_final
        assert last.highlight == SortedFrom(0)
        assert last.values == (1, 2, 3)
        # initial frame + 7 highlights + final frame
        assert stepper.total_frames == 9
        assert not stepper.next_step()

    def test_goto_runs_forward(self):
        stepper = Stepper()
        stepper.start(RunContext([4, 3, 2, 1]), "insertion")
        assert stepper.goto_step(5)
        assert stepper.current_idx == 5
        assert stepper.total_frames == 6
        assert not stepper.goto_step(10_000)

    def test_on_step_callback(self):
        seen = []
        stepper = Stepper(on_step=seen.append)
        stepper.start(RunContext([2, 1]), "bubble")
        stepper.next_step()
        assert [f.step_number for f in seen] == [0, 1]

    def test_stop_request_cancels(self):
        stepper = Stepper()
        stepper.start(RunContext([5, 4, 3, 2, 1]), "quick")
        stepper.next_step()
        stepper.request_stop()
        assert not stepper.next_step()
        assert stepper.cancelled
        assert stepper.is_finished

    def test_play_pause(self):
        stepper = Stepper()
        stepper.play()
        assert stepper.state is StepperState.IDLE

        stepper.start(RunContext([2, 1]), "bubble")
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state is StepperState.PAUSED
        assert not stepper.tick()

    def test_reset(self):
        stepper = Stepper()
        stepper.start(RunContext([2, 1]), "merge")
        stepper.reset()
        assert stepper.state is StepperState.IDLE
        assert stepper.current_frame is None
        assert stepper.context is None

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError):
            Stepper().start(RunContext([1]), "bogo")


class TestRecorder:
    def test_metrics(self):
        rec = Recorder()
        rec.start("bubble", [4, 3, 2, 1])
        metrics = rec.run_to_completion()
        assert metrics.sorted_ok
        assert metrics.size == 4
        assert metrics.comparisons == 6
        assert metrics.swaps == 6
        assert metrics.total_steps == len(rec.frames) - 1
        assert rec.get_metrics() is metrics

    def test_input_is_not_mutated(self):
        values = [3, 1, 2]
        rec = Recorder()
        rec.start("heap", values)
        rec.run_to_completion()
        assert values == [3, 1, 2]

    def test_export(self):
        rec = Recorder()
        rec.start("quick", [2, 1])
        rec.run_to_completion()
        data = rec.export()
        assert data["algo_key"] == "quick"
        assert data["initial"] == [2, 1]
        assert data["frames"][-1]["is_final"] is True
        assert data["metrics"]["sorted_ok"] is True

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()


class TestCompare:
    def _recorded(self, algo, values):
        rec = Recorder()
        rec.start(algo, values)
        rec.run_to_completion()
        return rec

    def test_winners(self):
        values = [1, 2, 3, 4, 5]
        result = compare(self._recorded("bubble", values), self._recorded("insertion", values))
        assert result.winner_comparisons == "Insertion Sort"
        assert result.winner_swaps == "tie"
        assert result.winner_accesses == "Bubble Sort"

    def test_to_dict(self):
        values = [3, 1, 2]
        result = compare(self._recorded("merge", values), self._recorded("quick", values))
        data = result.to_dict()
        assert data["left"]["algo_key"] == "merge"
        assert data["right"]["algo_key"] == "quick"
