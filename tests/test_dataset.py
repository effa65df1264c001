"""Tests for the working array, array generation and settings."""

import pytest

from config import Settings
from dataset import Distribution, WorkingArray, generate


class TestWorkingArray:
    def test_sequence_protocol(self):
        arr = WorkingArray([3, 1, 2])
        assert len(arr) == 3
        assert list(arr) == [3, 1, 2]
        assert arr[0] == 3
        assert arr[1:] == [1, 2]

    def test_length_is_fixed(self):
        arr = WorkingArray([1, 2, 3, 4])
        arr[1:3] = [9, 8]
        assert arr == [1, 9, 8, 4]
        with pytest.raises(ValueError):
            arr[0:2] = [1]
        with pytest.raises(ValueError):
            arr[0:1] = [1, 2, 3]

    def test_swap_and_sorted(self):
        arr = WorkingArray([2, 1])
        assert not arr.is_sorted()
        arr.swap(0, 1)
        assert arr.is_sorted()

    def test_copy_is_independent(self):
        arr = WorkingArray([1, 2])
        dup = arr.copy()
        dup[0] = 5
        assert arr == [1, 2]

    def test_snapshot_is_frozen(self):
        arr = WorkingArray([1, 2])
        snap = arr.snapshot()
        arr[0] = 7
        assert snap == (1, 2)

    def test_dict_round_trip(self):
        arr = WorkingArray([5, 6, 7])
        assert WorkingArray.from_dict(arr.to_dict()) == arr


class TestGenerate:
    def test_size_and_value_range(self):
        s = Settings()
        arr = generate(30, seed=1, settings=s)
        assert len(arr) == 30
        assert all(s.value_min <= v <= s.value_max for v in arr)

    def test_seed_is_deterministic(self):
        assert generate(20, seed=42) == generate(20, seed=42)

    def test_size_out_of_range(self):
        s = Settings()
        with pytest.raises(ValueError):
            generate(s.size_min - 1, settings=s)
        with pytest.raises(ValueError):
            generate(s.size_max + 1, settings=s)

    def test_reversed(self):
        values = generate(25, Distribution.REVERSED, seed=3).to_list()
        assert values == sorted(values, reverse=True)

    def test_few_unique(self):
        values = generate(50, Distribution.FEW_UNIQUE, seed=3).to_list()
        assert len(set(values)) <= 5

    def test_nearly_sorted_keeps_multiset(self):
        values = generate(40, "nearly_sorted", seed=9).to_list()
        assert len(values) == 40

    def test_unknown_distribution(self):
        with pytest.raises(ValueError):
            generate(10, "zigzag")


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert (s.speed_min, s.speed_max) == (1, 100)
        assert (s.min_delay_ms, s.max_delay_ms) == (20, 700)

    def test_env_overrides(self):
        s = Settings.from_env({
            "SORTVIZ_MAX_DELAY_MS": "400",
            "SORTVIZ_DEBUG": "true",
            "SORTVIZ_LOG_LEVEL": "DEBUG",
            "UNRELATED": "x",
        })
        assert s.max_delay_ms == 400
        assert s.debug is True
        assert s.log_level == "DEBUG"

    def test_bad_env_value(self):
        with pytest.raises(ValueError):
            Settings.from_env({"SORTVIZ_PORT": "eighty"})

    def test_invalid_ranges(self):
        with pytest.raises(ValueError):
            Settings(min_delay_ms=800)
        with pytest.raises(ValueError):
            Settings(speed_min=0)
        with pytest.raises(ValueError):
            Settings(size_min=50, size_max=10)
