"""Tests for the sorting generators and the algorithm registry."""

import random

import pytest

from algorithms import (
    REGISTRY,
    Algorithm,
    UnknownAlgorithmError,
    algorithms_by_tag,
    get_algorithm,
    list_algorithms,
    parse_algorithm,
)
from algorithms.step import Comparing, SortedFrom, SortedUpTo, Swapping
from engine import RunContext


ALL = list(Algorithm)


def run(algo, values):
    """Exhaust one algorithm on `values`; returns (ctx, highlights)."""
    ctx = RunContext(list(values))
    highlights = list(get_algorithm(algo).fn(ctx))
    return ctx, highlights


class _Keyed:
    """Orders by key only, so equal keys expose the original order."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key


class TestRegistry:
    def test_every_algorithm_registered(self):
        assert set(REGISTRY) == set(Algorithm)
        assert [info.algorithm for info in list_algorithms()] == ALL

    def test_lookup_by_string(self):
        assert get_algorithm("merge").label == "Merge Sort"
        assert parse_algorithm(" Quick ") is Algorithm.QUICK

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError):
            get_algorithm("bogo")
        with pytest.raises(ValueError):
            parse_algorithm("shell")

    def test_stability_flags(self):
        stable = {info.key for info in list_algorithms() if info.stable}
        assert stable == {"bubble", "insertion", "merge"}

    def test_tags(self):
        quadratic = {info.key for info in algorithms_by_tag("quadratic")}
        assert quadratic == {"bubble", "selection", "insertion"}


class TestCorrectness:
    @pytest.mark.parametrize("algo", ALL)
    def test_sorts_random_arrays(self, algo):
        rng = random.Random(7)
        for size in (2, 3, 10, 31):
            values = [rng.randint(10, 389) for _ in range(size)]
            ctx, _ = run(algo, values)
            assert ctx.array.to_list() == sorted(values)

    @pytest.mark.parametrize("algo", ALL)
    def test_duplicates_and_reversed(self, algo):
        for values in ([4, 4, 1, 4, 1], [9, 8, 7, 6, 5, 4], [1, 2, 3, 4]):
            ctx, _ = run(algo, values)
            assert ctx.array.to_list() == sorted(values)

    @pytest.mark.parametrize("algo", ALL)
    @pytest.mark.parametrize("values", [[], [7]])
    def test_trivial_arrays_do_nothing(self, algo, values):
        ctx, highlights = run(algo, values)
        assert highlights == []
        assert ctx.array.to_list() == values
        snap = ctx.counters.snapshot()
        assert (snap.comparisons, snap.swaps, snap.accesses) == (0, 0, 0)

    @pytest.mark.parametrize("algo", ALL)
    def test_deterministic(self, algo):
        values = [5, 1, 4, 1, 5, 9, 2, 6]
        first_ctx, first = run(algo, values)
        second_ctx, second = run(algo, values)
        assert first == second
        assert first_ctx.counters.snapshot() == second_ctx.counters.snapshot()
        assert first_ctx.array.to_list() == second_ctx.array.to_list()

    @pytest.mark.parametrize("algo", [Algorithm.INSERTION, Algorithm.MERGE, Algorithm.BUBBLE])
    def test_stable_algorithms_keep_equal_keys_in_order(self, algo):
        items = [_Keyed(k, t) for t, k in enumerate([3, 1, 3, 2, 1, 3])]
        ctx, _ = run(algo, items)
        result = [(it.key, it.tag) for it in ctx.array]
        assert result == [(1, 1), (1, 4), (2, 3), (3, 0), (3, 2), (3, 5)]


class TestBubble:
    def test_worked_example(self):
        """[5, 3, 8, 1] takes 6 comparisons and 4 swaps."""
        ctx, highlights = run("bubble", [5, 3, 8, 1])
        snap = ctx.counters.snapshot()
        assert ctx.array.to_list() == [1, 3, 5, 8]
        assert (snap.comparisons, snap.swaps, snap.accesses) == (6, 4, 8)
        assert highlights[0] == Comparing((0, 1))
        assert highlights[1] == Swapping(0, 1)
        assert [h for h in highlights if isinstance(h, SortedFrom)] == [
            SortedFrom(3), SortedFrom(2), SortedFrom(1),
        ]

    def test_comparisons_are_quadratic(self):
        ctx, _ = run("bubble", list(range(12)))
        assert ctx.counters.comparisons == 12 * 11 // 2
        assert ctx.counters.swaps == 0


class TestSelection:
    def test_comparisons_are_quadratic(self):
        ctx, _ = run("selection", [9, 3, 7, 1, 5])
        assert ctx.counters.comparisons == 10

    def test_swap_marks_prefix_sorted(self):
        _, highlights = run("selection", [2, 1, 3])
        assert Swapping(0, 1, sorted_upto=0) in highlights
        assert SortedUpTo(1) in highlights


class TestInsertion:
    def test_sorted_input_is_linear(self):
        ctx, highlights = run("insertion", [1, 2, 3, 4, 5])
        snap = ctx.counters.snapshot()
        assert snap.comparisons == 4
        assert snap.swaps == 0
        assert snap.accesses == 8
        assert highlights[-1] == SortedUpTo(4)

    def test_shift_accounting(self):
        """One shift: key read, shift (+1 swap, +2 accesses), key write."""
        ctx, _ = run("insertion", [2, 1])
        snap = ctx.counters.snapshot()
        assert (snap.comparisons, snap.swaps, snap.accesses) == (1, 1, 4)

    def test_array_keeps_its_elements_at_every_step(self):
        values = [6, 2, 9, 1, 5]
        ctx = RunContext(list(values))
        for _ in get_algorithm("insertion").fn(ctx):
            assert sorted(ctx.array.to_list()) == sorted(values)


class TestMerge:
    def test_two_elements(self):
        ctx, highlights = run("merge", [2, 1])
        snap = ctx.counters.snapshot()
        assert ctx.array.to_list() == [1, 2]
        assert (snap.comparisons, snap.swaps, snap.accesses) == (1, 1, 4)
        assert all(isinstance(h, Comparing) for h in highlights)

    def test_duplicates_take_left_first(self):
        items = [_Keyed(k, t) for t, k in enumerate([4, 2, 4, 1])]
        ctx, _ = run("merge", items)
        assert [(it.key, it.tag) for it in ctx.array] == [(1, 3), (2, 1), (4, 0), (4, 2)]

    def test_closing_midway_restores_elements(self):
        values = [8, 3, 5, 1, 9, 2, 7, 4]
        ctx = RunContext(list(values))
        steps = get_algorithm("merge").fn(ctx)
        for _ in range(11):
            next(steps)
        steps.close()
        assert sorted(ctx.array.to_list()) == sorted(values)


class TestQuick:
    def test_last_element_pivot(self):
        ctx, highlights = run("quick", [3, 1, 2])
        snap = ctx.counters.snapshot()
        assert ctx.array.to_list() == [1, 2, 3]
        assert (snap.comparisons, snap.swaps, snap.accesses) == (2, 2, 5)
        assert highlights[0] == Comparing((0, 2))
        assert highlights[-1] == Swapping(1, 2)

    def test_stop_flag_ends_recursion(self):
        ctx = RunContext([5, 4, 3, 2, 1, 0])
        steps = get_algorithm("quick").fn(ctx)
        next(steps)
        ctx.token.request_stop()
        remaining = list(steps)
        # at most the rest of the current partition
        assert len(remaining) <= 6


class TestHeap:
    def test_only_swaps_are_yielded(self):
        _, highlights = run("heap", [4, 10, 3, 5, 1])
        assert highlights
        assert all(isinstance(h, Swapping) for h in highlights)

    def test_extraction_marks_suffix(self):
        _, highlights = run("heap", [1, 2, 3])
        assert Swapping(0, 2, sorted_from=2) in highlights
