"""Tests for the minimal-swap combination engine."""

import math

import numpy as np
import pytest

from minswap import CollectingVisitor, CountingVisitor, for_each_combination
from minswap.combinations import combine_discontinuous, combine_discontinuous3


class TestForEachCombination:
    """Counts, coverage and restoration of for_each_combination."""

    @pytest.mark.parametrize("n", range(0, 8))
    def test_call_count_is_binomial(self, n):
        for r in range(n + 1):
            visitor = for_each_combination(list(range(n)), r, CountingVisitor())
            assert visitor.count == math.comb(n, r)

    def test_four_choose_two(self):
        seq = [1, 2, 3, 4]
        visitor = for_each_combination(seq, 2, CollectingVisitor())
        assert len(visitor.items) == 6
        assert {frozenset(c) for c in visitor.items} == {
            frozenset(p) for p in [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
        }

    def test_first_call_sees_initial_selection(self):
        visitor = for_each_combination([1, 2, 3, 4], 2, CollectingVisitor())
        assert visitor.items[0] == [1, 2]

    @pytest.mark.parametrize("n, r", [(5, 2), (6, 3), (7, 1), (7, 6), (8, 4)])
    def test_every_combination_visited_once(self, n, r):
        visitor = for_each_combination(list(range(n)), r, CollectingVisitor())
        seen = [frozenset(c) for c in visitor.items]
        assert len(seen) == len(set(seen)) == math.comb(n, r)

    @pytest.mark.parametrize("n, r", [(5, 2), (6, 3), (7, 0), (7, 7), (9, 4)])
    def test_sequence_restored(self, n, r):
        seq = list(range(n))
        for_each_combination(seq, r, CountingVisitor())
        assert seq == list(range(n))

    def test_unselected_region_complements_selection(self):
        seq = list(range(6))

        def check(s, first, mid):
            assert sorted(s[first:mid] + s[mid:]) == list(range(6))

        for_each_combination(seq, 3, check)

    def test_returns_the_callback(self):
        visitor = CountingVisitor()
        assert for_each_combination([1, 2, 3], 1, visitor) is visitor

    def test_numpy_array(self):
        arr = np.arange(6)
        visitor = for_each_combination(arr, 3, CollectingVisitor())
        assert len(visitor.items) == 20
        np.testing.assert_array_equal(arr, np.arange(6))
        assert all(isinstance(v, int) for v in visitor.items[0])

    def test_subrange_leaves_outside_untouched(self):
        seq = list(range(8))

        def check(s, first, mid):
            assert (first, mid) == (2, 4)
            assert s[:2] == [0, 1] and s[6:] == [6, 7]

        for_each_combination(seq, 4, check, first=2, last=6)
        visitor = for_each_combination(
            seq, 4, CollectingVisitor(), first=2, last=6
        )
        assert len(visitor.items) == math.comb(4, 2)
        assert seq == list(range(8))

    def test_callback_receives_region_bounds(self):
        calls = []
        for_each_combination(
            list(range(5)), 3, lambda s, f, m: calls.append((f, m)), first=1
        )
        assert set(calls) == {(1, 3)}


class TestEarlyStop:
    def test_truthy_return_stops(self):
        visitor = for_each_combination(list(range(10)), 5, CountingVisitor(limit=7))
        assert visitor.count == 7

    def test_sequence_is_still_a_rearrangement(self):
        seq = list(range(10))
        for_each_combination(seq, 4, CollectingVisitor(limit=11))
        assert sorted(seq) == list(range(10))

    def test_stop_on_first_call(self):
        calls = []

        def stop(s, first, mid):
            calls.append(list(s[first:mid]))
            return True

        for_each_combination([1, 2, 3, 4], 2, stop)
        assert calls == [[1, 2]]


class TestValidation:
    def test_mid_past_end(self):
        with pytest.raises(ValueError, match="Region bounds"):
            for_each_combination([1, 2, 3], 4, CountingVisitor())

    def test_first_after_mid(self):
        with pytest.raises(ValueError, match="Region bounds"):
            for_each_combination([1, 2, 3], 1, CountingVisitor(), first=2)

    def test_not_callable(self):
        with pytest.raises(TypeError, match="callable"):
            for_each_combination([1, 2, 3], 1, 42)


class TestDiscontinuousEngines:
    """The engines work directly on split ranges."""

    def test_combine_discontinuous_across_gap(self):
        seq = [0, 1, "x", 2, 3, 4]
        seen = []

        def f():
            assert seq[2] == "x"
            seen.append(frozenset(seq[0:2]))
            return False

        assert combine_discontinuous(seq, 0, 2, 2, 3, 6, 3, f) is False
        assert len(seen) == len(set(seen)) == math.comb(5, 2)
        assert seq == [0, 1, "x", 2, 3, 4]

    def test_combine_discontinuous3_count(self):
        seq = [0, 1, "x", 2, 3, "y", 4]
        count = 0

        def f():
            nonlocal count
            count += 1
            return False

        combine_discontinuous3(seq, 0, 2, 2, 3, 5, 2, 6, 7, 1, f)
        # 5! / (2! 2! 1!)
        assert count == 30
        assert seq == [0, 1, "x", 2, 3, "y", 4]
