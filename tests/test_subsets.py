"""Tests for the subset enumerator and its position cursor."""

import numpy as np
import pytest

from minswap import (
    LexicographicSubset,
    SubsetCursor,
    count_each_subset,
    iter_subsets,
    materialize_subset,
    next_subset,
    prev_subset,
)
from minswap.subsets import NPOS

N3_ORDER = ["()", "(0)", "(1)", "(0 1)", "(2)", "(0 2)", "(1 2)", "(0 1 2)"]


def _at(n: int, bits: int, include_empty: bool = True) -> LexicographicSubset:
    subset = LexicographicSubset(n, include_empty=include_empty)
    while subset.bits < bits:
        subset.next()
    return subset


class TestLexicographicSubset:
    def test_forward_order_n3(self):
        subset = LexicographicSubset(3)
        seen = [str(subset)]
        while subset.has_next():
            seen.append(str(subset.next()))
        assert seen == N3_ORDER

    def test_patterns_strictly_increase(self):
        subset = LexicographicSubset(3)
        bits = [subset.bits]
        while subset.has_next():
            bits.append(subset.next().bits)
        assert bits == list(range(8))

    def test_without_empty_set(self):
        subset = LexicographicSubset(3, include_empty=False)
        assert str(subset) == "(0)"
        assert not subset.has_prev()
        seen = [str(subset)]
        while subset.has_next():
            seen.append(str(subset.next()))
        assert seen == N3_ORDER[1:]

    def test_backward_order(self):
        subset = _at(3, 7)
        seen = [str(subset)]
        while subset.has_prev():
            seen.append(str(subset.prev()))
        assert seen == N3_ORDER[::-1]

    def test_size_is_popcount(self):
        subset = LexicographicSubset(5)
        while subset.has_next():
            subset.next()
            assert subset.size() == bin(subset.bits).count("1")
            assert subset.size() == len(subset.positions())
        assert subset.size() == subset.max_size() == 5

    def test_to_mask(self):
        np.testing.assert_array_equal(_at(3, 0b101).to_mask(), [True, False, True])

    def test_repr(self):
        assert repr(_at(4, 0b0110)) == (
            "LexicographicSubset(n=4, bits=0110, include_empty=True)"
        )

    def test_zero_elements(self):
        with pytest.raises(ValueError, match="positive"):
            LexicographicSubset(0)

    def test_step_past_ends(self):
        subset = LexicographicSubset(2)
        with pytest.raises(OverflowError, match="No preceding"):
            subset.prev()
        subset.next().next().next()
        with pytest.raises(OverflowError, match="No following"):
            subset.next()

    def test_large_n(self):
        subset = LexicographicSubset(100)
        subset.next()
        assert subset.positions() == [0]
        assert subset.has_next()

    def test_start_at_full(self):
        subset = LexicographicSubset(3, start_at_full=True)
        assert subset.bits == 0b111
        assert str(subset) == "(0 1 2)"
        assert not subset.has_next()
        assert subset.has_prev()

    def test_start_at_full_walks_back_to_first(self):
        subset = LexicographicSubset(3, include_empty=False, start_at_full=True)
        seen = [str(subset)]
        while subset.has_prev():
            seen.append(str(subset.prev()))
        assert seen == N3_ORDER[:0:-1]

    def test_start_at_full_large_n(self):
        subset = LexicographicSubset(200, start_at_full=True)
        assert subset.size() == 200
        assert subset.positions() == list(range(200))


class TestSubsetCursor:
    def test_forward_walk(self):
        subset = _at(4, 0b1011)
        cursor = subset.begin()
        positions = []
        while cursor != subset.end():
            positions.append(cursor.position)
            cursor += 1
        assert positions == [0, 1, 3]

    def test_backward_walk_from_end(self):
        subset = _at(4, 0b1011)
        cursor = subset.end()
        cursor -= 1
        assert cursor.position == 3
        cursor -= 1
        assert cursor.position == 1
        assert (cursor - 1).position == 0
        assert (cursor - 2).position == NPOS

    def test_advancing_end_stays_at_end(self):
        subset = _at(3, 0b011)
        cursor = subset.end()
        cursor += 1
        assert cursor.position == NPOS
        assert cursor == subset.end()
        assert (subset.end() + 3).position == NPOS

    def test_walk_past_last_stays_at_end(self):
        subset = _at(4, 0b0110)
        cursor = subset.begin() + 5
        assert cursor == subset.end()

    def test_arithmetic_returns_new_cursor(self):
        subset = _at(4, 0b1011)
        cursor = subset.begin()
        moved = cursor + 2
        assert cursor.position == 0
        assert moved.position == 3
        assert moved - 2 == cursor

    def test_empty_subset_begin_is_end(self):
        subset = LexicographicSubset(3)
        assert subset.begin() == subset.end()
        assert list(subset) == []

    def test_cursors_on_different_subsets_differ(self):
        a = _at(3, 1)
        b = _at(3, 1)
        assert a.begin() != b.begin()
        assert isinstance(a.begin(), SubsetCursor)


class TestMaterialize:
    def test_selects_positions(self):
        subset = _at(3, 0b110)
        assert materialize_subset(subset, ["a", "b", "c"]) == ["b", "c"]
        assert subset("abc") == ["b", "c"]

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="Size does not match"):
            LexicographicSubset(3)(["a"])

    def test_next_subset_returns_current_then_steps(self):
        subset = LexicographicSubset(2)
        assert next_subset("ab", subset) == []
        assert next_subset("ab", subset) == ["a"]
        assert subset.bits == 2

    def test_helpers_stop_at_the_ends(self):
        subset = _at(2, 3)
        assert next_subset("ab", subset) == ["a", "b"]
        assert subset.bits == 3
        subset = LexicographicSubset(2)
        assert prev_subset("ab", subset) == []
        assert subset.bits == 0


class TestIterSubsets:
    @pytest.mark.parametrize("n", range(1, 7))
    @pytest.mark.parametrize("include_empty", [True, False])
    def test_count(self, n, include_empty):
        subsets = list(iter_subsets(list(range(n)), include_empty=include_empty))
        assert len(subsets) == count_each_subset(n, include_empty=include_empty)
        assert len({tuple(s) for s in subsets}) == len(subsets)

    def test_reverse(self):
        forward = list(iter_subsets("abcd"))
        assert list(iter_subsets("abcd", reverse=True)) == forward[::-1]

    def test_reverse_starts_at_full_set(self):
        values = list(range(200))
        assert next(iter_subsets(values, reverse=True)) == values

    def test_reverse_without_empty_set(self):
        subsets = list(iter_subsets("abc", include_empty=False, reverse=True))
        assert subsets[0] == ["a", "b", "c"]
        assert subsets[-1] == ["a"]
        assert len(subsets) == 7
