"""Tests for the lexicographic successor/predecessor functions."""

import math

import numpy as np
import pytest

from minswap import (
    next_combination,
    next_mapping,
    next_repeat_combination_counts,
    prev_combination,
    prev_mapping,
    prev_repeat_combination_counts,
)


def _forward_combinations(seq: list, r: int, **kwargs) -> list[list]:
    seen = [list(seq[:r])]
    while next_combination(seq, r, **kwargs):
        seen.append(list(seq[:r]))
    return seen


class TestNextCombination:
    def test_four_choose_two_in_order(self):
        seq = [1, 2, 3, 4]
        assert _forward_combinations(seq, 2) == [
            [1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]
        ]

    def test_wraps_to_sorted(self):
        seq = [3, 4, 1, 2]
        assert next_combination(seq, 2) is False
        assert seq == [1, 2, 3, 4]

    def test_unselected_tail_stays_sorted(self):
        seq = [1, 2, 3, 4, 5]
        while next_combination(seq, 2):
            assert seq[2:] == sorted(seq[2:])
            assert seq[:2] == sorted(seq[:2])

    @pytest.mark.parametrize("n, r", [(5, 2), (6, 3), (7, 1), (7, 6)])
    def test_count_matches_binomial(self, n, r):
        seen = _forward_combinations(list(range(n)), r)
        assert len(seen) == math.comb(n, r)
        assert seen == sorted(seen)

    def test_empty_selection_or_tail(self):
        seq = [1, 2, 3]
        assert next_combination(seq, 0) is False
        assert next_combination(seq, 3) is False
        assert seq == [1, 2, 3]

    def test_key_function(self):
        seq = [4, 3, 2, 1]
        seen = _forward_combinations(seq, 2, key=lambda v: -v)
        assert seen[:3] == [[4, 3], [4, 2], [4, 1]]
        assert len(seen) == 6

    def test_subrange(self):
        seq = [9, 1, 2, 3, 0]
        assert next_combination(seq, 2, first=1, last=4) is True
        assert seq == [9, 2, 1, 3, 0]

    def test_numpy_array(self):
        arr = np.array([1, 2, 3, 4])
        steps = 0
        while next_combination(arr, 2):
            steps += 1
        assert steps == 5
        np.testing.assert_array_equal(arr, [1, 2, 3, 4])

    def test_bad_bounds(self):
        with pytest.raises(ValueError, match="Region bounds"):
            next_combination([1, 2], 3)


class TestPrevCombination:
    def test_smallest_wraps_to_largest(self):
        seq = [1, 2, 3, 4]
        assert prev_combination(seq, 2) is False
        assert seq == [3, 4, 1, 2]

    def test_reverses_forward_order(self):
        forward = _forward_combinations([1, 2, 3, 4, 5], 3)
        seq = [1, 2, 3, 4, 5]
        prev_combination(seq, 3)
        backward = [list(seq[:3])]
        while prev_combination(seq, 3):
            backward.append(list(seq[:3]))
        assert backward == forward[::-1]

    def test_inverse_of_next(self):
        seq = [1, 2, 3, 4, 5, 6]
        for _ in range(7):
            next_combination(seq, 3)
        snapshot = list(seq)
        next_combination(seq, 3)
        prev_combination(seq, 3)
        assert seq == snapshot


class TestMapping:
    def test_odometer_order(self):
        seq = [0, 0]
        seen = [tuple(seq)]
        while next_mapping(seq, 0, 3):
            seen.append(tuple(seq))
        assert seen == [(a, b) for a in range(3) for b in range(3)]
        assert seq == [0, 0]

    def test_prev_wraps_to_largest(self):
        seq = [0, 0, 0]
        assert prev_mapping(seq, 0, 2) is False
        assert seq == [1, 1, 1]

    def test_prev_borrows(self):
        seq = [1, 0]
        assert prev_mapping(seq, 0, 3) is True
        assert seq == [0, 2]

    def test_prev_inverts_next(self):
        seq = [2, 0, 1]
        next_mapping(seq, 0, 3)
        assert seq == [2, 0, 2]
        prev_mapping(seq, 0, 3)
        assert seq == [2, 0, 1]

    def test_custom_step(self):
        letters = "abc"
        seq = ["a", "c"]
        step = lambda v: letters[letters.index(v) + 1] if v != "c" else "end"  # noqa: E731
        assert next_mapping(seq, "a", "end", increment=step) is True
        assert seq == ["b", "a"]

    def test_empty_range(self):
        assert next_mapping([], 0, 3) is False
        assert prev_mapping([], 0, 3) is False

    def test_numpy_digits(self):
        arr = np.zeros(3, dtype=int)
        steps = 1
        while next_mapping(arr, 0, 4):
            steps += 1
        assert steps == 4**3


class TestRepeatCombinationCounts:
    def test_forward_sequence(self):
        seq = [0, 0, 2]
        seen = [tuple(seq)]
        while next_repeat_combination_counts(seq):
            seen.append(tuple(seq))
        assert seen == [
            (0, 0, 2),
            (0, 1, 1),
            (0, 2, 0),
            (1, 0, 1),
            (1, 1, 0),
            (2, 0, 0),
        ]
        assert seq == [0, 0, 2]

    def test_backward_sequence(self):
        seq = [0, 0, 2]
        assert prev_repeat_combination_counts(seq) is False
        assert seq == [2, 0, 0]
        seen = [tuple(seq)]
        while prev_repeat_combination_counts(seq):
            seen.append(tuple(seq))
        assert seen[-1] == (0, 0, 2)
        assert len(seen) == 6

    @pytest.mark.parametrize("symbols, k", [(3, 3), (4, 2), (2, 5)])
    def test_count_is_multichoose(self, symbols, k):
        seq = [0] * (symbols - 1) + [k]
        steps = 1
        while next_repeat_combination_counts(seq):
            assert sum(seq) == k
            steps += 1
        assert steps == math.comb(symbols + k - 1, k)

    def test_single_symbol(self):
        seq = [3]
        assert next_repeat_combination_counts(seq) is False
        assert seq == [3]
