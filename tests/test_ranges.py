"""Tests for the in-place range primitives."""

import numpy as np
import pytest

from minswap._ranges import (
    resolve_region,
    reverse,
    rotate,
    rotate_discontinuous,
    rotate_discontinuous3,
    swap_ranges,
)

GAP = "x"

# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


def _layout(sizes: list[int]) -> tuple[list, list[tuple[int, int]]]:
    """Build ``[r1, x, r2, x, r3]`` with the ranges numbered consecutively.

    Returns the sequence and the ``(first, last)`` bounds of each range.
    """
    seq: list = []
    bounds = []
    value = 0
    for k, size in enumerate(sizes):
        if k:
            seq.append(GAP)
        start = len(seq)
        seq.extend(range(value, value + size))
        value += size
        bounds.append((start, len(seq)))
    return seq, bounds


def _logical(seq: list, bounds: list[tuple[int, int]]) -> list:
    return [v for first, last in bounds for v in seq[first:last]]


class TestReverseAndRotate:
    def test_reverse_full(self):
        seq = [1, 2, 3, 4, 5]
        reverse(seq, 0, 5)
        assert seq == [5, 4, 3, 2, 1]

    def test_reverse_subrange(self):
        seq = [1, 2, 3, 4, 5]
        reverse(seq, 1, 4)
        assert seq == [1, 4, 3, 2, 5]

    def test_reverse_empty_range_is_noop(self):
        seq = [1, 2]
        reverse(seq, 1, 1)
        assert seq == [1, 2]

    def test_rotate_brings_middle_to_front(self):
        seq = [0, 1, 2, 3, 4]
        rotate(seq, 0, 2, 5)
        assert seq == [2, 3, 4, 0, 1]

    def test_rotate_numpy(self):
        arr = np.arange(6)
        rotate(arr, 1, 3, 6)
        np.testing.assert_array_equal(arr, [0, 3, 4, 5, 1, 2])

    def test_swap_ranges_returns_end_of_second(self):
        seq = [0, 1, 2, 3, 4, 5]
        end = swap_ranges(seq, 0, 2, 3)
        assert end == 5
        assert seq == [3, 4, 2, 0, 1, 5]


class TestRotateDiscontinuous:
    """Rotation of two ranges separated by a gap."""

    def test_longer_first_range(self):
        seq = [0, 1, 2, GAP, 3, 4]
        rotate_discontinuous(seq, 0, 3, 3, 4, 6, 2)
        assert seq == [3, 4, 0, GAP, 1, 2]

    def test_shorter_first_range(self):
        seq = [0, 1, GAP, 2, 3, 4]
        rotate_discontinuous(seq, 0, 2, 2, 3, 6, 3)
        assert seq == [2, 3, GAP, 4, 0, 1]

    def test_adjacent_ranges_match_rotate(self):
        seq = list(range(7))
        expected = list(range(7))
        rotate(expected, 0, 3, 7)
        rotate_discontinuous(seq, 0, 3, 3, 3, 7, 4)
        assert seq == expected

    @pytest.mark.parametrize("d1, d2", [(1, 1), (1, 4), (4, 1), (3, 3), (2, 5)])
    def test_gap_is_untouched(self, d1, d2):
        seq, ((f1, l1), (f2, l2)) = _layout([d1, d2])
        before = _logical(seq, [(f1, l1), (f2, l2)])
        rotate_discontinuous(seq, f1, l1, d1, f2, l2, d2)
        assert seq[l1] == GAP
        after = _logical(seq, [(f1, l1), (f2, l2)])
        assert after == before[d1:] + before[:d1]


class TestRotateDiscontinuous3:
    """Rotation of three ranges separated by gaps."""

    def test_known_case(self):
        seq = [0, 1, 2, GAP, 3, GAP, 4, 5]
        rotate_discontinuous3(seq, 0, 3, 3, 4, 5, 1, 6, 8, 2)
        assert seq == [3, 4, 5, GAP, 0, GAP, 1, 2]

    @pytest.mark.parametrize(
        "sizes",
        [[1, 2, 1], [3, 1, 2], [2, 2, 2], [1, 3, 3], [4, 2, 1], [2, 1, 4]],
    )
    def test_matches_logical_rotation(self, sizes):
        seq, bounds = _layout(sizes)
        before = _logical(seq, bounds)
        (f1, l1), (f2, l2), (f3, l3) = bounds
        rotate_discontinuous3(
            seq, f1, l1, sizes[0], f2, l2, sizes[1], f3, l3, sizes[2]
        )
        assert seq.count(GAP) == 2
        assert seq[l1] == GAP and seq[l2] == GAP
        d1 = sizes[0]
        assert _logical(seq, bounds) == before[d1:] + before[:d1]


class TestResolveRegion:
    def test_defaults_last_to_length(self):
        assert resolve_region([0] * 5, 0, 2, None) == (0, 2, 5)

    def test_accepts_empty_regions(self):
        assert resolve_region([], 0, 0, None) == (0, 0, 0)

    @pytest.mark.parametrize(
        "first, mid, last",
        [(0, 6, None), (3, 2, 5), (0, 2, 6), (-1, 2, 5), (2, 3, 2)],
    )
    def test_rejects_bad_bounds(self, first, mid, last):
        with pytest.raises(ValueError, match="Region bounds"):
            resolve_region([0] * 5, first, mid, last)
