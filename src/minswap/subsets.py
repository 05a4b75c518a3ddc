"""Subsets of an n-element set in lexicographic (binary counting) order.

A subset is an n-bit pattern: bit i is set when element i belongs to
the subset.  Stepping forward adds one to the pattern read as an
unsigned binary number, so for n = 3 the order is::

    000 -> ()   001 -> (0)   010 -> (1)   011 -> (0 1)
    100 -> (2)  101 -> (0 2) 110 -> (1 2) 111 -> (0 1 2)

(written most-significant bit first, i.e. element 2 on the left).  The
empty pattern can be excluded, in which case the counter starts at
``001``.

:class:`SubsetCursor` walks the positions of the set bits, forwards
and backwards, and is what turns the pattern into concrete elements.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

#: Cursor position past the last set bit.
NPOS = -1


def _find_first(bits: int) -> int:
    """Return the position of the lowest set bit, or :data:`NPOS`."""
    if bits == 0:
        return NPOS
    return (bits & -bits).bit_length() - 1


def _find_next(bits: int, pos: int) -> int:
    """Return the position of the lowest set bit above *pos*, or :data:`NPOS`."""
    return _find_first((bits >> (pos + 1)) << (pos + 1))


class LexicographicSubset:
    """Bidirectional counter over the subsets of n elements.

    Args:
        n: Number of elements (positive).
        include_empty: Whether the empty set is part of the sequence.
            When ``False`` the counter starts at ``{0}``.
        start_at_full: Start from the full set (the last subset) instead
            of the first one.

    Raises:
        ValueError: If *n* is not positive.
    """

    def __init__(
        self, n: int, include_empty: bool = True, start_at_full: bool = False
    ) -> None:
        if n <= 0:
            raise ValueError("Number of elements must be positive")
        self._n = n
        self._include_empty = include_empty
        self._lowest = 0 if include_empty else 1
        self._highest = (1 << n) - 1
        self._bits = self._highest if start_at_full else self._lowest

    # ---- State queries --------------------------------------------

    def max_size(self) -> int:
        """Return n, the size of the full set."""
        return self._n

    def size(self) -> int:
        """Return the number of elements in the current subset."""
        return self._bits.bit_count()

    @property
    def include_empty(self) -> bool:
        return self._include_empty

    @property
    def bits(self) -> int:
        """The current pattern as a non-negative integer."""
        return self._bits

    def has_next(self) -> bool:
        """Return ``True`` unless the current subset is the full set."""
        return self._bits < self._highest

    def has_prev(self) -> bool:
        """Return ``True`` unless the current subset is the first one."""
        return self._bits > self._lowest

    def to_mask(self) -> np.ndarray:
        """Return the pattern as a boolean array, element i at index i."""
        return np.array([(self._bits >> i) & 1 for i in range(self._n)], dtype=bool)

    # ---- Stepping -------------------------------------------------

    def next(self) -> LexicographicSubset:
        """Step to the next subset.

        Raises:
            OverflowError: If the current subset is the full set.
        """
        if not self.has_next():
            raise OverflowError("No following subsets")
        self._bits += 1
        return self

    def prev(self) -> LexicographicSubset:
        """Step to the previous subset.

        Raises:
            OverflowError: If the current subset is the first one.
        """
        if not self.has_prev():
            raise OverflowError("No preceding subsets")
        self._bits -= 1
        return self

    # ---- Positions ------------------------------------------------

    def begin(self) -> SubsetCursor:
        """Return a cursor on the lowest set position."""
        return SubsetCursor(self, _find_first(self._bits))

    def end(self) -> SubsetCursor:
        """Return the past-the-end cursor."""
        return SubsetCursor(self, NPOS)

    def positions(self) -> list[int]:
        """Return the positions of the elements in the current subset."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        cursor = self.begin()
        end = self.end()
        while cursor != end:
            yield cursor.position
            cursor += 1

    def __call__(self, values: Sequence[Any]) -> list[Any]:
        """Return the current subset of *values*; see :func:`materialize_subset`."""
        return materialize_subset(self, values)

    def __str__(self) -> str:
        return "(" + " ".join(str(pos) for pos in self) + ")"

    def __repr__(self) -> str:
        return (
            f"LexicographicSubset(n={self._n}, "
            f"bits={self._bits:0{self._n}b}, include_empty={self._include_empty})"
        )


class SubsetCursor:
    """Bidirectional cursor over the set positions of a subset.

    Moving forward jumps to the next set bit; moving backward rescans
    from the lowest set bit, as a bitset offers no reverse search.
    Moving past the last set bit yields :data:`NPOS`, which is then
    fixed under further advances; moving back from :data:`NPOS` lands
    on the highest set bit.
    """

    def __init__(self, subset: LexicographicSubset, pos: int) -> None:
        self._subset = subset
        self._pos = pos

    @property
    def position(self) -> int:
        return self._pos

    def advance(self) -> SubsetCursor:
        if self._pos == NPOS:
            return self
        self._pos = _find_next(self._subset.bits, self._pos)
        return self

    def retreat(self) -> SubsetCursor:
        bits = self._subset.bits
        pos = NPOS
        scan = _find_first(bits)
        while scan != self._pos and scan != NPOS:
            pos = scan
            scan = _find_next(bits, scan)
        self._pos = pos
        return self

    def __iadd__(self, steps: int) -> SubsetCursor:
        if steps > 0:
            for _ in range(steps):
                self.advance()
        else:
            for _ in range(-steps):
                self.retreat()
        return self

    def __isub__(self, steps: int) -> SubsetCursor:
        return self.__iadd__(-steps)

    def __add__(self, steps: int) -> SubsetCursor:
        cursor = SubsetCursor(self._subset, self._pos)
        cursor += steps
        return cursor

    def __sub__(self, steps: int) -> SubsetCursor:
        return self.__add__(-steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubsetCursor):
            return NotImplemented
        return self._subset is other._subset and self._pos == other._pos

    def __hash__(self) -> int:
        return hash((id(self._subset), self._pos))

    def __repr__(self) -> str:
        return f"SubsetCursor(position={self._pos})"


def materialize_subset(subset: LexicographicSubset, values: Sequence[Any]) -> list[Any]:
    """Pick the elements of *values* selected by *subset*.

    Args:
        subset: The subset state.
        values: Exactly ``subset.max_size()`` values.

    Returns:
        A fresh list of the selected values, in position order.

    Raises:
        ValueError: If ``len(values)`` does not match.
    """
    if len(values) != subset.max_size():
        raise ValueError(
            f"Size does not match: subset has {subset.max_size()} "
            f"elements, got {len(values)} values."
        )
    return [values[pos] for pos in subset]


def next_subset(values: Sequence[Any], subset: LexicographicSubset) -> list[Any]:
    """Return the current subset of *values*, then step *subset* forward if it can."""
    selected = subset(values)
    if subset.has_next():
        subset.next()
    return selected


def prev_subset(values: Sequence[Any], subset: LexicographicSubset) -> list[Any]:
    """Return the current subset of *values*, then step *subset* back if it can."""
    selected = subset(values)
    if subset.has_prev():
        subset.prev()
    return selected


def iter_subsets(
    values: Sequence[Any], include_empty: bool = True, reverse: bool = False
) -> Iterator[list[Any]]:
    """Yield every subset of *values* in lexicographic order.

    Args:
        values: The elements to choose from (at least one).
        include_empty: Whether to yield the empty subset.
        reverse: Start from the full set and walk backwards.

    Yields:
        Lists of selected values, ``count_each_subset(len(values),
        include_empty)`` of them in total.
    """
    subset = LexicographicSubset(
        len(values), include_empty=include_empty, start_at_full=reverse
    )
    logger.debug("iter_subsets: n=%d reverse=%s", len(values), reverse)
    while True:
        yield subset(values)
        if reverse:
            if not subset.has_prev():
                return
            subset.prev()
        else:
            if not subset.has_next():
                return
            subset.next()
