"""In-place range primitives shared by the enumeration engines.

Every engine in this package works on a caller-owned sequence through
integer positions, never through slices or copies: the exact sequence
of element exchanges is what returns the sequence to its original order
after a full traversal.  The primitives here are therefore written as
explicit swap loops that behave identically on ``list`` and on 1-D
``numpy.ndarray`` inputs.

Discontinuous rotation
----------------------
A *discontinuous range* is two (or three) sub-ranges that an algorithm
treats as one logical sequence although other elements sit between
them.  ``rotate_discontinuous`` rotates such a pair so that the element
at the start of the second range ends up at the start of the first,
"jumping" the gap.  It uses whichever of two swap strategies touches
fewer elements: swap the shorter prefix forward and rotate the tail, or
swap inward from the right ends and rotate the head.
"""

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from ._config import get_max_recursion_limit
from ._typing import SequenceLike

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
# Element primitives
# ------------------------------------------------------------------ #


def swap(seq: SequenceLike, i: int, j: int) -> None:
    """Exchange ``seq[i]`` and ``seq[j]``."""
    seq[i], seq[j] = seq[j], seq[i]


def reverse(seq: SequenceLike, first: int, last: int) -> None:
    """Reverse ``seq[first:last]`` in place."""
    last -= 1
    while first < last:
        seq[first], seq[last] = seq[last], seq[first]
        first += 1
        last -= 1


def rotate(seq: SequenceLike, first: int, middle: int, last: int) -> None:
    """Rotate ``seq[first:last]`` so that ``seq[middle]`` moves to *first*."""
    if first == middle or middle == last:
        return
    reverse(seq, first, middle)
    reverse(seq, middle, last)
    reverse(seq, first, last)


def swap_ranges(seq: SequenceLike, first1: int, last1: int, first2: int) -> int:
    """Swap ``seq[first1:last1]`` element-wise with the range at *first2*.

    Returns:
        The position one past the last element swapped in the second
        range.
    """
    while first1 != last1:
        seq[first1], seq[first2] = seq[first2], seq[first1]
        first1 += 1
        first2 += 1
    return first2


# ------------------------------------------------------------------ #
# Discontinuous rotation
# ------------------------------------------------------------------ #


def rotate_discontinuous(
    seq: SequenceLike,
    first1: int,
    last1: int,
    d1: int,
    first2: int,
    last2: int,
    d2: int,
) -> None:
    """Rotate two discontinuous ranges to put ``seq[first2]`` at *first1*.

    If ``last1 == first2`` this is ``rotate(seq, first1, first2, last2)``;
    otherwise the rotation jumps over the gap ``[last1, first2)``.

    Args:
        seq: Sequence holding both ranges.
        first1, last1: Bounds of the first range.
        d1: Length of the first range.
        first2, last2: Bounds of the second range.
        d2: Length of the second range.
    """
    if d1 <= d2:
        rotate(seq, first2, swap_ranges(seq, first1, last1, first2), last2)
    else:
        i1 = last1
        while first2 != last2:
            i1 -= 1
            last2 -= 1
            seq[i1], seq[last2] = seq[last2], seq[i1]
        rotate(seq, first1, i1, last1)


def rotate_discontinuous3(
    seq: SequenceLike,
    first1: int,
    last1: int,
    d1: int,
    first2: int,
    last2: int,
    d2: int,
    first3: int,
    last3: int,
    d3: int,
) -> None:
    """Rotate three discontinuous ranges to put ``seq[first2]`` at *first1*.

    Same as :func:`rotate_discontinuous` with the second range split
    into ``[first2, last2) + [first3, last3)``.
    """
    rotate_discontinuous(seq, first1, last1, d1, first2, last2, d2)
    if d1 <= d2:
        rotate_discontinuous(seq, first2 + d2 - d1, last2, d1, first3, last3, d3)
    else:
        rotate_discontinuous(seq, first1 + d2, last1, d1 - d2, first3, last3, d3)
        rotate_discontinuous(seq, first2, last2, d2, first3, last3, d3)


# ------------------------------------------------------------------ #
# Entry-point guards
# ------------------------------------------------------------------ #


def resolve_region(
    seq: SequenceLike, first: int, mid: int, last: int | None
) -> tuple[int, int, int]:
    """Validate ``first <= mid <= last <= len(seq)`` and fill in *last*.

    Raises:
        ValueError: If the bounds are out of order or out of range.
    """
    size = len(seq)
    if last is None:
        last = size
    if not 0 <= first <= mid <= last <= size:
        raise ValueError(
            f"Region bounds must satisfy 0 <= first <= mid <= last <= "
            f"len(seq) (= {size}); got first={first}, mid={mid}, last={last}."
        )
    return first, mid, last


# Stack frames used per element of the selected region: one for the
# combination engine, one for the permutation engine, and two for the
# nested adapters of the reversible variants.
_FRAMES_PER_ELEMENT = 4
_FRAME_SLACK = 100


@contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
    """Make sure the interpreter can recurse *depth* levels deeper.

    The engines recurse once per element of the selected region.  When
    the current recursion limit is too low the limit is raised for the
    duration of the block (then restored), up to the ceiling returned
    by :func:`~minswap._config.get_max_recursion_limit`.

    Raises:
        ValueError: If the required limit exceeds the ceiling.
    """
    limit = sys.getrecursionlimit()
    extra = _FRAMES_PER_ELEMENT * depth + _FRAME_SLACK

    # Cheap exit for the common small-region case.
    if 2 * extra < limit:
        yield
        return

    needed = len(inspect.stack(0)) + extra
    if needed <= limit:
        yield
        return

    ceiling = get_max_recursion_limit()
    if needed > ceiling:
        raise ValueError(
            f"A selected region of size {depth} needs a recursion limit of "
            f"{needed}, above the configured maximum of {ceiling}.  Raise it "
            f"with set_max_recursion_limit() or MINSWAP_MAX_RECURSION_LIMIT."
        )

    logger.debug("Raising recursion limit from %d to %d", limit, needed)
    sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)
