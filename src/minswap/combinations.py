"""Minimal-swap combination engine.

Given a sequence split at ``mid`` into a *selected* region
``[first, mid)`` of size r and an *unselected* region ``[mid, last)``
of size n − r, the engine swaps elements between the two regions so
that every r-combination of the n elements passes through
``[first, mid)`` exactly once, calling back after each arrangement.

How it works
------------
:func:`combine_discontinuous` is recursive on the size of the first
region.  With one element selected it sweeps that element through the
second region by adjacent transpositions.  With more, it fixes the head
element, recurses on the remaining d1 − 1 elements against a shrinking
tail of the second region, then swaps the head into the next position
of the second region and repeats.  After each level has been exhausted
a discontinuous rotation (:mod:`minswap._ranges`) puts the level back
in order, so that the *net* effect of a complete traversal is the
identity.  No element is moved that does not have to be.

:func:`combine_discontinuous3` is the same idea with the second region
itself split in two; the reversible permutation adapters use it to
enumerate arrangements across the "hole" left by a pinned middle
element.

Early exit
----------
A continuation that returns ``True`` aborts the traversal immediately.
The sequence is then left in a valid but unspecified arrangement of its
original elements: restoring the order is the caller's job (e.g. take a
copy beforehand).

Reference: H. Hinnant, "Combinations and Permutations" (2005–2011),
http://howardhinnant.github.io/combinations.html
"""

from __future__ import annotations

import logging

from ._ranges import (
    recursion_headroom,
    resolve_region,
    rotate_discontinuous,
    rotate_discontinuous3,
)
from ._typing import Continuation, RangeCallback, SequenceLike

logger = logging.getLogger(__name__)


def combine_discontinuous(
    seq: SequenceLike,
    first1: int,
    last1: int,
    d1: int,
    first2: int,
    last2: int,
    d2: int,
    f: Continuation,
    d: int = 0,
) -> bool:
    """Call ``f()`` for each combination of ``[first1, last1) + [first2, last2)``.

    Each combination is swapped/rotated into ``[first1, last1)``.  As
    long as ``f()`` returns ``False`` every combination is visited and
    both ranges are then returned to their original state; ``f()`` is
    called exactly ``C(d1 + d2, d1)`` times.

    Args:
        seq: Sequence holding both ranges.
        first1, last1, d1: First range and its length.
        first2, last2, d2: Second range and its length.
        f: Continuation; returning ``True`` stops the traversal.
        d: Recursion depth.  Only the outermost call (``d == 0``)
            rotates the full second range back into place.

    Returns:
        ``True`` if ``f()`` requested a stop, ``False`` otherwise.
    """
    if d1 == 0 or d2 == 0:
        return f()

    if d1 == 1:
        for i2 in range(first2, last2):
            if f():
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
    else:
        f1p = first1 + 1
        d22 = d2
        for i2 in range(first2, last2):
            if combine_discontinuous(seq, f1p, last1, d1 - 1, i2, last2, d22, f, d + 1):
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
            d22 -= 1

    if f():
        return True
    if d != 0:
        rotate_discontinuous(seq, first1, last1, d1, first2 + 1, last2, d2 - 1)
    else:
        rotate_discontinuous(seq, first1, last1, d1, first2, last2, d2)

    return False


def _combine_discontinuous3(
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
    f: Continuation,
    d: int = 0,
) -> bool:
    """Recursive worker for :func:`combine_discontinuous3`."""
    if d1 == 1:
        for i2 in range(first2, last2):
            if f():
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
        if f():
            return True
        # Jump the hole between the second and third ranges.
        seq[first1], seq[last2 - 1] = seq[last2 - 1], seq[first1]
        seq[first1], seq[first3] = seq[first3], seq[first1]
        for i2 in range(first3 + 1, last3):
            if f():
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
    else:
        f1p = first1 + 1
        d22 = d2
        for i2 in range(first2, last2):
            if _combine_discontinuous3(
                seq, f1p, last1, d1 - 1, i2, last2, d22, first3, last3, d3, f, d + 1
            ):
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
            d22 -= 1
        d22 = d3
        for i2 in range(first3, last3):
            if combine_discontinuous(seq, f1p, last1, d1 - 1, i2, last3, d22, f, d + 1):
                return True
            seq[first1], seq[i2] = seq[i2], seq[first1]
            d22 -= 1

    if f():
        return True
    if d1 == 1:
        seq[last2 - 1], seq[first3] = seq[first3], seq[last2 - 1]
    if d != 0:
        if d2 > 1:
            rotate_discontinuous3(
                seq, first1, last1, d1, first2 + 1, last2, d2 - 1, first3, last3, d3
            )
        else:
            rotate_discontinuous(seq, first1, last1, d1, first3, last3, d3)
    else:
        rotate_discontinuous3(seq, first1, last1, d1, first2, last2, d2, first3, last3, d3)
    return False


def combine_discontinuous3(
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
    f: Continuation,
) -> bool:
    """Like :func:`combine_discontinuous` over three ranges.

    Swaps/rotates each combination out of
    ``[first1, last1) + [first2, last2) + [first3, last3)`` into
    ``[first1, last1)``, and for each one also runs through every
    combination of the remaining elements between the second and third
    ranges.  If ``f()`` always returns ``False`` it is called
    ``(d1 + d2 + d3)! / (d1! · d2! · d3!)`` times.

    Returns:
        ``True`` if ``f()`` requested a stop, ``False`` otherwise.
    """

    def fbc() -> bool:
        return combine_discontinuous(seq, first2, last2, d2, first3, last3, d3, f)

    return _combine_discontinuous3(
        seq, first1, last1, d1, first2, last2, d2, first3, last3, d3, fbc
    )


# ------------------------------------------------------------------ #
# Callback binding
# ------------------------------------------------------------------ #


def bound_range(
    func: RangeCallback, seq: SequenceLike, first: int, last: int
) -> Continuation:
    """Bind *func* to a fixed range, producing an engine continuation.

    The returned callable accepts (and ignores) any positional
    arguments, so it also serves where a range callback is expected.
    """

    def call(*_: object) -> bool:
        return bool(func(seq, first, last))

    return call


def _check_callable(func: RangeCallback) -> None:
    if not callable(func):
        raise TypeError(f"Callback must be callable, got {type(func).__name__}.")


def for_each_combination(
    seq: SequenceLike,
    mid: int,
    func: RangeCallback,
    *,
    first: int = 0,
    last: int | None = None,
) -> RangeCallback:
    """Call ``func(seq, first, mid)`` for each r-combination of ``seq[first:last]``.

    Each combination of size ``r = mid - first`` is placed in
    ``seq[first:mid]`` (in no particular order within the region); the
    order in which combinations are visited is the minimal-swap order,
    not lexicographic.  After a full traversal ``seq`` is back in its
    original order.

    Args:
        seq: A ``list`` or 1-D ``numpy.ndarray``, permuted in place.
        mid: End of the selected region.
        func: Callback ``func(seq, first, mid)``; a truthy return stops
            the enumeration and leaves ``seq`` in an unspecified order.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).

    Returns:
        *func* itself, so stateful visitors can be inspected.

    Raises:
        ValueError: If the bounds are invalid.
        TypeError: If *func* is not callable.
    """
    _check_callable(func)
    first, mid, last = resolve_region(seq, first, mid, last)
    d1 = mid - first
    d2 = last - mid
    logger.debug("for_each_combination: n=%d r=%d", d1 + d2, d1)

    wfunc = bound_range(func, seq, first, mid)
    with recursion_headroom(d1):
        stopped = combine_discontinuous(seq, first, mid, d1, mid, last, d2, wfunc)
    if stopped:
        logger.debug("for_each_combination stopped early by callback")
    return func
