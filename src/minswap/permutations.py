"""In-place enumeration of permutations and their symmetry classes.

Every entry point splits the "r out of n" problem in two.  The
combination engine (:mod:`minswap.combinations`) brings each
r-combination into the selected region ``[first, mid)``; a per-variant
adapter then enumerates the arrangements of just those r elements.  Each
adapter only has to solve an "r out of r" problem.

Four symmetry classes are supported:

1. **Permutations** — all r! orderings of each combination
   (:func:`for_each_permutation`).

2. **Circular permutations** — orderings up to rotation.  The first
   element of the region is held fixed and the other r − 1 are
   permuted, giving (r − 1)! arrangements per combination
   (:func:`for_each_circular_permutation`).

3. **Reversible permutations** — orderings up to reversal, r!/2 per
   combination for r > 1 (:func:`for_each_reversible_permutation`).
   The region's original first element is walked from the front
   towards the middle; at each position the elements on either side of
   it are permuted as one discontinuous range, which visits exactly one
   of each reversal pair.

4. **Reversible circular permutations** — orderings up to rotation and
   reversal, (r − 1)!/2 per combination for r > 2
   (:func:`for_each_reversible_circular_permutation`): hold the first
   element and run the reversible algorithm over the rest.

The permutation engine
----------------------
:func:`permute` visits all d! orderings of a contiguous range.  Sizes 0
to 3 are unrolled; larger ranges recurse: permute the tail, reverse it,
swap the head with the next tail element, repeat.  :func:`permute`
restores the original order after a complete run.  Its helper
:func:`permute_`, used for the inner levels of the recursion, does
**not**: it leaves the range in whatever state the final swap produced,
and the caller (the reverse-and-swap loop of the level above) accounts
for it.  The asymmetry saves a reversal per level.

As with combinations, a callback that returns a truthy value stops the
enumeration at once and leaves the sequence in an unspecified order.

Reference: H. Hinnant, "Combinations and Permutations" (2005–2011),
http://howardhinnant.github.io/combinations.html
"""

from __future__ import annotations

import logging

from ._ranges import recursion_headroom, resolve_region, reverse, rotate
from ._typing import Continuation, RangeCallback, SequenceLike
from .combinations import (
    _check_callable,
    bound_range,
    combine_discontinuous,
    combine_discontinuous3,
    for_each_combination,
)

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
# Permutation engine
# ------------------------------------------------------------------ #


def permute_(seq: SequenceLike, first1: int, last1: int, d1: int, f: Continuation) -> bool:
    """Call ``f()`` for each permutation of ``seq[first1:last1]``.

    Inner-level helper of :func:`permute`: the range is *not* restored
    to its original order on return.

    Returns:
        ``True`` if ``f()`` requested a stop, ``False`` otherwise.
    """
    if d1 <= 1:
        return f()
    if d1 == 2:
        if f():
            return True
        seq[first1], seq[first1 + 1] = seq[first1 + 1], seq[first1]
        return f()
    if d1 == 3:
        if f():
            return True
        f2 = first1 + 1
        f3 = f2 + 1
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[first1], seq[f3] = seq[f3], seq[first1]
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[first1], seq[f2] = seq[f2], seq[first1]
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[f2], seq[f3] = seq[f3], seq[f2]
        return f()

    fp1 = first1 + 1
    for p in range(fp1, last1):
        if permute_(seq, fp1, last1, d1 - 1, f):
            return True
        reverse(seq, fp1, last1)
        seq[first1], seq[p] = seq[p], seq[first1]
    return permute_(seq, fp1, last1, d1 - 1, f)


def permute(seq: SequenceLike, first1: int, last1: int, d1: int, f: Continuation) -> bool:
    """Call ``f()`` for each permutation of ``seq[first1:last1]``.

    ``f()`` is called ``d1!`` times.  After a complete run the range is
    back in its original order.

    Args:
        seq: Sequence holding the range.
        first1, last1: Bounds of the range.
        d1: Length of the range.
        f: Continuation; returning ``True`` stops the traversal.

    Returns:
        ``True`` if ``f()`` requested a stop, ``False`` otherwise.
    """
    if d1 <= 1:
        return f()
    if d1 == 2:
        if f():
            return True
        i = first1 + 1
        seq[first1], seq[i] = seq[i], seq[first1]
        if f():
            return True
        seq[first1], seq[i] = seq[i], seq[first1]
    elif d1 == 3:
        if f():
            return True
        f2 = first1 + 1
        f3 = f2 + 1
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[first1], seq[f3] = seq[f3], seq[first1]
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[first1], seq[f2] = seq[f2], seq[first1]
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[f2], seq[f3] = seq[f3], seq[f2]
        if f():
            return True
        seq[first1], seq[f3] = seq[f3], seq[first1]
    else:
        fp1 = first1 + 1
        for p in range(fp1, last1):
            if permute_(seq, fp1, last1, d1 - 1, f):
                return True
            reverse(seq, fp1, last1)
            seq[first1], seq[p] = seq[p], seq[first1]
        if permute_(seq, fp1, last1, d1 - 1, f):
            return True
        reverse(seq, first1, last1)
    return False


def _call_permute(
    f: Continuation, seq: SequenceLike, first: int, last: int, d: int
) -> Continuation:
    """Bind a :func:`permute` run over ``[first, last)`` as a continuation."""

    def call() -> bool:
        return permute(seq, first, last, d, f)

    return call


def _rev2(
    f: Continuation,
    seq: SequenceLike,
    first1: int,
    last1: int,
    d1: int,
    first2: int,
    last2: int,
    d2: int,
) -> Continuation:
    """For each permutation of range 1, call ``f()`` for each permutation of range 2."""
    inner = _call_permute(f, seq, first2, last2, d2)

    def call() -> bool:
        return permute(seq, first1, last1, d1, inner)

    return call


def _rev3(
    f: Continuation,
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
) -> Continuation:
    """Nest :func:`_rev2` over ranges 2 and 3 inside permutations of range 1."""
    inner = _rev2(f, seq, first2, last2, d2, first3, last3, d3)

    def call() -> bool:
        return permute(seq, first1, last1, d1, inner)

    return call


# ------------------------------------------------------------------ #
# Symmetry-class adapters
# ------------------------------------------------------------------ #
#
# Each adapter is a range callback ``(seq, first, last) -> bool`` that
# for_each_combination calls once per combination.  ``s`` is the size
# of the selected region, fixed for the whole enumeration.


def _circular_permutation(func: RangeCallback, s: int) -> RangeCallback:
    """Hold the first element and permute ``[first + 1, last)``."""

    def call(seq: SequenceLike, first: int, last: int) -> bool:
        if s <= 1:
            return bool(func(seq, first, last))
        f = bound_range(func, seq, first, last)
        return permute(seq, first + 1, last, s - 1, f)

    return call


def _reversible_permutation(func: RangeCallback, s: int) -> RangeCallback:
    """Visit one member of each reversal pair of permutations of ``[first, last)``."""

    def call(seq: SequenceLike, first: int, last: int) -> bool:
        # Ranges of 0 to 2 elements have nothing to fold: each
        # combination is its own reversal class.
        if s < 3:
            return bool(func(seq, first, last))

        # Hold the first element steady and visit every permutation of
        # [first + 1, last).
        a = first + 1
        f = bound_range(func, seq, first, last)
        if permute(seq, a, last, s - 1, f):
            return True

        # Walk the original first element one step right at a time.  At
        # each stop, permute the discontinuous range
        # [before it] + [after it].
        s2 = s // 2
        am1 = first
        ap1 = a + 1
        for i in range(1, s2):
            seq[am1], seq[a] = seq[a], seq[am1]
            f2 = _rev2(f, seq, first, a, i, ap1, last, s - i - 1)
            if combine_discontinuous(seq, first, a, i, ap1, last, s - i - 1, f2):
                return True
            am1 += 1
            a += 1
            ap1 += 1

        if 2 * s2 == s:
            # Even length: one rotation restores the original order.
            rotate(seq, first, am1, a)
        elif s == 3:
            seq[am1], seq[a] = seq[a], seq[am1]
            if func(seq, first, last):
                return True
            seq[am1], seq[a] = seq[a], seq[am1]
        else:
            # Odd length above 3: with the original element in the
            # middle only half of the remaining permutations are needed.
            # Hold the current first element and permute
            # [first + 1, middle) + [middle + 1, last).
            seq[am1], seq[a] = seq[a], seq[am1]
            b = first
            bp1 = b + 1
            f2 = _rev2(f, seq, bp1, a, s2 - 1, ap1, last, s - s2 - 1)
            if combine_discontinuous(seq, bp1, a, s2 - 1, ap1, last, s - s2 - 1, f2):
                return True

            # Move that element through first + 1 .. middle - 1; at each
            # stop permute the three-piece range
            # [first, b) + [b + 1, middle) + [middle + 1, last).
            b = bp1
            bp1 += 1
            bm1 = first
            for i in range(1, s2 - 1):
                seq[bm1], seq[b] = seq[b], seq[bm1]
                f3 = _rev3(f, seq, first, b, i, bp1, a, s2 - i - 1, ap1, last, s - s2 - 1)
                if combine_discontinuous3(
                    seq, first, b, i, bp1, a, s2 - i - 1, ap1, last, s - s2 - 1, f3
                ):
                    return True
                bm1 += 1
                b += 1
                bp1 += 1

            # Finally with it at middle - 1: [first, middle - 1) + [middle + 1, last).
            seq[bm1], seq[b] = seq[b], seq[bm1]
            f21 = _rev2(f, seq, first, b, s2 - 1, ap1, last, s - s2 - 1)
            if combine_discontinuous(seq, first, b, s2 - 1, ap1, last, s - s2 - 1, f21):
                return True

            reverse(seq, first, b)
            reverse(seq, first, ap1)

        return False

    return call


def _reversible_circular_permutation(func: RangeCallback, s: int) -> RangeCallback:
    """Hold the first element and reverse-permute ``[first + 1, last)``."""

    def call(seq: SequenceLike, first: int, last: int) -> bool:
        if s <= 1:
            return bool(func(seq, first, last))
        f = bound_range(func, seq, first, last)
        n = first + 1
        return _reversible_permutation(f, last - n)(seq, n, last)

    return call


# ------------------------------------------------------------------ #
# Public entry points
# ------------------------------------------------------------------ #


def for_each_permutation(
    seq: SequenceLike,
    mid: int,
    func: RangeCallback,
    *,
    first: int = 0,
    last: int | None = None,
) -> RangeCallback:
    """Call ``func(seq, first, mid)`` for each r-permutation of ``seq[first:last]``.

    Every ordered selection of ``r = mid - first`` elements is placed
    in ``seq[first:mid]``: ``n! / (n - r)!`` calls in total.  After a
    full traversal ``seq`` is back in its original order.

    Args:
        seq: A ``list`` or 1-D ``numpy.ndarray``, permuted in place.
        mid: End of the selected region.
        func: Callback ``func(seq, first, mid)``; a truthy return stops
            the enumeration and leaves ``seq`` in an unspecified order.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).

    Returns:
        *func* itself.

    Raises:
        ValueError: If the bounds are invalid.
        TypeError: If *func* is not callable.
    """
    _check_callable(func)
    first, mid, last = resolve_region(seq, first, mid, last)
    d1 = mid - first
    d2 = last - mid
    logger.debug("for_each_permutation: n=%d r=%d", d1 + d2, d1)

    wfunc = bound_range(func, seq, first, mid)
    pf = _call_permute(wfunc, seq, first, mid, d1)
    with recursion_headroom(d1):
        stopped = combine_discontinuous(seq, first, mid, d1, mid, last, d2, pf)
    if stopped:
        logger.debug("for_each_permutation stopped early by callback")
    return func


def _for_each_adapted(
    name: str,
    adapter: RangeCallback,
    func: RangeCallback,
    seq: SequenceLike,
    first: int,
    mid: int,
    last: int,
) -> RangeCallback:
    """Run *adapter* over every combination of the validated region."""
    logger.debug("%s: n=%d r=%d", name, last - first, mid - first)
    for_each_combination(seq, mid, adapter, first=first, last=last)
    return func


def for_each_circular_permutation(
    seq: SequenceLike,
    mid: int,
    func: RangeCallback,
    *,
    first: int = 0,
    last: int | None = None,
) -> RangeCallback:
    """Call ``func(seq, first, mid)`` once per r-permutation up to rotation.

    Two arrangements of the selected region that differ only by a
    rotation are visited once.  The first element of each combination
    stays in place while the rest are permuted.

    Args:
        seq: A ``list`` or 1-D ``numpy.ndarray``, permuted in place.
        mid: End of the selected region.
        func: Callback ``func(seq, first, mid)``; truthy return stops.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).

    Returns:
        *func* itself.
    """
    _check_callable(func)
    first, mid, last = resolve_region(seq, first, mid, last)
    adapter = _circular_permutation(func, mid - first)
    return _for_each_adapted(
        "for_each_circular_permutation", adapter, func, seq, first, mid, last
    )


def for_each_reversible_permutation(
    seq: SequenceLike,
    mid: int,
    func: RangeCallback,
    *,
    first: int = 0,
    last: int | None = None,
) -> RangeCallback:
    """Call ``func(seq, first, mid)`` once per r-permutation up to reversal.

    An arrangement and its mirror image are visited once between them.
    After a full traversal ``seq`` is back in its original order.

    Args:
        seq: A ``list`` or 1-D ``numpy.ndarray``, permuted in place.
        mid: End of the selected region.
        func: Callback ``func(seq, first, mid)``; truthy return stops.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).

    Returns:
        *func* itself.
    """
    _check_callable(func)
    first, mid, last = resolve_region(seq, first, mid, last)
    adapter = _reversible_permutation(func, mid - first)
    return _for_each_adapted(
        "for_each_reversible_permutation", adapter, func, seq, first, mid, last
    )


def for_each_reversible_circular_permutation(
    seq: SequenceLike,
    mid: int,
    func: RangeCallback,
    *,
    first: int = 0,
    last: int | None = None,
) -> RangeCallback:
    """Call ``func(seq, first, mid)`` once per r-permutation up to rotation and reversal.

    Arrangements are treated like beads on a necklace that can be both
    turned and flipped over.

    Args:
        seq: A ``list`` or 1-D ``numpy.ndarray``, permuted in place.
        mid: End of the selected region.
        func: Callback ``func(seq, first, mid)``; truthy return stops.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).

    Returns:
        *func* itself.
    """
    _check_callable(func)
    first, mid, last = resolve_region(seq, first, mid, last)
    adapter = _reversible_circular_permutation(func, mid - first)
    return _for_each_adapted(
        "for_each_reversible_circular_permutation",
        adapter,
        func,
        seq,
        first,
        mid,
        last,
    )
