"""Lexicographic successor and predecessor algorithms.

Unlike the minimal-swap engines, which drive a callback through a whole
family of arrangements, the functions here step one arrangement at a
time in sorted order, in the style of the classic
``next_permutation``: each call rewrites the sequence in place and
returns whether a next (or previous) arrangement existed.  When the
boundary is passed they wrap around to the opposite end and return
``False``, so a ``while next_X(...)`` loop leaves the sequence ready
for another full pass.

* :func:`next_combination` / :func:`prev_combination` — r-combinations
  of a sorted sequence, held in ``seq[first:mid]`` with the unselected
  elements sorted in ``seq[mid:last]``.
* :func:`next_mapping` / :func:`prev_mapping` — a mixed-radix odometer:
  every position runs over ``[first_value, last_value)``.
* :func:`next_repeat_combination_counts` /
  :func:`prev_repeat_combination_counts` — combinations with
  repetition encoded as a count per symbol.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ._ranges import resolve_region, reverse
from ._typing import SequenceLike

KeyFunc = Callable[[Any], Any]


def _less(key: KeyFunc | None) -> Callable[[Any, Any], bool]:
    if key is None:
        return lambda a, b: a < b
    return lambda a, b: key(a) < key(b)


def _next_combination(
    seq: SequenceLike,
    first1: int,
    last1: int,
    first2: int,
    last2: int,
    less: Callable[[Any, Any], bool],
) -> bool:
    """Advance the combination in ``[first1, last1)`` drawn against ``[first2, last2)``.

    The two ranges need not be adjacent or in order: calling with the
    ranges swapped steps backwards.
    """
    if first1 == last1 or first2 == last2:
        return False

    m1 = last1 - 1
    m2 = last2 - 1
    # Rightmost selected element smaller than the largest unselected one.
    while m1 != first1 and not less(seq[m1], seq[m2]):
        m1 -= 1

    at_end = m1 == first1 and not less(seq[first1], seq[m2])

    if not at_end:
        # Smallest unselected element larger than it.
        while first2 != m2 and not less(seq[m1], seq[first2]):
            first2 += 1
        first1 = m1
        seq[first1], seq[first2] = seq[first2], seq[first1]
        first1 += 1
        first2 += 1

    if first1 != last1 and first2 != last2:
        # Re-sort the tails of both ranges.
        m1 = last1
        m2 = first2
        while m1 != first1 and m2 != last2:
            m1 -= 1
            seq[m1], seq[m2] = seq[m2], seq[m1]
            m2 += 1
        reverse(seq, first1, m1)
        reverse(seq, first1, last1)
        reverse(seq, m2, last2)
        reverse(seq, first2, last2)

    return not at_end


def next_combination(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    key: KeyFunc | None = None,
) -> bool:
    """Rewrite ``seq[first:mid]`` as the next combination in sorted order.

    ``seq[first:mid]`` holds a combination (a sorted subsequence of the
    region) and ``seq[mid:last]`` the remaining elements, also sorted.
    Combinations of the same size are ordered lexicographically by
    ``key(a) < key(b)`` (plain ``<`` when *key* is ``None``).

    Args:
        seq: Sequence rewritten in place.
        mid: End of the combination.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).
        key: Optional key function, as for :func:`sorted`.

    Returns:
        ``True`` if a next combination existed.  Otherwise ``False``,
        and ``seq[first:mid]`` is reset to the smallest combination
        with the whole region sorted.

    Raises:
        ValueError: If the bounds are invalid.
    """
    first, mid, last = resolve_region(seq, first, mid, last)
    return _next_combination(seq, first, mid, mid, last, _less(key))


def prev_combination(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    key: KeyFunc | None = None,
) -> bool:
    """Rewrite ``seq[first:mid]`` as the previous combination in sorted order.

    The inverse of :func:`next_combination`.  When ``seq[first:mid]``
    already holds the smallest combination it is set to the largest
    one and ``False`` is returned.

    Raises:
        ValueError: If the bounds are invalid.
    """
    first, mid, last = resolve_region(seq, first, mid, last)
    return _next_combination(seq, mid, last, first, mid, _less(key))


def next_mapping(
    seq: SequenceLike,
    first_value: Any,
    last_value: Any,
    *,
    first: int = 0,
    last: int | None = None,
    increment: Callable[[Any], Any] | None = None,
) -> bool:
    """Advance ``seq[first:last]`` as an odometer with digits in ``[first_value, last_value)``.

    The rightmost position is the least significant digit.  Digits
    that reach *last_value* are reset to *first_value* and carry into
    the position to their left.

    Args:
        seq: Digits, rewritten in place.
        first_value: Smallest digit value.
        last_value: One past the largest digit value.
        first: Start of the digit range (default 0).
        last: End of the digit range (default ``len(seq)``).
        increment: Returns the digit after its argument (default
            ``v + 1``).

    Returns:
        ``True`` if a next mapping existed, ``False`` when every digit
        wrapped back to *first_value*.
    """
    first, _, last = resolve_region(seq, first, first, last)
    if increment is None:
        increment = lambda v: v + 1  # noqa: E731
    if last == first:
        return False

    while True:
        last -= 1
        seq[last] = increment(seq[last])
        if seq[last] != last_value:
            return True
        seq[last] = first_value
        if last == first:
            return False


def prev_mapping(
    seq: SequenceLike,
    first_value: Any,
    last_value: Any,
    *,
    first: int = 0,
    last: int | None = None,
    decrement: Callable[[Any], Any] | None = None,
) -> bool:
    """Step ``seq[first:last]`` back by one as an odometer.

    The inverse of :func:`next_mapping`: digits at *first_value* become
    the largest digit (the one before *last_value*) and borrow from the
    position to their left.

    Returns:
        ``True`` if a previous mapping existed, ``False`` when every
        digit wrapped to the largest value.
    """
    first, _, last = resolve_region(seq, first, first, last)
    if decrement is None:
        decrement = lambda v: v - 1  # noqa: E731
    if last == first:
        return False

    largest = decrement(last_value)
    while True:
        last -= 1
        if seq[last] != first_value:
            seq[last] = decrement(seq[last])
            return True
        seq[last] = largest
        if last == first:
            return False


def next_repeat_combination_counts(
    seq: SequenceLike, *, first: int = 0, last: int | None = None
) -> bool:
    """Advance a combination with repetition, stored as per-symbol counts.

    ``seq[i]`` is how many times symbol i is chosen; the counts always
    sum to the combination size.  Counts are ordered so that
    ``[0, ..., 0, k]`` comes first and ``[k, 0, ..., 0]`` last.

    Returns:
        ``True`` if a next combination existed.  Otherwise ``False``,
        and the counts wrap to the first combination.
    """
    first, _, last = resolve_region(seq, first, first, last)

    current = last
    while current != first:
        current -= 1
        if seq[current] != 0:
            break

    if current == first:
        if first != last and seq[first] != 0:
            last -= 1
            seq[last], seq[first] = seq[first], seq[last]
        return False

    seq[current] -= 1
    last -= 1
    seq[last], seq[current] = seq[current], seq[last]
    current -= 1
    seq[current] += 1
    return True


def prev_repeat_combination_counts(
    seq: SequenceLike, *, first: int = 0, last: int | None = None
) -> bool:
    """Step a per-symbol count combination back by one.

    The inverse of :func:`next_repeat_combination_counts`.

    Returns:
        ``True`` if a previous combination existed.  Otherwise
        ``False``, and the counts wrap to the last combination.
    """
    first, _, last = resolve_region(seq, first, first, last)
    if first == last:
        return False

    last -= 1
    current = last
    while current != first:
        current -= 1
        if seq[current] != 0:
            break

    if current == last or (current == first and seq[current] == 0):
        if first != last:
            seq[first], seq[last] = seq[last], seq[first]
        return False

    seq[current] -= 1
    current += 1
    if seq[last] != 0:
        seq[current], seq[last] = seq[last], seq[current]
    seq[current] += 1
    return True
