"""Overflow-checked closed-form counts.

Each ``count_each_X(d1, d2)`` returns how many times the matching
``for_each_X`` entry point calls back for a selected region of size
``d1`` and an unselected region of size ``d2``:

=====================================  ==========================================
Function                               Closed form
=====================================  ==========================================
``count_each_combination``             (d1+d2)! / (d1! · d2!)
``count_each_permutation``             (d1+d2)! / d2!
``count_each_circular_permutation``    d1 > 0 ? (d1+d2)! / (d1 · d2!) : 1
``count_each_reversible_permutation``  d1 > 1 ? (d1+d2)! / (2 · d2!) : (d1+d2)! / d2!
``count_each_reversible_circular_…``   d1 == 0 ? 1 : d1 <= 2 ? (d1+d2)! / (d1 · d2!)
                                       : (d1+d2)! / (2 · d1 · d2!)
``count_each_subset``                  2^n (or 2^n − 1 without the empty set)
``bell_number``                        B(n), the number of partitions of n items
=====================================  ==========================================

Why the incremental form
------------------------
Factorial-like counts grow super-exponentially, so evaluating
``n! / (k! (n−k)!)`` directly overflows a fixed-width result for quite
modest n even when the final count is small.  Each function here
instead multiplies one factor at a time, reducing by the greatest
common divisor first where a division is pending, and checks
``result > max // factor`` *before* every multiplication.  A count
that does not fit the result type raises ``OverflowError``; no partial
or wrapped value is ever returned.

The result type is a NumPy integer dtype: the ``dtype`` argument when
given, otherwise :func:`~minswap._config.get_count_dtype` (``uint64``
by default).  Only its maximum matters; the value itself is returned
as a Python ``int``.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from ._config import get_count_dtype
from ._ranges import resolve_region
from ._typing import SequenceLike


def _max_value(dtype: npt.DTypeLike | None) -> int:
    """Return the largest value representable in the count dtype."""
    resolved = get_count_dtype() if dtype is None else np.dtype(dtype)
    if not np.issubdtype(resolved, np.integer):
        raise ValueError(
            f"Count dtype must be a NumPy integer type, got '{resolved.name}'."
        )
    return int(np.iinfo(resolved).max)


def _check_sizes(name: str, *sizes: int) -> None:
    for size in sizes:
        if size < 0:
            raise ValueError(f"{name}: sizes must be non-negative, got {size}.")


def count_each_combination(
    d1: int, d2: int, dtype: npt.DTypeLike | None = None
) -> int:
    """Return ``(d1 + d2)! / (d1! · d2!)``, the number of d1-combinations.

    Args:
        d1: Size of the selected region.
        d2: Size of the unselected region.
        dtype: NumPy integer type bounding the result (defaults to the
            configured count dtype).

    Returns:
        The binomial coefficient ``C(d1 + d2, d1)``.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If a size is negative.
    """
    _check_sizes("count_each_combination", d1, d2)
    max_value = _max_value(dtype)
    if d2 < d1:
        d1, d2 = d2, d1
    if d1 == 0:
        return 1
    if d1 > max_value - d2:
        raise OverflowError("overflow in count_each_combination")
    n = d1 + d2
    r = n
    n -= 1
    for k in range(2, d1 + 1):
        # r = r * n / k, known to have no truncation error
        g = math.gcd(r, k)
        r //= g
        t = n // (k // g)
        if r > max_value // t:
            raise OverflowError("overflow in count_each_combination")
        r *= t
        n -= 1
    return r


def count_each_permutation(
    d1: int, d2: int, dtype: npt.DTypeLike | None = None
) -> int:
    """Return ``(d1 + d2)! / d2!``, the number of d1-permutations.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If a size is negative.
    """
    _check_sizes("count_each_permutation", d1, d2)
    max_value = _max_value(dtype)
    if d1 > max_value - d2:
        raise OverflowError("overflow in count_each_permutation")
    n = d1 + d2
    r = 1
    while n > d2:
        if r > max_value // n:
            raise OverflowError("overflow in count_each_permutation")
        r *= n
        n -= 1
    return r


def count_each_circular_permutation(
    d1: int, d2: int, dtype: npt.DTypeLike | None = None
) -> int:
    """Return ``(d1 + d2)! / (d1 · d2!)`` (1 when ``d1 == 0``).

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If a size is negative.
    """
    _check_sizes("count_each_circular_permutation", d1, d2)
    if d1 == 0:
        return 1
    max_value = _max_value(dtype)
    if d1 <= d2:
        try:
            r = count_each_combination(d1, d2, dtype)
        except OverflowError:
            raise OverflowError("overflow in count_each_circular_permutation") from None
        d1 -= 1
        while d1 > 1:
            if r > max_value // d1:
                raise OverflowError("overflow in count_each_circular_permutation")
            r *= d1
            d1 -= 1
    else:
        # Same count, fewer divisions: (d1+d2)!/d1! · (d1-1)!/d2!
        if d1 > max_value - d2:
            raise OverflowError("overflow in count_each_circular_permutation")
        n = d1 + d2
        r = 1
        while n > d1:
            if r > max_value // n:
                raise OverflowError("overflow in count_each_circular_permutation")
            r *= n
            n -= 1
        n -= 1
        while n > d2:
            if r > max_value // n:
                raise OverflowError("overflow in count_each_circular_permutation")
            r *= n
            n -= 1
    return r


def count_each_reversible_permutation(
    d1: int, d2: int, dtype: npt.DTypeLike | None = None
) -> int:
    """Return ``(d1 + d2)! / (2 · d2!)`` for ``d1 > 1``, else ``(d1 + d2)! / d2!``.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If a size is negative.
    """
    _check_sizes("count_each_reversible_permutation", d1, d2)
    max_value = _max_value(dtype)
    if d1 > max_value - d2:
        raise OverflowError("overflow in count_each_reversible_permutation")
    n = d1 + d2
    r = 1
    if d1 > 1:
        # Exactly one of n and n - 1 is even; halve that one.
        r = n
        if n % 2 == 0:
            r //= 2
        n -= 1
        t = n
        if t % 2 == 0:
            t //= 2
        if r > max_value // t:
            raise OverflowError("overflow in count_each_reversible_permutation")
        r *= t
        n -= 1
    while n > d2:
        if r > max_value // n:
            raise OverflowError("overflow in count_each_reversible_permutation")
        r *= n
        n -= 1
    return r


def count_each_reversible_circular_permutation(
    d1: int, d2: int, dtype: npt.DTypeLike | None = None
) -> int:
    """Return the number of d1-permutations up to rotation and reversal.

    ``1`` for ``d1 == 0``, ``(d1 + d2)! / (d1 · d2!)`` for ``d1 <= 2``,
    and ``(d1 + d2)! / (2 · d1 · d2!)`` otherwise.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If a size is negative.
    """
    _check_sizes("count_each_reversible_circular_permutation", d1, d2)
    max_value = _max_value(dtype)
    try:
        r = count_each_combination(d1, d2, dtype)
    except OverflowError:
        raise OverflowError(
            "overflow in count_each_reversible_circular_permutation"
        ) from None
    if d1 > 3:
        d1 -= 1
        while d1 > 2:
            if r > max_value // d1:
                raise OverflowError(
                    "overflow in count_each_reversible_circular_permutation"
                )
            r *= d1
            d1 -= 1
    return r


def count_each_subset(
    n: int, include_empty: bool = True, dtype: npt.DTypeLike | None = None
) -> int:
    """Return the number of subsets of an n-element set.

    Args:
        n: Number of elements.
        include_empty: Count the empty set too (``2^n``); otherwise
            ``2^n - 1``.
        dtype: NumPy integer type bounding the result.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If *n* is negative.
    """
    _check_sizes("count_each_subset", n)
    max_value = _max_value(dtype)
    # Highest representable power of two, then 2^n - 1 fits one more bit.
    limit_bits = max_value.bit_length()
    if n > limit_bits or (include_empty and n == limit_bits):
        raise OverflowError("overflow in count_each_subset")
    total = 1 << n
    return total if include_empty else total - 1


def bell_number(n: int, dtype: npt.DTypeLike | None = None) -> int:
    """Return the Bell number B(n): the number of partitions of an n-set.

    Built row by row from the Bell triangle; each row starts with the
    last entry of the previous one and every other entry is the sum of
    its left neighbour and the entry above that neighbour.  ``B(0) ==
    B(1) == 1``.

    Raises:
        OverflowError: If B(n) exceeds the maximum of *dtype*.
        ValueError: If *n* is negative.
    """
    _check_sizes("bell_number", n)
    max_value = _max_value(dtype)
    if n <= 1:
        return 1
    row = [1]
    for _ in range(1, n):
        nxt = [row[-1]]
        for value in row:
            if nxt[-1] > max_value - value:
                raise OverflowError("overflow in bell_number")
            nxt.append(nxt[-1] + value)
        row = nxt
    return row[-1]


# ------------------------------------------------------------------ #
# Region forms
# ------------------------------------------------------------------ #
#
# Same call shape as the ``for_each_*`` entry points: the counts are
# taken from ``seq[first:mid]`` (selected) and ``seq[mid:last]``.


def _region_sizes(
    seq: SequenceLike, mid: int, first: int, last: int | None
) -> tuple[int, int]:
    first, mid, last = resolve_region(seq, first, mid, last)
    return mid - first, last - mid


def count_each_combination_region(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> int:
    """Return how many times ``for_each_combination`` would call back.

    Args:
        seq: The sequence that would be enumerated.
        mid: End of the selected region ``seq[first:mid]``.
        first: Start of the region (default 0).
        last: End of the region (default ``len(seq)``).
        dtype: NumPy integer type bounding the result.

    Raises:
        OverflowError: If the count exceeds the maximum of *dtype*.
        ValueError: If the region bounds are invalid.
    """
    return count_each_combination(*_region_sizes(seq, mid, first, last), dtype)


def count_each_permutation_region(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> int:
    """Region form of :func:`count_each_permutation`."""
    return count_each_permutation(*_region_sizes(seq, mid, first, last), dtype)


def count_each_circular_permutation_region(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> int:
    """Region form of :func:`count_each_circular_permutation`."""
    return count_each_circular_permutation(*_region_sizes(seq, mid, first, last), dtype)


def count_each_reversible_permutation_region(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> int:
    """Region form of :func:`count_each_reversible_permutation`."""
    return count_each_reversible_permutation(
        *_region_sizes(seq, mid, first, last), dtype
    )


def count_each_reversible_circular_permutation_region(
    seq: SequenceLike,
    mid: int,
    *,
    first: int = 0,
    last: int | None = None,
    dtype: npt.DTypeLike | None = None,
) -> int:
    """Region form of :func:`count_each_reversible_circular_permutation`."""
    return count_each_reversible_circular_permutation(
        *_region_sizes(seq, mid, first, last), dtype
    )
