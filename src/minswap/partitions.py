"""Set partitions in lexicographic order.

A partition of n elements is encoded as a *restricted growth string*
(RGS) ``kappa[0..n)``: ``kappa[i]`` is the index of the block holding
element i, blocks are numbered in order of first appearance, so
``kappa[0] == 0`` and ``kappa[i] <= max(kappa[0..i)) + 1``.  A second
array ``M`` caches the running maximum ``M[i] = max(kappa[0..i])``,
which makes both the growth test and the block count O(1).

For n = 3 the five partitions, in order, are::

    (0 0 0)  {a b c}
    (0 0 1)  {a b} {c}
    (0 1 0)  {a c} {b}
    (0 1 1)  {a} {b c}
    (0 1 2)  {a} {b} {c}

The first partition puts everything in one block and the last makes
every element a singleton; :meth:`LexicographicPartition.has_prev` and
:meth:`~LexicographicPartition.has_next` test for those two states.

References:
    M. Orlov, "Efficient Generation of Set Partitions", 2002.

    D. Knuth, "The Art of Computer Programming, Volume 4, Fascicle 3",
    Addison-Wesley, 2004.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from ._config import get_integrity_checks

logger = logging.getLogger(__name__)


class LexicographicPartition:
    """Bidirectional counter over the set partitions of n elements.

    Args:
        n: Number of elements (positive).
        start_at_singletons: Start from the last partition (every
            element on its own) instead of the first (all elements in
            one block).

    Raises:
        ValueError: If *n* is not positive.

    Example::

        part = LexicographicPartition(3)
        while True:
            print(part, part(["a", "b", "c"]))
            if not part.has_next():
                break
            part.next()
    """

    def __init__(self, n: int, start_at_singletons: bool = False) -> None:
        if n <= 0:
            raise ValueError("Number of elements must be positive")
        self._n = n
        self._kappa = np.zeros(n, dtype=np.intp)
        self._M = np.zeros(n, dtype=np.intp)
        if start_at_singletons:
            self._kappa[:] = np.arange(n)
            self._M[:] = np.arange(n)
        self._check()

    # ---- State queries --------------------------------------------

    def num_elements(self) -> int:
        """Return n."""
        return self._n

    def num_subsets(self) -> int:
        """Return the number of blocks in the current partition."""
        return int(self._M[-1]) + 1

    def has_next(self) -> bool:
        """Return ``True`` unless this is the all-singletons partition."""
        return self.num_subsets() < self._n

    def has_prev(self) -> bool:
        """Return ``True`` unless this is the single-block partition."""
        return self.num_subsets() > 1

    @property
    def rgs(self) -> np.ndarray:
        """Copy of the restricted growth string."""
        return self._kappa.copy()

    # ---- Stepping -------------------------------------------------

    def next(self) -> LexicographicPartition:
        """Step to the next partition.

        Raises:
            OverflowError: If this is already the last partition.
        """
        if not self.has_next():
            raise OverflowError("No following partitions")

        kappa, M = self._kappa, self._M
        for i in range(self._n - 1, 0, -1):
            if kappa[i] <= M[i - 1]:
                kappa[i] += 1
                new_max = max(M[i], kappa[i])
                M[i] = new_max
                kappa[i + 1 :] = 0
                M[i + 1 :] = new_max
                break

        self._check()
        return self

    def prev(self) -> LexicographicPartition:
        """Step to the previous partition.

        Raises:
            OverflowError: If this is already the first partition.
        """
        if not self.has_prev():
            raise OverflowError("No preceding partitions")

        kappa, M = self._kappa, self._M
        for i in range(self._n - 1, 0, -1):
            if kappa[i] > 0:
                kappa[i] -= 1
                m_i = M[i - 1]
                M[i] = m_i
                # Fill the tail with the largest valid values.
                tail = m_i + np.arange(1, self._n - i)
                kappa[i + 1 :] = tail
                M[i + 1 :] = tail
                break

        self._check()
        return self

    def _check(self) -> None:
        """Verify ``M`` against ``kappa`` when integrity checks are on."""
        if not get_integrity_checks():
            return
        expected = np.maximum.accumulate(self._kappa)
        if self._kappa[0] != 0 or not np.array_equal(expected, self._M):
            raise RuntimeError("Integrity check failed")

    # ---- Materialisation ------------------------------------------

    def __call__(self, values: Sequence[Any]) -> list[list[Any]]:
        """Return the current partition of *values*; see :func:`materialize_partition`."""
        return materialize_partition(self, values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._kappa.tolist())

    def __len__(self) -> int:
        return self._n

    def __str__(self) -> str:
        return "(" + " ".join(str(k) for k in self._kappa.tolist()) + ")"

    def __repr__(self) -> str:
        return f"LexicographicPartition(n={self._n}, rgs={self})"


def materialize_partition(
    part: LexicographicPartition, values: Sequence[Any]
) -> list[list[Any]]:
    """Group *values* into the blocks of *part*.

    Args:
        part: The partition state.
        values: Exactly ``part.num_elements()`` values; value i goes to
            block ``part.rgs[i]``.

    Returns:
        A fresh list of ``part.num_subsets()`` lists, each preserving
        the order of *values*.

    Raises:
        ValueError: If ``len(values)`` does not match.
    """
    if len(values) != part.num_elements():
        raise ValueError(
            f"Size does not match: partition has {part.num_elements()} "
            f"elements, got {len(values)} values."
        )
    blocks: list[list[Any]] = [[] for _ in range(part.num_subsets())]
    for value, k in zip(values, part, strict=True):
        blocks[k].append(value)
    return blocks


def next_partition(
    values: Sequence[Any], part: LexicographicPartition
) -> list[list[Any]]:
    """Return the current partition of *values*, then step *part* forward if it can."""
    blocks = part(values)
    if part.has_next():
        part.next()
    return blocks


def prev_partition(
    values: Sequence[Any], part: LexicographicPartition
) -> list[list[Any]]:
    """Return the current partition of *values*, then step *part* back if it can."""
    blocks = part(values)
    if part.has_prev():
        part.prev()
    return blocks


def iter_partitions(
    values: Sequence[Any], reverse: bool = False
) -> Iterator[list[list[Any]]]:
    """Yield every partition of *values* in lexicographic order.

    Args:
        values: The elements to partition (at least one).
        reverse: Start from the all-singletons partition and walk
            backwards.

    Yields:
        Lists of blocks, ``bell_number(len(values))`` of them in total.
    """
    part = LexicographicPartition(len(values), start_at_singletons=reverse)
    logger.debug("iter_partitions: n=%d reverse=%s", len(values), reverse)
    while True:
        yield part(values)
        if reverse:
            if not part.has_prev():
                return
            part.prev()
        else:
            if not part.has_next():
                return
            part.next()
