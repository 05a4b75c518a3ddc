"""Shared type aliases for the minswap package."""

from collections.abc import Callable, MutableSequence
from typing import Any

import numpy as np

# Mutable, index-addressable containers the engines permute in place.
SequenceLike = MutableSequence[Any] | np.ndarray

# User callback: ``func(seq, first, last)``; a truthy return stops.
RangeCallback = Callable[[Any, int, int], Any]

# Engine continuation: no arguments, returns ``True`` to stop.
Continuation = Callable[[], bool]
