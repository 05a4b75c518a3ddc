"""Ready-made callbacks for the ``for_each_*`` entry points.

Every ``for_each_*`` function returns the callback it was given, so a
stateful callback doubles as the result of the enumeration::

    visitor = for_each_combination(seq, 2, CollectingVisitor())
    visitor.items   # every 2-combination, as lists

Both visitors are plain dataclasses; their fields start empty and are
filled in as the engine calls them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


@dataclass
class CountingVisitor:
    """Count the arrangements visited, optionally stopping after *limit*."""

    count: int = 0
    limit: int | None = None

    def __call__(self, seq: Any, first: int, mid: int) -> bool:
        self.count += 1
        return self.limit is not None and self.count >= self.limit


@dataclass
class CollectingVisitor:
    """Snapshot ``seq[first:mid]`` at every call.

    Snapshots are fresh lists, so later swaps made by the engine do not
    alter them.  With a *limit*, the enumeration is stopped once that
    many snapshots have been taken.
    """

    items: list[list[Any]] = field(default_factory=list)
    limit: int | None = None

    def __call__(self, seq: Any, first: int, mid: int) -> bool:
        window = seq[first:mid]
        if isinstance(window, np.ndarray):
            self.items.append(window.tolist())
        else:
            self.items.append(list(window))
        return self.limit is not None and len(self.items) >= self.limit
