"""
Example 1: Seating Guests Around Tables

Demonstrates:
- ``for_each_permutation`` — ordered selections for a row of seats
- ``for_each_circular_permutation`` — a round table, where rotating
  everyone one seat gives the same arrangement
- ``for_each_reversible_circular_permutation`` — a round table seen
  from above, where the mirror image is also the same arrangement
- ``count_each_*`` — checking call counts against the closed forms
- Early stop: a callback that returns ``True`` ends the enumeration
"""

import numpy as np

from minswap import (
    CollectingVisitor,
    CountingVisitor,
    count_each_circular_permutation,
    count_each_permutation,
    count_each_reversible_circular_permutation,
    for_each_circular_permutation,
    for_each_permutation,
    for_each_reversible_circular_permutation,
)

guests = ["Ada", "Brook", "Cyd", "Dev", "Eli", "Fen"]

# ============================================================================
# Four guests in a row of four chairs
# ============================================================================

rows = for_each_permutation(list(guests), 4, CountingVisitor())
assert rows.count == count_each_permutation(4, len(guests) - 4)
print(f"Row seatings of 4 out of {len(guests)} guests: {rows.count}")

# ============================================================================
# Five guests at a round table
# ============================================================================

seq = list(guests)
tables = for_each_circular_permutation(seq, 5, CollectingVisitor())
assert len(tables.items) == count_each_circular_permutation(5, 1)
assert seq == guests, "sequence is restored after a full traversal"
print(f"Round-table seatings of 5 guests: {len(tables.items)}")
for seating in tables.items[:3]:
    print("   ", " -> ".join(seating))

# ============================================================================
# Same table, mirror images treated as equal
# ============================================================================

necklaces = for_each_reversible_circular_permutation(
    list(guests), 5, CountingVisitor()
)
assert necklaces.count == count_each_reversible_circular_permutation(5, 1)
print(f"Up to rotation and reflection: {necklaces.count}")

# ============================================================================
# Stop at the first seating that keeps Ada and Brook apart
# ============================================================================


def apart(seq, first, last):
    table = list(seq[first:last])
    if "Ada" not in table or "Brook" not in table:
        return False
    a, b = table.index("Ada"), table.index("Brook")
    return abs(a - b) not in (1, len(table) - 1)


seq = list(guests)
for_each_circular_permutation(seq, 4, apart)
print("First 4-seat table with Ada and Brook apart:", seq[:4])

# ============================================================================
# The same engines work on NumPy arrays
# ============================================================================

ids = np.arange(6)
visitor = for_each_permutation(ids, 3, CountingVisitor())
np.testing.assert_array_equal(ids, np.arange(6))
print(f"Ordered triples of 6 ids: {visitor.count}")
