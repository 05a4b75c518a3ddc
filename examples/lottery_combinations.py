"""
Example 3: Lottery Tickets, Subsets and Odometers

Demonstrates:
- ``for_each_combination`` — unordered draws, with an early stop
- ``next_combination`` / ``prev_combination`` — the same draws in
  sorted order, one step at a time
- ``LexicographicSubset`` and ``iter_subsets`` — every optional add-on
- ``next_mapping`` — a mixed-radix odometer
- ``count_each_combination`` overflow handling
"""

from minswap import (
    CountingVisitor,
    LexicographicSubset,
    count_each_combination,
    for_each_combination,
    iter_subsets,
    next_combination,
    next_mapping,
    prev_combination,
)

# ============================================================================
# How many 6-of-49 tickets are there?
# ============================================================================

tickets = count_each_combination(6, 43)
print(f"6-of-49 tickets: {tickets:,}")

try:
    count_each_combination(6, 43, dtype="uint16")
except OverflowError as exc:
    print(f"With 16-bit counts: OverflowError({exc})")

# ============================================================================
# Enumerate 3-of-7 draws until one sums to exactly 15
# ============================================================================

balls = list(range(1, 8))


def sums_to_15(seq, first, last):
    return sum(seq[first:last]) == 15


for_each_combination(balls, 3, sums_to_15)
print("First 3-of-7 draw summing to 15:", sorted(balls[:3]))

draws = for_each_combination(list(range(1, 8)), 3, CountingVisitor())
assert draws.count == count_each_combination(3, 4)

# ============================================================================
# The same draws in lexicographic order
# ============================================================================

seq = list(range(1, 6))
ordered = [seq[:2]]
while next_combination(seq, 2):
    ordered.append(seq[:2])
print("2-of-5 in order:", ordered)

prev_combination(seq, 2)
assert seq[:2] == [4, 5], "stepping back from the first wraps to the last"

# ============================================================================
# Optional add-ons: every subset of three extras
# ============================================================================

extras = ["bonus", "multiplier", "replay"]
for chosen in iter_subsets(extras):
    print("   ", chosen or "(none)")

subset = LexicographicSubset(len(extras), include_empty=False)
assert str(subset) == "(0)"
assert subset.size() == 1

# ============================================================================
# A three-digit combination lock
# ============================================================================

lock = [0, 0, 0]
turns = 1
while next_mapping(lock, 0, 10):
    turns += 1
assert turns == 1000
print(f"Lock positions: {turns}")
