"""
Example 2: Splitting a Team into Working Groups

Demonstrates:
- ``LexicographicPartition`` — stepping through set partitions forward
  and backward, with ``has_next`` / ``has_prev`` / ``num_subsets``
- ``iter_partitions`` — the generator form
- ``bell_number`` — the total number of partitions
- ``set_integrity_checks`` — re-verify the internal state on every step
"""

from minswap import (
    LexicographicPartition,
    bell_number,
    iter_partitions,
    set_integrity_checks,
)

team = ["ana", "bo", "cy", "di"]

# ============================================================================
# Walk every partition of four people
# ============================================================================

set_integrity_checks(True)

part = LexicographicPartition(len(team))
print(f"{'RGS':<12} groups")
while True:
    print(f"{str(part):<12} {part(team)}")
    if not part.has_next():
        break
    part.next()

assert part.num_subsets() == len(team)
set_integrity_checks("auto")

# ============================================================================
# Count partitions by number of groups
# ============================================================================

by_groups: dict[int, int] = {}
for groups in iter_partitions(team):
    by_groups[len(groups)] = by_groups.get(len(groups), 0) + 1
assert sum(by_groups.values()) == bell_number(len(team))
print("Partitions by group count:", dict(sorted(by_groups.items())))

# ============================================================================
# Backwards from everyone-alone to one big group
# ============================================================================

part = LexicographicPartition(len(team), start_at_singletons=True)
steps = 0
while part.has_prev():
    part.prev()
    steps += 1
assert steps + 1 == bell_number(len(team))
assert part.num_subsets() == 1
print(f"Backward walk visited {steps + 1} partitions, ending at {part(team)}")
