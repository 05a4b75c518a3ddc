"""minswap — Combinations, permutations, partitions and subsets in place.

Implements Howard Hinnant's minimal-swap enumeration of r-combinations
and r-permutations (plain, circular, reversible and reversible-circular)
over a sequence rearranged in place, lexicographic successor and
predecessor steps for combinations, mappings and repeat-combination
counts, Orlov's restricted-growth-string enumeration of set
partitions, a binary-counting subset odometer, and overflow-checked
closed-form counts for every family.

Public API:
    .. autosummary::
        for_each_combination
        for_each_permutation
        for_each_circular_permutation
        for_each_reversible_permutation
        for_each_reversible_circular_permutation
        count_each_combination
        count_each_permutation
        count_each_circular_permutation
        count_each_reversible_permutation
        count_each_reversible_circular_permutation
        count_each_combination_region
        count_each_permutation_region
        count_each_circular_permutation_region
        count_each_reversible_permutation_region
        count_each_reversible_circular_permutation_region
        count_each_subset
        bell_number
        next_combination
        prev_combination
        next_mapping
        prev_mapping
        next_repeat_combination_counts
        prev_repeat_combination_counts
        LexicographicPartition
        materialize_partition
        next_partition
        prev_partition
        iter_partitions
        LexicographicSubset
        SubsetCursor
        materialize_subset
        next_subset
        prev_subset
        iter_subsets
        rotate_discontinuous
        rotate_discontinuous3
        CountingVisitor
        CollectingVisitor
        get_count_dtype
        set_count_dtype
        get_integrity_checks
        set_integrity_checks
        get_max_recursion_limit
        set_max_recursion_limit
"""

from ._config import (
    get_count_dtype,
    get_integrity_checks,
    get_max_recursion_limit,
    set_count_dtype,
    set_integrity_checks,
    set_max_recursion_limit,
)
from ._ranges import rotate_discontinuous, rotate_discontinuous3
from .combinations import for_each_combination
from .counting import (
    bell_number,
    count_each_circular_permutation,
    count_each_circular_permutation_region,
    count_each_combination,
    count_each_combination_region,
    count_each_permutation,
    count_each_permutation_region,
    count_each_reversible_circular_permutation,
    count_each_reversible_circular_permutation_region,
    count_each_reversible_permutation,
    count_each_reversible_permutation_region,
    count_each_subset,
)
from .lexicographic import (
    next_combination,
    next_mapping,
    next_repeat_combination_counts,
    prev_combination,
    prev_mapping,
    prev_repeat_combination_counts,
)
from .partitions import (
    LexicographicPartition,
    iter_partitions,
    materialize_partition,
    next_partition,
    prev_partition,
)
from .permutations import (
    for_each_circular_permutation,
    for_each_permutation,
    for_each_reversible_circular_permutation,
    for_each_reversible_permutation,
)
from .subsets import (
    LexicographicSubset,
    SubsetCursor,
    iter_subsets,
    materialize_subset,
    next_subset,
    prev_subset,
)
from .visitors import CollectingVisitor, CountingVisitor

__all__ = [
    "for_each_combination",
    "for_each_permutation",
    "for_each_circular_permutation",
    "for_each_reversible_permutation",
    "for_each_reversible_circular_permutation",
    "count_each_combination",
    "count_each_permutation",
    "count_each_circular_permutation",
    "count_each_reversible_permutation",
    "count_each_reversible_circular_permutation",
    "count_each_combination_region",
    "count_each_permutation_region",
    "count_each_circular_permutation_region",
    "count_each_reversible_permutation_region",
    "count_each_reversible_circular_permutation_region",
    "count_each_subset",
    "bell_number",
    "next_combination",
    "prev_combination",
    "next_mapping",
    "prev_mapping",
    "next_repeat_combination_counts",
    "prev_repeat_combination_counts",
    "LexicographicPartition",
    "materialize_partition",
    "next_partition",
    "prev_partition",
    "iter_partitions",
    "LexicographicSubset",
    "SubsetCursor",
    "materialize_subset",
    "next_subset",
    "prev_subset",
    "iter_subsets",
    "rotate_discontinuous",
    "rotate_discontinuous3",
    "CountingVisitor",
    "CollectingVisitor",
    "get_count_dtype",
    "set_count_dtype",
    "get_integrity_checks",
    "set_integrity_checks",
    "get_max_recursion_limit",
    "set_max_recursion_limit",
]

__version__ = "0.1.0"
