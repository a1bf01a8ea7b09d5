"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_sorted
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        first_stability_violation_index
        is_partitioned
        assert_no_mutation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    first_stability_violation_index,
    is_partitioned,
    is_permutation,
    is_sorted,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_sorted",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "first_stability_violation_index",
    "is_partitioned",
    "assert_no_mutation",
]
