"""
sortkit: classical comparison sorts and binary search over any ordered type.

    >>> import sortkit
    >>> xs = [5, 3, 8, 1, 9, 2]
    >>> sortkit.tim_sort(xs)
    >>> xs
    [1, 2, 3, 5, 8, 9]
    >>> sortkit.binary_search(xs, 8)
    4

Every sort takes `(seq, compare=None, *, ascending=True)`, mutates `seq` in
place and returns None. Malformed bounds raise `InvalidRange` before anything
is moved.
"""

from .algorithms import (
    ALGORITHMS,
    STABLE_ALGORITHMS,
    bubble_sort,
    builtin_sort,
    get_algorithm,
    insertion_sort,
    merge,
    merge_sort,
    merge_sort_iterative,
    merge_sorted,
    partition,
    quick_sort,
    quick_sort_iterative,
    selection_sort,
    tim_sort,
)
from .errors import EmptyInput, InvalidRange, SortError, UnsortedInput
from .ordering import (
    CountingComparator,
    Ordering,
    default_compare,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
)
from .search import binary_search, search_position
from .validate import is_sorted

__version__ = "0.3.0"

__all__ = [
    "ALGORITHMS",
    "STABLE_ALGORITHMS",
    "get_algorithm",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "merge_sort_iterative",
    "quick_sort",
    "quick_sort_iterative",
    "tim_sort",
    "builtin_sort",
    "partition",
    "merge",
    "merge_sorted",
    "binary_search",
    "search_position",
    "is_sorted",
    "Ordering",
    "CountingComparator",
    "default_compare",
    "is_lt",
    "is_le",
    "is_eq",
    "is_ge",
    "is_gt",
    "SortError",
    "InvalidRange",
    "EmptyInput",
    "UnsortedInput",
]
