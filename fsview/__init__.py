"""Filtered, non-owning views over strings."""

from fsview.predicates import (
    Conjunction,
    Predicate,
    PredicateFactory,
    RangePredicate,
    accept_all,
    reject_all,
)
from fsview.utils.exceptions import (
    FilteredStringViewError,
    OutOfRangeError,
    PreconditionError,
)
from fsview.views import (
    Cursor,
    FilteredStringView,
    ReverseCursor,
    compose,
    raw_offsets,
    split,
    substr,
)

__all__ = [
    "Conjunction",
    "Cursor",
    "FilteredStringView",
    "FilteredStringViewError",
    "OutOfRangeError",
    "Predicate",
    "PredicateFactory",
    "PreconditionError",
    "RangePredicate",
    "ReverseCursor",
    "accept_all",
    "compose",
    "raw_offsets",
    "reject_all",
    "split",
    "substr",
]
