"""Predicate module for selecting the characters a view exposes.

A predicate is any callable mapping a single character to a boolean. Views
evaluate their predicate lazily, on every access, so predicates should be
cheap and stable for as long as they are attached to a view.

Key components:
- Predicate: Alias for the character selection callable
- Conjunction: Short-circuiting logical AND of several predicates
- RangePredicate: Restriction of a predicate to a raw offset range
- PredicateFactory: Registry of named predicates
"""

from fsview.predicates.base import (
    Predicate,
    PositionalPredicate,
    Conjunction,
    RangePredicate,
    accept_all,
    reject_all,
    selector,
)
from fsview.predicates.factory import PredicateFactory

__all__ = [
    "Predicate",
    "PositionalPredicate",
    "Conjunction",
    "RangePredicate",
    "PredicateFactory",
    "accept_all",
    "reject_all",
    "selector",
]
