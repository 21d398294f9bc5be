"""View module for reading a string through a character predicate.

Key components:
- FilteredStringView: Non-owning view exposing the characters a predicate selects
- Cursor: Bidirectional cursor over the selected characters
- ReverseCursor: Reverse adaptor over a Cursor
- compose, substr, split: Algorithms deriving new views over the same string
"""

from fsview.views.base import FilteredStringView
from fsview.views.cursor import Cursor, ReverseCursor
from fsview.views.operations import compose, raw_offsets, split, substr

__all__ = [
    "FilteredStringView",
    "Cursor",
    "ReverseCursor",
    "compose",
    "raw_offsets",
    "split",
    "substr",
]
