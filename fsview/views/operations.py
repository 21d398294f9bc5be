"""Algorithms deriving new views from existing ones.

Every function here returns views over the same backing string as its input.
Only predicates are created; characters are never copied, except where the
filtered text has to be materialized to search it (``split``).
"""

from typing import Iterable, List, Optional, Union

from fsview.predicates.base import Conjunction, Predicate, RangePredicate, reject_all
from fsview.utils.exceptions import OutOfRangeError
from fsview.utils.logger import logger
from fsview.views.base import FilteredStringView


def raw_offsets(view: FilteredStringView) -> List[int]:
    """
    Build the logical-to-raw translation table of a view.

    Returns:
        List[int]: Entry ``k`` is the raw offset of the k-th selected character.
    """
    return [offset for offset in range(view.raw_length()) if view.selects(offset)]


def compose(view: FilteredStringView, predicates: Iterable[Predicate]) -> FilteredStringView:
    """
    Create a view over the same string filtered by all of ``predicates``.

    The predicate of ``view`` is replaced, not combined: the new view selects a
    character when every supplied predicate accepts it, evaluated in order and
    stopping at the first rejection. An empty list selects every character.

    Args:
        view (FilteredStringView): The view whose backing string is reused.
        predicates: The predicates to conjoin.

    Returns:
        FilteredStringView: The composed view.
    """
    conjunction = Conjunction(predicates)
    logger.debug(f"Composing view of raw length {view.raw_length()} from {len(conjunction)} predicates")
    return FilteredStringView.over(view.data(), view.raw_length(), conjunction)


def substr(view: FilteredStringView, pos: int = 0, count: Optional[int] = None) -> FilteredStringView:
    """
    Create a view of the logical range ``[pos, pos + count)`` of ``view``.

    The logical range is translated to raw offsets and the returned view keeps
    the original predicate, restricted to those offsets. ``count`` defaults to
    the rest of the view and is clipped to its end.

    Args:
        view (FilteredStringView): The view to take the substring of.
        pos (int): First logical position of the substring.
        count (int, optional): Maximum number of characters in the substring.

    Returns:
        FilteredStringView: The substring view. Empty when ``pos`` equals the
            filtered size or ``count`` is zero.

    Raises:
        OutOfRangeError: If pos is beyond the filtered size.
        ValueError: If count is negative.
    """
    table = raw_offsets(view)
    size = len(table)
    if pos < 0 or pos > size:
        raise OutOfRangeError(
            f"FilteredStringView substr({pos}): position out of range for filtered string of size {size}",
            index=pos,
            size=size,
        )
    if count is not None and count < 0:
        raise ValueError(f"substr count must not be negative, got {count}")

    end = size if count is None else min(pos + count, size)
    if pos == end:
        return FilteredStringView.over(view.data(), view.raw_length(), reject_all)

    start_offset = table[pos]
    stop_offset = table[end - 1] + 1
    logger.debug(f"substr({pos}, {count}) maps to raw offsets [{start_offset}, {stop_offset})")
    restricted = RangePredicate(view.predicate(), start_offset, stop_offset)
    return FilteredStringView.over(view.data(), view.raw_length(), restricted)


def split(
    view: FilteredStringView, token: Union[FilteredStringView, str]
) -> List[FilteredStringView]:
    """
    Split the filtered content of ``view`` on the filtered content of ``token``.

    Occurrences are found left to right without overlapping. Every gap between
    them becomes one substring view, including empty gaps before the first
    occurrence, after the last one and between adjacent occurrences.

    Args:
        view (FilteredStringView): The view to split.
        token (FilteredStringView | str): The delimiter. A plain str is used unfiltered.

    Returns:
        List[FilteredStringView]: The segments, in order. A single copy of
            ``view`` when either filtered text is empty.
    """
    if isinstance(token, str):
        token = FilteredStringView(token)

    text = view.to_string()
    delimiter = token.to_string()
    if not text or not delimiter:
        return [view.copy()]

    segments = []
    start = 0
    while True:
        found = text.find(delimiter, start)
        if found < 0:
            segments.append(substr(view, start))
            break
        segments.append(substr(view, start, found - start))
        start = found + len(delimiter)

    logger.debug(f"split produced {len(segments)} segments")
    return segments
