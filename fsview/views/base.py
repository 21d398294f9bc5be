import operator
from typing import IO, Iterator, Optional, Union

from fsview.predicates.base import Predicate, accept_all, selector
from fsview.utils.exceptions import OutOfRangeError, PreconditionError
from fsview.views.cursor import Cursor, ReverseCursor


class FilteredStringView:
    """
    Non-owning view of the characters of a string that satisfy a predicate.

    The view stores a reference to the caller's string, the raw length it
    covers and a predicate. Nothing is copied: every read evaluates the
    predicate over the raw range on demand, so ``size()`` and indexing are
    O(raw length). Two coordinate systems are involved throughout: raw offsets
    into the backing string and logical offsets into the filtered sequence.

    Views compare, order and print by their filtered content only.
    """

    def __init__(self, data: Optional[str] = None, predicate: Predicate = accept_all):
        """
        Create a view over ``data``.

        Args:
            data (str, optional): The backing string. None creates the empty default view.
            predicate (Predicate): Selects the characters exposed by the view.
                Defaults to accepting every character.

        Raises:
            TypeError: If data is neither None nor a str.
        """
        if isinstance(data, FilteredStringView):
            raise TypeError("Use FilteredStringView.copy() to duplicate a view")
        if data is not None and not isinstance(data, str):
            raise TypeError(f"Cannot view an object of type {type(data).__name__}")
        self._assign(data, 0 if data is None else len(data), predicate)

    @classmethod
    def from_terminated(cls, data: str, predicate: Predicate = accept_all) -> "FilteredStringView":
        """
        Create a view ending at the first NUL character of ``data``.

        Args:
            data (str): The backing string. Must not be None.
            predicate (Predicate): Selects the characters exposed by the view.

        Returns:
            FilteredStringView: A view over the characters before the terminator,
                or over the whole string when it has no terminator.

        Raises:
            PreconditionError: If data is None.
        """
        if data is None:
            raise PreconditionError("A terminated view needs a backing string, got None")
        terminator = data.find("\0")
        length = len(data) if terminator < 0 else terminator
        return cls.over(data, length, predicate)

    @classmethod
    def over(cls, data: Optional[str], length: int, predicate: Predicate) -> "FilteredStringView":
        """
        Create a view over the first ``length`` raw characters of ``data``.

        Used to derive views that keep the raw bound of another view.
        """
        view = cls.__new__(cls)
        view._assign(data, length, predicate)
        return view

    def _assign(self, data: Optional[str], length: int, predicate: Predicate) -> None:
        self._data = data
        self._length = length
        self._predicate = predicate
        self._select = selector(predicate)

    def selects(self, offset: int) -> bool:
        """Whether the character at raw ``offset`` belongs to the view."""
        return self._select(offset, self._data[offset])

    def next_selected(self, start: int) -> int:
        # first selected offset >= start, raw_length() when there is none
        offset = start
        while offset < self._length and not self.selects(offset):
            offset += 1
        return offset

    def previous_selected(self, start: int) -> int:
        # last selected offset <= start, -1 when there is none
        offset = start
        while offset >= 0 and not self.selects(offset):
            offset -= 1
        return offset

    def _nth_offset(self, n: int) -> int:
        # raw offset of the n-th selected character, -1 when there is none
        if n < 0:
            return -1
        count = 0
        for offset in range(self._length):
            if self.selects(offset):
                if count == n:
                    return offset
                count += 1
        return -1

    def data(self) -> Optional[str]:
        """Return the backing string as-is, including characters the predicate rejects."""
        return self._data

    def predicate(self) -> Predicate:
        return self._predicate

    def raw_length(self) -> int:
        """Number of raw characters of the backing string covered by the view."""
        return self._length

    def size(self) -> int:
        """Count the selected characters. O(raw length) on every call."""
        return sum(1 for offset in range(self._length) if self.selects(offset))

    def empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def index(self, n: int) -> str:
        """
        Return the n-th selected character without range reporting.

        Raises:
            PreconditionError: If n is not a valid logical position.
        """
        offset = self._nth_offset(n)
        if offset < 0:
            raise PreconditionError(f"FilteredStringView[{n}]: index outside the filtered string")
        return self._data[offset]

    def __getitem__(self, n: int) -> str:
        return self.index(operator.index(n))

    def at(self, n: int) -> str:
        """
        Return the n-th selected character.

        Args:
            n (int): Logical position in the filtered sequence.

        Returns:
            str: The selected character.

        Raises:
            OutOfRangeError: If n is not a valid logical position.
        """
        offset = self._nth_offset(n)
        if offset < 0:
            size = self.size()
            raise OutOfRangeError(
                f"FilteredStringView.at({n}): invalid index for filtered string of size {size}",
                index=n,
                size=size,
            )
        return self._data[offset]

    def to_string(self) -> str:
        """Materialize the filtered sequence into a new string."""
        return "".join(
            self._data[offset] for offset in range(self._length) if self.selects(offset)
        )

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)

    def __repr__(self) -> str:
        return f"FilteredStringView({self.to_string()!r})"

    def write(self, stream: IO[str]) -> IO[str]:
        """Write the filtered sequence to ``stream`` character by character."""
        for char in self:
            stream.write(char)
        return stream

    def copy(self) -> "FilteredStringView":
        """Duplicate the view. The backing string is shared, not copied."""
        return FilteredStringView.over(self._data, self._length, self._predicate)

    __copy__ = copy

    def take(self) -> "FilteredStringView":
        """
        Move the view out of this instance.

        Returns:
            FilteredStringView: A view holding this view's string, length and predicate.

        Afterwards this instance has no backing string and a raw length of zero.
        Its predicate is left untouched; the moved-from view is only good for
        being reassigned or dropped.
        """
        moved = self.copy()
        self._data = None
        self._length = 0
        return moved

    def begin(self) -> Cursor:
        return Cursor(self, self.next_selected(0))

    def end(self) -> Cursor:
        return Cursor(self, self._length)

    def rbegin(self) -> ReverseCursor:
        return ReverseCursor(self.end())

    def rend(self) -> ReverseCursor:
        return ReverseCursor(self.begin())

    cbegin = begin
    cend = end
    crbegin = rbegin
    crend = rend

    def __iter__(self) -> Iterator[str]:
        return self.begin()

    def __reversed__(self) -> Iterator[str]:
        return self.rbegin()

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __lt__(self, other: Union["FilteredStringView", str]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        for mine, theirs in zip(self, other):
            if mine != theirs:
                return mine < theirs
        return self.size() < other.size()

    def __gt__(self, other: Union["FilteredStringView", str]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other < self

    def __le__(self, other: Union["FilteredStringView", str]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not other < self

    def __ge__(self, other: Union["FilteredStringView", str]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self < other

    # take() mutates a view in place
    __hash__ = None


def _coerce(other: object):
    if isinstance(other, FilteredStringView):
        return other
    if isinstance(other, str):
        return FilteredStringView(other)
    return NotImplemented
