from typing import TYPE_CHECKING

from fsview.utils.exceptions import PreconditionError

if TYPE_CHECKING:
    from fsview.views.base import FilteredStringView


class Cursor:
    """
    Bidirectional cursor over the selected characters of a view.

    A cursor sits on a raw offset of the backing buffer. Moving it skips every
    raw position the view's predicate rejects, so it only ever rests on a
    selected character or on the one-past-the-end position ``raw_length()``.
    Cursors are not random access: moving costs the number of skipped
    positions.

    A cursor is also a Python iterator yielding the characters from its
    position up to the end of the view.
    """

    def __init__(self, view: "FilteredStringView", position: int):
        self.view = view
        self.position = position

    def at_end(self) -> bool:
        return self.position >= self.view.raw_length()

    def get(self) -> str:
        """
        Dereference the cursor.

        Returns:
            str: The character at the current raw position.

        Raises:
            PreconditionError: If the cursor is at the end of the view.
        """
        if self.at_end():
            raise PreconditionError("Cannot dereference the end cursor of a view")
        return self.view.data()[self.position]

    def increment(self) -> "Cursor":
        """Move to the next selected position, or to the end. Returns self."""
        if self.at_end():
            raise PreconditionError("Cannot increment the end cursor of a view")
        self.position = self.view.next_selected(self.position + 1)
        return self

    def decrement(self) -> "Cursor":
        """Move to the previous selected position. Returns self."""
        previous = self.view.previous_selected(self.position - 1)
        if previous < 0:
            raise PreconditionError("Cannot decrement a cursor past the beginning of a view")
        self.position = previous
        return self

    def post_increment(self) -> "Cursor":
        """Move forward, returning a copy of the cursor taken before the move."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "Cursor":
        """Move backward, returning a copy of the cursor taken before the move."""
        previous = self.copy()
        self.decrement()
        return previous

    def copy(self) -> "Cursor":
        return Cursor(self.view, self.position)

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> str:
        if self.at_end():
            raise StopIteration
        char = self.get()
        self.increment()
        return char

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.view is other.view and self.position == other.position

    def __repr__(self) -> str:
        return f"Cursor(position={self.position})"


class ReverseCursor:
    """
    Reverse adaptor over a Cursor.

    The adaptor keeps a base cursor and dereferences the selected character
    just before it, so ``view.rbegin()`` wraps ``view.end()`` and yields the
    last selected character first, and ``view.rend()`` wraps ``view.begin()``.
    """

    def __init__(self, base: Cursor):
        self.base = base.copy()

    def get(self) -> str:
        return self.base.copy().decrement().get()

    def increment(self) -> "ReverseCursor":
        self.base.decrement()
        return self

    def decrement(self) -> "ReverseCursor":
        self.base.increment()
        return self

    def post_increment(self) -> "ReverseCursor":
        previous = ReverseCursor(self.base)
        self.increment()
        return previous

    def post_decrement(self) -> "ReverseCursor":
        previous = ReverseCursor(self.base)
        self.decrement()
        return previous

    def __iter__(self) -> "ReverseCursor":
        return self

    def __next__(self) -> str:
        if self.base == self.base.view.begin():
            raise StopIteration
        char = self.get()
        self.increment()
        return char

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self.base == other.base

    def __repr__(self) -> str:
        return f"ReverseCursor(base={self.base!r})"
