import pytest
from fsview.views.base import FilteredStringView
from fsview.views.cursor import Cursor, ReverseCursor
from fsview.utils.exceptions import PreconditionError


def not_vowel(char):
    return char not in "aeiou"


class TestCursor:
    """Test cases for forward and backward cursor movement"""

    def test_basic_iteration_without_filter(self):
        """Test stepping a cursor through an unfiltered view."""
        view = FilteredStringView("noor")
        cursor = view.begin()

        for expected in "noor":
            assert cursor != view.end()
            assert cursor.get() == expected
            cursor.increment()

        assert cursor == view.end()

    def test_iteration_skips_rejected(self):
        """Test that iteration only yields selected characters."""
        view = FilteredStringView("youtube", not_vowel)

        assert list(view) == ["y", "t", "b"]

    def test_begin_skips_leading_rejected(self):
        """Test that begin rests on the first selected raw position."""
        view = FilteredStringView("--ab", str.isalpha)

        assert view.begin().position == 2
        assert view.end().position == 4

    def test_begin_equals_end_when_nothing_selected(self):
        """Test that begin is end for a view without selected characters."""
        view = FilteredStringView("1234", str.isalpha)

        assert view.begin() == view.end()

    def test_empty_string(self):
        """Test cursors over an empty view."""
        view = FilteredStringView("")

        assert view.begin() == view.end()
        assert view.rbegin() == view.rend()
        assert list(reversed(view)) == []

    def test_decrement_from_end(self):
        """Test walking backwards from the end cursor."""
        view = FilteredStringView("candle")
        cursor = view.cend()

        assert cursor.decrement().get() == "e"
        assert cursor.decrement().get() == "l"

    def test_decrement_skips_rejected(self):
        """Test that decrementing skips rejected raw positions."""
        view = FilteredStringView("a--b", str.isalpha)
        cursor = view.end()

        cursor.decrement()
        assert cursor.position == 3
        cursor.decrement()
        assert cursor.position == 0

    def test_decrement_past_begin_traps(self):
        """Test that decrementing the begin cursor raises."""
        view = FilteredStringView("--ab", str.isalpha)
        cursor = view.begin()

        with pytest.raises(PreconditionError):
            cursor.decrement()
        assert cursor.position == 2

    def test_dereference_end_traps(self):
        """Test that dereferencing the end cursor raises."""
        view = FilteredStringView("ab")

        with pytest.raises(PreconditionError):
            view.end().get()

    def test_increment_end_traps(self):
        """Test that incrementing the end cursor raises."""
        view = FilteredStringView("ab")

        with pytest.raises(PreconditionError):
            view.end().increment()

    def test_post_increment_returns_previous(self):
        """Test that post increment returns the cursor before moving."""
        view = FilteredStringView("a-b", str.isalpha)
        cursor = view.begin()

        previous = cursor.post_increment()

        assert previous.get() == "a"
        assert cursor.get() == "b"

    def test_post_decrement_returns_previous(self):
        """Test that post decrement returns the cursor before moving."""
        view = FilteredStringView("a-b", str.isalpha)
        cursor = view.end()

        previous = cursor.post_decrement()

        assert previous == view.end()
        assert cursor.get() == "b"

    def test_equality_needs_same_view(self):
        """Test that cursors of different views never compare equal."""
        text = "hello"
        first = FilteredStringView(text)
        second = FilteredStringView(text)

        assert first.begin() == first.cbegin()
        assert first.end() == first.cend()
        assert first.begin() != second.begin()

    def test_cursor_is_iterator(self):
        """Test that a cursor yields the remaining characters."""
        view = FilteredStringView("a1b2c3", str.isalpha)
        cursor = view.begin()
        cursor.increment()

        assert list(cursor) == ["b", "c"]
        assert cursor == view.end()

    def test_repr(self):
        """Test the cursor representation."""
        assert repr(Cursor(FilteredStringView("ab"), 1)) == "Cursor(position=1)"


class TestReverseCursor:
    """Test cases for reverse iteration"""

    def test_reverse_with_filter(self):
        """Test that reverse iteration mirrors filtered forward order."""
        view = FilteredStringView("odyssey", lambda c: not (c == "s" or c == "y"))

        assert list(reversed(view)) == ["e", "d", "o"]

    def test_reverse_without_filter(self):
        """Test reverse iteration over an unfiltered view."""
        view = FilteredStringView("superman")

        assert "".join(reversed(view)) == "namrepus"

    def test_reverse_is_mirror_of_forward(self):
        """Test that reverse order equals reversed forward order."""
        view = FilteredStringView("--a-b--c-", str.isalpha)

        assert list(reversed(view)) == list(view)[::-1]

    def test_stepping_rbegin_to_rend(self):
        """Test manual reverse stepping."""
        view = FilteredStringView("xab", lambda c: c != "x")
        cursor = view.rbegin()

        assert cursor.get() == "b"
        cursor.increment()
        assert cursor.get() == "a"
        cursor.increment()
        assert cursor == view.rend()

    def test_reverse_decrement(self):
        """Test moving a reverse cursor back toward rbegin."""
        view = FilteredStringView("abc")
        cursor = view.rend()

        cursor.decrement()

        assert cursor.get() == "a"
        assert cursor.post_decrement().get() == "a"
        assert cursor.get() == "b"

    def test_crbegin_matches_rbegin(self):
        """Test that the const aliases match."""
        view = FilteredStringView("hello")

        assert view.rbegin() == view.crbegin()
        assert view.rend() == view.crend()

    def test_reverse_cursor_copies_base(self):
        """Test that moving a reverse cursor leaves the wrapped cursor alone."""
        view = FilteredStringView("abc")
        base = view.end()
        cursor = ReverseCursor(base)

        cursor.increment()

        assert base == view.end()
        assert cursor.get() == "b"
        assert cursor.post_increment().get() == "b"
        assert cursor.get() == "a"
