from typing import Optional


class FilteredStringViewError(Exception):
    """Base exception for all fsview related errors."""

    pass


class OutOfRangeError(FilteredStringViewError, IndexError):
    """
    Raised when a checked accessor is given a logical position outside the view.

    Carries the offending index and the filtered size of the view so callers
    can report or recover without re-scanning the buffer.
    """

    def __init__(self, message: str, index: int, size: Optional[int] = None):
        super().__init__(message)
        self.index = index
        self.size = size


class PreconditionError(FilteredStringViewError, IndexError):
    """Raised when an unchecked operation is used outside its precondition."""

    pass


class ConfigurationError(FilteredStringViewError):
    """Raised when there is an issue with configuration settings."""

    pass


class UnsupportedTypeError(FilteredStringViewError):
    """Raised when an unsupported type is requested from a factory."""

    pass
