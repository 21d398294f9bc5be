from typing import Callable, Iterable, Optional, Protocol, Tuple, runtime_checkable


# Creates an alias for the selection callable a view carries
Predicate = Callable[[str], bool]


def accept_all(char: str) -> bool:
    """Default predicate: every character is part of the view."""
    return True


def reject_all(char: str) -> bool:
    """Predicate used by empty derived views: no character is selected."""
    return False


@runtime_checkable
class PositionalPredicate(Protocol):
    """Protocol for predicates that also depend on the raw offset of a character.

    Python characters carry no address, so a predicate that restricts a view
    to a raw sub-range has to be told where the character sits in the backing
    buffer. Views evaluate selection through ``accepts_at`` whenever the
    predicate provides it.
    """

    def __call__(self, char: str) -> bool:
        """Character-level test, without knowledge of the raw offset."""
        ...

    def accepts_at(self, offset: int, char: str) -> bool:
        """Decide whether the character at raw ``offset`` is selected."""
        ...


def selector(predicate: Predicate) -> Callable[[int, str], bool]:
    """Return an ``(offset, char) -> bool`` callable for any predicate."""
    if isinstance(predicate, PositionalPredicate):
        return predicate.accepts_at
    return lambda offset, char: predicate(char)


class Conjunction:
    """A fixed chain of predicates that must all accept a character.

    Predicates are evaluated in the order they were given and evaluation stops
    at the first one that rejects. An empty chain accepts every character.
    Members that restrict raw offsets keep their restriction: views evaluate
    the chain through ``accepts_at``.
    """

    def __init__(self, predicates: Optional[Iterable[Predicate]] = None):
        """Initialize a new conjunction.

        Args:
            predicates: The predicates to evaluate in sequence. If None, the
                    conjunction accepts everything.
        """
        self._predicates: Tuple[Predicate, ...] = tuple(predicates or ())
        self._selectors = tuple(selector(predicate) for predicate in self._predicates)

    @property
    def predicates(self) -> Tuple[Predicate, ...]:
        return self._predicates

    def __call__(self, char: str) -> bool:
        # offset unknown here, members are tested on the character only
        for predicate in self.predicates:
            if not predicate(char):
                return False
        return True

    def accepts_at(self, offset: int, char: str) -> bool:
        for select in self._selectors:
            if not select(offset, char):
                return False
        return True

    def __len__(self) -> int:
        return len(self.predicates)

    def __repr__(self) -> str:
        return f"Conjunction({len(self.predicates)} predicates)"


class RangePredicate:
    """Restricts another predicate to the raw offsets ``[start, stop)``.

    Nested restrictions compose: the wrapped predicate is itself evaluated
    positionally when it supports it.
    """

    def __init__(self, predicate: Predicate, start: int, stop: int):
        self.predicate = predicate
        self.start = start
        self.stop = stop
        self._select = selector(predicate)

    def __call__(self, char: str) -> bool:
        # offset unknown here, only the wrapped character test applies
        return self.predicate(char)

    def accepts_at(self, offset: int, char: str) -> bool:
        return self.start <= offset < self.stop and self._select(offset, char)

    def __repr__(self) -> str:
        return f"RangePredicate(start={self.start}, stop={self.stop})"
