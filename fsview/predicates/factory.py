import string
from typing import ClassVar, Dict, Iterable

from fsview.utils.logger import logger
from fsview.utils.exceptions import UnsupportedTypeError
from fsview.predicates.base import Conjunction, Predicate, accept_all, reject_all


class PredicateFactory:
    """
    Factory for creating character predicates.

    This class provides a registry of named predicates, so that callers which
    only have a textual description of a filter (the command line, a config
    value) can obtain the callable. New predicates can be registered to make
    them available by name.
    """

    REGISTRY: ClassVar[Dict[str, Predicate]] = {
        "any": accept_all,
        "none": reject_all,
        "alpha": str.isalpha,
        "digit": str.isdigit,
        "alnum": str.isalnum,
        "space": str.isspace,
        "upper": str.isupper,
        "lower": str.islower,
        "punct": lambda char: char in string.punctuation,
    }

    @classmethod
    def register_predicate(cls, name: str, predicate: Predicate) -> None:
        """
        Register a named predicate.

        Args:
            name (str): The name to register the predicate under.
            predicate (Predicate): The predicate to register.
        """
        cls.REGISTRY[name.lower()] = predicate

    @classmethod
    def create(cls, name: str) -> Predicate:
        """
        Look up a predicate by name.

        Args:
            name (str): The registered name of the predicate.

        Returns:
            Predicate: The registered predicate.

        Raises:
            UnsupportedTypeError: If no predicate is registered under the name.
        """
        normalized = name.lower()
        logger.debug(f"Creating predicate: {normalized}")

        if normalized not in cls.REGISTRY:
            supported = sorted(cls.REGISTRY.keys())
            logger.error(f"Unsupported predicate: {name}. Supported predicates: {supported}")
            raise UnsupportedTypeError(
                f"Unsupported predicate: {name}. Supported predicates: {supported}"
            )

        return cls.REGISTRY[normalized]

    @staticmethod
    def create_conjunction(predicates: Iterable[Predicate]) -> Conjunction:
        """
        Create a conjunction of the provided predicates.

        Args:
            predicates: Predicates evaluated in the order they appear.

        Returns:
            Conjunction: A predicate accepting only what every predicate accepts.
        """
        return Conjunction(predicates)

    @staticmethod
    def excluding(chars: str) -> Predicate:
        """Predicate rejecting every character contained in ``chars``."""
        excluded = frozenset(chars)
        return lambda char: char not in excluded

    @staticmethod
    def only(chars: str) -> Predicate:
        """Predicate accepting only characters contained in ``chars``."""
        allowed = frozenset(chars)
        return lambda char: char in allowed
