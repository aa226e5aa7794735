"""Two-word identifier generator with collision avoidance.

Generates human-readable identifiers of the form "adjective-noun" used as the
public handle of an art piece. Uniqueness against already-issued identifiers
is achieved by rejection sampling against a caller-supplied exclusion set.
"""

import random
from collections.abc import Iterable, Sequence
from typing import Optional

from .wordlists import ADJECTIVES, NOUNS


class ExhaustedCapacityError(Exception):
    """Raised when fewer unused identifiers remain than were requested."""

    def __init__(self, requested: int, capacity: int, existing: int):
        self.requested = requested
        self.capacity = capacity
        self.existing = existing
        super().__init__(
            f"Cannot generate {requested} unique IDs. "
            f"Maximum possible: {capacity} ({max(capacity - existing, 0)} unused)"
        )


def _clean_wordlist(words: Iterable[str], separator: str, label: str) -> tuple[str, ...]:
    cleaned = tuple(dict.fromkeys(words))
    if not cleaned:
        raise ValueError(f"{label} wordlist is empty")
    for word in cleaned:
        if not word or separator in word:
            raise ValueError(f"{label} wordlist entry {word!r} is empty or contains {separator!r}")
    return cleaned


class TwoWordIDGenerator:
    """Generator for two-word identifiers.

    Creates IDs in the format: "adjective-noun"

    Example IDs:
        - "abstract-bones"
        - "bleached-mesa"
        - "spectral-monolith"
    """

    def __init__(
        self,
        adjectives: Optional[Sequence[str]] = None,
        nouns: Optional[Sequence[str]] = None,
        separator: str = "-",
        rng: Optional[random.Random] = None,
    ):
        """Initialize the generator.

        Args:
            adjectives: First-word vocabulary. Defaults to ADJECTIVES.
            nouns: Second-word vocabulary. Defaults to NOUNS.
            separator: Separator between words. Defaults to "-".
            rng: Random source. Defaults to a fresh ``random.Random``.

        Raises:
            ValueError: If a wordlist is empty or an entry contains the separator.
        """
        if not separator:
            raise ValueError("separator must be non-empty")
        self.separator = separator
        self.adjectives = _clean_wordlist(
            ADJECTIVES if adjectives is None else adjectives, separator, "adjective"
        )
        self.nouns = _clean_wordlist(NOUNS if nouns is None else nouns, separator, "noun")
        self._adjective_set = frozenset(self.adjectives)
        self._noun_set = frozenset(self.nouns)
        self._rng = rng or random.Random()

    @property
    def capacity(self) -> int:
        """Total number of distinct identifiers this generator can produce."""
        return len(self.adjectives) * len(self.nouns)

    def generate(self) -> str:
        """Generate a single identifier.

        Not checked against any existing set; use ``generate_unique_batch``
        when uniqueness matters.
        """
        adjective = self._rng.choice(self.adjectives)
        noun = self._rng.choice(self.nouns)
        return f"{adjective}{self.separator}{noun}"

    def generate_unique_batch(
        self,
        count: int,
        existing: Optional[Iterable[str]] = None,
    ) -> list[str]:
        """Generate a batch of identifiers unique against ``existing`` and each other.

        Args:
            count: Number of identifiers to generate.
            existing: Identifiers already in use. Not modified.

        Returns:
            List of ``count`` distinct identifiers in the order they were accepted.

        Raises:
            ValueError: If count is negative.
            ExhaustedCapacityError: If fewer than ``count`` unused identifiers remain.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []

        taken = existing if isinstance(existing, (set, frozenset)) else set(existing or ())
        if count > self.capacity - len(taken):
            raise ExhaustedCapacityError(count, self.capacity, len(taken))

        # dict preserves acceptance order
        accepted: dict[str, None] = {}
        while len(accepted) < count:
            candidate = self.generate()
            if candidate not in taken and candidate not in accepted:
                accepted[candidate] = None
        return list(accepted)

    def is_valid(self, candidate: object) -> bool:
        """Check that ``candidate`` is a well-formed identifier from this vocabulary."""
        if not candidate or not isinstance(candidate, str):
            return False

        parts = candidate.split(self.separator)
        if len(parts) != 2:
            return False

        adjective, noun = parts
        return adjective in self._adjective_set and noun in self._noun_set


_default_generator = TwoWordIDGenerator()


def get_default_generator() -> TwoWordIDGenerator:
    return _default_generator


def generate_two_word_id() -> str:
    """Generate a single identifier from the default word lists."""
    return _default_generator.generate()


def generate_unique_ids(count: int, existing_ids: Optional[Iterable[str]] = None) -> list[str]:
    """Generate ``count`` unique identifiers from the default word lists.

    Example:
        >>> generate_unique_ids(2, {"abstract-bones"})
        ['bleached-mesa', 'spectral-monolith']
    """
    return _default_generator.generate_unique_batch(count, existing_ids)


def is_valid_two_word_id(candidate: object) -> bool:
    return _default_generator.is_valid(candidate)


def get_total_combinations() -> int:
    return _default_generator.capacity
