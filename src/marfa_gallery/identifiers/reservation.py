"""Identifier reservation against the storage layer.

The generator only avoids identifiers present in the snapshot it is given.
Two submissions working from the same stale snapshot can draw the same
identifier; the unique constraint on ``art_pieces.identification_word``
rejects the second insert, and the helpers here retry with a fresh snapshot.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

from marfa_gallery.database.ports import UniqueViolation

from .generator import TwoWordIDGenerator, get_default_generator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IdentifierReservationError(RuntimeError):
    """Raised when every reservation attempt lost a uniqueness race."""


def insert_with_unique_identifier(
    insert: Callable[[str], T],
    load_existing: Callable[[], Iterable[str]],
    generator: Optional[TwoWordIDGenerator] = None,
    max_attempts: int = 5,
    context: Optional[str] = None,
) -> tuple[str, T]:
    """Draw an unused identifier and insert with it, retrying on collisions.

    Args:
        insert: Performs the insert with the drawn identifier. Must raise
            ``UniqueViolation`` when the storage constraint rejects it.
        load_existing: Returns the identifiers currently stored.
        generator: Optional custom generator. Uses the default one if None.
        max_attempts: Number of draws before giving up.
        context: Optional context string for logging.

    Returns:
        The identifier that was stored and the value returned by ``insert``.

    Raises:
        ExhaustedCapacityError: If no unused identifiers remain.
        IdentifierReservationError: If every attempt collided.
        UniqueViolation: If the insert failed on a constraint other than the
            identifier (the drawn identifier is still free afterwards).
    """
    generator = generator or get_default_generator()
    context_msg = f" for {context}" if context else ""

    for attempt in range(1, max_attempts + 1):
        existing = set(load_existing())
        candidate = generator.generate_unique_batch(1, existing)[0]
        try:
            return candidate, insert(candidate)
        except UniqueViolation:
            if candidate not in set(load_existing()):
                raise
            logger.warning(
                f"Identifier {candidate} taken concurrently{context_msg} "
                f"(attempt {attempt}/{max_attempts}), retrying"
            )

    raise IdentifierReservationError(
        f"Failed to reserve a unique identifier after {max_attempts} attempts{context_msg}"
    )
