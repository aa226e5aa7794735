"""Two-word identifier system.

Art pieces are addressed publicly by human-readable identifiers such as
"bleached-mesa" or "spectral-monolith", composed of one adjective and one
noun from fixed, versioned word lists.
"""

from .generator import (
    ExhaustedCapacityError,
    TwoWordIDGenerator,
    generate_two_word_id,
    generate_unique_ids,
    get_default_generator,
    get_total_combinations,
    is_valid_two_word_id,
)
from .reservation import IdentifierReservationError, insert_with_unique_identifier
from .wordlists import ADJECTIVES, NOUNS

__all__ = [
    # Core generator
    "TwoWordIDGenerator",
    "ExhaustedCapacityError",
    "get_default_generator",
    # Word lists
    "ADJECTIVES",
    "NOUNS",
    # Convenience functions
    "generate_two_word_id",
    "generate_unique_ids",
    "is_valid_two_word_id",
    "get_total_combinations",
    # Storage-backed reservation
    "IdentifierReservationError",
    "insert_with_unique_identifier",
]
