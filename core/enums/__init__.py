"""Core enums and constants for the descriptor pairs domain."""

from .described_kind import DescribedKind
from .digits import (
    FREE_VAR_CANDIDATES,
    MAX_DIGIT,
    MAX_UNIQUE_DIGITS,
    MIN_DIGIT,
    RESERVED_IDENT,
)

__all__ = [
    "DescribedKind",
    "FREE_VAR_CANDIDATES",
    "MAX_DIGIT",
    "MAX_UNIQUE_DIGITS",
    "MIN_DIGIT",
    "RESERVED_IDENT",
]
