from __future__ import annotations

# Repetition counts and descriptor values are single base-10 digits.
MIN_DIGIT: int = 1
MAX_DIGIT: int = 9

# A digit group never holds more than ten unique digits, which bounds every
# partition and pairing the solver builds.
MAX_UNIQUE_DIGITS: int = 10

# Digits offered to free variables before the descriptors in use are removed.
FREE_VAR_CANDIDATES: tuple[int, ...] = tuple(range(MAX_DIGIT))

# Letter never used to name a free variable in rendered solutions.
RESERVED_IDENT: str = "i"
