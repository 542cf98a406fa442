from __future__ import annotations

from enum import Enum


class DescribedKind(str, Enum):
    """How a digit position of a solution is filled.

    DIGIT positions hold a concrete digit, VAR positions refer to a shared set
    of candidate digits keyed by slot index.
    """

    DIGIT = "digit"
    VAR = "var"
