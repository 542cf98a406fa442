"""Pydantic models for core descriptor pairs domain objects."""

from core.enums import DescribedKind

from .described import Described
from .solution import Solution, SolutionEntry

__all__ = [
    "Described",
    "DescribedKind",
    "Solution",
    "SolutionEntry",
]
