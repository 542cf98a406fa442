"""
Pydantic models for configuration management in the descriptor pairs solver.

This module defines the validated run configuration built from the command
line arguments.
"""

from pydantic import BaseModel, Field


class SolverConfiguration(BaseModel):
    """A single solver run: how many rep/descriptor pairs to solve for."""

    pairs: int = Field(..., ge=0, description="Total number of pairs N; reps sum to N, descriptors to 2N")
