from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.described_kind import DescribedKind


class Described(BaseModel):
    """The digit standing in one position of a solution.

    - kind: DIGIT for a concrete digit, VAR for a free variable
    - value: the digit itself, or the slot index of the variable set
    """

    kind: DescribedKind
    value: int = Field(..., ge=0, le=9)

    model_config = {
        "frozen": True,
    }

    @classmethod
    def digit(cls, digit: int) -> Described:
        return cls(kind=DescribedKind.DIGIT, value=digit)

    @classmethod
    def var(cls, slot: int) -> Described:
        return cls(kind=DescribedKind.VAR, value=slot)

    @property
    def is_var(self) -> bool:
        return self.kind == DescribedKind.VAR
