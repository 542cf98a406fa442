from __future__ import annotations

import string
from collections.abc import Iterator, Sequence

from pydantic import BaseModel, Field

from core.enums.digits import FREE_VAR_CANDIDATES, RESERVED_IDENT
from core.models.described import Described


def _iter_idents() -> Iterator[str]:
    """Yield free variable names a, b, c, ... skipping the reserved letter."""
    for letter in string.ascii_lowercase:
        if letter != RESERVED_IDENT:
            yield letter


class SolutionEntry(BaseModel):
    """One column of a solution: a rep, its descriptor and the digit they describe."""

    rep: int = Field(..., ge=1, le=9)
    descriptor: int = Field(..., ge=1, le=9)
    described: Described


class Solution(BaseModel):
    """An accepted assignment of digits to rep/descriptor pairs.

    - entries: columns in print order, higher digits first within a descriptor
    - var_sets: slot index -> candidate digits, only for slots with 2+ candidates

    Slots with a single candidate are resolved to concrete digits, so every
    VAR entry refers to a key of var_sets.
    """

    entries: list[SolutionEntry] = Field(
        default_factory=list,
        description="Solution columns in print order.",
    )

    var_sets: dict[int, set[int]] = Field(
        default_factory=dict,
        description="Candidate digits for each free variable slot.",
    )

    @classmethod
    def from_rep_descriptors(cls, rep_descriptors: Sequence[tuple[int, int]]) -> Solution:
        """Build the solution for a pairing that passed every constraint check.

        Candidate sets are computed for all slots first; assignment happens in a
        second pass, walking descriptors from largest to smallest and reps in
        ascending order. The slot of an entry is `descriptor - rep`.

        Args:
            rep_descriptors: The accepted (rep, descriptor) pairing

        Returns:
            The solution with single-candidate slots resolved to digits

        Raises:
            ValueError: If a slot has no candidate digit left
        """
        descriptor_counts: dict[int, int] = {}
        descriptor_to_reps: dict[int, list[int]] = {}
        for rep, descriptor in rep_descriptors:
            descriptor_counts[descriptor] = descriptor_counts.get(descriptor, 0) + rep
            descriptor_to_reps.setdefault(descriptor, []).append(rep)

        n_free_vars = len(rep_descriptors) - len(descriptor_counts)
        slots_to_vars: dict[int, set[int]] = {}
        if n_free_vars != 0:
            slots_to_vars[0] = {digit for digit in FREE_VAR_CANDIDATES if digit not in descriptor_counts}
        for descriptor, count in sorted(descriptor_counts.items()):
            slots_to_vars.setdefault(count, set()).add(descriptor)

        var_sets = {slot: set(digits) for slot, digits in slots_to_vars.items() if len(digits) > 1}

        entries: list[SolutionEntry] = []
        for descriptor in sorted(descriptor_to_reps, reverse=True):
            reps_digits: list[tuple[int, int, Described]] = []
            for rep in sorted(descriptor_to_reps[descriptor]):
                slot = descriptor - rep
                candidates = slots_to_vars.get(slot)
                if not candidates:
                    msg = f"No candidate digit left for slot {slot} (rep={rep}, descriptor={descriptor})"
                    raise ValueError(msg)

                best_digit = max(candidates)
                if slot in var_sets:
                    candidates.remove(best_digit)
                    described = Described.var(slot)
                else:
                    del slots_to_vars[slot]
                    described = Described.digit(best_digit)
                reps_digits.append((rep, best_digit, described))

            reps_digits.sort(key=lambda item: (item[1], item[0]))
            for rep, _best_digit, described in reversed(reps_digits):
                entries.append(SolutionEntry(rep=rep, descriptor=descriptor, described=described))

        return cls(entries=entries, var_sets=var_sets)

    def rep_descriptors(self) -> list[tuple[int, int]]:
        return [(entry.rep, entry.descriptor) for entry in self.entries]

    def pretty_print(self) -> str:
        """Render the solution as aligned reps/descriptors/digits rows.

        Free variables are named a, b, c, ... in column order. When any exist a
        `where` block follows, listing per variable set (largest slot first)
        which names draw from which candidate digits.
        """
        lines = [
            "reps:        " + "".join(str(entry.rep) for entry in self.entries),
            "descriptors: " + "".join(str(entry.descriptor) for entry in self.entries),
        ]

        idents_by_slot: dict[int, list[str]] = {slot: [] for slot in self.var_sets}
        idents = _iter_idents()
        digits = []
        for entry in self.entries:
            if entry.described.is_var:
                ident = next(idents)
                idents_by_slot[entry.described.value].append(ident)
                digits.append(ident)
            else:
                digits.append(str(entry.described.value))
        lines.append("digits:      " + "".join(digits))

        if idents_by_slot:
            lines.append("where")
            for slot in sorted(idents_by_slot, reverse=True):
                names = ", ".join(sorted(idents_by_slot[slot]))
                candidates = ", ".join(str(digit) for digit in sorted(self.var_sets[slot]))
                lines.append(f"  {{{names}}} ⊆ {{{candidates}}}")

        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.pretty_print()
