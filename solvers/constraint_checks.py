"""
Constraint checks applied to candidate rep/descriptor combinations.

The driver runs them cheapest first: `check_free_vars` on the two partitions
before any pairing is enumerated, then the pairing checks in order. Only
`check_reps_descriptor_counts` builds a Solution.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from core.enums.digits import FREE_VAR_CANDIDATES, MAX_DIGIT
from core.models.solution import Solution


def check_free_vars(reps: Sequence[int], descriptors: Sequence[int]) -> bool:
    """Check that the partitions leave room for the free variables they need.

    If there are fewer unique descriptors than unique digits, the difference
    must be made up by reps that also appear among the descriptors. If the
    descriptors start with `n_ones` 1s, then `n_unique_descriptors + n_ones - 1`
    may not exceed the number of unique digits.

    Args:
        reps: Sorted reps partition
        descriptors: Sorted descriptors partition

    Returns:
        False if the combination can never yield a solution
    """
    n_unique_digits = len(descriptors)
    n_unique_descriptors = len(set(descriptors))
    n_ones = 0
    for descriptor in descriptors:
        if descriptor != 1:
            break
        n_ones += 1

    if n_ones != 0 and n_unique_descriptors + n_ones - 1 > n_unique_digits:
        return False
    if n_unique_descriptors == n_unique_digits:
        return True

    reps_required_in_descriptors = n_unique_digits - n_unique_descriptors
    for rep in reps:
        if reps_required_in_descriptors == 0:
            break
        if rep in descriptors:
            reps_required_in_descriptors -= 1
    return reps_required_in_descriptors == 0


def check_reps_lte_descriptor(rep_descriptors: Sequence[tuple[int, int]]) -> bool:
    """Each descriptor's reps must be less than or equal to the descriptor."""
    # Disabled: descriptor 9 would also require `rep < 7`
    # (descriptor != 9 or rep < 7)
    return all(rep <= descriptor for rep, descriptor in rep_descriptors)


def check_free_vars_rep_descriptor(rep_descriptors: Sequence[tuple[int, int]]) -> bool:
    """Every pair whose rep equals its descriptor needs its own free variable."""
    n_unique_digits = len(rep_descriptors)
    n_unique_descriptors = 0
    # i'th element tells whether descriptor i + 1 was seen
    descriptor_used = [False] * MAX_DIGIT
    free_vars_needed = 0
    for rep, descriptor in rep_descriptors:
        if not descriptor_used[descriptor - 1]:
            descriptor_used[descriptor - 1] = True
            n_unique_descriptors += 1
        if rep == descriptor:
            free_vars_needed += 1

    free_vars = n_unique_digits - n_unique_descriptors
    return free_vars == free_vars_needed


def check_reps_descriptor_counts(rep_descriptors: Sequence[tuple[int, int]]) -> Solution | None:
    """Check that every unique descriptor's occurrence count has a slot to live in.

    A descriptor occurs as often as the sum of its reps. An entry offers a slot
    of value `descriptor - rep`; each occurrence count must be offered by at
    least as many entries as there are descriptors with that count. Free
    variables draw from the digits not used as descriptors, so there must be
    at least one such digit per free variable.

    Returns:
        The Solution for the pairing, or None when some count has too few slots
        or the free variables have too few digits to draw from
    """
    descriptor_counts: Counter[int] = Counter()
    slot_counts: Counter[int] = Counter()
    for rep, descriptor in rep_descriptors:
        descriptor_counts[descriptor] += rep
        slot_counts[descriptor - rep] += 1

    slots_needed = Counter(descriptor_counts.values())
    for count, n_needed in slots_needed.items():
        if slot_counts[count] < n_needed:
            return None

    n_free_vars = len(rep_descriptors) - len(descriptor_counts)
    free_digits = [digit for digit in FREE_VAR_CANDIDATES if digit not in descriptor_counts]
    if n_free_vars > len(free_digits):
        return None

    return Solution.from_rep_descriptors(rep_descriptors)
