"""
Driver for the descriptor pairs puzzle.

For a number of pairs N, every unique digit count k in 1..min(N, 10) is tried:
reps are the partitions of N into k digits, descriptors the partitions of 2N
into k digits. Each reps/descriptors combination is paired up in every
distinct way, and the pairings that survive all constraint checks are
printed as solutions.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from core.enums.digits import MAX_UNIQUE_DIGITS
from core.models.solution import Solution
from solvers.constraint_checks import (
    check_free_vars,
    check_free_vars_rep_descriptor,
    check_reps_descriptor_counts,
    check_reps_lte_descriptor,
)
from solvers.logging_utils import get_logger
from solvers.ordered_pairings import OrderedPairings
from solvers.partition_parts import PartitionsParts

logger = get_logger()


def _reps_fit_descriptors(reps: Sequence[int], descriptors: Sequence[int]) -> bool:
    """Sorted reps must not exceed sorted descriptors position by position.

    Otherwise no pairing can satisfy `check_reps_lte_descriptor`.
    """
    return all(rep <= descriptor for rep, descriptor in zip(reps, descriptors, strict=True))


def iter_solutions(n_unique_digits: int, n_pairs: int) -> Iterator[Solution]:
    """Yield every solution with `n_unique_digits` unique digits, in a fixed order."""
    n_combinations = 0
    n_pairings = 0
    n_solutions = 0

    for reps in PartitionsParts(n_unique_digits, n_pairs):
        for descriptors in PartitionsParts(n_unique_digits, n_pairs * 2):
            if not _reps_fit_descriptors(reps, descriptors):
                continue
            if not check_free_vars(reps, descriptors):
                continue
            n_combinations += 1

            for rep_descriptors in OrderedPairings(reps, descriptors):
                n_pairings += 1
                if not check_reps_lte_descriptor(rep_descriptors):
                    continue
                if not check_free_vars_rep_descriptor(rep_descriptors):
                    continue
                solution = check_reps_descriptor_counts(rep_descriptors)
                if solution is None:
                    continue
                n_solutions += 1
                yield solution

    logger.debug(
        "%d unique digits: %d partition combinations, %d pairings, %d solutions",
        n_unique_digits,
        n_combinations,
        n_pairings,
        n_solutions,
    )


def iter_report(n_pairs: int) -> Iterator[str | Solution]:
    """Yield the report for `n_pairs`: a header line per unique digit count, then its solutions."""
    for n_unique_digits in range(1, min(n_pairs, MAX_UNIQUE_DIGITS) + 1):
        yield f"{n_unique_digits} UNIQUE DIGITS:"
        for solution in iter_solutions(n_unique_digits, n_pairs):
            yield solution


def solve(n_pairs: int) -> int:
    """Print every solution for `n_pairs` to stdout.

    Returns:
        The number of solutions printed
    """
    logger.info("Solving for %d pairs", n_pairs)
    n_solutions = 0
    for item in iter_report(n_pairs):
        print(item)
        if isinstance(item, Solution):
            n_solutions += 1
    logger.info("Found %d solutions for %d pairs", n_solutions, n_pairs)
    return n_solutions
