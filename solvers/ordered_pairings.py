"""
Ordered pairings between two sorted digit sequences.

A pairing matches every x with a distinct y. `OrderedPairings` walks the
pairings depth first, choosing a y for each x in turn, smallest candidate
first. Pairings that only differ by swapping equal values are produced once:

    >>> list(OrderedPairings([1, 1, 2], [3, 3, 4]))
    [((1, 3), (1, 3), (2, 4)), ((1, 3), (1, 4), (2, 3))]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from core.enums.digits import MAX_UNIQUE_DIGITS

RepDescriptors = tuple[tuple[int, int], ...]


class _Frame(NamedTuple):
    """Partial pairing: ys chosen for the leading xs, and ys still unused."""

    acc: tuple[int, ...]
    ys: tuple[int, ...]


def _is_sorted(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _without(values: tuple[int, ...], idx: int) -> tuple[int, ...]:
    return values[:idx] + values[idx + 1 :]


class OrderedPairings:
    """Iterator over all distinct pairings of sorted `xs` with sorted `ys`.

    Pairings come out in lexicographic order of the ys assigned to successive
    xs. Each pairing is a fresh tuple of (x, y) tuples and stays valid after
    the iterator advances.

    The search state is an explicit stack of frames; both inputs hold at most
    MAX_UNIQUE_DIGITS values, which bounds its depth.
    """

    def __init__(self, xs: Sequence[int], ys: Sequence[int]):
        if len(xs) != len(ys):
            msg = f"Expected sequences of equal length, got {len(xs)} and {len(ys)}"
            raise ValueError(msg)
        if len(xs) > MAX_UNIQUE_DIGITS:
            msg = f"Expected at most {MAX_UNIQUE_DIGITS} values, got {len(xs)}"
            raise ValueError(msg)
        if not _is_sorted(xs) or not _is_sorted(ys):
            msg = f"Expected sorted sequences, got {list(xs)} and {list(ys)}"
            raise ValueError(msg)

        self.xs: tuple[int, ...] = tuple(xs)
        ys = tuple(ys)

        # Pushed largest first so the smallest y is popped first
        self._frames: list[_Frame] = []
        for idx in range(len(ys) - 1, -1, -1):
            if idx != 0 and ys[idx - 1] == ys[idx]:
                continue
            self._frames.append(_Frame(acc=(ys[idx],), ys=_without(ys, idx)))

    def __iter__(self) -> OrderedPairings:
        return self

    def __next__(self) -> RepDescriptors:
        while self._frames:
            frame = self._frames.pop()
            if not frame.ys:
                return tuple(zip(self.xs, frame.acc))

            # Equal xs take non-decreasing ys, otherwise the same pairing
            # would show up once per ordering of the tied xs.
            acc_len = len(frame.acc)
            tied = self.xs[acc_len - 1] == self.xs[acc_len]
            for idx in range(len(frame.ys) - 1, -1, -1):
                y = frame.ys[idx]
                if idx != 0 and frame.ys[idx - 1] == y:
                    continue
                if tied and y < frame.acc[-1]:
                    continue
                self._frames.append(_Frame(acc=frame.acc + (y,), ys=_without(frame.ys, idx)))

        raise StopIteration
