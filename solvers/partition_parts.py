"""
Partitions of an integer into a fixed number of single-digit parts.

Parts are in [1, 9] and every partition is non-decreasing, so
`PartitionsParts(2, 10)` yields [1, 9], [2, 8], [3, 7], [4, 6], [5, 5].
Partitions come out in lexicographic order without duplicates.
"""

from __future__ import annotations

from core.enums.digits import MAX_DIGIT, MIN_DIGIT


class PartitionsParts:
    """Iterator over the partitions of `n` into exactly `n_parts` digit parts.

    The iterator keeps one partition of look-ahead: each call returns the
    current partition and prepares its successor. Returned lists belong to the
    caller. To restart the sequence, build a new iterator.
    """

    def __init__(self, n_parts: int, n: int):
        self.n_parts = n_parts
        self.n = n
        self._next: list[int] | None = self._first_partition(n_parts, n)

    @staticmethod
    def _first_partition(n_parts: int, n: int) -> list[int] | None:
        """Lexicographically smallest partition: 9s packed to the right, remainder next to them."""
        if n < n_parts or n_parts * MAX_DIGIT < n:
            return None
        if n_parts == 0:
            return []

        parts = [MIN_DIGIT] * n_parts
        remaining = n - n_parts
        r_idx = n_parts - 1
        while remaining >= MAX_DIGIT - MIN_DIGIT:
            parts[r_idx] = MAX_DIGIT
            remaining -= MAX_DIGIT - MIN_DIGIT
            if r_idx == 0:
                break
            r_idx -= 1
        else:
            parts[r_idx] = remaining + MIN_DIGIT
        return parts

    def __iter__(self) -> PartitionsParts:
        return self

    def __next__(self) -> list[int]:
        res = self._next
        if res is None:
            raise StopIteration
        self._next = self._successor(res)
        return res

    @staticmethod
    def _successor(parts: list[int]) -> list[int] | None:
        """Next partition in lexicographic order, or None once exhausted.

        Find the rightmost position (excluding the last) that can grow by one
        while leaving every later position at least as large, raise it and
        everything after it to the new value, then hand the leftover sum to the
        rightmost positions first.
        """
        n_parts = len(parts)
        if n_parts < 2:
            return None

        nxt = list(parts)
        r_idx = n_parts - 1
        for l_idx in range(n_parts - 2, -1, -1):
            l_val = nxt[l_idx]
            if l_val == MAX_DIGIT:
                continue

            new_l_val = l_val + 1
            new_r_sum = sum(nxt[l_idx + 1 :]) - 1
            r_len = r_idx - l_idx
            r_sum_remaining = new_r_sum - new_l_val * r_len
            if r_sum_remaining < 0:
                continue

            for idx in range(l_idx, n_parts):
                nxt[idx] = new_l_val
            while r_sum_remaining > 0:
                incr = min(MAX_DIGIT - new_l_val, r_sum_remaining)
                r_sum_remaining -= incr
                nxt[r_idx] += incr
                r_idx -= 1
            return nxt

        return None
