"""Tests for enumerating partitions of an integer into digit parts."""

import pytest

from solvers.partition_parts import PartitionsParts


def test_partitions_0_parts():
    assert list(PartitionsParts(0, 0)) == [[]]
    assert list(PartitionsParts(0, 1)) == []


def test_partitions_1_part():
    assert list(PartitionsParts(1, 0)) == []
    assert list(PartitionsParts(1, 1)) == [[1]]
    assert list(PartitionsParts(1, 2)) == [[2]]
    assert list(PartitionsParts(1, 9)) == [[9]]
    assert list(PartitionsParts(1, 10)) == []


def test_partitions_2_parts():
    assert list(PartitionsParts(2, 0)) == []
    assert list(PartitionsParts(2, 1)) == []
    assert list(PartitionsParts(2, 2)) == [[1, 1]]
    assert list(PartitionsParts(2, 3)) == [[1, 2]]
    assert list(PartitionsParts(2, 4)) == [[1, 3], [2, 2]]
    assert list(PartitionsParts(2, 5)) == [[1, 4], [2, 3]]
    assert list(PartitionsParts(2, 9)) == [[1, 8], [2, 7], [3, 6], [4, 5]]
    assert list(PartitionsParts(2, 10)) == [[1, 9], [2, 8], [3, 7], [4, 6], [5, 5]]
    assert list(PartitionsParts(2, 11)) == [[2, 9], [3, 8], [4, 7], [5, 6]]
    assert list(PartitionsParts(2, 16)) == [[7, 9], [8, 8]]
    assert list(PartitionsParts(2, 17)) == [[8, 9]]
    assert list(PartitionsParts(2, 18)) == [[9, 9]]
    assert list(PartitionsParts(2, 19)) == []


def test_partitions_3_parts():
    for n in range(3):
        assert list(PartitionsParts(3, n)) == []
    assert list(PartitionsParts(3, 3)) == [[1, 1, 1]]
    assert list(PartitionsParts(3, 5)) == [[1, 1, 3], [1, 2, 2]]
    assert list(PartitionsParts(3, 7)) == [[1, 1, 5], [1, 2, 4], [1, 3, 3], [2, 2, 3]]
    assert list(PartitionsParts(3, 25)) == [[7, 9, 9], [8, 8, 9]]
    assert list(PartitionsParts(3, 26)) == [[8, 9, 9]]
    assert list(PartitionsParts(3, 27)) == [[9, 9, 9]]
    assert list(PartitionsParts(3, 28)) == []


def test_partitions_4_parts():
    for n in range(4):
        assert list(PartitionsParts(4, n)) == []
    assert list(PartitionsParts(4, 4)) == [[1, 1, 1, 1]]
    assert list(PartitionsParts(4, 8)) == [
        [1, 1, 1, 5],
        [1, 1, 2, 4],
        [1, 1, 3, 3],
        [1, 2, 2, 3],
        [2, 2, 2, 2],
    ]
    assert list(PartitionsParts(4, 10)) == [
        [1, 1, 1, 7],
        [1, 1, 2, 6],
        [1, 1, 3, 5],
        [1, 1, 4, 4],
        [1, 2, 2, 5],
        [1, 2, 3, 4],
        [1, 3, 3, 3],
        [2, 2, 2, 4],
        [2, 2, 3, 3],
    ]
    assert list(PartitionsParts(4, 12)) == [
        [1, 1, 1, 9],
        [1, 1, 2, 8],
        [1, 1, 3, 7],
        [1, 1, 4, 6],
        [1, 1, 5, 5],
        [1, 2, 2, 7],
        [1, 2, 3, 6],
        [1, 2, 4, 5],
        [1, 3, 3, 5],
        [1, 3, 4, 4],
        [2, 2, 2, 6],
        [2, 2, 3, 5],
        [2, 2, 4, 4],
        [2, 3, 3, 4],
        [3, 3, 3, 3],
    ]
    assert list(PartitionsParts(4, 20)) == [
        [1, 1, 9, 9],
        [1, 2, 8, 9],
        [1, 3, 7, 9],
        [1, 3, 8, 8],
        [1, 4, 6, 9],
        [1, 4, 7, 8],
        [1, 5, 5, 9],
        [1, 5, 6, 8],
        [1, 5, 7, 7],
        [1, 6, 6, 7],
        [2, 2, 7, 9],
        [2, 2, 8, 8],
        [2, 3, 6, 9],
        [2, 3, 7, 8],
        [2, 4, 5, 9],
        [2, 4, 6, 8],
        [2, 4, 7, 7],
        [2, 5, 5, 8],
        [2, 5, 6, 7],
        [2, 6, 6, 6],
        [3, 3, 5, 9],
        [3, 3, 6, 8],
        [3, 3, 7, 7],
        [3, 4, 4, 9],
        [3, 4, 5, 8],
        [3, 4, 6, 7],
        [3, 5, 5, 7],
        [3, 5, 6, 6],
        [4, 4, 4, 8],
        [4, 4, 5, 7],
        [4, 4, 6, 6],
        [4, 5, 5, 6],
        [5, 5, 5, 5],
    ]
    assert list(PartitionsParts(4, 32)) == [
        [5, 9, 9, 9],
        [6, 8, 9, 9],
        [7, 7, 9, 9],
        [7, 8, 8, 9],
        [8, 8, 8, 8],
    ]
    assert list(PartitionsParts(4, 36)) == [[9, 9, 9, 9]]
    assert list(PartitionsParts(4, 37)) == []


def _brute_force_partitions(n_parts, n, lowest=1):
    if n_parts == 0:
        return [[]] if n == 0 else []
    result = []
    for first in range(lowest, 10):
        for rest in _brute_force_partitions(n_parts - 1, n - first, first):
            result.append([first, *rest])
    return result


@pytest.mark.parametrize("n_parts", [1, 2, 3, 5, 6])
def test_partitions_match_brute_force(n_parts):
    for n in range(0, 9 * n_parts + 2):
        partitions = list(PartitionsParts(n_parts, n))
        assert partitions == _brute_force_partitions(n_parts, n)
        assert (partitions == []) == (n < n_parts or n > 9 * n_parts)
        for parts in partitions:
            assert len(parts) == n_parts
            assert sum(parts) == n
            assert all(1 <= part <= 9 for part in parts)
            assert parts == sorted(parts)
        assert all(a < b for a, b in zip(partitions, partitions[1:]))


def test_partitions_are_owned_by_caller():
    iterator = PartitionsParts(3, 7)
    first = next(iterator)
    first[0] = 99
    assert next(iterator) == [1, 2, 4]
