from __future__ import annotations

import random

import pytest

from sparsearrayset.core import SparseArraySet

from .conftest import assert_well_formed

CAPACITY = 16


def operations(seed: int, count: int = 200) -> list[tuple[str, int]]:
    rng = random.Random(seed)
    return [
        (rng.choice(("insert", "remove")), rng.randrange(CAPACITY))
        for _ in range(count)
    ]


def apply(values: SparseArraySet, ops: list[tuple[str, int]]) -> set[int]:
    expected: set[int] = set()
    for name, value in ops:
        if name == "insert":
            values.insert(value)
            expected.add(value)
        else:
            values.remove(value)
            expected.discard(value)
        assert values.contains(value) == (value in expected)
        assert_well_formed(values)
    return expected


@pytest.mark.parametrize("seed", range(10))  # type: ignore[misc]
def test_matches_builtin_set(seed: int) -> None:
    values = SparseArraySet(CAPACITY)
    expected = apply(values, operations(seed))
    assert set(values) == expected
    assert values.size() == len(expected)


@pytest.mark.parametrize("seed", range(5))  # type: ignore[misc]
def test_cleared_matches_fresh(seed: int) -> None:
    reused = SparseArraySet(CAPACITY)
    apply(reused, operations(seed + 100))
    reused.clear()

    fresh = SparseArraySet()
    fresh.init(CAPACITY)

    ops = operations(seed)
    apply(reused, ops)
    apply(fresh, ops)
    assert list(reused) == list(fresh)


@pytest.mark.parametrize(  # type: ignore[misc]
    "values", [[], [0], [4, 2, 9], list(range(CAPACITY))]
)
def test_distinct_inserts(values: list[int]) -> None:
    result = SparseArraySet(CAPACITY)
    for value in values:
        result.insert(value)
    assert result.size() == len(values)
    assert list(result) == values
    assert all(result.contains(value) for value in values)


@pytest.mark.parametrize("value", [0, 3, CAPACITY - 1])  # type: ignore[misc]
def test_insert_is_idempotent(value: int) -> None:
    result = SparseArraySet(CAPACITY)
    result.insert(1)
    result.insert(value)
    before = list(result)
    result.insert(value)
    assert list(result) == before


@pytest.mark.parametrize("seed", range(5))  # type: ignore[misc]
def test_move_to_transfers_membership(seed: int) -> None:
    source = SparseArraySet(CAPACITY)
    dest = SparseArraySet(CAPACITY)
    expected = apply(source, operations(seed))
    for value in sorted(expected):
        source.move_to(value, dest)
        assert not source.contains(value)
        assert dest.contains(value)
        assert_well_formed(source)
        assert_well_formed(dest)
    assert source.empty()
    assert set(dest) == expected
