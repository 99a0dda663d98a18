from __future__ import annotations

import pytest

from sparsearrayset.core import SparseArraySet


@pytest.fixture  # type: ignore[misc]
def s() -> SparseArraySet:
    result = SparseArraySet(5)
    result.insert(3)
    result.insert(1)
    result.insert(3)
    return result


@pytest.fixture  # type: ignore[misc]
def adjacency() -> list[list[int]]:
    return [[1, 2], [0], [0, 3, 0], [2]]


def assert_well_formed(values: SparseArraySet) -> None:
    members = list(values)
    assert len(members) == len(set(members)) == values.size()
    assert values.last - values.first + 1 == values.size()
    assert values.capacity >= values.last + 1
    assert all(values.contains(member) for member in members)
