r"""A set of non-negative integers stored in a single flat array.

The set owns a backing list whose prefix, the *active window*
``elements[first:last + 1]``, holds the members. Everything past ``last`` is
slack: stale values left behind by removals, or the :data:`SENTINEL` for
slots that have never been written.

Insertion appends to the window after a linear duplicate check. Removal
finds the value with a linear scan, overwrites it with the last active
element and shrinks the window by one, so the window stays contiguous
without shifting anything. Membership testing is :math:`O\left(n\right)` in
the number of members; the structure is meant for small to moderate sets,
such as the neighbourhood of a vertex in a sparse graph.

Capacity is fixed by the caller through the constructor,
:meth:`SparseArraySet.resize` or :meth:`SparseArraySet.init`. Inserting into
a full set raises :class:`IndexError` instead of growing the backing list.

"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Iterable, Iterator, MutableSequence, MutableSet

import toolz

from .protocols import Adjacency

logger = logging.getLogger(__name__)

#: Value of backing slots that have never held a member.
SENTINEL = -1


class SparseArraySet(MutableSet[int]):
    """A mutable set of non-negative integers backed by a flat array.

    Iteration yields members in array order, which reflects the history of
    insertions and removals rather than any sorted order. Mutating the set
    while iterating over it is not supported.

    Unlike :meth:`set.remove`, :meth:`remove` does not raise
    :class:`KeyError` for a value that is not a member; it behaves like
    :meth:`discard`.

    Attributes
    ----------
    capacity
        The number of slots in the backing array.
    first
        Index of the first slot of the active window. Always ``0``.
    last
        Index of the last slot of the active window, ``first - 1`` when the
        set is empty.

    """

    __slots__ = "_elements", "_first", "_last"

    def __init__(self, capacity: int = 0) -> None:
        """Construct an empty set with room for `capacity` members.

        Raises
        ------
        ValueError
            If `capacity` is negative

        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, capacity == {capacity}")
        self._elements: MutableSequence[int] = [SENTINEL] * capacity
        self._first = 0
        self._last = -1

    @classmethod
    def from_adjacency(cls, adjacency: Adjacency, node: int) -> SparseArraySet:
        """Construct the set of neighbours of `node` in `adjacency`."""
        result = cls()
        result.init_from_adjacency(adjacency, node)
        return result

    @classmethod
    def _from_iterable(cls, values: Iterable[int]) -> SparseArraySet:
        # used by the set operators inherited from MutableSet
        unique = list(toolz.unique(values))
        result = cls(len(unique))
        for value in unique:
            result.insert(value)
        return result

    @property
    def capacity(self) -> int:
        """Return the number of slots in the backing array."""
        return len(self._elements)

    @property
    def first(self) -> int:
        """Return the index of the first slot of the active window."""
        return self._first

    @property
    def last(self) -> int:
        """Return the index of the last slot of the active window."""
        return self._last

    def resize(self, capacity: int) -> None:
        """Set the number of slots in the backing array to `capacity`.

        New slots are filled with :data:`SENTINEL`. Members and the bounds of
        the active window are left untouched; shrinking only drops unused
        slack.

        Parameters
        ----------
        capacity
            The new number of slots.

        Raises
        ------
        ValueError
            If `capacity` is negative or smaller than ``last + 1``

        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, capacity == {capacity}")
        if capacity <= self._last:
            raise ValueError(
                f"capacity {capacity:d} would truncate the active window "
                f"ending at index {self._last:d}"
            )
        elements = self._elements
        current = len(elements)
        if capacity > current:
            elements.extend(itertools.repeat(SENTINEL, capacity - current))
        else:
            del elements[capacity:]
        logger.debug("resized backing array from %d to %d slots", current, capacity)

    def init(self, capacity: int) -> None:
        """Empty the set and resize its backing array to `capacity` slots.

        Raises
        ------
        ValueError
            If `capacity` is negative; the set is left unchanged

        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, capacity == {capacity}")
        self.clear()
        self.resize(capacity)

    def init_from_adjacency(self, adjacency: Adjacency, node: int) -> None:
        """Insert every neighbour of `node` in `adjacency`.

        Neighbours are inserted in the order `adjacency` yields them, so
        repeated neighbours are kept once, at their first position. Members
        already in the set are kept. The backing array is resized to the
        number of nodes in `adjacency`, or further if the neighbours would
        not otherwise fit.

        Parameters
        ----------
        adjacency
            A list of neighbour lists or a mapping from node to neighbours.
        node
            The node whose neighbours to insert.

        Raises
        ------
        ValueError
            If any neighbour is negative; the set is left unchanged

        """
        neighbors = [
            neighbor
            for neighbor in toolz.unique(adjacency[node])
            if not self.contains(neighbor)
        ]
        for neighbor in neighbors:
            if neighbor < 0:
                raise ValueError(
                    f"value not greater than or equal to 0, value == {neighbor}"
                )
        self.resize(max(len(adjacency), self.size() + len(neighbors)))
        for neighbor in neighbors:
            self.insert(neighbor)
        logger.debug(
            "inserted %d neighbors of node %r, size == %d",
            len(neighbors),
            node,
            self.size(),
        )

    def contains(self, value: Any) -> bool:
        """Return whether `value` is a member, scanning the active window."""
        return any(element == value for element in self)

    def size(self) -> int:
        """Return the number of members."""
        return self._last - self._first + 1

    def empty(self) -> bool:
        """Return whether the set has no members."""
        return self._last < self._first

    def at(self, index: int) -> int:
        """Return the value stored at absolute position `index`.

        `index` addresses the backing array, not the active window, so slots
        past :attr:`last` return stale values or :data:`SENTINEL`.

        Raises
        ------
        IndexError
            If `index` is not in ``range(capacity)``

        """
        if not 0 <= index < len(self._elements):
            raise IndexError(index)
        return self._elements[index]

    def insert(self, value: int) -> None:
        """Add `value` to the set if it is not already a member.

        Raises
        ------
        ValueError
            If `value` is negative
        IndexError
            If `value` is not a member and the set is full

        """
        if value < 0:
            raise ValueError(f"value not greater than or equal to 0, value == {value}")
        if self.contains(value):
            return
        last = self._last + 1
        if last >= len(self._elements):
            raise IndexError(
                f"cannot insert {value:d}, set is at capacity {len(self._elements):d}"
            )
        self._elements[last] = value
        self._last = last

    def remove(self, value: Any) -> None:
        """Remove `value` from the set, doing nothing if it is absent.

        The slot of `value` is overwritten with the last member and `value`
        is written to the slot that falls out of the window.

        """
        elements = self._elements
        last = self._last
        for index in range(self._first, last + 1):
            if elements[index] == value:
                elements[index] = elements[last]
                elements[last] = value
                self._last = last - 1
                return

    def move_to(self, value: int, other: SparseArraySet) -> None:
        """Remove `value` from this set and insert it into `other`.

        `value` is inserted into `other` even when it is not a member of this
        set.

        Raises
        ------
        TypeError
            If `other` is not a :class:`SparseArraySet`
        IndexError
            If `other` is full and does not contain `value`; neither set is
            modified

        """
        if not isinstance(other, SparseArraySet):
            raise TypeError(
                f"cannot move to {type(other).__name__!r}, "
                f"expected {SparseArraySet.__name__!r}"
            )
        if (
            other is not self
            and other.size() == other.capacity
            and not other.contains(value)
        ):
            raise IndexError(
                f"cannot move {value:d}, destination is at capacity {other.capacity:d}"
            )
        self.remove(value)
        other.insert(value)

    def clear(self) -> None:
        """Empty the set, keeping the backing array and its stale values."""
        self._first = 0
        self._last = -1

    def __contains__(self, value: Any) -> bool:
        """Check whether `value` is in the set."""
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the members in array order."""
        return itertools.islice(self._elements, self._first, self._last + 1)

    def __len__(self) -> int:
        """Return the number of members."""
        return self.size()

    def __getitem__(self, index: int) -> int:
        """Return the value stored at absolute position `index`."""
        return self.at(index)

    def add(self, value: int) -> None:
        """Add `value` to the set. Alias for :meth:`insert`."""
        self.insert(value)

    def discard(self, value: Any) -> None:
        """Remove `value` from the set. Alias for :meth:`remove`."""
        self.remove(value)

    def __repr__(self) -> str:
        """Return the string representation of a sparse array set."""
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity:d})"
