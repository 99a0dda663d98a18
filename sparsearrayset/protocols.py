"""Protocol classes describing the collaborators of a sparse array set."""

import abc
from typing import Iterable

from typing_extensions import Protocol


class Adjacency(Protocol):
    """A protocol for adjacency structures indexed by node.

    Both a list of neighbour lists and a mapping from node to neighbours
    satisfy this protocol.

    """

    @abc.abstractmethod
    def __getitem__(self, node: int) -> Iterable[int]:
        """Return the neighbours of `node`."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of nodes."""
