"""Build the neighbourhood of every node of an adjacency structure."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, MutableMapping

from .core import SparseArraySet
from .protocols import Adjacency

logger = logging.getLogger(__name__)


def nodes(adjacency: Adjacency) -> Iterable[int]:
    """Return the nodes of `adjacency`.

    Mappings are keyed by node; any other adjacency structure is assumed to
    be indexed by ``range(len(adjacency))``.

    """
    if isinstance(adjacency, Mapping):
        return adjacency.keys()
    return range(len(adjacency))


def neighborhoods(adjacency: Adjacency) -> Mapping[int, SparseArraySet]:
    """Return a mapping from each node in `adjacency` to its neighbours.

    Parameters
    ----------
    adjacency
        A list of neighbour lists or a mapping from node to neighbours.

    Returns
    -------
    Mapping[int, SparseArraySet]
        One :class:`~sparsearrayset.core.SparseArraySet` per node, built with
        :meth:`~sparsearrayset.core.SparseArraySet.from_adjacency`.

    """
    result: MutableMapping[int, SparseArraySet] = {}
    for node in nodes(adjacency):
        result[node] = SparseArraySet.from_adjacency(adjacency, node)
    logger.debug("built neighborhoods of %d nodes", len(result))
    return result
