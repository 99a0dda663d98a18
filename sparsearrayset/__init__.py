"""Top-level package for sparsearrayset."""

import importlib.metadata
import logging

from sparsearrayset.core import SENTINEL, SparseArraySet  # noqa: F401
from sparsearrayset.adjacency import neighborhoods  # noqa: F401
from sparsearrayset.protocols import Adjacency  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = importlib.metadata.version(__name__)
