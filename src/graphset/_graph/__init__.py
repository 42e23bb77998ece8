"""Graph module providing the GraphSet container.

This module contains:
- GraphSet[T]: A generic, mutable directed graph over unique elements
- kahn_sort: Kahn's algorithm, used for ordering and cycle detection
"""

from ._algorithms import CycleError, kahn_sort
from ._graph_set import GraphSet

__all__ = ["CycleError", "GraphSet", "kahn_sort"]
