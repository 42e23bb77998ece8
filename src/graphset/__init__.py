"""Generic directed graph over unique elements, with topological sorting."""

__all__ = [
    "CycleError",
    "Element",
    "GraphDocument",
    "GraphFileError",
    "GraphSet",
    "dump_graph",
    "graph_from_document",
    "graph_to_document",
    "kahn_sort",
    "load_graph",
]

from ._graph import CycleError, GraphSet, kahn_sort
from ._io import Element, GraphDocument, GraphFileError, dump_graph, graph_from_document, graph_to_document, load_graph
