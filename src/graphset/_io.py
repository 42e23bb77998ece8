"""Loading and saving graphs as TOML documents.

A graph document lists its vertices and its edges::

    vertices = [1, 2, 3]
    edges = [[1, 2], [2, 3]]

Elements may be strings or integers. Other TOML values (booleans, floats)
are rejected rather than coerced.
"""

import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from ._graph import GraphSet

logger = logging.getLogger(__name__)

type Element = StrictInt | StrictStr


class GraphFileError(Exception):
    """Error reading or validating a graph document."""


class GraphDocument(BaseModel):
    """Schema of a graph document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    vertices: list[Element] = Field(default_factory=list)
    edges: list[tuple[Element, Element]] = Field(default_factory=list)


def graph_from_document(document: GraphDocument, *, strict: bool = False) -> GraphSet[Element]:
    """Build a GraphSet from a validated document.

    Args:
        document: The parsed graph document.
        strict: Reject edges whose endpoints are not listed in ``vertices``.
            Otherwise such endpoints are added with a warning.

    Returns:
        The populated graph.

    Raises:
        GraphFileError: In strict mode, if an edge names an unknown vertex.

    """
    graph: GraphSet[Element] = GraphSet()
    for elem in document.vertices:
        if not graph.add(elem):
            logger.debug(f"Duplicate vertex ignored: {elem!r}")

    for src, dest in document.edges:
        for endpoint in (src, dest):
            if endpoint in graph:
                continue
            if strict:
                msg = f"Edge {src!r} -> {dest!r} refers to unknown vertex {endpoint!r}"
                raise GraphFileError(msg)
            logger.warning(f"Adding vertex {endpoint!r} implied by edge {src!r} -> {dest!r}")
            graph.add(endpoint)
        if not graph.new_edge(src, dest):
            logger.debug(f"Duplicate edge ignored: {src!r} -> {dest!r}")

    return graph


def load_graph(path: Path, *, strict: bool = False) -> GraphSet[Element]:
    """Load a graph from a TOML file.

    Args:
        path: Path to the TOML graph document.
        strict: See :func:`graph_from_document`.

    Returns:
        The loaded graph.

    Raises:
        GraphFileError: If the file is missing, is not valid TOML, or does not
            match the graph document schema.

    """
    logger.debug(f"Loading graph from {path}")
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphFileError(msg) from e

    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph document {path}: {e}"
        raise GraphFileError(msg) from e

    return graph_from_document(document, strict=strict)


def graph_to_document(graph: GraphSet[Element]) -> GraphDocument:
    """Convert a graph to its document form."""
    return GraphDocument(vertices=list(graph), edges=graph.edges())


def dump_graph(graph: GraphSet[Element], path: Path) -> None:
    """Write a graph to a TOML file."""
    document = graph_to_document(graph)
    data = {
        "vertices": document.vertices,
        "edges": [list(edge) for edge in document.edges],
    }
    with path.open("wb") as f:
        tomli_w.dump(data, f)
    logger.debug(f"Wrote {len(document.vertices)} vertices and {len(document.edges)} edges to {path}")
