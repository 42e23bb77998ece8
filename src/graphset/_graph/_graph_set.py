"""Generic mutable directed graph over unique elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._algorithms import CycleError, kahn_sort

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Vertex[T: Hashable]:
    """A node wrapping one element together with its outgoing neighbours.

    Neighbours are stored as element keys into the owning graph, not as
    references to other vertex objects. The dict keeps them in the order
    the edges were created.
    """

    elem: T
    neighbors: dict[T, None] = field(default_factory=dict, compare=False)

    def __hash__(self) -> int:
        return hash(self.elem)

    def __str__(self) -> str:
        return str(self.elem)


class GraphSet[T: Hashable]:
    """A directed graph that does not allow duplicate elements.

    Elements are unique by value equality, so ``T`` must provide a consistent
    ``__eq__`` and ``__hash__``. Edges have no weight and no metadata: an edge
    ``src -> dest`` exists iff ``dest`` is one of ``src``'s neighbours.

    Operations referring to missing elements never raise; they return False.
    A topological sort is available through :meth:`sort`, which also serves as
    a cycle detector.

    Example:
        >>> graph = GraphSet[int]()
        >>> graph.add(1), graph.add(2), graph.add(1)
        (True, True, False)
        >>> graph.new_edge(1, 2)
        True
        >>> graph.sort()
        [1, 2]

    """

    __slots__ = ("_vertices",)

    def __init__(self) -> None:
        self._vertices: dict[T, _Vertex[T]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]], vertices: Iterable[T] = ()) -> GraphSet[T]:
        """Build a graph from (source, target) edges.

        Endpoints are added as vertices when first seen. Extra isolated
        vertices can be given through ``vertices``; they are added first.

        Args:
            edges: Iterable of (source, target) tuples.
            vertices: Additional elements to add before the edges.

        Returns:
            A new GraphSet instance.

        """
        graph = cls()
        for elem in vertices:
            graph.add(elem)
        for src, dest in edges:
            graph.add(src)
            graph.add(dest)
            graph.new_edge(src, dest)
        return graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, elem: T) -> bool:
        """Add a new element to the graph.

        Returns:
            True if the graph changed, False if an equal element was already present.

        """
        if elem in self._vertices:
            return False
        self._vertices[elem] = _Vertex(elem)
        return True

    def new_edge(self, src: T, dest: T) -> bool:
        """Create an edge from ``src`` to ``dest``. Both elements must exist.

        Self-edges are accepted; they make the graph cyclic.

        Returns:
            True if the graph changed, False if an endpoint is missing or the
            edge already exists.

        """
        src_vertex = self._vertices.get(src)
        if src_vertex is None or dest not in self._vertices:
            return False
        if dest in src_vertex.neighbors:
            return False
        src_vertex.neighbors[dest] = None
        return True

    def remove_edge(self, src: T, dest: T) -> bool:
        """Remove the edge from ``src`` to ``dest``. Both elements must exist.

        Returns:
            True if an edge was removed.

        """
        src_vertex = self._vertices.get(src)
        if src_vertex is None or dest not in self._vertices:
            return False
        if dest not in src_vertex.neighbors:
            return False
        del src_vertex.neighbors[dest]
        return True

    def remove(self, elem: T) -> bool:
        """Remove an element and every edge pointing to it.

        Returns:
            True if the graph changed, False if the element was not present.

        """
        if elem not in self._vertices:
            return False
        for vertex in self._vertices.values():
            vertex.neighbors.pop(elem, None)
        del self._vertices[elem]
        return True

    def clear(self) -> None:
        """Remove all elements and edges."""
        self._vertices.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, elem: T) -> tuple[T, ...]:
        """Get the elements ``elem`` has an edge to, in the order the edges were created.

        Empty if ``elem`` is absent.
        """
        vertex = self._vertices.get(elem)
        if vertex is None:
            return ()
        return tuple(vertex.neighbors)

    def has_edge(self, src: T, dest: T) -> bool:
        """Check whether the edge ``src -> dest`` exists."""
        vertex = self._vertices.get(src)
        return vertex is not None and dest in vertex.neighbors

    def edges(self) -> list[tuple[T, T]]:
        """All edges as (source, target) tuples."""
        return [(vertex.elem, dest) for vertex in self._vertices.values() for dest in vertex.neighbors]

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return sum(len(vertex.neighbors) for vertex in self._vertices.values())

    def copy(self) -> GraphSet[T]:
        """Return an independent copy of the graph."""
        graph: GraphSet[T] = GraphSet()
        for elem, vertex in self._vertices.items():
            graph._vertices[elem] = _Vertex(vertex.elem, dict(vertex.neighbors))
        return graph

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort(self, *, consume: bool = False) -> list[T] | None:
        """Sort the elements topologically using Kahn's algorithm.

        Every edge ``u -> v`` present before the call has ``u`` before ``v``
        in the result. Roots are taken in insertion order and successors in
        edge creation order, so the result is reproducible across runs.

        Args:
            consume: Delete the edges from this graph while sorting. An acyclic
                graph is left with no edges, a cyclic one partially stripped.
                By default the sort runs on a copy and the graph is unchanged.

        Returns:
            The elements in topological order (``[]`` for an empty graph), or
            None if the graph has a cycle.

        """
        if consume:
            adjacency = {elem: vertex.neighbors for elem, vertex in self._vertices.items()}
        else:
            adjacency = {elem: dict(vertex.neighbors) for elem, vertex in self._vertices.items()}

        order = kahn_sort(adjacency)
        if consume:
            logger.debug(f"Consumed edges while sorting, {self.edge_count} edge(s) remain")
        return order

    def topological_order(self) -> list[T]:
        """Return the elements in topological order without changing the graph.

        Raises:
            CycleError: If the graph contains a cycle.

        """
        order = self.sort()
        if order is None:
            msg = "Cycle detected in graph"
            raise CycleError(msg)
        return order

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle (self-edges included)."""
        return self.sort() is None

    # ------------------------------------------------------------------
    # Rendering and container protocol
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return one ``elem->[neighbours]`` line per element.

        Rendering never changes the graph.
        """
        lines = []
        for vertex in self._vertices.values():
            neighbors = ", ".join(str(dest) for dest in vertex.neighbors)
            lines.append(f"{vertex}->[{neighbors}]\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"GraphSet(vertices={len(self)}, edges={self.edge_count})"

    def __len__(self) -> int:
        """Return the number of elements in the graph."""
        return len(self._vertices)

    def __contains__(self, elem: object) -> bool:
        """Check if an element is in the graph."""
        return elem in self._vertices

    def __iter__(self) -> Iterator[T]:
        return iter(self._vertices)
