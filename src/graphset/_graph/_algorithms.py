"""Graph algorithms for GraphSet operations."""

import logging
from collections import deque
from collections.abc import Hashable, MutableMapping

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised when a topological order is requested for a cyclic graph."""


def kahn_sort[T: Hashable](adjacency: MutableMapping[T, dict[T, None]]) -> list[T] | None:
    """Sort a graph topologically, consuming its edges.

    The graph is given as a mapping from each node to its successors, held as
    the keys of an insertion-ordered dict. Successors that are not keys of
    ``adjacency`` are added to it with no successors of their own. Processed
    edges are deleted from ``adjacency``: on success every successor dict is
    left empty, on a cycle the edges that take part in (or hang off) the
    cycle remain.

    Roots are visited in key order and successors in dict order, so the
    result only depends on the order the graph was built in.

    Args:
        adjacency: Mapping from node to the nodes it points to.
            An edge (a -> b) means "a must come before b".

    Returns:
        List of nodes in topological order, or None if the graph contains a cycle.

    Example:
        >>> kahn_sort({"a": {"b": None}, "b": {"c": None}})
        ['a', 'b', 'c']
        >>> kahn_sort({"a": {"a": None}}) is None
        True

    """
    missing = [s for successors in adjacency.values() for s in successors if s not in adjacency]
    for node in missing:
        adjacency.setdefault(node, {})

    indegree: dict[T, int] = dict.fromkeys(adjacency, 0)
    for successors in adjacency.values():
        for successor in successors:
            indegree[successor] += 1

    # Roots in key order
    frontier = deque(node for node, degree in indegree.items() if degree == 0)
    order: list[T] = []

    while frontier:
        node = frontier.popleft()
        order.append(node)
        successors = adjacency[node]
        for successor in successors:
            indegree[successor] -= 1
            if indegree[successor] == 0:
                frontier.append(successor)
        successors.clear()

    remaining = sum(len(successors) for successors in adjacency.values())
    if remaining:
        logger.debug(f"Cycle detected: {remaining} edge(s) left after sorting {len(order)} node(s)")
        return None

    return order
