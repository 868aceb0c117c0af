"""Reachability: airport routes and adjacency-map coverage."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TypeVar

from graphwalk.core.graph.base import FlightNode, airport_flights, preorder
from graphwalk.core.models import Adjacency

H = TypeVar("H", bound=Hashable)

logger = logging.getLogger(__name__)


def can_reach(start: FlightNode | None, destination: FlightNode | None) -> bool:
    """Check whether destination is reachable from start by a series of flights.

    Zero flights count, so an airport always reaches itself. Returns False
    when either airport is None. Stops at the first route found. O(V + E).
    """
    if start is None or destination is None:
        return False
    if start is destination:
        return True

    return any(airport is destination for airport in preorder(start, airport_flights))


def reachable(graph: Adjacency[H] | None, starting: H) -> set[H]:
    """Get all values reachable from starting by following map edges.

    starting is always included. A neighbor that is not itself a key is
    reachable but has no outgoing edges. None neighbor lists count as empty.
    O(V + E).
    """
    visited: set[H] = set()
    stack: list[H] = [starting]

    while stack:
        value = stack.pop()
        if value in visited:
            continue
        visited.add(value)

        neighbors = graph.get(value) if graph else None
        if neighbors:
            stack.extend(reversed(neighbors))

    return visited


def unreachable(graph: Adjacency[H] | None, starting: H) -> set[H]:
    """Get every value in the graph that cannot be reached from starting.

    The graph's values are its keys plus everything listed as a neighbor.
    Returns an empty set for a None or empty graph. O(V + E).
    """
    if not graph:
        return set()

    values: set[H] = set(graph)
    for neighbors in graph.values():
        if neighbors:
            values.update(neighbors)

    result = values - reachable(graph, starting)
    logger.debug(
        "%d of %d values unreachable from %r", len(result), len(values), starting
    )
    return result
