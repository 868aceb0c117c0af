"""Shared depth-first walk used by every node-graph query."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from graphwalk.core.models import Vertex

N = TypeVar("N")


class FlightNode(Protocol):
    """Protocol for airport-like nodes."""

    def get_outbound_flights(self) -> Sequence[Any] | None:
        """Get nodes reachable by one outbound flight."""
        ...


def vertex_neighbors(vertex: Vertex[Any]) -> Sequence[Vertex[Any]] | None:
    return vertex.neighbors


def airport_flights(airport: FlightNode) -> Sequence[Any] | None:
    return airport.get_outbound_flights()


def preorder(
    start: N | None,
    neighbors_of: Callable[[N], Iterable[N | None] | None],
) -> Iterator[N]:
    """Yield every node reachable from start once, in DFS pre-order.

    Matches the order of the recursive walk: a node comes before its
    descendants and siblings follow neighbor order. Uses an explicit stack,
    so deep graphs do not hit the recursion limit. Visited nodes are tracked
    by identity. O(V + E).
    """
    if start is None:
        return

    visited: set[int] = set()
    stack: list[N | None] = [start]

    while stack:
        node = stack.pop()
        if node is None or id(node) in visited:
            continue
        visited.add(id(node))
        yield node

        neighbors = neighbors_of(node)
        if neighbors:
            stack.extend(reversed(list(neighbors)))
