"""Self-loop detection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from graphwalk.core.graph.base import preorder, vertex_neighbors

if TYPE_CHECKING:
    from graphwalk.core.models import Vertex

T = TypeVar("T")

logger = logging.getLogger(__name__)


def has_self_loop(vertex: Vertex[Any]) -> bool:
    """Check whether vertex lists itself (the same instance) as a neighbor."""
    return any(neighbor is vertex for neighbor in vertex.neighbors or ())


def iter_self_loopers(vertex: Vertex[T] | None) -> Iterator[T]:
    """Yield payloads of reachable vertices with a self-loop, in pre-order."""
    for node in preorder(vertex, vertex_neighbors):
        if has_self_loop(node):
            yield node.data


def print_self_loopers(
    vertex: Vertex[T] | None,
    emit: Callable[[T], None] = print,
) -> None:
    """Emit the payload of every reachable vertex that neighbors itself."""
    count = 0
    for data in iter_self_loopers(vertex):
        emit(data)
        count += 1
    logger.debug("Emitted %d self-looping vertices", count)
