"""Word queries over string-valued vertex graphs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from graphwalk.core.graph.base import preorder, vertex_neighbors

if TYPE_CHECKING:
    from graphwalk.core.models import Vertex

logger = logging.getLogger(__name__)


def iter_short_words(vertex: Vertex[str] | None, k: int) -> Iterator[str]:
    """Yield reachable words strictly shorter than k, in DFS pre-order.

    Each vertex is visited once, so cycles never repeat a word. Vertices
    with a None payload are skipped.
    """
    for node in preorder(vertex, vertex_neighbors):
        word = node.data
        if word is not None and len(word) < k:
            yield word


def print_short_words(
    vertex: Vertex[str] | None,
    k: int,
    emit: Callable[[str], None] = print,
) -> None:
    """Emit every reachable word shorter than k characters.

    Prints nothing when vertex is None or no reachable word qualifies.
    """
    count = 0
    for word in iter_short_words(vertex, k):
        emit(word)
        count += 1
    logger.debug("Emitted %d words shorter than %d", count, k)


def longest_word(vertex: Vertex[str] | None) -> str:
    """Get the longest word reachable from vertex, including its own.

    Ties keep the word found first in pre-order. Returns "" when vertex is
    None or holds no words.
    """
    longest = ""
    for node in preorder(vertex, vertex_neighbors):
        word = node.data
        if word is not None and len(word) > len(longest):
            longest = word
    logger.debug("Longest reachable word has %d characters", len(longest))
    return longest
