"""
Graph traversal algorithms.

Every query walks the graph depth-first in pre-order, visiting each node once,
so cycles and self-loops always terminate.

Vertex graphs:
    - words: short-word reporting and longest-word search
    - loops: self-loop reporting

Airport and adjacency-map graphs:
    - reachability: can_reach, reachable, unreachable

Loading:
    - load_adjacency(): Read an adjacency map from JSON
    - build_vertices()/build_airports(): Wire node graphs from an adjacency map
"""

from graphwalk.core.graph.base import FlightNode, preorder
from graphwalk.core.graph.loader import (
    build_airports,
    build_vertices,
    get_node,
    load_adjacency,
    parse_adjacency,
)
from graphwalk.core.graph.loops import iter_self_loopers, print_self_loopers
from graphwalk.core.graph.reachability import can_reach, reachable, unreachable
from graphwalk.core.graph.words import iter_short_words, longest_word, print_short_words

__all__ = [
    "FlightNode",
    "preorder",
    # Queries
    "print_short_words",
    "iter_short_words",
    "longest_word",
    "print_self_loopers",
    "iter_self_loopers",
    "can_reach",
    "reachable",
    "unreachable",
    # Loading
    "load_adjacency",
    "parse_adjacency",
    "build_vertices",
    "build_airports",
    "get_node",
]
