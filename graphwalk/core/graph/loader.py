"""Build vertex and airport graphs from adjacency data."""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Any, TypeVar

from graphwalk.core.exceptions import GraphLoadError, NodeNotFoundError
from graphwalk.core.models import Adjacency, Airport, Vertex

H = TypeVar("H", bound=Hashable)
N = TypeVar("N")

logger = logging.getLogger(__name__)


def parse_adjacency(raw: Any) -> dict[str, list[str]]:
    """Validate decoded JSON as an adjacency map of strings.

    Null neighbor lists become empty lists.
    """
    if not isinstance(raw, dict):
        raise GraphLoadError(f"Graph must be a JSON object, got {type(raw).__name__}")

    graph: dict[str, list[str]] = {}
    for key, neighbors in raw.items():
        if neighbors is None:
            graph[key] = []
            continue
        if not isinstance(neighbors, list):
            raise GraphLoadError(f"Neighbors of '{key}' must be a list")
        for neighbor in neighbors:
            if not isinstance(neighbor, str):
                raise GraphLoadError(f"Neighbor {neighbor!r} of '{key}' is not a string")
        graph[key] = list(neighbors)
    return graph


def load_adjacency(path: Path) -> dict[str, list[str]]:
    """Read an adjacency map from a JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphLoadError(f"Cannot read {path}: {e}") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Invalid JSON in {path}: {e}") from e

    graph = parse_adjacency(raw)
    logger.debug("Loaded %d keys from %s", len(graph), path)
    return graph


def _all_values(graph: Adjacency[H]) -> list[H]:
    """Keys and neighbor values in first-seen order."""
    seen: dict[H, None] = {}
    for key, neighbors in graph.items():
        seen.setdefault(key)
        for neighbor in neighbors or ():
            seen.setdefault(neighbor)
    return list(seen)


def build_vertices(graph: Adjacency[H]) -> dict[H, Vertex[H]]:
    """Create one Vertex per value, wired in neighbor-list order. O(V + E)."""
    vertices = {value: Vertex(value) for value in _all_values(graph)}
    for key, neighbors in graph.items():
        for neighbor in neighbors or ():
            vertices[key].add_neighbor(vertices[neighbor])
    return vertices


def build_airports(routes: Adjacency[str]) -> dict[str, Airport]:
    """Create one Airport per code, wired in route order. O(V + E)."""
    airports = {code: Airport(code) for code in _all_values(routes)}
    for code, destinations in routes.items():
        for destination in destinations or ():
            airports[code].add_flight(airports[destination])
    return airports


def get_node(nodes: Mapping[str, N], name: str) -> N:
    """Get a node by name."""
    try:
        return nodes[name]
    except KeyError:
        raise NodeNotFoundError(f"Node not found: {name}") from None
