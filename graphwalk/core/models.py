"""Data models for Graphwalk."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

Adjacency = Mapping[T, Sequence[T] | None]


@dataclass(eq=False)
class Vertex(Generic[T]):
    """A graph vertex holding a payload and its outgoing neighbors.

    Compared and hashed by identity: two vertices with equal payloads are
    still distinct vertices.
    """

    data: T
    neighbors: list[Vertex[T]] | None = field(default_factory=list)

    def add_neighbor(self, vertex: Vertex[T]) -> None:
        """Add an outgoing edge. O(1)."""
        if self.neighbors is None:
            self.neighbors = []
        self.neighbors.append(vertex)

    def __repr__(self) -> str:
        return f"Vertex({self.data!r}, neighbors={len(self.neighbors or [])})"


@dataclass(eq=False)
class Airport:
    """An airport with outbound flights to other airports."""

    code: str
    flights: list[Airport] | None = field(default_factory=list)

    def get_outbound_flights(self) -> list[Airport] | None:
        """Get airports reachable by a single direct flight."""
        return self.flights

    def add_flight(self, destination: Airport) -> None:
        """Add a direct flight. O(1)."""
        if self.flights is None:
            self.flights = []
        self.flights.append(destination)

    def __repr__(self) -> str:
        return f"Airport({self.code}, flights={len(self.flights or [])})"
