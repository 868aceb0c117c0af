"""
Core module: data models, exceptions, and graph algorithms.

Models (models.py):
    - Vertex: A payload plus its outgoing neighbor vertices
    - Airport: An airport with outbound flights
    - Adjacency: Mapping of a value to its neighboring values

Exceptions (exceptions.py):
    - GraphWalkError: Base exception for all graphwalk errors
    - GraphLoadError: Adjacency data could not be read or is malformed
    - NodeNotFoundError: Requested node doesn't exist

Graph (graph/):
    - Depth-first queries over vertex, airport, and adjacency-map graphs
"""

from graphwalk.core.exceptions import (
    GraphLoadError,
    GraphWalkError,
    NodeNotFoundError,
)
from graphwalk.core.models import Adjacency, Airport, Vertex

__all__ = [
    # Models
    "Vertex",
    "Airport",
    "Adjacency",
    # Exceptions
    "GraphWalkError",
    "GraphLoadError",
    "NodeNotFoundError",
]
