"""Graphwalk custom exceptions."""


class GraphWalkError(Exception):
    """Base exception for Graphwalk errors."""


class GraphLoadError(GraphWalkError):
    """Adjacency data could not be read or is malformed."""


class NodeNotFoundError(GraphWalkError):
    """Named node not present in a loaded graph."""
