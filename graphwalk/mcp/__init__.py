"""
MCP server for Graphwalk.

Exposes depth-first graph queries to LLMs via the Model Context Protocol.
Every tool takes the graph inline as an adjacency object.

Tools:
    - graphwalk_short_words: Reachable words shorter than k
    - graphwalk_longest_word: Longest reachable word
    - graphwalk_self_loops: Reachable nodes with an edge to themselves
    - graphwalk_can_reach: Whether one airport reaches another
    - graphwalk_unreachable: Nodes that cannot be reached from a start

Usage:
    Run: graphwalk-mcp
"""

import asyncio

from graphwalk.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
