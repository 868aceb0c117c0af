"""MCP server implementation for Graphwalk."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from graphwalk.core.exceptions import GraphWalkError
from graphwalk.core.graph import (
    build_airports,
    build_vertices,
    can_reach,
    get_node,
    iter_self_loopers,
    iter_short_words,
    longest_word,
    parse_adjacency,
    unreachable,
)

logger = logging.getLogger(__name__)

server = Server("graphwalk")

_GRAPH_SCHEMA = {
    "type": "object",
    "description": "Adjacency map: each node name maps to a list of neighbor names",
    "additionalProperties": {"type": ["array", "null"], "items": {"type": "string"}},
}

_START_SCHEMA = {"type": "string", "description": "Node to start from"}


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="graphwalk_short_words",
            description=(
                "List words reachable from a start node that are strictly shorter "
                "than k characters, in depth-first discovery order."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "graph": _GRAPH_SCHEMA,
                    "start": _START_SCHEMA,
                    "k": {"type": "integer", "description": "Exclusive length limit"},
                },
                "required": ["graph", "start", "k"],
            },
        ),
        Tool(
            name="graphwalk_longest_word",
            description=(
                "Find the longest word reachable from a start node, including the "
                "start itself. Ties keep the first word discovered."
            ),
            inputSchema={
                "type": "object",
                "properties": {"graph": _GRAPH_SCHEMA, "start": _START_SCHEMA},
                "required": ["graph", "start"],
            },
        ),
        Tool(
            name="graphwalk_self_loops",
            description="List nodes reachable from a start node that have an edge to themselves.",
            inputSchema={
                "type": "object",
                "properties": {"graph": _GRAPH_SCHEMA, "start": _START_SCHEMA},
                "required": ["graph", "start"],
            },
        ),
        Tool(
            name="graphwalk_can_reach",
            description=(
                "Check whether a destination airport can be reached from a start "
                "airport through zero or more flights."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "graph": _GRAPH_SCHEMA,
                    "start": _START_SCHEMA,
                    "destination": {"type": "string", "description": "Airport to reach"},
                },
                "required": ["graph", "start", "destination"],
            },
        ),
        Tool(
            name="graphwalk_unreachable",
            description=(
                "List every node (key or neighbor) in the graph that cannot be "
                "reached from a start node."
            ),
            inputSchema={
                "type": "object",
                "properties": {"graph": _GRAPH_SCHEMA, "start": _START_SCHEMA},
                "required": ["graph", "start"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "graphwalk_short_words":
            result = _handle_short_words(arguments["graph"], arguments["start"], arguments["k"])
        elif name == "graphwalk_longest_word":
            result = _handle_longest_word(arguments["graph"], arguments["start"])
        elif name == "graphwalk_self_loops":
            result = _handle_self_loops(arguments["graph"], arguments["start"])
        elif name == "graphwalk_can_reach":
            result = _handle_can_reach(
                arguments["graph"],
                arguments["start"],
                arguments["destination"],
            )
        elif name == "graphwalk_unreachable":
            result = _handle_unreachable(arguments["graph"], arguments["start"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except GraphWalkError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except KeyError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Missing argument: {e}"}))]
    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def _require_str(value: Any, argument: str) -> str:
    if not isinstance(value, str):
        raise GraphWalkError(f"Argument '{argument}' must be a string")
    return value


def _require_int(value: Any, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphWalkError(f"Argument '{argument}' must be an integer")
    return value


def _handle_short_words(raw_graph: Any, start: str, k: int) -> dict[str, Any]:
    """Handle graphwalk_short_words tool."""
    start = _require_str(start, "start")
    k = _require_int(k, "k")
    vertices = build_vertices(parse_adjacency(raw_graph))
    words = list(iter_short_words(get_node(vertices, start), k))
    return {"start": start, "k": k, "words": words}


def _handle_longest_word(raw_graph: Any, start: str) -> dict[str, Any]:
    """Handle graphwalk_longest_word tool."""
    start = _require_str(start, "start")
    vertices = build_vertices(parse_adjacency(raw_graph))
    return {"start": start, "longest": longest_word(get_node(vertices, start))}


def _handle_self_loops(raw_graph: Any, start: str) -> dict[str, Any]:
    """Handle graphwalk_self_loops tool."""
    start = _require_str(start, "start")
    vertices = build_vertices(parse_adjacency(raw_graph))
    return {"start": start, "self_loops": list(iter_self_loopers(get_node(vertices, start)))}


def _handle_can_reach(raw_graph: Any, start: str, destination: str) -> dict[str, Any]:
    """Handle graphwalk_can_reach tool."""
    start = _require_str(start, "start")
    destination = _require_str(destination, "destination")
    airports = build_airports(parse_adjacency(raw_graph))
    found = can_reach(get_node(airports, start), get_node(airports, destination))
    return {"start": start, "destination": destination, "reachable": found}


def _handle_unreachable(raw_graph: Any, start: str) -> dict[str, Any]:
    """Handle graphwalk_unreachable tool."""
    start = _require_str(start, "start")
    result = unreachable(parse_adjacency(raw_graph), start)
    return {"start": start, "unreachable": sorted(result)}


async def serve() -> None:
    """Run the MCP server."""
    logger.debug("Starting graphwalk MCP server on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
