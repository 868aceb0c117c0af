"""CLI entry point for Graphwalk."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphwalk.core.exceptions import GraphWalkError
from graphwalk.core.graph import (
    build_airports,
    build_vertices,
    can_reach,
    get_node,
    iter_self_loopers,
    iter_short_words,
    load_adjacency,
    longest_word,
    unreachable,
)

app = typer.Typer(
    name="graphwalk",
    help="Depth-first reachability queries over JSON adjacency graphs.",
    no_args_is_help=True,
)
console = Console()

GraphArg = Annotated[Path, typer.Argument(help="JSON file mapping each node to its neighbors")]
StartArg = Annotated[str, typer.Argument(help="Node to start from")]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def fail(error: GraphWalkError) -> typer.Exit:
    """Report an error and build the exit to raise."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code=1)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Depth-first reachability queries over JSON adjacency graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("short-words")
def short_words(
    graph_file: GraphArg,
    start: StartArg,
    max_length: Annotated[
        int, typer.Option("--max-length", "-k", help="Report words shorter than this")
    ],
    output_json: JsonOpt = False,
) -> None:
    """Show reachable words shorter than k characters."""
    try:
        vertices = build_vertices(load_adjacency(graph_file))
        words = list(iter_short_words(get_node(vertices, start), max_length))
    except GraphWalkError as e:
        raise fail(e) from None

    if output_json:
        print(json.dumps(words))
        return
    if not words:
        console.print(
            f"[dim]No words shorter than {max_length} reachable from {escape(start)}[/]"
        )
        return
    for word in words:
        console.print(f"[cyan]{escape(word)}[/cyan]")


@app.command()
def longest(graph_file: GraphArg, start: StartArg, output_json: JsonOpt = False) -> None:
    """Show the longest word reachable from a node."""
    try:
        vertices = build_vertices(load_adjacency(graph_file))
        word = longest_word(get_node(vertices, start))
    except GraphWalkError as e:
        raise fail(e) from None

    if output_json:
        print(json.dumps({"start": start, "longest": word}))
    else:
        console.print(f"[cyan]{escape(word)}[/cyan] [dim]({len(word)} characters)[/]")


@app.command("self-loops")
def self_loops(graph_file: GraphArg, start: StartArg, output_json: JsonOpt = False) -> None:
    """Show reachable nodes that have an edge to themselves."""
    try:
        vertices = build_vertices(load_adjacency(graph_file))
        loopers = list(iter_self_loopers(get_node(vertices, start)))
    except GraphWalkError as e:
        raise fail(e) from None

    if output_json:
        print(json.dumps(loopers))
        return
    if not loopers:
        console.print(f"[dim]No self-loops reachable from {escape(start)}[/]")
        return
    for name in loopers:
        console.print(f"[cyan]{escape(name)}[/cyan] [yellow]↺[/]")


@app.command("can-reach")
def can_reach_command(
    graph_file: GraphArg,
    start: StartArg,
    destination: Annotated[str, typer.Argument(help="Airport to reach")],
    output_json: JsonOpt = False,
) -> None:
    """Check whether one airport can be reached from another."""
    try:
        airports = build_airports(load_adjacency(graph_file))
        found = can_reach(get_node(airports, start), get_node(airports, destination))
    except GraphWalkError as e:
        raise fail(e) from None

    if output_json:
        print(json.dumps({"start": start, "destination": destination, "reachable": found}))
    elif found:
        console.print(f"[green]{escape(destination)} is reachable from {escape(start)}[/green]")
    else:
        console.print(f"[red]{escape(destination)} is not reachable from {escape(start)}[/red]")


@app.command("unreachable")
def unreachable_command(
    graph_file: GraphArg, start: StartArg, output_json: JsonOpt = False
) -> None:
    """Show every node that cannot be reached from a start node."""
    try:
        graph = load_adjacency(graph_file)
    except GraphWalkError as e:
        raise fail(e) from None

    result = sorted(unreachable(graph, start))

    if output_json:
        print(json.dumps(result))
        return
    if not result:
        console.print(f"[green]Every node is reachable from {escape(start)}[/green]")
        return
    console.print(f"[bold]Unreachable from [cyan]{escape(start)}[/cyan]:[/bold]")
    for name in result:
        console.print(f"  {escape(name)}")
    console.print(f"\n[dim]Unreachable: {len(result)}[/]")


if __name__ == "__main__":
    app()
