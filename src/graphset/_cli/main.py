import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from graphset._graph import GraphSet
from graphset._io import Element, GraphFileError, load_graph

from .config import ConfigError, GraphsetConfig, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

DEMO_EDGES: list[tuple[int, int]] = [(1, 2), (1, 4), (4, 2), (5, 4), (3, 5), (3, 6)]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """GraphSet CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def build_demo_graph(*, cycle: bool = False) -> GraphSet[int]:
    """Build the sample graph 1..6, optionally with the self-loop 6 -> 6."""
    graph: GraphSet[int] = GraphSet.from_edges(DEMO_EDGES, vertices=range(1, 7))
    if cycle:
        graph.new_edge(6, 6)
    return graph


def _load_config() -> GraphsetConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_graph(path: Path | None, config: GraphsetConfig, *, strict: bool) -> GraphSet[Element]:
    if path is None:
        if config.graph is None:
            err_console.print("[red]Error: No graph file given and no \\[tool.graphset].graph configured[/red]")
            raise typer.Exit(code=1)
        path = config.graph
        logger.debug(f"Using graph file from config: {path}")

    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    try:
        return load_graph(path, strict=strict)
    except GraphFileError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _print_order(order: list[Element] | list[int] | None) -> None:
    if order is None:
        err_console.print("[red]✗ Cycle detected: the graph has no topological order[/red]")
        raise typer.Exit(code=1)
    out_console.print(escape(str(order)), highlight=False)


@app.command()
def demo(
    *,
    cycle: Annotated[
        bool,
        typer.Option("--cycle", help="Add the self-loop 6 -> 6 so that sorting fails"),
    ] = False,
) -> None:
    """Build a sample graph, print it and sort it."""
    graph = build_demo_graph(cycle=cycle)
    out_console.print(escape(graph.render()), end="", highlight=False)
    _print_order(graph.sort(consume=True))


@app.command()
def show(
    path: Annotated[
        Path | None,
        typer.Argument(help="Path to a TOML graph file (defaults to [tool.graphset].graph)"),
    ] = None,
    *,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Reject edges to vertices that are not listed"),
    ] = None,
) -> None:
    """Show the vertices of a graph and their neighbours."""
    config = _load_config()
    graph = _load_graph(path, config, strict=config.strict if strict is None else strict)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("Neighbours")
    table.add_column("Out", justify="right")

    for elem in graph:
        neighbors = graph.neighbors(elem)
        table.add_row(
            escape(str(elem)),
            escape(", ".join(str(n) for n in neighbors)),
            str(len(neighbors)),
        )

    out_console.print(
        Panel(
            table,
            title="[bold]Graph[/bold]",
            subtitle=f"[dim]{len(graph)} vertices, {graph.edge_count} edges[/dim]",
            border_style="cyan",
        ),
    )


@app.command()
def sort(
    path: Annotated[
        Path | None,
        typer.Argument(help="Path to a TOML graph file (defaults to [tool.graphset].graph)"),
    ] = None,
    *,
    consume: Annotated[
        bool | None,
        typer.Option("--consume/--no-consume", help="Delete edges while sorting, as the in-place sort does"),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Reject edges to vertices that are not listed"),
    ] = None,
) -> None:
    """Print a topological order of a graph, or fail if it has a cycle."""
    config = _load_config()
    graph = _load_graph(path, config, strict=config.strict if strict is None else strict)

    err_console.print(f"[cyan]Sorting {len(graph)} vertices and {graph.edge_count} edges...[/cyan]")
    order = graph.sort(consume=config.consume if consume is None else consume)
    if order is not None:
        err_console.print("[green]✓ Graph is acyclic[/green]")
    _print_order(order)


def main() -> None:
    app()
