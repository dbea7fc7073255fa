# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
CLI for building and analysing toy topologies.

Usage:
    python -m toynet.scenario generate ring 8
    python -m toynet.scenario generate star 6 --seed 7 --dot
    python -m toynet.scenario analyze edges.txt --delimiter ","
    python -m toynet.scenario export edges.txt
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from toynet.config import KNOWN_TOPOLOGIES, TopologyConfig
from toynet.evaluation.metrics import TopologySummary, topology_summary
from toynet.network.graph import Graph

from .edgelist import format_adjacency, iter_dot_edges, read_edge_list

LOGGER = logging.getLogger("toynet.scenario.cli")

app = typer.Typer(help="Toy network topology utilities", no_args_is_help=True)
console = Console()


LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


@app.callback()
def configure(
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        envvar="TOYNET_LOG_LEVEL",
        help=f"Log level ({', '.join(LOG_LEVELS)}).",
    ),
) -> None:
    """Configure logging before running a command."""
    if log_level.lower() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    level = log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("toynet").setLevel(level)


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _load(path: Path, delimiter: str) -> Graph:
    try:
        with path.open(encoding="utf-8") as handle:
            return read_edge_list(handle, delimiter=delimiter)
    except (OSError, ValueError) as exc:
        _fail(str(exc))


def _format_metric(value: Optional[float]) -> str:
    return "undefined" if value is None else f"{value:.4f}"


def _print_summary(summary: TopologySummary, hub: Optional[str] = None) -> None:
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="yellow")

    if hub is not None:
        table.add_row("Hub", hub)
    table.add_row("Vertices", str(summary.vertices))
    table.add_row("Edges", str(summary.edges))
    table.add_row("Degree min/max", f"{summary.degree_min}/{summary.degree_max}")
    table.add_row("Average degree", _format_metric(summary.average_degree))
    table.add_row("Average path length", _format_metric(summary.average_length))
    table.add_row("Connected", "yes" if summary.connected else "no")
    console.print(table)


@app.command()
def generate(
    kind: str = typer.Argument(..., help=f"Topology type: {', '.join(KNOWN_TOPOLOGIES)}"),
    size: int = typer.Argument(..., help="Number of vertices (grid: side length)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for randomized topologies"),
    hub: Optional[int] = typer.Option(None, "--hub", help="Explicit hub index for star topologies"),
    dot: bool = typer.Option(False, "--dot", help="Print u->v: edge lines instead of adjacency"),
) -> None:
    """Generate a topology, print it and summarise its metrics."""
    try:
        config = TopologyConfig.from_env(kind=kind, size=size, seed=seed, hub=hub)
        graph = config.build()
    except ValueError as exc:
        _fail(str(exc))

    LOGGER.info("Generated %s topology with %d vertices", config.kind, graph.vertex_count)
    if dot:
        for line in iter_dot_edges(graph):
            typer.echo(line)
    else:
        typer.echo(format_adjacency(graph), nl=False)
    _print_summary(topology_summary(graph), hub=graph.graph.graph.get("hub"))


@app.command()
def analyze(
    path: Path = typer.Argument(..., help="Edge list file"),
    delimiter: str = typer.Option(" ", "--delimiter", "-d", help="Token delimiter"),
) -> None:
    """Ingest an edge list file and summarise its metrics."""
    graph = _load(path, delimiter)
    _print_summary(topology_summary(graph))


@app.command()
def export(
    path: Path = typer.Argument(..., help="Edge list file"),
    delimiter: str = typer.Option(" ", "--delimiter", "-d", help="Token delimiter"),
) -> None:
    """Ingest an edge list file and print its u->v: edge lines."""
    graph = _load(path, delimiter)
    for line in iter_dot_edges(graph):
        typer.echo(line)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
