# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Plain-text edge list ingestion and export.

Input is one adjacency line per source vertex::

    A B C
    C D

where the first token is the source and an edge is added to each remaining
token. Export writes one ``u->v:`` line per edge, which is a raw pair dump
rather than a complete DOT document.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

from toynet.network.graph import Graph


def read_edge_list(lines: Iterable[str], delimiter: str = " ",
                   graph: Optional[Graph] = None) -> Graph:
    """Build (or extend) a graph from delimited adjacency lines."""
    graph = graph if graph is not None else Graph()
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        names = line.split(delimiter)
        graph.add_vertex(names[0])
        for name in names[1:]:
            graph.add_edge(names[0], name)
    return graph


def format_adjacency(graph: Graph) -> str:
    """Render ``<label>: <neighbour> ...`` lines for display."""
    return str(graph)


def iter_dot_edges(graph: Graph) -> Iterator[str]:
    """Yield ``u->v:`` for every edge, with u <= v as strings, sorted."""
    pairs = []
    for u, v in graph.edges():
        u, v = str(u), str(v)
        pairs.append((u, v) if u <= v else (v, u))
    for u, v in sorted(pairs):
        yield f"{u}->{v}:"


def write_dot_edges(graph: Graph, stream: TextIO) -> int:
    """Write the edge dump to stream and return the number of lines written."""
    count = 0
    for line in iter_dot_edges(graph):
        stream.write(line + "\n")
        count += 1
    return count
