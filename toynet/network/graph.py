# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Undirected graph representation using NetworkX.

This module provides the core Graph class that stores a toy network topology
as vertex labels mapped to neighbour sets. Parallel edges are discarded and
self-loops are permitted.
"""

from typing import Hashable, Iterator, Tuple

import networkx as nx


class UnknownVertexError(ValueError):
    """Raised when an operation references a vertex absent from the graph."""

    def __init__(self, vertex: Hashable):
        super().__init__(f"{vertex} is not a vertex")
        self.vertex = vertex


class Graph:
    """
    Undirected graph backed by a NetworkX graph.

    Each vertex label maps to the set of its neighbours. The number of
    distinct edges is tracked separately and a self-loop counts as a single
    edge attached to one vertex.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.Graph()
        self._edge_count = 0

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Number of distinct undirected edges."""
        return self._edge_count

    def add_vertex(self, v: Hashable) -> None:
        """Add vertex v (if it is not already a vertex)."""
        if not self.has_vertex(v):
            self.graph.add_node(v)

    def add_edge(self, v: Hashable, w: Hashable) -> None:
        """
        Add edge v-w (if it is not already an edge).

        Missing endpoints are created first.

        Args:
            v: First endpoint
            w: Second endpoint, equal to v for a self-loop
        """
        self.add_vertex(v)
        self.add_vertex(w)
        if not self.has_edge(v, w):
            self._edge_count += 1
        self.graph.add_edge(v, w)

    def remove_edge(self, v: Hashable, w: Hashable) -> None:
        """Remove edge v-w if present; absent edges are ignored."""
        if self.has_edge(v, w):
            self.graph.remove_edge(v, w)
            self._edge_count -= 1

    def has_vertex(self, v: Hashable) -> bool:
        """Is v a vertex in this graph?"""
        return v in self.graph

    def has_edge(self, v: Hashable, w: Hashable) -> bool:
        """Is v-w an edge in this graph?"""
        self._validate_vertex(v)
        self._validate_vertex(w)
        return w in self.graph.adj[v]

    def degree(self, v: Hashable) -> int:
        """Number of neighbours recorded for v (a self-loop counts once)."""
        self._validate_vertex(v)
        return len(self.graph.adj[v])

    def vertices(self) -> Iterator[Hashable]:
        """Iterate over all vertex labels in unspecified order."""
        return iter(self.graph.nodes)

    def adjacent_to(self, v: Hashable) -> Iterator[Hashable]:
        """Iterate over the neighbours of v in unspecified order."""
        self._validate_vertex(v)
        return iter(self.graph.adj[v])

    def edges(self) -> Iterator[Tuple[Hashable, Hashable]]:
        """Iterate over each undirected edge exactly once."""
        return iter(self.graph.edges())

    def copy(self) -> 'Graph':
        """Create an independent copy of the graph."""
        new_graph = Graph()
        new_graph.graph = self.graph.copy()
        new_graph._edge_count = self._edge_count
        return new_graph

    def _validate_vertex(self, v: Hashable) -> None:
        if not self.has_vertex(v):
            raise UnknownVertexError(v)

    def __str__(self) -> str:
        lines = []
        for v in self.vertices():
            neighbours = "".join(f"{w} " for w in self.adjacent_to(v))
            lines.append(f"{v}: {neighbours}\n")
        return "".join(lines)

    def __len__(self) -> int:
        """Return number of vertices in the graph."""
        return self.vertex_count

    def __contains__(self, v: Hashable) -> bool:
        """Check if vertex exists in the graph."""
        return self.has_vertex(v)
