# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Network topology generation utilities.

This module provides functions to generate the toy topologies used for
small-world experiments. Every generator starts from an empty Graph and
only adds vertices and edges to it.
"""

import logging
import random
from typing import Optional

from .graph import Graph
from .labels import grid_name, vertex_name

LOGGER = logging.getLogger(__name__)


class TopologyGenerator:
    """Generator for toy network topologies."""

    @staticmethod
    def complete_graph(num_vertices: int) -> Graph:
        """
        Generate a complete graph on v0..v(n-1).

        Args:
            num_vertices: Number of vertices

        Returns:
            Graph with n(n-1)/2 edges
        """
        if num_vertices < 1:
            raise ValueError("Complete topology requires at least 1 vertex")

        graph = Graph()
        for i in range(num_vertices):
            graph.add_vertex(vertex_name(i))
            for j in range(i + 1, num_vertices):
                graph.add_edge(vertex_name(i), vertex_name(j))

        LOGGER.debug("Built complete graph: %d vertices, %d edges",
                     graph.vertex_count, graph.edge_count)
        return graph

    @staticmethod
    def ring_graph(num_vertices: int) -> Graph:
        """
        Generate a ring (cycle) v0-v1-...-v(n-1)-v0.

        A single vertex stays isolated instead of looping onto itself, and
        for two vertices the closing edge collapses into the only edge.

        Args:
            num_vertices: Number of vertices in the ring

        Returns:
            Graph with ring topology
        """
        if num_vertices < 1:
            raise ValueError("Ring topology requires at least 1 vertex")

        graph = Graph()
        if num_vertices == 1:
            graph.add_vertex(vertex_name(0))
            return graph

        for i in range(num_vertices - 1):
            graph.add_edge(vertex_name(i), vertex_name(i + 1))
        graph.add_edge(vertex_name(num_vertices - 1), vertex_name(0))

        LOGGER.debug("Built ring graph: %d vertices, %d edges",
                     graph.vertex_count, graph.edge_count)
        return graph

    @staticmethod
    def grid_graph(side: int) -> Graph:
        """
        Generate a side x side lattice labelled r{row}c{col}.

        Cells outside the last row and column link right and down; the last
        column is then closed vertically and the last row horizontally.

        Args:
            side: Number of rows (and columns)

        Returns:
            Graph with 2 * side * (side - 1) edges
        """
        if side < 1:
            raise ValueError("Grid topology requires a side of at least 1")

        graph = Graph()
        graph.add_vertex(grid_name(0, 0))

        for row in range(side - 1):
            for col in range(side - 1):
                graph.add_edge(grid_name(row, col), grid_name(row, col + 1))
                graph.add_edge(grid_name(row, col), grid_name(row + 1, col))

        # Right-most column
        for row in range(side - 1):
            graph.add_edge(grid_name(row, side - 1), grid_name(row + 1, side - 1))

        # Bottom-most row
        for col in range(side - 1):
            graph.add_edge(grid_name(side - 1, col), grid_name(side - 1, col + 1))

        LOGGER.debug("Built %dx%d grid graph: %d edges", side, side, graph.edge_count)
        return graph

    @staticmethod
    def second_level_ring_graph(num_vertices: int) -> Graph:
        """
        Generate a ring augmented with chords to second neighbours.

        Args:
            num_vertices: Number of vertices (at least 3)

        Returns:
            Graph with ring and skip-2 chord edges
        """
        if num_vertices < 3:
            raise ValueError("Second level ring topology requires at least 3 vertices")

        h = num_vertices
        graph = Graph()
        for i in range(h - 2):
            graph.add_edge(vertex_name(i), vertex_name(i + 1))
            graph.add_edge(vertex_name(i), vertex_name(i + 2))

        # Seam closure
        graph.add_edge(vertex_name(h - 2), vertex_name(h - 1))
        graph.add_edge(vertex_name(h - 1), vertex_name(0))
        graph.add_edge(vertex_name(h - 2), vertex_name(0))
        graph.add_edge(vertex_name(h - 1), vertex_name(1))

        LOGGER.debug("Built second level ring graph: %d vertices, %d edges",
                     graph.vertex_count, graph.edge_count)
        return graph

    @staticmethod
    def star_graph(num_vertices: int, rng: Optional[random.Random] = None,
                   hub: Optional[int] = None) -> Graph:
        """
        Generate a star topology around a randomly chosen hub.

        Args:
            num_vertices: Number of vertices including the hub
            rng: Random source used to pick the hub (module RNG if None)
            hub: Explicit hub index, bypassing rng

        Returns:
            Graph where the hub is adjacent to every other vertex
        """
        if num_vertices < 2:
            raise ValueError("Star topology requires at least 2 vertices")

        if hub is None:
            hub = (rng or random).randint(1, num_vertices - 1)
        elif not 0 <= hub < num_vertices:
            raise ValueError(f"hub must be in [0, {num_vertices - 1}]")

        graph = Graph()
        if hub == 0:
            for i in range(num_vertices - 1):
                graph.add_edge(vertex_name(0), vertex_name(i + 1))
        else:
            for i in range(num_vertices - hub - 1):
                graph.add_edge(vertex_name(hub), vertex_name(hub + i + 1))
            for i in range(hub):
                graph.add_edge(vertex_name(hub), vertex_name(i))

        graph.graph.graph["hub"] = vertex_name(hub)
        LOGGER.info("Star graph hub: %s", vertex_name(hub))
        return graph
