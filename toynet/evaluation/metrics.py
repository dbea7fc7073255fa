# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Structural metrics for toy topologies.

Metrics that are undefined for a graph (no vertices, or no pair of distinct
vertices joined by a path) are reported as ``None`` instead of dividing
by zero.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..network.graph import Graph
from ..network.pathfinder import PathFinder


@dataclass
class TopologySummary:
    """Summary statistics for a single graph."""

    vertices: int
    edges: int
    degree_min: int
    degree_max: int
    average_degree: Optional[float]
    average_length: Optional[float]
    connected: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def average_degree(graph: Graph) -> Optional[float]:
    """Sum of vertex degrees divided by the vertex count."""
    if graph.vertex_count == 0:
        return None
    total = sum(graph.degree(v) for v in graph.vertices())
    return total / graph.vertex_count


def average_length(graph: Graph) -> Optional[float]:
    """
    Mean shortest-path length over ordered pairs of distinct vertices.

    Runs one BFS per vertex. Pairs with no path between them are left out
    of both the total and the pair count.
    """
    if graph.vertex_count <= 1:
        return None

    total = 0
    pairs = 0
    for v in graph.vertices():
        finder = PathFinder(graph, v)
        for other in finder.reachable():
            if other == v:
                continue
            total += finder.distance_to(other)
            pairs += 1

    if pairs == 0:
        return None
    return total / pairs


def is_connected(graph: Graph) -> bool:
    """True when every vertex is reachable from every other one."""
    if graph.vertex_count == 0:
        return False
    source = next(graph.vertices())
    finder = PathFinder(graph, source)
    return sum(1 for _ in finder.reachable()) == graph.vertex_count


def topology_summary(graph: Graph) -> TopologySummary:
    degrees = [graph.degree(v) for v in graph.vertices()]
    return TopologySummary(
        vertices=graph.vertex_count,
        edges=graph.edge_count,
        degree_min=min(degrees) if degrees else 0,
        degree_max=max(degrees) if degrees else 0,
        average_degree=average_degree(graph),
        average_length=average_length(graph),
        connected=is_connected(graph),
    )
