# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
toynet: toy network topologies and their structural metrics

Builds small undirected graphs (complete, ring, grid, augmented ring, star)
and measures average degree and average shortest-path length over them.
"""

from .network.graph import Graph, UnknownVertexError
from .network.pathfinder import PathFinder
from .network.topology import TopologyGenerator
from .evaluation.metrics import average_degree, average_length, topology_summary

__version__ = "0.1.0"
__all__ = [
    "Graph",
    "UnknownVertexError",
    "PathFinder",
    "TopologyGenerator",
    "average_degree",
    "average_length",
    "topology_summary",
]
