# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Graph representation, shortest paths and topology generation modules."""

from .graph import Graph, UnknownVertexError
from .labels import grid_name, vertex_name
from .pathfinder import PathFinder
from .topology import TopologyGenerator

__all__ = [
    "Graph",
    "UnknownVertexError",
    "PathFinder",
    "TopologyGenerator",
    "grid_name",
    "vertex_name",
]
