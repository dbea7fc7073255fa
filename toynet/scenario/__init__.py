# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Edge list ingestion, text export and command-line helpers."""

from .edgelist import (
    format_adjacency,
    iter_dot_edges,
    read_edge_list,
    write_dot_edges,
)

__all__ = [
    "format_adjacency",
    "iter_dot_edges",
    "read_edge_list",
    "write_dot_edges",
]
