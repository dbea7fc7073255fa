# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Vertex naming used by the topology generators."""


def vertex_name(index: int) -> str:
    """Label for a linear index, e.g. ``v3``."""
    return f"v{index}"


def grid_name(row: int, column: int) -> str:
    """Label for a grid coordinate, e.g. ``r1c2``."""
    return f"r{row}c{column}"
