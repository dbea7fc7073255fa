# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Structural metrics for toy topologies."""

from .metrics import (
    TopologySummary,
    average_degree,
    average_length,
    is_connected,
    topology_summary,
)

__all__ = [
    "TopologySummary",
    "average_degree",
    "average_length",
    "is_connected",
    "topology_summary",
]
