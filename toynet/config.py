# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Topology configuration with environment variable defaults."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Optional

from toynet.network.graph import Graph
from toynet.network.topology import TopologyGenerator

KNOWN_TOPOLOGIES = ["complete", "ring", "grid", "second_level_ring", "star"]


@dataclass(frozen=True)
class TopologyConfig:
    kind: str = "ring"
    size: int = 8
    seed: Optional[int] = None  # only the star topology is randomized
    hub: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in KNOWN_TOPOLOGIES:
            raise ValueError(
                f"Unknown topology '{self.kind}', expected one of {', '.join(KNOWN_TOPOLOGIES)}"
            )

    @classmethod
    def from_env(cls, **overrides) -> "TopologyConfig":
        """Read TOYNET_KIND, TOYNET_SIZE and TOYNET_SEED; overrides win."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "kind" not in values:
            values["kind"] = os.getenv("TOYNET_KIND", cls.kind)
        if "size" not in values:
            values["size"] = int(os.getenv("TOYNET_SIZE", cls.size))
        if "seed" not in values:
            seed = os.getenv("TOYNET_SEED")
            values["seed"] = int(seed) if seed else None
        return cls(**values)

    def build(self) -> Graph:
        """Generate the configured topology."""
        if self.kind == "complete":
            return TopologyGenerator.complete_graph(self.size)
        if self.kind == "ring":
            return TopologyGenerator.ring_graph(self.size)
        if self.kind == "grid":
            return TopologyGenerator.grid_graph(self.size)
        if self.kind == "second_level_ring":
            return TopologyGenerator.second_level_ring_graph(self.size)
        rng = random.Random(self.seed) if self.seed is not None else None
        return TopologyGenerator.star_graph(self.size, rng=rng, hub=self.hub)
