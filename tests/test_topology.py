# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for TopologyGenerator."""

import logging
import random

import pytest
from toynet.network.labels import grid_name, vertex_name
from toynet.network.topology import TopologyGenerator


class FixedHub:
    """Random source that always picks the same index."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


class TestLabels:
    """Test cases for vertex naming."""

    def test_names(self):
        assert vertex_name(0) == "v0"
        assert vertex_name(12) == "v12"
        assert grid_name(3, 4) == "r3c4"


class TestCompleteGraph:
    """Test cases for complete graph generation."""

    @pytest.mark.parametrize("n", [2, 4, 7])
    def test_counts(self, n):
        """Test n(n-1)/2 edges and degree n-1."""
        graph = TopologyGenerator.complete_graph(n)
        assert graph.vertex_count == n
        assert graph.edge_count == n * (n - 1) // 2
        assert all(graph.degree(v) == n - 1 for v in graph.vertices())

    def test_single_vertex(self):
        graph = TopologyGenerator.complete_graph(1)
        assert set(graph.vertices()) == {"v0"}
        assert graph.edge_count == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TopologyGenerator.complete_graph(0)


class TestRingGraph:
    """Test cases for ring graph generation."""

    @pytest.mark.parametrize("n", [3, 5, 10])
    def test_counts(self, n):
        """Test n edges and degree 2."""
        graph = TopologyGenerator.ring_graph(n)
        assert graph.edge_count == n
        assert all(graph.degree(v) == 2 for v in graph.vertices())
        assert graph.has_edge(vertex_name(n - 1), "v0")

    def test_single_vertex_has_no_self_loop(self):
        graph = TopologyGenerator.ring_graph(1)
        assert set(graph.vertices()) == {"v0"}
        assert graph.edge_count == 0
        assert not graph.has_edge("v0", "v0")

    def test_two_vertices_collapse_to_one_edge(self):
        graph = TopologyGenerator.ring_graph(2)
        assert graph.edge_count == 1
        assert graph.has_edge("v0", "v1")

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TopologyGenerator.ring_graph(0)


class TestGridGraph:
    """Test cases for grid graph generation."""

    @pytest.mark.parametrize("n", [2, 3, 5])
    def test_edge_count(self, n):
        graph = TopologyGenerator.grid_graph(n)
        assert graph.vertex_count == n * n
        assert graph.edge_count == 2 * n * (n - 1)

    def test_degrees(self):
        """Test corner, side and interior degrees of a 3x3 grid."""
        graph = TopologyGenerator.grid_graph(3)
        for corner in ("r0c0", "r0c2", "r2c0", "r2c2"):
            assert graph.degree(corner) == 2
        for side in ("r0c1", "r1c0", "r1c2", "r2c1"):
            assert graph.degree(side) == 3
        assert graph.degree("r1c1") == 4

    def test_boundary_closure(self):
        """Test the last column and last row are linked."""
        graph = TopologyGenerator.grid_graph(3)
        assert graph.has_edge("r0c2", "r1c2")
        assert graph.has_edge("r1c2", "r2c2")
        assert graph.has_edge("r2c0", "r2c1")
        assert graph.has_edge("r2c1", "r2c2")
        assert not graph.has_edge("r0c0", "r0c2")

    def test_single_cell(self):
        graph = TopologyGenerator.grid_graph(1)
        assert set(graph.vertices()) == {"r0c0"}
        assert graph.edge_count == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TopologyGenerator.grid_graph(0)


class TestSecondLevelRingGraph:
    """Test cases for the ring augmented with second neighbour chords."""

    @pytest.mark.parametrize("h", [5, 6, 9])
    def test_regular_lattice(self, h):
        """Test 2h edges and degree 4."""
        graph = TopologyGenerator.second_level_ring_graph(h)
        assert graph.vertex_count == h
        assert graph.edge_count == 2 * h
        assert all(graph.degree(v) == 4 for v in graph.vertices())

    def test_seam_closure(self):
        graph = TopologyGenerator.second_level_ring_graph(6)
        assert graph.has_edge("v4", "v5")
        assert graph.has_edge("v5", "v0")
        assert graph.has_edge("v4", "v0")
        assert graph.has_edge("v5", "v1")
        assert not graph.has_edge("v0", "v3")

    def test_small_sizes(self):
        """Test that three and four vertices collapse to complete graphs."""
        assert TopologyGenerator.second_level_ring_graph(3).edge_count == 3
        assert TopologyGenerator.second_level_ring_graph(4).edge_count == 6

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TopologyGenerator.second_level_ring_graph(2)


class TestStarGraph:
    """Test cases for star graph generation."""

    def test_explicit_hub(self):
        graph = TopologyGenerator.star_graph(5, hub=2)
        assert graph.edge_count == 4
        assert graph.degree("v2") == 4
        assert set(graph.adjacent_to("v2")) == {"v0", "v1", "v3", "v4"}
        for v in ("v0", "v1", "v3", "v4"):
            assert graph.degree(v) == 1

    def test_hub_zero(self):
        graph = TopologyGenerator.star_graph(4, hub=0)
        assert set(graph.adjacent_to("v0")) == {"v1", "v2", "v3"}
        assert graph.edge_count == 3

    @pytest.mark.parametrize("hub", [1, 4])
    def test_boundary_hubs(self, hub):
        graph = TopologyGenerator.star_graph(5, hub=hub)
        assert graph.edge_count == 4
        assert graph.degree(vertex_name(hub)) == 4
        assert not graph.has_edge(vertex_name(hub), vertex_name(hub))

    def test_injected_random_source(self):
        """Test the hub is drawn from [1, s-1] through the random source."""
        rng = FixedHub(3)
        graph = TopologyGenerator.star_graph(6, rng=rng)
        assert rng.calls == [(1, 5)]
        assert graph.degree("v3") == 5

    def test_seeded_star_is_reproducible(self):
        expected = random.Random(7).randint(1, 7)
        first = TopologyGenerator.star_graph(8, rng=random.Random(7))
        second = TopologyGenerator.star_graph(8, rng=random.Random(7))
        assert sorted(map(sorted, first.edges())) == sorted(map(sorted, second.edges()))
        assert first.degree(vertex_name(expected)) == 7

    def test_hub_is_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="toynet.network.topology")
        TopologyGenerator.star_graph(5, hub=3)
        assert "Star graph hub: v3" in caplog.text

    def test_hub_recorded_on_graph(self):
        graph = TopologyGenerator.star_graph(5, hub=3)
        assert graph.graph.graph["hub"] == "v3"
        assert graph.copy().graph.graph["hub"] == "v3"

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            TopologyGenerator.star_graph(1)
        with pytest.raises(ValueError):
            TopologyGenerator.star_graph(4, hub=4)
