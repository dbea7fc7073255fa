# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Breadth-first shortest paths over a Graph.

Edges are unweighted, so the first time BFS reaches a vertex is along a
shortest path from the source.
"""

from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional

from .graph import Graph, UnknownVertexError


class PathFinder:
    """
    Single-source shortest paths computed once at construction.

    Vertices in other components are simply never visited; asking for them
    yields ``None`` rather than an error.
    """

    def __init__(self, graph: Graph, source: Hashable):
        """
        Run BFS from source.

        Args:
            graph: Graph to traverse (not mutated)
            source: Starting vertex, which must exist in graph
        """
        if not graph.has_vertex(source):
            raise UnknownVertexError(source)

        self.source = source
        self._distance: Dict[Hashable, int] = {source: 0}
        self._predecessor: Dict[Hashable, Hashable] = {}

        frontier = deque([source])
        while frontier:
            u = frontier.popleft()
            for w in graph.adjacent_to(u):
                if w not in self._distance:
                    self._distance[w] = self._distance[u] + 1
                    self._predecessor[w] = u
                    frontier.append(w)

    def has_path_to(self, v: Hashable) -> bool:
        """Check whether v was reached from the source."""
        return v in self._distance

    def distance_to(self, v: Hashable) -> Optional[int]:
        """Edge count of the shortest path to v, or None if unreachable."""
        return self._distance.get(v)

    def path_to(self, v: Hashable) -> Optional[List[Hashable]]:
        """
        Shortest path from the source to v.

        Returns:
            List of vertices starting at the source and ending at v,
            or None if v is unreachable
        """
        if not self.has_path_to(v):
            return None

        path = [v]
        while path[-1] != self.source:
            path.append(self._predecessor[path[-1]])
        path.reverse()
        return path

    def reachable(self) -> Iterator[Hashable]:
        """Iterate over every vertex reached, source included."""
        return iter(self._distance)
