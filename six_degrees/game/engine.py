"""
Query interface for the Kevin Bacon game.

`BaconGame` owns one graph and the BFS result from one source actor, and
answers any number of path queries against them. The module-level
functions expose the same steps separately for callers that manage their
own graph and parent map.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable

from six_degrees.config import DEFAULT_SOURCE_ACTOR, MOVIE_DATA_PATH
from six_degrees.data.loader import Record, build_graph, load_graph
from six_degrees.graph.bipartite import BipartiteGraph
from six_degrees.graph.path import PathResult
from six_degrees.graph.search import ParentMap, PathFinder
from six_degrees.graph.stats import separation_summary

logger = logging.getLogger(__name__)

__all__ = [
    "BaconGame",
    "build_graph",
    "compute_distances_from",
    "describe_path",
]


def compute_distances_from(graph: BipartiteGraph, source_actor_name: str) -> ParentMap:
    """Run BFS from the source actor."""
    return PathFinder(graph).bfs(source_actor_name)


def describe_path(graph: BipartiteGraph, target_actor_name: str, parent_map: ParentMap) -> str:
    """Render the path from the BFS source to the target actor."""
    return PathFinder(graph).render(target_actor_name, parent_map)


class BaconGame:
    """
    A built graph plus the BFS result from its source actor.

    The graph is searched once on construction; queries only read.
    """

    def __init__(self, graph: BipartiteGraph, source: str = DEFAULT_SOURCE_ACTOR) -> None:
        """
        Initialize the game.

        Args:
            graph: Fully built graph (not modified afterwards)
            source: Actor every query is measured against
        """
        self.graph = graph
        self.source = source
        self._finder = PathFinder(graph)

        start = time.time()
        self.parent_map = self._finder.bfs(source)
        logger.info(f"Paths from '{source}' built in {time.time() - start:.1f}s")

    @classmethod
    def from_records(cls, records: Iterable[Record], source: str = DEFAULT_SOURCE_ACTOR) -> BaconGame:
        return cls(build_graph(records), source=source)

    @classmethod
    def from_file(
        cls,
        path: str | Path = MOVIE_DATA_PATH,
        source: str = DEFAULT_SOURCE_ACTOR,
    ) -> BaconGame:
        return cls(load_graph(path), source=source)

    @property
    def has_source(self) -> bool:
        """Whether the source actor exists in the graph."""
        return self.parent_map.source is not None

    def query(self, actor_name: str) -> PathResult:
        """Shortest path from the source to `actor_name`."""
        result = self._finder.path_to(actor_name, self.parent_map)
        logger.debug(f"Query '{actor_name}': {result.status.value}")
        return result

    def describe(self, actor_name: str) -> str:
        """Shortest path from the source to `actor_name` as a message."""
        return self.query(actor_name).render()

    def stats(self) -> dict:
        """Graph size and separation statistics."""
        return {
            **self.graph.stats(),
            **separation_summary(self.graph, self.parent_map),
        }
