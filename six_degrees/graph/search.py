"""
Breadth-first search over the actor/movie graph.

Two actors are one step apart when they share a movie. BFS runs once from
the source actor and records, for every reachable actor, the actor it was
discovered from. Paths to the source are then read off that parent map.

Usage:
    finder = PathFinder(graph)
    parents = finder.bfs("Bacon, Kevin (I)")
    print(finder.render("O'Brien, Pat", parents))
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator

from six_degrees.errors import InvariantViolationError
from six_degrees.graph.bipartite import BipartiteGraph
from six_degrees.graph.nodes import ActorNode
from six_degrees.graph.path import PathResult, PathStatus

logger = logging.getLogger(__name__)


class ParentMap:
    """
    Result of a BFS: maps each reached actor handle to its predecessor.

    The source maps to None. Actors never reached are absent.
    """

    def __init__(
        self,
        source: int | None,
        parents: dict[int, int | None],
        source_name: str,
    ) -> None:
        self.source = source
        self.source_name = source_name
        self._parents = parents
        self._distances: dict[int, int] | None = None

    def __contains__(self, idx: int) -> bool:
        return idx in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._parents)

    def predecessor(self, idx: int) -> int | None:
        """Handle the actor was discovered from (None for the source)."""
        return self._parents[idx]

    def distance(self, idx: int) -> int:
        """Hop count from the source to a reached actor."""
        return self.distances()[idx]

    def distances(self) -> dict[int, int]:
        """Hop counts for every reached actor, computed once."""
        if self._distances is None:
            distances: dict[int, int] = {}
            for idx in self._parents:
                chain = []
                current = idx
                while current not in distances:
                    parent = self._parents[current]
                    if parent is None:
                        distances[current] = 0
                        break
                    chain.append(current)
                    current = parent
                depth = distances[current]
                for node in reversed(chain):
                    depth += 1
                    distances[node] = depth
            self._distances = distances
        return self._distances


class PathFinder:
    """
    Shortest-connection search over a built BipartiteGraph.

    The graph must not change after `bfs` is called; parent maps refer to
    actors by handle.
    """

    def __init__(self, graph: BipartiteGraph) -> None:
        self._graph = graph

    def bfs(self, source_name: str) -> ParentMap:
        """
        Run BFS from `source_name` over shared-movie hops.

        Returns an empty ParentMap if the source is not in the graph.
        """
        source = self._graph.get_actor(source_name)
        if source is None:
            logger.warning(f"Source actor '{source_name}' not in graph")
            return ParentMap(source=None, parents={}, source_name=source_name)

        parents: dict[int, int | None] = {source.idx: None}
        queue = deque([source])

        while queue:
            current = queue.popleft()
            for neighbor in self._graph.co_actors(current):
                if neighbor.idx in parents:
                    continue
                parents[neighbor.idx] = current.idx
                queue.append(neighbor)

        logger.info(f"BFS from '{source.name}' reached {len(parents):,} actors")
        return ParentMap(source=source.idx, parents=parents, source_name=source.name)

    def connecting_movie(self, actor: ActorNode, parent: ActorNode) -> str:
        """
        Movie linking two adjacent actors on a BFS path.

        The lexicographically smallest shared title is chosen.

        Raises:
            InvariantViolationError: If the two actors share no movie
        """
        shared = actor.movies & parent.movies
        if not shared:
            raise InvariantViolationError(
                f"'{actor.name}' and '{parent.name}' are adjacent in the BFS "
                "parent map but share no movie"
            )
        return min(shared)

    def path_to(self, target_name: str, parent_map: ParentMap) -> PathResult:
        """Reconstruct the path from the BFS source to `target_name`."""
        target = self._graph.get_actor(target_name)
        if target is None:
            return PathResult(
                query=target_name,
                status=PathStatus.UNKNOWN_ACTOR,
                source_name=parent_map.source_name,
            )
        if target.idx not in parent_map:
            return PathResult(
                query=target_name,
                status=PathStatus.UNREACHABLE,
                source_name=parent_map.source_name,
            )

        actors = [target.name]
        movies = []
        current = target
        parent_idx = parent_map.predecessor(current.idx)
        while parent_idx is not None:
            parent = self._graph.actor_by_idx(parent_idx)
            movies.append(self.connecting_movie(current, parent))
            actors.append(parent.name)
            current = parent
            parent_idx = parent_map.predecessor(current.idx)

        actors.reverse()
        movies.reverse()
        return PathResult(
            query=target_name,
            status=PathStatus.FOUND,
            source_name=parent_map.source_name,
            actors=actors,
            movies=movies,
        )

    def render(self, target_name: str, parent_map: ParentMap) -> str:
        """Path from the source to `target_name` as a one-line message."""
        result = self.path_to(target_name, parent_map)
        logger.debug(f"Query '{target_name}': {result.status.value}")
        return result.render()
