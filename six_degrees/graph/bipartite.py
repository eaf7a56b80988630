"""
Bipartite actor/movie graph.

Usage:
    from six_degrees.graph import BipartiteGraph

    graph = BipartiteGraph()
    graph.add_actor("Bacon, Kevin (I)")
    graph.add_movie("Bacon, Kevin (I)", "Footloose (1984)")
    graph.get_actor("Bacon, Kevin (I)").movies
"""

from __future__ import annotations

import logging

from six_degrees.errors import ActorNotFoundError
from six_degrees.graph.nodes import ActorNode, MovieNode
from six_degrees.graph.normalize import normalize_name

logger = logging.getLogger(__name__)


class BipartiteGraph:
    """
    Append-only graph of actors and the movies they appear in.

    Actors live in an arena (`list[ActorNode]`) and are referenced everywhere
    else by their integer handle. Movies are keyed by exact title.

    Attributes:
        actors_by_normalized_name: Dict mapping normalized name to ActorNode
        movies_by_title: Dict mapping title to MovieNode
        collisions: (existing display name, new spelling) pairs that merged
            into one node because they normalize to the same key
    """

    def __init__(self) -> None:
        self._actors: list[ActorNode] = []
        self.actors_by_normalized_name: dict[str, ActorNode] = {}
        self.movies_by_title: dict[str, MovieNode] = {}
        self.collisions: list[tuple[str, str]] = []
        self._credit_count = 0

    # =========================================================================
    # Insertion
    # =========================================================================

    def add_actor(self, name: str) -> ActorNode:
        """Add an actor if no node exists for its normalized name."""
        key = normalize_name(name)
        actor = self.actors_by_normalized_name.get(key)
        if actor is not None:
            if actor.name.strip() != name.strip():
                logger.warning(
                    f"Actor '{name}' normalizes to the same key as '{actor.name}'; "
                    "merging into one node"
                )
                self.collisions.append((actor.name, name))
            return actor

        actor = ActorNode(idx=len(self._actors), name=name)
        self._actors.append(actor)
        self.actors_by_normalized_name[key] = actor
        return actor

    def add_movie(self, actor_name: str, movie_title: str) -> MovieNode:
        """
        Credit an existing actor with a movie, creating the movie if needed.

        Raises:
            ActorNotFoundError: If the actor was never added
        """
        actor = self.get_actor(actor_name)
        if actor is None:
            raise ActorNotFoundError(actor_name)

        movie = self.movies_by_title.get(movie_title)
        if movie is None:
            movie = MovieNode(title=movie_title)
            self.movies_by_title[movie_title] = movie

        if actor.idx not in movie.actors:
            movie.actors.add(actor.idx)
            actor.movies.add(movie_title)
            self._credit_count += 1
        return movie

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_actor(self, name: str) -> ActorNode | None:
        """Get actor by (normalized) name, or None if not found."""
        return self.actors_by_normalized_name.get(normalize_name(name))

    def get_movie(self, title: str) -> MovieNode | None:
        """Get movie by exact title, or None if not found."""
        return self.movies_by_title.get(title)

    def actor_by_idx(self, idx: int) -> ActorNode:
        """Get actor by handle."""
        if 0 <= idx < len(self._actors):
            return self._actors[idx]
        raise IndexError(f"Actor handle {idx} out of range [0, {len(self._actors)})")

    def co_actors(self, actor: ActorNode) -> list[ActorNode]:
        """
        Actors sharing at least one movie with `actor`.

        Movies are walked in title order and cast members in handle order,
        and each co-actor is listed once, at its first appearance.
        """
        seen = {actor.idx}
        result = []
        for title in sorted(actor.movies):
            for idx in sorted(self.movies_by_title[title].actors):
                if idx not in seen:
                    seen.add(idx)
                    result.append(self._actors[idx])
        return result

    # =========================================================================
    # Utility Methods
    # =========================================================================

    @property
    def actor_count(self) -> int:
        return len(self._actors)

    @property
    def movie_count(self) -> int:
        return len(self.movies_by_title)

    @property
    def credit_count(self) -> int:
        """Number of actor-movie edges."""
        return self._credit_count

    def __contains__(self, name: str) -> bool:
        return self.get_actor(name) is not None

    def stats(self) -> dict:
        """Get statistics about the graph."""
        return {
            "actors": self.actor_count,
            "movies": self.movie_count,
            "credits": self.credit_count,
            "name_collisions": len(self.collisions),
        }
