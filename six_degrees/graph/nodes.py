"""
Node dataclasses for the actor/movie bipartite graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ActorNode:
    """
    An actor in the graph.

    Attributes:
        idx: Stable handle (position in the graph's actor arena)
        name: Display name, exactly as first seen in the dataset
        movies: Titles of the movies this actor appears in
    """

    idx: int
    name: str
    movies: set[str] = field(default_factory=set)


@dataclass
class MovieNode:
    """
    A movie in the graph.

    Attributes:
        title: Exact title from the dataset (not normalized)
        actors: Handles of the actors credited in this movie
    """

    title: str
    actors: set[int] = field(default_factory=set)
