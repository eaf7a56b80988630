"""
Path query results and their text rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from six_degrees.config import ACTOR_TAG, MOVIE_TAG


class PathStatus(str, Enum):
    """Outcome of a path query."""

    FOUND = "found"
    UNKNOWN_ACTOR = "unknown_actor"
    UNREACHABLE = "unreachable"


def actor_token(name: str) -> str:
    return f"{ACTOR_TAG}{name}{ACTOR_TAG}"


def movie_token(title: str) -> str:
    return f"{MOVIE_TAG}{title}{MOVIE_TAG}"


@dataclass
class PathResult:
    """
    Answer to "how far is `query` from the source actor?".

    Attributes:
        query: Actor name exactly as the caller typed it
        status: Whether a path was found, and if not, why
        source_name: Display name of the BFS source actor
        actors: Display names from the source to the queried actor
        movies: Connecting movies; movies[i] links actors[i] and actors[i + 1]
    """

    query: str
    status: PathStatus
    source_name: str
    actors: list[str] = field(default_factory=list)
    movies: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    @property
    def steps(self) -> int | None:
        """Degrees of separation, or None when no path exists."""
        return len(self.movies) if self.found else None

    @property
    def tokens(self) -> list[str]:
        """Alternating tagged actor/movie tokens, source first."""
        if not self.actors:
            return []
        tokens = [actor_token(self.actors[0])]
        for movie, actor in zip(self.movies, self.actors[1:], strict=True):
            tokens.append(movie_token(movie))
            tokens.append(actor_token(actor))
        return tokens

    def render(self) -> str:
        """Format the result as the one-line answer shown to users."""
        if not self.found:
            return (
                f'"{self.query}" could not be found or has no connection '
                f"to {self.source_name}!"
            )
        return (
            f'"{self.query}" is {self.steps} steps away from {self.source_name}. '
            f"The path is {''.join(self.tokens)}"
        )

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "status": self.status.value,
            "source": self.source_name,
            "steps": self.steps,
            "tokens": self.tokens,
            "message": self.render(),
        }
