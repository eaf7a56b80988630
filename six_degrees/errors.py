"""
Custom exceptions for the six_degrees package.
"""

from __future__ import annotations


class SixDegreesError(Exception):
    """Base exception for the package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ActorNotFoundError(SixDegreesError):
    """Raised when a movie credit names an actor that was never added."""

    def __init__(self, actor_name: str) -> None:
        self.actor_name = actor_name
        super().__init__(f"Actor '{actor_name}' has not been added to the graph")


class MalformedIngestOrderError(SixDegreesError):
    """Raised when a movie record appears before any actor record."""

    def __init__(self, movie_title: str, line_number: int | None = None) -> None:
        self.movie_title = movie_title
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Movie record '{movie_title}'{where} has no preceding actor record"
        )


class InvariantViolationError(SixDegreesError):
    """Raised when the graph and a BFS parent map disagree."""
    pass
