"""
Reading the tagged actor/movie dataset and building a graph from it.

The dataset has one record per line. `<a>` lines name an actor; every
following `<t>` line is a movie that actor appears in:

    <a>Bacon, Kevin (I)
    <t>Footloose (1984)
    <t>Tremors (1990)
    <a>O'Brien, Pat
    <t>Some Film (1999)

Usage:
    from six_degrees.data.loader import load_graph

    graph = load_graph("data/moviedata.txt")
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from six_degrees.config import ACTOR_TAG, MOVIE_DATA_ENCODING, MOVIE_TAG
from six_degrees.errors import MalformedIngestOrderError
from six_degrees.graph.bipartite import BipartiteGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActorRecord:
    name: str
    line_number: int | None = None


@dataclass(frozen=True)
class MovieRecord:
    title: str
    line_number: int | None = None


Record = Union[ActorRecord, MovieRecord]


def parse_line(line: str, line_number: int | None = None) -> Record | None:
    """Parse one dataset line, or return None for untagged lines."""
    if line.startswith(ACTOR_TAG):
        return ActorRecord(line[len(ACTOR_TAG):].strip(), line_number)
    if line.startswith(MOVIE_TAG):
        return MovieRecord(line[len(MOVIE_TAG):].strip(), line_number)
    return None


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Parse tagged lines into records, skipping anything untagged."""
    for line_number, line in enumerate(lines, start=1):
        record = parse_line(line, line_number)
        if record is not None:
            yield record


def read_records(path: str | Path, encoding: str = MOVIE_DATA_ENCODING) -> Iterator[Record]:
    """Stream records from a dataset file."""
    with open(path, encoding=encoding, errors="replace") as f:
        yield from iter_records(f)


def pair_records(records: Iterable[Record]) -> Iterator[tuple[str, str | None]]:
    """
    Attach each movie record to the actor record before it.

    Yields (actor, None) for every actor record and (actor, title) for every
    movie record.

    Raises:
        MalformedIngestOrderError: If a movie record comes before any actor
    """
    current_actor: str | None = None
    for record in records:
        if isinstance(record, ActorRecord):
            current_actor = record.name
            yield current_actor, None
        else:
            if current_actor is None:
                raise MalformedIngestOrderError(record.title, record.line_number)
            yield current_actor, record.title


def build_graph(records: Iterable[Record]) -> BipartiteGraph:
    """Build a graph from an ordered record stream."""
    graph = BipartiteGraph()
    for actor_name, movie_title in pair_records(records):
        if movie_title is None:
            graph.add_actor(actor_name)
        else:
            graph.add_movie(actor_name, movie_title)
    return graph


def load_graph(path: str | Path, encoding: str = MOVIE_DATA_ENCODING) -> BipartiteGraph:
    """Read a dataset file and build its graph."""
    logger.info(f"Loading movie data from {path}...")
    start = time.time()
    graph = build_graph(read_records(path, encoding=encoding))
    logger.info(
        f"Built graph with {graph.actor_count:,} actors, {graph.movie_count:,} movies, "
        f"{graph.credit_count:,} credits in {time.time() - start:.1f}s"
    )
    return graph
