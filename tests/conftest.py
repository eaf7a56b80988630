"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from six_degrees.data.loader import build_graph, iter_records
from six_degrees.graph import BipartiteGraph


@pytest.fixture
def sample_lines() -> list[str]:
    """A small tagged dataset around Kevin Bacon."""
    return [
        "<a>Bacon, Kevin (I)",
        "<t>Footloose (1984)",
        "<t>Some Film (1999)",
        "<a>O'Brien, Pat",
        "<t>Some Film (1999)",
        "<t>Angels with Dirty Faces (1938)",
        "<a>Cagney, James",
        "<t>Angels with Dirty Faces (1938)",
        "<a>Singer, Lori",
        "<t>Footloose (1984)",
        "<a>Loner, Lonnie",
        "<t>Nobody Saw It (2001)",
    ]


@pytest.fixture
def sample_dataset(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Write the sample dataset to a file."""
    path = tmp_path / "moviedata.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_graph(sample_lines: list[str]) -> BipartiteGraph:
    """Graph built from the sample dataset."""
    return build_graph(iter_records(sample_lines))


@pytest.fixture
def chain_graph() -> BipartiteGraph:
    """A - M1 - B - M2 - C."""
    graph = BipartiteGraph()
    for actor in ("A", "B", "C"):
        graph.add_actor(actor)
    graph.add_movie("A", "M1")
    graph.add_movie("B", "M1")
    graph.add_movie("B", "M2")
    graph.add_movie("C", "M2")
    return graph
