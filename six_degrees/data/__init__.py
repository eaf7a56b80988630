"""
Data loading module.

Reads the tagged actor/movie dataset and builds a BipartiteGraph.

Usage:
    from six_degrees.data import load_graph

    graph = load_graph("data/moviedata.txt")
"""

from six_degrees.data.loader import (
    ActorRecord,
    MovieRecord,
    build_graph,
    iter_records,
    load_graph,
    pair_records,
    read_records,
)

__all__ = [
    "ActorRecord",
    "MovieRecord",
    "build_graph",
    "iter_records",
    "load_graph",
    "pair_records",
    "read_records",
]
