"""
Degree-of-separation statistics over a BFS parent map.
"""

from __future__ import annotations

import numpy as np

from six_degrees.graph.bipartite import BipartiteGraph
from six_degrees.graph.search import ParentMap


def separation_histogram(parent_map: ParentMap) -> np.ndarray:
    """
    Count reachable actors per degree of separation.

    Element i is the number of actors exactly i steps from the source
    (element 0 is the source itself). Empty if the source was unknown.
    """
    distances = parent_map.distances()
    if not distances:
        return np.zeros(0, dtype=np.int64)
    return np.bincount(np.fromiter(distances.values(), dtype=np.int64, count=len(distances)))


def separation_summary(graph: BipartiteGraph, parent_map: ParentMap) -> dict:
    """Summary statistics for the source actor's reach into the graph."""
    histogram = separation_histogram(parent_map)
    reachable = int(histogram.sum())
    if reachable:
        degrees = np.arange(len(histogram))
        mean = float(np.dot(degrees, histogram) / reachable)
        max_degree = len(histogram) - 1
    else:
        mean = None
        max_degree = None

    return {
        "source": parent_map.source_name,
        "reachable": reachable,
        "unreachable": graph.actor_count - reachable,
        "max_degree": max_degree,
        "mean_degree": mean,
        "histogram": histogram.tolist(),
    }
