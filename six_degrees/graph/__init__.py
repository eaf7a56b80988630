"""
Graph module.

Provides the actor/movie bipartite graph and shortest-connection search:
- BipartiteGraph: Actor and movie nodes with bidirectional credits
- PathFinder: BFS from a source actor and path reconstruction
- separation_histogram / separation_summary: Reach statistics
"""

from six_degrees.graph.bipartite import BipartiteGraph
from six_degrees.graph.nodes import ActorNode, MovieNode
from six_degrees.graph.normalize import normalize_name
from six_degrees.graph.path import PathResult, PathStatus
from six_degrees.graph.search import ParentMap, PathFinder
from six_degrees.graph.stats import separation_histogram, separation_summary

__all__ = [
    "ActorNode",
    "BipartiteGraph",
    "MovieNode",
    "ParentMap",
    "PathFinder",
    "PathResult",
    "PathStatus",
    "normalize_name",
    "separation_histogram",
    "separation_summary",
]
