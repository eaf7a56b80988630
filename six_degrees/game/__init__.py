"""
Game module.

Provides the query interface:
- BaconGame: Graph plus cached BFS from one source actor
- build_graph / compute_distances_from / describe_path: The same steps
  as standalone functions
"""

from six_degrees.game.engine import (
    BaconGame,
    build_graph,
    compute_distances_from,
    describe_path,
)

__all__ = [
    "BaconGame",
    "build_graph",
    "compute_distances_from",
    "describe_path",
]
