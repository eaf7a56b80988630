"""
Six Degrees of Kevin Bacon.

Builds a bipartite actor/movie graph from a tagged text dataset and
answers shortest-connection queries against a single source actor.
"""

__version__ = "0.1.0"
