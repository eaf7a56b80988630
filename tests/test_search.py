"""
Unit tests for BFS and path reconstruction.
"""

import itertools
import random

import pytest

from six_degrees.errors import InvariantViolationError
from six_degrees.graph import BipartiteGraph, ParentMap, PathFinder, PathStatus


def brute_force_distances(graph: BipartiteGraph, source: str) -> dict[int, int]:
    """Reference shortest distances by relaxing every actor pair until stable."""
    n = graph.actor_count
    actors = [graph.actor_by_idx(i) for i in range(n)]
    start = graph.get_actor(source).idx
    dist = {start: 0}
    changed = True
    while changed:
        changed = False
        for a, b in itertools.permutations(actors, 2):
            if a.idx in dist and a.movies & b.movies:
                candidate = dist[a.idx] + 1
                if candidate < dist.get(b.idx, n + 1):
                    dist[b.idx] = candidate
                    changed = True
    return dist


def random_graph(seed: int, actors: int = 12, movies: int = 8, credits: int = 18) -> BipartiteGraph:
    rng = random.Random(seed)
    graph = BipartiteGraph()
    for i in range(actors):
        graph.add_actor(f"Actor {i}")
    for _ in range(credits):
        graph.add_movie(f"Actor {rng.randrange(actors)}", f"Movie {rng.randrange(movies)}")
    return graph


class TestBfs:
    """Test the parent map produced by BFS."""

    def test_source_has_no_predecessor(self, chain_graph):
        """The source should map to None."""
        parents = PathFinder(chain_graph).bfs("A")
        a = chain_graph.get_actor("A")
        assert parents.source == a.idx
        assert a.idx in parents
        assert parents.predecessor(a.idx) is None

    def test_chain_parents(self, chain_graph):
        """Each actor's parent should be one hop closer to the source."""
        parents = PathFinder(chain_graph).bfs("A")
        a, b, c = (chain_graph.get_actor(n).idx for n in "ABC")
        assert parents.predecessor(b) == a
        assert parents.predecessor(c) == b
        assert parents.distances() == {a: 0, b: 1, c: 2}

    def test_unreachable_absent(self, sample_graph):
        """Actors with no shared movie path should not be in the map."""
        parents = PathFinder(sample_graph).bfs("Bacon, Kevin (I)")
        loner = sample_graph.get_actor("Loner, Lonnie")
        assert loner.idx not in parents
        assert len(parents) == 4

    def test_unknown_source(self, chain_graph, caplog):
        """An unknown source should give an empty map, not an error."""
        parents = PathFinder(chain_graph).bfs("Nobody")
        assert parents.source is None
        assert len(parents) == 0
        assert parents.source_name == "Nobody"
        assert "not in graph" in caplog.text

    def test_source_name_is_display_name(self, sample_graph):
        """The parent map should carry the source's display name."""
        parents = PathFinder(sample_graph).bfs("  OBrien, Pat")
        assert parents.source_name == "O'Brien, Pat"

    def test_deterministic_tie_break(self):
        """With two equal-length routes the smaller movie title wins."""
        graph = BipartiteGraph()
        for name in ("S", "X", "Y", "T"):
            graph.add_actor(name)
        graph.add_movie("S", "B movie")
        graph.add_movie("Y", "B movie")
        graph.add_movie("S", "A movie")
        graph.add_movie("X", "A movie")
        graph.add_movie("X", "Z movie")
        graph.add_movie("Y", "Z movie")
        graph.add_movie("T", "Z movie")

        parents = PathFinder(graph).bfs("S")
        assert parents.predecessor(graph.get_actor("T").idx) == graph.get_actor("X").idx

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_brute_force(self, seed):
        """BFS distances should be minimal on random small graphs."""
        graph = random_graph(seed)
        parents = PathFinder(graph).bfs("Actor 0")
        assert parents.distances() == brute_force_distances(graph, "Actor 0")

    @pytest.mark.parametrize("seed", range(5))
    def test_parent_chain_shares_movies(self, seed):
        """Every parent link should be a real shared-movie hop."""
        graph = random_graph(seed)
        parents = PathFinder(graph).bfs("Actor 0")
        for idx in parents:
            parent = parents.predecessor(idx)
            if parent is None:
                continue
            assert graph.actor_by_idx(idx).movies & graph.actor_by_idx(parent).movies
            assert parents.distance(idx) == parents.distance(parent) + 1


class TestPathTo:
    """Test path reconstruction."""

    def test_chain_path(self, chain_graph):
        """Querying C from A should walk A, M1, B, M2, C."""
        finder = PathFinder(chain_graph)
        result = finder.path_to("C", finder.bfs("A"))
        assert result.status is PathStatus.FOUND
        assert result.steps == 2
        assert result.actors == ["A", "B", "C"]
        assert result.movies == ["M1", "M2"]
        assert result.tokens == ["<a>A<a>", "<t>M1<t>", "<a>B<a>", "<t>M2<t>", "<a>C<a>"]

    def test_source_itself(self, chain_graph):
        """Querying the source should give zero steps and one token."""
        finder = PathFinder(chain_graph)
        result = finder.path_to("A", finder.bfs("A"))
        assert result.steps == 0
        assert result.tokens == ["<a>A<a>"]

    def test_unknown_actor(self, chain_graph):
        """An actor not in the graph should be reported as unknown."""
        finder = PathFinder(chain_graph)
        result = finder.path_to("Zed", finder.bfs("A"))
        assert result.status is PathStatus.UNKNOWN_ACTOR
        assert result.steps is None
        assert result.tokens == []

    def test_unreachable_actor(self, sample_graph):
        """A known actor with no path should be reported as unreachable."""
        finder = PathFinder(sample_graph)
        result = finder.path_to("Loner, Lonnie", finder.bfs("Bacon, Kevin (I)"))
        assert result.status is PathStatus.UNREACHABLE

    def test_smallest_shared_movie_chosen(self):
        """With several shared movies the smallest title connects them."""
        graph = BipartiteGraph()
        graph.add_actor("A")
        graph.add_actor("B")
        for title in ("Zulu (1964)", "Alien (1979)", "Mars (2000)"):
            graph.add_movie("A", title)
            graph.add_movie("B", title)
        finder = PathFinder(graph)
        assert finder.path_to("B", finder.bfs("A")).movies == ["Alien (1979)"]

    def test_inconsistent_parent_map_raises(self, chain_graph):
        """A parent link with no shared movie is an invariant violation."""
        a = chain_graph.get_actor("A").idx
        c = chain_graph.get_actor("C").idx
        bogus = ParentMap(source=a, parents={a: None, c: a}, source_name="A")
        with pytest.raises(InvariantViolationError):
            PathFinder(chain_graph).path_to("C", bogus)


class TestRender:
    """Test the rendered message."""

    def test_found_message(self, chain_graph):
        """Found paths should state the query, step count, and tokens."""
        finder = PathFinder(chain_graph)
        message = finder.render("C", finder.bfs("A"))
        assert message == '"C" is 2 steps away from A. The path is <a>A<a><t>M1<t><a>B<a><t>M2<t><a>C<a>'

    def test_source_message(self, chain_graph):
        """The source should be zero steps from itself."""
        finder = PathFinder(chain_graph)
        message = finder.render("A", finder.bfs("A"))
        assert message == '"A" is 0 steps away from A. The path is <a>A<a>'

    def test_not_found_keeps_exact_input(self, chain_graph):
        """The not-found message should echo the input unaltered."""
        finder = PathFinder(chain_graph)
        query = "  D'Angelo, \"Nobody\" "
        message = finder.render(query, finder.bfs("A"))
        assert message == f'"{query}" could not be found or has no connection to A!'

    def test_apostrophe_scenario(self, sample_graph):
        """O'Brien should resolve through normalization at one step."""
        finder = PathFinder(sample_graph)
        message = finder.render("O'Brien, Pat", finder.bfs("Bacon, Kevin (I)"))
        assert message == (
            '"O\'Brien, Pat" is 1 steps away from Bacon, Kevin (I). '
            "The path is <a>Bacon, Kevin (I)<a><t>Some Film (1999)<t><a>O'Brien, Pat<a>"
        )

    def test_query_uses_original_spelling(self, sample_graph):
        """The query text is echoed; tokens use display names."""
        finder = PathFinder(sample_graph)
        message = finder.render("OBrien, Pat", finder.bfs("Bacon, Kevin (I)"))
        assert message.startswith('"OBrien, Pat" is 1 steps away')
        assert "<a>O'Brien, Pat<a>" in message

    def test_two_hop_scenario(self, sample_graph):
        """Cagney reaches Bacon through O'Brien."""
        finder = PathFinder(sample_graph)
        result = finder.path_to("Cagney, James", finder.bfs("Bacon, Kevin (I)"))
        assert result.actors == ["Bacon, Kevin (I)", "O'Brien, Pat", "Cagney, James"]
        assert result.movies == ["Some Film (1999)", "Angels with Dirty Faces (1938)"]
