"""Unit tests for graph algorithms."""

import pytest

from graphwalk.core.graph import build_airports, build_vertices
from graphwalk.core.graph.base import preorder, vertex_neighbors
from graphwalk.core.graph.loops import has_self_loop, iter_self_loopers, print_self_loopers
from graphwalk.core.graph.reachability import can_reach, reachable, unreachable
from graphwalk.core.graph.words import iter_short_words, longest_word, print_short_words
from graphwalk.core.models import Airport, Vertex


def make_chain(*words: str) -> list[Vertex[str]]:
    """Create vertices linked in order: words[0] -> words[1] -> ..."""
    vertices = [Vertex(word) for word in words]
    for current, following in zip(vertices, vertices[1:]):
        current.add_neighbor(following)
    return vertices


@pytest.fixture
def animal_cycle() -> Vertex[str]:
    """Create a cycle: cat -> elephant -> dog -> cat."""
    cat, _, dog = make_chain("cat", "elephant", "dog")
    dog.add_neighbor(cat)
    return cat


@pytest.fixture
def branching_words() -> Vertex[str]:
    """Create a diamond: A -> B -> D, A -> C -> D."""
    a, b, c, d = Vertex("a"), Vertex("bbb"), Vertex("ccc"), Vertex("dddd")
    a.neighbors = [b, c]
    b.neighbors = [d]
    c.neighbors = [d]
    return a


@pytest.fixture
def routes() -> dict[str, Airport]:
    """Create airports: SEA -> DEN -> JFK -> SEA, LAX -> SFO."""
    return build_airports(
        {"SEA": ["DEN"], "DEN": ["JFK"], "JFK": ["SEA"], "LAX": ["SFO"]}
    )


class TestPreorder:
    """Tests for the shared depth-first walk."""

    def test_order_matches_recursive_walk(self) -> None:
        vertices = build_vertices({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})
        order = [v.data for v in preorder(vertices["A"], vertex_neighbors)]
        assert order == ["A", "B", "D", "C"]

    def test_none_start(self) -> None:
        assert list(preorder(None, vertex_neighbors)) == []

    def test_skips_none_neighbors(self) -> None:
        b = Vertex("b")
        a = Vertex("a", neighbors=[None, b])  # type: ignore[list-item]
        assert [v.data for v in preorder(a, vertex_neighbors)] == ["a", "b"]

    def test_none_neighbor_list(self) -> None:
        a = Vertex("a", neighbors=None)
        assert [v.data for v in preorder(a, vertex_neighbors)] == ["a"]

    def test_deep_chain_does_not_recurse(self) -> None:
        vertices = make_chain(*(str(i) for i in range(10_000)))
        assert sum(1 for _ in preorder(vertices[0], vertex_neighbors)) == 10_000


class TestShortWords:
    """Tests for the short-word reporter."""

    def test_cycle_reports_each_word_once(self, animal_cycle: Vertex[str]) -> None:
        assert list(iter_short_words(animal_cycle, 4)) == ["cat", "dog"]

    def test_print_uses_emit(self, animal_cycle: Vertex[str]) -> None:
        emitted: list[str] = []
        print_short_words(animal_cycle, 4, emit=emitted.append)
        assert emitted == ["cat", "dog"]

    def test_print_defaults_to_stdout(
        self, animal_cycle: Vertex[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_short_words(animal_cycle, 4)
        assert capsys.readouterr().out == "cat\ndog\n"

    def test_length_is_strict(self, animal_cycle: Vertex[str]) -> None:
        assert list(iter_short_words(animal_cycle, 3)) == []

    def test_non_positive_k(self, animal_cycle: Vertex[str]) -> None:
        assert list(iter_short_words(animal_cycle, 0)) == []
        assert list(iter_short_words(animal_cycle, -5)) == []

    def test_none_vertex(self) -> None:
        emitted: list[str] = []
        print_short_words(None, 10, emit=emitted.append)
        assert emitted == []

    def test_none_payload_skipped(self) -> None:
        a = Vertex(None, neighbors=[Vertex("ok")])  # type: ignore[arg-type]
        assert list(iter_short_words(a, 10)) == ["ok"]

    def test_equal_payloads_are_distinct_vertices(self) -> None:
        first, second = Vertex("x"), Vertex("x")
        first.add_neighbor(second)
        assert list(iter_short_words(first, 2)) == ["x", "x"]

    def test_shared_descendant_reported_once(self, branching_words: Vertex[str]) -> None:
        assert list(iter_short_words(branching_words, 5)) == ["a", "bbb", "dddd", "ccc"]


class TestLongestWord:
    """Tests for the longest-word finder."""

    def test_cycle(self, animal_cycle: Vertex[str]) -> None:
        assert longest_word(animal_cycle) == "elephant"

    def test_includes_start(self) -> None:
        start, _ = make_chain("giraffe", "cat")
        assert longest_word(start) == "giraffe"

    def test_tie_keeps_first_discovered(self, branching_words: Vertex[str]) -> None:
        branching_words.neighbors[1].data = "eeee"  # type: ignore[index]
        # pre-order: a, bbb, dddd, eeee
        assert longest_word(branching_words) == "dddd"

    def test_tie_between_siblings(self) -> None:
        root = Vertex("r", neighbors=[Vertex("one"), Vertex("two")])
        assert longest_word(root) == "one"

    def test_none_vertex(self) -> None:
        assert longest_word(None) == ""

    def test_only_none_payloads(self) -> None:
        assert longest_word(Vertex(None)) == ""  # type: ignore[arg-type]


class TestSelfLoops:
    """Tests for the self-loop reporter."""

    def test_self_loop_reported_once(self) -> None:
        vertices = build_vertices({"C": ["A", "B"], "A": ["A", "B"], "B": ["A"]})
        assert list(iter_self_loopers(vertices["C"])) == ["A"]

    def test_start_with_self_loop(self) -> None:
        vertices = build_vertices({"A": ["A"]})
        assert list(iter_self_loopers(vertices["A"])) == ["A"]

    def test_unreachable_loop_not_reported(self) -> None:
        vertices = build_vertices({"A": ["B"], "C": ["C"]})
        assert list(iter_self_loopers(vertices["A"])) == []

    def test_equal_payload_is_not_a_loop(self) -> None:
        a, twin = Vertex(1), Vertex(1)
        a.add_neighbor(twin)
        assert has_self_loop(a) is False
        assert list(iter_self_loopers(a)) == []

    def test_print_uses_emit(self) -> None:
        vertices = build_vertices({"A": ["B"], "B": ["B", "C"], "C": ["C"]})
        emitted: list[str] = []
        print_self_loopers(vertices["A"], emit=emitted.append)
        assert emitted == ["B", "C"]

    def test_none_vertex(self) -> None:
        emitted: list[str] = []
        print_self_loopers(None, emit=emitted.append)
        assert emitted == []

    def test_none_neighbors(self) -> None:
        assert list(iter_self_loopers(Vertex("a", neighbors=None))) == []


class TestCanReach:
    """Tests for airport reachability."""

    def test_same_airport(self, routes: dict[str, Airport]) -> None:
        assert can_reach(routes["LAX"], routes["LAX"]) is True

    def test_reachable_through_cycle(self, routes: dict[str, Airport]) -> None:
        assert can_reach(routes["DEN"], routes["SEA"]) is True

    def test_unreachable(self, routes: dict[str, Airport]) -> None:
        assert can_reach(routes["SEA"], routes["SFO"]) is False
        assert can_reach(routes["SFO"], routes["LAX"]) is False

    def test_none_arguments(self, routes: dict[str, Airport]) -> None:
        assert can_reach(None, routes["SEA"]) is False
        assert can_reach(routes["SEA"], None) is False
        assert can_reach(None, None) is False

    def test_none_flights(self) -> None:
        start = Airport("ORD", flights=None)
        assert can_reach(start, Airport("BOS")) is False

    def test_identity_not_code(self) -> None:
        assert can_reach(Airport("BOS"), Airport("BOS")) is False

    def test_stops_at_first_route(self) -> None:
        class CountingAirport(Airport):
            lookups = 0

            def get_outbound_flights(self) -> list[Airport] | None:
                CountingAirport.lookups += 1
                return super().get_outbound_flights()

        target = CountingAirport("DST")
        start = CountingAirport("SRC", flights=[target, CountingAirport("FAR")])
        assert can_reach(start, target) is True
        assert CountingAirport.lookups == 1


class TestUnreachable:
    """Tests for adjacency-map reachability."""

    def test_everything_reachable(self) -> None:
        graph = {"A": ["B", "C"], "B": ["D"], "C": [], "D": ["A"]}
        assert reachable(graph, "A") == {"A", "B", "C", "D"}
        assert unreachable(graph, "A") == set()

    def test_disconnected(self) -> None:
        graph = {"A": ["B"], "C": ["D"]}
        assert reachable(graph, "A") == {"A", "B"}
        assert unreachable(graph, "A") == {"C", "D"}

    def test_dangling_neighbor_has_no_edges(self) -> None:
        graph = {"A": ["B"], "C": ["A"]}
        assert unreachable(graph, "A") == {"C"}

    def test_starting_not_a_key_counts_as_reached(self) -> None:
        graph = {"A": ["B"], "C": ["D"]}
        assert unreachable(graph, "D") == {"A", "B", "C"}

    def test_starting_absent(self) -> None:
        graph = {"A": ["B"], "C": ["D"]}
        assert unreachable(graph, "Z") == {"A", "B", "C", "D"}

    def test_none_neighbor_list(self) -> None:
        graph: dict[str, list[str] | None] = {"A": None, "B": ["A"]}
        assert unreachable(graph, "A") == {"B"}

    def test_empty_and_none_graph(self) -> None:
        assert unreachable({}, "A") == set()
        assert unreachable(None, "A") == set()

    def test_integer_values(self) -> None:
        graph = {1: [2, 2, 3], 3: [1], 4: [5]}
        assert unreachable(graph, 1) == {4, 5}

    def test_does_not_mutate_graph(self) -> None:
        graph = {"A": ["B"], "C": ["D"]}
        unreachable(graph, "A")
        assert graph == {"A": ["B"], "C": ["D"]}
