"""Tests for the connection graph store."""

import itertools

import pytest

from lovegraph.network.graph import (
    ConnectionGraph,
    are_connected,
    build_graph,
    make_edge,
    neighbors,
)


# ── Fixtures ──────────────────────────────────────────────


@pytest.fixture
def graph() -> ConnectionGraph:
    """Ana — Bia — Caio — Duda, plus Bianca — Caio."""
    return build_graph([
        ("Ana", "Bia"),
        ("Bia", "Caio"),
        ("Caio", "Duda"),
        ("Bianca", "Caio"),
    ])


# ── Construction ──────────────────────────────────────────


class TestBuildGraph:
    def test_people_sorted(self, graph):
        assert graph.people == ["Ana", "Bia", "Bianca", "Caio", "Duda"]

    def test_edge_count(self, graph):
        assert len(graph.edges) == 4
        assert make_edge("Bia", "Ana") in graph.edges

    def test_duplicates_collapse(self):
        g = build_graph([("A", "B"), ("B", "A"), ("A", "B")])
        assert len(g.edges) == 1
        assert g.neighbors("A") == {"B"}

    def test_empty(self):
        g = build_graph([])
        assert len(g) == 0
        assert g.people == []

    def test_skips_blank_and_self_links(self):
        g = build_graph([("A", ""), ("", "B"), ("C", "C"), ("A", "B")])
        assert g.people == ["A", "B"]
        assert "C" not in g

    def test_strips_whitespace(self):
        g = build_graph([("  Ana ", "Bia")])
        assert "Ana" in g
        assert g.are_connected("Ana", "Bia")

    def test_accepts_generators(self):
        g = build_graph((a, b) for a, b in [("A", "B"), ("B", "C")])
        assert len(g) == 3

    def test_repr(self, graph):
        assert "people=5" in repr(graph)


# ── Adjacency ─────────────────────────────────────────────


class TestNeighbors:
    def test_neighbors(self, graph):
        assert neighbors(graph, "Caio") == {"Bia", "Duda", "Bianca"}

    def test_unknown_person_is_empty(self, graph):
        assert neighbors(graph, "Nobody") == set()

    def test_returns_copy(self, graph):
        n = graph.neighbors("Ana")
        n.add("Intruder")
        assert graph.neighbors("Ana") == {"Bia"}

    def test_sorted_neighbors(self, graph):
        assert graph.sorted_neighbors("Caio") == ["Bia", "Bianca", "Duda"]

    def test_degree(self, graph):
        assert graph.degree("Caio") == 3
        assert graph.degree("Nobody") == 0


class TestAreConnected:
    def test_direct(self, graph):
        assert are_connected(graph, "Ana", "Bia")

    def test_not_direct(self, graph):
        assert not are_connected(graph, "Ana", "Caio")

    def test_unknown(self, graph):
        assert not are_connected(graph, "Ana", "Nobody")
        assert not are_connected(graph, "Nobody", "Ana")

    def test_symmetric_for_every_pair(self, graph):
        names = graph.people + ["Nobody"]
        for a, b in itertools.product(names, repeat=2):
            assert are_connected(graph, a, b) == are_connected(graph, b, a)


# ── Lookup helpers ────────────────────────────────────────


class TestResolve:
    def test_exact(self, graph):
        assert graph.resolve("Bia") == "Bia"

    def test_case_insensitive(self, graph):
        assert graph.resolve("bIA") == "Bia"

    def test_trims_input(self, graph):
        assert graph.resolve("  duda ") == "Duda"

    def test_unknown(self, graph):
        assert graph.resolve("Zeca") is None

    def test_exact_match_beats_casefold(self):
        g = build_graph([("Ana", "Bia"), ("ana", "Caio")])
        assert g.resolve("ana") == "ana"
        assert g.resolve("Ana") == "Ana"
        assert g.resolve("ANA") == "Ana"


class TestSuggest:
    def test_substring(self, graph):
        assert graph.suggest("bi") == ["Bia", "Bianca"]

    def test_exclude(self, graph):
        assert graph.suggest("bi", exclude={"Bia"}) == ["Bianca"]

    def test_limit(self, graph):
        assert graph.suggest("a", limit=2) == ["Ana", "Bia"]

    def test_blank_query(self, graph):
        assert graph.suggest("   ") == []


class TestEgoSubgraph:
    def test_exact_name_keeps_own_connections(self, graph):
        sub = graph.ego_subgraph("caio")
        assert sub.people == ["Bia", "Bianca", "Caio", "Duda"]
        assert len(sub.edges) == 3
        assert not sub.are_connected("Bia", "Bianca")

    def test_partial_query_keeps_matching_edges(self, graph):
        sub = graph.ego_subgraph("an")
        # Ana and Bianca match; their edges come along
        assert sub.edges == {make_edge("Ana", "Bia"), make_edge("Bianca", "Caio")}

    def test_no_match(self, graph):
        assert len(graph.ego_subgraph("zzz")) == 0

    def test_blank_query_returns_graph(self, graph):
        assert graph.ego_subgraph("") is graph
