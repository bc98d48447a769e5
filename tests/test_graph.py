"""Tests for the graph container."""

import networkx as nx
import pytest

from g2io.core.errors import InvariantError
from g2io.core.graph import EdgeKind, Graph


# ── Helpers ──────────────────────────────────────────────────────────

def _graph(edges, edge_kind=EdgeKind.DIRECTED):
    g = Graph(edge_kind)
    for u, v in edges:
        g.new_edge(u, v)
    return g


# ── Construction ─────────────────────────────────────────────────────

class TestConstruction:
    def test_empty(self):
        g = Graph()
        assert g.n_nodes() == 0
        assert g.n_edges() == 0
        assert list(g.iter_edges()) == []
        assert g.is_directed

    def test_with_capacity_is_empty(self):
        g = Graph.with_capacity(10, 20, EdgeKind.UNDIRECTED)
        assert g.n_nodes() == 0
        assert g.edge_kind is EdgeKind.UNDIRECTED
        assert not g.is_directed

    def test_negative_capacity(self):
        with pytest.raises(InvariantError):
            Graph.with_capacity(-1, 0)

    def test_edge_kind_from_string(self):
        assert Graph("undirected").edge_kind is EdgeKind.UNDIRECTED

    def test_new_node_returns_index(self):
        g = Graph()
        assert g.new_node() == 0
        assert g.new_node() == 1
        assert g.n_nodes() == 2


# ── Edges ────────────────────────────────────────────────────────────

class TestEdges:
    def test_new_edge_grows_node_range(self):
        g = Graph()
        g.new_edge(2, 3)
        assert g.n_nodes() == 4
        assert g.n_edges() == 1

    def test_duplicates_are_kept(self):
        g = _graph([(0, 1), (0, 1), (1, 1)])
        assert list(g.iter_edges()) == [(0, 1), (0, 1), (1, 1)]

    def test_insertion_order(self):
        edges = [(3, 1), (0, 2), (1, 0)]
        assert list(_graph(edges).iter_edges()) == edges

    def test_negative_index(self):
        with pytest.raises(InvariantError):
            Graph().new_edge(-1, 0)

    def test_remove_edge_keeps_order(self):
        g = _graph([(0, 1), (1, 2), (2, 0), (1, 2)])
        g.remove_edge(1, 2)
        assert list(g.iter_edges()) == [(0, 1), (2, 0), (1, 2)]
        assert g.n_nodes() == 3

    def test_remove_edge_directed_needs_exact_direction(self):
        g = _graph([(0, 1)])
        with pytest.raises(InvariantError):
            g.remove_edge(1, 0)

    def test_remove_edge_undirected_matches_reverse(self):
        g = _graph([(0, 1), (1, 2)], EdgeKind.UNDIRECTED)
        g.remove_edge(2, 1)
        assert list(g.iter_edges()) == [(0, 1)]

    def test_remove_missing_edge(self):
        with pytest.raises(InvariantError, match="missing edge"):
            Graph().remove_edge(0, 1)


# ── Disjoint union ───────────────────────────────────────────────────

class TestAppendGraph:
    def test_offsets(self):
        g = _graph([(0, 1)])
        g.append_graph(_graph([(0, 1), (1, 2)]))
        assert g.n_nodes() == 5
        assert list(g.iter_edges()) == [(0, 1), (2, 3), (3, 4)]

    def test_isolated_nodes_count(self):
        g = Graph()
        g.new_node()
        other = Graph()
        other.new_node()
        other.new_node()
        g.append_graph(other)
        assert g.n_nodes() == 3
        assert g.n_edges() == 0

    def test_other_is_untouched(self):
        other = _graph([(0, 1)])
        g = _graph([(0, 2)])
        g.append_graph(other)
        assert list(other.iter_edges()) == [(0, 1)]

    def test_edge_kind_mismatch(self):
        with pytest.raises(InvariantError):
            Graph(EdgeKind.DIRECTED).append_graph(Graph(EdgeKind.UNDIRECTED))


# ── networkx interop ─────────────────────────────────────────────────

class TestNetworkx:
    def test_from_networkx_keeps_isolated_nodes(self):
        G = nx.empty_graph(4)
        G.add_edge(0, 2)
        g = Graph.from_networkx(G, EdgeKind.UNDIRECTED)
        assert g.n_nodes() == 4
        assert list(g.iter_edges()) == [(0, 2)]

    def test_from_networkx_rejects_labels(self):
        G = nx.Graph()
        G.add_edge("a", "b")
        with pytest.raises(InvariantError):
            Graph.from_networkx(G)

    def test_to_networkx_keeps_duplicates(self):
        G = _graph([(0, 1), (0, 1)]).to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert G.number_of_edges() == 2

    def test_to_networkx_undirected(self):
        G = _graph([(0, 1)], EdgeKind.UNDIRECTED).to_networkx()
        assert isinstance(G, nx.MultiGraph)
        assert not G.is_directed()
