"""Tests for the display engines."""

import io

import pytest

from g2io.core.graph import EdgeKind, Graph
from g2io.display import display_engine_from_str, list_display_engines


# ── Helpers ──────────────────────────────────────────────────────────

def _render(engine, graph):
    stream = io.StringIO()
    display_engine_from_str(engine, graph.edge_kind)(stream, graph)
    return stream.getvalue()


@pytest.fixture()
def directed():
    g = Graph(EdgeKind.DIRECTED)
    g.new_edge(0, 1)
    g.new_edge(1, 2)
    g.new_edge(1, 2)
    return g


@pytest.fixture()
def undirected():
    g = Graph(EdgeKind.UNDIRECTED)
    g.new_edge(0, 1)
    g.new_node()
    return g


# ── Registry ─────────────────────────────────────────────────────────

def test_registry():
    directed_names = [e["name"] for e in list_display_engines(EdgeKind.DIRECTED)]
    undirected_names = [e["name"] for e in list_display_engines(EdgeKind.UNDIRECTED)]
    assert directed_names == ["apx", "dimacs", "dot", "graphml", "iccma_dimacs"]
    assert undirected_names == ["dimacs", "dot", "graphml", "iccma_dimacs"]


# ── Formats ──────────────────────────────────────────────────────────

class TestDot:
    def test_directed(self, directed):
        assert _render("dot", directed) == (
            "digraph {\n"
            '    0 [ label = "0" ]\n'
            '    1 [ label = "1" ]\n'
            '    2 [ label = "2" ]\n'
            "    0 -> 1 [ ]\n"
            "    1 -> 2 [ ]\n"
            "    1 -> 2 [ ]\n"
            "}\n"
        )

    def test_undirected(self, undirected):
        out = _render("dot", undirected)
        assert out.startswith("graph {\n")
        assert "    0 -- 1 [ ]\n" in out
        assert '    2 [ label = "2" ]\n' in out


class TestDimacs:
    def test_directed(self, directed):
        assert _render("dimacs", directed) == "p edge 3 3\ne 1 2\ne 2 3\ne 2 3\n"

    def test_isolated_nodes_are_counted(self, undirected):
        assert _render("dimacs", undirected) == "p edge 3 1\ne 1 2\n"


class TestICCMADimacs:
    def test_directed(self, directed):
        assert _render("iccma_dimacs", directed) == "p af 3\n1 2\n2 3\n2 3\n"

    def test_undirected_edges_written_both_ways(self, undirected):
        assert _render("iccma_dimacs", undirected) == "p af 3\n1 2\n2 1\n"


class TestAspartix:
    def test_directed(self, directed):
        assert _render("apx", directed) == (
            "arg(a0).\narg(a1).\narg(a2).\n"
            "att(a0,a1).\natt(a1,a2).\natt(a1,a2).\n"
        )


class TestGraphML:
    def test_directed(self, directed):
        out = _render("graphml", directed)
        assert out.lstrip().startswith("<graphml")
        assert 'edgedefault="directed"' in out
        assert out.count("<node ") == 3
        assert out.count("<edge ") == 3

    def test_undirected(self, undirected):
        out = _render("graphml", undirected)
        assert 'edgedefault="undirected"' in out
        assert out.count("<node ") == 3
        assert out.count("<edge ") == 1

    def test_empty_graph(self):
        out = _render("graphml", Graph())
        assert "<node " not in out
        assert "</graphml>" in out
