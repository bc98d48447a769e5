"""Tests for inner/outer graph composition."""

import threading

import numpy as np
import pytest

from g2io.core.graph import EdgeKind, FirstToSecond, Graph, SecondToFirst
from g2io.core.inner_outer import (
    GenerationStep,
    InnerOuterGenerator,
    draw_seeds,
    prefix_offsets,
)
from g2io.generators import generator_from_str
from g2io.linkers import linker_from_str


# ── Helpers ──────────────────────────────────────────────────────────

def _circle(rng):
    g = Graph()
    for i in range(3):
        g.new_edge(i, (i + 1) % 3)
    return g


def _chain(n):
    return generator_from_str(f"chain/{n}")


def _first_to_second(first, second, rng):
    return [FirstToSecond(0, 0)]


def _second_to_first(first, second, rng):
    return [SecondToFirst(0, 0)]


def _generate(outer, inner, linker, seed=0, max_workers=None):
    generator = InnerOuterGenerator(max_workers=max_workers)
    return generator.new_inner_outer(outer, inner, linker, np.random.default_rng(seed))


# ── Seed helpers ─────────────────────────────────────────────────────

class TestSeedHelpers:
    def test_draw_seeds_is_sequential(self):
        rng = np.random.default_rng(3)
        both = draw_seeds(rng, 4)
        rng = np.random.default_rng(3)
        assert draw_seeds(rng, 2) + draw_seeds(rng, 2) == both

    def test_draw_zero_seeds(self):
        assert draw_seeds(np.random.default_rng(0), 0) == []

    def test_prefix_offsets(self):
        graphs = [_circle(None), Graph(), _circle(None)]
        assert prefix_offsets(graphs) == [0, 3, 3]


# ── Composition ──────────────────────────────────────────────────────

class TestComposition:
    def test_first_to_second(self):
        g = _generate(_chain(2), _circle, _first_to_second)
        assert g.n_nodes() == 6
        assert sorted(g.iter_edges()) == [(0, 1), (0, 3), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]

    def test_second_to_first(self):
        g = _generate(_chain(2), _circle, _second_to_first)
        assert sorted(g.iter_edges()) == [(0, 1), (1, 2), (2, 0), (3, 0), (3, 4), (4, 5), (5, 3)]

    def test_inner_edges_come_first(self):
        g = _generate(_chain(2), _chain(3), linker_from_str("first"))
        assert list(g.iter_edges()) == [(0, 1), (1, 2), (3, 4), (4, 5), (0, 3)]

    def test_linking_edges_follow_outer_edge_order(self):
        g = _generate(_chain(3), _chain(2), linker_from_str("first"))
        assert list(g.iter_edges())[-2:] == [(0, 2), (2, 4)]

    def test_empty_outer_graph(self):
        g = _generate(_chain(0), _circle, _first_to_second)
        assert g.n_nodes() == 0
        assert g.n_edges() == 0

    def test_outer_without_edges(self):
        g = _generate(_chain(1), _circle, _first_to_second)
        assert g.n_nodes() == 3
        assert g.n_edges() == 3

    def test_empty_inner_graphs(self):
        g = _generate(_chain(3), _chain(0), linker_from_str("min_incoming"))
        assert g.n_nodes() == 0
        assert g.n_edges() == 0

    def test_inner_indices_match_outer_nodes(self):
        seen = []
        lock = threading.Lock()

        def record(first, second, rng):
            with lock:
                seen.append((first.index, second.index))
            return []

        _generate(_chain(4), _circle, record)
        assert sorted(seen) == [(0, 1), (1, 2), (2, 3)]

    def test_edge_kind_follows_outer_graph(self):
        outer = generator_from_str("chain/2", EdgeKind.UNDIRECTED)
        inner = generator_from_str("chain/2", EdgeKind.UNDIRECTED)
        g = _generate(outer, inner, linker_from_str("first", EdgeKind.UNDIRECTED))
        assert g.edge_kind is EdgeKind.UNDIRECTED


# ── Listeners ────────────────────────────────────────────────────────

class TestListeners:
    def test_steps_in_order(self):
        steps = []
        generator = InnerOuterGenerator()
        generator.add_generation_step_listener(steps.append)
        generator.new_inner_outer(_chain(2), _circle, _first_to_second, np.random.default_rng(0))
        assert steps == [
            GenerationStep.OUTER_GENERATION,
            GenerationStep.INNER_GENERATION,
            GenerationStep.LINKING,
        ]

    def test_every_listener_is_notified(self):
        a, b = [], []
        generator = InnerOuterGenerator()
        generator.add_generation_step_listener(a.append)
        generator.add_generation_step_listener(b.append)
        generator.new_inner_outer(_chain(0), _circle, _first_to_second, np.random.default_rng(0))
        assert a == b
        assert len(a) == 3


# ── Reproducibility ──────────────────────────────────────────────────

class TestDeterminism:
    @pytest.fixture()
    def plugins(self):
        return (
            generator_from_str("er/12,0.3"),
            generator_from_str("ws/10,4,0.4"),
            linker_from_str("random/0.2"),
        )

    def test_same_seed_same_graph(self, plugins):
        g1 = _generate(*plugins, seed=99)
        g2 = _generate(*plugins, seed=99)
        assert list(g1.iter_edges()) == list(g2.iter_edges())

    @pytest.mark.parametrize("max_workers", [1, 2, 8])
    def test_independent_of_worker_count(self, plugins, max_workers):
        reference = _generate(*plugins, seed=5, max_workers=1)
        g = _generate(*plugins, seed=5, max_workers=max_workers)
        assert g.n_nodes() == reference.n_nodes()
        assert list(g.iter_edges()) == list(reference.iter_edges())

    def test_different_seeds_differ(self, plugins):
        g1 = _generate(*plugins, seed=1)
        g2 = _generate(*plugins, seed=2)
        assert list(g1.iter_edges()) != list(g2.iter_edges())

    def test_generator_is_reusable(self, plugins):
        generator = InnerOuterGenerator(max_workers=4)
        g1 = generator.new_inner_outer(*plugins, np.random.default_rng(8))
        g2 = generator.new_inner_outer(*plugins, np.random.default_rng(8))
        assert list(g1.iter_edges()) == list(g2.iter_edges())


# ── Linker output outside the inner graphs ──────────────────────────

def test_out_of_range_link_grows_graph():
    def far(first, second, rng):
        return [FirstToSecond(0, 10)]

    g = _generate(_chain(2), _circle, far)
    assert (0, 13) in list(g.iter_edges())
    assert g.n_nodes() == 14
