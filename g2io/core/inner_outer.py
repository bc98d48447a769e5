"""
Inner/outer graph composition.

An outer graph fixes the macro-topology.  Every outer node is replaced by an
independently generated inner graph, and every outer edge is expanded into
the edges a linker chooses between the two corresponding inner graphs.

Reproducibility rests on one rule: the caller's random generator is drained
into one private seed per task *before* any parallel work starts, so the
result depends on the seed only, never on thread scheduling or on the
number of workers.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional

import numpy as np

from g2io.core.graph import FirstToSecond, Graph, InnerGraph, InterGraphEdge

logger = logging.getLogger(__name__)

GraphBuilder = Callable[[np.random.Generator], Graph]
Linker = Callable[[InnerGraph, InnerGraph, np.random.Generator], list[InterGraphEdge]]

_SEED_MAX = np.iinfo(np.uint64).max


class GenerationStep(str, Enum):
    """Key steps of the generation process, in the order they happen."""

    OUTER_GENERATION = "outer_generation"
    INNER_GENERATION = "inner_generation"
    LINKING = "linking"


GenerationStepListener = Callable[[GenerationStep], None]


def draw_seeds(rng: np.random.Generator, n: int) -> list[int]:
    """Draw ``n`` 64-bit seeds from ``rng``, sequentially."""
    if n == 0:
        return []
    return [int(s) for s in rng.integers(_SEED_MAX, size=n, dtype=np.uint64, endpoint=True)]


def rng_from_seed(bit_generator_type: type, seed: int) -> np.random.Generator:
    """Build a private generator from a seed and a bit generator class."""
    return np.random.Generator(bit_generator_type(seed))


def prefix_offsets(graphs: list[Graph]) -> list[int]:
    """Return the index of the first node of each graph in their union."""
    offsets = []
    total = 0
    for g in graphs:
        offsets.append(total)
        total += g.n_nodes()
    return offsets


class InnerOuterGenerator:
    """
    Builds inner/outer graphs from two graph builders and a linker.

    The instance holds no generation state and may be reused; it only keeps
    the step listeners and the worker count.

    Parameters
    ----------
    max_workers : int | None
        Size of the thread pool used for inner generation and linking.
        ``None`` lets :class:`~concurrent.futures.ThreadPoolExecutor` decide.
        The output does not depend on this value.

    Usage
    -----
    >>> generator = InnerOuterGenerator()
    >>> graph = generator.new_inner_outer(outer, inner, linker, rng)
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self.max_workers = max_workers
        self._listeners: list[GenerationStepListener] = []

    def add_generation_step_listener(self, listener: GenerationStepListener) -> None:
        """Register a callback notified when each generation step begins."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def new_inner_outer(
        self,
        outer_builder: GraphBuilder,
        inner_builder: GraphBuilder,
        linker: Linker,
        rng: np.random.Generator,
    ) -> Graph:
        """
        Build an inner/outer graph.

        Parameters
        ----------
        outer_builder : callable
            Called once, with ``rng``, to build the outer graph.
        inner_builder : callable
            Called once per outer node with a private generator.  Calls may
            run concurrently.
        linker : callable
            Called once per outer edge ``(a, b)`` with the inner graphs of
            ``a`` and ``b`` and a private generator.  Calls may run
            concurrently.
        rng : numpy.random.Generator
            The caller's seeded generator.  Only this thread touches it.

        Returns
        -------
        Graph
            The disjoint union of the inner graphs, in outer node order, plus
            the linking edges translated into global indices.
        """
        outer_graph = self._generate_outer_graph(outer_builder, rng)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            inner_graphs = self._generate_inner_graphs(
                outer_graph, inner_builder, rng, executor,
            )
            global_graph, offsets = self._compose(outer_graph, inner_graphs)
            self._notify(GenerationStep.LINKING)
            self._add_linking_edges(
                outer_graph, inner_graphs, offsets, global_graph, linker, rng, executor,
            )
        logger.debug(
            "Inner/outer graph built: %d nodes, %d edges",
            global_graph.n_nodes(), global_graph.n_edges(),
        )
        return global_graph

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _notify(self, step: GenerationStep) -> None:
        for listener in self._listeners:
            listener(step)

    def _generate_outer_graph(
        self, outer_builder: GraphBuilder, rng: np.random.Generator,
    ) -> Graph:
        self._notify(GenerationStep.OUTER_GENERATION)
        outer_graph = outer_builder(rng)
        logger.debug(
            "Outer graph: %d nodes, %d edges",
            outer_graph.n_nodes(), outer_graph.n_edges(),
        )
        return outer_graph

    def _generate_inner_graphs(
        self,
        outer_graph: Graph,
        inner_builder: GraphBuilder,
        rng: np.random.Generator,
        executor: Executor,
    ) -> list[Graph]:
        self._notify(GenerationStep.INNER_GENERATION)
        seeds = draw_seeds(rng, outer_graph.n_nodes())
        bit_generator_type = type(rng.bit_generator)

        def build(seed: int) -> Graph:
            return inner_builder(rng_from_seed(bit_generator_type, seed))

        return list(executor.map(build, seeds))

    @staticmethod
    def _compose(outer_graph: Graph, inner_graphs: list[Graph]) -> tuple[Graph, list[int]]:
        global_graph = Graph(outer_graph.edge_kind)
        for g in inner_graphs:
            global_graph.append_graph(g)
        return global_graph, prefix_offsets(inner_graphs)

    @staticmethod
    def _add_linking_edges(
        outer_graph: Graph,
        inner_graphs: list[Graph],
        offsets: list[int],
        global_graph: Graph,
        linker: Linker,
        rng: np.random.Generator,
        executor: Executor,
    ) -> None:
        outer_edges = list(outer_graph.iter_edges())
        seeds = draw_seeds(rng, len(outer_edges))
        bit_generator_type = type(rng.bit_generator)

        def link(task: tuple[tuple[int, int], int]) -> list[tuple[int, int]]:
            (a, b), seed = task
            inter_edges = linker(
                InnerGraph(a, inner_graphs[a]),
                InnerGraph(b, inner_graphs[b]),
                rng_from_seed(bit_generator_type, seed),
            )
            global_edges = []
            for e in inter_edges:
                if isinstance(e, FirstToSecond):
                    global_edges.append((offsets[a] + e.first, offsets[b] + e.second))
                else:
                    global_edges.append((offsets[b] + e.second, offsets[a] + e.first))
            return global_edges

        for edges in executor.map(link, zip(outer_edges, seeds)):
            for source, target in edges:
                global_graph.new_edge(source, target)
