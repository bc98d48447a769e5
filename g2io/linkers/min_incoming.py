"""Linkers targeting the nodes with the fewest incoming edges."""

from __future__ import annotations

import threading

from g2io.core.graph import FirstToSecond, InnerGraph, InterGraphEdge, SecondToFirst
from g2io.core.inner_outer import Linker
from g2io.core.parameters import ParameterValue
from g2io.linkers.base import LinkerFactory


class MinIncomingLinker(LinkerFactory):
    """
    Links every min-in-degree node of the first graph to every
    min-in-degree node of the second (``min_incoming``).
    """

    name = "min_incoming"
    description = (
        "Links the nodes of the first graph with the lowest count of incoming "
        "edges to the nodes of the second graph with the same property.",
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return MinIncomingLink(bidirectional=False)


class BidirectionalMinIncomingLinker(LinkerFactory):
    """Same as :class:`MinIncomingLinker`, plus reverse edges (``min_incoming_bi``)."""

    name = "min_incoming_bi"
    description = (
        "Links the nodes of the first graph with the lowest count of incoming "
        "edges to the nodes of the second graph with the same property, and vice-versa.",
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return MinIncomingLink(bidirectional=True)


class MinIncomingLink:
    """
    The linker built by the ``min_incoming`` factories.

    The nodes of minimal in-degree are computed once per inner graph and
    memoised by inner graph index.  Concurrent calls may both compute the
    same entry; the second write stores an equal value.
    """

    def __init__(self, bidirectional: bool) -> None:
        self.bidirectional = bidirectional
        self._cache: dict[int, list[int]] = {}
        self._lock = threading.Lock()

    def __call__(self, first: InnerGraph, second: InnerGraph, rng) -> list[InterGraphEdge]:
        first_nodes = self.min_incoming_nodes(first)
        second_nodes = self.min_incoming_nodes(second)
        links: list[InterGraphEdge] = []
        for n1 in first_nodes:
            for n2 in second_nodes:
                links.append(FirstToSecond(n1, n2))
                if self.bidirectional:
                    links.append(SecondToFirst(n2, n1))
        return links

    def min_incoming_nodes(self, inner: InnerGraph) -> list[int]:
        """Return the nodes of ``inner`` with the fewest incoming edges."""
        with self._lock:
            cached = self._cache.get(inner.index)
        if cached is not None:
            return cached

        n_incoming = [0] * inner.graph.n_nodes()
        for _, target in inner.graph.iter_edges():
            n_incoming[target] += 1
        lowest = min(n_incoming, default=0)
        nodes = [i for i, n in enumerate(n_incoming) if n == lowest]

        with self._lock:
            self._cache[inner.index] = nodes
        return nodes
