"""Linkers joining the first node of each inner graph."""

from __future__ import annotations

from g2io.core.graph import FirstToSecond, InterGraphEdge, SecondToFirst
from g2io.core.inner_outer import Linker
from g2io.core.parameters import ParameterValue
from g2io.linkers.base import LinkerFactory


class FirstToFirstLinker(LinkerFactory):
    """Links node 0 of the first graph to node 0 of the second (``first``)."""

    name = "first"
    description = (
        "Links the lowest index node of the first graph to the lowest index "
        "node of the second graph.",
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return _first_to_first(bidirectional=False)


class BidirectionalFirstToFirstLinker(LinkerFactory):
    """Same as :class:`FirstToFirstLinker`, plus the reverse edge (``first_bi``)."""

    name = "first_bi"
    description = (
        "Links the lowest index node of the first graph to the lowest index "
        "node of the second graph, and vice-versa.",
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return _first_to_first(bidirectional=True)


def _first_to_first(bidirectional: bool) -> Linker:
    def link(first, second, rng) -> list[InterGraphEdge]:
        if bidirectional:
            return [FirstToSecond(0, 0), SecondToFirst(0, 0)]
        return [FirstToSecond(0, 0)]

    return link
