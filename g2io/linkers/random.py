"""Linkers drawing inter-graph edges at random."""

from __future__ import annotations

import numpy as np

from g2io.core.graph import FirstToSecond, InnerGraph, InterGraphEdge, SecondToFirst
from g2io.core.inner_outer import Linker
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.linkers.base import LinkerFactory


class RandomLinker(LinkerFactory):
    """
    Links the nodes of the first graph to those of the second at random.

    Every pair ``(i, j)`` is linked independently with probability *p*,
    given as the only parameter (``random/p``).
    """

    name = "random"
    description = (
        "Links the nodes from the first graph to the ones of the second graph "
        "in a random fashion.",
        "The probability each arc is set is given by the first parameter.",
    )
    expected_parameter_types = (ParameterType.PROBABILITY,)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return _random_linker(parameter_values[0].as_float(), bidirectional=False)


class BidirectionalRandomLinker(LinkerFactory):
    """
    Same as :class:`RandomLinker`, with an independent draw for each reverse
    edge (``random_bi/p``).
    """

    name = "random_bi"
    description = (
        "Links the nodes from the first graph to the ones of the second graph "
        "in a random fashion, and vice-versa.",
        "The probability each arc is set is given by the first parameter.",
    )
    expected_parameter_types = (ParameterType.PROBABILITY,)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        return _random_linker(parameter_values[0].as_float(), bidirectional=True)


def _random_linker(p: float, bidirectional: bool) -> Linker:
    n_directions = 2 if bidirectional else 1

    def link(first: InnerGraph, second: InnerGraph, rng: np.random.Generator) -> list[InterGraphEdge]:
        shape = (first.graph.n_nodes(), second.graph.n_nodes(), n_directions)
        selected = rng.random(shape) < p
        edges: list[InterGraphEdge] = []
        # row-major order: for each (i, j), the forward edge then the reverse one
        for i, j, direction in np.argwhere(selected):
            if direction == 0:
                edges.append(FirstToSecond(int(i), int(j)))
            else:
                edges.append(SecondToFirst(int(j), int(i)))
        return edges

    return link
