"""Chain (path) graph generator."""

from __future__ import annotations

from g2io.core.graph import Graph
from g2io.core.inner_outer import GraphBuilder
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.generators.base import GeneratorFactory


class ChainGeneratorFactory(GeneratorFactory):
    """
    Generates chains ``0 - 1 - ... - (n-1)``.

    Resolved from ``chain/n``.  ``n`` may be 0 (empty graph).  The random
    generator is not used.
    """

    name = "chain"
    description = (
        "A generator producing a chain of nodes.",
        "The first parameter gives the length of the chain.",
    )
    expected_parameter_types = (ParameterType.POSITIVE_INTEGER,)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        n = parameter_values[0].as_int()
        edge_kind = self.edge_kind

        def build(_rng) -> Graph:
            g = Graph.with_capacity(n, max(n - 1, 0), edge_kind)
            if n == 1:
                g.new_node()
            for i in range(n - 1):
                g.new_edge(i, i + 1)
            return g

        return build
