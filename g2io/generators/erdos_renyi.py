"""Erdős-Rényi G(n, p) random graph generator."""

from __future__ import annotations

import networkx as nx

from g2io.core.graph import EdgeKind, Graph
from g2io.core.inner_outer import GraphBuilder
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.generators.base import GeneratorFactory


class ErdosRenyiGeneratorFactory(GeneratorFactory):
    """
    Generates random graphs using the Erdős-Rényi G(n, p) model.

    Each (ordered, in directed mode) pair of distinct nodes is connected
    independently with probability *p*.  Resolved from ``er/n,p``.
    """

    name = "er"
    description = (
        "A generator following the Erdős–Rényi model.",
        "First parameter gives the number of nodes of the graph, while the "
        "second one gives the probability each edge appears in the graph.",
    )
    expected_parameter_types = (
        ParameterType.POSITIVE_INTEGER,
        ParameterType.PROBABILITY,
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        n = parameter_values[0].as_int()
        p = parameter_values[1].as_float()
        edge_kind = self.edge_kind
        directed = edge_kind is EdgeKind.DIRECTED

        def build(rng) -> Graph:
            G = nx.gnp_random_graph(n, p, seed=rng, directed=directed)
            return Graph.from_networkx(G, edge_kind)

        return build
