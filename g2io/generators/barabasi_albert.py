"""Barabási-Albert preferential attachment graph generator."""

from __future__ import annotations

import networkx as nx

from g2io.core.errors import ParameterConstraintError
from g2io.core.graph import Graph
from g2io.core.inner_outer import GraphBuilder
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.generators.base import GeneratorFactory


class BarabasiAlbertGeneratorFactory(GeneratorFactory):
    """
    Generates scale-free graphs using the Barabási-Albert model.

    New nodes attach preferentially to high-degree existing nodes, producing
    power-law degree distributions common in social and internet networks.
    The process starts from a star on ``m + 1`` nodes.

    Parameters
    ----------
    n : int
        Number of nodes.
    m : int
        Number of edges to attach from a new node to existing nodes;
        ``0 < m < n``.
    """

    name = "ba"
    description = (
        "A generator following the Barabási-Albert model, initialized by a star graph.",
        "First parameter gives the number of nodes, while the second one gives "
        "the number of edges to attach from a new node to existing ones.",
    )
    expected_parameter_types = (
        ParameterType.POSITIVE_INTEGER,
        ParameterType.POSITIVE_INTEGER,
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        n = parameter_values[0].as_int()
        m = parameter_values[1].as_int()
        if m == 0 or m >= n:
            raise ParameterConstraintError(
                'second parameter ("m") must be higher than 0 '
                'and lower than the first one ("n")',
                f"{n},{m}",
            )
        edge_kind = self.edge_kind

        def build(rng) -> Graph:
            G = nx.barabasi_albert_graph(n, m, seed=rng)
            return Graph.from_networkx(G, edge_kind)

        return build
