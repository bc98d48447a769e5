"""Balanced binary tree generator."""

from __future__ import annotations

from g2io.core.graph import Graph
from g2io.core.inner_outer import GraphBuilder
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.generators.base import GeneratorFactory


class TreeGeneratorFactory(GeneratorFactory):
    """
    Generates well-balanced binary trees.

    Node ``i`` has children ``2i + 1`` and ``2i + 2`` when they exist, and
    edges point from parent to child.  Resolved from ``tree/n``.
    """

    name = "tree"
    description = (
        "A generator producing a tree.",
        "The first parameter gives the number of nodes.",
        "The tree is well balanced.",
    )
    expected_parameter_types = (ParameterType.POSITIVE_INTEGER,)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        n = parameter_values[0].as_int()
        edge_kind = self.edge_kind

        def build(_rng) -> Graph:
            g = Graph.with_capacity(n, max(n - 1, 0), edge_kind)
            if n == 1:
                g.new_node()
            for i in range(n):
                for child in (2 * i + 1, 2 * i + 2):
                    if child < n:
                        g.new_edge(i, child)
            return g

        return build
