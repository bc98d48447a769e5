"""Watts-Strogatz small-world graph generator."""

from __future__ import annotations

import numpy as np

from g2io.core.errors import ParameterConstraintError
from g2io.core.graph import EdgeKind, Graph
from g2io.core.inner_outer import GraphBuilder
from g2io.core.parameters import ParameterType, ParameterValue
from g2io.generators.base import GeneratorFactory


class WattsStrogatzGeneratorFactory(GeneratorFactory):
    """
    Generates graphs following the Watts-Strogatz model.

    A ring lattice links each node ``i`` to its ``k/2`` successors; then each
    of these edges is rewired with probability *p* to a node that ``i`` is
    not linked to yet.

    Parameters
    ----------
    n : int
        Number of nodes; must be higher than ``k``.
    k : int
        Even degree of the nodes in the initial lattice.
    p : float
        Rewiring probability.
    """

    name = "ws"
    description = (
        "A generator following the Watts-Strogatz model.",
        "First parameter gives the number of nodes, the second one gives the "
        "initial node degree and the third is the rewire probability.",
    )
    expected_parameter_types = (
        ParameterType.POSITIVE_INTEGER,
        ParameterType.POSITIVE_INTEGER,
        ParameterType.PROBABILITY,
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        n = parameter_values[0].as_int()
        k = parameter_values[1].as_int()
        p = parameter_values[2].as_float()
        raw = f"{n},{k},{p}"
        if k % 2 == 1:
            raise ParameterConstraintError('second parameter ("k") must be even', raw)
        if n <= k:
            raise ParameterConstraintError(
                'first parameter ("n") must be higher than the second one ("k")', raw,
            )
        edge_kind = self.edge_kind

        def build(rng) -> Graph:
            return build_watts_strogatz(n, k, p, rng, edge_kind)

        return build


def build_watts_strogatz(
    n: int,
    k: int,
    p: float,
    rng: np.random.Generator,
    edge_kind: EdgeKind = EdgeKind.DIRECTED,
) -> Graph:
    """Build one Watts-Strogatz graph; requires ``k`` even and ``n > k``."""
    half_k = k // 2
    g = Graph.with_capacity(n, n * half_k, edge_kind)
    for i in range(n):
        for j in range(half_k):
            g.new_edge(i, (i + j + 1) % n)

    n_candidates = n - 1 - half_k
    for i in range(n):
        # nodes i is not linked to: everything but i and its k/2 successors
        last_target = (i + 1 + half_k) % n
        if i < last_target:
            not_targets = list(range(0, i)) + list(range(i + 1 + half_k, n))
        else:
            not_targets = list(range(last_target, i))
        for j in range(half_k):
            if rng.random() < p:
                index = int(rng.integers(0, n_candidates))
                new_target = not_targets[index]
                old_target = (i + 1 + j) % n
                not_targets[index] = old_target
                g.remove_edge(i, old_target)
                g.new_edge(i, new_target)
    return g
