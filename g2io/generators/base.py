"""Abstract base class for all graph generator factories."""

from __future__ import annotations

from abc import abstractmethod

from g2io.core.graph import EdgeKind
from g2io.core.inner_outer import GraphBuilder
from g2io.core.named_param import NamedParam
from g2io.core.parameters import ParameterValue


class GeneratorFactory(NamedParam[GraphBuilder]):
    """
    Base class for graph generator factories.

    A factory turns parameter values into a *builder*: a callable that takes
    a ``numpy.random.Generator`` and returns a fresh
    :class:`~g2io.core.graph.Graph`.  Builders are used for both inner and
    outer graphs and may be called concurrently, each call with its own
    generator, so they must not keep mutable state between calls.

    The factory is bound to an edge kind; every graph its builders produce
    has that kind.
    """

    def __init__(self, edge_kind: EdgeKind = EdgeKind.DIRECTED) -> None:
        self.edge_kind = EdgeKind(edge_kind)

    @abstractmethod
    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphBuilder:
        """
        Build a graph builder.

        Parameters
        ----------
        parameter_values : list[ParameterValue]
            Values matching ``expected_parameter_types``.

        Returns
        -------
        callable
            ``builder(rng) -> Graph``.
        """
