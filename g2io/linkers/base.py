"""Abstract base class for linker factories."""

from __future__ import annotations

from abc import abstractmethod

from g2io.core.inner_outer import Linker
from g2io.core.named_param import NamedParam
from g2io.core.parameters import ParameterValue


class LinkerFactory(NamedParam[Linker]):
    """
    Base class for linker factories.

    A linker decides which edges join the two inner graphs standing for the
    endpoints of an outer edge.  It is called as
    ``linker(first, second, rng)`` with two
    :class:`~g2io.core.graph.InnerGraph` and a private generator, and
    returns a list of :data:`~g2io.core.graph.InterGraphEdge` expressed in
    the local indices of each inner graph.

    Linkers are called concurrently for different outer edges, possibly
    sharing an inner graph.  Any state a linker keeps across calls (e.g. a
    cache keyed by ``InnerGraph.index``) must be guarded by a lock.
    """

    @abstractmethod
    def try_with_params(self, parameter_values: list[ParameterValue]) -> Linker:
        """Build a linker from values matching ``expected_parameter_types``."""
