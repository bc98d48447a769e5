"""Abstract base class for display engines."""

from __future__ import annotations

from abc import abstractmethod
from typing import Callable, TextIO

from g2io.core.graph import Graph
from g2io.core.named_param import NamedParam
from g2io.core.parameters import ParameterValue

GraphDisplay = Callable[[TextIO, Graph], None]


class DisplayEngine(NamedParam[GraphDisplay]):
    """
    Base class for display engines.

    An engine builds a *display*: a callable writing a graph to a text
    stream.  Displays only read the graph through ``n_nodes()`` and
    ``iter_edges()``; indices are 0-based there and any shift to 1-based
    output belongs to the display itself.
    """

    @abstractmethod
    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        """Build a display from values matching ``expected_parameter_types``."""
