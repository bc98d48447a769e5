"""GraphML output, delegated to networkx."""

from __future__ import annotations

from typing import TextIO

import networkx as nx

from g2io.core.graph import Graph
from g2io.core.parameters import ParameterValue
from g2io.display.base import DisplayEngine, GraphDisplay


class GraphMLDisplayEngine(DisplayEngine):
    name = "graphml"
    description = ("Output a graph using the GraphML format.",)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        return write_graphml


def write_graphml(stream: TextIO, graph: Graph) -> None:
    """Write ``graph`` as pretty-printed GraphML, duplicates included."""
    for line in nx.generate_graphml(graph.to_networkx(), prettyprint=True):
        stream.write(line)
        stream.write("\n")
