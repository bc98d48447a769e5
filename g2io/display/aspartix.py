"""ASPARTIX (apx) argumentation framework output."""

from __future__ import annotations

from typing import TextIO

from g2io.core.graph import Graph
from g2io.core.parameters import ParameterValue
from g2io.display.base import DisplayEngine, GraphDisplay


class AspartixDisplayEngine(DisplayEngine):
    """Only registered for directed graphs: attacks have a direction."""

    name = "apx"
    description = ("Output a graph using the Aspartix format.",)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        return write_aspartix


def write_aspartix(stream: TextIO, graph: Graph) -> None:
    for i in range(graph.n_nodes()):
        stream.write(f"arg(a{i}).\n")
    for source, target in graph.iter_edges():
        stream.write(f"att(a{source},a{target}).\n")
