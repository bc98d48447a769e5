"""Graphviz DOT output."""

from __future__ import annotations

from typing import TextIO

from g2io.core.graph import Graph
from g2io.core.parameters import ParameterValue
from g2io.display.base import DisplayEngine, GraphDisplay


class DotDisplayEngine(DisplayEngine):
    name = "dot"
    description = ("Output a graph using the Graphviz DOT format.",)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        return write_dot


def write_dot(stream: TextIO, graph: Graph) -> None:
    """
    Write ``graph`` as DOT, labelling each node with its index.

    A directed graph with the single edge ``(0, 1)`` gives::

        digraph {
            0 [ label = "0" ]
            1 [ label = "1" ]
            0 -> 1 [ ]
        }
    """
    keyword, arrow = ("digraph", "->") if graph.is_directed else ("graph", "--")
    stream.write(f"{keyword} {{\n")
    for i in range(graph.n_nodes()):
        stream.write(f'    {i} [ label = "{i}" ]\n')
    for source, target in graph.iter_edges():
        stream.write(f"    {source} {arrow} {target} [ ]\n")
    stream.write("}\n")
