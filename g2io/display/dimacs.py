"""DIMACS edge-format output."""

from __future__ import annotations

from typing import TextIO

from g2io.core.graph import Graph
from g2io.core.parameters import ParameterValue
from g2io.display.base import DisplayEngine, GraphDisplay


class DimacsDisplayEngine(DisplayEngine):
    name = "dimacs"
    description = (
        "Output a graph using the DIMACS edge format (p edge n m / e u v).",
        "Node indices are shifted to start at 1.",
    )

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        return write_dimacs


def write_dimacs(stream: TextIO, graph: Graph) -> None:
    """
    Write ``graph`` in the DIMACS edge format read by most graph benchmarks.

    Format::

        p edge <num_nodes> <num_edges>
        e <u> <v>
        ...

    Node indices are 1-based.
    """
    stream.write(f"p edge {graph.n_nodes()} {graph.n_edges()}\n")
    for source, target in graph.iter_edges():
        stream.write(f"e {source + 1} {target + 1}\n")
