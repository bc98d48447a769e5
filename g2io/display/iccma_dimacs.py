"""DIMACS-like argumentation framework output used at ICCMA'23."""

from __future__ import annotations

from typing import TextIO

from g2io.core.graph import Graph
from g2io.core.parameters import ParameterValue
from g2io.display.base import DisplayEngine, GraphDisplay


class ICCMADimacsDisplayEngine(DisplayEngine):
    name = "iccma_dimacs"
    description = ("Output a graph using the DIMACS-like format used at ICCMA'23.",)

    def try_with_params(self, parameter_values: list[ParameterValue]) -> GraphDisplay:
        return write_iccma_dimacs


def write_iccma_dimacs(stream: TextIO, graph: Graph) -> None:
    """
    Write ``graph`` as ``p af <n>`` followed by one ``<u> <v>`` line per
    attack, 1-based.  Undirected edges are written in both directions.
    """
    stream.write(f"p af {graph.n_nodes()}\n")
    for source, target in graph.iter_edges():
        stream.write(f"{source + 1} {target + 1}\n")
        if not graph.is_directed:
            stream.write(f"{target + 1} {source + 1}\n")
