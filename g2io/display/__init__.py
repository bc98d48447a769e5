"""Display engines, writing graphs to text streams."""

from __future__ import annotations

from typing import Any, Iterator

from g2io.core.graph import EdgeKind
from g2io.core.named_param import describe_named_params, named_from_str
from g2io.display.aspartix import AspartixDisplayEngine
from g2io.display.base import DisplayEngine, GraphDisplay
from g2io.display.dimacs import DimacsDisplayEngine
from g2io.display.dot import DotDisplayEngine
from g2io.display.graphml import GraphMLDisplayEngine
from g2io.display.iccma_dimacs import ICCMADimacsDisplayEngine

# Registry: edge kind → engines
DISPLAY_ENGINE_REGISTRY: dict[EdgeKind, tuple[DisplayEngine, ...]] = {
    EdgeKind.DIRECTED: (
        AspartixDisplayEngine(),
        DimacsDisplayEngine(),
        DotDisplayEngine(),
        GraphMLDisplayEngine(),
        ICCMADimacsDisplayEngine(),
    ),
    EdgeKind.UNDIRECTED: (
        DimacsDisplayEngine(),
        DotDisplayEngine(),
        GraphMLDisplayEngine(),
        ICCMADimacsDisplayEngine(),
    ),
}


def iter_display_engines(edge_kind: EdgeKind = EdgeKind.DIRECTED) -> Iterator[DisplayEngine]:
    return iter(DISPLAY_ENGINE_REGISTRY[EdgeKind(edge_kind)])


def display_engine_from_str(s: str, edge_kind: EdgeKind = EdgeKind.DIRECTED) -> GraphDisplay:
    """Build a display from a string such as ``"dot"``."""
    return named_from_str(iter_display_engines(edge_kind), s, kind="display engine")


def list_display_engines(edge_kind: EdgeKind = EdgeKind.DIRECTED) -> list[dict[str, Any]]:
    """Return name, description and parameter types of every display engine."""
    return describe_named_params(iter_display_engines(edge_kind))


__all__ = [
    "DisplayEngine",
    "DISPLAY_ENGINE_REGISTRY",
    "GraphDisplay",
    "display_engine_from_str",
    "iter_display_engines",
    "list_display_engines",
    "AspartixDisplayEngine",
    "DimacsDisplayEngine",
    "DotDisplayEngine",
    "GraphMLDisplayEngine",
    "ICCMADimacsDisplayEngine",
]
