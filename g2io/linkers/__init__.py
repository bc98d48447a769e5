"""Linkers, building the edges between inner graphs."""

from __future__ import annotations

from typing import Any, Iterator

from g2io.core.graph import EdgeKind
from g2io.core.inner_outer import Linker
from g2io.core.named_param import describe_named_params, named_from_str
from g2io.linkers.base import LinkerFactory
from g2io.linkers.first_to_first import BidirectionalFirstToFirstLinker, FirstToFirstLinker
from g2io.linkers.min_incoming import BidirectionalMinIncomingLinker, MinIncomingLinker
from g2io.linkers.random import BidirectionalRandomLinker, RandomLinker

# Registry: edge kind → factories.  Bidirectional linkers only make sense
# for directed graphs.
LINKER_REGISTRY: dict[EdgeKind, tuple[LinkerFactory, ...]] = {
    EdgeKind.DIRECTED: (
        FirstToFirstLinker(),
        BidirectionalFirstToFirstLinker(),
        MinIncomingLinker(),
        BidirectionalMinIncomingLinker(),
        RandomLinker(),
        BidirectionalRandomLinker(),
    ),
    EdgeKind.UNDIRECTED: (
        FirstToFirstLinker(),
        MinIncomingLinker(),
        RandomLinker(),
    ),
}


def iter_linkers(edge_kind: EdgeKind = EdgeKind.DIRECTED) -> Iterator[LinkerFactory]:
    """Iterate over the linker factories for an edge kind."""
    return iter(LINKER_REGISTRY[EdgeKind(edge_kind)])


def linker_from_str(s: str, edge_kind: EdgeKind = EdgeKind.DIRECTED) -> Linker:
    """
    Build a linker from a string such as ``"random/0.5"``.

    Each call builds a fresh linker, with its own cache when it keeps one.
    """
    return named_from_str(iter_linkers(edge_kind), s, kind="linker")


def list_linkers(edge_kind: EdgeKind = EdgeKind.DIRECTED) -> list[dict[str, Any]]:
    """Return name, description and parameter types of every linker."""
    return describe_named_params(iter_linkers(edge_kind))


__all__ = [
    "LinkerFactory",
    "LINKER_REGISTRY",
    "iter_linkers",
    "linker_from_str",
    "list_linkers",
    "BidirectionalFirstToFirstLinker",
    "BidirectionalMinIncomingLinker",
    "BidirectionalRandomLinker",
    "FirstToFirstLinker",
    "MinIncomingLinker",
    "RandomLinker",
]
