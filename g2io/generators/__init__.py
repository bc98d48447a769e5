"""Graph generators, used for both inner and outer graphs."""

from __future__ import annotations

from typing import Any, Iterator

from g2io.core.graph import EdgeKind
from g2io.core.inner_outer import GraphBuilder
from g2io.core.named_param import describe_named_params, named_from_str
from g2io.generators.barabasi_albert import BarabasiAlbertGeneratorFactory
from g2io.generators.base import GeneratorFactory
from g2io.generators.chain import ChainGeneratorFactory
from g2io.generators.erdos_renyi import ErdosRenyiGeneratorFactory
from g2io.generators.tree import TreeGeneratorFactory
from g2io.generators.watts_strogatz import WattsStrogatzGeneratorFactory

# Registry: edge kind → factories
GENERATOR_REGISTRY: dict[EdgeKind, tuple[GeneratorFactory, ...]] = {
    kind: (
        BarabasiAlbertGeneratorFactory(kind),
        ChainGeneratorFactory(kind),
        ErdosRenyiGeneratorFactory(kind),
        TreeGeneratorFactory(kind),
        WattsStrogatzGeneratorFactory(kind),
    )
    for kind in EdgeKind
}


def iter_generator_factories(
    edge_kind: EdgeKind = EdgeKind.DIRECTED,
) -> Iterator[GeneratorFactory]:
    """Iterate over the generator factories for an edge kind."""
    return iter(GENERATOR_REGISTRY[EdgeKind(edge_kind)])


def generator_from_str(s: str, edge_kind: EdgeKind = EdgeKind.DIRECTED) -> GraphBuilder:
    """
    Build a graph builder from a string such as ``"chain/3"``.

    >>> generator_from_str("chain/3")      # OK
    >>> generator_from_str("chain/1,2,3")  # ArityError
    >>> generator_from_str("foo/3")        # NotFoundError
    """
    return named_from_str(iter_generator_factories(edge_kind), s, kind="generator")


def list_generators(edge_kind: EdgeKind = EdgeKind.DIRECTED) -> list[dict[str, Any]]:
    """Return name, description and parameter types of every generator."""
    return describe_named_params(iter_generator_factories(edge_kind))


__all__ = [
    "GeneratorFactory",
    "GENERATOR_REGISTRY",
    "generator_from_str",
    "iter_generator_factories",
    "list_generators",
    "BarabasiAlbertGeneratorFactory",
    "ChainGeneratorFactory",
    "ErdosRenyiGeneratorFactory",
    "TreeGeneratorFactory",
    "WattsStrogatzGeneratorFactory",
]
