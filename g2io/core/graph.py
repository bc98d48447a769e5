"""
Dense, 0-based indexed graph container.

Nodes are the contiguous range ``[0, n)`` and carry no payload; edges are
ordered ``(source, target)`` pairs kept in insertion order.  Multi-edges are
first-class: nothing is ever deduplicated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Union

import networkx as nx

from g2io.core.errors import InvariantError


class EdgeKind(str, Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Graph:
    """
    A mutable graph whose nodes are labelled ``0..n_nodes()-1``.

    Graphs are created empty (optionally with capacity hints) and grown
    through :meth:`new_node` and :meth:`new_edge`.  Adding an edge that
    refers to a missing node creates every missing node up to it.

    Example
    -------
    >>> g = Graph()
    >>> g.new_edge(2, 3)
    >>> g.n_nodes(), g.n_edges()
    (4, 1)
    """

    def __init__(self, edge_kind: EdgeKind = EdgeKind.DIRECTED) -> None:
        self._edge_kind = EdgeKind(edge_kind)
        self._n_nodes = 0
        self._edges: list[tuple[int, int]] = []

    @classmethod
    def with_capacity(
        cls,
        n_nodes: int,
        n_edges: int,
        edge_kind: EdgeKind = EdgeKind.DIRECTED,
    ) -> "Graph":
        """
        Build an empty graph sized for ``n_nodes`` nodes and ``n_edges`` edges.

        Capacities are hints only; the graph grows past them as needed.
        """
        if n_nodes < 0 or n_edges < 0:
            raise InvariantError(
                f"negative capacity hint ({n_nodes} nodes, {n_edges} edges)"
            )
        return cls(edge_kind)

    # ------------------------------------------------------------------
    # Edge kind
    # ------------------------------------------------------------------

    @property
    def edge_kind(self) -> EdgeKind:
        return self._edge_kind

    @property
    def is_directed(self) -> bool:
        return self._edge_kind is EdgeKind.DIRECTED

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def new_node(self) -> int:
        """Append a node and return its index."""
        self._n_nodes += 1
        return self._n_nodes - 1

    def new_edge(self, source: int, target: int) -> None:
        """
        Append the edge ``(source, target)``.

        Missing nodes up to ``max(source, target)`` are created first.  The
        edge is always appended, even if an identical one exists.
        """
        if source < 0 or target < 0:
            raise InvariantError(f"negative node index in edge ({source}, {target})")
        self._n_nodes = max(self._n_nodes, source + 1, target + 1)
        self._edges.append((source, target))

    def remove_edge(self, source: int, target: int) -> None:
        """
        Remove one instance of the edge ``(source, target)``.

        In undirected graphs ``(target, source)`` matches as well.  The
        remaining edges keep their relative order.  A missing edge means the
        caller lost track of the graph it built and raises
        :class:`InvariantError`.
        """
        for i, (s, t) in enumerate(self._edges):
            if (s, t) == (source, target) or (
                not self.is_directed and (t, s) == (source, target)
            ):
                del self._edges[i]
                return
        raise InvariantError(f"cannot remove missing edge ({source}, {target})")

    def append_graph(self, other: "Graph") -> None:
        """
        Append a copy of ``other`` whose indices are shifted by ``n_nodes()``.

        Used to build disjoint unions; ``other`` is left untouched.
        """
        if other.edge_kind is not self._edge_kind:
            raise InvariantError(
                f"cannot append a {other.edge_kind.value} graph "
                f"to a {self._edge_kind.value} one"
            )
        offset = self._n_nodes
        self._n_nodes += other._n_nodes
        self._edges.extend((s + offset, t + offset) for s, t in other._edges)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def n_nodes(self) -> int:
        return self._n_nodes

    def n_edges(self) -> int:
        return len(self._edges)

    def iter_edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over ``(source, target)`` pairs in insertion order."""
        return iter(self._edges)

    # ------------------------------------------------------------------
    # networkx interop
    # ------------------------------------------------------------------

    @classmethod
    def from_networkx(
        cls,
        G,  # noqa: N803  (networkx convention)
        edge_kind: EdgeKind = EdgeKind.DIRECTED,
    ) -> "Graph":
        """
        Convert a networkx graph whose nodes are the integers ``0..n-1``.

        Isolated nodes are kept; edges are taken in networkx iteration order.
        """
        n = G.number_of_nodes()
        if any(not isinstance(u, int) or not 0 <= u < n for u in G.nodes()):
            raise InvariantError("networkx graph nodes must be labelled 0..n-1")
        g = cls.with_capacity(n, G.number_of_edges(), edge_kind)
        g._n_nodes = n
        for u, v in G.edges():
            g.new_edge(u, v)
        return g

    def to_networkx(self):
        """Return a networkx multigraph view with the same nodes and edges."""
        G = nx.MultiDiGraph() if self.is_directed else nx.MultiGraph()
        G.add_nodes_from(range(self._n_nodes))
        G.add_edges_from(self._edges)
        return G

    def __repr__(self) -> str:
        return (
            f"<Graph {self._edge_kind.value} "
            f"n_nodes={self._n_nodes} n_edges={len(self._edges)}>"
        )


class InnerGraph(NamedTuple):
    """
    An inner graph paired with the index of the outer node it replaces.

    Linkers receive these; the index is a stable key for per-graph caches.
    The graph is borrowed, never owned.
    """

    index: int
    graph: Graph


@dataclass(frozen=True)
class FirstToSecond:
    """An edge from the first inner graph to the second, in local indices."""

    first: int
    second: int


@dataclass(frozen=True)
class SecondToFirst:
    """An edge from the second inner graph to the first, in local indices."""

    second: int
    first: int


InterGraphEdge = Union[FirstToSecond, SecondToFirst]
