"""Graph model: graphs, subgraphs, nodes and edges with their attributes.

``Graph`` holds undirected ``Edge`` relations and serializes as
``strict graph``; ``Digraph`` holds directed ``Arrow`` relations and
serializes as ``strict digraph``. Subgraphs are created through
``parent.subgraph()`` and are always of the parent's class.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar, Generic, TypeVar, Union, overload

import networkx as nx

from dotgraph import dot
from dotgraph.attrs import Attributes
from dotgraph.config import RenderConfig
from dotgraph.edges import Arrow, Edge
from dotgraph.errors import EdgeNotFoundError, NodeNotFoundError
from dotgraph.render import render

R = TypeVar("R", Edge, Arrow)
G = TypeVar("G", bound="BaseGraph")

AttrKey = Union[str, tuple[str, str], tuple[Edge, str], tuple[Arrow, str]]


class BaseGraph(Generic[R]):
    """Shared implementation of ``Graph`` and ``Digraph``.

    Attributes:
        name: Graph name. Subgraphs whose name starts with ``cluster`` are
            drawn as boxes by some layout engines.
        graph_attr: Graph-level attributes.
        node_attrs: Attributes per explicitly added node. Nodes that only
            appear as edge endpoints need no entry here.
        edges: Attributes per edge.
    """

    relation: ClassVar[type]
    keyword: ClassVar[str]
    networkx_type: ClassVar[type[nx.Graph]]

    def __init__(self, name: str = "") -> None:
        if not hasattr(type(self), "relation"):
            raise TypeError(f"{type(self).__name__} is abstract; use Graph or Digraph")
        self.name = name
        self.graph_attr = Attributes()
        self.node_attrs: dict[str, Attributes] = {}
        self.edges: dict[R, Attributes] = {}
        # Only subgraph() appends here, so a graph has at most one parent and
        # the nesting is always a tree.
        self._subgraphs: list[BaseGraph[R]] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def subgraphs(self) -> tuple[BaseGraph[R], ...]:
        return tuple(self._subgraphs)

    def subgraph(self: G, name: str = "") -> G:
        """Create a subgraph attached to this graph and return it.

        The subgraph is a full graph of its own: it can be populated,
        serialized and rendered standalone, and is included in this graph's
        output automatically.
        """
        child = type(self)(name)
        self._subgraphs.append(child)
        return child

    # ── Nodes and edges ──────────────────────────────────────────────────────

    def _check_relation(self, edge: object) -> None:
        if not isinstance(edge, self.relation):
            raise TypeError(f"{type(self).__name__} takes {self.relation.__name__} edges, got {edge!r}")

    def add_edge(self, edge: R, /, *pairs: tuple[str, str], **attrs: str) -> Attributes:
        """Add an edge if absent and merge the given attributes into it.

        Attributes may be given as ``(key, value)`` tuples and/or keywords.
        Endpoints do not need to be added as nodes first.
        """
        self._check_relation(edge)
        table = self.edges.setdefault(edge, Attributes())
        table.merge(pairs, **attrs)
        return table

    def add_node(self, node: str, /, *pairs: tuple[str, str], **attrs: str) -> Attributes:
        """Add a node if absent and merge the given attributes into it."""
        table = self.node_attrs.setdefault(node, Attributes())
        table.merge(pairs, **attrs)
        return table

    def nodes(self) -> list[str]:
        """All node names: explicit nodes first, then edge endpoints, each once."""
        seen = dict.fromkeys(self.node_attrs)
        for edge in self.edges:
            seen.setdefault(edge.a)
            seen.setdefault(edge.b)
        return list(seen)

    def has_node(self, node: str) -> bool:
        return node in self.node_attrs or any(node in (edge.a, edge.b) for edge in self.edges)

    def has_edge(self, edge: R) -> bool:
        return edge in self.edges

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.has_node(node)

    # ── Attribute access ─────────────────────────────────────────────────────

    def get_attr(self, key: str) -> str:
        return self.graph_attr[key]

    def set_attr(self, key: str, value: str) -> None:
        self.graph_attr[key] = value

    def get_node_attr(self, node: str, key: str) -> str:
        try:
            table = self.node_attrs[node]
        except KeyError:
            raise NodeNotFoundError(node) from None
        return table[key]

    def set_node_attr(self, node: str, key: str, value: str) -> None:
        self.add_node(node)[key] = value

    def get_edge_attr(self, edge: R, key: str) -> str:
        try:
            table = self.edges[edge]
        except KeyError:
            raise EdgeNotFoundError(edge) from None
        return table[key]

    def set_edge_attr(self, edge: R, key: str, value: str) -> None:
        self.add_edge(edge)[key] = value

    @overload
    def __getitem__(self, key: str) -> str: ...

    @overload
    def __getitem__(self, key: tuple[str | R, str]) -> str: ...

    def __getitem__(self, key):
        """``g["k"]``, ``g["node", "k"]`` or ``g[edge, "k"]``."""
        if isinstance(key, tuple):
            target, name = key
            if isinstance(target, str):
                return self.get_node_attr(target, name)
            return self.get_edge_attr(target, name)
        return self.get_attr(key)

    def __setitem__(self, key: AttrKey, value: str) -> None:
        if isinstance(key, tuple):
            target, name = key
            if isinstance(target, str):
                self.set_node_attr(target, name, value)
            else:
                self.set_edge_attr(target, name, value)
        else:
            self.set_attr(key, value)

    # ── Adjacency ────────────────────────────────────────────────────────────

    def iter_edges(self, node: str) -> Iterator[R]:
        """Yield every edge with ``node`` at either end."""
        for edge in self.edges:
            if edge.a == node or edge.b == node:
                yield edge

    # ── Output ───────────────────────────────────────────────────────────────

    def to_dot(self) -> str:
        """Return the DOT script for this graph and its subgraphs."""
        return dot.to_dot(self)

    def __str__(self) -> str:
        return self.to_dot()

    def render(
        self,
        path: str | os.PathLike[str],
        layout: str | None = None,
        format: str | None = None,
        executable: str | None = None,
        *,
        config: RenderConfig | None = None,
    ) -> Path:
        """Render this graph to an image file. See ``dotgraph.render.render``."""
        return render(self, path, layout, format, executable, config=config)

    def to_networkx(self) -> nx.Graph:
        """Export to networkx, flattening subgraphs into a single graph.

        Node and edge attributes become networkx attribute dicts; graph
        attributes of the root end up in ``G.graph``, except that
        ``name`` is always the graph name. Parallel definitions
        in subgraphs merge into the same node or edge.
        """
        result = self.networkx_type()
        result.graph.update(self.graph_attr)
        result.graph["name"] = self.name
        self._fill_networkx(result)
        return result

    def _fill_networkx(self, result: nx.Graph) -> None:
        for sub in self._subgraphs:
            sub._fill_networkx(result)
        for node, attrs in self.node_attrs.items():
            result.add_node(node, **attrs)
        for edge, attrs in self.edges.items():
            result.add_edge(edge.a, edge.b, **attrs)


class Graph(BaseGraph[Edge]):
    """Undirected graph, serialized as ``strict graph``."""

    relation = Edge
    keyword = "graph"
    networkx_type = nx.Graph


class Digraph(BaseGraph[Arrow]):
    """Directed graph, serialized as ``strict digraph``."""

    relation = Arrow
    keyword = "digraph"
    networkx_type = nx.DiGraph

    def iter_edges_in(self, node: str) -> Iterator[Arrow]:
        """Yield the edges pointing to ``node``."""
        for edge in self.edges:
            if edge.b == node:
                yield edge

    def iter_edges_out(self, node: str) -> Iterator[Arrow]:
        """Yield the edges leaving ``node``."""
        for edge in self.edges:
            if edge.a == node:
                yield edge
