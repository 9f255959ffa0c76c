"""dotgraph: build graphs in Python, write them as Graphviz DOT, render them with ``dot``.

Example::

    from dotgraph import Arrow, Digraph

    graph = Digraph()
    graph["label"] = "Test Graph"

    # subgraphs are included in the parent's output automatically
    sub = graph.subgraph("cluster_xy")
    sub.add_edge(Arrow("x", "y"))

    # edge endpoints become nodes without being added explicitly
    graph.add_edge(Arrow("a", "b"), label="A to B")
    graph.add_node("c", color="blue", shape="box")
    graph["a", "bgcolor"] = "red"

    print(graph.to_dot())
    graph.render("test_graph.png")  # needs Graphviz on PATH
"""

from dotgraph.attrs import Attributes
from dotgraph.config import RenderConfig
from dotgraph.dot import export_identifier, to_dot
from dotgraph.edges import Arrow, Edge, Relation
from dotgraph.errors import (
    AttributeNotFoundError,
    DotGraphError,
    EdgeNotFoundError,
    NodeNotFoundError,
    NotFoundError,
    RenderError,
)
from dotgraph.graph import BaseGraph, Digraph, Graph
from dotgraph.render import render

__all__ = [
    "Arrow",
    "AttributeNotFoundError",
    "Attributes",
    "BaseGraph",
    "Digraph",
    "DotGraphError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "NodeNotFoundError",
    "NotFoundError",
    "Relation",
    "RenderConfig",
    "RenderError",
    "export_identifier",
    "render",
    "to_dot",
]
