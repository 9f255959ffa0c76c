"""DOT writer — turns a graph model into Graphviz DOT text.

Everything here is a pure function of the graph state. Output order follows
the insertion order of the underlying dicts, so the same graph always yields
the same text.

Layout of the generated text::

    strict digraph name {
    subgraph child {
    ...
    }
    key=value;
    node [key=value, key=value];
    a -> b [key=value];
    }
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotgraph.graph import BaseGraph

# ─── Identifiers ─────────────────────────────────────────────────────────────

_PLAIN_ID_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMERAL_RE = re.compile(r"-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)")

# DOT keywords are case-insensitive and cannot be used as bare IDs.
_KEYWORDS = frozenset({"strict", "graph", "digraph", "subgraph", "node", "edge"})


def _is_plain(segment: str) -> bool:
    if segment.lower() in _KEYWORDS:
        return False
    return _PLAIN_ID_RE.fullmatch(segment) is not None or _NUMERAL_RE.fullmatch(segment) is not None


def export_identifier(identifier: str) -> str:
    """Escape an identifier for use in DOT.

    The identifier is split on ``:`` (port/compass syntax) and every segment
    that is not a bare ID or numeral is double-quoted, with ``"`` escaped as
    ``\\"``. Backslashes are left alone so DOT escapes like ``\\n`` survive.

    >>> export_identifier("a:b")
    'a:b'
    >>> export_identifier("my node")
    '"my node"'
    """
    segments = []
    for segment in identifier.split(":"):
        if _is_plain(segment):
            segments.append(segment)
        else:
            segments.append('"' + segment.replace('"', '\\"') + '"')
    return ":".join(segments)


# ─── Statements ──────────────────────────────────────────────────────────────


def _attribute_pairs(attrs: Mapping[str, str]) -> list[str]:
    return [f"{export_identifier(key)}={export_identifier(value)}" for key, value in attrs.items()]


def format_attributes(attrs: Mapping[str, str]) -> str:
    """Render an attribute list as ``[k=v, k=v]``, or ``""`` when empty."""
    if not attrs:
        return ""
    return "[" + ", ".join(_attribute_pairs(attrs)) + "]"


def _statement(head: str, attrs: Mapping[str, str]) -> str:
    block = format_attributes(attrs)
    if block:
        return f"{head} {block};\n"
    return f"{head};\n"


def export_graph_attributes(graph: BaseGraph) -> str:
    return "".join(f"{pair};\n" for pair in _attribute_pairs(graph.graph_attr))


def export_nodes(graph: BaseGraph) -> str:
    return "".join(_statement(export_identifier(node), attrs) for node, attrs in graph.node_attrs.items())


def export_edges(graph: BaseGraph) -> str:
    return "".join(_statement(str(edge), attrs) for edge, attrs in graph.edges.items())


# ─── Graphs ──────────────────────────────────────────────────────────────────


def build_body(graph: BaseGraph) -> str:
    """Render ``{ ... }`` for a graph: subgraphs, then attributes, nodes, edges."""
    parts = ["{\n"]
    for sub in graph.subgraphs:
        parts.append(export_subgraph(sub))
    parts.append(export_graph_attributes(graph))
    parts.append(export_nodes(graph))
    parts.append(export_edges(graph))
    parts.append("}\n")
    return "".join(parts)


def export_subgraph(graph: BaseGraph) -> str:
    return f"subgraph {export_identifier(graph.name)} {build_body(graph)}"


def to_dot(graph: BaseGraph) -> str:
    """Return the full DOT script for a graph, including its subgraphs."""
    return f"strict {graph.keyword} {export_identifier(graph.name)} {build_body(graph)}"
