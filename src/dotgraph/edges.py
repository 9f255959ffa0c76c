"""Relations between two named nodes.

``Edge`` is the undirected relation (``a -- b`` in DOT) and ``Arrow`` the
directed one (``a -> b``). Both are immutable and hashable so they can key
the edge table of a graph.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Union

from dotgraph.dot import export_identifier


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected edge. ``Edge(a, b) == Edge(b, a)``."""

    a: str
    b: str

    connector: ClassVar[str] = "--"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

    def __hash__(self) -> int:
        # order-insensitive so that both orientations land in the same bucket
        return hash(frozenset((self.a, self.b)))

    def __iter__(self) -> Iterator[str]:
        yield self.a
        yield self.b

    def __str__(self) -> str:
        return f"{export_identifier(self.a)} {self.connector} {export_identifier(self.b)}"


@dataclass(frozen=True, eq=False)
class Arrow:
    """Directed edge from tail ``a`` to head ``b``. ``Arrow(a, b) != Arrow(b, a)``."""

    a: str
    b: str

    connector: ClassVar[str] = "->"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arrow):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __iter__(self) -> Iterator[str]:
        yield self.a
        yield self.b

    def __str__(self) -> str:
        return f"{export_identifier(self.a)} {self.connector} {export_identifier(self.b)}"


Relation = Union[Edge, Arrow]
