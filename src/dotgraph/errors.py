"""Exception hierarchy for dotgraph.

Lookups of missing nodes, edges or attribute keys raise a ``NotFoundError``,
which is also a ``KeyError`` so ``except KeyError`` keeps working.
Launch failures of the rendering executable are left as the ``OSError``
raised by ``subprocess`` and never wrapped.
"""

from __future__ import annotations

from collections.abc import Sequence


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""


# --- Lookup errors ---


class NotFoundError(DotGraphError, KeyError):
    """A node, edge or attribute key is not present."""

    what: str = "key"

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"{self.what} not found: {self.key!r}"


class AttributeNotFoundError(NotFoundError):
    what = "attribute"


class NodeNotFoundError(NotFoundError):
    what = "node"


class EdgeNotFoundError(NotFoundError):
    what = "edge"


# --- Rendering errors ---


class RenderError(DotGraphError):
    """The rendering executable ran but exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str, command: Sequence[str] = ()) -> None:
        super().__init__(f"[errcode {returncode}] {stderr}")
        self.returncode = returncode
        self.stderr = stderr
        self.command = list(command)
