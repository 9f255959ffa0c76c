"""Attribute store shared by graphs, nodes and edges."""

from __future__ import annotations

from dotgraph.errors import AttributeNotFoundError


class Attributes(dict[str, str]):
    """A plain ``str -> str`` dict whose missing keys raise ``AttributeNotFoundError``.

    Iteration follows insertion order, which keeps the DOT output stable.
    """

    def __missing__(self, key: str) -> str:
        raise AttributeNotFoundError(key)

    def merge(self, pairs: tuple[tuple[str, str], ...] = (), /, **kwargs: str) -> None:
        """Apply ``(key, value)`` pairs, then keyword attributes; later values win."""
        for key, value in pairs:
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value
