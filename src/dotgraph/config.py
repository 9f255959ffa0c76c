"""Centralized configuration for rendering."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FORMAT = "svg"


@dataclass
class RenderConfig:
    """Settings for invoking the Graphviz executable."""

    layout: str = "dot"
    format: str | None = None  # None: taken from the output file suffix
    executable: str = "dot"
