"""Render DOT text to an image by piping it through the Graphviz executable.

The executable is resolved through ``PATH`` and called as::

    dot -K<layout> -o<file> -T<format> -q

with the DOT text on stdin. A missing or non-executable binary surfaces as
the ``OSError`` raised by ``subprocess``; a non-zero exit raises
``RenderError`` with the captured stderr.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Union

from dotgraph.config import DEFAULT_FORMAT, RenderConfig
from dotgraph.errors import RenderError

if TYPE_CHECKING:
    from dotgraph.graph import BaseGraph

logger = logging.getLogger(__name__)

Source = Union[str, "BaseGraph"]


def resolve_output(path: str | os.PathLike[str], format: str | None = None) -> tuple[Path, str]:
    """Work out the output file and the ``-T`` format string.

    A path without a suffix (or ending in a bare ``.``) gets ``.svg``
    appended. An explicit ``format`` wins over the suffix, so
    ``format="png:cairo"`` can be combined with any file name.
    """
    path = Path(path)
    directory = path.parent  # Path("x.png").parent is "."
    name = path.name
    suffix = path.suffix
    if name.endswith("."):
        name = name[:-1]
        suffix = ""
    if not suffix:
        suffix = f".{DEFAULT_FORMAT}"
        name = f"{name}{suffix}"
    return directory / name, format or suffix[1:]


def build_command(executable: str, layout: str, output: Path, format: str) -> list[str]:
    return [executable, f"-K{layout}", f"-o{output}", f"-T{format}", "-q"]


def render(
    source: Source,
    path: str | os.PathLike[str],
    layout: str | None = None,
    format: str | None = None,
    executable: str | None = None,
    *,
    config: RenderConfig | None = None,
) -> Path:
    """Render a graph (or ready-made DOT text) to ``path``.

    Args:
        source: DOT text, or a graph which is serialized with ``to_dot()``.
        path: Destination file. Its suffix selects the format unless
            ``format`` is given.
        layout: Graphviz layout engine (``dot``, ``neato``, ``fdp``,
            ``sfdp``, ``twopi``, ``circo``...).
        format: Output format passed to ``-T``, e.g. ``png`` or
            ``png:cairo:gd``.
        executable: Name or path of the ``dot`` command.
        config: Defaults for the three options above; explicit arguments
            take precedence.

    Returns:
        The path of the written file.

    Raises:
        OSError: If the executable cannot be started.
        RenderError: If the executable exits with a non-zero status.
    """
    config = config or RenderConfig()
    layout = layout or config.layout
    executable = executable or config.executable
    output, actual_format = resolve_output(path, format or config.format)

    text = source if isinstance(source, str) else source.to_dot()
    command = build_command(executable, layout, output, actual_format)
    logger.debug("Running %s", " ".join(command))

    with subprocess.Popen(
        command,
        stdin=subprocess.PIPE,
        stderr=subprocess.PIPE,
        encoding="utf-8",
        errors="replace",
    ) as process:
        _, stderr = process.communicate(text)

    if process.returncode != 0:
        logger.warning("%s exited with status %d", executable, process.returncode)
        raise RenderError(process.returncode, stderr, command)

    logger.info("Rendered %s (%s, layout %s)", output, actual_format, layout)
    return output
