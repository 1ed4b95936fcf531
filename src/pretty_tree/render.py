"""Entry points that render a Pretty tree into an output destination.

Rendering happens in two phases: the root is measured once, then the tree
is written top-down in a single pass. Traversal recurses once per tree
level, so a tree nested deeper than the interpreter's recursion limit
raises RecursionError.
"""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from loguru import logger

from .context import ByteSink, Context, Sink
from .nodes import PrettyLike, as_pretty

DEFAULT_MAX_LINE = 80
DEFAULT_TAB_SIZE = 2


class RenderInvariantError(RuntimeError):
    """A node emitted output that is not valid text."""


def write(
    writer: Sink,
    content: PrettyLike,
    max_line: int | None,
    tab_size: int,
) -> None:
    """Render ``content`` into ``writer``.

    Args:
        writer: Destination with a ``write(str)`` method
        content: Tree to render
        max_line: Target line width, or None for unlimited
        tab_size: Spaces per indent level

    Any exception raised by ``writer`` aborts rendering and propagates as-is.
    """
    content = as_pretty(content)
    size = content.size()
    broken = size.exceeds(max_line)
    logger.debug(
        "rendering root of {} (max_line={}, tab_size={}, broken={})",
        size, max_line, tab_size, broken,
    )
    context = Context(
        max_line=max_line,
        tab_size=tab_size,
        indent_level=0,
        broken=broken,
        writer=writer,
    )
    content.pretty_write(context)


def write_bytes(
    stream: BinaryIO,
    content: PrettyLike,
    max_line: int | None,
    tab_size: int,
    encoding: str = "utf-8",
) -> None:
    """Render ``content`` into a binary stream, encoding text as it goes."""
    write(ByteSink(stream, encoding), content, max_line, tab_size)


def to_string(content: PrettyLike, max_line: int | None, tab_size: int) -> str:
    """Render ``content`` and return the result as a string."""
    buffer = io.BytesIO()
    write_bytes(buffer, content, max_line, tab_size)
    try:
        return buffer.getvalue().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RenderInvariantError("Rendered output is not valid UTF-8") from exc


def println_simple(content: PrettyLike) -> None:
    """Print ``content`` to stdout with default width and indentation."""
    write(sys.stdout, content, DEFAULT_MAX_LINE, DEFAULT_TAB_SIZE)
    sys.stdout.write("\n")
