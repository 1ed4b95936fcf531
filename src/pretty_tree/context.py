"""Rendering context threaded through a Pretty tree.

A Context carries the layout configuration, the current indent level and
break mode, and the single output destination for one render call. Nodes
hand their children a reborrowed copy; the writer is shared, never copied.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, BinaryIO, Protocol


class Sink(Protocol):
    """Output destination. Every text stream satisfies this."""

    def write(self, text: str, /) -> Any:
        ...


class ByteSink:
    """Adapt a binary stream to the Sink protocol.

    Text is encoded before it reaches the stream. ``bytes`` are passed
    through as-is for nodes that emit pre-encoded output.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding

    def write(self, text: str | bytes, /) -> None:
        if isinstance(text, bytes):
            self.stream.write(text)
        else:
            self.stream.write(text.encode(self.encoding))


@dataclass(frozen=True, slots=True)
class Context:
    """Snapshot of layout state for one subtree."""

    max_line: int | None
    tab_size: int
    indent_level: int
    broken: bool
    writer: Sink

    @property
    def indentation(self) -> int:
        """Number of leading spaces at the current indent level."""
        return self.tab_size * self.indent_level

    def reborrow(self, **changes: Any) -> "Context":
        """Context for a child subtree, sharing this context's writer."""
        return replace(self, **changes)

    def write(self, text: str) -> None:
        self.writer.write(text)

    def newline(self) -> None:
        """Line break followed by the current indentation."""
        self.writer.write("\n" + " " * self.indentation)
