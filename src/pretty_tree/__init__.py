"""
Render tree-shaped content as text that fits a target line width.

Architecture:
- Size algebra measures content as if it were rendered on one line
- Pretty nodes (Group, Sep, Indent, ...) compose into an immutable tree
- Render entry points measure the root once, then write the tree top-down,
  each Group deciding locally whether its subtree breaks across lines
- The data module builds such trees from nested JSON-like values
"""

from __future__ import annotations

from loguru import logger

# Size algebra
from .size import (
    MULTILINE,
    ZERO,
    Size,
)

# Context and sinks
from .context import (
    ByteSink,
    Context,
    Sink,
)

# Node kinds
from .nodes import (
    Condition,
    Conditional,
    ForcedBreak,
    Group,
    Indent,
    Join,
    Maybe,
    Pretty,
    PrettyLike,
    Sep,
    Sequence,
    Text,
    as_pretty,
)

# Builders
from .builders import (
    block,
    bracketed,
    delimited,
)

# Entry points
from .render import (
    DEFAULT_MAX_LINE,
    DEFAULT_TAB_SIZE,
    RenderInvariantError,
    println_simple,
    to_string,
    write,
    write_bytes,
)

# Nested data
from .data import (
    RenderConfig,
    pformat,
    pprint,
    to_pretty,
)

# Stream processing
from .stream import process_stream

# Disabled by default (library behavior)
logger.disable("pretty_tree")

__all__ = [
    # Size
    "MULTILINE",
    "ZERO",
    "Size",
    # Context
    "ByteSink",
    "Context",
    "Sink",
    # Nodes
    "Condition",
    "Conditional",
    "ForcedBreak",
    "Group",
    "Indent",
    "Join",
    "Maybe",
    "Pretty",
    "PrettyLike",
    "Sep",
    "Sequence",
    "Text",
    "as_pretty",
    # Builders
    "block",
    "bracketed",
    "delimited",
    # Rendering
    "DEFAULT_MAX_LINE",
    "DEFAULT_TAB_SIZE",
    "RenderInvariantError",
    "println_simple",
    "to_string",
    "write",
    "write_bytes",
    # Data
    "RenderConfig",
    "pformat",
    "pprint",
    "to_pretty",
    # Stream processing
    "process_stream",
]
