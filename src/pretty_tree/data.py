"""Nested data rendering built on the primitive nodes.

This module contains RenderConfig and to_pretty, which turns JSON-like
Python values (and pydantic models) into Pretty trees, plus the pformat and
pprint conveniences.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from .builders import bracketed, delimited
from .context import Sink
from .nodes import Join, Pretty, Sep, Text
from .render import DEFAULT_MAX_LINE, DEFAULT_TAB_SIZE, to_string, write


# =============================================================================
# Render Configuration
# =============================================================================

class RenderConfig(BaseModel):
    """Configuration for rendering nested data."""

    max_line: int | None = Field(default=DEFAULT_MAX_LINE, ge=0)
    tab_size: int = Field(default=DEFAULT_TAB_SIZE, ge=0)

    trailing_commas: bool = True  # Only emitted when a container breaks
    sort_keys: bool = False
    ensure_ascii: bool = False

    model_config = {"extra": "forbid"}


# =============================================================================
# Conversion
# =============================================================================

_ITEM_SEP = Join(",", Sep(1))


def to_pretty(value: Any, config: RenderConfig | None = None) -> Pretty:
    """Convert a JSON-like value into a Pretty tree.

    Every non-empty list or dict becomes its own Group, so each nesting
    level decides independently whether it fits on one line.
    """
    config = config or RenderConfig()

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    if isinstance(value, Mapping):
        return _mapping_to_pretty(value, config)
    if isinstance(value, (list, tuple)):
        return _list_to_pretty(value, config)
    return _scalar_to_pretty(value, config)


def _scalar_to_pretty(value: Any, config: RenderConfig) -> Text:
    # json.dumps raises TypeError for anything that is not JSON-encodable
    return Text(json.dumps(value, ensure_ascii=config.ensure_ascii))


def _list_to_pretty(values: list[Any] | tuple[Any, ...], config: RenderConfig) -> Pretty:
    if not values:
        return Text("[]")
    items = delimited(_ITEM_SEP, (to_pretty(v, config) for v in values))
    return bracketed("[", items, "]", trailing="," if config.trailing_commas else None)


def _mapping_to_pretty(mapping: Mapping[Any, Any], config: RenderConfig) -> Pretty:
    if not mapping:
        return Text("{}")
    keys = list(mapping)
    if config.sort_keys:
        keys = sorted(keys, key=str)
    entries = [
        Join(_key_to_pretty(key, config), Join(": ", to_pretty(mapping[key], config)))
        for key in keys
    ]
    items = delimited(_ITEM_SEP, entries)
    return bracketed("{", items, "}", trailing="," if config.trailing_commas else None)


def _key_to_pretty(key: Any, config: RenderConfig) -> Text:
    # JSON object keys are always strings
    if not isinstance(key, str):
        if key is not None and not isinstance(key, (int, float, bool)):
            raise TypeError(f"Keys must be str, int, float, bool or None, not {type(key).__name__}")
        key = json.dumps(key)
    return Text(json.dumps(key, ensure_ascii=config.ensure_ascii))


# =============================================================================
# Conveniences
# =============================================================================

def pformat(value: Any, config: RenderConfig | None = None) -> str:
    """Format a JSON-like value as a string."""
    config = config or RenderConfig()
    return to_string(to_pretty(value, config), config.max_line, config.tab_size)


def pprint(value: Any, config: RenderConfig | None = None, stream: Sink | None = None) -> None:
    """Print a JSON-like value followed by a newline."""
    config = config or RenderConfig()
    out = stream if stream is not None else sys.stdout
    write(out, to_pretty(value, config), config.max_line, config.tab_size)
    out.write("\n")
