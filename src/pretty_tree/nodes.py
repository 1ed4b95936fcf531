"""Primitive node kinds for building Pretty trees.

This module defines the Pretty capability and every built-in node kind.
Trees are built once from these nodes and never change afterwards; rendering
only reads them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from typing_extensions import override

from .context import Context
from .size import MULTILINE, ZERO, Size


class Pretty(ABC):
    """Something that can be measured and rendered into a Context."""

    @abstractmethod
    def size(self) -> Size:
        """Width of this content if rendered with no line breaks."""

    @abstractmethod
    def pretty_write(self, context: Context) -> None:
        """Write this content to ``context.writer``.

        Exceptions raised by the writer propagate unchanged.
        """

    def join(self, other: PrettyLike) -> "Join":
        return Join(self, other)

    def __add__(self, other: PrettyLike) -> "Join":
        if not isinstance(other, (Pretty, str)):
            return NotImplemented
        return Join(self, other)

    def __radd__(self, other: PrettyLike) -> "Join":
        if not isinstance(other, (Pretty, str)):
            return NotImplemented
        return Join(other, self)


PrettyLike = Pretty | str


def as_pretty(value: PrettyLike) -> Pretty:
    """Coerce a string to a Text leaf; pass Pretty values through."""
    if isinstance(value, Pretty):
        return value
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"Expected Pretty or str, got {type(value).__name__}")


def _coerce(node: object, name: str) -> None:
    """Coerce a child field in place on a frozen dataclass."""
    object.__setattr__(node, name, as_pretty(getattr(node, name)))


# =============================================================================
# Leaves
# =============================================================================

@dataclass(frozen=True)
class Text(Pretty):
    """Literal text, emitted verbatim."""

    text: str

    @override
    def size(self) -> Size:
        return Size.of(self.text)

    @override
    def pretty_write(self, context: Context) -> None:
        context.write(self.text)


@dataclass(frozen=True)
class Sep(Pretty):
    """Soft break point.

    Unbroken, it renders as ``width`` spaces. Broken, it renders as a line
    break followed by the current indentation.
    """

    width: int = 1

    def __post_init__(self):
        if self.width < 0:
            raise ValueError("Sep width cannot be negative")

    @override
    def size(self) -> Size:
        return Size(self.width)

    @override
    def pretty_write(self, context: Context) -> None:
        if context.broken:
            context.newline()
        else:
            context.write(" " * self.width)


@dataclass(frozen=True)
class ForcedBreak(Pretty):
    """Unconditional line break. Forces every enclosing Group to break."""

    @override
    def size(self) -> Size:
        return MULTILINE

    @override
    def pretty_write(self, context: Context) -> None:
        context.newline()


# =============================================================================
# Wrappers
# =============================================================================

@dataclass(frozen=True)
class Group(Pretty):
    """Decide locally whether the wrapped content fits on one line.

    The content is measured once, here. At render time the measured size
    plus the current indentation is compared against ``max_line``; the
    result becomes the break mode of the whole subtree, whatever mode the
    Group itself inherited. Text already written on the current line is
    not taken into account.
    """

    content: Pretty
    _size: Size = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        _coerce(self, "content")
        object.__setattr__(self, "_size", self.content.size())

    @override
    def size(self) -> Size:
        return self._size

    @override
    def pretty_write(self, context: Context) -> None:
        adjusted = self._size + Size(context.tab_size) * context.indent_level
        self.content.pretty_write(
            context.reborrow(broken=adjusted.exceeds(context.max_line))
        )


@dataclass(frozen=True)
class Indent(Pretty):
    """Render the wrapped content one indent level deeper."""

    content: Pretty

    def __post_init__(self):
        _coerce(self, "content")

    @override
    def size(self) -> Size:
        return self.content.size()

    @override
    def pretty_write(self, context: Context) -> None:
        self.content.pretty_write(
            context.reborrow(indent_level=context.indent_level + 1)
        )


class Condition(Enum):
    """Break modes under which a Conditional emits its content."""

    ALWAYS = "always"
    ONLY_BROKEN = "only_broken"
    ONLY_UNBROKEN = "only_unbroken"

    def matches(self, broken: bool) -> bool:
        if self is Condition.ALWAYS:
            return True
        if self is Condition.ONLY_BROKEN:
            return broken
        return not broken


@dataclass(frozen=True)
class Conditional(Pretty):
    """Content emitted only under a given break mode.

    Always measures as zero columns, so it never affects a Group's decision.
    """

    condition: Condition
    content: Pretty

    def __post_init__(self):
        _coerce(self, "content")

    @classmethod
    def always(cls, content: PrettyLike) -> "Conditional":
        return cls(Condition.ALWAYS, content)

    @classmethod
    def only_broken(cls, content: PrettyLike) -> "Conditional":
        return cls(Condition.ONLY_BROKEN, content)

    @classmethod
    def only_unbroken(cls, content: PrettyLike) -> "Conditional":
        return cls(Condition.ONLY_UNBROKEN, content)

    @override
    def size(self) -> Size:
        return ZERO

    @override
    def pretty_write(self, context: Context) -> None:
        if self.condition.matches(context.broken):
            self.content.pretty_write(context)


@dataclass(frozen=True)
class Maybe(Pretty):
    """Content that may be absent. Absent content is empty."""

    content: Pretty | None = None

    def __post_init__(self):
        if self.content is not None:
            _coerce(self, "content")

    @override
    def size(self) -> Size:
        if self.content is None:
            return ZERO
        return self.content.size()

    @override
    def pretty_write(self, context: Context) -> None:
        if self.content is not None:
            self.content.pretty_write(context)


# =============================================================================
# Concatenation
# =============================================================================

@dataclass(frozen=True)
class Join(Pretty):
    """Two nodes rendered one after the other."""

    left: Pretty
    right: Pretty

    def __post_init__(self):
        _coerce(self, "left")
        _coerce(self, "right")

    @override
    def size(self) -> Size:
        return self.left.size() + self.right.size()

    @override
    def pretty_write(self, context: Context) -> None:
        self.left.pretty_write(context)
        self.right.pretty_write(context)


@dataclass(frozen=True, init=False)
class Sequence(Pretty):
    """Any number of nodes rendered in order."""

    items: tuple[Pretty, ...] = ()

    def __init__(self, items: Iterable[PrettyLike] = ()):
        object.__setattr__(self, "items", tuple(as_pretty(item) for item in items))

    @override
    def size(self) -> Size:
        total = ZERO
        for item in self.items:
            total = total + item.size()
        return total

    @override
    def pretty_write(self, context: Context) -> None:
        for item in self.items:
            item.pretty_write(context)
