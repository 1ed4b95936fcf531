"""Convenience builders composed purely from the primitive nodes."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Conditional, Group, Indent, Join, Maybe, PrettyLike, Sep, Sequence, as_pretty


def delimited(delim: PrettyLike, items: Iterable[PrettyLike]) -> Sequence:
    """Follow every item except the last with ``delim``.

        delimited(", ", ["a", "b", "c"])  ->  a, b, c

    The same delimiter node is shared by every item.
    """
    delim = as_pretty(delim)
    pretty_items = [as_pretty(item) for item in items]
    last = len(pretty_items) - 1
    return Sequence(
        Join(item, Maybe(delim if index < last else None))
        for index, item in enumerate(pretty_items)
    )


def block(content: PrettyLike) -> Join:
    """Indented block: break, indent, content, break, dedent.

    Unbroken, this is just ``content``.
    """
    return Join(Indent(Join(Sep(0), content)), Sep(0))


def bracketed(
    open: PrettyLike,
    content: PrettyLike,
    close: PrettyLike,
    trailing: PrettyLike | None = None,
) -> Group:
    """Group ``content`` between brackets, one block per break.

    ``trailing`` is emitted after the content only when the group breaks,
    e.g. a trailing comma after the last list item.
    """
    if trailing is not None:
        content = Join(content, Conditional.only_broken(trailing))
    return Group(Join(open, Join(block(content), close)))
