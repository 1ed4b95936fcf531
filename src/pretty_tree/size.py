"""Intrinsic size algebra.

A Size is the number of columns some content would occupy if rendered on a
single line, or the MULTILINE marker for content that can never fit on one
line (for example anything containing a forced break).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Final


@total_ordering
@dataclass(frozen=True, slots=True)
class Size:
    """Single-line width in columns, or multiline when ``columns`` is None."""

    columns: int | None

    def __post_init__(self):
        if self.columns is not None and self.columns < 0:
            raise ValueError("Size cannot be negative")

    @staticmethod
    def of(text: str) -> "Size":
        """Size of a string, counted in code points."""
        return Size(len(text))

    @property
    def is_multiline(self) -> bool:
        return self.columns is None

    def exceeds(self, max_line: int | None) -> bool:
        """Check whether this size is strictly wider than ``max_line``.

        An absent ``max_line`` compares as MULTILINE, so nothing exceeds it.
        """
        bound = MULTILINE if max_line is None else Size(max_line)
        return self > bound

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        if self.columns is None:
            return False
        if other.columns is None:
            return True
        return self.columns < other.columns

    def __add__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        if self.columns is None or other.columns is None:
            return MULTILINE
        return Size(self.columns + other.columns)

    def __mul__(self, factor: int) -> "Size":
        if not isinstance(factor, int):
            return NotImplemented
        if factor < 0:
            raise ValueError("Size can only be scaled by a non-negative factor")
        if self.columns is None:
            return MULTILINE
        return Size(self.columns * factor)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        if self.columns is None:
            return "Size(MULTILINE)"
        return f"Size({self.columns})"


ZERO: Final[Size] = Size(0)
"""Size of content that takes no columns."""

MULTILINE: Final[Size] = Size(None)
"""Marker for content that cannot be expressed on one line."""
