from __future__ import annotations

import pytest

from pretty_tree import Conditional, Group, Indent, Join, Pretty, Sep, Text, delimited


def nest_to_pretty(value: int | list) -> Pretty:
    if isinstance(value, int):
        return Text(str(value))
    return Group(
        "["
        + Indent(
            Sep(0)
            + delimited(Join(",", Sep(1)), [nest_to_pretty(v) for v in value])
            + Conditional.only_broken(",")
        )
        + Sep(0)
        + "]"
    )


@pytest.fixture
def nest_list():
    return nest_to_pretty


@pytest.fixture
def large_list() -> list:
    return [
        [1, 2, 3, 4, 5],
        [6, 7, 8, 9, 10],
        [[11, 12, 13], [14, 15, 16]],
    ]
