"""Immutable view-tree values.

A ViewNode is plain data: two trees built from the same state compare equal.
Handlers are Action values naming an operation and the identifiers it was
built with; the planner resolves them at dispatch time.
"""

from dataclasses import dataclass, field
from typing import Union

from party_planner.dtos import Identifier


@dataclass(frozen=True)
class Action:
    name: str
    args: tuple[Identifier, ...] = ()


@dataclass(frozen=True)
class ViewNode:
    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    classes: tuple[str, ...] = ()
    children: tuple["Child", ...] = ()
    handlers: tuple[tuple[str, Action], ...] = field(default=())


Child = Union[ViewNode, str]


def h(
    tag: str,
    *children: Child,
    attrs: dict[str, str] | None = None,
    classes: tuple[str, ...] = (),
    on: dict[str, Action] | None = None,
) -> ViewNode:
    """Build a ViewNode. Attribute and handler order is preserved."""
    return ViewNode(
        tag=tag,
        attrs=tuple((attrs or {}).items()),
        classes=classes,
        children=children,
        handlers=tuple((on or {}).items()),
    )
