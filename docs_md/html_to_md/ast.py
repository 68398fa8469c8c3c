"""Intermediate content tree produced from HTML and consumed by renderers.

Nodes form a closed union: :data:`Node` lists every variant, and renderers
dispatch over it with ``match`` so a new node type cannot be silently ignored.
Inline nodes (:class:`Text`, :class:`Emphasis`, :class:`Strong`,
:class:`InlineCode`, :class:`Link`) only ever contain inline children.
"""

from __future__ import annotations

import dataclasses as dc
import enum


class AlignKind(enum.Enum):
    """Column alignment of a table."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dc.dataclass(slots=True)
class Text:
    value: str


@dc.dataclass(slots=True)
class InlineCode:
    value: str


@dc.dataclass(slots=True)
class Emphasis:
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Strong:
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Link:
    url: str
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Heading:
    """Section heading; ``depth`` is clamped to 1-6 by the converter."""

    depth: int
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Paragraph:
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Code:
    """Fenced code block; the export carries no language tag."""

    value: str


@dc.dataclass(slots=True)
class ListItem:
    children: list[BlockNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class List:
    ordered: bool
    start: int | None = None
    children: list[ListItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Blockquote:
    children: list[BlockNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class TableCell:
    children: list[InlineNode] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class TableRow:
    children: list[TableCell] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Table:
    """Table whose first row is the header row.

    ``align`` holds one entry per column of the widest row.
    """

    children: list[TableRow] = dc.field(default_factory=list)
    align: list[AlignKind] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Root:
    children: list[BlockNode] = dc.field(default_factory=list)


InlineNode = Text | InlineCode | Emphasis | Strong | Link
BlockNode = Heading | Paragraph | Code | List | Blockquote | Table
Node = (
    Root
    | BlockNode
    | InlineNode
    | ListItem
    | TableRow
    | TableCell
)

INLINE_TYPES = (Text, InlineCode, Emphasis, Strong, Link)


def is_inline(node: Node) -> bool:
    """Return ``True`` for inline formatting nodes."""
    return isinstance(node, INLINE_TYPES)


__all__ = [
    "INLINE_TYPES",
    "AlignKind",
    "BlockNode",
    "Blockquote",
    "Code",
    "Emphasis",
    "Heading",
    "InlineCode",
    "InlineNode",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Root",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "is_inline",
]
