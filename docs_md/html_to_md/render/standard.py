"""Generic renderer handling every node kind."""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import (
    Blockquote,
    Code,
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
)

from .base import BlockResult, InlineResult
from .blocks import block_lines, list_item_lines
from .compositor import compose
from .inline import escape_cell, render_inline, render_inline_node

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.ast import Node

    from .base import RenderResult


class StandardRenderer:
    """Serialize any node using general Markdown composition rules.

    Used for code blocks and inline nodes, and as the catch-all whenever no
    dedicated renderer applies.
    """

    def render(self, node: Node) -> RenderResult:
        match node:
            case Text() | InlineCode() | Emphasis() | Strong() | Link():
                return InlineResult(render_inline_node(node))
            case Paragraph() | Heading() | Code() | List() | Blockquote() | Table():
                return BlockResult(block_lines(node))
            case ListItem():
                return BlockResult(list_item_lines(node))
            case TableRow(children=cells):
                return InlineResult(
                    " | ".join(escape_cell(render_inline(c.children)) for c in cells)
                )
            case TableCell(children=children):
                return InlineResult(escape_cell(render_inline(children)))
            case Root(children=children):
                text = compose(self.render(child) for child in children)
                return BlockResult(text.split("\n") if text else [])
            case _:
                typ.assert_never(node)


__all__ = ["StandardRenderer"]
