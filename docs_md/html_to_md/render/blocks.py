"""Line-level serialization of block nodes.

These functions back both the dedicated fast renderers and the generic
:class:`~docs_md.html_to_md.render.standard.StandardRenderer`; nested blocks
inside list items and blockquotes are rendered through :func:`block_lines`.
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import (
    Blockquote,
    Code,
    Heading,
    List,
    ListItem,
    Paragraph,
    Table,
)

from .compositor import format_table
from .inline import escape_line_start, longest_backtick_run, render_inline
from .table import table_cells

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.ast import BlockNode

MIN_FENCE = 3


def paragraph_lines(node: Paragraph) -> list[str]:
    text = render_inline(node.children).strip()
    return [escape_line_start(line) for line in text.split("\n")] if text else []


def heading_lines(node: Heading) -> list[str]:
    """Return the ATX heading line, e.g. ``## Parameters``."""
    level = min(max(node.depth, 1), 6)
    return [f"{'#' * level} {render_inline(node.children).strip()}"]


def code_lines(node: Code) -> list[str]:
    """Return a fenced block, lengthening the fence past any backtick run."""
    fence = "`" * max(MIN_FENCE, longest_backtick_run(node.value) + 1)
    body = node.value.split("\n") if node.value else []
    return [fence, *body, fence]


def list_lines(node: List) -> list[str]:
    """Return list lines with continuation lines indented under the marker."""
    lines: list[str] = []
    start = node.start if node.start is not None else 1
    for index, item in enumerate(node.children):
        marker = f"{start + index}." if node.ordered else "-"
        item_lines = list_item_lines(item)
        if not item_lines:
            lines.append(marker)
            continue
        indent = " " * (len(marker) + 1)
        lines.append(f"{marker} {item_lines[0]}")
        lines.extend(f"{indent}{line}" if line else "" for line in item_lines[1:])
    return lines


def list_item_lines(item: ListItem) -> list[str]:
    """Render item blocks; a nested list follows its parent text directly."""
    lines: list[str] = []
    for child in item.children:
        child_lines = block_lines(child)
        if not child_lines:
            continue
        if lines and not isinstance(child, List):
            lines.append("")
        lines.extend(child_lines)
    return lines


def blockquote_lines(node: Blockquote) -> list[str]:
    """Return ``>``-prefixed lines with a bare ``>`` between child blocks."""
    inner: list[str] = []
    for child in node.children:
        child_lines = block_lines(child)
        if not child_lines:
            continue
        if inner:
            inner.append("")
        inner.extend(child_lines)
    return [f"> {line}" if line else ">" for line in inner]


def table_lines(node: Table) -> list[str]:
    return format_table(table_cells(node), node.align)


def block_lines(node: BlockNode) -> list[str]:
    """Serialize any block node to its Markdown lines."""
    match node:
        case Paragraph():
            return paragraph_lines(node)
        case Heading():
            return heading_lines(node)
        case Code():
            return code_lines(node)
        case List():
            return list_lines(node)
        case Blockquote():
            return blockquote_lines(node)
        case Table():
            return table_lines(node)
        case _:
            typ.assert_never(node)


__all__ = [
    "block_lines",
    "blockquote_lines",
    "code_lines",
    "heading_lines",
    "list_item_lines",
    "list_lines",
    "paragraph_lines",
    "table_lines",
]
