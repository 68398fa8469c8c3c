"""Best-effort plain-text extraction used when structured rendering fails.

Nothing here can raise for a well-formed tree, so a page whose AST was built
always produces some output.

Examples
--------
>>> from docs_md.html_to_md.ast import Heading, Paragraph, Root, Text
>>> extract_plain_text(Root([Heading(1, [Text("Title")]), Paragraph([Text("Body")])]))
'# Title\\n\\nBody'
"""

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

from .inline import delimit, escape_line_start, escape_text, inline_code

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_md.html_to_md.ast import Node


def extract_plain_text(root: Root) -> str:
    """Return the text of ``root`` with minimal Markdown markers."""
    parts = (_extract(child) for child in root.children)
    return "\n\n".join(part for part in parts if part)


def extract_text(nodes: cabc.Iterable[Node]) -> str:
    """Return only the character data under ``nodes``, without any markup.

    Examples
    --------
    >>> from docs_md.html_to_md.ast import InlineCode, Text
    >>> extract_text([InlineCode("100%"), Text(" + "), InlineCode("3pt")])
    '100% + 3pt'
    """
    return "".join(_text_only(node) for node in nodes)


def _text_only(node: Node) -> str:
    match node:
        case Text(value=value) | InlineCode(value=value) | Code(value=value):
            return value
        case Root(children=children) | ListItem(children=children) | Blockquote(
            children=children
        ):
            return " ".join(_text_only(child) for child in children)
        case List(children=items):
            return " ".join(_text_only(item) for item in items)
        case Table(children=rows):
            return " ".join(_text_only(row) for row in rows)
        case TableRow(children=cells):
            return " ".join(_text_only(cell) for cell in cells)
        case (
            Heading(children=children)
            | Paragraph(children=children)
            | Emphasis(children=children)
            | Strong(children=children)
            | Link(children=children)
            | TableCell(children=children)
        ):
            return "".join(_text_only(child) for child in children)
        case _:
            typ.assert_never(node)


def _inline(nodes: cabc.Iterable[Node]) -> str:
    return "".join(_extract(node) for node in nodes)


def _extract(node: Node) -> str:
    match node:
        case Text(value=value):
            return escape_text(value)
        case InlineCode(value=value):
            return inline_code(value)
        case Emphasis(children=children):
            return delimit(_inline(children), "*")
        case Strong(children=children):
            return delimit(_inline(children), "**")
        case Link(url=url, children=children):
            return f"[{_inline(children)}]({url})"
        case Heading(depth=depth, children=children):
            return f"{'#' * depth} {_inline(children)}"
        case Paragraph(children=children):
            return escape_line_start(_inline(children))
        case TableCell(children=children):
            return _inline(children)
        case Code(value=value):
            return f"```\n{value}\n```"
        case List(ordered=ordered, start=start, children=items):
            first = start if start is not None else 1
            return "\n".join(
                f"{first + index}. {_extract(item)}" if ordered else f"- {_extract(item)}"
                for index, item in enumerate(items)
            )
        case ListItem(children=children):
            return " ".join(_extract(child) for child in children)
        case Blockquote(children=children):
            text = "\n".join(_extract(child) for child in children)
            return "> " + text.replace("\n", "\n> ")
        case Table(children=rows):
            return "\n".join(_extract(row) for row in rows)
        case TableRow(children=cells):
            return " | ".join(_extract(cell) for cell in cells)
        case Root():
            return extract_plain_text(node)
        case _:
            typ.assert_never(node)


__all__ = ["extract_plain_text", "extract_text"]
