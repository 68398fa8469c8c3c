"""Build the intermediate content tree from an HTML fragment.

The walk is depth-first over a BeautifulSoup tree. A :class:`_ConverterContext`
holds an explicit stack of frames: each block frame collects block nodes and
the currently open paragraph, and inline buffers are pushed around constructs
that gather their own inline children (headings, links, emphasis, cells).

Examples
--------
>>> from docs_md.html_to_md.converter import html_to_ast
>>> root = html_to_ast("<p>Hello</p>", depth=0)
>>> root.children
[Paragraph(children=[Text(value='Hello')])]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from docs_md._constants import DROPPED_TAGS, MAX_HTML_SIZE
from docs_md.links import resolve_link_target

from .ast import (
    AlignKind,
    Blockquote,
    BlockNode,
    Code,
    Emphasis,
    Heading,
    InlineCode,
    InlineNode,
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
from .errors import HtmlParseError, HtmlTooLargeError

if typ.TYPE_CHECKING:
    from bs4.element import PageElement

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_TEXT_ALIGN = re.compile(r"text-align\s*:\s*(left|right|center)", re.IGNORECASE)
_HEADINGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
_EMPHASIS = frozenset({"em", "i"})
_STRONG = frozenset({"strong", "b"})
_ROW_GROUPS = frozenset({"thead", "tbody", "tfoot"})
_CELLS = frozenset({"th", "td"})
# Containers that end the current paragraph but are otherwise transparent.
_BLOCK_CONTAINERS = frozenset(
    {
        "address",
        "article",
        "aside",
        "dd",
        "details",
        "div",
        "dl",
        "dt",
        "figcaption",
        "figure",
        "footer",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "section",
        "summary",
    }
)


def check_html_size(html: str, limit: int = MAX_HTML_SIZE) -> int:
    """Return the UTF-8 byte length of ``html`` or raise if it exceeds ``limit``.

    Raises
    ------
    HtmlTooLargeError
        If the encoded fragment is longer than ``limit`` bytes.
    """
    size = len(html.encode("utf-8"))
    if size > limit:
        raise HtmlTooLargeError(size, limit)
    return size


def html_to_ast(html: str, depth: int) -> Root:
    """Parse ``html`` and convert it into a :class:`~docs_md.html_to_md.ast.Root`.

    Parameters
    ----------
    html : str
        HTML fragment taken from the documentation export.
    depth : int
        Directory depth of the output page; internal links are made relative
        to it.

    Returns
    -------
    Root
        Tree of block nodes. Dropped tags (``script``, ``style``, ...) leave no
        trace in it.

    Raises
    ------
    HtmlTooLargeError
        If ``html`` is larger than the size guard allows.
    HtmlParseError
        If the markup cannot be tokenized or nests too deeply to walk.
    """
    check_html_size(html)
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        msg = f"Failed to parse HTML: {exc}"
        raise HtmlParseError(msg) from exc

    context = _ConverterContext(depth=depth)
    try:
        context.walk_children(soup)
    except RecursionError as exc:
        msg = "HTML nesting too deep to convert"
        raise HtmlParseError(msg) from exc
    return Root(children=context.finish())


@dc.dataclass(slots=True)
class _BlockFrame:
    """Block nodes gathered for one container plus its open paragraph."""

    blocks: list[BlockNode] = dc.field(default_factory=list)
    paragraph: list[InlineNode] | None = None


@dc.dataclass(slots=True)
class _ConverterContext:
    depth: int
    frames: list[_BlockFrame] = dc.field(default_factory=lambda: [_BlockFrame()])
    inline_buffers: list[list[InlineNode]] = dc.field(default_factory=list)

    @property
    def frame(self) -> _BlockFrame:
        return self.frames[-1]

    @property
    def in_inline(self) -> bool:
        return bool(self.inline_buffers)

    def finish(self) -> list[BlockNode]:
        self.close_paragraph()
        return self.frames[0].blocks

    def close_paragraph(self) -> None:
        frame = self.frame
        if frame.paragraph is None:
            return
        children = _trim_inline(frame.paragraph)
        frame.paragraph = None
        if children:
            frame.blocks.append(Paragraph(children=children))

    def open_paragraph(self) -> list[InlineNode]:
        frame = self.frame
        if frame.paragraph is None:
            frame.paragraph = []
        return frame.paragraph

    def add_block(self, node: BlockNode) -> None:
        self.close_paragraph()
        self.frame.blocks.append(node)

    def add_inline(self, node: InlineNode) -> None:
        target = self.inline_buffers[-1] if self.in_inline else self.open_paragraph()
        target.append(node)

    def add_text(self, value: str) -> None:
        if self.in_inline:
            _append_text(self.inline_buffers[-1], value)
            return
        if not value.strip():
            # Inter-element whitespace only matters inside running text.
            if self.frame.paragraph is not None:
                _append_text(self.frame.paragraph, " ")
            return
        _append_text(self.open_paragraph(), value)

    def collect_inline(self, tag: Tag) -> list[InlineNode]:
        """Walk ``tag`` with an isolated inline buffer and return its contents."""
        self.inline_buffers.append([])
        try:
            self.walk_children(tag)
        finally:
            buffer = self.inline_buffers.pop()
        return buffer

    def collect_blocks(self, tag: Tag) -> list[BlockNode]:
        """Walk ``tag`` in a fresh block frame and return the blocks it produced."""
        saved_inline = self.inline_buffers
        self.inline_buffers = []
        self.frames.append(_BlockFrame())
        try:
            self.walk_children(tag)
            self.close_paragraph()
        finally:
            frame = self.frames.pop()
            self.inline_buffers = saved_inline
        return frame.blocks

    def walk_children(self, tag: Tag) -> None:
        for child in list(tag.children):
            self.walk(child)

    def walk(self, element: PageElement) -> None:
        if isinstance(element, PreformattedString):
            return
        if isinstance(element, NavigableString):
            self.add_text(_WHITESPACE.sub(" ", str(element)))
            return
        if not isinstance(element, Tag):
            return

        name = (element.name or "").lower()
        if name in DROPPED_TAGS:
            logger.debug("dropping <%s> subtree", name)
            return
        if self.in_inline:
            self._walk_inline_tag(name, element)
        else:
            self._walk_block_tag(name, element)

    def _walk_inline_tag(self, name: str, tag: Tag) -> None:
        node = self._inline_node(name, tag)
        if node is not None:
            self.add_inline(node)
        elif name == "br":
            self.add_text(" ")
        else:
            # Block markup inside inline context is flattened into its text.
            self.walk_children(tag)

    def _walk_block_tag(self, name: str, tag: Tag) -> None:
        if name in _HEADINGS:
            self.close_paragraph()
            children = _trim_inline(self.collect_inline(tag))
            if children:
                self.add_block(Heading(depth=int(name[1]), children=children))
            return
        if name == "p":
            self.close_paragraph()
            children = _trim_inline(self.collect_inline(tag))
            if children:
                self.add_block(Paragraph(children=children))
            return
        if name == "pre":
            self.add_block(Code(value=_pre_text(tag)))
            return
        if name in {"ul", "ol"}:
            self.add_block(self._convert_list(name, tag))
            return
        if name == "blockquote":
            self.close_paragraph()
            self.add_block(Blockquote(children=self.collect_blocks(tag)))
            return
        if name == "table":
            self.close_paragraph()
            table = self._convert_table(tag)
            if table is not None:
                self.add_block(table)
            return
        if name == "br":
            self.add_text(" ")
            return

        node = self._inline_node(name, tag)
        if node is not None:
            self.add_inline(node)
            return
        if name in _BLOCK_CONTAINERS:
            self.close_paragraph()
            self.walk_children(tag)
            self.close_paragraph()
            return
        self.walk_children(tag)

    def _inline_node(self, name: str, tag: Tag) -> InlineNode | None:
        """Return the inline node for formatting tags, or ``None`` otherwise."""
        if name == "a":
            url = resolve_link_target(_attr(tag, "href"), self.depth)
            return Link(url=url, children=self.collect_inline(tag))
        if name in _EMPHASIS:
            return Emphasis(children=self.collect_inline(tag))
        if name in _STRONG:
            return Strong(children=self.collect_inline(tag))
        if name == "code" or (name == "pre" and self.in_inline):
            return InlineCode(value=_WHITESPACE.sub(" ", _plain_text(tag)))
        return None

    def _convert_list(self, name: str, tag: Tag) -> List:
        ordered = name == "ol"
        items = [
            ListItem(children=self.collect_blocks(child))
            for child in tag.children
            if isinstance(child, Tag) and child.name == "li"
        ]
        return List(
            ordered=ordered,
            start=_list_start(tag) if ordered else None,
            children=items,
        )

    def _convert_table(self, tag: Tag) -> Table | None:
        rows: list[TableRow] = []
        alignments: list[AlignKind] = []
        for row_tag in _table_rows(tag):
            cell_tags = [
                child
                for child in row_tag.children
                if isinstance(child, Tag) and child.name in _CELLS
            ]
            if not cell_tags:
                continue
            if not rows:
                alignments = [_cell_alignment(cell) for cell in cell_tags]
            rows.append(TableRow(children=[self._convert_cell(c) for c in cell_tags]))

        if not rows:
            return None

        columns = max(len(row.children) for row in rows)
        for row in rows:
            row.children.extend(_empty_cell() for _ in range(columns - len(row.children)))
        alignments.extend(AlignKind.NONE for _ in range(columns - len(alignments)))
        return Table(children=rows, align=alignments)

    def _convert_cell(self, tag: Tag) -> TableCell:
        children = _trim_inline(self.collect_inline(tag))
        return TableCell(children=children) if children else _empty_cell()


def _empty_cell() -> TableCell:
    return TableCell(children=[Text(value="")])


def _attr(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    match value:
        case str():
            return value
        case list():
            return " ".join(value)
        case _:
            return None


def _list_start(tag: Tag) -> int:
    raw = _attr(tag, "start")
    if raw is None:
        return 1
    try:
        return int(raw.strip())
    except ValueError:
        return 1


def _cell_alignment(cell: Tag) -> AlignKind:
    align = (_attr(cell, "align") or "").strip().lower()
    if not align:
        match = _TEXT_ALIGN.search(_attr(cell, "style") or "")
        align = match.group(1).lower() if match else ""
    match align:
        case "left":
            return AlignKind.LEFT
        case "right":
            return AlignKind.RIGHT
        case "center":
            return AlignKind.CENTER
        case _:
            return AlignKind.NONE


def _table_rows(table: Tag) -> list[Tag]:
    """Return rows from ``thead``/``tbody``/``tfoot`` wrappers and bare ``tr``."""
    rows: list[Tag] = []
    for child in table.children:
        if not isinstance(child, Tag):
            continue
        if child.name in _ROW_GROUPS:
            rows.extend(
                row
                for row in child.children
                if isinstance(row, Tag) and row.name == "tr"
            )
        elif child.name == "tr":
            rows.append(child)
    return rows


def _plain_text(tag: Tag) -> str:
    """Concatenate descendant text, skipping comments and dropped subtrees."""
    parts: list[str] = []
    for child in tag.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif isinstance(child, Tag) and (child.name or "").lower() not in DROPPED_TAGS:
            parts.append(_plain_text(child))
    return "".join(parts)


def _pre_text(tag: Tag) -> str:
    text = _plain_text(tag)
    # Browsers ignore a newline directly after <pre>.
    text = text.removeprefix("\n")
    return text.rstrip("\n")


def _append_text(buffer: list[InlineNode], value: str) -> None:
    if not value:
        return
    if buffer and isinstance(buffer[-1], Text):
        previous = buffer[-1]
        if previous.value.endswith(" ") and value.startswith(" "):
            value = value[1:]
        previous.value += value
        return
    buffer.append(Text(value=value))


def _trim_inline(children: list[InlineNode]) -> list[InlineNode]:
    """Strip whitespace at the edges of an inline run and drop empty text."""
    if children and isinstance(children[0], Text):
        children[0].value = children[0].value.lstrip()
    if children and isinstance(children[-1], Text):
        children[-1].value = children[-1].value.rstrip()
    return [
        child for child in children if not (isinstance(child, Text) and not child.value)
    ]


__all__ = ["check_html_size", "html_to_ast"]
