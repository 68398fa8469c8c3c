"""Dedicated renderers for the most common block nodes.

Each renderer accepts exactly one node type and serializes it directly,
without going through the generic dispatch of
:class:`~docs_md.html_to_md.render.standard.StandardRenderer`.
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import Blockquote, Heading, List, Paragraph
from docs_md.html_to_md.errors import UnsupportedNodeError

from .base import BlockResult
from .blocks import blockquote_lines, heading_lines, list_lines, paragraph_lines

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.ast import Node


class ParagraphRenderer:
    def render(self, node: Node) -> BlockResult:
        if not isinstance(node, Paragraph):
            raise UnsupportedNodeError(type(self).__name__, node)
        return BlockResult(paragraph_lines(node))


class HeadingRenderer:
    def render(self, node: Node) -> BlockResult:
        if not isinstance(node, Heading):
            raise UnsupportedNodeError(type(self).__name__, node)
        return BlockResult(heading_lines(node))


class ListRenderer:
    """Render ordered and unordered lists, including nested lists."""

    def render(self, node: Node) -> BlockResult:
        if not isinstance(node, List):
            raise UnsupportedNodeError(type(self).__name__, node)
        return BlockResult(list_lines(node))


class BlockquoteRenderer:
    def render(self, node: Node) -> BlockResult:
        if not isinstance(node, Blockquote):
            raise UnsupportedNodeError(type(self).__name__, node)
        return BlockResult(blockquote_lines(node))


__all__ = ["BlockquoteRenderer", "HeadingRenderer", "ListRenderer", "ParagraphRenderer"]
