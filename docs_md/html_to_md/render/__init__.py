"""Renderers turning content-tree nodes into Markdown."""

from __future__ import annotations

from .base import BlockResult, InlineResult, NodeRenderer, RenderResult, TableResult
from .composite import CompositeRenderer
from .compositor import compose, format_table
from .fallback import extract_plain_text, extract_text
from .fast import BlockquoteRenderer, HeadingRenderer, ListRenderer, ParagraphRenderer
from .standard import StandardRenderer
from .table import TableRenderer

__all__ = [
    "BlockResult",
    "BlockquoteRenderer",
    "CompositeRenderer",
    "HeadingRenderer",
    "InlineResult",
    "ListRenderer",
    "NodeRenderer",
    "ParagraphRenderer",
    "RenderResult",
    "StandardRenderer",
    "TableRenderer",
    "TableResult",
    "compose",
    "extract_plain_text",
    "extract_text",
    "format_table",
]
