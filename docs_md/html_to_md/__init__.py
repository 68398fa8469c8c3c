"""Two-stage HTML to Markdown compiler: HTML to content tree to Markdown."""

from __future__ import annotations

from .converter import check_html_size, html_to_ast
from .errors import (
    ConversionError,
    HtmlParseError,
    HtmlTooLargeError,
    InvalidTableError,
    RenderError,
    UnsupportedNodeError,
)
from .pipeline import convert_html_to_markdown, html_to_plain_text, render_root

__all__ = [
    "ConversionError",
    "HtmlParseError",
    "HtmlTooLargeError",
    "InvalidTableError",
    "RenderError",
    "UnsupportedNodeError",
    "check_html_size",
    "convert_html_to_markdown",
    "html_to_ast",
    "html_to_plain_text",
    "render_root",
]
