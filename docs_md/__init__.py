"""Convert structured documentation exports from HTML into Markdown."""

from __future__ import annotations

from .bodies import BodyRenderError, generate_body_markdown
from .html_to_md import (
    ConversionError,
    HtmlParseError,
    HtmlTooLargeError,
    convert_html_to_markdown,
)
from .links import rewrite_docs_link
from .schema import Entry, SchemaError, load_entries

__all__ = [
    "BodyRenderError",
    "ConversionError",
    "Entry",
    "HtmlParseError",
    "HtmlTooLargeError",
    "SchemaError",
    "convert_html_to_markdown",
    "generate_body_markdown",
    "load_entries",
    "rewrite_docs_link",
]
