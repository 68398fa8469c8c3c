"""Exceptions raised while converting HTML to Markdown."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for failures that abort conversion of a single fragment."""


class HtmlTooLargeError(ConversionError):
    """Raised when an HTML fragment exceeds the size guard."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"HTML too large: {size} bytes (max {limit})")


class HtmlParseError(ConversionError):
    """Raised when the HTML cannot be tokenized or walked."""


class RenderError(Exception):
    """Raised by a renderer that cannot handle a node.

    The conversion pipeline recovers from these by falling back to plain-text
    extraction, so callers of :func:`docs_md.html_to_md.convert_html_to_markdown`
    never see them.
    """


class UnsupportedNodeError(RenderError):
    """Raised when a renderer is handed a node type it does not support."""

    def __init__(self, renderer: str, node: object) -> None:
        self.renderer = renderer
        self.node_type = type(node).__name__
        super().__init__(f"{renderer} cannot render {self.node_type}")


class InvalidTableError(RenderError):
    """Raised when a table has no rows to render."""


__all__ = [
    "ConversionError",
    "HtmlParseError",
    "HtmlTooLargeError",
    "InvalidTableError",
    "RenderError",
    "UnsupportedNodeError",
]
