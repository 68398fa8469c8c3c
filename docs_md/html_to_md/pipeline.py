"""HTML fragment to Markdown conversion pipeline."""

from __future__ import annotations

import logging
import typing as typ

from .converter import html_to_ast
from .errors import RenderError
from .render import CompositeRenderer, extract_plain_text, extract_text

if typ.TYPE_CHECKING:
    from .ast import Root

logger = logging.getLogger(__name__)


def render_root(root: Root, *, renderer: CompositeRenderer | None = None) -> str:
    """Render a content tree, degrading to plain text if a renderer fails."""
    active = renderer or CompositeRenderer()
    try:
        return active.render_many(root.children)
    except RenderError as exc:
        logger.warning("structured rendering failed, using plain text: %s", exc)
        return extract_plain_text(root)


def convert_html_to_markdown(
    html: str, depth: int = 0, *, renderer: CompositeRenderer | None = None
) -> str:
    """Convert an HTML fragment into Markdown.

    Parameters
    ----------
    html : str
        Fragment from the documentation export.
    depth : int, optional
        Directory depth of the output file below the documentation root;
        internal links receive this many ``../`` prefixes.
    renderer : CompositeRenderer, optional
        Renderer to use instead of the default composite renderer.

    Returns
    -------
    str
        Markdown text. Rendering failures never surface here: the plain-text
        extraction of the tree is returned instead.

    Raises
    ------
    HtmlTooLargeError
        If ``html`` exceeds the size guard.
    HtmlParseError
        If ``html`` cannot be tokenized or walked.

    Examples
    --------
    >>> convert_html_to_markdown("<p>Hello</p>")
    'Hello'
    >>> convert_html_to_markdown('<a href="/DOCS-BASE/tutorial/">Tutorial</a>', 1)
    '[Tutorial](../tutorial.md)'
    """
    return render_root(html_to_ast(html, depth), renderer=renderer)


def html_to_plain_text(html: str) -> str:
    """Return the character data of ``html`` with all markup removed."""
    return extract_text(html_to_ast(html, 0).children).strip()


__all__ = ["convert_html_to_markdown", "html_to_plain_text", "render_root"]
