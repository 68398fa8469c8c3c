"""Dispatch an entry body to the generator for its kind.

Examples
--------
>>> from docs_md.schema import Body, Entry
>>> entry = Entry("/DOCS-BASE/overview", "Overview", body=Body("html", "<h1>Overview</h1><p>Hi</p>"))
>>> generate_body_markdown(entry)
'Hi'
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md import ConversionError, convert_html_to_markdown
from docs_md.html_to_md.render.inline import unescape_text
from docs_md.schema import (
    CategoryContent,
    FuncContent,
    GroupContent,
    HtmlContent,
    SchemaError,
    SymbolsContent,
    TypeContent,
    UnknownContent,
    decode_body_content,
)

from .definitions import (
    render_category_markdown,
    render_group_markdown,
    render_symbols_markdown,
    render_type_markdown,
)
from .func import render_func_markdown

if typ.TYPE_CHECKING:
    from docs_md.schema import BodyContent, Entry


class BodyRenderError(RuntimeError):
    """Raised when an entry body cannot be rendered.

    The underlying :class:`~docs_md.schema.SchemaError` or
    :class:`~docs_md.html_to_md.ConversionError` is chained as ``__cause__``.
    """

    def __init__(self, route: str, message: str) -> None:
        self.route = route
        super().__init__(f"{route}: {message}")


def generate_body_markdown(entry: Entry) -> str:
    """Render the Markdown body of ``entry``.

    Parameters
    ----------
    entry : Entry
        Documentation entry; entries without a body render as an empty string.

    Returns
    -------
    str
        Markdown for the body. Unknown body kinds produce an HTML comment
        placeholder.

    Raises
    ------
    BodyRenderError
        If the entry fails validation, its content does not match its kind,
        or embedded HTML cannot be converted.
    """
    try:
        entry.validate()
        if entry.body is None:
            return ""
        content = decode_body_content(entry.body)
        return render_body_content(content, entry.depth, title=entry.title)
    except (SchemaError, ConversionError) as exc:
        raise BodyRenderError(entry.route, str(exc)) from exc


def render_body_content(content: BodyContent, depth: int, *, title: str = "") -> str:
    """Render decoded body ``content`` for a page at ``depth``."""
    match content:
        case HtmlContent(html=html):
            return remove_duplicate_heading(convert_html_to_markdown(html, depth), title)
        case FuncContent():
            return render_func_markdown(content, depth)
        case TypeContent():
            return render_type_markdown(content, depth)
        case CategoryContent():
            return render_category_markdown(content, depth)
        case GroupContent():
            return render_group_markdown(content, depth)
        case SymbolsContent():
            return render_symbols_markdown(content, depth)
        case UnknownContent(kind=kind):
            return f"<!-- Unknown body kind: {kind} -->"
        case _:
            typ.assert_never(content)


def remove_duplicate_heading(markdown: str, title: str) -> str:
    """Drop a leading ``# <title>`` heading and the blank lines after it.

    The comparison ignores case, surrounding whitespace and Markdown escapes
    in the heading. Only the first non-blank line is considered.

    Examples
    --------
    >>> remove_duplicate_heading("# overview\\n\\nSome content", "Overview")
    'Some content'
    >>> remove_duplicate_heading("## Overview\\n\\nText", "Overview")
    '## Overview\\n\\nText'
    """
    lines = markdown.split("\n")
    wanted = title.strip().lower()
    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped:
            continue
        heading_text = unescape_text(stripped[2:]).strip().lower()
        if stripped.startswith("# ") and heading_text == wanted:
            rest = index + 1
            while rest < len(lines) and not lines[rest].strip():
                rest += 1
            return "\n".join(lines[rest:])
        break
    return markdown


__all__ = [
    "BodyRenderError",
    "generate_body_markdown",
    "remove_duplicate_heading",
    "render_body_content",
]
