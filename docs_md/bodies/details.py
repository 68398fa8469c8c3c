"""Helpers shared by the structured body generators.

Examples
--------
>>> extract_html_from_details([{"kind": "html", "content": "<p>A</p>"}])
'<p>A</p>'
>>> default_value_to_text([1, 2, 3])
'[1,2,3]'
"""

from __future__ import annotations

import re
import typing as typ

import msgspec

from docs_md.html_to_md import convert_html_to_markdown, html_to_plain_text

if typ.TYPE_CHECKING:
    from docs_md.schema import FuncContent

_MARKUP = re.compile(r"<[A-Za-z/!][^>]*>")


def extract_html_from_details(details: object) -> str:
    """Return the HTML carried by a ``details`` or ``example`` field.

    A string is returned unchanged. A list keeps only the ``content`` of
    ``{"kind": "html"}`` blocks, joined by a blank line. Anything else yields
    an empty string.
    """
    match details:
        case str():
            return details
        case list():
            return "\n\n".join(
                block["content"]
                for block in details
                if isinstance(block, dict)
                and block.get("kind") == "html"
                and isinstance(block.get("content"), str)
            )
        case _:
            return ""


def details_markdown(details: object, depth: int) -> str:
    """Convert a ``details`` field to Markdown; empty when there is no HTML."""
    html = extract_html_from_details(details)
    if not html:
        return ""
    return convert_html_to_markdown(html, depth)


def default_value_to_text(value: object) -> str:
    """Render a parameter default for display inside inline code.

    Strings containing markup are reduced to their text so no raw HTML reaches
    the document; other strings are used as-is. Non-string values are
    serialized as compact JSON.

    Examples
    --------
    >>> default_value_to_text("<code><span>100%</span> <span>+</span> <span>3pt</span></code>")
    '100% + 3pt'
    >>> default_value_to_text("auto")
    'auto'
    """
    if isinstance(value, str):
        if _MARKUP.search(value):
            return html_to_plain_text(value)
        return value
    return msgspec.json.encode(value).decode("utf-8")


def format_function_signature(func: FuncContent) -> str:
    """Return the inline-code signature of ``func``.

    Examples
    --------
    >>> from docs_md.schema import FuncContent
    >>> format_function_signature(FuncContent(name="assert", returns=["none"]))
    '`assert() -> none`'
    """
    name = ".".join([*func.path, func.name])
    params: list[str] = []
    for param in func.params:
        text = param.name
        if param.types:
            text += ": " + " | ".join(param.types)
        if param.default is not None:
            text += " = " + default_value_to_text(param.default)
        params.append(text)
    signature = f"{name}({', '.join(params)})"
    if func.returns:
        signature += " -> " + " | ".join(func.returns)
    return f"`{signature}`"


__all__ = [
    "default_value_to_text",
    "details_markdown",
    "extract_html_from_details",
    "format_function_signature",
]
