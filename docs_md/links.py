"""Rewrite internal documentation routes into relative Markdown file links.

Examples
--------
>>> from docs_md.links import rewrite_docs_link
>>> rewrite_docs_link("/DOCS-BASE/tutorial/", 1)
'../tutorial.md'
>>> rewrite_docs_link("https://example.com/", 3)
'https://example.com/'
"""

from __future__ import annotations

from ._constants import DOCS_BASE, EXTERNAL_PREFIXES

FALLBACK_TARGET = "#"


def rewrite_docs_link(href: str, depth: int) -> str:
    """Map an internal docs route to a ``.md`` path relative to the current page.

    Parameters
    ----------
    href : str
        Link target as found in the HTML export.
    depth : int
        Directory depth of the page containing the link, relative to the
        documentation root.

    Returns
    -------
    str
        ``"../" * depth`` followed by the target file and any query or
        fragment. External URLs, anchors, and anything outside the docs root
        are returned unchanged.
    """
    if href.startswith(EXTERNAL_PREFIXES) or href.startswith("#"):
        return href
    if not href.startswith(DOCS_BASE):
        return href

    remainder = href.removeprefix(DOCS_BASE)
    remainder, hash_sep, fragment = remainder.partition("#")
    path, query_sep, query = remainder.partition("?")

    # Never emit a target that climbs out of the output tree.
    if ".." in path.split("/"):
        return href

    path = path.rstrip("/") or "index"
    target = f"{'../' * depth}{path}.md"
    if query_sep:
        target = f"{target}?{query}"
    if hash_sep:
        target = f"{target}#{fragment}"
    return target


def resolve_link_target(href: str | None, depth: int) -> str:
    """Return the rewritten link target, or ``#`` when ``href`` is missing."""
    if href is None:
        return FALLBACK_TARGET
    return rewrite_docs_link(href, depth)


__all__ = ["FALLBACK_TARGET", "resolve_link_target", "rewrite_docs_link"]
