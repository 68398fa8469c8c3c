"""Typed dataclasses describing documentation export entries."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from docs_md._constants import DOCS_BASE

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


class SchemaError(ValueError):
    """Raised when a documentation entry is malformed or unsafe."""


class MissingFieldError(SchemaError):
    """Raised when a required entry field is absent or empty."""


class UnsafeRouteError(SchemaError):
    """Raised when an entry route escapes the documentation root."""


class InvalidContentError(SchemaError):
    """Raised when a body payload does not match its declared kind."""


@dc.dataclass(slots=True)
class OutlineItem:
    """Table-of-contents node attached to an entry."""

    id: str
    name: str
    children: list[OutlineItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Body:
    """Tagged page content: ``kind`` selects how ``content`` is interpreted.

    Attributes
    ----------
    kind : str
        Body discriminator such as ``"html"``, ``"func"``, or ``"symbols"``.
    content : Any
        Raw JSON value; an HTML string for ``html`` bodies and a mapping for
        structured definitions.
    """

    kind: str
    content: typ.Any

    def as_html(self) -> str:
        """Return the content as HTML or raise when it is structured data."""
        if not isinstance(self.content, str):
            msg = f"Expected HTML string for body kind '{self.kind}'"
            raise InvalidContentError(msg)
        return self.content


@dc.dataclass(slots=True)
class Entry:
    """A documentation page and its nested child pages.

    Attributes
    ----------
    route : str
        Route below the documentation root, e.g. ``/DOCS-BASE/tutorial/``.
    title : str
        Human-readable page title.
    description : str | None
        Optional summary used for frontmatter.
    outline : list[OutlineItem]
        Table-of-contents items for the page.
    body : Body | None
        Page content; ``None`` for pure navigation nodes.
    children : list[Entry]
        Nested documentation pages.
    extra : dict[str, Any]
        Unknown fields preserved from the export for schema evolution.
    """

    route: str
    title: str
    description: str | None = None
    outline: list[OutlineItem] = dc.field(default_factory=list)
    body: Body | None = None
    children: list[Entry] = dc.field(default_factory=list)
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)

    def validate(self) -> None:
        """Check the entry is renderable and its route stays inside the docs root.

        Raises
        ------
        MissingFieldError
            If ``route`` or ``title`` is empty.
        UnsafeRouteError
            If the route (below the docs-base sentinel) is absolute, rooted,
            or contains ``..`` segments.
        """
        if not self.route:
            msg = "Missing route in docs entry"
            raise MissingFieldError(msg)
        if not self.title:
            msg = "Missing title in docs entry"
            raise MissingFieldError(msg)

        relative = self.route.removeprefix(DOCS_BASE)
        if relative.startswith(("/", "\\")) or _DRIVE_PATTERN.match(relative):
            msg = f"Absolute or rooted path not allowed: {self.route}"
            raise UnsafeRouteError(msg)
        if ".." in re.split(r"[/\\]", relative):
            msg = f"Path traversal (..) not allowed: {self.route}"
            raise UnsafeRouteError(msg)

    @property
    def depth(self) -> int:
        """Return how many directories below the docs root this page lives."""
        return route_depth(self.route)


def route_depth(route: str) -> int:
    """Return the directory depth of ``route`` relative to the docs root.

    Examples
    --------
    >>> route_depth("/DOCS-BASE/")
    0
    >>> route_depth("/DOCS-BASE/reference/math/attach")
    2
    """
    relative = route.removeprefix(DOCS_BASE)
    return relative.rstrip("/").count("/")


__all__ = [
    "Body",
    "Entry",
    "InvalidContentError",
    "MissingFieldError",
    "OutlineItem",
    "SchemaError",
    "UnsafeRouteError",
    "route_depth",
]
