"""Decode documentation export JSON into :class:`Entry` trees."""

from __future__ import annotations

import typing as typ

import msgspec

from .models import (
    Body,
    Entry,
    InvalidContentError,
    MissingFieldError,
    OutlineItem,
    SchemaError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_KNOWN_FIELDS = frozenset(
    {"route", "title", "description", "outline", "body", "children"}
)


def load_entries(payload: str | bytes) -> list[Entry]:
    """Parse a documentation export into a list of entries.

    Parameters
    ----------
    payload : str or bytes
        JSON text whose top level is a single entry object or an array of
        entry objects.

    Returns
    -------
    list[Entry]
        Decoded root entries, each carrying its nested children.

    Raises
    ------
    SchemaError
        If the JSON is malformed or an entry lacks required fields.

    Examples
    --------
    >>> entries = load_entries('{"route": "/DOCS-BASE/", "title": "Overview"}')
    >>> entries[0].title
    'Overview'
    """
    try:
        decoded = msgspec.json.decode(payload)
    except msgspec.DecodeError as exc:
        msg = f"Failed to parse docs JSON: {exc}"
        raise SchemaError(msg) from exc

    match decoded:
        case dict():
            return [entry_from_mapping(decoded)]
        case list():
            return [entry_from_mapping(_require_mapping(item)) for item in decoded]
        case _:
            msg = "Docs JSON must be an entry object or an array of entries"
            raise SchemaError(msg)


def entry_from_mapping(data: cabc.Mapping[str, typ.Any]) -> Entry:
    """Build an :class:`Entry` (and its children) from a decoded JSON object.

    Unknown keys, including ``part``, are preserved on ``Entry.extra``.
    """
    route = data.get("route")
    title = data.get("title")
    if not isinstance(route, str):
        msg = "Missing route in docs entry"
        raise MissingFieldError(msg)
    if not isinstance(title, str):
        msg = f"Missing title in docs entry {route}"
        raise MissingFieldError(msg)

    description = data.get("description")
    body_raw = data.get("body")
    return Entry(
        route=route,
        title=title,
        description=description if isinstance(description, str) else None,
        outline=[
            _outline_from_mapping(_require_mapping(item))
            for item in data.get("outline") or []
        ],
        body=_body_from_mapping(_require_mapping(body_raw)) if body_raw else None,
        children=[
            entry_from_mapping(_require_mapping(child))
            for child in data.get("children") or []
        ],
        extra={key: value for key, value in data.items() if key not in _KNOWN_FIELDS},
    )


def _require_mapping(value: object) -> cabc.Mapping[str, typ.Any]:
    if not isinstance(value, dict):
        msg = f"Expected a JSON object, got {type(value).__name__}"
        raise InvalidContentError(msg)
    return typ.cast("cabc.Mapping[str, typ.Any]", value)


def _outline_from_mapping(data: cabc.Mapping[str, typ.Any]) -> OutlineItem:
    return OutlineItem(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        children=[
            _outline_from_mapping(_require_mapping(child))
            for child in data.get("children") or []
        ],
    )


def _body_from_mapping(data: cabc.Mapping[str, typ.Any]) -> Body:
    kind = data.get("kind")
    if not isinstance(kind, str):
        msg = "Body is missing its 'kind' discriminator"
        raise InvalidContentError(msg)
    return Body(kind=kind, content=data.get("content"))


__all__ = ["entry_from_mapping", "load_entries"]
