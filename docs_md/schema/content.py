"""Structured body payloads decoded from an entry's ``body.content``.

The export stores function, type, category, group, and symbol definitions as
loosely-typed JSON objects. :func:`decode_body_content` turns a
:class:`~docs_md.schema.models.Body` into one member of the closed
:data:`BodyContent` union so the rest of the pipeline never handles raw
dictionaries.

Examples
--------
>>> from docs_md.schema import Body, FuncContent, decode_body_content
>>> content = decode_body_content(Body("func", {"name": "assert"}))
>>> isinstance(content, FuncContent)
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import Body, InvalidContentError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class ParamContent:
    """A single function parameter."""

    name: str
    details: typ.Any = None
    example: typ.Any = None
    types: list[str] = dc.field(default_factory=list)
    strings: list[typ.Any] = dc.field(default_factory=list)
    default: typ.Any = None
    positional: bool = False
    named: bool = False
    required: bool = False
    variadic: bool = False
    settable: bool = False


@dc.dataclass(slots=True)
class FuncContent:
    """A function definition, possibly with nested scoped functions."""

    name: str
    path: list[str] = dc.field(default_factory=list)
    title: str = ""
    keywords: list[str] = dc.field(default_factory=list)
    oneliner: str | None = None
    element: bool = False
    contextual: bool = False
    details: typ.Any = None
    example: typ.Any = None
    is_self: bool = False
    params: list[ParamContent] = dc.field(default_factory=list)
    returns: list[str] = dc.field(default_factory=list)
    scope: list[FuncContent] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class TypeContent:
    """A type definition with an optional constructor and methods."""

    name: str
    title: str = ""
    keywords: list[str] = dc.field(default_factory=list)
    oneliner: str | None = None
    details: typ.Any = None
    constructor: FuncContent | None = None
    scope: list[FuncContent] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class CategoryItem:
    """A linked member of a category listing."""

    name: str
    route: str
    oneliner: str | None = None
    code: bool = False


@dc.dataclass(slots=True)
class CategoryContent:
    """A category page listing related definitions."""

    name: str = ""
    title: str = ""
    details: typ.Any = None
    items: list[CategoryItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class GroupContent:
    """A group of functions and elements documented on one page."""

    name: str = ""
    title: str = ""
    details: typ.Any = None
    functions: list[FuncContent] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class SymbolEntry:
    """One row of a symbol table."""

    name: str
    value: str | None = None
    codepoint: int | None = None
    markup_shorthand: str | None = None
    math_shorthand: str | None = None


@dc.dataclass(slots=True)
class SymbolsContent:
    """A symbol table page."""

    name: str = ""
    title: str = ""
    details: typ.Any = None
    symbols: list[SymbolEntry] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class HtmlContent:
    """A prose page stored as an HTML fragment."""

    html: str


@dc.dataclass(slots=True)
class UnknownContent:
    """A body whose kind this renderer does not recognise."""

    kind: str


BodyContent = (
    HtmlContent
    | FuncContent
    | TypeContent
    | CategoryContent
    | GroupContent
    | SymbolsContent
    | UnknownContent
)


def decode_body_content(body: Body) -> BodyContent:
    """Decode ``body`` into the typed payload matching its ``kind``.

    Parameters
    ----------
    body : Body
        Tagged body taken from an entry.

    Returns
    -------
    BodyContent
        One of the content dataclasses; unrecognised kinds produce
        :class:`UnknownContent` rather than an error.

    Raises
    ------
    InvalidContentError
        If the payload shape does not match the declared kind.
    """
    match body.kind:
        case "html":
            return HtmlContent(body.as_html())
        case "func":
            return _func_from_mapping(_as_mapping(body.content, "func"))
        case "type":
            return _type_from_mapping(_as_mapping(body.content, "type"))
        case "category":
            return _category_from_mapping(_as_mapping(body.content, "category"))
        case "group":
            return _group_from_mapping(_as_mapping(body.content, "group"))
        case "symbols":
            return _symbols_from_mapping(_as_mapping(body.content, "symbols"))
        case _:
            return UnknownContent(body.kind)


def _as_mapping(value: object, context: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping or raise a content error naming ``context``."""
    if not isinstance(value, dict):
        msg = f"Expected an object for {context} content, got {type(value).__name__}"
        raise InvalidContentError(msg)
    return typ.cast("cabc.Mapping[str, typ.Any]", value)


def _require_str(data: cabc.Mapping[str, typ.Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        msg = f"Missing or invalid '{key}' in {context} content"
        raise InvalidContentError(msg)
    return value


def _optional_str(data: cabc.Mapping[str, typ.Any], *keys: str) -> str | None:
    """Return the first string value found under ``keys``."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, str):
            return value
    return None


def _str_list(data: cabc.Mapping[str, typ.Any], key: str, context: str) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list):
        msg = f"Expected a list for '{key}' in {context} content"
        raise InvalidContentError(msg)
    return [str(item) for item in value]


def _mapping_list(
    data: cabc.Mapping[str, typ.Any], key: str, context: str
) -> list[cabc.Mapping[str, typ.Any]]:
    value = data.get(key) or []
    if not isinstance(value, list):
        msg = f"Expected a list for '{key}' in {context} content"
        raise InvalidContentError(msg)
    return [_as_mapping(item, f"{context}.{key}") for item in value]


def _param_from_mapping(data: cabc.Mapping[str, typ.Any]) -> ParamContent:
    return ParamContent(
        name=_require_str(data, "name", "param"),
        details=data.get("details"),
        example=data.get("example"),
        types=_str_list(data, "types", "param"),
        strings=list(data.get("strings") or []),
        default=data.get("default"),
        positional=bool(data.get("positional", False)),
        named=bool(data.get("named", False)),
        required=bool(data.get("required", False)),
        variadic=bool(data.get("variadic", False)),
        settable=bool(data.get("settable", False)),
    )


def _func_from_mapping(data: cabc.Mapping[str, typ.Any]) -> FuncContent:
    name = _require_str(data, "name", "func")
    return FuncContent(
        name=name,
        path=_str_list(data, "path", "func"),
        title=_optional_str(data, "title") or name,
        keywords=_str_list(data, "keywords", "func"),
        oneliner=_optional_str(data, "oneliner"),
        element=bool(data.get("element", False)),
        contextual=bool(data.get("contextual", False)),
        details=data.get("details"),
        example=data.get("example"),
        is_self=bool(data.get("self", False)),
        params=[_param_from_mapping(p) for p in _mapping_list(data, "params", "func")],
        returns=_str_list(data, "returns", "func"),
        scope=[_func_from_mapping(f) for f in _mapping_list(data, "scope", "func")],
    )


def _type_from_mapping(data: cabc.Mapping[str, typ.Any]) -> TypeContent:
    name = _require_str(data, "name", "type")
    constructor_raw = data.get("constructor")
    constructor = (
        _func_from_mapping(_as_mapping(constructor_raw, "type.constructor"))
        if constructor_raw is not None
        else None
    )
    return TypeContent(
        name=name,
        title=_optional_str(data, "title") or name,
        keywords=_str_list(data, "keywords", "type"),
        oneliner=_optional_str(data, "oneliner"),
        details=data.get("details"),
        constructor=constructor,
        scope=[_func_from_mapping(f) for f in _mapping_list(data, "scope", "type")],
    )


def _category_from_mapping(data: cabc.Mapping[str, typ.Any]) -> CategoryContent:
    items = [
        CategoryItem(
            name=_require_str(item, "name", "category item"),
            route=_require_str(item, "route", "category item"),
            oneliner=_optional_str(item, "oneliner"),
            code=bool(item.get("code", False)),
        )
        for item in _mapping_list(data, "items", "category")
    ]
    return CategoryContent(
        name=_optional_str(data, "name") or "",
        title=_optional_str(data, "title") or "",
        details=data.get("details"),
        items=items,
    )


def _group_from_mapping(data: cabc.Mapping[str, typ.Any]) -> GroupContent:
    return GroupContent(
        name=_optional_str(data, "name") or "",
        title=_optional_str(data, "title") or "",
        details=data.get("details"),
        functions=[
            _func_from_mapping(f) for f in _mapping_list(data, "functions", "group")
        ],
    )


def _symbols_from_mapping(data: cabc.Mapping[str, typ.Any]) -> SymbolsContent:
    symbols: list[SymbolEntry] = []
    for item in _mapping_list(data, "list", "symbols"):
        codepoint = item.get("codepoint")
        if codepoint is not None and (
            isinstance(codepoint, bool) or not isinstance(codepoint, int)
        ):
            msg = f"Invalid codepoint for symbol {item.get('name')!r}"
            raise InvalidContentError(msg)
        symbols.append(
            SymbolEntry(
                name=_require_str(item, "name", "symbol"),
                value=_optional_str(item, "value"),
                codepoint=codepoint,
                markup_shorthand=_optional_str(
                    item, "markupShorthand", "markup_shorthand"
                ),
                math_shorthand=_optional_str(item, "mathShorthand", "math_shorthand"),
            )
        )
    return SymbolsContent(
        name=_optional_str(data, "name") or "",
        title=_optional_str(data, "title") or "",
        details=data.get("details"),
        symbols=symbols,
    )


__all__ = [
    "BodyContent",
    "CategoryContent",
    "CategoryItem",
    "FuncContent",
    "GroupContent",
    "HtmlContent",
    "ParamContent",
    "SymbolEntry",
    "SymbolsContent",
    "TypeContent",
    "UnknownContent",
    "decode_body_content",
]
