"""Tests for decoding and validating documentation export entries."""

from __future__ import annotations

import json

import pytest

from docs_md.schema import (
    Body,
    CategoryContent,
    Entry,
    FuncContent,
    HtmlContent,
    InvalidContentError,
    MissingFieldError,
    SchemaError,
    SymbolsContent,
    TypeContent,
    UnknownContent,
    UnsafeRouteError,
    decode_body_content,
    load_entries,
    route_depth,
)


@pytest.fixture
def overview_payload() -> dict[str, object]:
    """Return a root entry with outline, unknown fields, and one child."""
    return {
        "route": "/DOCS-BASE/",
        "title": "Overview",
        "description": "Start here.",
        "part": None,
        "outline": [
            {"id": "intro", "name": "Intro", "children": [{"id": "a", "name": "A"}]}
        ],
        "body": {"kind": "html", "content": "<p>Welcome</p>"},
        "children": [
            {
                "route": "/DOCS-BASE/tutorial/",
                "title": "Tutorial",
                "body": {"kind": "html", "content": "<p>Learn</p>"},
                "futureField": [1, 2],
            }
        ],
    }


def test_load_single_entry(overview_payload: dict[str, object]) -> None:
    entries = load_entries(json.dumps(overview_payload))
    assert len(entries) == 1, "a single object yields one root entry"
    root = entries[0]
    assert root.title == "Overview"
    assert root.description == "Start here."
    assert root.outline[0].children[0].name == "A", "outline is decoded recursively"
    assert root.body == Body("html", "<p>Welcome</p>")
    assert root.extra == {"part": None}, "unknown fields are preserved"
    assert root.children[0].extra == {"futureField": [1, 2]}


def test_load_entry_array(overview_payload: dict[str, object]) -> None:
    entries = load_entries(json.dumps([overview_payload, overview_payload]).encode())
    assert [entry.route for entry in entries] == ["/DOCS-BASE/", "/DOCS-BASE/"]


@pytest.mark.parametrize("payload", ["{not json", "42", '"text"'])
def test_rejects_malformed_exports(payload: str) -> None:
    with pytest.raises(SchemaError):
        load_entries(payload)


def test_missing_title_is_a_schema_error() -> None:
    with pytest.raises(MissingFieldError):
        load_entries('{"route": "/DOCS-BASE/x"}')


def test_body_must_be_an_object() -> None:
    with pytest.raises(InvalidContentError):
        load_entries('{"route": "/DOCS-BASE/x", "title": "X", "body": "html"}')


@pytest.mark.parametrize(
    ("route", "title", "error"),
    [
        ("", "Title", MissingFieldError),
        ("/DOCS-BASE/x", "", MissingFieldError),
        ("/DOCS-BASE//etc/passwd", "T", UnsafeRouteError),
        ("/DOCS-BASE/\\windows", "T", UnsafeRouteError),
        ("/DOCS-BASE/C:/windows", "T", UnsafeRouteError),
        ("/DOCS-BASE/guide/../../escape", "T", UnsafeRouteError),
    ],
)
def test_validate_rejects_bad_entries(
    route: str, title: str, error: type[SchemaError]
) -> None:
    with pytest.raises(error):
        Entry(route=route, title=title).validate()


def test_validate_accepts_nested_routes() -> None:
    Entry(route="/DOCS-BASE/reference/foundations/str/", title="Str").validate()


@pytest.mark.parametrize(
    ("route", "depth"),
    [
        ("/DOCS-BASE/", 0),
        ("/DOCS-BASE/tutorial/", 0),
        ("/DOCS-BASE/reference/styling/", 1),
        ("/DOCS-BASE/reference/math/attach", 2),
    ],
)
def test_route_depth(route: str, depth: int) -> None:
    assert route_depth(route) == depth
    assert Entry(route=route, title="T").depth == depth


def test_decode_func_content() -> None:
    body = Body(
        "func",
        {
            "name": "assert",
            "path": [],
            "oneliner": "Ensures a condition.",
            "params": [
                {
                    "name": "condition",
                    "types": ["bool"],
                    "required": True,
                    "positional": True,
                }
            ],
            "returns": ["none"],
            "self": False,
            "scope": [{"name": "eq", "params": []}],
        },
    )
    content = decode_body_content(body)
    assert isinstance(content, FuncContent)
    assert content.title == "assert", "title falls back to the name"
    assert content.params[0].required and content.params[0].positional
    assert content.scope[0].name == "eq"


def test_decode_type_with_constructor() -> None:
    content = decode_body_content(
        Body("type", {"name": "str", "constructor": {"name": "str"}, "scope": []})
    )
    assert isinstance(content, TypeContent)
    assert content.constructor is not None
    assert content.constructor.name == "str"


def test_decode_symbols_accepts_both_key_styles() -> None:
    content = decode_body_content(
        Body(
            "symbols",
            {
                "list": [
                    {"name": "arrow", "value": "→", "markupShorthand": "->"},
                    {"name": "dot", "codepoint": 8901, "math_shorthand": "dot"},
                ]
            },
        )
    )
    assert isinstance(content, SymbolsContent)
    assert content.symbols[0].markup_shorthand == "->"
    assert content.symbols[1].math_shorthand == "dot"
    assert content.symbols[1].codepoint == 8901


def test_decode_category_items() -> None:
    content = decode_body_content(
        Body("category", {"items": [{"name": "str", "route": "/DOCS-BASE/str/"}]})
    )
    assert isinstance(content, CategoryContent)
    assert content.items[0].route == "/DOCS-BASE/str/"


def test_decode_html_and_unknown_kinds() -> None:
    assert decode_body_content(Body("html", "<p>x</p>")) == HtmlContent("<p>x</p>")
    assert decode_body_content(Body("mystery", {"a": 1})) == UnknownContent("mystery")


@pytest.mark.parametrize(
    "body",
    [
        Body("html", {"not": "a string"}),
        Body("func", "<p>not an object</p>"),
        Body("func", {"params": []}),
        Body("symbols", {"list": [{"name": "x", "codepoint": "U+0041"}]}),
        Body("category", {"items": "nope"}),
    ],
)
def test_decode_rejects_mismatched_content(body: Body) -> None:
    with pytest.raises(InvalidContentError):
        decode_body_content(body)
