"""Tests for the structured body generators and the body router.

Function, type, category, group, and symbol pages are built from decoded
content dataclasses; prose pages are converted from HTML with any heading
that repeats the page title removed. Errors raised while decoding or
converting a body surface as :class:`BodyRenderError` for the entry route.
"""

from __future__ import annotations

import pytest

from docs_md._constants import MAX_HTML_SIZE
from docs_md.bodies import (
    BodyRenderError,
    default_value_to_text,
    extract_html_from_details,
    format_function_signature,
    generate_body_markdown,
    param_lines,
    remove_duplicate_heading,
    render_category_markdown,
    render_func_markdown,
    render_group_markdown,
    render_symbols_markdown,
    render_type_markdown,
    symbol_unicode,
)
from docs_md.html_to_md import HtmlTooLargeError
from docs_md.schema import (
    Body,
    CategoryContent,
    CategoryItem,
    Entry,
    FuncContent,
    GroupContent,
    InvalidContentError,
    ParamContent,
    SymbolEntry,
    SymbolsContent,
    TypeContent,
    UnsafeRouteError,
)

ASSERT_FUNC = {
    "name": "assert",
    "title": "Assert",
    "path": [],
    "oneliner": "Ensures that a condition is fulfilled.",
    "details": "<p>Fails with an error.</p>",
    "params": [
        {
            "name": "condition",
            "details": "<p>The condition.</p>",
            "types": ["bool"],
            "required": True,
            "positional": True,
        }
    ],
    "returns": ["none"],
    "scope": [],
}


def _condition() -> ParamContent:
    return ParamContent(
        name="condition", types=["bool"], required=True, positional=True
    )


class TestFuncPages:
    """Function pages: signature, description, parameters, and returns."""

    def test_func_entry_sections(self) -> None:
        entry = Entry(
            route="/DOCS-BASE/reference/foundations/assert",
            title="Assert",
            body=Body("func", ASSERT_FUNC),
        )
        markdown = generate_body_markdown(entry)
        assert "## Signature" in markdown
        assert "## Parameters" in markdown
        assert "**condition**" in markdown
        assert "required, positional" in markdown

    def test_func_page_layout(self) -> None:
        entry = Entry(
            route="/DOCS-BASE/reference/foundations/assert",
            title="Assert",
            body=Body("func", ASSERT_FUNC),
        )
        assert generate_body_markdown(entry) == (
            "## Signature\n\n"
            "`assert(condition: bool) -> none`\n\n"
            "Ensures that a condition is fulfilled.\n\n"
            "Fails with an error.\n\n"
            "## Parameters\n\n"
            "- **condition** (`bool`), required, positional:\n"
            "  The condition.\n\n"
            "## Returns\n\n"
            "`none`"
        )

    def test_example_section(self) -> None:
        func = FuncContent(name="box", example="<pre>#box[hi]</pre>")
        markdown = render_func_markdown(func, 0)
        assert "## Example\n\n```\n#box[hi]\n```" in markdown

    def test_methods_are_one_level_deeper(self) -> None:
        mapper = ParamContent(
            name="mapper", types=["function"], required=True, positional=True
        )
        func = FuncContent(
            name="array",
            scope=[
                FuncContent(
                    name="map",
                    path=["array"],
                    oneliner="Maps each item.",
                    params=[mapper],
                    returns=["array"],
                )
            ],
        )
        markdown = render_func_markdown(func, 0)
        assert markdown.endswith(
            "## Methods\n\n"
            "### `map`\n\n"
            "`array.map(mapper: function) -> array`\n\n"
            "Maps each item."
        )

    def test_details_links_use_page_depth(self) -> None:
        func = FuncContent(
            name="text", details='<p>See <a href="/DOCS-BASE/tutorial/">this</a>.</p>'
        )
        assert "See [this](../../tutorial.md)." in render_func_markdown(func, 2)


class TestParameters:
    def test_default_is_shown_inline(self) -> None:
        param = ParamContent(name="size", types=["length"], default="auto", named=True)
        assert param_lines(param, 0) == [
            "- **size** (`length`), optional, named, default: `auto`:"
        ]

    def test_markup_default_becomes_text(self) -> None:
        param = ParamContent(
            name="inset",
            default="<code><span>100%</span> <span>+</span> <span>3pt</span></code>",
        )
        (header,) = param_lines(param, 0)
        assert header.endswith("default: `100% + 3pt`:")
        assert "<span>" not in header

    def test_description_and_example_are_indented(self) -> None:
        param = ParamContent(
            name="body",
            details="<p>The content.</p>",
            example="<pre>#box[hi]</pre>",
        )
        assert param_lines(param, 0) == [
            "- **body**, optional:",
            "  The content.",
            "",
            "  Example:",
            "",
            "  ```",
            "  #box[hi]",
            "  ```",
        ]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("<code><span>100%</span> <span>+</span> <span>3pt</span></code>", "100% + 3pt"),
            ("auto", "auto"),
            ([1, 2, 3], "[1,2,3]"),
            (False, "false"),
            ({"a": 1}, '{"a":1}'),
        ],
    )
    def test_default_value_to_text(self, value: object, expected: str) -> None:
        assert default_value_to_text(value) == expected


def test_signature_uses_the_dotted_path() -> None:
    func = FuncContent(
        name="map",
        path=["array"],
        params=[
            ParamContent(
                name="mapper", types=["function"], required=True, positional=True
            )
        ],
        returns=["array"],
    )
    assert format_function_signature(func) == "`array.map(mapper: function) -> array`"


def test_signature_lists_union_types_and_defaults() -> None:
    func = FuncContent(
        name="text",
        params=[
            _condition(),
            ParamContent(name="fill", types=["color", "none"], default="black"),
        ],
    )
    assert format_function_signature(func) == (
        "`text(condition: bool, fill: color | none = black)`"
    )


def test_type_page_has_constructor_and_methods() -> None:
    content = TypeContent(
        name="str",
        details="<p>A string.</p>",
        constructor=FuncContent(
            name="str",
            params=[
                ParamContent(
                    name="value", types=["any"], required=True, positional=True
                )
            ],
            returns=["str"],
        ),
        scope=[
            FuncContent(name="len", path=["str"], oneliner="Length.", returns=["int"])
        ],
    )
    assert render_type_markdown(content, 0) == (
        "A string.\n\n"
        "## Constructor\n\n"
        "### Signature\n\n"
        "`str(value: any) -> str`\n\n"
        "### Parameters\n\n"
        "- **value** (`any`), required, positional:\n\n"
        "### Returns\n\n"
        "`str`\n\n"
        "## Methods\n\n"
        "### `len`\n\n"
        "`str.len() -> int`\n\n"
        "Length."
    )


def test_category_links_are_relative() -> None:
    content = CategoryContent(
        details="<p>Basic types.</p>",
        items=[
            CategoryItem("str", "/DOCS-BASE/reference/foundations/str/", "Text."),
            CategoryItem("int", "/DOCS-BASE/reference/foundations/int/"),
        ],
    )
    assert render_category_markdown(content, 1) == (
        "Basic types.\n\n"
        "## Items\n\n"
        "- [str](../reference/foundations/str.md) - Text.\n"
        "- [int](../reference/foundations/int.md)"
    )


def test_group_splits_functions_and_elements() -> None:
    content = GroupContent(
        functions=[
            FuncContent(name="sin", path=["calc"], title="Sine", oneliner="Sine."),
            FuncContent(name="rect", title="Rectangle", element=True),
            FuncContent(name="here", title="Here", contextual=True),
        ]
    )
    assert render_group_markdown(content, 1) == (
        "## Functions\n\n"
        "- [Sine](../calc/sin.md) - Sine.\n\n"
        "## Elements\n\n"
        "- [Rectangle](../rect.md)"
    )


def test_symbols_table() -> None:
    content = SymbolsContent(
        symbols=[
            SymbolEntry("arrow", value="→", markup_shorthand="->"),
            SymbolEntry("divides", codepoint=0x2223, math_shorthand="|"),
        ]
    )
    lines = render_symbols_markdown(content, 0).split("\n")
    assert lines[0] == "## Symbols"
    assert lines[2].split() == ["|", "Name", "|", "Markup", "|", "Math", "|", "Unicode", "|"]
    assert "U+2192" in lines[4]
    assert "`\\|`" in lines[5], "pipes inside cells are escaped"
    assert "U+2223" in lines[5]


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        (SymbolEntry("a", value="A", codepoint=0x263A), "U+263A"),
        (SymbolEntry("b", value="→"), "U+2192"),
        (SymbolEntry("c"), "-"),
    ],
)
def test_symbol_unicode_prefers_codepoint(symbol: SymbolEntry, expected: str) -> None:
    assert symbol_unicode(symbol) == expected


class TestRouter:
    """Dispatch by body kind and error wrapping."""

    def test_html_body_drops_duplicate_title(self) -> None:
        entry = Entry(
            route="/DOCS-BASE/reference/styling/",
            title="Styling",
            body=Body(
                "html",
                '<h1>Styling</h1><p>See <a href="/DOCS-BASE/tutorial/">the tutorial</a>.</p>',
            ),
        )
        assert generate_body_markdown(entry) == "See [the tutorial](../tutorial.md)."

    def test_entry_without_body_is_empty(self) -> None:
        assert generate_body_markdown(Entry(route="/DOCS-BASE/x", title="X")) == ""

    def test_unknown_kind_is_a_placeholder(self) -> None:
        entry = Entry(route="/DOCS-BASE/x", title="X", body=Body("widget", {"a": 1}))
        assert generate_body_markdown(entry) == "<!-- Unknown body kind: widget -->"

    @pytest.mark.parametrize(
        ("entry", "cause"),
        [
            (
                Entry(route="/DOCS-BASE//etc/passwd", title="X", body=Body("html", "")),
                UnsafeRouteError,
            ),
            (
                Entry(route="/DOCS-BASE/x", title="X", body=Body("func", "<p>no</p>")),
                InvalidContentError,
            ),
            (
                Entry(
                    route="/DOCS-BASE/x",
                    title="X",
                    body=Body("html", "a" * (MAX_HTML_SIZE + 1)),
                ),
                HtmlTooLargeError,
            ),
        ],
    )
    def test_failures_are_wrapped_with_the_route(
        self, entry: Entry, cause: type[Exception]
    ) -> None:
        with pytest.raises(BodyRenderError) as excinfo:
            generate_body_markdown(entry)
        assert excinfo.value.route == entry.route
        assert isinstance(excinfo.value.__cause__, cause)


@pytest.mark.parametrize(
    ("details", "expected"),
    [
        ("<p>A</p>", "<p>A</p>"),
        (
            [
                {"kind": "html", "content": "<p>A</p>"},
                {"kind": "example", "content": "ignored"},
                {"kind": "html", "content": "<p>B</p>"},
            ],
            "<p>A</p>\n\n<p>B</p>",
        ),
        (None, ""),
        (5, ""),
    ],
)
def test_extract_html_from_details(details: object, expected: str) -> None:
    assert extract_html_from_details(details) == expected


@pytest.mark.parametrize(
    ("markdown", "expected"),
    [
        ("# Title\n\nBody", "Body"),
        ("\n#  title \n\n\nBody", "Body"),
        ("# Other\n\nBody", "# Other\n\nBody"),
        ("Intro\n\n# Title", "Intro\n\n# Title"),
    ],
)
def test_remove_duplicate_heading(markdown: str, expected: str) -> None:
    assert remove_duplicate_heading(markdown, "Title") == expected


def test_remove_duplicate_heading_ignores_markdown_escapes() -> None:
    assert remove_duplicate_heading("# snake\\_case\n\nBody", "snake_case") == "Body"
