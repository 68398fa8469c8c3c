"""Markdown generation for type, category, group, and symbol pages."""

from __future__ import annotations

import typing as typ

from docs_md._constants import DOCS_BASE
from docs_md.html_to_md.ast import AlignKind
from docs_md.html_to_md.render import BlockResult, TableResult, compose
from docs_md.html_to_md.render.inline import escape_cell, escape_text, inline_code
from docs_md.links import rewrite_docs_link

from .details import details_markdown
from .func import func_results, heading, markdown_block, scoped_func_results

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_md.html_to_md.render import RenderResult
    from docs_md.schema import (
        CategoryContent,
        FuncContent,
        GroupContent,
        SymbolEntry,
        SymbolsContent,
        TypeContent,
    )

SYMBOL_COLUMNS = ["Name", "Markup", "Math", "Unicode"]
MISSING = "-"


def render_type_markdown(content: TypeContent, depth: int) -> str:
    """Render a type page: description, constructor, and methods."""
    results: list[RenderResult] = [
        markdown_block(details_markdown(content.details, depth))
    ]
    if content.constructor is not None:
        results.append(heading(2, "Constructor"))
        results.extend(func_results(content.constructor, depth, level=3))
    if content.scope:
        results.append(heading(2, "Methods"))
        for method in content.scope:
            results.extend(scoped_func_results(method, depth, level=3))
    return compose(results)


def render_category_markdown(content: CategoryContent, depth: int) -> str:
    """Render a category page listing links to its items.

    Examples
    --------
    >>> from docs_md.schema import CategoryContent, CategoryItem
    >>> item = CategoryItem("str", "/DOCS-BASE/reference/foundations/str/", "Text.")
    >>> print(render_category_markdown(CategoryContent(items=[item]), 2))
    ## Items
    <BLANKLINE>
    - [str](../../reference/foundations/str.md) - Text.
    """
    results: list[RenderResult] = [
        markdown_block(details_markdown(content.details, depth))
    ]
    if content.items:
        results.append(heading(2, "Items"))
        results.append(
            BlockResult(
                [
                    _link_line(item.name, rewrite_docs_link(item.route, depth), item.oneliner)
                    for item in content.items
                ]
            )
        )
    return compose(results)


def render_group_markdown(content: GroupContent, depth: int) -> str:
    """Render a group page, splitting plain functions from element functions.

    Contextual functions are not listed.
    """
    results: list[RenderResult] = [
        markdown_block(details_markdown(content.details, depth))
    ]
    visible = [func for func in content.functions if not func.contextual]
    sections = (
        ("Functions", [func for func in visible if not func.element]),
        ("Elements", [func for func in visible if func.element]),
    )
    for title, funcs in sections:
        if not funcs:
            continue
        results.append(heading(2, title))
        results.append(BlockResult(list(_function_links(funcs, depth))))
    return compose(results)


def render_symbols_markdown(content: SymbolsContent, depth: int) -> str:
    """Render a symbol table page.

    Examples
    --------
    >>> from docs_md.schema import SymbolEntry, SymbolsContent
    >>> table = SymbolsContent(symbols=[SymbolEntry("arrow", "→", None, "->")])
    >>> print(render_symbols_markdown(table, 0))
    ## Symbols
    <BLANKLINE>
    | Name  | Markup | Math | Unicode |
    | ----- | ------ | ---- | ------- |
    | arrow | `->`   | -    | U+2192  |
    """
    results: list[RenderResult] = [
        markdown_block(details_markdown(content.details, depth))
    ]
    if content.symbols:
        results.append(heading(2, "Symbols"))
        rows = [SYMBOL_COLUMNS, *(_symbol_row(symbol) for symbol in content.symbols)]
        results.append(
            TableResult(rows=rows, align=[AlignKind.NONE] * len(SYMBOL_COLUMNS))
        )
    return compose(results)


def symbol_unicode(symbol: SymbolEntry) -> str:
    """Return ``U+XXXX`` from the codepoint, else from the value's first char.

    Examples
    --------
    >>> from docs_md.schema import SymbolEntry
    >>> symbol_unicode(SymbolEntry("a", codepoint=0x1F600))
    'U+1F600'
    >>> symbol_unicode(SymbolEntry("b"))
    '-'
    """
    if symbol.codepoint is not None:
        return f"U+{symbol.codepoint:04X}"
    if symbol.value:
        return f"U+{ord(symbol.value[0]):04X}"
    return MISSING


def _symbol_row(symbol: SymbolEntry) -> list[str]:
    return [
        escape_cell(escape_text(symbol.name)),
        _shorthand(symbol.markup_shorthand),
        _shorthand(symbol.math_shorthand),
        symbol_unicode(symbol),
    ]


def _shorthand(value: str | None) -> str:
    return escape_cell(inline_code(value)) if value else MISSING


def _link_line(label: str, target: str, oneliner: str | None) -> str:
    line = f"- [{escape_text(label)}]({target})"
    return f"{line} - {oneliner}" if oneliner else line


def _function_links(funcs: list[FuncContent], depth: int) -> cabc.Iterator[str]:
    for func in funcs:
        route = DOCS_BASE + "/".join([*func.path, func.name])
        yield _link_line(func.title, rewrite_docs_link(route, depth), func.oneliner)


__all__ = [
    "render_category_markdown",
    "render_group_markdown",
    "render_symbols_markdown",
    "render_type_markdown",
    "symbol_unicode",
]
