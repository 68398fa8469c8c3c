"""Markdown generation for function definitions."""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.render import BlockResult, compose

from .details import (
    default_value_to_text,
    details_markdown,
    format_function_signature,
)

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.render import RenderResult
    from docs_md.schema import FuncContent, ParamContent

PARAM_INDENT = "  "


def heading(level: int, text: str) -> BlockResult:
    """Return a heading block, clamping ``level`` to the Markdown range."""
    return BlockResult([f"{'#' * min(max(level, 1), 6)} {text}"])


def markdown_block(markdown: str) -> BlockResult:
    """Wrap already-composed Markdown so it can be spaced like any other block."""
    return BlockResult(markdown.split("\n") if markdown.strip() else [])


def render_func_markdown(func: FuncContent, depth: int, level: int = 2) -> str:
    """Render a function page.

    Parameters
    ----------
    func : FuncContent
        Decoded function definition.
    depth : int
        Directory depth of the output page, used for relative links in the
        embedded HTML.
    level : int, optional
        Heading level of the top sections (``## Signature`` by default); a
        constructor nested in a type page uses a deeper level.

    Returns
    -------
    str
        Markdown with signature, description, example, parameters, return
        types, and methods sections. Empty sections are omitted.
    """
    return compose(func_results(func, depth, level))


def func_results(func: FuncContent, depth: int, level: int = 2) -> list[RenderResult]:
    results: list[RenderResult] = [
        heading(level, "Signature"),
        BlockResult([format_function_signature(func)]),
    ]
    if func.oneliner:
        results.append(BlockResult([func.oneliner]))
    results.append(markdown_block(details_markdown(func.details, depth)))

    if func.example is not None:
        results.append(heading(level, "Example"))
        results.append(markdown_block(details_markdown(func.example, depth)))

    if func.params:
        results.append(heading(level, "Parameters"))
        results.extend(BlockResult(param_lines(p, depth)) for p in func.params)

    if func.returns:
        results.append(heading(level, "Returns"))
        results.append(BlockResult([f"`{' | '.join(func.returns)}`"]))

    if func.scope:
        results.append(heading(level, "Methods"))
        for method in func.scope:
            results.extend(scoped_func_results(method, depth, level + 1))
    return results


def param_flags(param: ParamContent) -> list[str]:
    """Return the flag words shown after a parameter name.

    Examples
    --------
    >>> from docs_md.schema import ParamContent
    >>> param_flags(ParamContent(name="condition", required=True, positional=True))
    ['required', 'positional']
    """
    flags = ["required" if param.required else "optional"]
    flags.extend(
        flag
        for flag, enabled in (
            ("positional", param.positional),
            ("named", param.named),
            ("variadic", param.variadic),
            ("settable", param.settable),
        )
        if enabled
    )
    return flags


def param_lines(param: ParamContent, depth: int) -> list[str]:
    """Return the bullet for one parameter with its indented description."""
    header = f"- **{param.name}**"
    if param.types:
        header += f" (`{' | '.join(param.types)}`)"
    header += ", " + ", ".join(param_flags(param))
    if param.default is not None:
        header += f", default: `{default_value_to_text(param.default)}`"
    lines = [header + ":"]

    lines.extend(_indent(details_markdown(param.details, depth)))
    example = details_markdown(param.example, depth)
    if example:
        lines.extend(["", f"{PARAM_INDENT}Example:", ""])
        lines.extend(_indent(example))
    return lines


def scoped_func_results(
    func: FuncContent, depth: int, level: int
) -> list[RenderResult]:
    """Return the brief method section used under ``Methods``."""
    results: list[RenderResult] = [
        heading(level, f"`{func.name}`"),
        BlockResult([format_function_signature(func)]),
    ]
    if func.oneliner:
        results.append(BlockResult([func.oneliner]))
    results.append(markdown_block(details_markdown(func.details, depth)))
    return results


def _indent(markdown: str) -> list[str]:
    if not markdown.strip():
        return []
    return [f"{PARAM_INDENT}{line}" if line else "" for line in markdown.split("\n")]


__all__ = [
    "func_results",
    "heading",
    "markdown_block",
    "param_flags",
    "param_lines",
    "render_func_markdown",
    "scoped_func_results",
]
