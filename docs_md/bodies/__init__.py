"""Markdown generators for documentation entry bodies."""

from __future__ import annotations

from .definitions import (
    render_category_markdown,
    render_group_markdown,
    render_symbols_markdown,
    render_type_markdown,
    symbol_unicode,
)
from .details import (
    default_value_to_text,
    details_markdown,
    extract_html_from_details,
    format_function_signature,
)
from .func import param_flags, param_lines, render_func_markdown
from .router import (
    BodyRenderError,
    generate_body_markdown,
    remove_duplicate_heading,
    render_body_content,
)

__all__ = [
    "BodyRenderError",
    "default_value_to_text",
    "details_markdown",
    "extract_html_from_details",
    "format_function_signature",
    "generate_body_markdown",
    "param_flags",
    "param_lines",
    "remove_duplicate_heading",
    "render_body_content",
    "render_category_markdown",
    "render_func_markdown",
    "render_group_markdown",
    "render_symbols_markdown",
    "render_type_markdown",
    "symbol_unicode",
]
