"""Write generated Markdown pages to disk."""

from __future__ import annotations

from .frontmatter import generate_frontmatter
from .page_generator import (
    DocsMarkdownGenerator,
    GenerationReport,
    PageFailure,
    render_entry_markdown,
)
from .route import RouteError, route_to_filepath

__all__ = [
    "DocsMarkdownGenerator",
    "GenerationReport",
    "PageFailure",
    "RouteError",
    "generate_frontmatter",
    "render_entry_markdown",
    "route_to_filepath",
]
