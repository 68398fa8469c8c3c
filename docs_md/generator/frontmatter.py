"""YAML frontmatter emitted at the top of each generated page."""

from __future__ import annotations

import io

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.scalarstring import LiteralScalarString


def generate_frontmatter(title: str, description: str | None = None) -> str:
    """Return a ``---`` delimited YAML block for a page.

    The description, when present, is written as a literal block scalar so
    multi-line summaries survive unchanged.

    Examples
    --------
    >>> print(generate_frontmatter("Overview"), end="")
    ---
    title: Overview
    ---
    <BLANKLINE>
    """
    document = CommentedMap()
    document["title"] = title
    if description:
        document["description"] = LiteralScalarString(description)

    buffer = io.StringIO()
    _build_frontmatter_yaml().dump(document, buffer)
    return f"---\n{buffer.getvalue()}---\n\n"


def _build_frontmatter_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


__all__ = ["generate_frontmatter"]
