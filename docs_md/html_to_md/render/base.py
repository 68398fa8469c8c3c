"""Structured render results exchanged between renderers and the compositor."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.ast import AlignKind, Node


@dc.dataclass(slots=True)
class InlineResult:
    """Inline text joined to its neighbours without any spacing."""

    text: str


@dc.dataclass(slots=True)
class BlockResult:
    """A group of lines separated from neighbouring blocks by a blank line."""

    lines: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class TableResult:
    """Escaped cell text whose column widths the compositor computes."""

    rows: list[list[str]] = dc.field(default_factory=list)
    align: list[AlignKind] = dc.field(default_factory=list)


RenderResult = InlineResult | BlockResult | TableResult


class NodeRenderer(typ.Protocol):
    """Anything that turns a single node into a :data:`RenderResult`."""

    def render(self, node: Node) -> RenderResult:
        """Render ``node`` or raise :class:`~docs_md.html_to_md.errors.RenderError`."""
        ...


__all__ = [
    "BlockResult",
    "InlineResult",
    "NodeRenderer",
    "RenderResult",
    "TableResult",
]
