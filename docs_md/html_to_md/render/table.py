"""Structural table renderer.

Cells are flattened to inline Markdown and escaped here; widths and spacing
are left to :func:`~docs_md.html_to_md.render.compositor.format_table`.
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import Table
from docs_md.html_to_md.errors import InvalidTableError, UnsupportedNodeError

from .base import TableResult
from .inline import escape_cell, render_inline

if typ.TYPE_CHECKING:
    from docs_md.html_to_md.ast import Node


def table_cells(table: Table) -> list[list[str]]:
    """Return the escaped text of every cell, row by row.

    Raises
    ------
    InvalidTableError
        If the table has no rows.
    """
    if not table.children:
        msg = "Table has no rows"
        raise InvalidTableError(msg)
    return [
        [escape_cell(render_inline(cell.children).strip()) for cell in row.children]
        for row in table.children
    ]


class TableRenderer:
    """Render :class:`~docs_md.html_to_md.ast.Table` nodes as deferred cell matrices."""

    def render(self, node: Node) -> TableResult:
        if not isinstance(node, Table):
            raise UnsupportedNodeError(type(self).__name__, node)
        return TableResult(rows=table_cells(node), align=list(node.align))


__all__ = ["TableRenderer", "table_cells"]
