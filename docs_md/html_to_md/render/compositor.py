"""Assemble render results into the final Markdown string.

Spacing between structural results is decided here and nowhere else: inline
results are concatenated as-is, while blocks and tables are separated by one
blank line with nothing appended after the last result.

Examples
--------
>>> from docs_md.html_to_md.render.base import BlockResult, InlineResult
>>> compose([BlockResult(["# Title"]), InlineResult("inline"), BlockResult(["End"])])
'# Title\\n\\ninlineEnd'
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import AlignKind

from .base import BlockResult, InlineResult, TableResult

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .base import RenderResult

MIN_COLUMN_WIDTH = 3


def compose(results: cabc.Iterable[RenderResult]) -> str:
    """Join ``results`` into Markdown, spacing structural results by a blank line."""
    kept = [result for result in results if not _is_empty(result)]
    parts: list[str] = []
    for index, result in enumerate(kept):
        match result:
            case InlineResult(text=text):
                parts.append(text)
                continue
            case BlockResult(lines=lines):
                parts.append("\n".join(lines))
            case TableResult(rows=rows, align=align):
                parts.append("\n".join(format_table(rows, align)))
            case _:
                typ.assert_never(result)
        if index < len(kept) - 1:
            parts.append("\n\n")
    return "".join(parts)


def _is_empty(result: RenderResult) -> bool:
    match result:
        case InlineResult(text=text):
            return not text
        case BlockResult(lines=lines):
            return not lines
        case TableResult(rows=rows):
            return not rows
        case _:
            typ.assert_never(result)


def format_table(rows: list[list[str]], align: list[AlignKind]) -> list[str]:
    """Lay out escaped cell text as GFM table lines.

    The first row is the header. Column widths are the longest cell in the
    column but never less than three characters, so the separator row is
    always valid GFM.

    Parameters
    ----------
    rows : list[list[str]]
        Cell text, already escaped; rows may differ in length.
    align : list[AlignKind]
        Per-column alignment; missing columns default to
        :attr:`AlignKind.NONE`.

    Returns
    -------
    list[str]
        Header line, separator line, then one line per body row.

    Examples
    --------
    >>> format_table([["A", "B"], ["1", "2"]], [])
    ['| A   | B   |', '| --- | --- |', '| 1   | 2   |']
    """
    if not rows:
        return []
    columns = max(len(row) for row in rows)
    padded = [row + [""] * (columns - len(row)) for row in rows]
    widths = [
        max(MIN_COLUMN_WIDTH, *(len(row[col]) for row in padded))
        for col in range(columns)
    ]
    alignments = list(align[:columns]) + [AlignKind.NONE] * (columns - len(align))

    header, *body = padded
    lines = [_format_row(header, widths)]
    lines.append(
        "|" + "|".join(_separator(w, a) for w, a in zip(widths, alignments)) + "|"
    )
    lines.extend(_format_row(row, widths) for row in body)
    return lines


def _format_row(cells: list[str], widths: list[int]) -> str:
    return "|" + "|".join(f" {cell:<{width}} " for cell, width in zip(cells, widths)) + "|"


def _separator(width: int, align: AlignKind) -> str:
    match align:
        case AlignKind.LEFT:
            return f" :{'-' * width} "
        case AlignKind.RIGHT:
            return f" {'-' * width}: "
        case AlignKind.CENTER:
            return f" :{'-' * width}: "
        case AlignKind.NONE:
            return f" {'-' * width} "
        case _:
            typ.assert_never(align)


__all__ = ["MIN_COLUMN_WIDTH", "compose", "format_table"]
