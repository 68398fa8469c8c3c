"""Serialize inline nodes into Markdown text.

Character data is escaped so it reads back as the same text: Markdown
punctuation gets a backslash, ``<`` becomes ``&lt;`` so no raw tag can be
formed, and block markers at the start of a line are neutralised by
:func:`escape_line_start`.

Examples
--------
>>> escape_text("<script>a*b</script>")
'&lt;script>a\\\\*b&lt;/script>'
>>> escape_line_start("1. not a list")
'1\\\\. not a list'
"""

from __future__ import annotations

import re
import typing as typ

from docs_md.html_to_md.ast import Emphasis, InlineCode, Link, Strong, Text

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_md.html_to_md.ast import InlineNode

_BACKTICK_RUN = re.compile(r"`+")
_PUNCTUATION = re.compile(r"([\\`*_\[\]])")
_ENTITY_AMPERSAND = re.compile(r"&(?=#?\w+;)")
_BLOCK_MARKER = re.compile(
    r"^(?:[#>]|-(?=[\s-]|$)|\+(?=\s|$)|(?P<num>\d{1,9})(?P<delim>[.)])(?=\s|$))"
)
_CELL_PIPE = re.compile(r"(\\*)\|")
_UNESCAPE = re.compile(r"\\([!-/:-@\[-`{-~])")


def escape_text(value: str) -> str:
    """Escape character data so Markdown treats it as literal text."""
    value = _PUNCTUATION.sub(r"\\\1", value)
    value = _ENTITY_AMPERSAND.sub("&amp;", value)
    return value.replace("<", "&lt;")


def escape_line_start(line: str) -> str:
    """Escape a heading, quote, list, or rule marker opening ``line``."""
    match = _BLOCK_MARKER.match(line)
    if match is None:
        return line
    if match["num"]:
        return f"{match['num']}\\{match['delim']}{line[match.end():]}"
    return f"\\{line}"


def unescape_text(value: str) -> str:
    """Undo :func:`escape_text` for comparisons against source strings.

    Examples
    --------
    >>> unescape_text("snake\\\\_case &lt;b>")
    'snake_case <b>'
    """
    value = _UNESCAPE.sub(r"\1", value)
    return value.replace("&lt;", "<").replace("&amp;", "&")


def longest_backtick_run(value: str) -> int:
    """Return the length of the longest run of backticks in ``value``."""
    return max((len(run) for run in _BACKTICK_RUN.findall(value)), default=0)


def inline_code(value: str) -> str:
    """Wrap ``value`` in a code span that reproduces it exactly.

    The fence outgrows any backtick run inside ``value``. A padding space is
    added on both sides when the value touches a backtick, or when it starts
    and ends with a space (one of which Markdown strips from each side).

    Examples
    --------
    >>> inline_code("x")
    '`x`'
    >>> inline_code("a`b")
    '``a`b``'
    >>> inline_code(" x ")
    '`  x  `'
    """
    ticks = "`" * (longest_backtick_run(value) + 1)
    touches_tick = value.startswith("`") or value.endswith("`")
    space_padded = value.startswith(" ") and value.endswith(" ") and value.strip()
    if touches_tick or space_padded:
        return f"{ticks} {value} {ticks}"
    return f"{ticks}{value}{ticks}"


def delimit(text: str, marker: str) -> str:
    """Wrap ``text`` in ``marker`` with edge whitespace kept outside.

    Emphasis delimiters only open and close against non-space characters.

    Examples
    --------
    >>> delimit(" bar", "*")
    ' *bar*'
    """
    core = text.strip()
    if not core:
        return text
    leading = text[: len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()) :]
    return f"{leading}{marker}{core}{marker}{trailing}"


def render_inline(nodes: cabc.Iterable[InlineNode]) -> str:
    """Render a run of inline nodes as a single Markdown string."""
    return "".join(render_inline_node(node) for node in nodes)


def render_inline_node(node: InlineNode) -> str:
    match node:
        case Text(value=value):
            return escape_text(value)
        case InlineCode(value=value):
            return inline_code(value)
        case Emphasis(children=children):
            return delimit(render_inline(children), "*")
        case Strong(children=children):
            return delimit(render_inline(children), "**")
        case Link(url=url, children=children):
            return f"[{render_inline(children)}]({url})"
        case _:
            typ.assert_never(node)


def escape_cell(text: str) -> str:
    """Escape pipes and fold newlines so ``text`` fits in one table cell.

    A pipe already preceded by an odd number of backslashes gets one more
    backslash, so the backslashes pair up and the pipe stays escaped.

    Examples
    --------
    >>> escape_cell("a | b")
    'a \\\\| b'
    >>> escape_cell("a\\\\|b")
    'a\\\\\\\\\\\\|b'
    """
    return _CELL_PIPE.sub(_escape_pipe, text).replace("\n", " ")


def _escape_pipe(match: re.Match[str]) -> str:
    slashes = match.group(1)
    if len(slashes) % 2:
        slashes += "\\"
    return f"{slashes}\\|"


__all__ = [
    "delimit",
    "escape_cell",
    "escape_line_start",
    "escape_text",
    "inline_code",
    "longest_backtick_run",
    "render_inline",
    "render_inline_node",
    "unescape_text",
]
