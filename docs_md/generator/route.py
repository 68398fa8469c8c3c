"""Map documentation routes to output file paths."""

from __future__ import annotations

import re
from pathlib import Path

from docs_md._constants import DOCS_BASE
from docs_md.schema import SchemaError

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


class RouteError(SchemaError):
    """Raised when a route cannot be mapped safely below the output directory."""


def route_to_filepath(target_dir: Path, route: str) -> Path:
    """Return the Markdown file that ``route`` is written to.

    The mapping matches the link rewriter, so links between generated pages
    resolve: the docs root becomes ``index.md`` and both ``a/b`` and ``a/b/``
    become ``a/b.md``.

    Parameters
    ----------
    target_dir : Path
        Output directory for the generated tree.
    route : str
        Entry route; must start with the docs-base sentinel.

    Returns
    -------
    Path
        File path inside ``target_dir``.

    Raises
    ------
    RouteError
        If the sentinel prefix is missing or the route is rooted or climbs
        out of ``target_dir``.

    Examples
    --------
    >>> from pathlib import Path
    >>> route_to_filepath(Path("out"), "/DOCS-BASE/").as_posix()
    'out/index.md'
    >>> route_to_filepath(Path("out"), "/DOCS-BASE/tutorial/writing").as_posix()
    'out/tutorial/writing.md'
    """
    if not route.startswith(DOCS_BASE):
        msg = f"Route must start with {DOCS_BASE}: {route}"
        raise RouteError(msg)
    relative = route.removeprefix(DOCS_BASE)
    if relative.startswith(("/", "\\")) or _DRIVE_PATTERN.match(relative):
        msg = f"Absolute or rooted path not allowed: {relative}"
        raise RouteError(msg)

    segments = [segment for segment in re.split(r"[/\\]", relative.rstrip("/")) if segment]
    if ".." in segments:
        msg = f"Path traversal (..) not allowed: {relative}"
        raise RouteError(msg)
    if not segments:
        return target_dir / "index.md"
    *parents, leaf = segments
    return target_dir.joinpath(*parents, f"{leaf}.md")


__all__ = ["RouteError", "route_to_filepath"]
