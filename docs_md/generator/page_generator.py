"""Batch generation of Markdown files from documentation entries.

:class:`DocsMarkdownGenerator` walks an entry tree, writes one Markdown file
per entry (frontmatter followed by the rendered body), and keeps going when a
single page fails so that one bad page never blocks the rest of the export.

Example
-------
>>> from pathlib import Path
>>> from docs_md.schema import load_entries
>>> from docs_md.generator import DocsMarkdownGenerator
>>> entries = load_entries(Path("docs.json").read_bytes())  # doctest: +SKIP
>>> report = DocsMarkdownGenerator(entries, Path("docs-md")).run()  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_md.bodies import BodyRenderError, generate_body_markdown
from docs_md.html_to_md import ConversionError
from docs_md.schema import SchemaError

from .frontmatter import generate_frontmatter
from .route import route_to_filepath

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docs_md.schema import Entry

logger = logging.getLogger(__name__)

PAGE_ERRORS = (SchemaError, ConversionError, BodyRenderError, OSError)


@dc.dataclass(slots=True)
class PageFailure:
    """A page that could not be generated."""

    route: str
    message: str


@dc.dataclass(slots=True)
class GenerationReport:
    """Outcome of a batch run: files written and pages that failed."""

    written: list[Path] = dc.field(default_factory=list)
    failures: list[PageFailure] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every page was generated."""
        return not self.failures


def render_entry_markdown(entry: Entry, *, frontmatter: bool = True) -> str:
    """Return the full Markdown document for a single entry."""
    entry.validate()
    header = generate_frontmatter(entry.title, entry.description) if frontmatter else ""
    body = generate_body_markdown(entry)
    return f"{header}{body}\n" if body else header


class DocsMarkdownGenerator:
    """Write Markdown files for a tree of documentation entries."""

    def __init__(
        self,
        entries: cabc.Sequence[Entry],
        output_dir: Path,
        *,
        frontmatter: bool = True,
        fail_fast: bool = False,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        entries : Sequence[Entry]
            Root entries; children are generated recursively.
        output_dir : Path
            Directory that receives the Markdown tree.
        frontmatter : bool, optional
            Prefix each page with YAML frontmatter (default ``True``).
        fail_fast : bool, optional
            Re-raise the first page error instead of recording it.
        """
        self.entries = list(entries)
        self.output_dir = output_dir
        self.frontmatter = frontmatter
        self.fail_fast = fail_fast

    def run(self) -> GenerationReport:
        """Generate every entry and return the batch report.

        Returns
        -------
        GenerationReport
            Written paths in generation order and the routes that failed.

        Raises
        ------
        SchemaError, ConversionError, BodyRenderError, OSError
            Only when ``fail_fast`` is set and a page fails.
        """
        report = GenerationReport()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for entry in self.entries:
            self._generate(entry, report)
        logger.info(
            "generated %d page(s), %d failure(s)",
            len(report.written),
            len(report.failures),
        )
        return report

    def _generate(self, entry: Entry, report: GenerationReport) -> None:
        try:
            path = self.write_entry(entry)
        except PAGE_ERRORS as exc:
            if self.fail_fast:
                raise
            logger.warning("failed to generate %s: %s", entry.route, exc)
            report.failures.append(PageFailure(route=entry.route, message=str(exc)))
        else:
            report.written.append(path)
        for child in entry.children:
            self._generate(child, report)

    def write_entry(self, entry: Entry) -> Path:
        """Render ``entry`` and write it to its routed path."""
        path = route_to_filepath(self.output_dir, entry.route)
        markdown = render_entry_markdown(entry, frontmatter=self.frontmatter)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown, encoding="utf-8")
        logger.debug("wrote %s", path)
        return path


__all__ = [
    "DocsMarkdownGenerator",
    "GenerationReport",
    "PageFailure",
    "render_entry_markdown",
]
