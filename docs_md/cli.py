"""Cyclopts CLI entrypoint for converting documentation exports to Markdown.

The ``docs-md`` console script reads a JSON documentation export (a single
entry or an array of entries), renders every entry body to Markdown, and
writes one file per route below the output directory. Pages that fail are
reported by route and make the command exit non-zero, while every other page
is still written.

Examples
--------
Convert an export into ``docs-md/``:

>>> from docs_md.cli import app
>>> app.run(["generate", "--input", "docs.json"])  # doctest: +SKIP

Use a YAML configuration file and stop at the first failure:

>>> app.run(
...     ["generate", "--config", "docs-md.yaml", "--fail-fast"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import GeneratorConfig, load_generator_config
from .generator import DocsMarkdownGenerator
from .schema import load_entries

logger = logging.getLogger(__name__)

app = App(name="docs-md", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(
    config: Path | None,
    input_file: Path | None,
    output_dir: Path | None,
    *,
    frontmatter: bool | None,
    fail_fast: bool | None,
) -> GeneratorConfig:
    """Merge CLI overrides on top of the optional YAML configuration."""
    resolved = load_generator_config(config) if config else GeneratorConfig()
    if input_file is not None:
        resolved.input = input_file
    if output_dir is not None:
        resolved.output_dir = output_dir
    if frontmatter is not None:
        resolved.frontmatter = frontmatter
    if fail_fast is not None:
        resolved.fail_fast = fail_fast
    return resolved


@app.command(help="Convert a documentation JSON export into Markdown files.")
def generate(
    *,
    input_file: typ.Annotated[
        Path | None,
        Parameter(name="--input", help="Docs JSON export", env_var="INPUT_INPUT"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Output folder for Markdown", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to generator config", env_var="INPUT_CONFIG"),
    ] = None,
    frontmatter: typ.Annotated[
        bool | None, Parameter(help="Write YAML frontmatter on each page")
    ] = None,
    fail_fast: typ.Annotated[
        bool | None, Parameter(help="Stop at the first page that fails")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log every written file")] = False,
) -> None:
    """Generate a Markdown tree from a documentation export.

    Parameters
    ----------
    input_file : Path or None, optional
        Docs JSON export; overrides ``input`` from the configuration.
    output_dir : Path or None, optional
        Destination folder; overrides ``output_dir`` from the configuration.
    config : Path or None, optional
        YAML configuration file (overridable via ``INPUT_CONFIG``).
    frontmatter : bool or None, optional
        Enable or disable YAML frontmatter; ``None`` keeps the configured
        value.
    fail_fast : bool or None, optional
        Abort on the first failing page; ``None`` keeps the configured value.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Writes Markdown files and prints a summary.

    Raises
    ------
    FileNotFoundError
        If the docs export does not exist.
    SystemExit
        With status ``1`` when any page failed to generate.
    """
    _configure_logging(verbose=verbose)
    settings = _resolve_config(
        config,
        input_file,
        output_dir,
        frontmatter=frontmatter,
        fail_fast=fail_fast,
    )
    source = settings.require_input()
    if not source.exists():
        msg = f"Docs export '{source}' not found."
        raise FileNotFoundError(msg)

    entries = load_entries(source.read_bytes())
    logger.debug("loaded %d root entries from %s", len(entries), source)
    generator = DocsMarkdownGenerator(
        entries,
        settings.output_dir,
        frontmatter=settings.frontmatter,
        fail_fast=settings.fail_fast,
    )
    report = generator.run()
    print(
        f"wrote {len(report.written)} page(s) to {_format_path(settings.output_dir)}"
    )
    for failure in report.failures:
        print(f"failed {failure.route}: {failure.message}")
    if not report.ok:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs-md`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
