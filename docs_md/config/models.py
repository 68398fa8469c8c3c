"""Typed dataclasses describing docs-md generator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("docs-md")


class GeneratorConfigError(ValueError):
    """Raised when the generator configuration is invalid."""


@dc.dataclass(slots=True)
class GeneratorConfig:
    """Settings for a batch Markdown generation run."""

    input: Path | None = None
    output_dir: Path = DEFAULT_OUTPUT_DIR
    frontmatter: bool = True
    fail_fast: bool = False

    def require_input(self) -> Path:
        """Return the docs export path or raise when none is configured."""
        if self.input is None:
            msg = "No docs JSON input configured; pass --input or set 'input'."
            raise GeneratorConfigError(msg)
        return self.input


__all__ = ["DEFAULT_OUTPUT_DIR", "GeneratorConfig", "GeneratorConfigError"]
