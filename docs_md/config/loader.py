"""Load generator configuration YAML into :class:`GeneratorConfig`."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import DEFAULT_OUTPUT_DIR, GeneratorConfig, GeneratorConfigError

_KNOWN_KEYS = frozenset({"input", "output_dir", "frontmatter", "fail_fast"})


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load the YAML file describing a generation run.

    Relative ``input`` and ``output_dir`` values are resolved against the
    directory containing the configuration file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``docs-md.yaml``).

    Returns
    -------
    GeneratorConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    GeneratorConfigError
        If a key is unknown or a value has the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_generator_config(Path("docs-md.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('docs-md')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise GeneratorConfigError(msg)

    base_dir = path.parent
    input_path = _optional_path(raw.get("input"), "input", base_dir)
    output_dir = _optional_path(raw.get("output_dir"), "output_dir", base_dir)
    return GeneratorConfig(
        input=input_path,
        output_dir=output_dir or base_dir / DEFAULT_OUTPUT_DIR,
        frontmatter=_bool(raw.get("frontmatter", True), "frontmatter"),
        fail_fast=_bool(raw.get("fail_fast", False), "fail_fast"),
    )


def _optional_path(value: object, key: str, base_dir: Path) -> Path | None:
    match value:
        case None:
            return None
        case str() if value.strip():
            candidate = Path(value)
            return candidate if candidate.is_absolute() else base_dir / candidate
        case _:
            msg = f"'{key}' must be a non-empty path string."
            raise GeneratorConfigError(msg)


def _bool(value: object, key: str) -> bool:
    if not isinstance(value, bool):
        msg = f"'{key}' must be true or false."
        raise GeneratorConfigError(msg)
    return value


__all__ = ["load_generator_config"]
