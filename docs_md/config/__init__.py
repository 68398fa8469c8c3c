"""Load and validate docs-md generator configuration.

Examples
--------
>>> from pathlib import Path
>>> from docs_md.config import load_generator_config
>>> config = load_generator_config(Path("docs-md.yaml"))  # doctest: +SKIP
>>> config.fail_fast  # doctest: +SKIP
False
"""

from .loader import load_generator_config
from .models import DEFAULT_OUTPUT_DIR, GeneratorConfig, GeneratorConfigError

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
]
