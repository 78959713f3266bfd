"""YAML loader for check and sample config files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Parse a ``.yaml``/``.yml`` config file.

    An empty file parses to ``None``; callers treat that as "all defaults".

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the content is not valid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f)
