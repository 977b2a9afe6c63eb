"""Project configuration — the ``.gonode.yaml`` file.

Example::

    name: calculator
    files: ["go/*.go"]
    outputDirectory: build
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from gonode.errors import ConfigError
from gonode.generators.bindings_generator import validate_module_name

CONFIG_FILENAME = ".gonode.yaml"


@dataclass
class GonodeConfig:
    """Settings for one addon."""

    name: str
    files: list[str] = field(default_factory=list)
    output_dir: str = ""  # relative to the project directory


def config_from_dict(data: dict, source: str = CONFIG_FILENAME) -> GonodeConfig:
    """Build a config from parsed YAML, validating every field."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping", file_path=source)

    files = data.get("files")
    if not isinstance(files, list) or not files:
        raise ConfigError("'files' must be a non-empty list of glob patterns", file_path=source)
    if not all(isinstance(f, str) and f for f in files):
        raise ConfigError("'files' entries must be non-empty strings", file_path=source)
    if any(Path(f).is_absolute() for f in files):
        raise ConfigError(
            "'files' patterns must be relative to the project directory", file_path=source
        )

    output_dir = data.get("outputDirectory") or ""
    if not isinstance(output_dir, str):
        raise ConfigError("'outputDirectory' must be a string", file_path=source)

    name = data.get("name")
    try:
        validate_module_name(name)
    except ConfigError as err:
        err.file_path = source
        raise

    return GonodeConfig(name=name, files=list(files), output_dir=output_dir)


def load_config(path: str | Path) -> GonodeConfig:
    """Load and validate a configuration file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e}", file_path=str(path)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", file_path=str(path)) from e

    return config_from_dict(data, source=str(path))


def find_config(project_dir: str | Path) -> Path:
    return Path(project_dir) / CONFIG_FILENAME
