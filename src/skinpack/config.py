"""YAML configuration for the converter."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skinpack.constants import DEFAULT_OUTPUT_NAME, DEFAULT_TIMESTAMP_STEP_MS
from skinpack.errors import ConfigError
from skinpack.logging import get_logger

logger = get_logger("config")


class ConverterConfig(BaseModel):
    """Converter settings.

    Attributes:
        output_path: Where the JSON document is written.
        timestamp_step_ms: Gap between consecutive record timestamps (> 0).
        indent: JSON indentation for the written document.
        recursive: Descend into subdirectories of directory inputs.
        log_file: Optional log file in addition to stderr.
        json_logs: Emit JSON log lines.
    """

    model_config = ConfigDict(extra="forbid")

    output_path: str = DEFAULT_OUTPUT_NAME
    timestamp_step_ms: int = Field(DEFAULT_TIMESTAMP_STEP_MS, gt=0)
    indent: int = Field(2, ge=0)
    recursive: bool = False
    log_file: str | None = None
    json_logs: bool = False


def _parse_yaml(path: Path) -> dict:
    """Read *path* and return its top-level mapping (empty file → ``{}``).

    Raises:
        ConfigError: If the YAML is malformed or not a mapping.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a YAML mapping at top level, got {type(data).__name__}"
        )
    return data


def load_config(path: str | Path | None = None) -> ConverterConfig:
    """Load converter settings from a YAML file.

    Args:
        path: Config file, or None for defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigError: If the file is malformed or fails validation.
    """
    if path is None:
        return ConverterConfig()

    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"Config file not found: {resolved}")

    data = _parse_yaml(resolved)
    try:
        config = ConverterConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {resolved}: {exc}") from exc

    logger.debug("Loaded config from %s", resolved)
    return config
