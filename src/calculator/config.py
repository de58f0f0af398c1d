"""Configuration management for the calculator.

Loads and validates calculator.yaml configuration files. Only ambient
settings (logging) are configurable; arithmetic behaviour is fixed.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from calculator.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_FILENAMES = (
    "calculator.yaml",
    "calculator.yml",
    ".calculator.yaml",
    ".calculator.yml",
)


class CalculatorConfig(BaseModel):
    """Root configuration for the calculator."""

    version: str = "0.1"
    """Config file version."""

    log_level: str = "WARNING"
    """Level for the calculator logger."""

    rich_tracebacks: bool = False
    """Render tracebacks with rich in log output."""

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


def find_config(project_root: Path) -> Path | None:
    """Return the first config file present in project_root, if any."""
    for name in CONFIG_FILENAMES:
        candidate = project_root / name
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | None = None, project_root: Path | None = None) -> CalculatorConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file. If None, searches for calculator.yaml.
        project_root: Project root directory. Defaults to cwd.

    Returns:
        Parsed configuration. Returns default config if no file found.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    project_root = project_root or Path.cwd()

    if config_path is None:
        config_path = find_config(project_root)

    # No config file - return defaults
    if config_path is None or not config_path.exists():
        return CalculatorConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(config_path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(config_path, f"expected a mapping, got {type(data).__name__}")

    try:
        return CalculatorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(config_path, str(e)) from e
