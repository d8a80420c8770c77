"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from chdkpkg.core.config.models import ValidationSettings

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("settings.json")
        'json'
        >>> detect_format("settings.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")
    return content


def load_settings(path: str | Path | None = None) -> ValidationSettings:
    """Load and validate validation settings.

    Args:
        path: Path to settings file (.json, .yaml, or .yml). Defaults are
              used when None.

    Returns:
        Validated ValidationSettings instance

    Raises:
        FileNotFoundError: If path is given but does not exist
        pydantic.ValidationError: If settings are invalid
    """
    if path is None:
        return ValidationSettings()

    raw_config = load_config(path)
    settings = ValidationSettings.model_validate(raw_config)
    logger.debug(
        f"Loaded settings from {path}: {len(settings.providers.boot)} boot providers, "
        f"{len(settings.providers.modules)} modules providers"
    )
    return settings
