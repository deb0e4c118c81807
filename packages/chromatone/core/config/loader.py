"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chromatone.core.config.models import AppConfig, SchemeConfig
from chromatone.core.utils.json import read_json
from chromatone.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_DEFAULT_APP_CONFIG_PATH = AppConfig.default_path()
_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("theme.json")
        'json'
        >>> detect_format("theme.yml")
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
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields the defaults. The config at the default path is
    cached after the first load.

    Args:
        path: Path to app config file; defaults to config.json

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH
    path = Path(path)
    is_default = path == _DEFAULT_APP_CONFIG_PATH

    if _app_config_cache is not None and is_default:
        return _app_config_cache

    if path.exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.info(f"No app config at {path}, using defaults")
        config = AppConfig()

    if is_default:
        _app_config_cache = config
    return config


def load_scheme_config(path: str | Path) -> SchemeConfig:
    """Load and validate a scheme configuration file.

    Raises:
        FileNotFoundError: If config file does not exist
        ValidationError: If config is invalid

    Example:
        >>> config = load_scheme_config("theme.yaml")
        >>> scheme = scheme_from_config(config)
    """
    return SchemeConfig.model_validate(load_config(path))


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()
    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
