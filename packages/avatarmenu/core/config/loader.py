"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from avatarmenu.core.config.models import AppConfig
from avatarmenu.core.osc.target import parse_target
from avatarmenu.core.utils.json import read_json
from avatarmenu.core.utils.logging import configure_logging as _configure_logging
from avatarmenu.core.utils.logging import get_logger

logger = get_logger(__name__)

OSC_TARGET_ENV = "AVATARMENU_OSC_TARGET"

_DEFAULT_APP_CONFIG_PATH = Path("config.json")
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
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
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
            content = read_json(path)
        except ValueError as e:
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
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    The default config file is optional; when it is missing all defaults
    apply. The OSC target can be overridden with AVATARMENU_OSC_TARGET.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to config.json

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ValidationError: If config is invalid
        ValueError: If AVATARMENU_OSC_TARGET is malformed
    """
    global _app_config_cache

    use_default = path is None or Path(path) == _DEFAULT_APP_CONFIG_PATH
    if use_default and _app_config_cache is not None:
        return _app_config_cache

    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH

    if use_default and not Path(path).exists():
        config = AppConfig()
    else:
        config = AppConfig.model_validate(load_config(path))

    config = _apply_env_overrides(config)

    if use_default:
        _app_config_cache = config

    return config


def clear_app_config_cache() -> None:
    """Forget the cached default AppConfig."""
    global _app_config_cache
    _app_config_cache = None


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


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Return config with environment overrides applied."""
    target = os.getenv(OSC_TARGET_ENV)
    if not target:
        return config

    host, port = parse_target(target)
    logger.debug(f"Loaded {OSC_TARGET_ENV} from environment: {host}:{port}")
    return config.model_copy(update={"osc": config.osc.model_copy(update={"host": host, "port": port})})
