"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.protoutline/config.json), or the shipped defaults
   when no global config exists
2. Project local config (cwd/.protoutline/config.json)
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from protoutline.config.schema import Config
from protoutline.core.constants import (
    get_default_config_path,
    get_defaults_dir,
    get_local_config_path,
)
from protoutline.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS_DIR = get_defaults_dir()
DEFAULT_CONFIG = DEFAULTS_DIR / "config.json"


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read one JSON config file. An empty file reads as ``{}``.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid JSON,
            or does not hold a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not content:
        return {}
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected object in {path}, got {type(data).__name__}")
    return data


def merge_layer(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Overlay one config layer on another.

    Sections present in both are merged key by key; anything else in
    ``layer`` replaces the value in ``base``. Neither input is modified.

    Example:
        >>> merge_layer({"cache": {"enabled": False, "max_documents": 10}},
        ...             {"cache": {"max_documents": 20}})
        {'cache': {'enabled': False, 'max_documents': 20}}
    """
    merged = dict(base)
    for section, values in layer.items():
        current = merged.get(section)
        if isinstance(current, dict) and isinstance(values, dict):
            merged[section] = {**current, **values}
        else:
            merged[section] = values
    return merged


def _layer_paths(cwd: Path) -> list[Path]:
    global_config = get_default_config_path()
    if global_config.is_file():
        layers = [global_config]
    else:
        logger.debug("No global config at: %s, using defaults", global_config)
        layers = [DEFAULT_CONFIG]

    local_config = get_local_config_path(cwd)
    if local_config.is_file():
        layers.append(local_config)
    return layers


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or merged config
            fails validation.
    """
    if path is not None:
        data = _read_config_file(path)
        try:
            return Config.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Config validation failed for {path}: {e}") from e

    layers = _layer_paths(cwd or Path.cwd())
    merged: dict[str, Any] = {}
    for layer in layers:
        merged = merge_layer(merged, _read_config_file(layer))
    logger.info("Config loaded from: %s", [str(p) for p in layers])

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in layers)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e
