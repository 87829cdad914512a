"""Core constants and paths for protoutline.

Single source of truth for global paths. All modules should import from here
instead of hardcoding paths like `Path.home() / ".protoutline"`.
"""

from pathlib import Path

PROTOUTLINE_DIR_NAME = ".protoutline"
CONFIG_FILE_NAME = "config.json"


def get_protoutline_dir() -> Path:
    """Get ~/.protoutline (global config directory)."""
    return Path.home() / PROTOUTLINE_DIR_NAME


def get_defaults_dir() -> Path:
    """Get package defaults directory (shipped with package)."""
    return Path(__file__).resolve().parent.parent / "defaults"


def get_default_config_path() -> Path:
    """Get global config file path."""
    return get_protoutline_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get project-local config file path for a working directory."""
    return cwd / PROTOUTLINE_DIR_NAME / CONFIG_FILE_NAME
