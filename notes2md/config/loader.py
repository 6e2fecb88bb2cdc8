"""Configuration loader for notes2md."""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import Config

CONFIG_DIR = ".notes2md"
CONFIG_FILE = "config.yaml"


def default_config_path(dest_dir: Path) -> Path:
    """Return the config location inside a destination directory."""
    return dest_dir / CONFIG_DIR / CONFIG_FILE


def load_config(dest_dir: Path, config_path: Path | None = None) -> Config | None:
    """Load configuration from an explicit file or the destination directory.

    Args:
        dest_dir: Destination directory of the conversion.
        config_path: Optional explicit config file, used instead of
            ``.notes2md/config.yaml`` in the destination directory.

    Returns:
        Config object if a usable config file exists, None otherwise.
    """
    path = config_path or default_config_path(dest_dir)
    if not path.exists():
        return None

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return None

    if not isinstance(data, dict):
        return None

    try:
        return Config.from_dict(data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid config {path}: {e}")
        return None


def save_config(config: Config, dest_dir: Path) -> Path:
    """Save configuration to ``.notes2md/config.yaml`` in the destination directory.

    Args:
        config: Config object to save.
        dest_dir: Destination directory of the conversion.

    Returns:
        Path of the written config file.
    """
    path = default_config_path(dest_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml(), encoding="utf-8")
    return path
