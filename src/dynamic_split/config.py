"""User configuration: load and validate config.toml."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from dynamic_split.geometry import Axis

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config.toml is malformed or holds invalid values."""


@dataclass
class Settings:
    """Layout settings from the [layout] table of config.toml."""

    axis: Axis = Axis.VERTICAL
    nested: bool = True  # demo app splits the second pane again on the other axis


def get_config_path() -> Path:
    """Return the path to config.toml, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "dynamic-split" / "config.toml"


def load_settings(path: Path) -> Settings:
    """Load layout settings from a TOML file.

    Returns defaults if the file does not exist.
    Raises ConfigError on parse errors or invalid values.
    """
    if not path.exists():
        return Settings()

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    logger.debug("Loaded settings from %s", path)

    layout = data.get("layout", {})
    if not isinstance(layout, dict):
        msg = f"[layout] in {path} must be a table"
        raise ConfigError(msg)

    settings = Settings()
    if "axis" in layout:
        raw_axis = layout["axis"]
        if not isinstance(raw_axis, str):
            msg = f"layout.axis in {path} must be a string"
            raise ConfigError(msg)
        try:
            settings.axis = Axis.parse(raw_axis)
        except ValueError as e:
            msg = f"layout.axis in {path}: {e}"
            raise ConfigError(msg) from e
    if "nested" in layout:
        if not isinstance(layout["nested"], bool):
            msg = f"layout.nested in {path} must be true or false"
            raise ConfigError(msg)
        settings.nested = layout["nested"]
    return settings
