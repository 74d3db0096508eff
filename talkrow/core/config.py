"""
Row layout configuration for talkrow.

A single immutable RowLayoutConfig is installed once per process and read by
rows and by the height-estimation routine. Values come from a YAML file:

    layout:
      default_font_size: 16
      horizontal_padding: 12
      vertical_padding: 4
      theme: dark
"""

import logging
import math
import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Optional

import yaml

from .constants import DEFAULT_FONT_SIZE
from ..styles.row_themes import ROW_THEMES


logger = logging.getLogger('talkrow.config')

# Environment variable pointing at a layout YAML file
CONFIG_ENV_VAR = 'TALKROW_CONFIG'

# File name looked up in the config directory when nothing else is given
CONFIG_FILE_NAME = 'talkrow.yaml'


class LayoutConfigError(ValueError):
    """Raised for unreadable or invalid layout configuration."""


@dataclass(frozen=True)
class RowLayoutConfig:
    """
    Process-wide layout values for grouped message rows.

    Frozen: once a config is installed its values stay fixed for the
    lifetime of the process.
    """

    default_font_size: float = DEFAULT_FONT_SIZE
    horizontal_padding: int = 12
    vertical_padding: int = 4
    theme: str = 'light'

    def __post_init__(self):
        if not math.isfinite(self.default_font_size) or self.default_font_size <= 0:
            raise LayoutConfigError(f"default_font_size must be a positive finite number, got {self.default_font_size}")
        if self.horizontal_padding < 0 or self.vertical_padding < 0:
            raise LayoutConfigError("paddings must not be negative")
        if self.theme not in ROW_THEMES:
            raise LayoutConfigError(f"Unknown row theme: {self.theme}")

    @classmethod
    def from_dict(cls, data: dict) -> 'RowLayoutConfig':
        """
        Build a config from a mapping, ignoring unknown keys.

        Args:
            data: Mapping with any of the RowLayoutConfig field names

        Returns:
            RowLayoutConfig with defaults for missing keys
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise LayoutConfigError(f"layout section must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown layout key: {key}")
                continue
            try:
                if key == 'default_font_size':
                    kwargs[key] = float(value)
                elif key in ('horizontal_padding', 'vertical_padding'):
                    kwargs[key] = int(value)
                else:
                    kwargs[key] = str(value)
            except (TypeError, ValueError) as e:
                raise LayoutConfigError(f"Invalid value for {key}: {value!r}") from e

        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Config as a plain dict (YAML-serializable)."""
        return asdict(self)


def load_layout_config(path=None, config_dir=None) -> RowLayoutConfig:
    """
    Load layout configuration from YAML.

    Lookup order: explicit path, $TALKROW_CONFIG, <config_dir>/talkrow.yaml.
    An explicitly named file that is missing or broken is an error; a missing
    implicit file yields the defaults.

    Args:
        path: Optional explicit YAML file path
        config_dir: Optional directory searched for talkrow.yaml

    Returns:
        RowLayoutConfig instance
    """
    explicit = path or os.getenv(CONFIG_ENV_VAR)

    if explicit:
        config_file = Path(explicit)
        if not config_file.exists():
            raise LayoutConfigError(f"Config file not found: {config_file}")
    elif config_dir:
        config_file = Path(config_dir) / CONFIG_FILE_NAME
        if not config_file.exists():
            logger.debug(f"No layout config at {config_file}, using defaults")
            return RowLayoutConfig()
    else:
        return RowLayoutConfig()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise LayoutConfigError(f"Malformed YAML in {config_file}: {e}") from e

    if not isinstance(raw, dict):
        raise LayoutConfigError(f"Top level of {config_file} must be a mapping")

    config = RowLayoutConfig.from_dict(raw.get('layout'))
    logger.info(f"Loaded layout config from {config_file}: {config.to_dict()}")
    return config


# Global singleton instance
_layout_config: Optional[RowLayoutConfig] = None


def install_layout_config(config: RowLayoutConfig) -> RowLayoutConfig:
    """
    Install the process-wide layout config.

    Installing an equal config again is a no-op; replacing an installed config
    with a different one is refused.

    Args:
        config: Config to install

    Returns:
        The installed config
    """
    global _layout_config
    if _layout_config is not None and _layout_config != config:
        raise RuntimeError("Row layout config is already installed and cannot change")
    _layout_config = config
    return _layout_config


def get_layout_config() -> RowLayoutConfig:
    """
    Get the process-wide layout config.

    Installs the defaults on first use when nothing was installed yet.
    """
    global _layout_config
    if _layout_config is None:
        _layout_config = RowLayoutConfig()
    return _layout_config


def _reset_layout_config():
    """Forget the installed config (test isolation only)."""
    global _layout_config
    _layout_config = None
