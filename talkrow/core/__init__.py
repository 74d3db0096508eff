"""
Core layer for talkrow.

Constants and the process-wide row layout configuration.
"""

from .config import (
    RowLayoutConfig,
    LayoutConfigError,
    load_layout_config,
    install_layout_config,
    get_layout_config,
)
from .constants import (
    MINIMUM_ROW_HEIGHT,
    DEFAULT_FONT_SIZE,
    GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER,
)

__all__ = [
    'RowLayoutConfig',
    'LayoutConfigError',
    'load_layout_config',
    'install_layout_config',
    'get_layout_config',
    'MINIMUM_ROW_HEIGHT',
    'DEFAULT_FONT_SIZE',
    'GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER',
]
