"""
Utility modules for talkrow.
"""

from .paths import get_paths, Paths, PATH_MODE
from .logger import setup_main_logger, set_log_level

__all__ = [
    'get_paths',
    'Paths',
    'PATH_MODE',
    'setup_main_logger',
    'set_log_level',
]
