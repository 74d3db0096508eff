"""
talkrow - grouped chat message rows for PySide6 conversation views.
"""

from .version import VERSION, APP_NAME

__version__ = VERSION

__all__ = ['VERSION', 'APP_NAME', '__version__']
