"""Row styling module for talkrow."""

from .row_themes import get_row_colors, ROW_THEMES

__all__ = ['get_row_colors', 'ROW_THEMES']
