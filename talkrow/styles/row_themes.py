"""
Row color themes for grouped chat message display.

Each theme defines the colors of a grouped message row: body text, row
background and link color.
"""

from PySide6.QtGui import QColor


ROW_THEMES = {
    'light': {
        'text': '#212121',          # Dark text
        'background': '#ffffff',    # Plain white row
        'link': '#0082c9',          # Blue links
    },

    'dark': {
        'text': '#e0e0e0',          # Light gray
        'background': '#2b2b2b',    # Dark gray
        'link': '#66b3ff',          # Soft blue
    },

    'gruvbox': {
        'text': '#ebdbb2',          # Gruvbox light cream foreground
        'background': '#282828',    # Gruvbox dark0
        'link': '#83a598',          # Gruvbox blue
    },
}


def get_row_colors(theme_name: str) -> dict:
    """
    Get row colors for a theme.

    Args:
        theme_name: Theme name ('light', 'dark', 'gruvbox')

    Returns:
        Dictionary with QColor objects for row styling, or light colors if theme not found
    """
    # Default to 'light' if theme not found
    colors = ROW_THEMES.get(theme_name, ROW_THEMES['light'])

    return {
        'text': QColor(colors['text']),
        'background': QColor(colors['background']),
        'link': QColor(colors['link']),
    }
