"""
Row height estimation for grouped message rows.

Lets a container size rows before any row widget exists, using the
process-wide default font size and the fixed minimum row height.
"""

from typing import Optional

from PySide6.QtGui import QFont, QFontMetrics, QTextDocument

from ..core.config import RowLayoutConfig, get_layout_config
from ..core.constants import MINIMUM_ROW_HEIGHT


def clamp_row_height(height: float) -> float:
    """Raise a height to the minimum row height."""
    return max(float(height), MINIMUM_ROW_HEIGHT)


def estimate_row_height(text: Optional[str], available_width: int,
                        config: Optional[RowLayoutConfig] = None) -> float:
    """
    Estimate the height of a grouped row for the given body text.

    Args:
        text: Message body (None counts as empty)
        available_width: Row width in pixels, including horizontal padding
        config: Layout config (defaults to the installed one)

    Returns:
        Estimated height, never below the minimum row height
    """
    config = config or get_layout_config()

    font = QFont()
    font.setPointSizeF(config.default_font_size)
    fm = QFontMetrics(font)

    # Width left for text once padding is taken off, at least one pixel
    text_width = max(1, int(available_width) - 2 * config.horizontal_padding)

    if text:
        # Same wrapping engine the body label uses
        doc = QTextDocument()
        doc.setDefaultFont(font)
        doc.setDocumentMargin(0)
        doc.setPlainText(text)
        doc.setTextWidth(text_width)
        text_height = doc.size().height()
    else:
        text_height = fm.height()

    return clamp_row_height(text_height + 2 * config.vertical_padding)
