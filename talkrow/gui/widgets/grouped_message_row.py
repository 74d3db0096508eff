"""
Grouped chat message row.

A reusable row for a follow-up message in a grouped conversation: no avatar
and no header, just the message body. Rows are recycled across positions as
the list scrolls, so every binding carries a position and a generation that
asynchronous fill logic checks before touching the row.
"""

import logging
import math
from typing import Hashable, Optional

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QFont, QPalette

from ...core.config import get_layout_config
from ...core.constants import GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER, MINIMUM_ROW_HEIGHT
from ...styles.row_themes import get_row_colors
from .list_row import BindingTicket


logger = logging.getLogger('talkrow.row')


class GroupedChatMessageRow(QFrame):
    """
    Row widget showing the body text of one grouped chat message.

    All mutations happen on the GUI thread. Worker threads may only hold a
    BindingTicket and hand results back for apply_if_current().
    """

    REUSE_IDENTIFIER = GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER

    # Signal: (position) - emitted after every bind()
    rebound = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("groupedChatMessageRow")

        config = get_layout_config()

        # Binding state
        self._position = None
        self._is_bound = False
        self._generation = 0
        self._body_text = ''

        # Body label
        self.body_label = QLabel(self)
        self.body_label.setObjectName("groupedChatMessageBody")
        self.body_label.setTextFormat(Qt.PlainText)
        self.body_label.setWordWrap(True)
        self.body_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.body_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

        body_font = QFont(self.body_label.font())
        body_font.setPointSizeF(self.default_font_size())
        self.body_label.setFont(body_font)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            config.horizontal_padding, config.vertical_padding,
            config.horizontal_padding, config.vertical_padding
        )
        layout.setSpacing(0)
        layout.addWidget(self.body_label)

        self.setMinimumHeight(math.ceil(MINIMUM_ROW_HEIGHT))
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Minimum)

        self.set_theme(config.theme)

    @staticmethod
    def default_font_size() -> float:
        """Default body font size in points, fixed for the process lifetime."""
        return get_layout_config().default_font_size

    @staticmethod
    def minimum_row_height() -> float:
        """Floor height of any grouped row, fixed for the process lifetime."""
        return MINIMUM_ROW_HEIGHT

    @property
    def is_bound(self) -> bool:
        """True once the row has shown a message; stays True across reuse."""
        return self._is_bound

    @property
    def body_text(self) -> str:
        return self._body_text

    def bind(self, text: Optional[str], position: Hashable):
        """
        Show a message for a list position.

        Text and position change together; any ticket issued before this call
        stops being current.

        Args:
            text: Message body (None is shown as empty)
            position: Identifier of the list slot this row now renders
        """
        self._generation += 1
        self._body_text = text or ''
        self._position = position
        self._is_bound = True
        self.body_label.setText(self._body_text)
        self.updateGeometry()

        logger.debug(f"Row bound to position {position} (generation {self._generation})")
        self.rebound.emit(position)

    def current_position(self) -> Optional[Hashable]:
        """Position this row currently renders (None before bind() and after prepare_for_reuse())."""
        return self._position

    def ticket(self) -> BindingTicket:
        """Tag for asynchronous work issued against the current binding."""
        return BindingTicket(self._position, self._generation)

    def is_current(self, ticket: BindingTicket) -> bool:
        """True while the row still shows the binding the ticket was issued for."""
        return (
            self._is_bound
            and ticket.generation == self._generation
            and ticket.position == self._position
        )

    def apply_if_current(self, ticket: BindingTicket, text: Optional[str]) -> bool:
        """
        Apply late-arriving body text if the ticket still matches.

        Args:
            ticket: Ticket captured when the work was issued
            text: New body text

        Returns:
            True if applied, False if the row moved on and the text was dropped
        """
        if not self.is_current(ticket):
            logger.debug(
                f"Dropping stale content for position {ticket.position} "
                f"(row now at {self._position}, generation {self._generation})"
            )
            return False

        self._body_text = text or ''
        self.body_label.setText(self._body_text)
        self.updateGeometry()
        return True

    def prepare_for_reuse(self):
        """Clear the row before it is handed out again; in-flight tickets go stale."""
        self._generation += 1
        self._body_text = ''
        self._position = None
        self.body_label.clear()

    def widget(self):
        return self

    def set_theme(self, theme_name: str):
        """
        Update row colors for a theme.

        Args:
            theme_name: Theme name ('light', 'dark', 'gruvbox')
        """
        colors = get_row_colors(theme_name)

        palette = self.palette()
        palette.setColor(QPalette.Window, colors['background'])
        palette.setColor(QPalette.WindowText, colors['text'])
        palette.setColor(QPalette.Text, colors['text'])
        palette.setColor(QPalette.Link, colors['link'])
        self.setPalette(palette)
        self.setAutoFillBackground(True)
        self.body_label.setPalette(palette)

    def sizeHint(self) -> QSize:
        hint = super().sizeHint()
        return QSize(hint.width(), max(hint.height(), math.ceil(self.minimum_row_height())))

    def minimumSizeHint(self) -> QSize:
        hint = super().minimumSizeHint()
        return QSize(hint.width(), max(hint.height(), math.ceil(self.minimum_row_height())))
