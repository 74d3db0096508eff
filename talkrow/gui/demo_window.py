"""
Demo window - a sample grouped conversation.

Rows come from a RowPool and are filled asynchronously by a
RowContentFetcher. The "Shuffle" button rebinds every row to another position
while fills are still in flight, so stale results get dropped.
"""

import logging
import random
import time

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QScrollArea, QPushButton
)
from PySide6.QtCore import Qt

from ..core.constants import GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER
from ..version import get_version_string
from .row_pool import RowPool
from .row_sizing import estimate_row_height
from .content_fetcher import RowContentFetcher
from .widgets.grouped_message_row import GroupedChatMessageRow


logger = logging.getLogger('talkrow.demo')

SAMPLE_BODIES = [
    "ok",
    "Sounds good, see you at the call.",
    "I pushed the fix for the reconnect issue, can someone try it on a slow network?",
    "",
    "Lunch?",
    "The meeting room moved to the second floor. Bring your own headset, "
    "the ones in the room are broken again and nobody has ordered new ones yet.",
]


def load_sample_body(position):
    """Pretend to fetch a message body from a slow store (worker thread)."""
    time.sleep(random.uniform(0.05, 0.4))
    return f"#{position}: {SAMPLE_BODIES[position % len(SAMPLE_BODIES)]}"


class GroupedChatDemoWindow(QMainWindow):
    """Window showing a grouped conversation built from pooled rows."""

    def __init__(self, row_count=30, parent=None):
        super().__init__(parent)
        self.setWindowTitle(get_version_string())
        self.resize(480, 640)

        self.row_count = row_count
        self.rows = []

        self.pool = RowPool()
        self.pool.register(GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER, GroupedChatMessageRow)

        self.fetcher = RowContentFetcher(self)
        self.fetcher.applied.connect(self._update_status)
        self.fetcher.discarded.connect(self._update_status)
        self.fetcher.failed.connect(lambda position, message: logger.warning(f"Row {position}: {message}"))

        # Message area
        self.message_container = QWidget()
        self.message_layout = QVBoxLayout(self.message_container)
        self.message_layout.setContentsMargins(0, 0, 0, 0)
        self.message_layout.setSpacing(0)
        self.message_layout.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.message_container)

        # Controls
        shuffle_btn = QPushButton("Shuffle")
        shuffle_btn.clicked.connect(self.shuffle)
        reload_btn = QPushButton("Reload")
        reload_btn.clicked.connect(self.reload)

        controls = QHBoxLayout()
        controls.addWidget(shuffle_btn)
        controls.addWidget(reload_btn)
        controls.addStretch()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addLayout(controls)
        layout.addWidget(scroll)
        self.setCentralWidget(central)

        self.reload()

    def reload(self):
        """Recycle every row and bind a fresh set of positions."""
        for row in self.rows:
            self.message_layout.removeWidget(row.widget())
            row.widget().hide()
            self.pool.recycle(row)
        self.rows = []

        for position in range(self.row_count):
            row = self.pool.dequeue(GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER, position, "…")
            self.message_layout.addWidget(row.widget())
            row.widget().show()
            self.rows.append(row)
            self.fetcher.request(row, load_sample_body)

        logger.info(f"Reloaded {self.row_count} rows, pool: {self.pool.stats()}")
        self._update_status()

    def shuffle(self):
        """Rebind rows to random positions while fills may still be running."""
        positions = random.sample(range(self.row_count * 3), self.row_count)
        width = self.message_container.width()

        for row, position in zip(self.rows, positions):
            row.bind("…", position)
            self.fetcher.request(row, load_sample_body)

        if self.rows:
            logger.debug(f"Estimated height of first row: {estimate_row_height(self.rows[0].body_text, width)}")
        self._update_status()

    def _update_status(self, *_):
        stats = self.pool.stats()
        self.statusBar().showMessage(
            f"rows created: {stats['created']}  reused: {stats['reused']}  "
            f"pending fills: {self.fetcher.pending_count()}"
        )

    def closeEvent(self, event):
        """Wait for in-flight fills and release pooled rows."""
        self.fetcher.wait_for_done(2000)
        self.pool.clear()
        super().closeEvent(event)
