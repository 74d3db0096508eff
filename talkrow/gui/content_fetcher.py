"""
Asynchronous row content fill.

Loads body content for a row on a worker thread and applies it on the GUI
thread, but only if the row still shows the binding the request was issued
for. Rows that scrolled away and were rebound in the meantime keep their new
content; the late result is dropped.
"""

import itertools
import logging
from typing import Callable, Dict, Hashable, Tuple

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from .widgets.list_row import BindingTicket, ListRow


logger = logging.getLogger('talkrow.content_fetcher')

# Loader: position -> body text; runs on a worker thread and must not touch widgets
ContentLoader = Callable[[Hashable], str]


class _LoadSignals(QObject):
    """Signals carrying worker results back to the GUI thread."""

    # Signal: (request_id, text)
    loaded = Signal(int, object)
    # Signal: (request_id, error message)
    errored = Signal(int, str)


class _LoadTask(QRunnable):
    """Worker task running one loader call."""

    def __init__(self, request_id: int, position: Hashable, loader: ContentLoader, signals: _LoadSignals):
        super().__init__()
        self.request_id = request_id
        self.position = position
        self.loader = loader
        self.signals = signals

    def run(self):
        """Run the loader off the GUI thread and report through signals."""
        try:
            text = self.loader(self.position)
        except Exception as e:
            logger.error(f"Content load failed for position {self.position}: {e}")
            self.signals.errored.emit(self.request_id, str(e))
            return

        self.signals.loaded.emit(self.request_id, text)


class RowContentFetcher(QObject):
    """
    Fills rows with content produced on worker threads.

    Each request captures the row's BindingTicket; the result is applied
    through row.apply_if_current() on the GUI thread.
    """

    # Signal: (position) - content applied to the row
    applied = Signal(object)
    # Signal: (position) - row was rebound before the content arrived
    discarded = Signal(object)
    # Signal: (position, error message) - loader raised
    failed = Signal(object, str)

    def __init__(self, parent=None, max_threads: int = 4):
        """
        Initialize the fetcher.

        Args:
            parent: Parent QObject
            max_threads: Worker threads used for loading
        """
        super().__init__(parent)

        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(max_threads)

        # Created on the GUI thread, so results are queued back to it
        self._signals = _LoadSignals(self)
        self._signals.loaded.connect(self._on_loaded)
        self._signals.errored.connect(self._on_errored)

        self._request_ids = itertools.count(1)
        self._pending: Dict[int, Tuple[ListRow, BindingTicket]] = {}
        self._watched_rows = set()  # id(row) of rows with a destroyed hook

    def request(self, row: ListRow, loader: ContentLoader) -> int:
        """
        Start loading content for the row's current binding.

        Args:
            row: Bound row to fill
            loader: Callable mapping the position to body text

        Returns:
            Request ID
        """
        ticket = row.ticket()
        request_id = next(self._request_ids)
        self._pending[request_id] = (row, ticket)

        # Forget requests whose row widget goes away before the result
        row_key = id(row)
        if row_key not in self._watched_rows:
            self._watched_rows.add(row_key)
            row.widget().destroyed.connect(lambda *_, key=row_key: self._forget_row(key))

        logger.debug(f"Request {request_id}: loading content for position {ticket.position}")
        self._pool.start(_LoadTask(request_id, ticket.position, loader, self._signals))
        return request_id

    def pending_count(self) -> int:
        """Requests issued but not yet resolved."""
        return len(self._pending)

    def wait_for_done(self, msecs: int = -1) -> bool:
        """
        Wait for worker threads to finish.

        Results are delivered once the GUI event loop runs again.

        Args:
            msecs: Timeout in milliseconds (-1 waits forever)

        Returns:
            True if all workers finished
        """
        return self._pool.waitForDone(msecs)

    def _forget_row(self, row_key: int):
        """Drop pending requests of a destroyed row."""
        self._watched_rows.discard(row_key)
        for request_id in [rid for rid, (row, _) in self._pending.items() if id(row) == row_key]:
            del self._pending[request_id]

    def _on_loaded(self, request_id: int, text):
        """Apply a result on the GUI thread if the row still matches."""
        entry = self._pending.pop(request_id, None)
        if entry is None:
            return

        row, ticket = entry
        if row.apply_if_current(ticket, text):
            self.applied.emit(ticket.position)
        else:
            logger.debug(f"Request {request_id}: row rebound to {row.current_position()}, result dropped")
            self.discarded.emit(ticket.position)

    def _on_errored(self, request_id: int, message: str):
        """Report a loader failure; the row stays as it is."""
        entry = self._pending.pop(request_id, None)
        if entry is None:
            return

        _, ticket = entry
        self.failed.emit(ticket.position, message)
