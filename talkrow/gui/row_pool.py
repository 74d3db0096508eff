"""
Row pool - reuse of row widgets across list positions.

Rows are registered under a reuse identifier with a factory function. The
pool hands out idle rows first and only calls the factory when none is left.
"""

import logging
from typing import Dict, Hashable, List, Optional

from .widgets.list_row import ListRow, RowFactory


logger = logging.getLogger('talkrow.row_pool')


class RowPool:
    """
    Pool of reusable rows keyed by reuse identifier.

    GUI-thread object: rows are created, bound and destroyed on the thread
    that renders them.
    """

    def __init__(self):
        """Initialize an empty pool."""
        self._factories: Dict[str, RowFactory] = {}
        self._idle: Dict[str, List[ListRow]] = {}
        self._in_use: Dict[int, ListRow] = {}   # id(row) -> row
        self._identifiers: Dict[int, str] = {}  # id(row) -> reuse identifier

        # Counters
        self.created_count = 0
        self.reused_count = 0
        self.destroyed_count = 0

    def register(self, identifier: str, factory: RowFactory):
        """
        Register a row factory under a reuse identifier.

        Args:
            identifier: Reuse identifier
            factory: Zero-argument callable returning a new row
        """
        if not identifier:
            raise ValueError("Reuse identifier must not be empty")

        if identifier in self._factories:
            logger.warning(f"Replacing row factory for '{identifier}'")

        self._factories[identifier] = factory
        self._idle.setdefault(identifier, [])
        logger.debug(f"Registered row factory for '{identifier}'")

    def dequeue(self, identifier: str, position: Hashable, text: Optional[str]) -> ListRow:
        """
        Get a row bound to a position, reusing an idle row when possible.

        Args:
            identifier: Reuse identifier the row factory was registered with
            position: List position the row will render
            text: Message body for that position

        Returns:
            Bound row
        """
        if identifier not in self._factories:
            raise KeyError(f"No row factory registered for '{identifier}'")

        idle = self._idle[identifier]
        if idle:
            row = idle.pop()
            row.prepare_for_reuse()
            self.reused_count += 1
        else:
            row = self._factories[identifier]()
            self.created_count += 1
            logger.debug(f"Created row #{self.created_count} for '{identifier}'")

        self._in_use[id(row)] = row
        self._identifiers[id(row)] = identifier

        row.bind(text, position)
        return row

    def recycle(self, row: ListRow):
        """
        Return a row to the idle set of its identifier.

        Args:
            row: Row previously handed out by dequeue()
        """
        identifier = self._identifiers.get(id(row))
        if identifier is None or id(row) not in self._in_use:
            logger.warning(f"Ignoring recycle of a row not handed out by this pool: {row!r}")
            return

        del self._in_use[id(row)]
        self._idle[identifier].append(row)

    def shrink(self, max_idle: int = 0):
        """
        Destroy idle rows beyond max_idle per identifier.

        Args:
            max_idle: Idle rows to keep for each identifier
        """
        if max_idle < 0:
            raise ValueError(f"max_idle must not be negative, got {max_idle}")

        for idle in self._idle.values():
            while len(idle) > max_idle:
                self._destroy(idle.pop())

    def clear(self):
        """Destroy every row this pool knows, idle or in use."""
        for idle in self._idle.values():
            while idle:
                self._destroy(idle.pop())

        for row in list(self._in_use.values()):
            self._destroy(row)
        self._in_use.clear()

        logger.debug(f"Pool cleared ({self.destroyed_count} rows destroyed so far)")

    def idle_count(self, identifier: str) -> int:
        """Number of idle rows waiting under an identifier."""
        return len(self._idle.get(identifier, []))

    def stats(self) -> dict:
        """Pool counters."""
        return {
            'created': self.created_count,
            'reused': self.reused_count,
            'destroyed': self.destroyed_count,
            'in_use': len(self._in_use),
            'idle': sum(len(idle) for idle in self._idle.values()),
        }

    def _destroy(self, row: ListRow):
        """Forget a row and schedule its widget for deletion."""
        self._in_use.pop(id(row), None)
        self._identifiers.pop(id(row), None)
        row.widget().deleteLater()
        self.destroyed_count += 1
