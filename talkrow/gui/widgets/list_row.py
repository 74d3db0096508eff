"""
List row capability.

What a row container needs from a reusable row, expressed as a protocol so
rows plug into a pool through a factory function instead of a shared base
class.
"""

from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Protocol, runtime_checkable

from PySide6.QtWidgets import QWidget


@dataclass(frozen=True)
class BindingTicket:
    """
    Tag for asynchronous work issued against a row.

    Captured when the work starts; compared with the row's current binding
    when the result arrives.
    """

    position: Optional[Hashable]
    generation: int


@runtime_checkable
class ListRow(Protocol):
    """A row that a container can bind, reuse and place on screen."""

    REUSE_IDENTIFIER: str

    @property
    def is_bound(self) -> bool:
        ...

    def bind(self, text: Optional[str], position: Hashable) -> None:
        ...

    def current_position(self) -> Optional[Hashable]:
        ...

    def ticket(self) -> BindingTicket:
        ...

    def is_current(self, ticket: BindingTicket) -> bool:
        ...

    def apply_if_current(self, ticket: BindingTicket, text: Optional[str]) -> bool:
        ...

    def prepare_for_reuse(self) -> None:
        ...

    def widget(self) -> QWidget:
        ...


# Zero-argument callable producing a fresh row
RowFactory = Callable[[], ListRow]
