"""
Row widgets for talkrow.
"""

from .list_row import ListRow, BindingTicket, RowFactory
from .grouped_message_row import GroupedChatMessageRow

__all__ = ['ListRow', 'BindingTicket', 'RowFactory', 'GroupedChatMessageRow']
