"""
GUI layer for talkrow.

Components:
- widgets/grouped_message_row.py: GroupedChatMessageRow (one grouped message)
- widgets/list_row.py: ListRow protocol and BindingTicket
- row_pool.py: RowPool (row reuse by identifier)
- row_sizing.py: height estimation before rows exist
- content_fetcher.py: RowContentFetcher (async fill with stale-result checks)
- demo_window.py: GroupedChatDemoWindow (sample conversation)
"""

__all__ = []  # Components imported directly by their users
