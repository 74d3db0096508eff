"""
Layout constants for grouped chat message rows.

Centralized place for row sizing values and reuse identifiers to avoid inconsistencies.
"""

# Floor height of any grouped message row, in layout units (pixels at 1x)
MINIMUM_ROW_HEIGHT = 30.0

# Default body font size in points, used before a row is rendered
DEFAULT_FONT_SIZE = 16.0

# Reuse identifier under which grouped rows are registered with a pool
GROUPED_CHAT_MESSAGE_ROW_IDENTIFIER = 'GroupedChatMessageCellIdentifier'
