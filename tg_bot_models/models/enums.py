"""
Closed enumerations used on the wire.

Values are matched exactly; an unrecognised value is a decode error.
"""

from enum import Enum


class ParseMode(str, Enum):
    """
    Text formatting directive for message text.

    Plain text has no member: leave parse_mode unset and the key is
    omitted from the payload.
    """

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ChatType(str, Enum):
    """Telegram chat type."""

    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"
