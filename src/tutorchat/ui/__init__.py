"""Chat rendering module for tutorchat.

Module structure (Parnas principle - each module hides a design decision):
- models.py: Data structures (blocks and chat entries)
- formatting.py: Reply text -> paragraphs and bullet lists
- surface.py: Display surface interface used by the orchestrator
- console.py: Rich terminal rendering
"""

from .console import RichChatSurface, render_entry
from .formatting import (
    build_chat_entry,
    format_bot_message_to_blocks,
    format_timestamp,
    user_message_blocks,
)
from .models import ChatEntry, ListBlock, MessageBlock, ParagraphBlock, Sender
from .surface import ChatSurface

__all__ = [
    "ChatEntry",
    "ChatSurface",
    "ListBlock",
    "MessageBlock",
    "ParagraphBlock",
    "RichChatSurface",
    "Sender",
    "build_chat_entry",
    "format_bot_message_to_blocks",
    "format_timestamp",
    "render_entry",
    "user_message_blocks",
]
