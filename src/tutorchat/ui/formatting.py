"""Text formatting utilities for chat entries.

Hides the details of turning raw model text into display blocks.
"""

import re
from datetime import datetime

from .models import ChatEntry, ListBlock, MessageBlock, ParagraphBlock, Sender

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_LEADING_MARKERS_RE = re.compile(r"^[\s•*-]+", re.MULTILINE)
_MARKER_RE = re.compile(r"[•*-]")
_SPACE_RUN_RE = re.compile(r"\s{2,}")
_NEWLINE_RE = re.compile(r"\r?\n")
_LIST_ITEM_RE = re.compile(r"^(?:\*|-|•)\s*(.+)$")


def normalize_markup(text: str) -> str:
    """Strip bold delimiters, canonicalize bullet markers and collapse spaces.

    - **bold** -> bold
    - leading "•", "*" or "-" markers -> "*"
    - runs of two or more whitespace characters (line breaks included) -> one space
    """
    cleaned = _BOLD_RE.sub(r"\1", text).strip()
    cleaned = _LEADING_MARKERS_RE.sub(lambda m: _MARKER_RE.sub("*", m.group(0)), cleaned)
    return _SPACE_RUN_RE.sub(" ", cleaned)


def format_bot_message_to_blocks(text: str) -> list[MessageBlock]:
    """Convert a model reply into paragraphs and bullet lists.

    Consecutive bullet lines form one list; any other line closes the
    open list and becomes its own paragraph. A blank line merges the lines
    around it, since the collapse turns it into a single space.

    Args:
        text: Raw reply text

    Returns:
        Blocks in input order
    """
    if not text:
        return []

    lines = [line.strip() for line in _NEWLINE_RE.split(normalize_markup(text))]

    blocks: list[MessageBlock] = []
    current_list: list[str] | None = None
    for line in lines:
        if not line:
            continue
        match = _LIST_ITEM_RE.match(line)
        if match:
            if current_list is None:
                current_list = []
            current_list.append(match.group(1).strip())
            continue
        if current_list is not None:
            blocks.append(ListBlock(items=tuple(current_list)))
            current_list = None
        blocks.append(ParagraphBlock(text=line))

    if current_list is not None:
        blocks.append(ListBlock(items=tuple(current_list)))
    return blocks


def user_message_blocks(text: str) -> list[MessageBlock]:
    """User text is shown as typed: a single paragraph."""
    return [ParagraphBlock(text=text or "")]


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a time as zero-padded ``HH:MM``."""
    return (moment or datetime.now()).strftime("%H:%M")


def build_chat_entry(
    text: str,
    sender: Sender,
    include_audio: bool = False,
    now: datetime | None = None,
) -> ChatEntry:
    """Build a chat entry for ``text``.

    Args:
        text: Raw message text
        sender: USER entries skip bullet/bold processing
        include_audio: Attach a listen control (bot entries only)
        now: Creation time (defaults to the current time)

    Returns:
        ChatEntry ready to be mounted on a display surface
    """
    moment = now or datetime.now()
    if sender is Sender.BOT:
        blocks = format_bot_message_to_blocks(text)
    else:
        blocks = user_message_blocks(text)
    speakable = text if (sender is Sender.BOT and include_audio) else None
    return ChatEntry(
        sender=sender,
        blocks=blocks,
        timestamp=format_timestamp(moment),
        speakable_text=speakable,
        created_at=moment,
    )
