"""Data models for rendered chat entries.

Hides the internal representation of display blocks and chat bubbles.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Sender(str, Enum):
    """Who a chat entry is displayed for."""

    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ParagraphBlock:
    """A standalone line of text."""

    text: str


@dataclass(frozen=True)
class ListBlock:
    """A run of consecutive bullet items."""

    items: tuple[str, ...]


MessageBlock = ParagraphBlock | ListBlock


@dataclass
class ChatEntry:
    """One rendered chat bubble.

    ``speakable_text`` holds the raw reply for the listen control and is
    None for entries without audio. ``translation`` is attached after the
    entry is displayed.
    """

    sender: Sender
    blocks: list[MessageBlock]
    timestamp: str
    speakable_text: str | None = None
    translation: str | None = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def has_audio(self) -> bool:
        return self.speakable_text is not None
