"""Data models for the conversation transcript.

These models define the turns exchanged with the tutor and the
wire shape the relay accepts: ``{"role": "user"|"model", "text": ...}``.
"""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..llm.models import ChatMessage


class Role(str, Enum):
    """Author of a turn."""

    USER = "user"
    MODEL = "model"


class Turn(BaseModel):
    """A single immutable conversation turn."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role = Field(description="Who authored the turn: 'user' or 'model'")
    text: str = Field(description="Text of the turn")

    def to_chat_message(self) -> ChatMessage:
        """Convert to a provider message (model turns become assistant messages)."""
        role = "assistant" if self.role is Role.MODEL else "user"
        return ChatMessage(role=role, content=self.text)

    def to_payload(self) -> dict[str, str]:
        """Wire representation used in relay requests."""
        return {"role": self.role.value, "text": self.text}


class Transcript:
    """Ordered, append-only conversation history for one session.

    Turns are appended in send/receive order and never modified or removed.
    Data is held in memory only and is lost when the session ends.
    """

    def __init__(self, turns: list[Turn] | None = None):
        self._turns: list[Turn] = list(turns or [])

    def append(self, turn: Turn) -> Turn:
        """Append a turn and return it."""
        self._turns.append(turn)
        return turn

    def add_user(self, text: str) -> Turn:
        return self.append(Turn(role=Role.USER, text=text))

    def add_model(self, text: str) -> Turn:
        return self.append(Turn(role=Role.MODEL, text=text))

    @property
    def turns(self) -> tuple[Turn, ...]:
        """Snapshot of the turns, oldest first."""
        return tuple(self._turns)

    @property
    def last(self) -> Turn | None:
        return self._turns[-1] if self._turns else None

    def to_payload(self) -> list[dict[str, str]]:
        """Serialize to the relay's ``conversation`` field."""
        return [turn.to_payload() for turn in self._turns]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
