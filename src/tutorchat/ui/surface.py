"""Display surface interface for chat entries.

The orchestrator only talks to this interface; how entries reach the
screen (terminal, test recorder, ...) is hidden behind it.
"""

from abc import ABC, abstractmethod

from .models import ChatEntry


class ChatSurface(ABC):
    """Where chat entries are mounted."""

    @abstractmethod
    def add_entry(self, entry: ChatEntry) -> None:
        """Display a new chat entry."""

    @abstractmethod
    def attach_translation(self, entry: ChatEntry, translation: str) -> None:
        """Attach a translation to an entry that is already displayed."""

    @abstractmethod
    def show_typing(self) -> None:
        """Show the "tutor is typing" indicator."""

    @abstractmethod
    def hide_typing(self) -> None:
        """Remove the typing indicator if it is shown."""
