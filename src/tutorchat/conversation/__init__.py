"""Conversation transcript module for tutorchat.

Holds the session-only, append-only history of user and model turns.
"""

from .models import Role, Transcript, Turn

__all__ = [
    "Role",
    "Transcript",
    "Turn",
]
