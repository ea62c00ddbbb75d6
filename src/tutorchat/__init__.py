"""
Tutorchat: a conversational English tutor relayed to a hosted language model.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .conversation import Role, Transcript, Turn
from .errors import (
    InvalidInput,
    RelayRequestError,
    SpeechUnavailable,
    TranslationFailure,
    TutorChatError,
    UpstreamError,
)

__all__ = [
    "InvalidInput",
    "RelayRequestError",
    "Role",
    "SpeechUnavailable",
    "Transcript",
    "TranslationFailure",
    "Turn",
    "TutorChatError",
    "UpstreamError",
]
