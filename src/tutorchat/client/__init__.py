"""Chat client module for tutorchat.

Module structure:
- relay_client.py: HTTP calls to the relay
- orchestrator.py: One exchange at a time, translation, playback trigger
- voice.py: Spoken input
- session.py: Per-session state and its lifecycle
"""

from .orchestrator import ConversationOrchestrator, OrchestratorState
from .relay_client import RelayClient
from .session import ChatSession
from .voice import VoiceInput

__all__ = [
    "ChatSession",
    "ConversationOrchestrator",
    "OrchestratorState",
    "RelayClient",
    "VoiceInput",
]
