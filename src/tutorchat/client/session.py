"""Session context owning all per-session client state.

Everything mutable for a session (transcript, busy flag, cached voice,
playback task, HTTP client) lives here, created when the chat starts and
released when it ends.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from ..config import Settings, TranslationSettings
from ..errors import SpeechUnavailable
from ..speech import (
    SpeechPlayer,
    SpeechRecognizer,
    SpeechSynthesizer,
    VoiceSelector,
    create_speech_recognizer,
    create_speech_synthesizer,
)
from ..ui import ChatSurface
from .orchestrator import ConversationOrchestrator
from .relay_client import RelayClient
from .voice import VoiceInput

logger = logging.getLogger(__name__)


class ChatSession:
    """One chat session: orchestrator plus the speech features around it."""

    def __init__(
        self,
        relay: RelayClient,
        surface: ChatSurface,
        synthesizer: SpeechSynthesizer | None = None,
        recognizer: SpeechRecognizer | None = None,
        translation: TranslationSettings | None = None,
    ):
        self.relay = relay
        self.surface = surface
        self.voice_selector = VoiceSelector()
        self.player = SpeechPlayer(synthesizer, self.voice_selector) if synthesizer else None
        self.orchestrator = ConversationOrchestrator(
            relay,
            surface,
            player=self.player,
            translation=translation,
        )
        self.voice_input = VoiceInput(recognizer, self.orchestrator)
        self._recognizer = recognizer

    @classmethod
    @asynccontextmanager
    async def open(
        cls,
        settings: Settings,
        surface: ChatSurface,
        speak: bool = True,
        listen: bool = True,
    ) -> AsyncIterator["ChatSession"]:
        """Create a session from settings and tear it down on exit.

        Speech features that cannot start on this machine are left off.
        """
        synthesizer = _try_create(create_speech_synthesizer) if speak else None
        recognizer = _try_create(create_speech_recognizer) if listen else None
        session = cls(
            RelayClient(settings.relay_url),
            surface,
            synthesizer=synthesizer,
            recognizer=recognizer,
            translation=settings.translation,
        )
        try:
            yield session
        finally:
            await session.close()

    @property
    def speech_output(self) -> bool:
        return self.player is not None

    @property
    def speech_input(self) -> bool:
        return self.voice_input.available

    async def send(self, text: str) -> bool:
        return await self.orchestrator.send(text)

    async def close(self) -> None:
        await self.voice_input.aclose()
        if self.player is not None:
            await self.player.aclose()
        if self._recognizer is not None:
            await self._recognizer.close()
        await self.relay.close()


def _try_create(factory):
    try:
        return factory()
    except SpeechUnavailable as exc:
        logger.info("%s", exc)
        return None
