"""Conversation orchestration for one chat session.

Hides the request/response cycle: transcript bookkeeping, the
re-entrancy guard, the follow-up translation and reply playback.
"""

import logging
from enum import Enum

from ..config import FALLBACK_MESSAGE, TranslationSettings
from ..conversation import Role, Transcript
from ..errors import RelayRequestError, TranslationFailure
from ..prompts import build_translation_prompt
from ..speech import SpeechPlayer
from ..ui import ChatEntry, ChatSurface, Sender, build_chat_entry
from .relay_client import RelayClient

logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    """Where the current exchange stands."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    AWAITING_TRANSLATION = "awaiting_translation"


class ConversationOrchestrator:
    """Drives one exchange at a time between the user and the tutor.

    A send while an exchange (reply or translation) is in flight is
    dropped. The busy flag is released after every exchange, whether it
    succeeded or not.
    """

    def __init__(
        self,
        relay: RelayClient,
        surface: ChatSurface,
        player: SpeechPlayer | None = None,
        translation: TranslationSettings | None = None,
        transcript: Transcript | None = None,
        fallback_message: str = FALLBACK_MESSAGE,
    ):
        self._relay = relay
        self._surface = surface
        self._player = player
        self._translation = translation or TranslationSettings()
        self._transcript = transcript if transcript is not None else Transcript()
        self._fallback_message = fallback_message
        self._state = OrchestratorState.IDLE
        self._busy = False
        self._last_audio_entry: ChatEntry | None = None

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def last_audio_entry(self) -> ChatEntry | None:
        """Most recent bot entry carrying a listen control."""
        return self._last_audio_entry

    async def send(self, text: str) -> bool:
        """Run one exchange for ``text``.

        Returns:
            False when the text was empty or another exchange was in flight
        """
        text = (text or "").strip()
        if not text or self._busy:
            return False

        self._busy = True
        self._state = OrchestratorState.AWAITING_REPLY
        try:
            self._surface.add_entry(build_chat_entry(text, Sender.USER))
            self._transcript.add_user(text)

            self._surface.show_typing()
            try:
                reply = await self._relay.chat(self._transcript.to_payload())
            finally:
                self._surface.hide_typing()

            entry = build_chat_entry(reply, Sender.BOT, include_audio=self._player is not None)
            self._surface.add_entry(entry)
            self._transcript.add_model(reply)
            if entry.has_audio:
                self._last_audio_entry = entry
            if self._player is not None:
                self._player.speak(reply)

            self._state = OrchestratorState.AWAITING_TRANSLATION
            await self._attach_translation(entry, reply)
        except RelayRequestError as exc:
            logger.warning("Chat exchange failed: %s", exc)
            self._surface.add_entry(build_chat_entry(self._fallback_message, Sender.BOT))
        finally:
            self._busy = False
            self._state = OrchestratorState.IDLE
        return True

    async def translate(self, text: str) -> str:
        """Ask the relay for a translation of ``text``.

        The request carries only the translation instruction; it is not
        added to the transcript.

        Raises:
            TranslationFailure: If the relay call fails or returns nothing
        """
        prompt = build_translation_prompt(text, self._translation.language)
        try:
            translation = await self._relay.chat([{"role": Role.USER.value, "text": prompt}])
        except RelayRequestError as exc:
            raise TranslationFailure(str(exc)) from exc
        if not translation.strip():
            raise TranslationFailure("Empty translation")
        return translation.strip()

    async def _attach_translation(self, entry: ChatEntry, reply: str) -> None:
        try:
            translation = await self.translate(reply)
        except TranslationFailure as exc:
            logger.debug("Translation omitted: %s", exc)
            return
        self._surface.attach_translation(entry, translation)

    def listen(self, entry: ChatEntry | None = None) -> bool:
        """Replay a bot entry aloud (the most recent one by default).

        Returns:
            False when there is no player or nothing to replay
        """
        target = entry or self._last_audio_entry
        if self._player is None or target is None or target.speakable_text is None:
            return False
        return self._player.speak(target.speakable_text) is not None
