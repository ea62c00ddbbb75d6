"""Fire-and-forget reply playback with at most one utterance audible."""

import asyncio
import contextlib
import logging

from ..config import RECOGNITION_LANGUAGE, SPEECH_PITCH, SPEECH_RATE, SPEECH_VOLUME
from .base import SpeechSynthesizer, Utterance
from .text import clean_text_for_speech
from .voices import VoiceSelector

logger = logging.getLogger(__name__)


class SpeechPlayer:
    """Speaks replies on a detached task.

    Starting a new utterance cancels the one in progress. Playback errors
    are logged and never reach the caller.
    """

    def __init__(
        self,
        synthesizer: SpeechSynthesizer,
        selector: VoiceSelector | None = None,
        rate: float = SPEECH_RATE,
        pitch: float = SPEECH_PITCH,
        volume: float = SPEECH_VOLUME,
    ):
        self._synthesizer = synthesizer
        self._selector = selector or VoiceSelector()
        self._rate = rate
        self._pitch = pitch
        self._volume = volume
        self._task: asyncio.Task | None = None

    @property
    def selector(self) -> VoiceSelector:
        return self._selector

    @property
    def is_speaking(self) -> bool:
        return self._task is not None and not self._task.done()

    def speak(self, text: str) -> asyncio.Task | None:
        """Start speaking ``text`` without waiting for playback.

        Returns:
            The playback task, or None when nothing is left to say after cleanup
        """
        cleaned = clean_text_for_speech(text)
        if not cleaned:
            return None
        self.cancel()
        task = asyncio.create_task(self._play(cleaned))
        task.add_done_callback(self._on_done)
        self._task = task
        return task

    def cancel(self) -> None:
        """Silence the current utterance, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            self._synthesizer.stop()
        self._task = None

    async def _play(self, text: str) -> None:
        voice = await self._selector.resolve(self._synthesizer)
        utterance = Utterance(
            text=text,
            voice=voice,
            lang=(voice.lang if voice and voice.lang else RECOGNITION_LANGUAGE),
            rate=self._rate,
            pitch=self._pitch,
            volume=self._volume,
        )
        await self._synthesizer.speak(utterance)

    def _on_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Speech playback failed: %s", exc)

    async def aclose(self) -> None:
        """Cancel playback and wait for the task to unwind, then close the engine."""
        task = self._task
        self.cancel()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await self._synthesizer.close()
