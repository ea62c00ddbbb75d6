"""Microphone capture transcribed with the SpeechRecognition library.

Uses the free Google Web Speech endpoint, the same service browsers use
for their built-in recognition.
"""

import asyncio
import logging

import speech_recognition as sr

from ...config import RECOGNITION_LANGUAGE
from ...errors import SpeechUnavailable
from ..base import SpeechRecognizer

logger = logging.getLogger(__name__)


class GoogleSpeechRecognizer(SpeechRecognizer):
    """Single-utterance recognition (no continuous mode, no interim results)."""

    def __init__(
        self,
        language: str = RECOGNITION_LANGUAGE,
        phrase_time_limit: float | None = 15.0,
        timeout: float | None = 8.0,
    ):
        self._language = language
        self._phrase_time_limit = phrase_time_limit
        self._timeout = timeout
        self._recognizer = sr.Recognizer()

    def _capture_sync(self) -> str:
        try:
            microphone = sr.Microphone()
        except (AttributeError, OSError) as exc:
            # AttributeError: PyAudio is not installed
            raise SpeechUnavailable(f"No microphone available: {exc}") from exc

        with microphone as source:
            self._recognizer.adjust_for_ambient_noise(source, duration=0.3)
            try:
                audio = self._recognizer.listen(
                    source,
                    timeout=self._timeout,
                    phrase_time_limit=self._phrase_time_limit,
                )
            except sr.WaitTimeoutError:
                return ""

        try:
            return self._recognizer.recognize_google(audio, language=self._language)
        except sr.UnknownValueError:
            return ""
        except sr.RequestError as exc:
            raise SpeechUnavailable(f"Speech recognition service unavailable: {exc}") from exc

    async def listen_once(self) -> str:
        """Capture one utterance on a worker thread.

        Cancelling the awaiting task returns control immediately; the
        microphone is released once the current phrase ends.
        """
        transcript = await asyncio.to_thread(self._capture_sync)
        logger.debug("Recognized %r", transcript)
        return transcript
