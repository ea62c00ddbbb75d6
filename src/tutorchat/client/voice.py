"""Spoken input: one utterance captured, then sent as a chat message."""

import asyncio
import logging

from ..errors import SpeechUnavailable
from ..speech import SpeechRecognizer
from .orchestrator import ConversationOrchestrator

logger = logging.getLogger(__name__)


class VoiceInput:
    """Start/stop control around a single-utterance recognizer.

    Only the wait for speech can be stopped. Once an utterance has been
    recognized its text is sent through the orchestrator and that exchange
    runs to completion like a typed message.
    """

    def __init__(self, recognizer: SpeechRecognizer | None, orchestrator: ConversationOrchestrator):
        self._recognizer = recognizer
        self._orchestrator = orchestrator
        self._task: asyncio.Task | None = None
        self._recognition: asyncio.Future | None = None

    @property
    def available(self) -> bool:
        return self._recognizer is not None

    @property
    def listening(self) -> bool:
        """True while waiting for speech."""
        return self._recognition is not None and not self._recognition.done()

    async def capture(self) -> str:
        """Capture one utterance and send it.

        Returns:
            The recognized text ("" when nothing was understood or the
            capture was stopped)

        Raises:
            SpeechUnavailable: If no recognizer is configured or capture fails
        """
        if self._recognizer is None:
            raise SpeechUnavailable("Speech input is not available")

        recognition = asyncio.ensure_future(self._recognizer.listen_once())
        self._recognition = recognition
        try:
            await asyncio.wait({recognition})
        finally:
            if not recognition.done():
                recognition.cancel()
            self._recognition = None

        if recognition.cancelled():
            return ""
        transcript = recognition.result().strip()
        if transcript:
            await self._orchestrator.send(transcript)
        return transcript

    def start(self) -> asyncio.Task | None:
        """Begin capturing in the background (no-op while a capture is active)."""
        if self._recognizer is None:
            return None
        if self._task is not None and not self._task.done():
            return self._task
        self._task = asyncio.create_task(self.capture())
        self._task.add_done_callback(self._on_done)
        return self._task

    async def stop(self) -> None:
        """Stop waiting for speech.

        Has no effect once the utterance was recognized; its exchange
        continues.
        """
        recognition = self._recognition
        if recognition is not None and not recognition.done():
            recognition.cancel()
            await asyncio.wait({recognition})

    async def toggle(self) -> bool:
        """Stop if listening, start otherwise. Returns True when now listening."""
        if self.listening:
            await self.stop()
            return False
        return self.start() is not None

    async def aclose(self) -> None:
        """Cancel any background capture, including an exchange it started."""
        await self.stop()
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})

    def _on_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Speech recognition error: %s", exc)
