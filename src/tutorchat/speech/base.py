"""Abstract interfaces for speech synthesis and capture engines.

The abstraction hides:
- Which engine produces or captures audio
- Whether the engine is blocking or asynchronous
- How the engine reports its voice catalog
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..config import RECOGNITION_LANGUAGE, SPEECH_PITCH, SPEECH_RATE, SPEECH_VOLUME


@dataclass(frozen=True)
class Voice:
    """A synthetic voice offered by an engine."""

    id: str
    name: str
    lang: str = ""


@dataclass(frozen=True)
class Utterance:
    """Text to speak plus how to speak it.

    ``rate`` and ``pitch`` are relative to the engine's defaults (1.0).
    """

    text: str
    voice: Voice | None = None
    lang: str = RECOGNITION_LANGUAGE
    rate: float = SPEECH_RATE
    pitch: float = SPEECH_PITCH
    volume: float = SPEECH_VOLUME


class SpeechSynthesizer(ABC):
    """Text-to-speech engine."""

    @abstractmethod
    async def list_voices(self) -> list[Voice]:
        """Return the voices currently known to the engine (may be empty)."""

    async def wait_for_voices(self) -> list[Voice]:
        """Wait until the voice catalog is ready and return it.

        Engines whose catalog is available immediately need not override this.
        """
        return await self.list_voices()

    @abstractmethod
    async def speak(self, utterance: Utterance) -> None:
        """Speak an utterance, returning when playback ends."""

    @abstractmethod
    def stop(self) -> None:
        """Stop any utterance currently playing."""

    async def close(self) -> None:
        """Release engine resources."""
        self.stop()


class SpeechRecognizer(ABC):
    """Single-utterance speech-to-text engine."""

    @abstractmethod
    async def listen_once(self) -> str:
        """Capture one utterance and return its transcript ("" if nothing was understood)."""

    async def close(self) -> None:
        """Release engine resources."""
