"""Preferred-voice selection and its session cache."""

import asyncio
import logging
import re

from .base import SpeechSynthesizer, Voice

logger = logging.getLogger(__name__)

PREFERRED_VOICE_NAMES = (
    "Google UK English Female",
    "Google US English",
    "Samantha",
    "Victoria",
    "Ivy",
    "Karen",
    "en-US-Wavenet-F",
    "en-GB-Wavenet-F",
)

_FEMALE_NAME_RE = re.compile(r"female|woman", re.IGNORECASE)


def pick_preferred_voice(
    voices: list[Voice],
    preferred: tuple[str, ...] = PREFERRED_VOICE_NAMES,
) -> Voice | None:
    """Pick the voice to speak replies with.

    Order of preference:
    1. First voice whose name contains one of ``preferred``
    2. First voice whose name suggests a female speaker
    3. First English voice
    4. First voice of any kind
    """
    for voice in voices:
        if voice.name and any(name in voice.name for name in preferred):
            return voice
    for voice in voices:
        if _FEMALE_NAME_RE.search(voice.name or ""):
            return voice
    for voice in voices:
        if voice.lang and voice.lang.lower().startswith("en"):
            return voice
    return voices[0] if voices else None


class VoiceSelector:
    """Resolves the preferred voice once per session and reuses it.

    The result is never invalidated. While the catalog is still empty
    nothing is cached, so the next resolution tries again.
    """

    def __init__(self, preferred: tuple[str, ...] = PREFERRED_VOICE_NAMES):
        self._preferred = preferred
        self._voice: Voice | None = None
        self._lock = asyncio.Lock()

    @property
    def cached_voice(self) -> Voice | None:
        return self._voice

    async def resolve(self, synthesizer: SpeechSynthesizer) -> Voice | None:
        """Return the cached voice, waiting for the catalog on first use."""
        if self._voice is not None:
            return self._voice
        async with self._lock:
            if self._voice is None:
                voices = await synthesizer.wait_for_voices()
                self._voice = pick_preferred_voice(voices, self._preferred)
                if self._voice is not None:
                    logger.debug("Selected voice %s (%s)", self._voice.name, self._voice.lang)
        return self._voice
