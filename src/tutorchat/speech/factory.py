"""Factory for creating speech engines."""

from typing import Any

from ..errors import SpeechUnavailable
from .base import SpeechRecognizer, SpeechSynthesizer


def create_speech_synthesizer(backend: str = "pyttsx3", **kwargs: Any) -> SpeechSynthesizer:
    """Create a text-to-speech engine.

    Args:
        backend: Engine type ("pyttsx3")
        **kwargs: Engine-specific configuration

    Returns:
        SpeechSynthesizer instance

    Raises:
        ValueError: If backend type is not supported
        SpeechUnavailable: If the engine cannot run on this machine
    """
    if backend == "pyttsx3":
        try:
            from .providers.pyttsx3_synthesizer import Pyttsx3Synthesizer
        except ImportError as exc:
            raise SpeechUnavailable(
                "Speech output requires the 'speech' extra: pip install tutorchat[speech]"
            ) from exc
        try:
            return Pyttsx3Synthesizer(**kwargs)
        except (OSError, RuntimeError) as exc:
            raise SpeechUnavailable(f"No speech synthesis engine available: {exc}") from exc

    raise ValueError(
        f"Unsupported speech synthesis backend: {backend}. "
        f"Supported backends: pyttsx3"
    )


def create_speech_recognizer(backend: str = "google", **kwargs: Any) -> SpeechRecognizer:
    """Create a speech-to-text engine.

    Args:
        backend: Engine type ("google")
        **kwargs: Engine-specific configuration

    Returns:
        SpeechRecognizer instance

    Raises:
        ValueError: If backend type is not supported
        SpeechUnavailable: If the recognition library is missing
    """
    if backend == "google":
        try:
            from .providers.google_recognizer import GoogleSpeechRecognizer
        except ImportError as exc:
            raise SpeechUnavailable(
                "Speech input requires the 'speech' extra: pip install tutorchat[speech]"
            ) from exc
        return GoogleSpeechRecognizer(**kwargs)

    raise ValueError(
        f"Unsupported speech recognition backend: {backend}. "
        f"Supported backends: google"
    )
