"""Configuration for the relay and the chat client.

Centralizes defaults and the environment variables that override them.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Relay defaults
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.9
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = "public"
CHAT_ROUTE = "/api/chat"

# Client defaults
DEFAULT_RELAY_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
DEFAULT_TRANSLATION_LANGUAGE = "Indonesian"
DEFAULT_TRANSLATION_LABEL = "Terjemahan (Indonesia)"
FALLBACK_MESSAGE = "Maaf, terjadi kesalahan. Coba lagi nanti."
TYPING_MESSAGE = "Tutor AI sedang mengetik..."
LISTEN_LABEL = "Dengar"

# Speech defaults
RECOGNITION_LANGUAGE = "en-US"
SPEECH_RATE = 0.95
SPEECH_PITCH = 1.05
SPEECH_VOLUME = 1.0

DEFAULT_LOG_LEVEL = "WARNING"


class TranslationSettings(BaseModel):
    """Target of the automatic reply translation."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(default=DEFAULT_TRANSLATION_LANGUAGE, description="Target language name")
    label: str | None = Field(default=None, description="Caption shown above a translation")

    @property
    def caption(self) -> str:
        """Caption for translations, derived from the language when no label is set."""
        if self.label:
            return self.label
        if self.language == DEFAULT_TRANSLATION_LANGUAGE:
            return DEFAULT_TRANSLATION_LABEL
        return f"Translation ({self.language})"


class Settings(BaseModel):
    """Runtime settings for both the relay service and the chat client."""

    gemini_api_key: str | None = Field(default=None, description="Google AI API key")
    gemini_model: str = DEFAULT_GEMINI_MODEL
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    static_dir: Path = Path(DEFAULT_STATIC_DIR)
    relay_url: str = DEFAULT_RELAY_URL
    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Environment variables:
            GEMINI_API_KEY: Gemini API key (absence only fails chat requests)
            GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
            PORT: Relay port (default: 3000)
            TUTORCHAT_HOST: Relay bind address (default: 127.0.0.1)
            TUTORCHAT_STATIC_DIR: Directory of static client assets (default: ./public)
            TUTORCHAT_RELAY_URL: Relay base URL used by the chat client
            TUTORCHAT_TRANSLATION_LANGUAGE: Translation target (default: Indonesian)
            TUTORCHAT_TRANSLATION_LABEL: Caption for translations
            TUTORCHAT_LOG_LEVEL: Logging level (default: WARNING)
        """
        port = int(os.getenv("PORT", str(DEFAULT_PORT)))
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            host=os.getenv("TUTORCHAT_HOST", DEFAULT_HOST),
            port=port,
            static_dir=Path(os.getenv("TUTORCHAT_STATIC_DIR", DEFAULT_STATIC_DIR)),
            relay_url=os.getenv("TUTORCHAT_RELAY_URL", f"http://{DEFAULT_HOST}:{port}"),
            translation=TranslationSettings(
                language=os.getenv("TUTORCHAT_TRANSLATION_LANGUAGE", DEFAULT_TRANSLATION_LANGUAGE),
                label=os.getenv("TUTORCHAT_TRANSLATION_LABEL") or None,
            ),
            log_level=os.getenv("TUTORCHAT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
