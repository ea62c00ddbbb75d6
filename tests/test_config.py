"""Unit tests for settings and prompts."""
from pathlib import Path

import pytest

from tutorchat.config import Settings, TranslationSettings
from tutorchat.prompts import build_translation_prompt, clear_cache, load_prompt

_ENV_VARS = [
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "PORT",
    "TUTORCHAT_HOST",
    "TUTORCHAT_STATIC_DIR",
    "TUTORCHAT_RELAY_URL",
    "TUTORCHAT_TRANSLATION_LANGUAGE",
    "TUTORCHAT_TRANSLATION_LABEL",
    "TUTORCHAT_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self, clean_env):
        """Test the defaults when nothing is set."""
        settings = Settings.from_env()

        assert settings.gemini_api_key is None
        assert settings.gemini_model == "gemini-2.5-flash"
        assert settings.temperature == pytest.approx(0.9)
        assert settings.port == 3000
        assert settings.static_dir == Path("public")
        assert settings.relay_url == "http://127.0.0.1:3000"
        assert settings.translation.language == "Indonesian"

    def test_overrides(self, clean_env):
        """Test that environment variables override the defaults."""
        clean_env.setenv("GEMINI_API_KEY", "secret")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("TUTORCHAT_STATIC_DIR", "/srv/tutor")
        clean_env.setenv("TUTORCHAT_TRANSLATION_LANGUAGE", "Spanish")
        clean_env.setenv("TUTORCHAT_LOG_LEVEL", "DEBUG")

        settings = Settings.from_env()

        assert settings.gemini_api_key == "secret"
        assert settings.port == 8080
        assert settings.relay_url == "http://127.0.0.1:8080"
        assert settings.static_dir == Path("/srv/tutor")
        assert settings.translation.language == "Spanish"
        assert settings.log_level == "DEBUG"

    def test_blank_api_key_is_missing(self, clean_env):
        """Test that an empty key counts as not configured."""
        clean_env.setenv("GEMINI_API_KEY", "")

        assert Settings.from_env().gemini_api_key is None


class TestTranslationSettings:
    """Tests for the translation caption."""

    def test_default_caption(self):
        assert TranslationSettings().caption == "Terjemahan (Indonesia)"

    def test_caption_follows_language(self):
        assert TranslationSettings(language="Spanish").caption == "Translation (Spanish)"

    def test_explicit_label(self):
        assert TranslationSettings(language="Spanish", label="Traducción").caption == "Traducción"


class TestPrompts:
    """Tests for prompt loading."""

    def test_translation_prompt(self):
        """Test the exact translation instruction."""
        assert build_translation_prompt("Good morning!", "Indonesian") == (
            "Translate the following English text into Indonesian only:\n\nGood morning!"
        )

    def test_working_directory_override(self, tmp_path, monkeypatch):
        """Test that ./prompts overrides the packaged prompt."""
        (tmp_path / "prompts").mkdir()
        (tmp_path / "prompts" / "persona.txt").write_text("You are a pirate.", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        clear_cache()

        try:
            assert load_prompt("persona") == "You are a pirate."
        finally:
            clear_cache()

    def test_missing_prompt(self):
        """Test that unknown prompts raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_prompt("does-not-exist")
