"""Unit tests for the LLM provider layer."""
import os
from types import SimpleNamespace

import pytest

from tutorchat.llm import ChatMessage, GeminiProvider, LLMProvider, LLMResponse, create_llm_provider


def _response(*texts, candidates=True, block_reason=None):
    parts = [SimpleNamespace(text=text) for text in texts]
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))] if candidates else [],
        prompt_feedback=SimpleNamespace(block_reason=block_reason),
        text="".join(texts),
    )


class TestModels:
    """Tests for provider data models."""

    def test_chat_message_is_frozen(self):
        """Test that messages cannot be mutated."""
        message = ChatMessage(role="user", content="Hi")

        with pytest.raises(Exception):
            message.content = "changed"  # type: ignore

    def test_response_defaults(self):
        """Test LLMResponse optional fields."""
        response = LLMResponse(content="Hello", model="gemini-2.5-flash")

        assert response.usage is None


class TestGeminiProvider:
    """Tests for GeminiProvider conversions."""

    @pytest.fixture
    def provider(self):
        return GeminiProvider(api_key="test-key")

    def test_default_model(self, provider):
        """Test the default model name."""
        assert provider.model == "gemini-2.5-flash"

    def test_convert_messages(self, provider):
        """Test system instruction extraction and role mapping."""
        system, contents = provider._convert_messages([
            ChatMessage(role="system", content="Be a tutor"),
            ChatMessage(role="user", content="Hi"),
            ChatMessage(role="assistant", content="Hello!"),
            ChatMessage(role="user", content="Bye"),
        ])

        assert system == "Be a tutor"
        assert [c.role for c in contents] == ["user", "model", "user"]
        assert contents[1].parts[0].text == "Hello!"

    def test_extract_joins_parts(self, provider):
        """Test that multi-part candidates are joined verbatim."""
        assert provider._extract_content(_response("Hello ", "**there**")) == "Hello **there**"

    def test_extract_blocked_prompt(self, provider):
        """Test that a response without candidates is an error."""
        with pytest.raises(ValueError, match="SAFETY"):
            provider._extract_content(_response(candidates=False, block_reason="SAFETY"))

    def test_extract_empty_candidate(self, provider):
        """Test that a candidate without text yields empty content."""
        response = SimpleNamespace(
            candidates=[SimpleNamespace(content=None)],
            text=None,
        )

        assert provider._extract_content(response) == ""


class TestFactory:
    """Tests for create_llm_provider."""

    def test_gemini(self):
        """Test that both provider aliases build a GeminiProvider."""
        assert isinstance(create_llm_provider("gemini", api_key="k"), GeminiProvider)
        assert isinstance(create_llm_provider("Google", api_key="k"), GeminiProvider)

    def test_missing_api_key(self):
        """Test that api_key is required."""
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider("gemini")

    def test_unknown_provider(self):
        """Test that unknown provider raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("unknown", api_key="k")

    def test_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


@pytest.mark.integration
class TestGeminiIntegration:
    """Live call against the Gemini API."""

    @pytest.mark.asyncio
    @pytest.mark.skipif(not os.getenv("GEMINI_API_KEY"), reason="GEMINI_API_KEY not set")
    async def test_chat_completion(self, api_keys):
        """Test one real completion."""
        async with GeminiProvider(api_key=api_keys["gemini"]) as provider:
            response = await provider.chat_completion(
                [ChatMessage(role="user", content="Reply with the single word: ready")],
                temperature=0.0,
            )

        assert response.content.strip()
