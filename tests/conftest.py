"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from tutorchat.errors import RelayRequestError
from tutorchat.llm import ChatMessage, LLMProvider, LLMResponse
from tutorchat.speech import SpeechRecognizer, SpeechSynthesizer, Utterance, Voice
from tutorchat.ui import ChatEntry, ChatSurface


class FakeLLMProvider(LLMProvider):
    """Provider returning a canned reply and recording every call."""

    def __init__(self, reply: str = "Hello! How are you today?", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({"messages": messages, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model="fake-model")

    async def close(self) -> None:
        self.closed = True


class FakeRelay:
    """Stands in for RelayClient.

    Each call pops the next scripted response; exceptions are raised.
    When ``gate`` is set, calls wait on it before answering.
    """

    def __init__(self, responses: list[Any] | None = None):
        self.responses = list(responses or [])
        self.calls: list[list[dict[str, str]]] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def chat(self, conversation: list[dict[str, str]]) -> str:
        self.calls.append([dict(turn) for turn in conversation])
        if self.gate is not None:
            await self.gate.wait()
        response = self.responses.pop(0) if self.responses else ""
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


class RecordingSurface(ChatSurface):
    """Chat surface keeping everything it is asked to display."""

    def __init__(self):
        self.entries: list[ChatEntry] = []
        self.translations: list[tuple[ChatEntry, str]] = []
        self.events: list[str] = []

    def add_entry(self, entry: ChatEntry) -> None:
        self.entries.append(entry)
        self.events.append(f"entry:{entry.sender.value}")

    def attach_translation(self, entry: ChatEntry, translation: str) -> None:
        entry.translation = translation
        self.translations.append((entry, translation))
        self.events.append("translation")

    def show_typing(self) -> None:
        self.events.append("typing:on")

    def hide_typing(self) -> None:
        self.events.append("typing:off")


class FakeSynthesizer(SpeechSynthesizer):
    """Synthesizer recording utterances; ``hold`` keeps playback running."""

    def __init__(self, voices: list[Voice] | None = None):
        self.voices = list(voices or [])
        self.spoken: list[Utterance] = []
        self.stop_count = 0
        self.voice_requests = 0
        self.hold: asyncio.Event | None = None
        self.closed = False

    async def list_voices(self) -> list[Voice]:
        self.voice_requests += 1
        return list(self.voices)

    async def speak(self, utterance: Utterance) -> None:
        self.spoken.append(utterance)
        if self.hold is not None:
            await self.hold.wait()

    def stop(self) -> None:
        self.stop_count += 1

    async def close(self) -> None:
        self.closed = True


class FakeRecognizer(SpeechRecognizer):
    """Recognizer returning a scripted transcript, optionally after a gate."""

    def __init__(self, transcript: str = "hello there"):
        self.transcript = transcript
        self.gate: asyncio.Event | None = None
        self.calls = 0
        self.closed = False

    async def listen_once(self) -> str:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return self.transcript

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def make_llm():
    """Factory for providers with a custom reply or error."""
    return FakeLLMProvider


@pytest.fixture
def fake_llm():
    return FakeLLMProvider()


@pytest.fixture
def fake_relay():
    return FakeRelay()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def sample_voices():
    """A catalog resembling what a desktop browser reports."""
    return [
        Voice(id="de", name="Anna", lang="de-DE"),
        Voice(id="daniel", name="Daniel", lang="en-GB"),
        Voice(id="samantha", name="Samantha", lang="en-US"),
        Voice(id="gf", name="Microsoft Zira - English Female", lang="en-US"),
    ]


@pytest.fixture
def synthesizer(sample_voices):
    return FakeSynthesizer(sample_voices)


@pytest.fixture
def relay_error():
    return RelayRequestError("Relay responded with 500: quota exceeded", status_code=500)


@pytest.fixture
def sample_reply():
    """A typical formatted tutor reply."""
    return (
        "**Great question!** Here are some words:\n"
        "* **Delicious** - very tasty\n"
        "- Crunchy\n"
        "• Savory\n"
        "Try using one in a sentence. 😀"
    )


@pytest.fixture
def make_recognizer():
    """Factory for recognizers returning a given transcript."""
    return FakeRecognizer
