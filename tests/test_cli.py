"""Unit tests for the chat command's spoken input."""
import asyncio
import io

import pytest
from rich.console import Console

from tutorchat.cli import app as cli_app
from tutorchat.client import ChatSession


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(cli_app, "console", Console(file=buffer, width=100, color_system=None))
    return buffer


class TestCaptureVoice:
    """Tests for the /voice command."""

    @pytest.mark.asyncio
    async def test_enter_stops_listening(self, fake_relay, surface, make_recognizer, output):
        """Test that Enter while listening stops the capture and sends nothing."""
        recognizer = make_recognizer("never sent")
        recognizer.gate = asyncio.Event()
        session = ChatSession(fake_relay, surface, recognizer=recognizer)
        stop_key = asyncio.get_running_loop().create_future()

        capture = asyncio.create_task(cli_app._capture_voice(session, stop_key))
        for _ in range(10):
            await asyncio.sleep(0)
        assert session.voice_input.listening

        stop_key.set_result("")

        assert await capture is None
        assert fake_relay.calls == []
        assert "Nothing recognized" in output.getvalue()
        await session.close()

    @pytest.mark.asyncio
    async def test_recognized_utterance_is_sent(self, fake_relay, surface, make_recognizer, output):
        """Test that a finished capture sends its text and hands back the unused Enter read."""
        fake_relay.responses = ["Good morning to you!", "Selamat pagi!"]
        session = ChatSession(fake_relay, surface, recognizer=make_recognizer("good morning"))
        stop_key = asyncio.get_running_loop().create_future()

        pending = await cli_app._capture_voice(session, stop_key)

        assert pending is stop_key
        assert session.orchestrator.transcript.to_payload() == [
            {"role": "user", "text": "good morning"},
            {"role": "model", "text": "Good morning to you!"},
        ]
        stop_key.cancel()
        await session.close()

    @pytest.mark.asyncio
    async def test_without_speech_input(self, fake_relay, surface, output):
        """Test that /voice reports the missing recognizer."""
        session = ChatSession(fake_relay, surface)

        assert await cli_app._capture_voice(session) is None
        assert "Speech input unavailable" in output.getvalue()
