"""Offline text-to-speech through pyttsx3 (SAPI5, NSSpeechSynthesizer, eSpeak).

pyttsx3 engines are blocking and not thread-safe. The engine is created and
driven on one dedicated worker thread; only ``stop()`` is called from the
event loop, since it has to interrupt a ``runAndWait()`` occupying that
thread.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pyttsx3

from ..base import SpeechSynthesizer, Utterance, Voice


def _voice_lang(raw_voice: Any) -> str:
    """Best-effort language tag of a pyttsx3 voice ("" when unknown)."""
    languages = getattr(raw_voice, "languages", None) or []
    if not languages:
        return ""
    lang = languages[0]
    if isinstance(lang, bytes):
        # eSpeak reports b"\x05en-gb"
        lang = lang.decode("utf-8", errors="ignore").lstrip("\x00\x01\x02\x03\x04\x05")
    return str(lang).replace("_", "-")


class Pyttsx3Synthesizer(SpeechSynthesizer):
    """Speech synthesis through the platform's native engine.

    Hidden design decisions:
    - Engine creation and use are serialized on a single worker thread
    - Rates are scaled from the engine's default words-per-minute
    - Pitch is not supported by pyttsx3 and is ignored
    """

    def __init__(self, driver_name: str | None = None, engine_factory=pyttsx3.init):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tts")
        try:
            self._engine, self._default_rate = self._executor.submit(
                self._init_engine, engine_factory, driver_name
            ).result()
        except Exception:
            self._executor.shutdown(wait=False)
            raise

    @staticmethod
    def _init_engine(engine_factory, driver_name: str | None):
        engine = engine_factory(driver_name) if driver_name else engine_factory()
        return engine, engine.getProperty("rate") or 200

    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, func, *args)

    def _list_voices_sync(self) -> list[Voice]:
        voices = self._engine.getProperty("voices") or []
        return [
            Voice(id=str(v.id), name=str(getattr(v, "name", "") or v.id), lang=_voice_lang(v))
            for v in voices
        ]

    async def list_voices(self) -> list[Voice]:
        return await self._run(self._list_voices_sync)

    def _speak_sync(self, utterance: Utterance) -> None:
        if utterance.voice is not None:
            self._engine.setProperty("voice", utterance.voice.id)
        self._engine.setProperty("rate", int(self._default_rate * utterance.rate))
        self._engine.setProperty("volume", max(0.0, min(1.0, utterance.volume)))
        self._engine.say(utterance.text)
        self._engine.runAndWait()

    async def speak(self, utterance: Utterance) -> None:
        await self._run(self._speak_sync, utterance)

    def stop(self) -> None:
        self._engine.stop()

    async def close(self) -> None:
        self.stop()
        self._executor.shutdown(wait=False, cancel_futures=True)
