"""Speech module for tutorchat.

Speech engines are external collaborators; this module hides which one is
used and owns the policies around them:
- text.py: What is spoken (emoji and emoticons removed)
- voices.py: Which voice speaks (preference order, cached per session)
- playback.py: When it is spoken (detached, one utterance at a time)
"""

from .base import SpeechRecognizer, SpeechSynthesizer, Utterance, Voice
from .factory import create_speech_recognizer, create_speech_synthesizer
from .playback import SpeechPlayer
from .text import clean_text_for_speech
from .voices import PREFERRED_VOICE_NAMES, VoiceSelector, pick_preferred_voice

__all__ = [
    "PREFERRED_VOICE_NAMES",
    "SpeechPlayer",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "Utterance",
    "Voice",
    "VoiceSelector",
    "clean_text_for_speech",
    "create_speech_recognizer",
    "create_speech_synthesizer",
    "pick_preferred_voice",
]
