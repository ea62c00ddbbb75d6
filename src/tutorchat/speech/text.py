"""Cleanup of reply text before it is spoken."""

import re

_EMOJI_RE = re.compile(
    "["
    "\U0001F300-\U0001FAFF"
    "\U0001F600-\U0001F64F"
    "\u2700-\u27BF"
    "\U0001F900-\U0001F9FF"
    "]"
)
# :) ;-) =D 8] ...
_EMOTICON_RE = re.compile(r"[:;=8][\-^]?[)D\]]")
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def clean_text_for_speech(text: str) -> str:
    """Remove emoji and simple emoticons, then normalize whitespace.

    >>> clean_text_for_speech("Great job! 😀 :)")
    'Great job!'
    """
    if not text:
        return ""
    text = _EMOJI_RE.sub("", text)
    text = _EMOTICON_RE.sub("", text)
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()
