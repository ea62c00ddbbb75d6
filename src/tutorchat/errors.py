"""Error taxonomy shared by the relay, the chat client and the speech layer."""


class TutorChatError(Exception):
    """Base class for all tutorchat errors."""


class InvalidInput(TutorChatError):
    """The relay request does not carry a well-formed conversation."""


class UpstreamError(TutorChatError):
    """The generative model call failed (network, quota, malformed response)."""


class SpeechUnavailable(TutorChatError):
    """No speech capture or synthesis engine is available on this machine."""


class TranslationFailure(TutorChatError):
    """The best-effort translation request did not produce a translation."""


class RelayRequestError(TutorChatError):
    """The chat client could not get a successful answer from the relay.

    Attributes:
        status_code: HTTP status returned by the relay, or None when the
            request never completed (connection refused, reset, ...)
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
