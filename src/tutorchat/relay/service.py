"""Relay between chat clients and the generative model.

Hides the design decisions of how a transcript becomes a provider request:
persona injection, sampling temperature and error classification.
"""

import logging
from typing import Any

from pydantic import ValidationError

from ..config import DEFAULT_TEMPERATURE
from ..conversation import Turn
from ..errors import InvalidInput, UpstreamError
from ..llm import ChatMessage, LLMProvider
from ..prompts import get_persona_prompt

logger = logging.getLogger(__name__)


class RelayService:
    """Single-attempt passthrough to an LLM provider.

    No retries, no rate limiting and no caching: each call issues exactly
    one upstream request and reports its failure to the caller.
    """

    def __init__(
        self,
        llm: LLMProvider | None,
        persona: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """Initialize the relay.

        Args:
            llm: Provider to forward to. None when no API key is configured;
                every request then fails with UpstreamError.
            persona: System instruction (defaults to the packaged tutor persona)
            temperature: Sampling temperature for every request
        """
        self._llm = llm
        self._persona = persona if persona is not None else get_persona_prompt()
        self._temperature = temperature

    @property
    def persona(self) -> str:
        return self._persona

    @property
    def temperature(self) -> float:
        return self._temperature

    def parse_conversation(self, conversation: Any) -> list[Turn]:
        """Validate the ``conversation`` field of a relay request.

        Raises:
            InvalidInput: If it is not a list of ``{role, text}`` turns
        """
        if not isinstance(conversation, list):
            raise InvalidInput("Conversation must be an array")

        turns = []
        for index, item in enumerate(conversation):
            try:
                turns.append(Turn.model_validate(item))
            except ValidationError as exc:
                raise InvalidInput(
                    f"Conversation turn {index} must be an object with role "
                    f"'user' or 'model' and a text string"
                ) from exc
        return turns

    def build_messages(self, turns: list[Turn]) -> list[ChatMessage]:
        """Prepend the persona to the converted turns."""
        return [ChatMessage(role="system", content=self._persona)] + [
            turn.to_chat_message() for turn in turns
        ]

    async def generate_reply(self, conversation: Any) -> str:
        """Forward a conversation and return the generated text verbatim.

        Args:
            conversation: Raw ``conversation`` value from the request body

        Returns:
            The model's reply text, unmodified

        Raises:
            InvalidInput: Malformed conversation (the model is not called)
            UpstreamError: Any failure of the model call
        """
        turns = self.parse_conversation(conversation)

        if self._llm is None:
            raise UpstreamError("GEMINI_API_KEY is not configured")

        messages = self.build_messages(turns)
        try:
            response = await self._llm.chat_completion(messages, temperature=self._temperature)
        except Exception as exc:
            logger.error("Model call failed: %s", exc)
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc

        logger.debug("Relayed %d turns, reply of %d characters", len(turns), len(response.content))
        return response.content

    async def close(self) -> None:
        if self._llm is not None:
            await self._llm.close()
