"""HTTP client for the relay's chat route."""

from typing import Any

import httpx

from ..config import CHAT_ROUTE, DEFAULT_RELAY_URL
from ..errors import RelayRequestError


class RelayClient:
    """Posts conversations to the relay and returns the generated text.

    No timeout is applied: a slow relay call completes or fails only when
    the transport reports it.

    Supports async context manager protocol:
        async with RelayClient(url) as relay:
            reply = await relay.chat([{"role": "user", "text": "Hi"}])
    """

    def __init__(
        self,
        base_url: str = DEFAULT_RELAY_URL,
        client: httpx.AsyncClient | None = None,
        route: str = CHAT_ROUTE,
    ):
        self._route = route
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=None)

    async def chat(self, conversation: list[dict[str, str]]) -> str:
        """Send a conversation and return the reply text.

        Args:
            conversation: Turns as ``{"role": ..., "text": ...}`` dicts

        Returns:
            The ``result`` field of the response ("" if absent)

        Raises:
            RelayRequestError: Transport failure, non-2xx status or invalid JSON
        """
        try:
            response = await self._client.post(self._route, json={"conversation": conversation})
        except httpx.HTTPError as exc:
            raise RelayRequestError(f"Relay request failed: {exc}") from exc

        if not response.is_success:
            raise RelayRequestError(
                f"Relay responded with {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise RelayRequestError("Relay returned invalid JSON", status_code=response.status_code) from exc

        result = data.get("result") if isinstance(data, dict) else None
        return result or ""

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.reason_phrase
