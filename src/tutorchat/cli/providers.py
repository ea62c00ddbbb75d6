"""Provider factory functions for CLI.

Centralizes creation of the LLM provider, the relay service and logging
from settings. Hides configuration details from command implementations.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import Settings
from ..llm import LLMProvider, create_llm_provider
from ..relay import RelayService

# Default console for output
_console = Console()


def configure_logging(level: str, console: Console | None = None) -> None:
    """Route standard logging through rich.

    Args:
        level: Level name (debug, info, warning, error)
        console: Console to log to (stderr console by default)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_llm(settings: Settings, console: Console | None = None) -> LLMProvider | None:
    """Create the Gemini provider from settings.

    Args:
        settings: Runtime settings
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if GEMINI_API_KEY is not set

    Environment variables:
        GEMINI_API_KEY: Gemini API key
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    con = console or _console
    if not settings.gemini_api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, chat requests will fail[/yellow]")
        return None
    return create_llm_provider("gemini", api_key=settings.gemini_api_key, model=settings.gemini_model)


def get_relay_service(settings: Settings, console: Console | None = None) -> RelayService:
    """Create the relay service; it starts even without an API key."""
    return RelayService(get_llm(settings, console), temperature=settings.temperature)
