"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..client import ChatSession
from ..config import Settings, TranslationSettings
from ..errors import SpeechUnavailable
from ..ui import RichChatSurface
from .providers import configure_logging, get_relay_service

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="tutorchat",
    help="Conversational English tutor backed by a hosted language model",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

PROMPT = "[bold blue]You ›[/bold blue] "

CHAT_HELP = (
    "Type a message and press Enter. Commands: "
    "/voice (speak a message, Enter stops listening), /listen (replay last reply), /history, /quit"
)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: TUTORCHAT_HOST or 127.0.0.1)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default: PORT or 3000)"),
    static_dir: Path | None = typer.Option(
        None,
        "--static-dir",
        "-s",
        file_okay=False,
        help="Directory of static client assets (default: TUTORCHAT_STATIC_DIR or ./public)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Logging level"),
):
    """Run the relay service."""
    import uvicorn

    from ..relay import create_app

    settings = Settings.from_env()
    updates = {
        key: value
        for key, value in {"host": host, "port": port, "static_dir": static_dir, "log_level": log_level}.items()
        if value is not None
    }
    settings = settings.model_copy(update=updates)
    configure_logging(settings.log_level)

    service = get_relay_service(settings, console)
    relay_app = create_app(service, static_dir=settings.static_dir)

    console.print(f"[green]Relay listening on http://{settings.host}:{settings.port}[/green]")
    uvicorn.run(relay_app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


@app.command()
def chat(
    url: str | None = typer.Option(None, "--url", "-u", help="Relay base URL (default: TUTORCHAT_RELAY_URL)"),
    speak: bool = typer.Option(True, "--speak/--no-speak", help="Read replies aloud"),
    voice: bool = typer.Option(True, "--voice/--no-voice", help="Enable spoken input (/voice)"),
    translate_to: str | None = typer.Option(
        None,
        "--translate-to",
        "-t",
        help="Language replies are translated into (default: Indonesian)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Logging level"),
):
    """Chat with the tutor in the terminal."""
    settings = Settings.from_env()
    if url:
        settings = settings.model_copy(update={"relay_url": url})
    if translate_to:
        settings = settings.model_copy(update={"translation": TranslationSettings(language=translate_to)})
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings.log_level)

    surface = RichChatSurface(console, translation_label=settings.translation.caption)

    async def _chat():
        async with ChatSession.open(settings, surface, speak=speak, listen=voice) as session:
            console.print(f"[dim]Connected to {settings.relay_url}[/dim]")
            if not session.speech_output and speak:
                console.print("[dim]Speech output unavailable[/dim]")
            if not session.speech_input and voice:
                console.print("[dim]Speech input unavailable[/dim]")
            console.print(f"[dim]{CHAT_HELP}[/dim]")
            await _run_chat_loop(session)

    try:
        asyncio.run(_chat())
    except (KeyboardInterrupt, EOFError):
        console.print()
    console.print("[dim]Goodbye![/dim]")


def _read_line(prompt: str = PROMPT) -> asyncio.Future:
    return asyncio.ensure_future(asyncio.to_thread(console.input, prompt))


async def _run_chat_loop(session: ChatSession) -> None:
    # A read started while listening is reused as the next prompt
    pending: asyncio.Future | None = None
    while True:
        read = pending or _read_line()
        pending = None
        line = (await read).strip()
        if not line:
            continue

        if line in ("/quit", "/exit"):
            return
        if line == "/history":
            _print_history(session)
        elif line == "/listen":
            if not session.orchestrator.listen():
                console.print("[dim]Nothing to replay[/dim]")
        elif line == "/voice":
            pending = await _capture_voice(session)
        else:
            await session.send(line)


async def _capture_voice(session: ChatSession, stop_key: asyncio.Future | None = None) -> asyncio.Future | None:
    """Listen for one utterance until it is recognized or Enter is pressed.

    Returns:
        The Enter read still waiting when the capture finished on its own,
        to be used as the next prompt
    """
    if not session.speech_input:
        console.print("[yellow]Speech input unavailable[/yellow]")
        return None
    console.print("[red]● Listening... press Enter to stop[/red]")
    capture = session.voice_input.start()
    stop_key = stop_key or _read_line("")
    await asyncio.wait({capture, stop_key}, return_when=asyncio.FIRST_COMPLETED)

    pending = None
    if stop_key.done():
        await session.voice_input.stop()
    else:
        pending = stop_key

    try:
        transcript = await capture
    except SpeechUnavailable as e:
        console.print(f"[red]Error: {e}[/red]")
    else:
        if not transcript:
            console.print("[dim]Nothing recognized[/dim]")
    if pending is not None:
        console.print(PROMPT, end="")
    return pending


def _print_history(session: ChatSession) -> None:
    table = Table(title="Transcript", show_lines=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Role", style="bold")
    table.add_column("Text")
    for index, turn in enumerate(session.orchestrator.transcript, 1):
        table.add_row(str(index), turn.role.value, turn.text)
    console.print(table)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
