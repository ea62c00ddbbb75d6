"""Rich-based terminal rendering of chat entries."""

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.status import Status
from rich.text import Text

from ..config import DEFAULT_TRANSLATION_LABEL, LISTEN_LABEL, TYPING_MESSAGE
from .models import ChatEntry, ListBlock, ParagraphBlock, Sender
from .surface import ChatSurface

USER_STYLE = "white on blue"
BOT_BORDER_STYLE = "green"
TRANSLATION_STYLE = "green"


def render_blocks(entry: ChatEntry) -> list[RenderableType]:
    """Render an entry's blocks as paragraphs and bullet lines."""
    parts: list[RenderableType] = []
    for block in entry.blocks:
        if isinstance(block, ParagraphBlock):
            parts.append(Text(block.text, overflow="fold"))
        elif isinstance(block, ListBlock):
            bullets = Text("\n".join(f"  • {item}" for item in block.items), overflow="fold")
            parts.append(bullets)
    return parts


def render_translation(translation: str, label: str = DEFAULT_TRANSLATION_LABEL) -> RenderableType:
    return Group(
        Text(label, style=f"bold {TRANSLATION_STYLE}"),
        Text(translation, overflow="fold"),
    )


def render_entry(entry: ChatEntry, translation_label: str = DEFAULT_TRANSLATION_LABEL) -> RenderableType:
    """Render one chat bubble: blocks, optional translation, listen hint and time."""
    parts = render_blocks(entry)
    if entry.translation:
        parts.append(render_translation(entry.translation, translation_label))
    if entry.has_audio:
        parts.append(Text(f"🔊 {LISTEN_LABEL} (/listen)", style="bold blue"))
    parts.append(Text(entry.timestamp, style="dim"))

    if entry.sender is Sender.USER:
        panel = Panel(Group(*parts), style=USER_STYLE, expand=False)
        return Align.right(panel)
    panel = Panel(Group(*parts), border_style=BOT_BORDER_STYLE, expand=False)
    return Align.left(panel)


class RichChatSurface(ChatSurface):
    """Chat surface printing bubbles to a rich console.

    Entries are printed once; a translation arriving later is printed
    directly beneath as its own block.
    """

    def __init__(self, console: Console | None = None, translation_label: str = DEFAULT_TRANSLATION_LABEL):
        self._console = console or Console()
        self._translation_label = translation_label
        self._status: Status | None = None
        self._entries: list[ChatEntry] = []

    @property
    def entries(self) -> list[ChatEntry]:
        return list(self._entries)

    def add_entry(self, entry: ChatEntry) -> None:
        self._entries.append(entry)
        self._console.print(render_entry(entry, self._translation_label))

    def attach_translation(self, entry: ChatEntry, translation: str) -> None:
        entry.translation = translation
        panel = Panel(
            render_translation(translation, self._translation_label),
            border_style=TRANSLATION_STYLE,
            expand=False,
        )
        self._console.print(Align.left(panel))

    def show_typing(self) -> None:
        if self._status is None:
            self._status = self._console.status(TYPING_MESSAGE)
            self._status.start()

    def hide_typing(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
