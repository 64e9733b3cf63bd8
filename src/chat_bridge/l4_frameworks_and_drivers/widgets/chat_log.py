"""Chat log — scrolling RichLog of conversation entries."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import RichLog

from chat_bridge.l1_entities.conversation import ChatEntry

TYPING_TEXT = '...'


class ChatLog(RichLog):
    """Auto-scrolling conversation display using RichLog."""

    DEFAULT_CSS = """
    ChatLog {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    ChatLog:focus {
        border: solid $accent;
    }
    """

    def __init__(self, title: str = 'Support Chat', **kwargs) -> None:
        super().__init__(highlight=False, markup=True, wrap=True, auto_scroll=True, **kwargs)
        self.border_title = title
        self.lines_text: list[str] = []
        self.typing = False

    def append_entry(self, entry: ChatEntry) -> None:
        """Append one entry, formatted by sender."""
        who = 'You' if entry.sender == 'user' else 'Bot'
        self.lines_text.append(f'[{entry.format_time()}] {who}: {entry.text}')
        stamp = f'[dim]\\[{entry.format_time()}][/dim]'
        if entry.is_error:
            self.write(f'{stamp} [bold red]{who}:[/bold red] [red]{escape(entry.text)}[/red]')
        elif entry.sender == 'user':
            self.write(f'{stamp} [bold cyan]{who}:[/bold cyan] {escape(entry.text)}')
        else:
            self.write(f'{stamp} [bold green]{who}:[/bold green] {escape(entry.text)}')

    def show_entries(self, entries: list[ChatEntry]) -> None:
        """Redraw the whole log from *entries*."""
        self.clear()
        self.lines_text = []
        self.typing = False
        for entry in entries:
            self.append_entry(entry)

    def show_typing(self) -> None:
        self.typing = True
        self.write(f'[dim italic]Bot: {TYPING_TEXT}[/dim italic]')
