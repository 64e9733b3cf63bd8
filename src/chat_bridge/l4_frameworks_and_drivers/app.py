"""ChatApp — Textual TUI: conversation log above, input line below."""

from __future__ import annotations

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Input, Static

from chat_bridge.l3_interface_adapters.controllers.chat_controller import ChatController
from chat_bridge.l4_frameworks_and_drivers.messages import ReplyReady
from chat_bridge.l4_frameworks_and_drivers.widgets.chat_log import ChatLog


class ChatApp(TextualApp):
    """Interactive chat shell. Every turn goes through the controller, one at a time."""

    DEFAULT_CSS = """
    #header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
    }
    #chat-log {
        height: 1fr;
    }
    #chat-input {
        dock: bottom;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding('escape', 'quit_app', 'Quit', priority=True),
        Binding('ctrl+c', 'quit_app', 'Quit', show=False, priority=True),
        Binding('ctrl+l', 'clear_chat', 'Clear'),
    ]

    def __init__(self, controller: ChatController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller

    def compose(self) -> ComposeResult:
        yield Static('  chat-bridge | Support Chat', id='header')
        yield ChatLog(id='chat-log')
        yield Input(placeholder='Type your message...', id='chat-input')
        yield Footer()

    def on_mount(self) -> None:
        self.query_one('#chat-log', ChatLog).show_entries(self._controller.entries)
        self.query_one('#chat-input', Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value
        if self._controller.pending:
            self.notify('Waiting for the previous reply', severity='warning', timeout=3)
            return
        entry = self._controller.submit(text)
        if entry is None:
            return
        event.input.value = ''
        chat_log = self.query_one('#chat-log', ChatLog)
        chat_log.append_entry(entry)
        chat_log.show_typing()
        self._run_reply_worker(text)

    def on_reply_ready(self, message: ReplyReady) -> None:
        # Redraw so the typing line is replaced by the reply.
        self.query_one('#chat-log', ChatLog).show_entries(self._controller.entries)
        if message.entry.is_error:
            self.notify('Request failed (see cb_debug.log)', severity='error', timeout=5)

    # --- Workers ---

    def _run_reply_worker(self, text: str) -> None:
        async def _reply_task() -> None:
            entry = await self._controller.fetch_reply(text)
            self.post_message(ReplyReady(entry))

        self.run_worker(_reply_task, exclusive=True, group='reply')

    # --- Actions ---

    def action_clear_chat(self) -> None:
        if self._controller.pending:
            self.notify('Reply in progress — please wait', severity='warning', timeout=3)
            return
        self._controller.clear()
        self.query_one('#chat-log', ChatLog).show_entries(self._controller.entries)

    def action_quit_app(self) -> None:
        self.exit()
