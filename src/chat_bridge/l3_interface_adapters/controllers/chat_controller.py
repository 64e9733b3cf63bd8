"""ChatController — owns the displayed conversation and runs chat turns for the TUI."""

from __future__ import annotations

import logging

from chat_bridge.l1_entities.conversation import ChatEntry
from chat_bridge.l2_use_cases.chat_turn_use_case import RunChatTurnUseCase
from chat_bridge.l2_use_cases.request_bridge import RequestBridge

log = logging.getLogger('cb.controller')

DEFAULT_GREETING = 'Hello! How can I help you today?'
ERROR_REPLY = 'Sorry, there was an error processing your request.'


class ChatController:
    """Central orchestrator bridging the chat use case to the TUI.

    The credential is held here, not on the bridge, and is handed to every turn.
    Only displayed entries are kept; each turn sends the new input alone.
    """

    def __init__(self, bridge: RequestBridge, api_key: str, greeting: str = DEFAULT_GREETING) -> None:
        self._turn_uc = RunChatTurnUseCase(bridge)
        self._api_key = api_key
        self._greeting = greeting
        self.entries: list[ChatEntry] = [ChatEntry(sender='bot', text=greeting)]
        self.pending = False

    def submit(self, text: str) -> ChatEntry | None:
        """Record user input. Returns None for blank input, which is never sent."""
        if not text.strip():
            return None
        entry = ChatEntry(sender='user', text=text)
        self.entries.append(entry)
        self.pending = True
        return entry

    async def fetch_reply(self, text: str) -> ChatEntry:
        """Run one turn for *text* and record the bot's answer (or the error line)."""
        try:
            result = await self._turn_uc.execute(text, self._api_key)
        finally:
            self.pending = False

        if result.ok:
            entry = ChatEntry(sender='bot', text=result.data or '')
        elif result.raw is not None:
            entry = ChatEntry(sender='bot', text=result.error, is_error=True)
        else:
            entry = ChatEntry(sender='bot', text=ERROR_REPLY, is_error=True)
        self.entries.append(entry)
        return entry

    async def send(self, text: str) -> ChatEntry | None:
        """Submit and fetch in one step. Returns the bot entry, or None for blank input."""
        if self.submit(text) is None:
            return None
        return await self.fetch_reply(text)

    def clear(self) -> None:
        """Forget the conversation, keeping only the greeting."""
        log.info('Conversation cleared (%d entries dropped)', len(self.entries) - 1)
        self.entries = [ChatEntry(sender='bot', text=self._greeting)]
