"""Textual Message subclasses — contracts between the reply worker and the App."""

from __future__ import annotations

from textual.message import Message

from chat_bridge.l1_entities.conversation import ChatEntry


class ReplyReady(Message):
    """Posted by the reply worker when the bot entry for a turn is available."""

    def __init__(self, entry: ChatEntry) -> None:
        super().__init__()
        self.entry = entry
