"""Conversation entry entity — one displayed line of a chat session."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ChatEntry(BaseModel):
    """A message as shown to the user, either typed by them or answered by the bot."""

    sender: Literal['user', 'bot']
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)
    is_error: bool = False

    def format_time(self) -> str:
        """Format the timestamp as HH:MM for display."""
        return self.timestamp.strftime('%H:%M')
