"""Chat message entity — one role/content pair of a conversation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal['system', 'user', 'assistant']


class ChatMessage(BaseModel):
    """A single message in a chat-completion conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
