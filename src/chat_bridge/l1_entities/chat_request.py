"""Chat-completion request entity and the fixed wire constants."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from chat_bridge.l1_entities.chat_message import ChatMessage

CHAT_COMPLETIONS_URL = 'https://api.openai.com/v1/chat/completions'
MODEL = 'gpt-4o-mini'
TEMPERATURE = 0.7
SYSTEM_INSTRUCTION = 'You are a helpful assistant. Answer concisely.'


class ChatRequest(BaseModel):
    """Request body for one chat-completion call. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    model: str = MODEL
    messages: tuple[ChatMessage, ...]
    temperature: float = TEMPERATURE

    def to_body(self) -> dict[str, Any]:
        """Plain dict with exactly the keys model, messages, temperature."""
        return {
            'model': self.model,
            'messages': [m.model_dump() for m in self.messages],
            'temperature': self.temperature,
        }

    def to_json(self) -> bytes:
        """Compact UTF-8 JSON, as sent on the wire."""
        return json.dumps(self.to_body(), ensure_ascii=False, separators=(',', ':')).encode('utf-8')
