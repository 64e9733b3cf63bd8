"""Use case: run one chat turn and turn the raw response into display text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chat_bridge.l1_entities.errors import BridgeError
from chat_bridge.l2_use_cases.request_bridge import RequestBridge
from chat_bridge.l2_use_cases.utils.reply_parser import extract_api_error, extract_reply_text

log = logging.getLogger('cb.chat')


@dataclass(frozen=True)
class ChatTurnResult:
    """Result of a chat turn — either reply text or failure with reason."""

    data: str | None = None
    error: str = ''
    raw: Any = None

    @property
    def ok(self) -> bool:
        return self.data is not None


class RunChatTurnUseCase:
    """Invokes the bridge once and interprets the response for display."""

    def __init__(self, bridge: RequestBridge) -> None:
        self._bridge = bridge

    async def execute(self, user_input: str, api_key: str) -> ChatTurnResult:
        log.info('Chat turn: %d input chars', len(user_input))
        try:
            raw = await self._bridge.invoke(user_input, api_key)
        except BridgeError as e:
            err = f'{type(e).__name__}: {e}'
            log.error('Chat turn failed: %s', err, exc_info=True)
            return ChatTurnResult(error=err)

        api_error = extract_api_error(raw)
        if api_error is not None:
            log.warning('API returned an error object')
            return ChatTurnResult(error=f'API error: {api_error}', raw=raw)

        text = extract_reply_text(raw)
        log.info('Chat turn succeeded (%d reply chars)', len(text))
        return ChatTurnResult(data=text, raw=raw)
