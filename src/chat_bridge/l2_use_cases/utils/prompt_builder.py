"""Pure functions for building the chat-completion request from user input."""

from __future__ import annotations

from chat_bridge.l1_entities.chat_message import ChatMessage
from chat_bridge.l1_entities.chat_request import CHAT_COMPLETIONS_URL, SYSTEM_INSTRUCTION, ChatRequest
from chat_bridge.l1_entities.errors import ConstructionError
from chat_bridge.l2_use_cases.ports.transport import HttpRequest

_HTTP_WHITESPACE = ' \t\r\n'


def build_effective_prompt(user_input: str, system_instruction: str = SYSTEM_INSTRUCTION) -> str:
    """Prefix the raw user input with the system instruction and a ``User:`` label."""
    return f'{system_instruction} \n\nUser: {user_input}'


def build_chat_request(user_input: str) -> ChatRequest:
    """Build the two-message request: system instruction, then the effective prompt."""
    return ChatRequest(
        messages=(
            ChatMessage(role='system', content=SYSTEM_INSTRUCTION),
            ChatMessage(role='user', content=build_effective_prompt(user_input)),
        ),
    )


def _is_header_char(ch: str) -> bool:
    return ch == '\t' or ' ' <= ch <= '~'


def normalize_header_value(name: str, value: str) -> str:
    """Normalize a header value the way a browser ``Headers`` object does.

    Leading and trailing HTTP whitespace is stripped. Raises ConstructionError
    when the remainder holds anything but visible ASCII, SP or HTAB.
    """
    # Stripping is intentional: an empty key yields ``Bearer``, not ``Bearer ``.
    normalized = value.strip(_HTTP_WHITESPACE)
    for ch in normalized:
        if _is_header_char(ch):
            continue
        if ch < ' ' or ch == '\x7f':
            raise ConstructionError(f'Invalid value for header {name!r}: contains a control character')
        raise ConstructionError(f'Invalid value for header {name!r}: contains a non-ASCII character')
    return normalized


def build_http_request(chat_request: ChatRequest, api_key: str) -> HttpRequest:
    """Build the POST request carrying *chat_request* and the bearer credential."""
    headers = (
        ('Content-Type', normalize_header_value('Content-Type', 'application/json')),
        ('Authorization', normalize_header_value('Authorization', f'Bearer {api_key}')),
    )
    return HttpRequest(
        method='POST',
        url=CHAT_COMPLETIONS_URL,
        headers=headers,
        body=chat_request.to_json(),
        mode='cors',
    )
