"""Pure functions for reading a reply out of a raw chat-completion response."""

from __future__ import annotations

import json
from typing import Any

NO_CONTENT_TEXT = 'No response content received'


def extract_api_error(response: Any) -> str | None:
    """Return the API error message if *response* is an error-shaped object."""
    if not isinstance(response, dict):
        return None
    error = response.get('error')
    if error is None:
        return None
    if isinstance(error, dict):
        message = error.get('message')
        if isinstance(message, str) and message:
            return message
        return json.dumps(error, ensure_ascii=False)
    return str(error)


def extract_reply_text(response: Any) -> str:
    """Return ``choices[0].message.content``, or a placeholder when it is absent.

    Non-object responses are rendered as text: strings verbatim, anything else as JSON.
    """
    if isinstance(response, str):
        return response
    if not isinstance(response, dict):
        return json.dumps(response, ensure_ascii=False)

    choices = response.get('choices')
    if not isinstance(choices, list) or not choices:
        return NO_CONTENT_TEXT
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get('message') or {}
    content = message.get('content') if isinstance(message, dict) else None
    if not isinstance(content, str):
        return NO_CONTENT_TEXT
    return content
