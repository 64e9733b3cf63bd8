"""Use case: send one user input to the chat-completion endpoint and return the raw JSON."""

from __future__ import annotations

import json
from typing import Any

from chat_bridge.l1_entities.errors import BridgeError, DecodeError, TransportError
from chat_bridge.l2_use_cases.ports.transport import Transport
from chat_bridge.l2_use_cases.utils.prompt_builder import build_chat_request, build_http_request


class RequestBridge:
    """Builds the request, awaits the transport, decodes the body. Holds no per-call state.

    Nothing here logs: the credential and the conversation must never reach a log file.
    The HTTP status is not inspected; an error-shaped JSON body from the
    API resolves like any other response and the caller reads it.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def invoke(self, user_input: str, api_key: str) -> Any:
        """Return the decoded JSON response for *user_input*.

        Raises ConstructionError, TransportError or DecodeError. Never retries.
        """
        request = build_http_request(build_chat_request(user_input), api_key)

        try:
            response = await self._transport.send(request)
        except BridgeError:
            raise
        except Exception as e:
            raise TransportError(f'{type(e).__name__}: {e}') from e

        try:
            body = await response.read()
        except BridgeError:
            raise
        except Exception as e:
            raise DecodeError(f'Response stream failed: {type(e).__name__}: {e}') from e

        try:
            return json.loads(body)
        except (ValueError, RecursionError) as e:  # bad JSON or UTF-8, or nesting too deep
            raise DecodeError(f'Response body is not valid JSON ({len(body)} bytes)') from e
