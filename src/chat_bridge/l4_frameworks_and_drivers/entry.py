"""Call-level entry point for host code: one coroutine, two strings in, raw JSON out."""

from __future__ import annotations

from typing import Any

from chat_bridge.l2_use_cases.request_bridge import RequestBridge
from chat_bridge.l3_interface_adapters.gateways.httpx_transport import HttpxTransport


async def run_inference(user_input: str, api_key: str, *, timeout: float | None = 60.0) -> Any:
    """Send *user_input* to the chat-completion endpoint and return the decoded response.

    Raises ConstructionError, TransportError or DecodeError. HTTP error statuses are not
    raised; their JSON body is returned like any other.
    """
    return await RequestBridge(HttpxTransport(timeout=timeout)).invoke(user_input, api_key)
