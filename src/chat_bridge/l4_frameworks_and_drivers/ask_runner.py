"""Ask runner — headless one-shot: send a single prompt, print the response."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from chat_bridge.l1_entities.errors import BridgeError
from chat_bridge.l2_use_cases.request_bridge import RequestBridge
from chat_bridge.l2_use_cases.utils.reply_parser import extract_reply_text

log = logging.getLogger('cb.cli')


def _err(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def run_ask(bridge: RequestBridge, prompt: str, api_key: str, *, reply_only: bool = False) -> None:
    """Invoke the bridge once and print the raw JSON (or just the reply text). Blocks until done."""
    try:
        response = asyncio.run(bridge.invoke(prompt, api_key))
    except BridgeError as exc:
        log.error('Ask failed: %s: %s', type(exc).__name__, exc, exc_info=True)
        _err(f'Error ({type(exc).__name__}): {exc}')
        raise SystemExit(1) from exc

    if reply_only:
        print(extract_reply_text(response))
    else:
        print(json.dumps(response, ensure_ascii=False, indent=2))
