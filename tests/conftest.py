"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from chat_bridge.l1_entities.config import AppConfig
from chat_bridge.l2_use_cases.ports.transport import HttpRequest
from chat_bridge.l2_use_cases.request_bridge import RequestBridge
from chat_bridge.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeResponse:
    """Fake transport response — implements TransportResponse protocol."""

    def __init__(self, body: bytes = b'{}', status_code: int = 200, read_error: Exception | None = None):
        self._body = body
        self._status_code = status_code
        self._read_error = read_error
        self.read_calls = 0

    @property
    def status_code(self) -> int:
        return self._status_code

    async def read(self) -> bytes:
        self.read_calls += 1
        if self._read_error is not None:
            raise self._read_error
        return self._body


class FakeTransport:
    """Fake transport for L2 use case tests. Records every request it is asked to send."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self._response = response or FakeResponse()
        self._error = error
        self.sent: list[HttpRequest] = []

    async def send(self, request: HttpRequest) -> FakeResponse:
        self.sent.append(request)
        if self._error is not None:
            raise self._error
        return self._response

    def set_json(self, document: Any, status_code: int = 200) -> None:
        self._response = FakeResponse(json.dumps(document).encode('utf-8'), status_code=status_code)

    def set_error(self, error: Exception) -> None:
        self._error = error

    @property
    def last_body(self) -> dict:
        return json.loads(self.sent[-1].body)


REPLY_DOC = {'choices': [{'message': {'role': 'assistant', 'content': '4'}}]}


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_transport() -> FakeTransport:
    t = FakeTransport()
    t.set_json(REPLY_DOC)
    return t


@pytest.fixture
def bridge(fake_transport: FakeTransport) -> RequestBridge:
    return RequestBridge(fake_transport)


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
credential:
  api_key: "sk-from-file"
transport:
  timeout: 15
chat:
  greeting: "Hi there"
logging:
  level: INFO
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
