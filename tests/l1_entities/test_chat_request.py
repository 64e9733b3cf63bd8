"""Tests for ChatMessage / ChatRequest entities."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from chat_bridge.l1_entities.chat_message import ChatMessage
from chat_bridge.l1_entities.chat_request import MODEL, TEMPERATURE, ChatRequest


class TestChatMessage:
    @pytest.mark.parametrize('role', ['system', 'user', 'assistant'])
    def test_valid_roles(self, role):
        assert ChatMessage(role=role, content='x').role == role

    def test_invalid_role_rejected(self):
        with pytest.raises(ValidationError):
            ChatMessage(role='tool', content='x')


class TestChatRequest:
    def test_defaults(self):
        req = ChatRequest(messages=(ChatMessage(role='user', content='hi'),))
        assert req.model == MODEL == 'gpt-4o-mini'
        assert req.temperature == TEMPERATURE == 0.7

    def test_to_body_shape(self):
        req = ChatRequest(messages=(ChatMessage(role='system', content='s'), ChatMessage(role='user', content='u')))
        assert req.to_body() == {
            'model': 'gpt-4o-mini',
            'messages': [{'role': 'system', 'content': 's'}, {'role': 'user', 'content': 'u'}],
            'temperature': 0.7,
        }

    def test_to_json_round_trips_to_body(self):
        req = ChatRequest(messages=(ChatMessage(role='user', content='"quoted" \\ ü'),))
        assert json.loads(req.to_json()) == req.to_body()

    def test_frozen(self):
        req = ChatRequest(messages=())
        with pytest.raises(ValidationError):
            req.model = 'other'  # type: ignore[misc]
