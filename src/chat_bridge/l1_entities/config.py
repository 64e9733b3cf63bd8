"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class CredentialConfig(BaseModel):
    api_key: str | None = None  # literal key; takes precedence over api_key_env
    api_key_env: str


class TransportConfig(BaseModel):
    timeout: float | None  # None = no limit


class ChatConfig(BaseModel):
    greeting: str


class LoggingConfig(BaseModel):
    directory: str | None = None  # None = platform user log dir
    level: str


class AppConfig(BaseModel):
    credential: CredentialConfig
    transport: TransportConfig
    chat: ChatConfig
    logging: LoggingConfig
