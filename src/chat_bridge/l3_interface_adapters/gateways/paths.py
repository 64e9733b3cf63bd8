"""Shared path constants for configuration and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('chat-bridge')
LOG_DIR = user_log_path('chat-bridge')

CONFIG_ENV_VAR = 'CHAT_BRIDGE_CONFIG'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
