"""Infrastructure config defaults and credential resolution — lives in L4, not domain."""

from __future__ import annotations

import copy
import os
from pathlib import Path

from chat_bridge.l1_entities.config import AppConfig
from chat_bridge.l3_interface_adapters.controllers.chat_controller import DEFAULT_GREETING
from chat_bridge.l3_interface_adapters.gateways.paths import LOG_DIR
from chat_bridge.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'credential': {
        'api_key': None,
        'api_key_env': 'OPENAI_API_KEY',
    },
    'transport': {
        'timeout': 60.0,
    },
    'chat': {
        'greeting': DEFAULT_GREETING,
    },
    'logging': {
        'directory': None,
        'level': 'DEBUG',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


def resolve_api_key(config: AppConfig) -> str:
    """Literal key from config, else the configured env var, else ''."""
    cred = config.credential
    if cred.api_key:
        return cred.api_key
    return os.environ.get(cred.api_key_env, '')


def resolve_log_dir(config: AppConfig) -> Path:
    if config.logging.directory:
        return Path(config.logging.directory).expanduser()
    return LOG_DIR
