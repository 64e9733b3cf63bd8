"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from chat_bridge.l1_entities.config import AppConfig
from chat_bridge.l3_interface_adapters.gateways.paths import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the YAML config file (explicit path, env var, or user config dir) and applies overrides."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        path = _resolve_path(config_path)
        data = _read_mapping(path) if path is not None else {}
        if overrides:
            deep_merge(data, overrides)
        return data


def _resolve_path(config_path: str | None) -> Path | None:
    """Explicit path first, then $CHAT_BRIDGE_CONFIG, then the first existing default."""
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR) or None
    if explicit is not None:
        path = Path(explicit).expanduser()
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


def _read_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping at the top level: {path}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
