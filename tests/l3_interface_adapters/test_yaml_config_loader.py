"""Tests for YAML config loader gateway."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import chat_bridge.l3_interface_adapters.gateways.yaml_config_loader as mod
from chat_bridge.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader, deep_merge


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch, tmp_path: Path):
    monkeypatch.delenv('CHAT_BRIDGE_CONFIG', raising=False)
    monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [tmp_path / 'none' / 'config.yaml'])


class TestYamlConfigLoader:
    def test_load_raw_from_yaml(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml))
        assert raw['credential']['api_key'] == 'sk-from-file'
        assert raw['transport']['timeout'] == 15

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw(str(tmp_path / 'nonexistent.yaml'))

    def test_load_raw_with_overrides(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml), overrides={'transport': {'timeout': 99}})
        assert raw['transport']['timeout'] == 99
        assert raw['credential']['api_key'] == 'sk-from-file'

    def test_empty_yaml_raises_validation_error(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        with pytest.raises(ValidationError):
            YamlConfigLoader().load(str(p))

    def test_non_mapping_yaml_rejected(self, tmp_path: Path):
        p = tmp_path / 'list.yaml'
        p.write_text('- a\n- b\n', encoding='utf-8')
        with pytest.raises(ValueError, match='mapping'):
            YamlConfigLoader().load_raw(str(p))

    def test_env_var_path_used(self, sample_config_yaml: Path, monkeypatch):
        monkeypatch.setenv('CHAT_BRIDGE_CONFIG', str(sample_config_yaml))
        raw = YamlConfigLoader().load_raw()
        assert raw['chat']['greeting'] == 'Hi there'

    def test_env_var_missing_file_raises(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv('CHAT_BRIDGE_CONFIG', str(tmp_path / 'gone.yaml'))
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw()


class TestDefaultConfigResolution:
    def test_loads_from_default_config_dir(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / 'chat-bridge'
        config_dir.mkdir()
        (config_dir / 'config.yml').write_text('chat:\n  greeting: "Yo"\n', encoding='utf-8')
        monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [config_dir / 'config.yaml', config_dir / 'config.yml'])

        assert YamlConfigLoader().load_raw()['chat']['greeting'] == 'Yo'

    def test_no_default_config_returns_empty(self):
        assert YamlConfigLoader().load_raw() == {}


class TestDeepMerge:
    def test_nested_merge(self):
        base = {'a': {'x': 1, 'y': 2}, 'b': 3}
        result = deep_merge(base, {'a': {'y': 99, 'z': 100}, 'c': 4})
        assert result == {'a': {'x': 1, 'y': 99, 'z': 100}, 'b': 3, 'c': 4}

    def test_override_replaces_non_dict(self):
        assert deep_merge({'a': {'x': 1}}, {'a': None}) == {'a': None}
