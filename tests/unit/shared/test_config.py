#!/usr/bin/env python3
"""
Unit tests for config loading.

Usage:
    python -m pytest tests/unit/shared/test_config.py -v
"""

import logging
from pathlib import Path
from unittest import mock

import pytest
import yaml

import albumtools.shared.config as config_module
from albumtools.shared.config import (
    DEFAULT_BASE_URL,
    get_base_url,
    get_log_settings,
    get_output_format,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_config_returns_fallback(self, tmp_path):
        with mock.patch.object(config_module, 'CONFIG_PATH', tmp_path / "nonexistent.yaml"):
            assert load_config() is None
            assert load_config(fallback={'default': True}) == {'default': True}

    def test_missing_config_required_exits(self, tmp_path):
        with mock.patch.object(config_module, 'CONFIG_PATH', tmp_path / "nonexistent.yaml"):
            with pytest.raises(SystemExit):
                load_config(required=True)

    def test_valid_config_loads(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({
            'batch_import': {'output_format': 'yaml'},
            'logging': {'enabled': True, 'level': 'info'},
        }))

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            result = load_config()
        assert result['batch_import']['output_format'] == 'yaml'
        assert result['logging']['level'] == 'info'

    def test_empty_yaml_returns_empty_dict(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config() == {}

    def test_invalid_yaml_returns_fallback(self, tmp_path, caplog):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("{{invalid: yaml: content::")

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            with caplog.at_level(logging.ERROR):
                assert load_config(fallback={'default': True}) == {'default': True}
        assert "Error reading config" in caplog.text

    def test_invalid_yaml_required_exits(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("{{invalid: yaml: content::")

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            with pytest.raises(SystemExit):
                load_config(required=True)

    def test_non_mapping_returns_fallback(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n")

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config(fallback={}) == {}

    def test_config_path_is_in_home_dir(self):
        assert config_module.CONFIG_PATH == Path.home() / ".album-tools" / "config.yaml"


class TestGetOutputFormat:
    """Tests for get_output_format()."""

    @pytest.mark.parametrize("config", [None, {}, {'batch_import': None}, {'batch_import': {}}])
    def test_defaults_to_json(self, config):
        assert get_output_format(config) == 'json'

    def test_reads_setting(self):
        assert get_output_format({'batch_import': {'output_format': ' YAML '}}) == 'yaml'

    def test_unknown_format_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert get_output_format({'batch_import': {'output_format': 'xml'}}) == 'json'
        assert "xml" in caplog.text


class TestGetLogSettings:
    """Tests for get_log_settings()."""

    @pytest.mark.parametrize("config", [
        None,
        {},
        {'logging': None},
        {'logging': {'enabled': False}},
        {'logging': {'level': 'info'}},
    ])
    def test_off(self, config):
        assert get_log_settings(config) is None

    def test_non_mapping_section_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert get_log_settings({'logging': 'yes'}) is None
        assert "not a mapping" in caplog.text

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv('HOME', str(tmp_path))
        settings = get_log_settings({'logging': {'enabled': True}})
        assert settings.level == logging.DEBUG
        assert settings.level_name == 'DEBUG'
        assert settings.max_bytes == 5 * 1024 * 1024
        assert settings.backup_count == 3
        assert settings.file.endswith(str(Path('.album-tools') / 'logs' / 'debug.log'))
        assert '~' not in settings.file

    def test_custom_values(self):
        settings = get_log_settings({'logging': {
            'enabled': True,
            'file': '/tmp/album-tools.log',
            'level': 'warning',
            'max_size_mb': 0.5,
            'backup_count': 0,
        }})
        assert settings.level == logging.WARNING
        assert settings.file == '/tmp/album-tools.log'
        assert settings.max_bytes == 512 * 1024
        assert settings.backup_count == 0

    @pytest.mark.parametrize("key,value", [
        ('max_size_mb', 'five'),
        ('max_size_mb', -1),
        ('max_size_mb', True),
        ('backup_count', 'three'),
        ('backup_count', 2.5),
        ('backup_count', -1),
        ('level', 'loud'),
        ('file', ['a', 'b']),
    ])
    def test_bad_values_fall_back_with_warning(self, key, value, caplog):
        with caplog.at_level(logging.WARNING):
            settings = get_log_settings({'logging': {'enabled': True, key: value}})
        assert settings is not None
        assert settings.max_bytes == 5 * 1024 * 1024
        assert settings.backup_count == 3
        assert settings.level == logging.DEBUG
        assert key in caplog.text


class TestGetBaseUrl:
    """Tests for get_base_url()."""

    @pytest.mark.parametrize("config", [None, {}, {'site': None}, {'site': 'x'}, {'site': {'base_url': ' '}}])
    def test_default(self, config):
        assert get_base_url(config) == DEFAULT_BASE_URL

    def test_reads_setting(self):
        assert get_base_url({'site': {'base_url': ' https://reviews.example.com '}}) == (
            'https://reviews.example.com'
        )
