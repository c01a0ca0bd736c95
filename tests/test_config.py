"""Configuration from settings file and environment."""

import pytest
import yaml

from config.config import Config

ENV_VARS = (
    'COUNTDOWN_MAX_NUMBERS', 'COUNTDOWN_TARGET_MIN',
    'COUNTDOWN_TARGET_MAX', 'COUNTDOWN_LOG_LEVEL',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config()
    assert config.max_numbers == 6
    assert config.target_min == 1
    assert config.target_max == 999
    assert config.allow_duplicates is False
    assert config.log_level == 'WARNING'


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('COUNTDOWN_MAX_NUMBERS', '4')
    monkeypatch.setenv('COUNTDOWN_TARGET_MAX', '500')
    monkeypatch.setenv('COUNTDOWN_LOG_LEVEL', 'debug')
    config = Config()
    assert config.max_numbers == 4
    assert config.target_max == 500
    assert config.log_level == 'DEBUG'


def test_settings_file(tmp_path):
    path = tmp_path / 'settings.yaml'
    path.write_text("max_numbers: 3\ntarget_min: 100\nallow_duplicates: true\n", encoding='utf-8')
    config = Config(path)
    assert config.max_numbers == 3
    assert config.target_min == 100
    assert config.target_max == 999
    assert config.allow_duplicates is True


def test_missing_settings_file(tmp_path):
    config = Config(tmp_path / 'absent.yaml')
    assert config.max_numbers == 6


def test_empty_settings_file(tmp_path):
    path = tmp_path / 'settings.yaml'
    path.write_text("", encoding='utf-8')
    assert Config(path).target_max == 999


def test_malformed_settings_file(tmp_path):
    path = tmp_path / 'settings.yaml'
    path.write_text("max_numbers: [1,\n", encoding='utf-8')
    with pytest.raises(yaml.YAMLError):
        Config(path)


def test_non_mapping_settings_file(tmp_path):
    path = tmp_path / 'settings.yaml'
    path.write_text("- 1\n- 2\n", encoding='utf-8')
    with pytest.raises(ValueError):
        Config(path)


@pytest.mark.parametrize("name, value", [
    ('COUNTDOWN_MAX_NUMBERS', 'six'),
    ('COUNTDOWN_MAX_NUMBERS', '0'),
    ('COUNTDOWN_TARGET_MIN', '1000'),
    ('COUNTDOWN_LOG_LEVEL', 'LOUD'),
])
def test_invalid_settings(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Config()
