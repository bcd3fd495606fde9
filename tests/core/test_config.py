from pathlib import Path

import pytest
from pydantic import ValidationError

from sheetmap.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SHEETMAP_LOG_DIR")
    monkeypatch.delenv("SHEETMAP_OUTPUT_DIR")
    settings = Settings()

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR == Path("./logs")
    assert settings.DEFAULT_SINK == "openpyxl"
    assert settings.NUMBER_FORMAT_ALIASES["currency"] == '"$"#,##0.00'


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SHEETMAP_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHEETMAP_DEFAULT_SINK", "memory")
    monkeypatch.setenv("SHEETMAP_NUMBER_FORMAT_ALIASES", '{"money": "0.00"}')
    settings = Settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DEFAULT_SINK == "memory"
    assert settings.NUMBER_FORMAT_ALIASES == {"money": "0.00"}


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SHEETMAP_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_default_sink(monkeypatch):
    monkeypatch.setenv("SHEETMAP_DEFAULT_SINK", "csv")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_only_used_settings_are_declared():
    assert set(Settings.model_fields) == {
        "LOG_LEVEL",
        "LOG_DIR",
        "DEFAULT_SINK",
        "OUTPUT_DIR",
        "NUMBER_FORMAT_ALIASES",
    }
