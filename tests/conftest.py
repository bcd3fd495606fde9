import logging

import pytest

from sheetmap.core.config import get_settings
from sheetmap.registry import register_all_components


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep log files and default output inside tmp_path"""
    monkeypatch.setenv("SHEETMAP_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SHEETMAP_OUTPUT_DIR", str(tmp_path / "output"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI commands replace root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def registered():
    register_all_components()
