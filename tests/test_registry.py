import pytest

from sheetmap.components.sink import MemorySink, OpenpyxlSink
from sheetmap.registry import PluginRegistry, registry


def test_builtin_sinks_are_registered(registered):
    assert set(registry.list_sinks()) >= {"openpyxl", "memory"}
    assert isinstance(registry.create_sink("openpyxl"), OpenpyxlSink)
    assert isinstance(registry.create_sink("memory", {"indent": 4}), MemorySink)
    assert registry.create_sink("memory", {"indent": 4}).indent == 4


def test_unknown_sink_lists_available():
    local = PluginRegistry()
    local.register_sink("memory", MemorySink)

    with pytest.raises(ValueError, match=r"Unknown sink implementation 'csv'.*memory"):
        local.create_sink("csv")
