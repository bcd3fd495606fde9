"""
Sheetmap - Plugin Registry

Central registry for sink implementations.

EXAMPLE USAGE:
    from sheetmap.registry import registry, register_all_components

    register_all_components()
    sink = registry.create_sink('openpyxl', {'number_format_aliases': {...}})

    # Unknown names fail with the list of registered ones:
    # ValueError: Unknown sink implementation 'csv'. Available: ['openpyxl', 'memory']
"""

from typing import Dict, List, Optional, Type

from sheetmap.core.interfaces import SinkInterface


class PluginRegistry:
    """Central registry for all plugin implementations"""

    def __init__(self):
        self._sinks: Dict[str, Type[SinkInterface]] = {}

    def register_sink(self, name: str, sink_class: Type[SinkInterface]):
        """Register a sink implementation"""
        self._sinks[name] = sink_class

    def create_sink(self, implementation: str, config: Optional[dict] = None) -> SinkInterface:
        """Create sink instance"""
        if implementation not in self._sinks:
            raise ValueError(
                f"Unknown sink implementation '{implementation}'. "
                f"Available: {list(self._sinks.keys())}"
            )
        return self._sinks[implementation](config or {})

    def list_sinks(self) -> List[str]:
        return list(self._sinks.keys())


# Global registry instance
registry = PluginRegistry()


def register_all_components():
    """Register the built-in sink implementations"""
    from sheetmap.components.sink import MemorySink, OpenpyxlSink

    registry.register_sink('openpyxl', OpenpyxlSink)
    registry.register_sink('memory', MemorySink)
