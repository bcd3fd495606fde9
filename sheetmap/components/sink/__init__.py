"""
Sink implementations.

- openpyxl: .xlsx workbook via openpyxl
- memory: in-memory grids, written as JSON
"""

from .memory_sink import MemorySheet, MemorySink
from .openpyxl_sink import FormatCache, OpenpyxlSink

__all__ = [
    'MemorySheet',
    'MemorySink',
    'FormatCache',
    'OpenpyxlSink',
]
