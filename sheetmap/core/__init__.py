"""
Sheetmap - Core Interfaces, Data Classes, Errors and Configuration
"""

from .interfaces import (
    # Data classes
    FieldKind,
    FieldDescriptor,
    LeafColumn,
    SheetSpec,

    # Interfaces
    SinkInterface,
)

from .errors import (
    SheetmapError,
    NullArgumentError,
    NotMappableError,
    SinkError,
)

__all__ = [
    # Data classes
    'FieldKind',
    'FieldDescriptor',
    'LeafColumn',
    'SheetSpec',

    # Interfaces
    'SinkInterface',

    # Errors
    'SheetmapError',
    'NullArgumentError',
    'NotMappableError',
    'SinkError',
]
