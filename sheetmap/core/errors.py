"""
Custom exceptions for sheetmap.

- NullArgumentError: a required argument (root object, sink) was None.
- NotMappableError: the root object's class is not decorated with @workbook.
- SinkError: a sink failed to persist its contents.

Unsupported field types and unknown @order names are not errors; they are
dropped and only show up in DEBUG logs.
"""


class SheetmapError(Exception):
    """Base class for all sheetmap errors."""


class NullArgumentError(SheetmapError, TypeError):
    """Raised when a required argument is None."""


class NotMappableError(SheetmapError, ValueError):
    """Raised when an object's class was not declared as a workbook root."""


class SinkError(SheetmapError):
    """Raised when a sink cannot write its output."""
