"""
sheetmap - map annotated object graphs onto spreadsheet sheets.

    from dataclasses import dataclass, field
    from sheetmap import workbook, column, Sheetmap
    from sheetmap.components.sink import OpenpyxlSink

    @dataclass
    class Author:
        name: str
        genres: list[str] = field(default_factory=list)

    @dataclass
    class Book:
        title: str
        author: Author = column(nested=True)
        price: float = column(number_format="currency", default=0.0)

    @workbook
    @dataclass
    class Library:
        books: list[Book] = field(default_factory=list)

    Sheetmap.using(OpenpyxlSink()).map(library).write("library.xlsx")
"""

from sheetmap.core.errors import (
    NotMappableError,
    NullArgumentError,
    SheetmapError,
    SinkError,
)
from sheetmap.core.interfaces import FieldDescriptor, FieldKind, LeafColumn, SheetSpec
from sheetmap.engine.eligibility import EligibilityFilter
from sheetmap.engine.flatten import FlattenEngine
from sheetmap.engine.markers import Column, Sheet, column, order, sheet, workbook
from sheetmap.engine.metadata import MetadataProvider
from sheetmap.engine.sheets import SheetBuilder, map_into, map_to_grid
from sheetmap.engine.titles import auto_title, compose_path
from sheetmap.mapper import Sheetmap

__version__ = '0.1.0'

__all__ = [
    'Sheetmap',
    'map_to_grid',
    'map_into',
    'SheetBuilder',
    'FlattenEngine',
    'EligibilityFilter',
    'MetadataProvider',
    'workbook',
    'order',
    'column',
    'sheet',
    'Column',
    'Sheet',
    'auto_title',
    'compose_path',
    'FieldDescriptor',
    'FieldKind',
    'LeafColumn',
    'SheetSpec',
    'SheetmapError',
    'NullArgumentError',
    'NotMappableError',
    'SinkError',
]
