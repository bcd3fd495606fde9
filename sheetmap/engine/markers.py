"""
Declarative metadata for mapping objects to workbooks.

Classes are marked with decorators, fields with dataclass field helpers or
with typing.Annotated:

    @workbook
    @order("books", "authors")
    @dataclass
    class Library:
        books: list[Book] = sheet(name="All Books", default_factory=list)
        authors: list[Author] = field(default_factory=list)

    @order("title", "author", "price")
    @dataclass
    class Book:
        title: str
        author: Author = column(nested=True)
        price: float = column(number_format="currency", default=0.0)

    class Plant:
        kind: Annotated[str, Column(name="Plant")]

Class-level markers are not inherited: a subclass of a @workbook class is
not a workbook root unless it is decorated itself.
"""
import dataclasses
from dataclasses import dataclass
from typing import Optional, Tuple

WORKBOOK_ATTR = '__sheetmap_workbook__'
ORDER_ATTR = '__sheetmap_order__'
COLUMN_KEY = 'sheetmap.column'
SHEET_KEY = 'sheetmap.sheet'

DEFAULT_DELIMITER = ' '


@dataclass(frozen=True)
class Workbook:
    """Workbook-level properties of a mappable root class"""
    delimiter: str = DEFAULT_DELIMITER


@dataclass(frozen=True)
class Column:
    """
    Column properties of a field.

    Attributes:
        name: Title segment used instead of the generated one
        number_format: Excel number format (or alias) for the column's cells
        nested: Traverse the field's value as a record
    """
    name: Optional[str] = None
    number_format: Optional[str] = None
    nested: bool = False


@dataclass(frozen=True)
class Sheet:
    """Sheet properties of a workbook root field"""
    name: Optional[str] = None


def workbook(cls=None, *, delimiter: str = DEFAULT_DELIMITER):
    """
    Mark a class as a mappable workbook root.

    Usable bare (@workbook) or with arguments (@workbook(delimiter="_")).
    The delimiter joins title segments of nested columns and the words of
    generated sheet and column names.
    """
    def decorate(target):
        setattr(target, WORKBOOK_ATTR, Workbook(delimiter=delimiter))
        return target

    if cls is None:
        return decorate
    return decorate(cls)


def order(*names: str):
    """
    Declare the order of a class's sheets or columns.

    Names are case-sensitive field identifiers. Fields that are not named are
    left out, names that match no eligible field are ignored.
    """
    if len(names) == 1 and not isinstance(names[0], str):
        names = tuple(names[0])

    def decorate(target):
        setattr(target, ORDER_ATTR, tuple(names))
        return target

    return decorate


def column(
    *,
    name: Optional[str] = None,
    number_format: Optional[str] = None,
    nested: bool = False,
    **field_kwargs
):
    """
    dataclasses.field() carrying Column metadata.

    A number_format on a sequence field applies to every element column it
    produces ("Dates 0", "Dates 1", ...). Remaining keyword arguments
    (default, default_factory, repr, ...) are passed through to
    dataclasses.field().
    """
    metadata = dict(field_kwargs.pop('metadata', None) or {})
    metadata[COLUMN_KEY] = Column(name=name or None, number_format=number_format or None, nested=nested)
    return dataclasses.field(metadata=metadata, **field_kwargs)


def sheet(*, name: Optional[str] = None, **field_kwargs):
    """dataclasses.field() carrying Sheet metadata."""
    metadata = dict(field_kwargs.pop('metadata', None) or {})
    metadata[SHEET_KEY] = Sheet(name=name or None)
    return dataclasses.field(metadata=metadata, **field_kwargs)


def get_workbook(cls) -> Optional[Workbook]:
    """Workbook marker declared directly on cls, if any"""
    marker = vars(cls).get(WORKBOOK_ATTR) if isinstance(cls, type) else None
    return marker if isinstance(marker, Workbook) else None


def get_order(cls) -> Optional[Tuple[str, ...]]:
    """Order declared directly on cls, if any"""
    if not isinstance(cls, type):
        return None
    return vars(cls).get(ORDER_ATTR)
