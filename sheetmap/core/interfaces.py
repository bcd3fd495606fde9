"""
Sheetmap - Core Interfaces and Data Classes

Data classes shared by the metadata layer, the flatten engine and the sheet
builder, plus the abstract interface every sink implementation must follow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union


# ============================================================================
# Data Classes
# ============================================================================

class FieldKind(Enum):
    """Shape of a declared field, decided from its type hint"""
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'
    RECORD = 'record'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Metadata for one declared field of a record type.

    Attributes:
        identifier: Attribute name on the instance
        runtime_type: Resolved type hint (Annotated/Optional wrappers removed)
        explicit_name: Display name override, used verbatim as a title segment
        is_nested: True when the field is marked for recursive traversal
        format_tag: Opaque number format handed to the sink
        kind: Shape of the declared type
        sheet_name: Sheet name override (only meaningful on a workbook root)
    """
    identifier: str
    runtime_type: Any
    explicit_name: Optional[str] = None
    is_nested: bool = False
    format_tag: Optional[str] = None
    kind: FieldKind = FieldKind.UNSUPPORTED
    sheet_name: Optional[str] = None


@dataclass(frozen=True)
class LeafColumn:
    """A single scalar-valued output column after full flattening"""
    title: str
    format_tag: Optional[str]
    values: Tuple[Any, ...]


@dataclass
class SheetSpec:
    """
    One sheet of the mapped workbook with its flattened grid.

    Attributes:
        name: Excel-safe sheet name
        row_type: Class of the first non-empty row (None if rows hold no objects)
        rows: Row objects taken from the root field
        columns: Flattened leaf columns, left to right
    """
    name: str
    row_type: Optional[type]
    rows: List[Any]
    columns: List[LeafColumn] = field(default_factory=list)

    @property
    def header(self) -> List[str]:
        """Column titles (row 0 of the grid)"""
        return [column.title for column in self.columns]

    @property
    def data_rows(self) -> List[List[Any]]:
        """Grid body, one list per input row"""
        return [
            [column.values[row_index] for column in self.columns]
            for row_index in range(len(self.rows))
        ]

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def height(self) -> int:
        """Number of grid rows including the header"""
        return len(self.rows) + 1


# ============================================================================
# Component Interfaces
# ============================================================================

class SinkInterface(ABC):
    """Interface for materialising flattened sheets into a tabular artifact"""

    def __init__(self, config: Optional[dict] = None):
        """Initialize sink with configuration"""
        self.config = config or {}

    @abstractmethod
    def create_sheet(self, name: str) -> Any:
        """Create a sheet and return an opaque handle for it"""
        pass

    @abstractmethod
    def sheet_names(self) -> List[str]:
        """Names of the sheets created so far, in creation order"""
        pass

    @abstractmethod
    def set_cell(self, sheet: Any, row: int, column: int, value: Any) -> None:
        """
        Write a scalar into a cell.

        Args:
            sheet: Handle returned by create_sheet
            row: Zero-based row index (0 is the header row)
            column: Zero-based column index
            value: Scalar value or None
        """
        pass

    @abstractmethod
    def set_column_format(self, sheet: Any, column: int, format_tag: str) -> None:
        """Apply a number format to every data cell of a column"""
        pass

    @abstractmethod
    def write(self, destination: Union[str, Path]) -> Path:
        """Persist the sink contents and return the written path"""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return name of this sink implementation"""
        pass
