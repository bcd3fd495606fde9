"""
Memory Sink - Keeps sheets as in-memory grids

Useful for previews and tests; write() dumps the grids as JSON.

Config options:
    indent: JSON indentation (default: 2)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from sheetmap.core.errors import SinkError
from sheetmap.core.interfaces import SinkInterface
from sheetmap.engine.normalizer import unique_sheet_name

logger = logging.getLogger(__name__)


class MemorySheet:
    """A sparse grid of cell values plus per-column number formats"""

    def __init__(self, name: str):
        self.name = name
        self.cells: Dict[tuple, Any] = {}
        self.column_formats: Dict[int, str] = {}

    @property
    def max_row(self) -> int:
        return max((row for row, _ in self.cells), default=-1) + 1

    @property
    def max_column(self) -> int:
        return max((column for _, column in self.cells), default=-1) + 1

    def grid(self) -> List[List[Any]]:
        """Dense grid, rows first; unset cells are None"""
        return [
            [self.cells.get((row, column)) for column in range(self.max_column)]
            for row in range(self.max_row)
        ]


class MemorySink(SinkInterface):
    """Sink that stores sheets in memory"""

    def __init__(self, config: Optional[dict] = None):
        super().__init__(config)
        self.indent = self.config.get('indent', 2)
        self.sheets: Dict[str, MemorySheet] = {}

    def create_sheet(self, name: str) -> MemorySheet:
        sheet_name = unique_sheet_name(name, self.sheets)

        sheet = MemorySheet(sheet_name)
        self.sheets[sheet_name] = sheet
        return sheet

    def sheet_names(self) -> List[str]:
        return list(self.sheets)

    def set_cell(self, sheet: MemorySheet, row: int, column: int, value: Any) -> None:
        sheet.cells[(row, column)] = value

    def set_column_format(self, sheet: MemorySheet, column: int, format_tag: str) -> None:
        sheet.column_formats[column] = format_tag

    def grid(self, name: str) -> List[List[Any]]:
        """Dense grid of the named sheet"""
        return self.sheets[name].grid()

    def to_dict(self) -> Dict[str, Any]:
        return {
            name: {
                'rows': sheet.grid(),
                'column_formats': {str(column): tag for column, tag in sorted(sheet.column_formats.items())},
            }
            for name, sheet in self.sheets.items()
        }

    def write(self, destination: Union[str, Path]) -> Path:
        """
        Save all sheets to a JSON file.

        Non-JSON scalars (dates, decimals, rich text) are written as strings.
        """
        output_path = Path(destination)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=self.indent, default=str)
        except OSError as e:
            raise SinkError(f"Failed to write {output_path}: {e}") from e

        logger.info(f"Wrote {len(self.sheets)} sheets to {output_path}")
        return output_path

    def get_name(self) -> str:
        return 'memory'
