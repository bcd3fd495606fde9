"""
Openpyxl Sink - Writes sheets to an .xlsx workbook

Config options:
    number_format_aliases: Extra format tag aliases, merged over
                           Settings.NUMBER_FORMAT_ALIASES
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from openpyxl import Workbook
from openpyxl.styles.numbers import BUILTIN_FORMATS
from openpyxl.worksheet.worksheet import Worksheet

from sheetmap.core.config import get_settings
from sheetmap.core.errors import SinkError
from sheetmap.core.interfaces import SinkInterface
from sheetmap.engine.normalizer import normalize_cell_value, unique_sheet_name

logger = logging.getLogger(__name__)


class FormatCache:
    """
    Resolves format tags to Excel number format codes.

    A tag is looked up as an alias ("currency"), then as an explicit built-in
    format id ("builtin:14"), and otherwise used verbatim as a format code, so
    digit-only codes such as "0" or "00000" are kept as written. Each tag is
    resolved once; one cache belongs to one workbook.
    """

    BUILTIN_PREFIX = 'builtin:'

    def __init__(self, aliases: Optional[Dict[str, str]] = None):
        self.aliases = dict(aliases or {})
        self._resolved: Dict[str, str] = {}

    def resolve(self, format_tag: str) -> str:
        if format_tag not in self._resolved:
            self._resolved[format_tag] = self._lookup(format_tag)
            logger.debug(f"format tag '{format_tag}' resolved to '{self._resolved[format_tag]}'")
        return self._resolved[format_tag]

    def _lookup(self, format_tag: str) -> str:
        if format_tag in self.aliases:
            return self.aliases[format_tag]

        if format_tag.startswith(self.BUILTIN_PREFIX):
            builtin_id = format_tag[len(self.BUILTIN_PREFIX):]
            if builtin_id.isdigit() and int(builtin_id) in BUILTIN_FORMATS:
                return BUILTIN_FORMATS[int(builtin_id)]
            logger.warning(f"Unknown built-in format '{format_tag}', using it verbatim")

        return format_tag

    def __len__(self) -> int:
        return len(self._resolved)


class OpenpyxlSink(SinkInterface):
    """Sink backed by an openpyxl Workbook"""

    def __init__(self, config: Optional[dict] = None):
        super().__init__(config)

        aliases = dict(get_settings().NUMBER_FORMAT_ALIASES)
        aliases.update(self.config.get('number_format_aliases') or {})
        self.format_cache = FormatCache(aliases)

        self.workbook = Workbook()
        # A new workbook starts with one empty sheet; it is dropped once the
        # first mapped sheet exists so that an unmapped workbook stays valid.
        self._placeholder: Optional[Worksheet] = self.workbook.active
        self._column_formats: Dict[Tuple[str, int], str] = {}

    def create_sheet(self, name: str) -> Worksheet:
        if self._placeholder is not None:
            self.workbook.remove(self._placeholder)
            self._placeholder = None

        title = unique_sheet_name(name, self.workbook.sheetnames)
        if title != name:
            logger.warning(f"Sheet name '{name}' already used, created '{title}'")
        return self.workbook.create_sheet(title=title)

    def sheet_names(self) -> List[str]:
        if self._placeholder is not None:
            return []
        return list(self.workbook.sheetnames)

    def set_cell(self, sheet: Worksheet, row: int, column: int, value: Any) -> None:
        value = normalize_cell_value(value)
        if value is None:
            return

        cell = sheet.cell(row=row + 1, column=column + 1)
        cell.value = value
        if isinstance(value, str) and cell.data_type == 'f':
            # Text starting with '=' is data, not a formula
            cell.data_type = 's'

        if row > 0:
            number_format = self._column_formats.get((sheet.title, column))
            if number_format:
                cell.number_format = number_format

    def set_column_format(self, sheet: Worksheet, column: int, format_tag: str) -> None:
        number_format = self.format_cache.resolve(format_tag)
        self._column_formats[(sheet.title, column)] = number_format

        # Cells written before the format was set
        for (cell,) in sheet.iter_rows(min_row=2, min_col=column + 1, max_col=column + 1):
            if cell.value is not None:
                cell.number_format = number_format

    def write(self, destination: Union[str, Path]) -> Path:
        """Save the workbook to destination (.xlsx)"""
        output_path = Path(destination)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.workbook.save(output_path)
        except OSError as e:
            raise SinkError(f"Failed to write {output_path}: {e}") from e

        logger.info(f"Saved workbook with {len(self.workbook.sheetnames)} sheets to {output_path}")
        return output_path

    def get_name(self) -> str:
        return 'openpyxl'
