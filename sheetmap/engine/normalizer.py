"""
Normalization rules for sheet names and cell values.
Keeps generated workbooks valid for Excel.
"""
import re
from datetime import datetime, timezone
from typing import Any, Iterable

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.cell.rich_text import CellRichText

MAX_SHEET_NAME_LENGTH = 31
DEFAULT_SHEET_NAME = 'Sheet'

_INVALID_SHEET_CHARS = re.compile(r'[\[\]*?/\\:]')


def safe_sheet_name(name: str, replacement: str = ' ') -> str:
    """
    Make a string usable as an Excel sheet name.

    Rules:
    - Replace [ ] * ? / \\ : with the replacement character
    - Strip leading/trailing apostrophes
    - Truncate to 31 characters
    - Empty names become "Sheet"

    Args:
        name: Proposed sheet name
        replacement: Character used for invalid characters

    Returns:
        Valid sheet name
    """
    if not name:
        return DEFAULT_SHEET_NAME

    name = _INVALID_SHEET_CHARS.sub(replacement, name)
    name = name.strip("'")
    name = name[:MAX_SHEET_NAME_LENGTH]

    if not name.strip():
        return DEFAULT_SHEET_NAME

    return name


def unique_sheet_name(name: str, taken: Iterable[str]) -> str:
    """
    Make a sheet name unique among taken names.

    Excel compares sheet names case-insensitively. Duplicates get a numeric
    suffix ("Books1", "Books2", ...); the name is shortened so that name and
    suffix together stay within 31 characters.
    """
    used = {existing.lower() for existing in taken}
    if name.lower() not in used:
        return name

    suffix = 1
    while True:
        tag = str(suffix)
        candidate = f"{name[:MAX_SHEET_NAME_LENGTH - len(tag)]}{tag}"
        if candidate.lower() not in used:
            return candidate
        suffix += 1


def normalize_cell_value(value: Any) -> Any:
    """
    Normalize a scalar for writing into a worksheet cell.

    - Timezone-aware datetimes are converted to naive UTC (Excel has no
      timezone support)
    - Control characters Excel rejects are removed from strings
    - Empty rich text becomes None
    - Everything else passes through unchanged
    """
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    if isinstance(value, CellRichText) and len(value) == 0:
        return None
    return value
