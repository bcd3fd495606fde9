"""
Recursive flattening of row objects into leaf columns.

The shape of a slice of rows is decided by its first non-None element:

- scalar:   one column whose title is the path built so far
- sequence: one column group per index up to the longest sequence
            ("Author Genres 0", "Author Genres 1", ...), shorter or missing
            sequences padded with None
- record:   one column group per eligible field, titled with the field's
            explicit name or its generated title

A slice that is entirely None, or whose shape is not understood, emits no
columns. Column indexes are threaded through the recursion so sibling groups
get consecutive, non-overlapping positions.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

from sheetmap.core.interfaces import FieldKind, LeafColumn
from sheetmap.engine.eligibility import EligibilityFilter
from sheetmap.engine.kinds import classify_value, is_scalar
from sheetmap.engine.markers import DEFAULT_DELIMITER
from sheetmap.engine.metadata import MetadataProvider
from sheetmap.engine.titles import auto_title, compose_path

logger = logging.getLogger(__name__)


class FlattenEngine:
    """
    Projects a homogeneous collection of rows onto leaf columns.

    The engine holds no state between calls; the same rows and metadata
    always produce the same columns.
    """

    def __init__(
        self,
        provider: Optional[MetadataProvider] = None,
        delimiter: str = DEFAULT_DELIMITER,
    ):
        """
        Initialize engine.

        Args:
            provider: Metadata provider (default: MetadataProvider())
            delimiter: Separator between title path segments
        """
        self.provider = provider or MetadataProvider()
        self.eligibility = EligibilityFilter(self.provider)
        self.delimiter = delimiter

    def flatten(
        self,
        rows: Sequence[Any],
        title_path: str = '',
        start_column_index: int = 0,
        format_tag: Optional[str] = None,
    ) -> Tuple[int, List[LeafColumn]]:
        """
        Flatten rows into leaf columns.

        Args:
            rows: Row values (None entries are absent rows)
            title_path: Title built by enclosing records and sequences
            start_column_index: Column index of the first emitted column
            format_tag: Number format attached to emitted scalar columns

        Returns:
            Tuple of (next free column index, emitted columns)
        """
        columns: List[LeafColumn] = []
        next_index = self._populate(list(rows), title_path, start_column_index, format_tag, columns)
        return next_index, columns

    def _populate(
        self,
        rows: List[Any],
        title_path: str,
        column_index: int,
        format_tag: Optional[str],
        columns: List[LeafColumn],
    ) -> int:
        representative = next((row for row in rows if row is not None), None)
        if representative is None:
            logger.debug(f"'{title_path}' has no values, no column emitted")
            return column_index

        kind = classify_value(representative)
        if kind is FieldKind.SCALAR:
            return self._populate_column(rows, title_path, column_index, format_tag, columns)
        if kind is FieldKind.SEQUENCE:
            return self._populate_sequence(rows, title_path, column_index, format_tag, columns)
        if kind is FieldKind.RECORD:
            return self._populate_record(rows, title_path, column_index, type(representative), columns)

        logger.debug(
            f"'{title_path}' holds unsupported {type(representative).__name__} values, skipped"
        )
        return column_index

    def _populate_column(
        self,
        rows: List[Any],
        title_path: str,
        column_index: int,
        format_tag: Optional[str],
        columns: List[LeafColumn],
    ) -> int:
        values = []
        for row in rows:
            if row is not None and not is_scalar(row):
                logger.debug(
                    f"'{title_path}' dropped non-scalar {type(row).__name__} value in column {column_index}"
                )
                row = None
            values.append(row)

        logger.debug(f"populating column {column_index} '{title_path}'")
        columns.append(LeafColumn(title=title_path, format_tag=format_tag, values=tuple(values)))
        return column_index + 1

    def _populate_sequence(
        self,
        rows: List[Any],
        title_path: str,
        column_index: int,
        format_tag: Optional[str],
        columns: List[LeafColumn],
    ) -> int:
        sequences = [self._as_list(row) for row in rows]
        max_size = max((len(items) for items in sequences), default=0)
        logger.debug(f"'{title_path}' max sequence size is {max_size}")

        for index in range(max_size):
            column_index = self._populate(
                [items[index] if index < len(items) else None for items in sequences],
                compose_path(title_path, self.delimiter, str(index)),
                column_index,
                format_tag,
                columns,
            )
        return column_index

    def _populate_record(
        self,
        rows: List[Any],
        title_path: str,
        column_index: int,
        row_type: type,
        columns: List[LeafColumn],
    ) -> int:
        for descriptor in self.eligibility.eligible_fields(row_type):
            segment = descriptor.explicit_name or auto_title(descriptor.identifier, self.delimiter)
            column_index = self._populate(
                [self._field_value(row, descriptor.identifier) for row in rows],
                compose_path(title_path, self.delimiter, segment),
                column_index,
                descriptor.format_tag,
                columns,
            )
        return column_index

    @staticmethod
    def _as_list(value: Any) -> List[Any]:
        """Materialise a sequence row; absent or non-sequence rows count as empty"""
        if value is None or classify_value(value) is not FieldKind.SEQUENCE:
            return []
        return list(value)

    @staticmethod
    def _field_value(row: Any, identifier: str) -> Any:
        if row is None:
            return None
        return getattr(row, identifier, None)
