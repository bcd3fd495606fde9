"""
Sheet-level mapping.

map_to_grid() turns a @workbook object into SheetSpec grids (one per non-empty
sequence field of the root); SheetBuilder writes those grids into a sink.
"""
import logging
import time
from typing import Any, Iterable, List, Optional

from sheetmap.core.errors import NotMappableError, NullArgumentError
from sheetmap.core.interfaces import SheetSpec, SinkInterface
from sheetmap.engine.eligibility import EligibilityFilter
from sheetmap.engine.flatten import FlattenEngine
from sheetmap.engine.metadata import MetadataProvider
from sheetmap.engine.normalizer import safe_sheet_name, unique_sheet_name
from sheetmap.engine.titles import auto_title

logger = logging.getLogger(__name__)


def map_to_grid(
    root: Any,
    provider: Optional[MetadataProvider] = None,
    taken_names: Iterable[str] = (),
) -> List[SheetSpec]:
    """
    Flatten every sheet-bearing field of a workbook object.

    Args:
        root: Instance of a class decorated with @workbook
        provider: Metadata provider (default: MetadataProvider())
        taken_names: Sheet names already present in the target workbook

    Returns:
        One SheetSpec per non-empty sequence field, in sheet order, with
        names unique among themselves and taken_names

    Raises:
        NullArgumentError: If root is None
        NotMappableError: If root's class is not decorated with @workbook
    """
    if root is None:
        logger.error("root object is None")
        raise NullArgumentError("root object cannot be None")

    provider = provider or MetadataProvider()
    root_cls = type(root)
    if not provider.is_mappable_root(root_cls):
        logger.error(f"{root_cls.__qualname__} is not decorated with @workbook")
        raise NotMappableError(
            f"{root_cls.__qualname__} is not decorated with @workbook and cannot be mapped"
        )

    delimiter = provider.delimiter_of(root_cls)
    eligibility = EligibilityFilter(provider)
    engine = FlattenEngine(provider, delimiter)

    sheet_fields = eligibility.eligible_sheet_fields(root_cls)
    logger.debug(f"sheet fields of {root_cls.__qualname__}: {[d.identifier for d in sheet_fields]}")

    taken = list(taken_names)
    sheets = []
    for descriptor in sheet_fields:
        value = getattr(root, descriptor.identifier, None)
        rows = list(value) if value is not None else []
        if not rows:
            logger.warning(f"No rows found for '{descriptor.identifier}', skipping sheet creation")
            continue

        safe_name = safe_sheet_name(
            provider.sheet_name_of(descriptor)
            or auto_title(descriptor.identifier, delimiter)
        )
        name = unique_sheet_name(safe_name, taken)
        if name != safe_name:
            logger.warning(f"Sheet name '{safe_name}' already used, renamed to '{name}'")
        taken.append(name)

        representative = next((row for row in rows if row is not None), None)
        _, columns = engine.flatten(rows, '', 0, None)

        sheets.append(SheetSpec(
            name=name,
            row_type=type(representative) if representative is not None else None,
            rows=rows,
            columns=columns,
        ))
        logger.info(f"Mapped sheet '{name}': {len(rows)} rows, {len(columns)} columns")

    return sheets


class SheetBuilder:
    """
    Writes flattened sheets into a sink.

    Row 0 of each sheet holds the column titles; data rows follow in input
    order. A column's format tag is applied once per column.
    """

    def __init__(self, sink: SinkInterface):
        if sink is None:
            logger.error("sink is None")
            raise NullArgumentError("sink cannot be None")
        self.sink = sink

    def build(self, sheets: Iterable[SheetSpec]) -> int:
        """
        Write sheets into the sink.

        Args:
            sheets: Sheets produced by map_to_grid

        Returns:
            Number of sheets written
        """
        written = 0
        for spec in sheets:
            self._build_sheet(spec)
            written += 1
        return written

    def _build_sheet(self, spec: SheetSpec) -> None:
        handle = self.sink.create_sheet(spec.name)
        logger.info(f"new sheet created with name '{spec.name}'")

        for column_index, column in enumerate(spec.columns):
            self.sink.set_cell(handle, 0, column_index, column.title)
            if column.format_tag:
                self.sink.set_column_format(handle, column_index, column.format_tag)

        for column_index, column in enumerate(spec.columns):
            for row_index, value in enumerate(column.values, start=1):
                self.sink.set_cell(handle, row_index, column_index, value)


def map_into(sink: SinkInterface, root: Any, provider: Optional[MetadataProvider] = None) -> List[SheetSpec]:
    """
    Map root into sink and return the written sheets.

    Raises:
        NullArgumentError: If root or sink is None
        NotMappableError: If root's class is not decorated with @workbook
    """
    builder = SheetBuilder(sink)

    logger.info("map start")
    start_time = time.perf_counter()
    sheets = map_to_grid(root, provider, sink.sheet_names())
    builder.build(sheets)
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"map complete, {len(sheets)} sheets, time taken: {elapsed_ms:.1f} ms")

    return sheets
