"""
Fluent entry point for mapping objects into a sink.

    sink = OpenpyxlSink()
    Sheetmap.using(sink).map(library).write('library.xlsx')
"""
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from sheetmap.core.errors import NullArgumentError
from sheetmap.core.interfaces import SheetSpec, SinkInterface
from sheetmap.engine.metadata import MetadataProvider
from sheetmap.engine.sheets import map_into

logger = logging.getLogger(__name__)


class Sheetmap:
    """
    Maps @workbook objects into a sink.

    Each sequence field of the object becomes a sheet, each element a row,
    and nested records and sequences are flattened into titled columns.
    """

    def __init__(self, sink: SinkInterface, provider: Optional[MetadataProvider] = None):
        self._sink = sink
        self._provider = provider or MetadataProvider()
        self._sheets: List[SheetSpec] = []

    @classmethod
    def using(cls, sink: SinkInterface, provider: Optional[MetadataProvider] = None) -> 'Sheetmap':
        """
        Start mapping into sink.

        Raises:
            NullArgumentError: If sink is None
        """
        if sink is None:
            logger.error("sink is None")
            raise NullArgumentError("sink cannot be None")
        return cls(sink, provider)

    def map(self, obj: Any) -> 'Sheetmap':
        """
        Map obj into the sink; may be called more than once.

        Raises:
            NullArgumentError: If obj is None
            NotMappableError: If obj's class is not decorated with @workbook
        """
        self._sheets.extend(map_into(self._sink, obj, self._provider))
        return self

    def write(self, destination: Union[str, Path]) -> Path:
        """Write the sink to destination"""
        return self._sink.write(destination)

    @property
    def sink(self) -> SinkInterface:
        return self._sink

    @property
    def sheets(self) -> List[SheetSpec]:
        """Sheets mapped so far, in creation order"""
        return list(self._sheets)
