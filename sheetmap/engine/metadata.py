"""
Metadata discovery for mappable classes.

Reads the declarative markers from sheetmap.engine.markers and turns a class's
own public annotations into FieldDescriptor objects.
"""
import dataclasses
import inspect
import logging
import typing
from typing import Any, List, Optional, Tuple

from sheetmap.core.interfaces import FieldDescriptor
from sheetmap.engine.kinds import (
    annotated_extras,
    classify_hint,
    is_classvar,
    unwrap_annotated,
)
from sheetmap.engine.markers import (
    COLUMN_KEY,
    DEFAULT_DELIMITER,
    SHEET_KEY,
    Column,
    Sheet,
    get_order,
    get_workbook,
)

logger = logging.getLogger(__name__)


class MetadataProvider:
    """
    Describes record types from their declared annotations and markers.

    Only public (no leading underscore), non-inherited annotations are read.
    Inherited fields are never described, even on dataclasses that collect
    them.
    """

    def describe(self, cls: type) -> List[FieldDescriptor]:
        """
        Describe every public field declared directly on cls.

        Args:
            cls: Record class

        Returns:
            FieldDescriptor per declared field, in declaration order
        """
        if not isinstance(cls, type):
            return []

        own_annotations = {
            identifier: raw_hint
            for identifier, raw_hint in inspect.get_annotations(cls).items()
            if not identifier.startswith('_')
        }
        hints = self._resolve_hints(cls, own_annotations)
        dataclass_fields = (
            {f.name: f for f in dataclasses.fields(cls)}
            if dataclasses.is_dataclass(cls) else {}
        )

        descriptors = []
        for identifier in own_annotations:
            if identifier not in hints:
                continue

            hint = hints[identifier]
            if is_classvar(hint) or isinstance(hint, dataclasses.InitVar):
                continue

            column_marker, sheet_marker = self._markers(hint, dataclass_fields.get(identifier))
            runtime_type = unwrap_annotated(hint)

            descriptors.append(FieldDescriptor(
                identifier=identifier,
                runtime_type=runtime_type,
                explicit_name=(column_marker.name or None) if column_marker else None,
                is_nested=bool(column_marker and column_marker.nested),
                format_tag=(column_marker.number_format or None) if column_marker else None,
                kind=classify_hint(runtime_type),
                sheet_name=(sheet_marker.name or None) if sheet_marker else None,
            ))

        return descriptors

    def order_of(self, cls: type) -> Optional[Tuple[str, ...]]:
        """Explicit field order declared with @order, or None"""
        return get_order(cls)

    def sheet_name_of(self, descriptor: FieldDescriptor) -> Optional[str]:
        """Sheet name override of a workbook root field, or None"""
        return descriptor.sheet_name

    def delimiter_of(self, root_cls: type) -> str:
        """Title delimiter declared with @workbook (default: one space)"""
        marker = get_workbook(root_cls)
        return marker.delimiter if marker else DEFAULT_DELIMITER

    def is_mappable_root(self, cls: type) -> bool:
        return get_workbook(cls) is not None

    def _resolve_hints(self, cls: type, own_annotations: dict) -> dict:
        """
        Resolve the annotations of cls.

        When the class cannot be resolved as a whole (a name imported only
        under TYPE_CHECKING, a type local to a function), each annotation is
        resolved on its own and only the unresolvable ones are left out.
        """
        try:
            return typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError, AttributeError) as e:
            logger.warning(f"Could not resolve type hints of {cls.__qualname__} ({e}), resolving field by field")

        hints = {}
        for identifier, raw_hint in own_annotations.items():
            try:
                hints[identifier] = self._resolve_one(cls, identifier, raw_hint)
            except (NameError, TypeError, AttributeError, SyntaxError) as e:
                logger.warning(f"Skipping {cls.__qualname__}.{identifier}: cannot resolve {raw_hint!r} ({e})")
        return hints

    @staticmethod
    def _resolve_one(cls: type, identifier: str, raw_hint: Any) -> Any:
        # One-field stand-in class: same module globals, cls namespace as locals
        holder = type(cls.__name__, (), {
            '__module__': cls.__module__,
            '__annotations__': {identifier: raw_hint},
        })
        return typing.get_type_hints(holder, localns=dict(vars(cls)), include_extras=True)[identifier]

    @staticmethod
    def _markers(hint: Any, dataclass_field) -> Tuple[Optional[Column], Optional[Sheet]]:
        """Column and Sheet markers from field metadata, then Annotated extras"""
        column_marker = None
        sheet_marker = None

        if dataclass_field is not None:
            column_marker = dataclass_field.metadata.get(COLUMN_KEY)
            sheet_marker = dataclass_field.metadata.get(SHEET_KEY)

        for extra in annotated_extras(hint):
            if column_marker is None and isinstance(extra, Column):
                column_marker = extra
            elif sheet_marker is None and isinstance(extra, Sheet):
                sheet_marker = extra

        return column_marker, sheet_marker
