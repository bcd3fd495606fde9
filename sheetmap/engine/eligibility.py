"""
Field eligibility and ordering.

A field takes part in flattening if its declared type is a supported scalar,
a sequence, or if it is explicitly marked nested. When the class declares an
@order, only the named eligible fields are kept, in that order.
"""
import logging
from typing import List, Optional

from sheetmap.core.interfaces import FieldDescriptor, FieldKind
from sheetmap.engine.metadata import MetadataProvider

logger = logging.getLogger(__name__)


def is_eligible(descriptor: FieldDescriptor) -> bool:
    """Scalar and sequence fields are always eligible, anything else only if nested"""
    return descriptor.kind in (FieldKind.SCALAR, FieldKind.SEQUENCE) or descriptor.is_nested


class EligibilityFilter:
    """Selects and orders the fields of a record type that produce columns"""

    def __init__(self, provider: Optional[MetadataProvider] = None):
        self.provider = provider or MetadataProvider()

    def eligible_fields(self, cls: type) -> List[FieldDescriptor]:
        """
        Eligible fields of cls, ordered by its @order if present.

        Args:
            cls: Record class

        Returns:
            Ordered list of FieldDescriptor
        """
        eligible = [d for d in self.provider.describe(cls) if is_eligible(d)]
        return self._apply_order(cls, eligible)

    def eligible_sheet_fields(self, root_cls: type) -> List[FieldDescriptor]:
        """Eligible fields of a workbook root that hold sequences (one sheet each)"""
        eligible = [
            d for d in self.provider.describe(root_cls)
            if d.kind is FieldKind.SEQUENCE
        ]
        return self._apply_order(root_cls, eligible)

    def _apply_order(self, cls: type, eligible: List[FieldDescriptor]) -> List[FieldDescriptor]:
        names = self.provider.order_of(cls)
        if names is None:
            logger.debug(f"{cls.__qualname__} has no @order, using declaration order")
            return eligible

        by_identifier = {d.identifier: d for d in eligible}
        ordered = []
        seen = set()
        for name in names:
            if name in by_identifier and name not in seen:
                ordered.append(by_identifier[name])
                seen.add(name)

        ignored = [name for name in names if name not in by_identifier]
        if ignored:
            logger.debug(f"{cls.__qualname__} @order names without eligible field ignored: {ignored}")

        logger.debug(f"{cls.__qualname__} eligible fields: {[d.identifier for d in ordered]}")
        return ordered
