"""
Classification of types and values into scalar, sequence and record shapes.

Scalars are the values a worksheet cell can hold directly. Strings, bytes and
mappings are never treated as sequences. CellRichText subclasses list, so the
scalar check always runs first.
"""
import types
import typing
from collections.abc import Collection, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Annotated, Union, get_args, get_origin

from openpyxl.cell.rich_text import CellRichText

from sheetmap.core.interfaces import FieldKind

SCALAR_TYPES = (str, bool, int, float, Decimal, CellRichText, datetime, date, time)

_NOT_SEQUENCES = (str, bytes, bytearray, memoryview, Mapping)

_UNION_TYPES = (Union, getattr(types, 'UnionType', Union))


def unwrap_annotated(hint: Any) -> Any:
    """Strip Annotated[...] layers, returning the underlying hint"""
    while get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    return hint


def annotated_extras(hint: Any) -> tuple:
    """Metadata objects attached with Annotated[...], outermost first"""
    extras = ()
    while get_origin(hint) is Annotated:
        extras += hint.__metadata__
        hint = get_args(hint)[0]
    # Optional[Annotated[T, ...]]
    if get_origin(hint) in _UNION_TYPES:
        for arg in get_args(hint):
            if arg is not type(None):
                extras += annotated_extras(arg)
    return extras


def is_classvar(hint: Any) -> bool:
    hint = unwrap_annotated(hint)
    return hint is typing.ClassVar or get_origin(hint) is typing.ClassVar


def classify_hint(hint: Any) -> FieldKind:
    """
    Decide the shape of a declared type hint.

    Optional[X] classifies as X. A union of several non-None types is a scalar
    only if every member is a scalar, otherwise it is unsupported.
    """
    hint = unwrap_annotated(hint)

    if get_origin(hint) in _UNION_TYPES:
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        kinds = {classify_hint(arg) for arg in members}
        if len(kinds) == 1:
            return kinds.pop()
        return FieldKind.UNSUPPORTED

    target = get_origin(hint) or hint
    if not isinstance(target, type):
        # Any, TypeVar, Literal, unresolved forward references
        return FieldKind.UNSUPPORTED

    if issubclass(target, SCALAR_TYPES):
        return FieldKind.SCALAR
    if issubclass(target, _NOT_SEQUENCES):
        return FieldKind.UNSUPPORTED
    if issubclass(target, Collection):
        return FieldKind.SEQUENCE
    if target is object:
        return FieldKind.UNSUPPORTED
    return FieldKind.RECORD


def classify_value(value: Any) -> FieldKind:
    """Decide the shape of a runtime value (None is unsupported)"""
    if value is None:
        return FieldKind.UNSUPPORTED
    if isinstance(value, SCALAR_TYPES):
        return FieldKind.SCALAR
    if isinstance(value, _NOT_SEQUENCES) or isinstance(value, type):
        return FieldKind.UNSUPPORTED
    if isinstance(value, Collection):
        return FieldKind.SEQUENCE
    return FieldKind.RECORD


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)
