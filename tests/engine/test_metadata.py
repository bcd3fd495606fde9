import logging
from typing import List, Optional

from sheetmap.core.interfaces import FieldKind
from sheetmap.engine.flatten import FlattenEngine
from sheetmap.engine.metadata import MetadataProvider
from sheetmap.engine.sheets import map_to_grid
from tests.deferred_models import Invoice, build_ledger, make_local_record
from tests.models import (
    Author,
    Book,
    Bookshop,
    Derived,
    Library,
    Mixed,
    NatureReserve,
    NotAWorkbook,
    InheritedWorkbook,
    Ordered,
    Plant,
)


def _by_identifier(cls):
    return {d.identifier: d for d in MetadataProvider().describe(cls)}


def test_describe_reads_column_metadata():
    descriptors = _by_identifier(Book)
    assert list(descriptors) == ["title", "author", "price"]

    author = descriptors["author"]
    assert author.is_nested
    assert author.kind is FieldKind.RECORD
    assert author.runtime_type is Author

    price = descriptors["price"]
    assert price.format_tag == "currency"
    assert price.kind is FieldKind.SCALAR
    assert price.explicit_name is None


def test_describe_classifies_kinds():
    kinds = {name: d.kind for name, d in _by_identifier(Mixed).items()}
    assert kinds["label"] is FieldKind.SCALAR
    assert kinds["active"] is FieldKind.SCALAR
    assert kinds["tags"] is FieldKind.SEQUENCE
    assert kinds["attributes"] is FieldKind.UNSUPPORTED
    assert kinds["payload"] is FieldKind.UNSUPPORTED
    assert kinds["colour"] is FieldKind.RECORD
    assert kinds["author"] is FieldKind.RECORD
    assert kinds["opaque"] is FieldKind.UNSUPPORTED


def test_describe_skips_private_and_classvar():
    names = set(_by_identifier(Mixed))
    assert "_secret" not in names
    assert "kind" not in names


def test_describe_ignores_inherited_fields():
    assert list(_by_identifier(Derived)) == ["own"]


def test_describe_reads_annotated_markers():
    descriptors = _by_identifier(Plant)
    assert descriptors["plant_type"].explicit_name == "Plant"
    assert descriptors["height_cm"].format_tag == "0.0"
    assert descriptors["height_cm"].kind is FieldKind.SCALAR
    assert descriptors["height_cm"].runtime_type == Optional[float]


def test_describe_reads_sheet_names():
    provider = MetadataProvider()
    catalogue = provider.describe(Bookshop)[0]
    assert provider.sheet_name_of(catalogue) == "Catalogue: 2024/25"

    books = provider.describe(Library)[0]
    assert provider.sheet_name_of(books) is None
    assert books.runtime_type == List[Book]


def test_describe_non_class_is_empty():
    assert MetadataProvider().describe(None) == []


def test_order_of():
    provider = MetadataProvider()
    assert provider.order_of(Ordered) == ("b", "a", "unknown")
    assert provider.order_of(Book) is None


def test_delimiter_of():
    provider = MetadataProvider()
    assert provider.delimiter_of(NatureReserve) == "_"
    assert provider.delimiter_of(Library) == " "
    assert provider.delimiter_of(NotAWorkbook) == " "


def test_is_mappable_root_is_not_inherited():
    provider = MetadataProvider()
    assert provider.is_mappable_root(Library)
    assert not provider.is_mappable_root(NotAWorkbook)
    assert not provider.is_mappable_root(InheritedWorkbook)


def test_unresolvable_annotation_drops_only_that_field(caplog):
    with caplog.at_level(logging.WARNING, logger="sheetmap.engine.metadata"):
        descriptors = _by_identifier(Invoice)

    assert list(descriptors) == ["number", "lines"]
    assert descriptors["number"].runtime_type is str
    assert descriptors["number"].kind is FieldKind.SCALAR
    assert descriptors["lines"].kind is FieldKind.SEQUENCE
    assert descriptors["lines"].format_tag == "@"
    assert "Invoice.total" in caplog.text


def test_function_local_type_drops_only_that_field():
    shipment, _ = make_local_record()
    descriptors = _by_identifier(shipment)
    assert list(descriptors) == ["reference"]


def test_partially_resolvable_rows_still_flatten():
    _, columns = FlattenEngine().flatten([Invoice("INV-1", lines=["desk", "lamp"]), Invoice("INV-2")])

    assert [c.title for c in columns] == ["Number", "Lines 0", "Lines 1"]
    assert columns[0].values == ("INV-1", "INV-2")


def test_partially_resolvable_root_still_maps():
    sheets = map_to_grid(build_ledger())
    assert [s.name for s in sheets] == ["Invoices"]
    assert sheets[0].header == ["Number", "Lines 0"]
