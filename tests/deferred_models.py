"""Record classes whose annotations are only resolvable in part."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from sheetmap import column, workbook

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class Invoice:
    number: str
    total: Decimal | None = None
    lines: List[str] = column(number_format="@", default_factory=list)


@workbook
@dataclass
class Ledger:
    invoices: List[Invoice]
    audited_by: Optional[Decimal] = None


def build_ledger() -> Ledger:
    return Ledger(invoices=[Invoice("INV-1", lines=["desk"]), Invoice("INV-2")])


def make_local_record():
    @dataclass
    class Shipment:
        reference: str
        parcel: Parcel = None

    @dataclass
    class Parcel:
        weight: float

    return Shipment, Parcel
