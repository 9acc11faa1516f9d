"""Typed records for normalised SRI vouchers.

Every variant is keyed by the same label the classifier produces, so the
output of :class:`facturaec.adapter.Adapter` selects its record class
directly through :data:`VOUCHER_CLASSES`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import ClassVar

ZERO = Decimal("0")


@dataclass
class Issuer:
    ruc: str = ""
    business_name: str = ""
    trade_name: str = ""
    head_office_address: str = ""


@dataclass
class Party:
    """Buyer, supplier, carrier or withholding subject."""

    identification_type: str = ""
    identification: str = ""
    name: str = ""
    address: str = ""


@dataclass
class Tax:
    code: str = ""
    rate_code: str = ""
    rate: Decimal = ZERO
    taxable_base: Decimal = ZERO
    amount: Decimal = ZERO


@dataclass
class Detail:
    """A ``detalle`` line of a voucher."""

    code: str = ""
    auxiliary_code: str = ""
    description: str = ""
    quantity: Decimal = ZERO
    unit_price: Decimal = ZERO
    discount: Decimal = ZERO
    subtotal: Decimal = ZERO
    taxes: list[Tax] = field(default_factory=list)


@dataclass
class AdditionalField:
    name: str
    value: str


@dataclass
class SupportDocument:
    """Reference to another voucher (``codDocSustento`` / ``codDocModificado``)."""

    type: str = ""
    number: str = ""
    issue_date: date | None = None


@dataclass
class Voucher:
    """Fields shared by every voucher type."""

    label: ClassVar[str] = ""

    environment: str = ""
    emission_type: str = ""
    access_key: str = ""
    establishment: str = ""
    emission_point: str = ""
    sequential: str = ""
    issue_date: date | None = None
    issuer: Issuer = field(default_factory=Issuer)
    establishment_address: str = ""
    details: list[Detail] = field(default_factory=list)
    additional_info: list[AdditionalField] = field(default_factory=list)

    @property
    def number(self) -> str:
        """Printed voucher number, ``EEE-PPP-SSSSSSSSS``."""

        return f"{self.establishment}-{self.emission_point}-{self.sequential}"

    def additional(self, name: str) -> str | None:
        """Return the value of the ``campoAdicional`` called *name*."""

        for item in self.additional_info:
            if item.name == name:
                return item.value
        return None


@dataclass
class Invoice(Voucher):
    label: ClassVar[str] = "invoice"

    buyer: Party = field(default_factory=Party)
    subtotal: Decimal = ZERO
    total_discount: Decimal = ZERO
    tip: Decimal = ZERO
    total: Decimal = ZERO
    currency: str = ""
    taxes: list[Tax] = field(default_factory=list)


@dataclass
class PurchaseSettlement(Voucher):
    label: ClassVar[str] = "purchaseSettlement"

    supplier: Party = field(default_factory=Party)
    subtotal: Decimal = ZERO
    total_discount: Decimal = ZERO
    total: Decimal = ZERO
    currency: str = ""
    taxes: list[Tax] = field(default_factory=list)


@dataclass
class CreditNote(Voucher):
    label: ClassVar[str] = "creditNote"

    buyer: Party = field(default_factory=Party)
    modified_document: SupportDocument = field(default_factory=SupportDocument)
    subtotal: Decimal = ZERO
    total: Decimal = ZERO
    currency: str = ""
    reason: str = ""
    taxes: list[Tax] = field(default_factory=list)


@dataclass
class DebitReason:
    description: str = ""
    amount: Decimal = ZERO


@dataclass
class DebitNote(Voucher):
    label: ClassVar[str] = "debitNote"

    buyer: Party = field(default_factory=Party)
    modified_document: SupportDocument = field(default_factory=SupportDocument)
    subtotal: Decimal = ZERO
    total: Decimal = ZERO
    taxes: list[Tax] = field(default_factory=list)
    reasons: list[DebitReason] = field(default_factory=list)


@dataclass
class Recipient:
    identification: str = ""
    name: str = ""
    address: str = ""
    reason: str = ""
    route: str = ""
    support_document: SupportDocument = field(default_factory=SupportDocument)
    details: list[Detail] = field(default_factory=list)


@dataclass
class Waybill(Voucher):
    label: ClassVar[str] = "waybill"

    departure_address: str = ""
    carrier: Party = field(default_factory=Party)
    transport_start: date | None = None
    transport_end: date | None = None
    plate: str = ""
    recipients: list[Recipient] = field(default_factory=list)


@dataclass
class WithholdingTax:
    code: str = ""
    retention_code: str = ""
    taxable_base: Decimal = ZERO
    percentage: Decimal = ZERO
    amount: Decimal = ZERO
    support_document: SupportDocument = field(default_factory=SupportDocument)


@dataclass
class Retention(Voucher):
    label: ClassVar[str] = "retention"

    subject: Party = field(default_factory=Party)
    fiscal_period: str = ""
    withholdings: list[WithholdingTax] = field(default_factory=list)

    @property
    def total_withheld(self) -> Decimal:
        return sum((item.amount for item in self.withholdings), ZERO)


VOUCHER_CLASSES: dict[str, type[Voucher]] = {
    cls.label: cls
    for cls in (Invoice, PurchaseSettlement, CreditNote, DebitNote, Waybill, Retention)
}


__all__ = [
    "Issuer",
    "Party",
    "Tax",
    "Detail",
    "AdditionalField",
    "SupportDocument",
    "Voucher",
    "Invoice",
    "PurchaseSettlement",
    "CreditNote",
    "DebitReason",
    "DebitNote",
    "Recipient",
    "Waybill",
    "WithholdingTax",
    "Retention",
    "VOUCHER_CLASSES",
]
