"""Map canonical voucher XML onto the records in :mod:`facturaec.models`."""

from __future__ import annotations

from typing import Callable

from lxml import etree

from .envelope import parse_xml
from .errors import VoucherReadError, XMLParseError
from .models import (
    VOUCHER_CLASSES,
    AdditionalField,
    CreditNote,
    DebitNote,
    DebitReason,
    Detail,
    Invoice,
    Issuer,
    Party,
    PurchaseSettlement,
    Recipient,
    Retention,
    SupportDocument,
    Tax,
    Voucher,
    Waybill,
    WithholdingTax,
)
from .utils import find_child, find_child_text, find_children, localname, parse_date, parse_decimal


def read_voucher(xml: str | bytes | etree._ElementTree, label: str | None = None) -> Voucher:
    """Build the voucher record described by canonical *xml*.

    When *label* is omitted the variant is chosen from the root element name.
    """

    if isinstance(xml, etree._ElementTree):
        root = xml.getroot()
    else:
        try:
            root = parse_xml(xml).getroot()
        except XMLParseError as exc:
            raise VoucherReadError(f"Canonical document is not well-formed: {exc}") from exc

    root_label = localname(root)
    label = label or root_label
    cls = VOUCHER_CLASSES.get(label)
    if cls is None:
        raise VoucherReadError(f"Unknown voucher type: {label!r}")
    if root_label != label:
        raise VoucherReadError(
            f"Expected a <{label}> document, found <{root_label}>"
        )

    voucher = cls(**_read_common(root))
    _READERS[label](root, voucher)
    return voucher


def _read_common(root: etree._Element) -> dict:
    additional = find_child(root, "additionalInfo")
    return {
        "environment": find_child_text(root, "environment"),
        "emission_type": find_child_text(root, "emissionType"),
        "access_key": find_child_text(root, "accessKey"),
        "establishment": find_child_text(root, "establishment"),
        "emission_point": find_child_text(root, "emissionPoint"),
        "sequential": find_child_text(root, "sequential"),
        "issue_date": parse_date(find_child_text(root, "issueDate")),
        "issuer": _read_issuer(find_child(root, "issuer")),
        "establishment_address": find_child_text(root, "establishmentAddress"),
        "details": _read_details(root),
        "additional_info": [
            AdditionalField(name=node.get("name", ""), value=(node.text or "").strip())
            for node in (find_children(additional, "field") if additional is not None else [])
        ],
    }


def _read_issuer(node: etree._Element | None) -> Issuer:
    if node is None:
        return Issuer()
    return Issuer(
        ruc=find_child_text(node, "ruc"),
        business_name=find_child_text(node, "businessName"),
        trade_name=find_child_text(node, "tradeName"),
        head_office_address=find_child_text(node, "headOfficeAddress"),
    )


def _read_party(node: etree._Element | None) -> Party:
    if node is None:
        return Party()
    return Party(
        identification_type=find_child_text(node, "identificationType"),
        identification=find_child_text(node, "identification"),
        name=find_child_text(node, "name"),
        address=find_child_text(node, "address"),
    )


def _read_support(node: etree._Element | None) -> SupportDocument:
    if node is None:
        return SupportDocument()
    return SupportDocument(
        type=find_child_text(node, "type"),
        number=find_child_text(node, "number"),
        issue_date=parse_date(find_child_text(node, "issueDate")),
    )


def _read_taxes(parent: etree._Element | None) -> list[Tax]:
    container = find_child(parent, "taxes") if parent is not None else None
    if container is None:
        return []
    return [
        Tax(
            code=find_child_text(node, "code"),
            rate_code=find_child_text(node, "rateCode"),
            rate=parse_decimal(find_child_text(node, "rate")),
            taxable_base=parse_decimal(find_child_text(node, "taxableBase")),
            amount=parse_decimal(find_child_text(node, "amount")),
        )
        for node in find_children(container, "tax")
    ]


def _read_details(parent: etree._Element) -> list[Detail]:
    container = find_child(parent, "detalles")
    if container is None:
        return []
    return [
        Detail(
            code=find_child_text(node, "code"),
            auxiliary_code=find_child_text(node, "auxiliaryCode"),
            description=find_child_text(node, "description"),
            quantity=parse_decimal(find_child_text(node, "quantity")),
            unit_price=parse_decimal(find_child_text(node, "unitPrice")),
            discount=parse_decimal(find_child_text(node, "discount")),
            subtotal=parse_decimal(find_child_text(node, "subtotal")),
            taxes=_read_taxes(node),
        )
        for node in find_children(container, "detalle")
    ]


def _read_invoice(root: etree._Element, voucher: Invoice) -> None:
    voucher.buyer = _read_party(find_child(root, "buyer"))
    voucher.subtotal = parse_decimal(find_child_text(root, "subtotal"))
    voucher.total_discount = parse_decimal(find_child_text(root, "totalDiscount"))
    voucher.tip = parse_decimal(find_child_text(root, "tip"))
    voucher.total = parse_decimal(find_child_text(root, "total"))
    voucher.currency = find_child_text(root, "currency")
    voucher.taxes = _read_taxes(root)


def _read_purchase_settlement(root: etree._Element, voucher: PurchaseSettlement) -> None:
    voucher.supplier = _read_party(find_child(root, "supplier"))
    voucher.subtotal = parse_decimal(find_child_text(root, "subtotal"))
    voucher.total_discount = parse_decimal(find_child_text(root, "totalDiscount"))
    voucher.total = parse_decimal(find_child_text(root, "total"))
    voucher.currency = find_child_text(root, "currency")
    voucher.taxes = _read_taxes(root)


def _read_credit_note(root: etree._Element, voucher: CreditNote) -> None:
    voucher.buyer = _read_party(find_child(root, "buyer"))
    voucher.modified_document = _read_support(find_child(root, "modifiedDocument"))
    voucher.subtotal = parse_decimal(find_child_text(root, "subtotal"))
    voucher.total = parse_decimal(find_child_text(root, "total"))
    voucher.currency = find_child_text(root, "currency")
    voucher.reason = find_child_text(root, "reason")
    voucher.taxes = _read_taxes(root)


def _read_debit_note(root: etree._Element, voucher: DebitNote) -> None:
    voucher.buyer = _read_party(find_child(root, "buyer"))
    voucher.modified_document = _read_support(find_child(root, "modifiedDocument"))
    voucher.subtotal = parse_decimal(find_child_text(root, "subtotal"))
    voucher.total = parse_decimal(find_child_text(root, "total"))
    voucher.taxes = _read_taxes(root)
    reasons = find_child(root, "reasons")
    voucher.reasons = [
        DebitReason(
            description=find_child_text(node, "description"),
            amount=parse_decimal(find_child_text(node, "amount")),
        )
        for node in (find_children(reasons, "reason") if reasons is not None else [])
    ]


def _read_waybill(root: etree._Element, voucher: Waybill) -> None:
    voucher.departure_address = find_child_text(root, "departureAddress")
    voucher.carrier = _read_party(find_child(root, "carrier"))
    voucher.transport_start = parse_date(find_child_text(root, "transportStart"))
    voucher.transport_end = parse_date(find_child_text(root, "transportEnd"))
    voucher.plate = find_child_text(root, "plate")
    recipients = find_child(root, "recipients")
    voucher.recipients = [
        Recipient(
            identification=find_child_text(node, "identification"),
            name=find_child_text(node, "name"),
            address=find_child_text(node, "address"),
            reason=find_child_text(node, "reason"),
            route=find_child_text(node, "route"),
            support_document=_read_support(find_child(node, "supportDocument")),
            details=_read_details(node),
        )
        for node in (find_children(recipients, "recipient") if recipients is not None else [])
    ]


def _read_retention(root: etree._Element, voucher: Retention) -> None:
    voucher.subject = _read_party(find_child(root, "subject"))
    voucher.fiscal_period = find_child_text(root, "fiscalPeriod")
    withholdings = find_child(root, "withholdings")
    voucher.withholdings = [
        WithholdingTax(
            code=find_child_text(node, "code"),
            retention_code=find_child_text(node, "retentionCode"),
            taxable_base=parse_decimal(find_child_text(node, "taxableBase")),
            percentage=parse_decimal(find_child_text(node, "percentage")),
            amount=parse_decimal(find_child_text(node, "amount")),
            support_document=_read_support(find_child(node, "supportDocument")),
        )
        for node in (find_children(withholdings, "withholding") if withholdings is not None else [])
    ]


_READERS: dict[str, Callable[[etree._Element, Voucher], None]] = {
    Invoice.label: _read_invoice,
    PurchaseSettlement.label: _read_purchase_settlement,
    CreditNote.label: _read_credit_note,
    DebitNote.label: _read_debit_note,
    Waybill.label: _read_waybill,
    Retention.label: _read_retention,
}


__all__ = ["read_voucher"]
