"""Voucher types defined by the SRI catalogue of electronic documents."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

INVOICE = "01"
PURCHASE_SETTLEMENT = "03"
CREDIT_NOTE = "04"
DEBIT_NOTE = "05"
WAYBILL = "06"
RETENTION = "07"

# codDoc -> canonical label. Labels name the stylesheet (lowercased) and the
# root element of the canonical document.
LABELS: Mapping[str, str] = MappingProxyType(
    {
        INVOICE: "invoice",
        PURCHASE_SETTLEMENT: "purchaseSettlement",
        CREDIT_NOTE: "creditNote",
        DEBIT_NOTE: "debitNote",
        WAYBILL: "waybill",
        RETENTION: "retention",
    }
)


def _normalise(code: object) -> str:
    return str(code).strip() if code is not None else ""


def accepts(code: object) -> bool:
    """Return ``True`` when *code* is a known ``codDoc`` value."""

    return _normalise(code) in LABELS


def get_label(code: object) -> str:
    """Return the canonical label for *code*.

    Raises :class:`KeyError` when the code is not part of the catalogue.
    """

    return LABELS[_normalise(code)]


def codes() -> Iterable[str]:
    return tuple(LABELS)


def labels() -> Iterable[str]:
    return tuple(LABELS.values())


__all__ = [
    "INVOICE",
    "PURCHASE_SETTLEMENT",
    "CREDIT_NOTE",
    "DEBIT_NOTE",
    "WAYBILL",
    "RETENTION",
    "LABELS",
    "accepts",
    "get_label",
    "codes",
    "labels",
]
