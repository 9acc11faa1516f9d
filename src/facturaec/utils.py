"""Utility helpers shared across facturaec modules."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from lxml import etree


def localname(element: etree._Element) -> str:
    """Return the tag of *element* without its namespace."""

    tag = getattr(element, "tag", "")
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


def find_child(element: etree._Element, tag: str) -> etree._Element | None:
    """Return the first direct child named *tag*, ignoring namespaces."""

    for child in element:
        if localname(child) == tag:
            return child
    return None


def find_child_text(element: etree._Element, tag: str) -> str:
    node = find_child(element, tag)
    if node is None or node.text is None:
        return ""
    return node.text.strip()


def find_children(element: etree._Element, tag: str) -> list[etree._Element]:
    return [child for child in element if localname(child) == tag]


def parse_decimal(value: str | Decimal | None, *, default: Decimal = Decimal("0")) -> Decimal:
    """Read an SRI amount such as ``"12.50"``.

    Blank, malformed and non-finite (``NaN``, ``Infinity``) amounts give
    *default*.
    """

    if isinstance(value, Decimal):
        amount: Decimal | None = value
    else:
        text = (value or "").strip()
        try:
            amount = Decimal(text) if text else None
        except InvalidOperation:
            amount = None

    if amount is None or not amount.is_finite():
        return default
    return amount


def parse_date(value: str | None) -> date | None:
    """Parse an ISO ``yyyy-mm-dd`` date, returning ``None`` when absent or invalid."""

    text = (value or "").strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


__all__ = [
    "localname",
    "find_child",
    "find_child_text",
    "find_children",
    "parse_decimal",
    "parse_date",
]
