"""Detection of the voucher type declared in ``infoTributaria/codDoc``."""

from __future__ import annotations

import logging
from typing import Union

from lxml import etree

from . import vouchers

logger = logging.getLogger(__name__)

_COD_DOC = "//*[local-name()='infoTributaria']/*[local-name()='codDoc']"

Document = Union[etree._ElementTree, etree._Element]


def read_code(document: Document) -> str | None:
    """Return the raw ``codDoc`` text, or ``None`` when the element is absent."""

    nodes = document.xpath(_COD_DOC)
    if not nodes:
        return None
    return (nodes[0].text or "").strip()


def classify(document: Document) -> str:
    """Return the canonical label of *document*, or ``""`` when unknown.

    Classification never fails: a missing ``codDoc`` or a code outside the
    SRI catalogue yields the empty label and rejection is left to the
    stylesheet lookup.
    """

    code = read_code(document)
    if code is None:
        logger.debug("No infoTributaria/codDoc element found")
        return ""

    if not vouchers.accepts(code):
        logger.debug("codDoc %r is not a supported voucher type", code)
        return ""

    return vouchers.get_label(code)


__all__ = ["classify", "read_code"]
