"""Parsing of raw SRI documents and unwrapping of ``autorizacion`` envelopes.

Vouchers downloaded from the SRI portal are usually wrapped in the
authorization response::

    <autorizacion>
      <estado>AUTORIZADO</estado>
      <numeroAutorizacion>...</numeroAutorizacion>
      <fechaAutorizacion>...</fechaAutorizacion>
      <ambiente>PRODUCCIÓN</ambiente>
      <comprobante><![CDATA[<?xml ...?><factura>...</factura>]]></comprobante>
    </autorizacion>

The signed voucher travels as text inside ``comprobante`` and has to be parsed
a second time.  Documents without the envelope are returned as parsed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from lxml import etree

from .errors import EmbeddedPayloadMissing, XMLParseError
from .utils import find_child_text, localname

logger = logging.getLogger(__name__)

ENVELOPE_TAG = "autorizacion"
PAYLOAD_TAG = "comprobante"

RawDocument = Union[bytes, str]


@dataclass(frozen=True)
class Authorization:
    """Authorization metadata carried by the envelope."""

    status: str | None = None
    number: str | None = None
    authorized_at: str | None = None
    environment: str | None = None


@dataclass(frozen=True)
class Envelope:
    """Result of unwrapping a raw document."""

    document: etree._ElementTree
    authorization: Authorization | None = None

    @property
    def is_signed(self) -> bool:
        return self.authorization is not None


def _build_parser(encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
    )


def parse_xml(raw: RawDocument) -> etree._ElementTree:
    """Parse *raw* into an element tree.

    Text input is always read as UTF-8, ignoring any encoding declared in the
    XML prolog, since it has already been decoded by the caller.
    """

    if isinstance(raw, str):
        data = raw.encode("utf-8")
        parser = _build_parser("utf-8")
    elif isinstance(raw, (bytes, bytearray)):
        data = bytes(raw)
        parser = _build_parser()
    else:
        raise TypeError(f"Expected bytes or str, got {type(raw).__name__}")

    if not data.strip():
        raise XMLParseError("Document is empty")

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise XMLParseError(
            f"Malformed XML: {exc.msg}", line=getattr(exc, "lineno", None)
        ) from exc

    return root.getroottree()


def parse_envelope(raw: RawDocument) -> Envelope:
    """Parse *raw* and unwrap the embedded voucher when it is an envelope."""

    tree = parse_xml(raw)
    root = tree.getroot()

    if localname(root) == ENVELOPE_TAG:
        return _unwrap_envelope(root)

    return Envelope(document=tree)


def unwrap(raw: RawDocument) -> etree._ElementTree:
    """Return the voucher document contained in *raw*."""

    return parse_envelope(raw).document


def _unwrap_envelope(root: etree._Element) -> Envelope:
    payload = _find_payload(root)
    if payload is None:
        raise EmbeddedPayloadMissing(
            f"<{ENVELOPE_TAG}> envelope has no <{PAYLOAD_TAG}> element"
        )

    text = (payload.text or "").strip()
    if not text:
        raise EmbeddedPayloadMissing(
            f"<{PAYLOAD_TAG}> element inside the envelope is empty"
        )

    authorization = Authorization(
        status=find_child_text(root, "estado") or None,
        number=find_child_text(root, "numeroAutorizacion") or None,
        authorized_at=find_child_text(root, "fechaAutorizacion") or None,
        environment=find_child_text(root, "ambiente") or None,
    )
    logger.debug(
        "Unwrapping envelope (estado=%s, numeroAutorizacion=%s)",
        authorization.status,
        authorization.number,
    )

    try:
        document = parse_xml(text)
    except XMLParseError as exc:
        raise XMLParseError(
            f"Embedded voucher is not well-formed: {exc}", line=exc.line
        ) from exc

    return Envelope(document=document, authorization=authorization)


def _find_payload(root: etree._Element) -> etree._Element | None:
    for element in root.iter():
        if localname(element) == PAYLOAD_TAG:
            return element
    return None


__all__ = [
    "ENVELOPE_TAG",
    "PAYLOAD_TAG",
    "Authorization",
    "Envelope",
    "parse_xml",
    "parse_envelope",
    "unwrap",
]
