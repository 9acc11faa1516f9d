"""Adapt SRI voucher XML into the canonical facturaec shape."""

from __future__ import annotations

import logging

from lxml import etree

from .classifier import classify
from .envelope import Authorization, RawDocument, parse_envelope
from .models import Voucher
from .reader import read_voucher
from .resources import ResourceResolver, default_resolver
from .transform import apply

logger = logging.getLogger(__name__)


class Adapter:
    """One conversion run over a single raw document.

    Build instances with :meth:`from_xml`; parsing, unwrapping and
    classification all happen there, so an ``Adapter`` always holds a parsed
    document and its (possibly empty) voucher type.
    """

    def __init__(
        self,
        raw: RawDocument,
        document: etree._ElementTree,
        voucher_type: str,
        *,
        authorization: Authorization | None = None,
        resolver: ResourceResolver | None = None,
    ) -> None:
        self.raw = raw
        self.document = document
        self.voucher_type = voucher_type
        self.authorization = authorization
        self.resolver = resolver if resolver is not None else default_resolver()

    @classmethod
    def from_xml(
        cls, raw: RawDocument, resolver: ResourceResolver | None = None
    ) -> "Adapter":
        """Parse, unwrap and classify *raw*.

        Raises ``XMLParseError`` or ``EmbeddedPayloadMissing``; an
        unrecognised voucher type is not an error at this stage.
        """

        envelope = parse_envelope(raw)
        voucher_type = classify(envelope.document)
        if voucher_type:
            logger.debug("Detected voucher type %s", voucher_type)
        else:
            logger.info("No supported voucher type detected")
        return cls(
            raw,
            envelope.document,
            voucher_type,
            authorization=envelope.authorization,
            resolver=resolver,
        )

    @property
    def is_signed(self) -> bool:
        """``True`` when the input was an ``autorizacion`` envelope."""

        return self.authorization is not None

    def get_voucher_type(self) -> str:
        return self.voucher_type

    def transform(self) -> str:
        """Return the canonical XML for this voucher.

        Raises ``TransformResourceNotFound`` for undetected voucher types and
        ``TransformCompileError``/``TransformExecutionError`` when the
        stylesheet is broken or does not fit the document.
        """

        return apply(self.document, self.voucher_type, self.resolver)

    def read(self) -> Voucher:
        """Transform the document and map it onto its voucher record."""

        return read_voucher(self.transform(), self.voucher_type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(voucher_type={self.voucher_type!r}, "
            f"signed={self.is_signed})"
        )


def parse_and_classify(
    raw: RawDocument, resolver: ResourceResolver | None = None
) -> Adapter:
    """Shortcut for :meth:`Adapter.from_xml`."""

    return Adapter.from_xml(raw, resolver)


__all__ = ["Adapter", "parse_and_classify"]
