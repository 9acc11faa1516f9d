"""Normalisation of SRI (Ecuador) electronic vouchers.

Typical use::

    from facturaec import Adapter

    adapter = Adapter.from_xml(raw_bytes)
    adapter.get_voucher_type()   # "invoice", "creditNote", ... or ""
    canonical_xml = adapter.transform()
    invoice = adapter.read()
"""

from .adapter import Adapter, parse_and_classify
from .errors import (
    EmbeddedPayloadMissing,
    FacturaECError,
    TransformCompileError,
    TransformExecutionError,
    TransformResourceNotFound,
    VoucherReadError,
    XMLParseError,
)

__version__ = "0.1.0"

__all__ = [
    "Adapter",
    "parse_and_classify",
    "FacturaECError",
    "XMLParseError",
    "EmbeddedPayloadMissing",
    "TransformResourceNotFound",
    "TransformCompileError",
    "TransformExecutionError",
    "VoucherReadError",
    "adapter",
    "classifier",
    "cli",
    "commands",
    "envelope",
    "logging",
    "models",
    "reader",
    "resources",
    "transform",
    "utils",
    "vouchers",
]
