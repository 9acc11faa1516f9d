"""Exceptions raised while adapting SRI vouchers."""

from __future__ import annotations


class FacturaECError(RuntimeError):
    """Base class for every error raised by :mod:`facturaec`."""


class XMLParseError(FacturaECError, ValueError):
    """Raised when the raw input (or an embedded payload) is not well-formed XML."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class EmbeddedPayloadMissing(FacturaECError):
    """Raised when an ``autorizacion`` envelope carries no ``comprobante`` text."""


class TransformResourceNotFound(FacturaECError, FileNotFoundError):
    """Raised when no stylesheet exists for a voucher type label.

    This is also how unknown or undetected voucher types are rejected: the
    empty label never resolves to a resource.
    """

    def __init__(self, label: str, location: str | None = None) -> None:
        target = location or f"{label!r}"
        super().__init__(f"XSL file not found for voucher type {label!r}: {target}")
        self.label = label
        self.location = location


class TransformCompileError(FacturaECError):
    """Raised when a stylesheet exists but cannot be compiled."""

    def __init__(self, message: str, *, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location


class TransformExecutionError(FacturaECError):
    """Raised when a compiled stylesheet fails against the given document."""

    def __init__(self, message: str, *, label: str = "", log: str = "") -> None:
        super().__init__(message)
        self.label = label
        self.log = log


class VoucherReadError(FacturaECError):
    """Raised when canonical XML cannot be mapped onto a voucher record."""


__all__ = [
    "FacturaECError",
    "XMLParseError",
    "EmbeddedPayloadMissing",
    "TransformResourceNotFound",
    "TransformCompileError",
    "TransformExecutionError",
    "VoucherReadError",
]
