"""Lookup of the XSL stylesheets that normalise each voucher type."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import TransformResourceNotFound

_XSL_ENV_VAR = "FACTURAEC_XSL_PATH"
_DEFAULT_XSL_PATH = Path(__file__).resolve().parent / "xsl"

EXTENSION = ".xsl"


@dataclass(frozen=True)
class TransformResource:
    """Stylesheet source for a voucher type.

    ``location`` is used as the base URL when compiling, so stylesheets can
    ``xsl:include`` their siblings.
    """

    label: str
    content: bytes
    location: str


class ResourceResolver(Protocol):
    """Anything able to map a voucher type label to a stylesheet."""

    def resolve(self, label: str) -> TransformResource:
        """Return the stylesheet for *label* or raise ``TransformResourceNotFound``."""


class DirectoryResolver:
    """Resolve ``<label-lowercase>.xsl`` files from a base directory."""

    def __init__(self, base_path: Path | str) -> None:
        self.base_path = Path(base_path)

    def path_for(self, label: str) -> Path:
        return self.base_path / f"{label.lower()}{EXTENSION}"

    def resolve(self, label: str) -> TransformResource:
        path = self.path_for(label)
        if not label or Path(label).name != label or not path.is_file():
            raise TransformResourceNotFound(label, str(path))

        return TransformResource(
            label=label,
            content=path.read_bytes(),
            location=str(path.resolve()),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.base_path)!r})"


def resolve_base_path() -> Path:
    """Return the stylesheet directory, honouring ``FACTURAEC_XSL_PATH``."""

    candidate = os.getenv(_XSL_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()
    return _DEFAULT_XSL_PATH


def default_resolver() -> DirectoryResolver:
    return DirectoryResolver(resolve_base_path())


__all__ = [
    "EXTENSION",
    "TransformResource",
    "ResourceResolver",
    "DirectoryResolver",
    "resolve_base_path",
    "default_resolver",
]
