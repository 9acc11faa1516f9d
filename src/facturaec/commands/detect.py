"""Print the voucher type detected for each input file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ..adapter import Adapter
from ..errors import FacturaECError
from ._common import configure_logging

logger = logging.getLogger("facturaec.detect")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="facturaec detect",
        description="Muestra el tipo de comprobante (codDoc) de cada archivo XML.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Archivos XML del SRI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Registro detallado")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    failures = 0
    for path in args.files:
        try:
            adapter = Adapter.from_xml(path.read_bytes())
        except (OSError, FacturaECError) as exc:
            logger.error("%s: %s", path, exc)
            failures += 1
            continue
        signed = "firmado" if adapter.is_signed else "-"
        print(f"{path}\t{adapter.get_voucher_type() or '-'}\t{signed}")

    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
