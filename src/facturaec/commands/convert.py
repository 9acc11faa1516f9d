"""Convert SRI vouchers into canonical facturaec XML files.

Each input ``NAME.xml`` is written as ``NAME.<tipo>.xml`` in the output
directory (by default next to the input).  Failures are logged and the
remaining files are still processed; with ``--report`` the outcome of every
file is also saved to an Excel workbook.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ..adapter import Adapter
from ..errors import FacturaECError, TransformResourceNotFound
from ..logging import CONVERSION_COLUMNS, ConversionRecord, ExcelLogger, ExcelLoggerConfig
from ..resources import DirectoryResolver, default_resolver
from ._common import configure_logging

logger = logging.getLogger("facturaec.convert")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="facturaec convert",
        description="Convierte comprobantes SRI al formato canónico.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Archivos XML del SRI")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Carpeta de destino (por omisión, la del archivo de entrada)",
    )
    parser.add_argument(
        "--xsl-dir",
        type=Path,
        default=None,
        help="Carpeta alternativa con las hojas XSL por tipo de comprobante",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Guarda un registro Excel (.xlsx) con el resultado de cada archivo",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Registro detallado")
    return parser


def output_path_for(source: Path, voucher_type: str, output_dir: Path | None) -> Path:
    directory = output_dir if output_dir is not None else source.parent
    return directory / f"{source.stem}.{voucher_type}.xml"


def convert_file(
    source: Path, resolver, output_dir: Path | None = None
) -> ConversionRecord:
    """Convert *source* and return the record describing the outcome."""

    record = ConversionRecord(source=str(source))
    try:
        adapter = Adapter.from_xml(source.read_bytes(), resolver)
        record.voucher_type = adapter.get_voucher_type()
        record.signed = adapter.is_signed
        canonical = adapter.transform()
    except TransformResourceNotFound as exc:
        record.status = "NO_SOPORTADO"
        record.message = str(exc)
        logger.warning("%s: tipo de comprobante no soportado (%s)", source, exc)
        return record
    except (OSError, FacturaECError) as exc:
        record.status = "ERROR"
        record.message = str(exc)
        logger.error("%s: %s", source, exc)
        return record

    destination = output_path_for(source, record.voucher_type, output_dir)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(canonical, encoding="utf-8")
    except OSError as exc:
        record.status = "ERROR"
        record.message = f"No se pudo escribir {destination}: {exc}"
        logger.error("%s: %s", source, record.message)
        return record

    record.output = str(destination)
    logger.info("%s -> %s", source, destination)
    return record


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    resolver = DirectoryResolver(args.xsl_dir) if args.xsl_dir else default_resolver()
    records = [convert_file(path, resolver, args.output_dir) for path in args.files]

    if args.report is not None:
        excel = ExcelLogger(
            ExcelLoggerConfig(
                columns=CONVERSION_COLUMNS,
                filename=str(args.report),
                sheet_title="Conversiones",
            )
        )
        destination = excel.write_rows(records)
        logger.info("Registro guardado en: %s", destination)

    failed = sum(1 for record in records if record.status != "OK")
    logger.info("%d archivo(s) convertidos, %d con errores", len(records) - failed, failed)
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
