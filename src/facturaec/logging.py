"""Tabular conversion logs written to Excel.

Library modules log through the standard :mod:`logging` package; this module
only covers the per-file run log that ``facturaec convert --report`` saves
next to the converted vouchers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol, Sequence


class RowLike(Protocol):
    """Protocol for rows serialisable in tabular form."""

    def as_cells(self) -> Iterable[object]:
        """Return the ordered values to write in the sheet."""


@dataclass(slots=True)
class ConversionRecord:
    """Outcome of converting one input file."""

    source: str
    voucher_type: str = ""
    signed: bool = False
    status: str = "OK"
    message: str = ""
    output: str = ""

    def as_cells(self) -> list[object]:
        return [
            self.source,
            self.voucher_type or "-",
            "SI" if self.signed else "NO",
            self.status,
            self.message,
            self.output,
        ]


CONVERSION_COLUMNS: tuple[str, ...] = (
    "archivo",
    "tipo",
    "firmado",
    "estado",
    "mensaje",
    "salida",
)


@dataclass(slots=True)
class ExcelLoggerConfig:
    """Configuration used by :class:`ExcelLogger`."""

    columns: Sequence[str]
    filename: str = "facturaec-report.xlsx"
    sheet_title: str = "Log"


MAX_COLUMN_WIDTH = 80


def _cells(row: RowLike | Iterable[object]) -> list[object]:
    as_cells = getattr(row, "as_cells", None)
    return list(as_cells() if as_cells is not None else row)  # type: ignore[arg-type]


class ExcelLogger:
    """Save conversion outcomes as a single-sheet workbook.

    The header row is bold and frozen; columns are sized to their longest
    value, capped at :data:`MAX_COLUMN_WIDTH`.  Every call overwrites
    ``config.filename``.
    """

    def __init__(self, config: ExcelLoggerConfig) -> None:
        self.config = config

    def write_rows(self, rows: Iterable[RowLike | Iterable[object]]) -> Path:
        from openpyxl import Workbook
        from openpyxl.styles import Font
        from openpyxl.utils import get_column_letter

        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self.config.sheet_title

        header = list(self.config.columns)
        if header:
            sheet.append(header)
            for cell in sheet[1]:
                cell.font = Font(bold=True)
            sheet.freeze_panes = "A2"

        widths = [len(str(name)) for name in header]
        for row in rows:
            cells = _cells(row)
            sheet.append(cells)
            for index, value in enumerate(cells):
                length = len(str(value)) if value is not None else 0
                if index < len(widths):
                    widths[index] = max(widths[index], length)
                else:
                    widths.append(length)

        for index, width in enumerate(widths, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = min(
                width + 2, MAX_COLUMN_WIDTH
            )

        destination = Path(self.config.filename)
        destination.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(destination)
        return destination


__all__ = [
    "RowLike",
    "ConversionRecord",
    "CONVERSION_COLUMNS",
    "ExcelLoggerConfig",
    "ExcelLogger",
    "MAX_COLUMN_WIDTH",
]
