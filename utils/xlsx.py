"""
Workbook export: writes every normalized table to its own worksheet.

Sheet layout:
  row 1   full section title (bold)
  row 2   column headers (bold, filled)
  row 3+  data rows

Column widths follow the table layout.  Worksheet titles are derived
from the section title and made safe for Excel (at most 31 characters,
none of ``[]:*?/\\``, unique within the workbook).
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Set

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from dto.table_data import TableData

logger = logging.getLogger(__name__)

_MAX_SHEET_TITLE = 31
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")

_TITLE_FONT = Font(bold=True, size=12)
_HEADER_FONT = Font(bold=True, color="FFFFFFFF")
_HEADER_FILL = PatternFill(
    start_color="FF7D56F4",
    end_color="FF7D56F4",
    fill_type="solid",
)


def sheet_title_for(title: str, taken: Set[str]) -> str:
    """Return an Excel-safe worksheet title for *title* not already in *taken*."""
    base = _INVALID_SHEET_CHARS.sub("", title).strip().strip("'")
    base = " ".join(base.split()) or "Section"
    base = base[:_MAX_SHEET_TITLE]

    candidate = base
    n = 2
    # Excel compares sheet titles case-insensitively
    while candidate.lower() in {t.lower() for t in taken}:
        suffix = f" ({n})"
        candidate = base[: _MAX_SHEET_TITLE - len(suffix)] + suffix
        n += 1

    taken.add(candidate)
    return candidate


def write_workbook(tables: Iterable[TableData], output_path: str) -> int:
    """
    Write *tables* to a new workbook at *output_path*.

    Returns the number of worksheets written.
    """
    wb = openpyxl.Workbook()
    default_sheet = wb.active
    taken: Set[str] = set()
    count = 0

    for table in tables:
        ws = wb.create_sheet(title=sheet_title_for(table.title, taken))

        title_cell = ws.cell(row=1, column=1, value=table.title)
        title_cell.font = _TITLE_FONT

        for col_idx, column in enumerate(table.columns, start=1):
            cell = ws.cell(row=2, column=col_idx, value=column.title)
            cell.font = _HEADER_FONT
            cell.fill = _HEADER_FILL
            ws.column_dimensions[get_column_letter(col_idx)].width = column.width

        for row_idx, row in enumerate(table.rows, start=3):
            for col_idx, value in enumerate(row, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                if value.startswith("="):
                    cell.data_type = "s"

        ws.freeze_panes = "A3"
        count += 1

    # Remove the default empty sheet created by openpyxl
    if count:
        wb.remove(default_sheet)

    wb.save(output_path)
    wb.close()
    logger.info("Workbook with %d sheet(s) saved to: %s", count, output_path)
    return count
