"""
Normalizes a ``Section`` into a rectangular ``TableData``.

Two concerns:
  1. Column widths: for every header, the widest of the header text and
     the cells below it, plus padding, capped at ``MAX_COLUMN_WIDTH``.
     The cap only limits the reported width; cell values are never cut.
  2. Row shape: every row is forced to exactly ``len(headers)`` fields.
     Short rows are padded with empty strings; fields past the last
     column are dropped.

Dropping overflow is lossy.  A row whose value contained a space (and so
was split into an extra token) keeps its first ``len(headers)`` tokens
and loses the rest.
"""

from __future__ import annotations

from typing import List, Sequence

from dto.section import Section
from dto.table_data import Column, TableData

# Added to every measured width so adjacent columns do not touch.
COLUMN_PADDING = 2

# Upper bound for a reported column width.
MAX_COLUMN_WIDTH = 50


def compute_column_widths(
    section: Section,
    padding: int = COLUMN_PADDING,
    max_width: int = MAX_COLUMN_WIDTH,
) -> List[int]:
    """Return one display width per header of *section*."""
    widths = [len(header) + padding for header in section.headers]

    for row in section.rows:
        # Cells past the last header have no column to widen
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(cell) + padding)

    return [min(width, max_width) for width in widths]


def normalize_row(row: Sequence[str], num_columns: int) -> List[str]:
    """
    Return a copy of *row* with exactly *num_columns* fields.

    Missing trailing fields become ``""``; extra fields are dropped.  A
    row that already has *num_columns* fields comes back unchanged.
    """
    out = list(row[:num_columns])
    out.extend([""] * (num_columns - len(out)))
    return out


class TableNormalizer:

    def __init__(
        self,
        padding: int = COLUMN_PADDING,
        max_width: int = MAX_COLUMN_WIDTH,
    ) -> None:
        self.padding = padding
        self.max_width = max_width

    def normalize(self, section: Section) -> TableData:
        widths = compute_column_widths(
            section, padding=self.padding, max_width=self.max_width
        )
        columns = [
            Column(title=header, width=width)
            for header, width in zip(section.headers, widths)
        ]
        rows = [normalize_row(row, section.num_columns) for row in section.rows]

        return TableData(title=section.title, columns=columns, rows=rows)
