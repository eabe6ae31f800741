"""
Terminal rendering of normalized tables with ``rich``.

Each section is printed as its own table, the section title above it.
Column widths come from the table layout; values wider than their
column are cut with an ellipsis at display time only.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from dto.table_data import TableData

HIGHLIGHT_COLOR = "#7D56F4"


def build_rich_table(table: TableData) -> RichTable:
    # Cell text is wrapped in Text so that values like "[::]:22" are not
    # read as console markup.
    tbl = RichTable(
        title=Text(table.title),
        title_style=f"bold {HIGHLIGHT_COLOR}",
        title_justify="left",
        show_header=True,
        header_style="bold",
        border_style=HIGHLIGHT_COLOR,
    )
    for column in table.columns:
        tbl.add_column(
            Text(column.title),
            width=column.width,
            overflow="ellipsis",
            no_wrap=True,
        )
    for row in table.rows:
        tbl.add_row(*(Text(value) for value in row))
    return tbl


def render_tables(
    tables: Iterable[TableData],
    console: Optional[Console] = None,
) -> int:
    """Print every table to *console* (stdout by default); return the count."""
    console = console or Console()
    count = 0
    for table in tables:
        if count:
            console.print()
        console.print(build_rich_table(table))
        count += 1
    return count
