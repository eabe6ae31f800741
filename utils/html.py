"""
Utility to render normalized tables into HTML ``<table>`` strings.
"""

from __future__ import annotations

from typing import Iterable, List

from dto.table_data import TableData


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def render_table_html(table: TableData) -> str:
    """
    Render one ``TableData`` into an HTML ``<table>`` string, with the
    section title as its caption.
    """
    parts: List[str] = ['<table border="1" cellpadding="5" cellspacing="0">']
    parts.append(f"  <caption>{_escape_html(table.title)}</caption>")

    # <thead>
    if table.columns:
        parts.append("  <thead>")
        parts.append("    <tr>")
        for column in table.columns:
            parts.append(f"      <th>{_escape_html(column.title)}</th>")
        parts.append("    </tr>")
        parts.append("  </thead>")

    # <tbody>
    if table.rows:
        parts.append("  <tbody>")
        for row in table.rows:
            parts.append("    <tr>")
            for value in row:
                parts.append(f"      <td>{_escape_html(value)}</td>")
            parts.append("    </tr>")
        parts.append("  </tbody>")

    parts.append("</table>")
    return "\n".join(parts)


def render_report_html(tables: Iterable[TableData], title: str = "netstat") -> str:
    """Wrap every table into a standalone HTML document."""
    parts: List[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{_escape_html(title)}</title>",
        "</head>",
        "<body>",
    ]
    for table in tables:
        parts.append(render_table_html(table))
    parts.append("</body>")
    parts.append("</html>")
    return "\n".join(parts)
