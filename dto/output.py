"""
Top-level output DTOs for the final JSON document model.

    ReportResult
      └─ sections: List[SectionResult]
           ├─ section: Section     (title, resolved headers, ragged rows)
           └─ table:   TableData   (column widths, rectangular rows)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from dto.section import Section
from dto.table_data import TableData


class SectionResult(BaseModel):
    """Structured output for a single netstat section."""

    section: Section
    table: TableData


class ReportResult(BaseModel):
    """Top-level output for one netstat run or captured report."""

    source: str
    sections: List[SectionResult] = []
