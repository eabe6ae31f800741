"""
Section DTO: one titled block of netstat output.

A section is built once from its accumulated line group and never
mutated afterwards.  Rows are *ragged*: each row is whatever whitespace
tokenization produced, so its length may differ from ``len(headers)``
until the table normalizer forces it into shape.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class Section(BaseModel):
    """A titled block with resolved headers and raw tokenized rows."""

    # Exact text of the line that opened the section (not cleaned up)
    title: str

    # Ordered column names; position i names field i of every row
    headers: List[str] = []

    # One list of fields per data line
    rows: List[List[str]] = []

    model_config = {"frozen": True}

    @property
    def num_columns(self) -> int:
        return len(self.headers)

    @property
    def is_ragged(self) -> bool:
        """True if any row's field count differs from the header count."""
        return any(len(row) != self.num_columns for row in self.rows)
