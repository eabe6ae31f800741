from pydantic import BaseModel
from typing import List


class Column(BaseModel):
    title: str
    width: int


class TableData(BaseModel):
    """Normalized representation of a single section, ready for display."""
    title: str
    columns: List[Column] = []
    rows: List[List[str]] = []

    @property
    def headers(self) -> List[str]:
        return [c.title for c in self.columns]

    @property
    def widths(self) -> List[int]:
        return [c.width for c in self.columns]
