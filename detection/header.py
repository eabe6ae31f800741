"""
Resolver for section header lines.

netstat pads its header columns with spaces, and several column names
contain spaces themselves ("Local Address", "PID/Program name").  Plain
whitespace splitting therefore cannot tell where one column ends and the
next begins.

Resolution strategy:
  1. Collapse the header line into a whitespace-free signature by
     concatenating its tokens.
  2. Look the signature up (exact match) in a table of known layouts and
     return the canonical column names.
  3. Otherwise fall back to whitespace tokenization; every token becomes
     its own column, which may over-split multi-word headers.

The fallback never fails, so any non-empty header line resolves to a
non-empty column list.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from detection.constants import DEFAULT_HEADER_MAPPINGS

logger = logging.getLogger(__name__)


def header_signature(header_line: str) -> str:
    """Concatenate the whitespace-delimited tokens of *header_line*."""
    return "".join(header_line.split())


class HeaderResolver:

    def __init__(
        self,
        header_mappings: Mapping[str, Sequence[str]] = DEFAULT_HEADER_MAPPINGS,
    ) -> None:
        self._header_mappings = header_mappings

    def resolve(self, header_line: str) -> List[str]:
        """Return the ordered column names for *header_line*."""
        key = header_signature(header_line)

        canonical = self._header_mappings.get(key)
        if canonical is not None:
            return list(canonical)

        logger.debug(
            "No known layout for header %r, splitting on whitespace",
            header_line,
        )
        return header_line.split()
