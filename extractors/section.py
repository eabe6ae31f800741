"""
Builds a ``Section`` from one line group.

Layout of a group (everything after the title line):
  - zero or more blank lines
  - the header line (first non-blank line)
  - data lines, one row each; blank lines in between are ignored

Data lines are split on runs of whitespace.  Values that legitimately
contain spaces (e.g. a "PID/Program name" such as ``1234/sshd: alice``)
come out as several tokens; no attempt is made to join them back, the
table normalizer absorbs the extra fields instead.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from detection.header import HeaderResolver
from dto.section import Section

logger = logging.getLogger(__name__)


def tokenize(line: str) -> List[str]:
    """Split *line* on runs of whitespace."""
    return line.split()


class SectionBuilder:
    """
    Turns a ``(title, lines)`` group into a ``Section``.

    Usage::

        builder = SectionBuilder()
        section = builder.build(title, lines)   # None if nothing usable
    """

    def __init__(self, header_resolver: Optional[HeaderResolver] = None) -> None:
        self._header_resolver = header_resolver or HeaderResolver()

    def build(self, title: str, lines: Sequence[str]) -> Optional[Section]:
        # Skip leading blank lines
        start = 0
        while start < len(lines) and not lines[start].strip():
            start += 1

        if start >= len(lines):
            logger.debug("Section %r has no content, skipping", title)
            return None

        headers = self._header_resolver.resolve(lines[start].strip())

        rows: List[List[str]] = []
        for line in lines[start + 1:]:
            fields = tokenize(line)
            if fields:
                rows.append(fields)

        if not headers and not rows:
            return None

        return Section(title=title, headers=headers, rows=rows)
