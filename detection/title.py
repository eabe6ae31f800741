"""
Detector for section-title lines.

Heuristic rule:
  - A line is a section title if it contains any of the known title
    substrings (e.g. "Active Internet connections").
  - Matching is plain substring containment, not anchored to the start
    of the line, so a data line quoting a title mid-sentence is still
    treated as a section boundary.
  - The known titles are tried in order; the first one contained in the
    line wins.

The detected title is the line itself, untouched, so that variants such
as "Active Internet connections (w/o servers)" keep their qualifier.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from detection.base import Detector
from detection.constants import DEFAULT_SECTION_TITLES

logger = logging.getLogger(__name__)


def match_section_title(line: str, known_titles: Iterable[str]) -> Optional[str]:
    """Return the first entry of *known_titles* contained in *line*, or ``None``."""
    for title in known_titles:
        if title in line:
            return title
    return None


class SectionTitleDetector(Detector):

    def __init__(self, known_titles: Sequence[str] = DEFAULT_SECTION_TITLES) -> None:
        self._known_titles = tuple(known_titles)

    def match(self, line: str) -> Optional[str]:
        """Return the vocabulary entry that *line* matched, if any."""
        return match_section_title(line, self._known_titles)

    def detect(self, line: str) -> Optional[str]:
        matched = self.match(line)
        if matched is None:
            return None

        logger.debug("Section title %r matched %r", line, matched)
        return line
