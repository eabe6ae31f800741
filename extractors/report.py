"""
ReportExtractor: the per-report orchestrator.

Responsibilities:
  1. Group the incoming line stream into ``(title, lines)`` groups using
     the section title detector.
  2. Build a ``Section`` from each group (header resolution + row
     tokenization).
  3. Yield the sections lazily, in input order, dropping groups that
     carry no usable content.

Nothing here raises on odd input: unknown titles are skipped, unknown
headers fall back to whitespace splitting, and an input without any
recognised section simply yields nothing.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from detection.base import Detector
from detection.title import SectionTitleDetector
from dto.section import Section
from extractors.section import SectionBuilder
from grouping import group_lines_into_sections

logger = logging.getLogger(__name__)


class ReportExtractor:
    """
    Extracts all sections from a netstat line stream.

    Usage::

        extractor = ReportExtractor()
        for section in extractor.extract(lines):
            ...
    """

    def __init__(
        self,
        title_detector: Optional[Detector] = None,
        section_builder: Optional[SectionBuilder] = None,
    ) -> None:
        self._title_detector = title_detector or SectionTitleDetector()
        self._section_builder = section_builder or SectionBuilder()

    def extract(self, lines: Iterable[str]) -> Iterator[Section]:
        """Yield every non-empty section found in *lines*."""
        for title, group in group_lines_into_sections(lines, self._title_detector):
            section = self._section_builder.build(title, group)
            if section is None:
                logger.debug("Discarding empty section %r", title)
                continue

            logger.info(
                "  -> %r: %d column(s), %d row(s)",
                section.title,
                section.num_columns,
                len(section.rows),
            )
            if section.is_ragged:
                logger.debug(
                    "Section %r has rows that do not match its %d header(s)",
                    section.title,
                    section.num_columns,
                )
            yield section

    def extract_all(self, lines: Iterable[str]) -> List[Section]:
        return list(self.extract(lines))
