"""
Line grouping: walks a netstat line stream and collects the lines that
follow each section title into one group.

A group is a ``(title_line, lines)`` pair, e.g.

    ("Active Internet connections (servers and established)",
     ["Proto Recv-Q Send-Q Local Address ...", "tcp  0  0 ...", ...])

The stream is consumed in a single pass and groups are yielded as soon
as the next title (or the end of input) closes them.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from detection.base import Detector
from detection.title import SectionTitleDetector

LineGroup = Tuple[str, List[str]]


def group_lines_into_sections(
    lines: Iterable[str],
    detector: Optional[Detector] = None,
) -> Iterator[LineGroup]:
    """
    Yield one ``(title_line, lines)`` group per detected section, in
    input order.

    Lines seen before the first title are dropped.  A title followed
    directly by another title produces no group.  Lines are kept
    verbatim (blank lines included); the section builder decides what
    is content.
    """
    if detector is None:
        detector = SectionTitleDetector()

    current_title: Optional[str] = None
    buffer: List[str] = []

    for line in lines:
        title = detector.detect(line)

        if title is not None:
            if current_title is not None and buffer:
                yield current_title, buffer
            current_title = title
            buffer = []
        elif current_title is not None:
            buffer.append(line)

    # Last section has no closing title
    if current_title is not None and buffer:
        yield current_title, buffer
