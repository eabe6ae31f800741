"""
Line-level detectors for netstat output.

  1. SectionTitleDetector: lines that open a new section
  2. HeaderResolver:       a section's header line → column names

Both take their vocabulary at construction time; the defaults live in
``detection.constants``.
"""

from detection.base import Detector
from detection.header import HeaderResolver, header_signature
from detection.title import SectionTitleDetector, match_section_title

__all__ = [
    "Detector",
    "HeaderResolver",
    "SectionTitleDetector",
    "header_signature",
    "match_section_title",
]
