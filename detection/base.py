"""
Base class for line detectors.

A detector looks at a single line of report output and answers one
question: does this line mark something I recognise?  It returns the
recognised value, or ``None`` if the line does not match.

Detectors are pure: the same line always yields the same answer, and
no detector keeps state between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Detector(ABC):
    """Interface that every line detector must implement."""

    @abstractmethod
    def detect(self, line: str) -> Optional[str]:
        """
        Pure heuristic detection.

        Returns the recognised value if the line matches this detector's
        vocabulary, or ``None`` if it does not.
        """
        ...
