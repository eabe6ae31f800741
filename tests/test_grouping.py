"""Tests for grouping a line stream into section line groups."""

from grouping import group_lines_into_sections
from detection.title import SectionTitleDetector

INET = "Active Internet connections (w/o servers)"
UNIX = "Active UNIX domain sockets (w/o servers)"


class TestGroupLinesIntoSections:
    """Test suite for group_lines_into_sections."""

    def test_single_section(self) -> None:
        lines = [INET, "Proto Recv-Q", "tcp 0"]
        assert list(group_lines_into_sections(lines)) == [
            (INET, ["Proto Recv-Q", "tcp 0"]),
        ]

    def test_sections_in_order(self) -> None:
        """Each title flushes the previous group."""
        lines = [INET, "a", "b", UNIX, "c"]
        assert list(group_lines_into_sections(lines)) == [
            (INET, ["a", "b"]),
            (UNIX, ["c"]),
        ]

    def test_lines_before_first_title_are_dropped(self) -> None:
        lines = ["(Not all processes could be identified)", "noise", INET, "a"]
        assert list(group_lines_into_sections(lines)) == [(INET, ["a"])]

    def test_consecutive_titles(self) -> None:
        """The first of two adjacent titles produces no group."""
        lines = [INET, UNIX, "c"]
        assert list(group_lines_into_sections(lines)) == [(UNIX, ["c"])]

    def test_trailing_title_without_content(self) -> None:
        lines = [INET, "a", UNIX]
        assert list(group_lines_into_sections(lines)) == [(INET, ["a"])]

    def test_blank_lines_are_kept_verbatim(self) -> None:
        """Blank lines count as content here; the builder discards them."""
        lines = [INET, "", "   "]
        assert list(group_lines_into_sections(lines)) == [(INET, ["", "   "])]

    def test_empty_input(self) -> None:
        assert list(group_lines_into_sections([])) == []

    def test_no_titles(self) -> None:
        assert list(group_lines_into_sections(["tcp 0 0", "udp 0 0"])) == []

    def test_mid_sentence_title_splits(self) -> None:
        """A data line quoting a title still opens a new section."""
        quoted = "x see Interface statistics"
        lines = [INET, "a", quoted, "b"]
        assert list(group_lines_into_sections(lines)) == [
            (INET, ["a"]),
            (quoted, ["b"]),
        ]

    def test_custom_detector(self) -> None:
        detector = SectionTitleDetector(known_titles=["== "])
        lines = ["== one", "1", "== two", "2"]
        assert list(group_lines_into_sections(lines, detector)) == [
            ("== one", ["1"]),
            ("== two", ["2"]),
        ]

    def test_lazy_single_pass(self) -> None:
        """Groups are produced before the input is exhausted."""
        consumed = []

        def source():
            for line in [INET, "a", UNIX, "b", "c"]:
                consumed.append(line)
                yield line

        groups = group_lines_into_sections(source())
        assert next(groups) == (INET, ["a"])
        assert consumed == [INET, "a", UNIX]
