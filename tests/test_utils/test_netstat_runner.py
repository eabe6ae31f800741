"""Tests for the netstat line sources."""

import io
import logging
import os
import shutil
import sys

import pytest

from extractors.report import ReportExtractor
from utils.netstat import find_netstat, iter_lines, stream_netstat

needs_printf = pytest.mark.skipif(
    shutil.which("printf") is None, reason="printf binary not available"
)

needs_posix = pytest.mark.skipif(os.name != "posix", reason="needs shebang scripts")

SOCKETS_REPORT = (
    b"Active UNIX domain sockets (w/o servers)\n"
    b"Proto RefCnt Flags Type State I-Node Path\n"
    b"unix 2 [ ] STREAM CONNECTED 4711 /tmp/\xff\xfesock\n"
)


@pytest.fixture
def fake_netstat(tmp_path):
    """Write an executable Python script that stands in for netstat."""

    def _make(body: str) -> str:
        script = tmp_path / "netstat"
        script.write_text(f"#!{sys.executable}\nimport sys\n{body}\n", encoding="utf-8")
        script.chmod(0o755)
        return str(script)

    return _make


class TestIterLines:

    def test_strips_line_endings(self) -> None:
        stream = io.StringIO("a\r\nb\n\nc")
        assert list(iter_lines(stream)) == ["a", "b", "", "c"]

    def test_keeps_other_whitespace(self) -> None:
        assert list(iter_lines(["  a  \n"])) == ["  a  "]


class TestFindNetstat:

    def test_missing_binary(self, monkeypatch) -> None:
        monkeypatch.setattr(shutil, "which", lambda name: None)
        with pytest.raises(FileNotFoundError, match="netstat not found"):
            find_netstat("netstat")

    def test_found(self, monkeypatch) -> None:
        monkeypatch.setattr(shutil, "which", lambda name: f"/usr/bin/{name}")
        assert find_netstat("netstat") == "/usr/bin/netstat"


class TestStreamNetstat:

    def test_missing_binary_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            with stream_netstat([], binary="definitely-not-a-real-netstat"):
                pass

    @needs_printf
    def test_streams_lines(self) -> None:
        with stream_netstat(["Active Internet connections\\nProto\\n"], binary="printf") as lines:
            assert list(lines) == ["Active Internet connections", "Proto"]

    @needs_printf
    def test_stop_reading_early(self) -> None:
        with stream_netstat(["a\\nb\\nc\\n"], binary="printf") as lines:
            assert next(lines) == "a"

    @needs_printf
    def test_nonzero_exit_is_logged(self, caplog) -> None:
        # printf with no arguments exits non-zero
        with caplog.at_level(logging.WARNING, logger="utils.netstat"):
            with stream_netstat([], binary="printf") as lines:
                assert list(lines) == []

        assert any("exited with status" in r.getMessage() for r in caplog.records)

    @needs_posix
    def test_undecodable_bytes_are_replaced(self, fake_netstat) -> None:
        binary = fake_netstat(f"sys.stdout.buffer.write({SOCKETS_REPORT!r})")

        with stream_netstat([], binary=binary) as lines:
            sections = ReportExtractor().extract_all(lines)

        assert len(sections) == 1
        path = sections[0].rows[0][-1]
        assert path.startswith("/tmp/")
        assert "\ufffd" in path

    @needs_posix
    def test_large_stderr_does_not_block(self, fake_netstat, caplog) -> None:
        binary = fake_netstat(
            'sys.stderr.write("x" * 200000)\n'
            'sys.stderr.flush()\n'
            'print("Active Internet connections (w/o servers)")\n'
            'print("Proto Recv-Q Send-Q Local Address Foreign Address State")\n'
            'print("tcp 0 0 10.0.0.5:22 10.0.0.9:51000 ESTABLISHED")\n'
            'sys.exit(1)'
        )

        with caplog.at_level(logging.WARNING, logger="utils.netstat"):
            with stream_netstat([], binary=binary) as lines:
                received = list(lines)

        assert len(received) == 3
        assert received[2].startswith("tcp")
        assert any("exited with status 1" in r.getMessage() for r in caplog.records)
