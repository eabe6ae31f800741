"""
Line sources for the report extractor.

  - ``stream_netstat`` runs the netstat binary and streams its stdout
    line by line while the process is still producing output.
  - ``iter_lines`` adapts any open text stream (a captured report file,
    stdin) to the same line format.

Both produce lines without their trailing newline.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Sequence

from utils.config import NETSTAT_BINARY

logger = logging.getLogger(__name__)


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of *stream* with ``\\r\\n`` / ``\\n`` removed."""
    for line in stream:
        yield line.rstrip("\r\n")


def find_netstat(binary: str = NETSTAT_BINARY) -> str:
    """Return the full path to *binary*, or raise ``FileNotFoundError``."""
    path = shutil.which(binary)
    if path is None:
        raise FileNotFoundError(f"netstat not found: {binary!r} is not on PATH")
    return path


@contextmanager
def stream_netstat(
    args: Sequence[str] = (),
    binary: str = NETSTAT_BINARY,
) -> Iterator[Iterator[str]]:
    """
    Start netstat with *args* and yield an iterator over its output lines.

    Usage::

        with stream_netstat(["-tunap"]) as lines:
            sections = list(ReportExtractor().extract(lines))

    The process is reaped when the block exits.  If the caller stops
    reading before the end of output the process is terminated first.
    A non-zero exit status is logged together with netstat's stderr; it
    is not raised, since whatever output was produced can still be
    parsed.
    """
    binary_path = find_netstat(binary)
    cmd = [binary_path, *args]
    logger.info("Running: %s", " ".join(cmd))

    # stderr is spooled to a file; it is only read once netstat exits.
    with tempfile.TemporaryFile() as err_file:
        # Socket paths are raw bytes; undecodable ones become U+FFFD.
        proc = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=err_file,
            encoding="utf-8",
            errors="replace",
        )

        exhausted: List[bool] = []

        def _lines() -> Iterator[str]:
            yield from iter_lines(proc.stdout)
            exhausted.append(True)

        try:
            yield _lines()
        finally:
            stopped_early = not exhausted
            if stopped_early and proc.poll() is None:
                logger.debug("Output not fully consumed, terminating netstat")
                proc.terminate()
            proc.stdout.close()
            returncode = proc.wait()

            err_file.seek(0)
            stderr = err_file.read().decode("utf-8", errors="replace").strip()

            if returncode != 0 and not stopped_early:
                logger.warning(
                    "netstat exited with status %d: %s", returncode, stderr[:500]
                )
            elif stderr:
                logger.debug("netstat stderr: %s", stderr[:500])
