"""Shared fixtures: captured netstat output."""

from typing import List

import pytest

SAMPLE_REPORT = """\
(Not all processes could be identified, non-owned process info
 will not be shown, you would have to be root to see it all.)
Active Internet connections (servers and established)
Proto Recv-Q Send-Q Local Address           Foreign Address         State       PID/Program name
tcp        0      0 0.0.0.0:22              0.0.0.0:*               LISTEN      812/sshd
tcp        0      0 127.0.0.1:5432          0.0.0.0:*               LISTEN      -
tcp        0     36 10.0.0.5:22             10.0.0.9:51544          ESTABLISHED 2211/sshd: alice
udp        0      0 0.0.0.0:68              0.0.0.0:*                           640/dhclient

Active UNIX domain sockets (servers and established)
Proto RefCnt Flags       Type       State         I-Node   PID/Program name     Path
unix  2      [ ACC ]     STREAM     LISTENING     19342    1/systemd            /run/systemd/private
unix  3      [ ]         STREAM     CONNECTED     23455    -
"""


@pytest.fixture
def sample_lines() -> List[str]:
    return SAMPLE_REPORT.splitlines()


@pytest.fixture
def sample_report_file(tmp_path):
    path = tmp_path / "netstat.txt"
    path.write_text(SAMPLE_REPORT, encoding="utf-8")
    return path
