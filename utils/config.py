import os

from typing import Literal

NETSTAT_BINARY: str = os.getenv("NETSTAT_BINARY", "netstat")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

OUTPUT_FORMAT: Literal["table", "json", "html", "xlsx"] = os.getenv(
    "OUTPUT_FORMAT", "table"
).lower()
