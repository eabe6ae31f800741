from types import MappingProxyType
from typing import Mapping, Tuple

# Substrings that mark the first line of a netstat section.  Checked in
# this order; the first one contained in a line wins.
DEFAULT_SECTION_TITLES: Tuple[str, ...] = (
    "Active Internet connections",
    "Active UNIX domain sockets",
    "Kernel routing tables",
    "Interface statistics",
    "Multicast group memberships",
    "Masquerade connections",
    "Protocol statistics",
    "Listening vs. all sockets",
    "UNIX domain sockets",
)

# Whitespace-free header signature → canonical column names.
DEFAULT_HEADER_MAPPINGS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "ProtoRecv-QSend-QLocalAddressForeignAddressStatePID/Programname": (
        "Proto", "Recv-Q", "Send-Q", "Local Address", "Foreign Address",
        "State", "PID/Program name",
    ),
    "ProtoRefCntFlagsTypeStateI-NodePID/ProgramnamePath": (
        "Proto", "RefCnt", "Flags", "Type", "State", "I-Node",
        "PID/Program name", "Path",
    ),
    "ProtoRecv-QSend-QLocalAddressForeignAddressState": (
        "Proto", "Recv-Q", "Send-Q", "Local Address", "Foreign Address",
        "State",
    ),
    "ProtoRefCntFlagsTypeStateI-NodePath": (
        "Proto", "RefCnt", "Flags", "Type", "State", "I-Node", "Path",
    ),
})
