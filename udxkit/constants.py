"""Protocol constants, flag sets and state enumerations."""

from enum import IntEnum, IntFlag

HEADER_SIZE = 20
IPV4_HEADER_SIZE = 20 + 8 + HEADER_SIZE
IPV6_HEADER_SIZE = 40 + 8 + HEADER_SIZE

MTU_BASE = 1200
MTU_MAX_PROBES = 3
MTU_MAX = 1500
MTU_STEP = 32

MAGIC_BYTE = 255
VERSION = 1


class MtuState(IntEnum):
    """Path MTU discovery state."""

    BASE = 1
    SEARCH = 2
    ERROR = 3
    SEARCH_COMPLETE = 4


class SocketFlag(IntFlag):
    """Status bits of a socket."""

    RECEIVING = 0b0001
    BOUND = 0b0010
    CLOSED = 0b0100


class StreamFlag(IntFlag):
    """Status bits of a stream."""

    CONNECTED = 0b000000001
    RECEIVING = 0b000000010
    READING = 0b000000100
    ENDING = 0b000001000
    ENDING_REMOTE = 0b000010000
    ENDED = 0b000100000
    ENDED_REMOTE = 0b001000000
    DESTROYING = 0b010000000
    CLOSED = 0b100000000


class HeaderFlag(IntFlag):
    """Type bits carried in a packet header."""

    DATA = 0b00001
    END = 0b00010
    SACK = 0b00100
    MESSAGE = 0b01000
    DESTROY = 0b10000


class WriteWant(IntFlag):
    """Reasons a stream wants to write."""

    STATE = 0b0001
    TLP = 0b0010
    DESTROY = 0b0100
    ZWP = 0b1000


class DebugFlag(IntFlag):
    """Debug switches that alter runtime behaviour."""

    FORCE_RELAY_SLOW_PATH = 0x01
    FORCE_DROP_PROBES = 0x02
    FORCE_DROP_DATA = 0x04


class CongestionState(IntEnum):
    """Congestion avoidance state."""

    OPEN = 1
    RECOVERY = 2
    LOSS = 3


class LookupFamily(IntFlag):
    """Address families accepted by a name lookup."""

    IPV4 = 1
    IPV6 = 2