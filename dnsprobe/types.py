"""DNS record types, classes and header flags (RFC 1035)."""

from __future__ import annotations

from enum import IntEnum, IntFlag

UNKNOWN = "UNKNOWN"


class QType(IntEnum):
    """DNS query and record types."""

    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    AAAA = 28
    AXFR = 252
    MAILB = 253
    MAILA = 254
    ASTERISK = 255

    def __str__(self) -> str:
        return qtype_name(self)


class QClass(IntEnum):
    """DNS query and record classes."""

    IN = 1
    CS = 2
    CH = 3
    HS = 4
    ASTERISK = 255

    def __str__(self) -> str:
        return qclass_name(self)


class HeaderFlag(IntFlag):
    """Bits of the flags word in a DNS message header."""

    QR_QUERY = 0
    QR_RESPONSE = 1 << 15

    OPCODE_QUERY = 0 << 11
    OPCODE_IQUERY = 1 << 11
    OPCODE_STATUS = 2 << 11

    AA = 1 << 10
    TC = 1 << 9
    RD = 1 << 8
    RA = 1 << 7
    Z = 0 << 4

    RCODE_OK = 0
    RCODE_FMT = 1
    RCODE_SRVR = 2
    RCODE_NAME = 3
    RCODE_NIMPL = 4
    RCODE_REF = 5


def qtype_name(value: int) -> str:
    """Return the mnemonic of a record type, or "UNKNOWN"."""
    try:
        member = QType(value)
    except ValueError:
        return UNKNOWN
    return "*" if member is QType.ASTERISK else member.name


def qclass_name(value: int) -> str:
    """Return the mnemonic of a record class, or "UNKNOWN"."""
    try:
        member = QClass(value)
    except ValueError:
        return UNKNOWN
    return "*" if member is QClass.ASTERISK else member.name