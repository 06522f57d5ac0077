import pytest

from dnsprobe.types import HeaderFlag, QClass, QType, qclass_name, qtype_name


@pytest.mark.parametrize(
    "value, expected",
    [
        (QType.A, "A"),
        (QType.NS, "NS"),
        (QType.CNAME, "CNAME"),
        (QType.SOA, "SOA"),
        (QType.PTR, "PTR"),
        (QType.MX, "MX"),
        (QType.TXT, "TXT"),
        (QType.AAAA, "AAAA"),
        (QType.ASTERISK, "*"),
        (999, "UNKNOWN"),
    ],
)
def test_qtype_name(value, expected):
    assert qtype_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (QClass.IN, "IN"),
        (QClass.CS, "CS"),
        (QClass.CH, "CH"),
        (QClass.HS, "HS"),
        (QClass.ASTERISK, "*"),
        (999, "UNKNOWN"),
    ],
)
def test_qclass_name(value, expected):
    assert qclass_name(value) == expected


def test_str_of_members_uses_mnemonic():
    assert str(QType(28)) == qtype_name(28) == "AAAA"
    assert str(QClass(255)) == qclass_name(255) == "*"


def test_type_lookup_by_wire_value():
    assert QType(1) is QType.A
    assert QType(2) is QType.NS
    assert QType(28) is QType.AAAA
    assert QClass(1) is QClass.IN
    assert QClass(2) is QClass.CS


def test_plain_ints_resolve_through_name_functions():
    assert qtype_name(28) == "AAAA"
    assert qclass_name(1) == "IN"


def test_header_flags_combine_into_wire_word():
    assert HeaderFlag(0) == HeaderFlag.QR_QUERY | HeaderFlag.OPCODE_QUERY
    assert int(HeaderFlag(0)) == 0
    assert HeaderFlag(0x8100) == HeaderFlag.QR_RESPONSE | HeaderFlag.RD
    assert HeaderFlag(1 << 8) == HeaderFlag.QR_QUERY | HeaderFlag.RD