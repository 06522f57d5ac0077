from dataclasses import dataclass

import pytest

from dnsprobe.labels import string_to_labels
from dnsprobe.message import Header, Message, Question, ResourceData, ResourceRecord
from dnsprobe.types import HeaderFlag, QClass, QType


@dataclass
class _RawData:
    payload: bytes
    record_type: int = QType.A

    def to_bytes(self):
        return self.payload

    def __str__(self):
        return "RAW"


def _query_message():
    return Message(
        header=Header(id=0x1234, flags=HeaderFlag.RD, qdcount=1),
        questions=[Question(string_to_labels("example.com"), QType.A, QClass.IN)],
    )


def test_header_string():
    header = Header(id=0xBEEF, flags=HeaderFlag.RD, qdcount=1)
    assert str(header) == (
        "\tID: BEEF\tFlags: 0100\tQDCount: 1\tANCount: 0\tNSCount: 0\tARCount: 0"
    )


def test_header_to_bytes():
    result = Header(id=0x1234, flags=HeaderFlag.RD, qdcount=1).to_bytes()
    assert len(result) == 12
    assert result[:2] == b"\x12\x34"
    assert result == bytes.fromhex("123401000001000000000000")


def test_header_out_of_range_raises():
    with pytest.raises(ValueError):
        Header(id=0x10000).to_bytes()


def test_question_string():
    question = Question(string_to_labels("example.com"), QType.A, QClass.IN)
    assert str(question) == "\texample.com\tA\tIN"


def test_question_to_bytes():
    question = Question(string_to_labels("example.com"), QType.A, QClass.IN)
    result = question.to_bytes()
    assert len(result) == 7 + 1 + 3 + 1 + 1 + 2 + 2
    assert result == b"\x07example\x03com\x00\x00\x01\x00\x01"


def test_question_unknown_type_string():
    question = Question(string_to_labels("example.com"), 999, 999)
    assert str(question) == "\texample.com\tUNKNOWN\tUNKNOWN"


def test_resource_record_to_bytes():
    rr = ResourceRecord(
        string_to_labels("a.io"), QType.A, QClass.IN, 300, 4, _RawData(b"\x0a\x00\x00\x01")
    )
    assert rr.to_bytes() == (
        b"\x01a\x02io\x00" + b"\x00\x01\x00\x01" + b"\x00\x00\x01\x2c" + b"\x00\x04"
        + b"\x0a\x00\x00\x01"
    )


def test_resource_record_negative_ttl_packs_signed():
    rr = ResourceRecord(string_to_labels(""), QType.A, QClass.IN, -1, 0, _RawData(b""))
    assert rr.to_bytes() == b"\x00\x00\x01\x00\x01\xff\xff\xff\xff\x00\x00"


def test_resource_record_string():
    rr = ResourceRecord(
        string_to_labels("example.com"), QType.NS, QClass.IN, 60, 0, _RawData(b"")
    )
    assert str(rr) == "\texample.com\tNS\tIN\tTTL: 60\tRAW"


def test_fake_data_satisfies_protocol():
    data = _RawData(b"\x7f")
    assert isinstance(data, ResourceData)
    rr = ResourceRecord(string_to_labels(""), QType.A, QClass.IN, 0, 1, data)
    assert rr.to_bytes() == b"\x00\x00\x01\x00\x01\x00\x00\x00\x00\x00\x01\x7f"


def test_message_string_contents():
    result = str(_query_message())
    assert "DNS Message" in result
    assert "example.com" in result
    assert "A" in result
    assert "IN" in result


def test_message_string_exact():
    assert str(_query_message()) == (
        "; DNS Message\n; Header:\n"
        "\tID: 1234\tFlags: 0100\tQDCount: 1\tANCount: 0\tNSCount: 0\tARCount: 0"
        "\n; Question:\n\texample.com\tA\tIN\n"
    )


def test_message_string_skips_sections_with_zero_count():
    msg = _query_message()
    msg.answers.append(
        ResourceRecord(string_to_labels("x.com"), QType.A, QClass.IN, 1, 0, _RawData(b""))
    )
    assert "; Answer:" not in str(msg)
    msg.header.ancount = 1
    assert "\n; Answer:\n\tx.com\tA\tIN\tTTL: 1\tRAW\n" in str(msg)


def test_message_to_bytes():
    result = _query_message().to_bytes()
    assert len(result) >= 12
    assert result == bytes.fromhex("123401000001000000000000") + (
        b"\x07example\x03com\x00\x00\x01\x00\x01"
    )


def test_message_to_bytes_includes_all_sections_in_order():
    def rr(payload):
        return ResourceRecord(string_to_labels(""), QType.A, QClass.IN, 0, 1, _RawData(payload))

    msg = Message(
        header=Header(ancount=1, nscount=1, arcount=1),
        answers=[rr(b"a")],
        authority=[rr(b"b")],
        additional=[rr(b"c")],
    )
    body = msg.to_bytes()[12:]
    assert body.endswith(b"c")
    assert body.index(b"a") < body.index(b"b") < body.index(b"c")
    assert len(body) == 3 * 12