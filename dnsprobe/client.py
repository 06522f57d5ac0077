"""A DNS client that sends one query and decodes the reply."""

from __future__ import annotations

import logging
import random
import socket
import struct

from dnsprobe.config import Config, ConfigError
from dnsprobe.labels import Label, string_to_labels, validate_domain
from dnsprobe.message import Header, Message, Question, ResourceData, ResourceRecord
from dnsprobe.records import AAAARecord, ARecord, GenericRecord, NSRecord
from dnsprobe.types import HeaderFlag, QClass, QType

HEADER_SIZE = 12

_HEADER = struct.Struct(">6H")
_QUESTION_TAIL = struct.Struct(">HH")
_RR_FIXED = struct.Struct(">HHiH")
_U16 = struct.Struct(">H")


class QueryError(Exception):
    """A query that could not be sent, or a response that could not be decoded."""


def parse_labels(data: bytes, index: int) -> tuple[list[Label], int]:
    """Read a possibly compressed domain name starting at index.

    Returns the labels, ending with the null label, and the offset just past
    the name as it is written at index.
    """
    return _parse_labels(data, index, frozenset())


def _parse_labels(
    data: bytes, index: int, visited: frozenset[int]
) -> tuple[list[Label], int]:
    labels: list[Label] = []
    while index < len(data):
        length = data[index]

        if length & 0xC0 == 0xC0:
            if index + 1 >= len(data):
                raise QueryError("compression pointer truncated")
            pointer = _U16.unpack_from(data, index)[0] & 0x3FFF
            if pointer >= len(data):
                raise QueryError(f"invalid compression pointer: {pointer}")
            if pointer in visited:
                raise QueryError(f"compression pointer loop at offset {pointer}")
            try:
                target, _ = _parse_labels(data, pointer, visited | {pointer})
            except QueryError as exc:
                raise QueryError(
                    f"failed to follow compression pointer: {exc}"
                ) from exc
            labels.extend(target)
            return labels, index + 2

        if length == 0:
            labels.append(Label())
            return labels, index + 1

        end = index + 1 + length
        if end > len(data):
            raise QueryError("label data truncated")
        labels.append(Label(bytes(data[index + 1 : end])))
        index = end

    raise QueryError("labels not properly terminated")


def _known_type(value: int) -> int:
    try:
        return QType(value)
    except ValueError:
        return value


def _known_class(value: int) -> int:
    try:
        return QClass(value)
    except ValueError:
        return value


def _parse_question(data: bytes, index: int) -> tuple[Question, int]:
    try:
        labels, index = parse_labels(data, index)
    except QueryError as exc:
        raise QueryError(f"failed to parse question name: {exc}") from exc
    if index + _QUESTION_TAIL.size > len(data):
        raise QueryError("question data truncated")
    qtype, qclass = _QUESTION_TAIL.unpack_from(data, index)
    question = Question(labels, _known_type(qtype), _known_class(qclass))
    return question, index + _QUESTION_TAIL.size


def _decode_rdata(data: bytes, offset: int, rtype: int, rdata: bytes) -> ResourceData:
    if rtype == QType.A:
        if len(rdata) != 4:
            raise QueryError(f"invalid A record length: {len(rdata)}")
        return ARecord(rdata)
    if rtype == QType.AAAA:
        if len(rdata) != 16:
            raise QueryError(f"invalid AAAA record length: {len(rdata)}")
        try:
            return AAAARecord(rdata)
        except ValueError:
            return GenericRecord(rtype, rdata)
    if rtype == QType.NS:
        try:
            nameserver, _ = parse_labels(data, offset)
        except QueryError:
            return GenericRecord(rtype, rdata)
        return NSRecord(nameserver)
    return GenericRecord(rtype, rdata)


def _parse_resource_record(data: bytes, index: int) -> tuple[ResourceRecord, int]:
    try:
        labels, index = parse_labels(data, index)
    except QueryError as exc:
        raise QueryError(f"failed to parse RR name: {exc}") from exc
    if index + _RR_FIXED.size > len(data):
        raise QueryError("RR header data truncated")
    rtype, rclass, ttl, rdlength = _RR_FIXED.unpack_from(data, index)
    index += _RR_FIXED.size
    end = index + rdlength
    if end > len(data):
        raise QueryError("RR data truncated")

    rdata = _decode_rdata(data, index, rtype, bytes(data[index:end]))
    record = ResourceRecord(
        name=labels,
        rtype=_known_type(rtype),
        rclass=_known_class(rclass),
        ttl=ttl,
        rdlength=rdlength,
        rdata=rdata,
    )
    return record, end


class Client:
    """Sends queries to the configured name server and decodes its answers."""

    def __init__(self, config: Config, logger: logging.Logger | None = None) -> None:
        try:
            config.validate()
        except ConfigError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    @property
    def _tcp(self) -> bool:
        return self.config.protocol == "tcp"

    def query(self, domain: str, qtype: int) -> Message:
        """Query the name server for records of qtype at domain."""
        validate_domain(domain)
        return self._send_query(self.build_query(domain, qtype))

    def build_query(self, domain: str, qtype: int) -> Message:
        """Return a query message with a random ID for one question."""
        flags = HeaderFlag.QR_QUERY | HeaderFlag.OPCODE_QUERY
        if self.config.recursion_desired:
            flags |= HeaderFlag.RD
        header = Header(id=random.randrange(0x10000), flags=flags, qdcount=1)
        question = Question(string_to_labels(domain), qtype, QClass.IN)
        return Message(header=header, questions=[question])

    def _connect(self) -> socket.socket:
        host, _, port = self.config.name_server.rpartition(":")
        host = host.removeprefix("[").removesuffix("]") or None
        kind = socket.SOCK_STREAM if self._tcp else socket.SOCK_DGRAM
        try:
            infos = socket.getaddrinfo(host, port, type=kind)
        except (OSError, UnicodeError) as exc:
            raise QueryError(f"failed to connect to DNS server: {exc}") from exc

        last_error: Exception | None = None
        for family, socktype, proto, _, address in infos:
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError as exc:
                last_error = exc
                continue
            sock.settimeout(self.config.timeout)
            try:
                sock.connect(address)
            except OSError as exc:
                sock.close()
                last_error = exc
                continue
            return sock
        raise QueryError(f"failed to connect to DNS server: {last_error}")

    def _send_query(self, query: Message) -> Message:
        try:
            payload = query.to_bytes()
        except ValueError as exc:
            raise QueryError(f"failed to serialize query: {exc}") from exc
        if self._tcp:
            payload = _U16.pack(len(payload)) + payload

        self.logger.debug(
            "Sending DNS query: size=%d protocol=%s", len(payload), self.config.protocol
        )

        with self._connect() as sock:
            try:
                sock.sendall(payload)
            except OSError as exc:
                raise QueryError(f"failed to write query: {exc}") from exc
            try:
                response = sock.recv(self.config.max_message_size())
            except OSError as exc:
                raise QueryError(f"failed to read response: {exc}") from exc
        if self._tcp and not response:
            raise QueryError("failed to read response: connection closed")

        self.logger.debug("Received DNS response: size=%d", len(response))

        try:
            return self.parse_response(response, query.header.id)
        except QueryError as exc:
            raise QueryError(f"failed to parse response: {exc}") from exc

    def parse_response(self, data: bytes, expected_id: int) -> Message:
        """Decode a response in wire format and check that its ID matches."""
        data = bytes(data)
        if self._tcp:
            if len(data) < 2:
                raise QueryError("TCP response too short for length prefix")
            (length,) = _U16.unpack_from(data)
            if length != len(data) - 2:
                raise QueryError(
                    f"TCP length mismatch: expected {length}, got {len(data) - 2}"
                )
            data = data[2:]

        if len(data) < HEADER_SIZE:
            raise QueryError(f"DNS response too short: {len(data)} bytes")

        header = Header(*_HEADER.unpack_from(data))
        if header.id != expected_id:
            raise QueryError(
                f"response ID {header.id} does not match query ID {expected_id}"
            )

        index = HEADER_SIZE
        questions = []
        for number in range(header.qdcount):
            try:
                question, index = _parse_question(data, index)
            except QueryError as exc:
                raise QueryError(f"failed to parse question {number}: {exc}") from exc
            questions.append(question)

        sections: list[list[ResourceRecord]] = []
        for title, count in (
            ("answer", header.ancount),
            ("authority", header.nscount),
            ("additional", header.arcount),
        ):
            records = []
            for number in range(count):
                try:
                    record, index = _parse_resource_record(data, index)
                except QueryError as exc:
                    raise QueryError(
                        f"failed to parse {title} record {number}: {exc}"
                    ) from exc
                records.append(record)
            sections.append(records)

        answers, authority, additional = sections
        return Message(header, questions, answers, authority, additional)