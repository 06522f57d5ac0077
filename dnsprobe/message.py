"""DNS message structures and their wire format (RFC 1035 section 4)."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from dnsprobe.labels import Label, labels_to_string
from dnsprobe.types import qclass_name, qtype_name


@runtime_checkable
class ResourceData(Protocol):
    """Type-specific data carried by a resource record."""

    @property
    def record_type(self) -> int: ...

    def to_bytes(self) -> bytes: ...

    def __str__(self) -> str: ...


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


def _name_bytes(name: list[Label]) -> bytes:
    return b"".join(label.to_bytes() for label in name)


@dataclass
class Header:
    """The fixed 12-byte message header."""

    id: int = 0
    flags: int = 0
    qdcount: int = 0
    ancount: int = 0
    nscount: int = 0
    arcount: int = 0

    def to_bytes(self) -> bytes:
        return _pack(
            ">6H",
            self.id,
            int(self.flags),
            self.qdcount,
            self.ancount,
            self.nscount,
            self.arcount,
        )

    def __str__(self) -> str:
        return (
            f"\tID: {self.id:04X}\tFlags: {int(self.flags):04X}"
            f"\tQDCount: {self.qdcount}\tANCount: {self.ancount}"
            f"\tNSCount: {self.nscount}\tARCount: {self.arcount}"
        )


@dataclass
class Question:
    """An entry of the question section."""

    name: list[Label]
    qtype: int
    qclass: int

    def to_bytes(self) -> bytes:
        return _name_bytes(self.name) + _pack(">HH", int(self.qtype), int(self.qclass))

    def __str__(self) -> str:
        return (
            f"\t{labels_to_string(self.name)}"
            f"\t{qtype_name(self.qtype)}\t{qclass_name(self.qclass)}"
        )


@dataclass
class ResourceRecord:
    """An entry of the answer, authority or additional section."""

    name: list[Label]
    rtype: int
    rclass: int
    ttl: int
    rdlength: int
    rdata: ResourceData

    def to_bytes(self) -> bytes:
        fixed = _pack(
            ">HHiH", int(self.rtype), int(self.rclass), self.ttl, self.rdlength
        )
        return _name_bytes(self.name) + fixed + self.rdata.to_bytes()

    def __str__(self) -> str:
        return (
            f"\t{labels_to_string(self.name)}\t{qtype_name(self.rtype)}"
            f"\t{qclass_name(self.rclass)}\tTTL: {self.ttl}\t{self.rdata}"
        )


@dataclass
class Message:
    """A complete DNS message."""

    header: Header
    questions: list[Question] = field(default_factory=list)
    answers: list[ResourceRecord] = field(default_factory=list)
    authority: list[ResourceRecord] = field(default_factory=list)
    additional: list[ResourceRecord] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        parts = [self.header.to_bytes()]
        parts.extend(q.to_bytes() for q in self.questions)
        for section in (self.answers, self.authority, self.additional):
            parts.extend(rr.to_bytes() for rr in section)
        return b"".join(parts)

    def __str__(self) -> str:
        out = ["; DNS Message\n", "; Header:\n", str(self.header)]
        sections = (
            ("Question", self.header.qdcount, self.questions),
            ("Answer", self.header.ancount, self.answers),
            ("Authority", self.header.nscount, self.authority),
            ("Additional", self.header.arcount, self.additional),
        )
        for title, count, entries in sections:
            if count > 0:
                out.append(f"\n; {title}:\n")
                out.extend(f"{entry}\n" for entry in entries)
        return "".join(out)