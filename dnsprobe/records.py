"""Resource data for the record types the client understands."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address
from typing import Union

from dnsprobe.labels import Label, labels_to_string, string_to_labels
from dnsprobe.types import QType

AddressLike = Union[IPv4Address, IPv6Address, str, bytes, int]


def _as_ip(value: AddressLike) -> IPv4Address | IPv6Address:
    if isinstance(value, (IPv4Address, IPv6Address)):
        return value
    try:
        return ipaddress.ip_address(value)
    except ValueError as exc:
        raise ValueError(f"invalid IP address: {value!r}") from exc


def _parse(addr: str) -> IPv4Address | IPv6Address:
    try:
        return ipaddress.ip_address(addr)
    except ValueError as exc:
        raise ValueError(f"invalid IP address: {addr}") from exc


@dataclass(frozen=True)
class ARecord:
    """An IPv4 host address."""

    address: IPv4Address

    def __post_init__(self) -> None:
        ip = _as_ip(self.address)
        if isinstance(ip, IPv6Address):
            mapped = ip.ipv4_mapped
            if mapped is None:
                raise ValueError(f"invalid IPv4 address: {ip}")
            ip = mapped
        object.__setattr__(self, "address", ip)

    @classmethod
    def from_string(cls, addr: str) -> ARecord:
        """Build a record from the textual form of an address."""
        return cls(_parse(addr))

    @property
    def record_type(self) -> int:
        return QType.A

    def to_bytes(self) -> bytes:
        return self.address.packed

    def __str__(self) -> str:
        return f"ADDRESS: {self.address}"


@dataclass(frozen=True)
class AAAARecord:
    """An IPv6 host address."""

    address: IPv6Address

    def __post_init__(self) -> None:
        ip = _as_ip(self.address)
        if isinstance(ip, IPv4Address) or ip.ipv4_mapped is not None:
            raise ValueError(f"IPv4 address provided for AAAA record: {ip}")
        object.__setattr__(self, "address", ip)

    @classmethod
    def from_string(cls, addr: str) -> AAAARecord:
        """Build a record from the textual form of an address."""
        return cls(_parse(addr))

    @property
    def record_type(self) -> int:
        return QType.AAAA

    def to_bytes(self) -> bytes:
        return self.address.packed

    def __str__(self) -> str:
        return f"ADDRESS: {self.address}"


@dataclass(frozen=True)
class GenericRecord:
    """Opaque data of a record type without a dedicated representation."""

    record_type: int
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def to_bytes(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        hex_bytes = " ".join(f"{byte:02X}" for byte in self.data)
        return f"RDLength: {len(self.data)}\tRData: {hex_bytes}"


@dataclass
class NSRecord:
    """The name of an authoritative name server."""

    nameserver: list[Label] = field(default_factory=list)

    @classmethod
    def from_string(cls, nameserver: str) -> NSRecord:
        """Build a record from a dotted domain name."""
        return cls(string_to_labels(nameserver))

    @property
    def record_type(self) -> int:
        return QType.NS

    def to_bytes(self) -> bytes:
        return b"".join(label.to_bytes() for label in self.nameserver)

    def __str__(self) -> str:
        return f"NAME: {labels_to_string(self.nameserver)}"