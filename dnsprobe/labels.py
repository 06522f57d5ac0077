"""Domain name labels and domain name validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_LABEL_RE = re.compile(r"[a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?")


@dataclass(frozen=True)
class Label:
    """One label of a domain name; an empty label terminates the name."""

    data: bytes = b""

    @property
    def length(self) -> int:
        return len(self.data) & 0xFF

    def to_bytes(self) -> bytes:
        """Return the label in wire format: length byte then data."""
        return bytes([self.length]) + self.data


class DomainError(ValueError):
    """A domain name that fails validation."""

    def __init__(self, domain: str, reason: str) -> None:
        super().__init__(f"invalid domain '{domain}': {reason}")
        self.domain = domain
        self.reason = reason


def string_to_labels(domain: str) -> list[Label]:
    """Split a dotted domain name into labels ending with the null label."""
    domain = domain.removesuffix(".")
    if not domain:
        return [Label()]
    return [Label(part.encode()) for part in domain.split(".")] + [Label()]


def labels_to_string(labels: Iterable[Label]) -> str:
    """Join labels into a dotted domain name, stopping at the null label."""
    parts = []
    for label in labels:
        if label.length == 0:
            break
        parts.append(label.data.decode("utf-8", errors="replace"))
    return ".".join(parts)


def validate_domain(domain: str) -> None:
    """Raise DomainError if the domain name is not valid."""
    if not domain:
        raise DomainError(domain, "domain cannot be empty")
    if len(domain.encode()) > 253:
        raise DomainError(domain, "domain too long (max 253 characters)")

    domain = domain.removesuffix(".")
    for label in domain.split("."):
        if not label:
            raise DomainError(domain, "empty label not allowed")
        if len(label.encode()) > 63:
            raise DomainError(domain, "label too long (max 63 characters)")
        if not _LABEL_RE.fullmatch(label):
            raise DomainError(domain, "invalid characters in label: " + label)