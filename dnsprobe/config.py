"""Settings of the DNS client and their validation."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass

VALID_PROTOCOLS = ("udp", "tcp")
VALID_LOG_LEVELS = ("debug", "info", "warn", "error")

TCP_MAX_MESSAGE_SIZE = 65535
UDP_MAX_MESSAGE_SIZE = 512


class ConfigError(ValueError):
    """A configuration that cannot be used."""


def _split_host_port(hostport: str) -> tuple[str, str]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ConfigError(f"address {hostport}: missing ']' in address")
        rest = hostport[end + 1 :]
        if not rest:
            raise ConfigError(f"address {hostport}: missing port in address")
        if not rest.startswith(":"):
            raise ConfigError(f"address {hostport}: unexpected text after ']'")
        host, port = hostport[1:end], rest[1:]
        if ":" in port:
            raise ConfigError(f"address {hostport}: too many colons in address")
    else:
        sep = hostport.rfind(":")
        if sep < 0:
            raise ConfigError(f"address {hostport}: missing port in address")
        host, port = hostport[:sep], hostport[sep + 1 :]
        if ":" in host:
            raise ConfigError(f"address {hostport}: too many colons in address")
        if "[" in host or "]" in host:
            raise ConfigError(f"address {hostport}: unexpected bracket in address")
    if "[" in port or "]" in port:
        raise ConfigError(f"address {hostport}: unexpected bracket in address")
    return host, port


def _is_ip(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


@dataclass
class Config:
    """Network, query and debug settings; timeout is in seconds."""

    name_server: str = "198.41.0.4:53"
    protocol: str = "udp"
    timeout: float = 5.0
    recursion_desired: bool = True
    retry_count: int = 3
    debug: bool = False
    dump_files: bool = False
    log_level: str = "info"

    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        if not self.name_server:
            raise ConfigError("name server cannot be empty")

        try:
            host, port = _split_host_port(self.name_server)
        except ConfigError as exc:
            raise ConfigError(f"invalid name server format: {exc}") from exc

        if host and not _is_ip(host):
            try:
                socket.getaddrinfo(host, None)
            except (OSError, UnicodeError) as exc:
                raise ConfigError(
                    f"cannot resolve name server hostname {host}: {exc}"
                ) from exc

        if not port:
            raise ConfigError("name server port is required")

        if self.protocol not in VALID_PROTOCOLS:
            raise ConfigError(
                f"protocol must be 'udp' or 'tcp', got '{self.protocol}'"
            )

        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}s")

        if self.retry_count < 0:
            raise ConfigError(
                f"retry count cannot be negative, got {self.retry_count}"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"invalid log level '{self.log_level}', "
                "must be one of: debug, info, warn, error"
            )

    def max_message_size(self) -> int:
        """Largest message the configured protocol can carry."""
        if self.protocol == "tcp":
            return TCP_MAX_MESSAGE_SIZE
        return UDP_MAX_MESSAGE_SIZE


def default_config() -> Config:
    """Return a configuration with the default settings."""
    return Config()