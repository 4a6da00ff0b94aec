"""Host parsing for did:web: domain names, single-label hostnames and ports.

A host is either a :class:`Domain` (two or more dot-separated labels, split
into subdomains, name and suffix) or a :class:`Hostname` (a single label such
as ``localhost``). IP literals are rejected: did:web is defined over domain
names only.

The suffix is the last label. Public-suffix-aware splitting (``co.uk``) is
out of scope; callers that need it can recombine :attr:`Domain.labels`.
"""
from __future__ import annotations

import ipaddress
import string
from dataclasses import dataclass

from did_identifiers.errors import DIDError, ErrorKind

MAX_DOMAIN_LENGTH: int = 253
MAX_PORT: int = 0xFFFF

_HOST_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-.")
_EDGE_CHARACTERS = "-."


@dataclass(frozen=True)
class Domain:
    """A dotted domain name such as ``api.example.com``.

    Parameters
    ----------
    labels:
        The dot-separated labels in order, e.g. ``("api", "example", "com")``.
    """

    labels: tuple[str, ...]

    @property
    def suffix(self) -> str:
        return self.labels[-1]

    @property
    def name(self) -> str:
        return self.labels[-2]

    @property
    def subdomains(self) -> tuple[str, ...]:
        return self.labels[:-2]

    def __str__(self) -> str:
        return ".".join(self.labels)


@dataclass(frozen=True)
class Hostname:
    """A single-label host name such as ``localhost``."""

    value: str

    def __str__(self) -> str:
        return self.value


HostKind = Domain | Hostname


def parse_host(text: str) -> HostKind:
    """Parse *text* (without a port) into a :class:`Domain` or :class:`Hostname`.

    Raises
    ------
    DIDError
        ``UNSUPPORTED_HOST_FORM`` for IPv4/IPv6 literals, ``INVALID_DOMAIN``
        for anything else that is not a valid host name.
    """
    if text.startswith("[") or ":" in text or _is_ip_address(text):
        raise DIDError(
            ErrorKind.UNSUPPORTED_HOST_FORM,
            f"IP address hosts are not supported: {text!r}",
            text,
        )
    if not text:
        raise DIDError(ErrorKind.INVALID_DOMAIN, "host is empty", text)
    if len(text) > MAX_DOMAIN_LENGTH:
        raise DIDError(
            ErrorKind.INVALID_DOMAIN,
            f"host is {len(text)} characters, maximum is {MAX_DOMAIN_LENGTH}",
            text,
        )
    for char in text:
        if char not in _HOST_CHARACTERS:
            raise DIDError(
                ErrorKind.INVALID_DOMAIN, f"invalid character {char!r} in host", text
            )
    if text[0] in _EDGE_CHARACTERS or text[-1] in _EDGE_CHARACTERS:
        raise DIDError(
            ErrorKind.INVALID_DOMAIN, "host must not start or end with '-' or '.'", text
        )
    labels = tuple(text.split("."))
    if "" in labels:
        raise DIDError(ErrorKind.INVALID_DOMAIN, "host contains an empty label", text)
    if len(labels) == 1:
        return Hostname(value=text)
    return Domain(labels=labels)


def parse_host_port(text: str) -> tuple[HostKind, int | None]:
    """Parse ``host[:port]`` in one step.

    The text is split at the first colon; anything after it must be the
    port, so ``example.com:8080:90`` is a bad port rather than an IP literal.

    Raises
    ------
    DIDError
        Any error from :func:`parse_host`, or ``INVALID_DOMAIN`` for a port
        that is not a decimal integer in ``0..65535`` written without
        leading zeros.
    """
    if text.startswith("[") or (text.count(":") > 1 and _is_ip_address(text)):
        raise DIDError(
            ErrorKind.UNSUPPORTED_HOST_FORM,
            f"IP address hosts are not supported: {text!r}",
            text,
        )
    host_text, separator, port_text = text.partition(":")
    host = parse_host(host_text)
    if not separator:
        return host, None
    return host, _parse_port(port_text, text)


def render_host(host: HostKind, port: int | None = None) -> str:
    """Render ``host[:port]``."""
    if port is None:
        return str(host)
    return f"{host}:{port}"


def _parse_port(port_text: str, text: str) -> int:
    if not port_text or not all(char in string.digits for char in port_text):
        raise DIDError(ErrorKind.INVALID_DOMAIN, f"invalid port {port_text!r}", text)
    if len(port_text) > 1 and port_text.startswith("0"):
        raise DIDError(
            ErrorKind.INVALID_DOMAIN, f"port {port_text!r} has leading zeros", text
        )
    port = int(port_text)
    if port > MAX_PORT:
        raise DIDError(ErrorKind.INVALID_DOMAIN, f"port {port} is out of range", text)
    return port


def _is_ip_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


__all__ = [
    "MAX_DOMAIN_LENGTH",
    "MAX_PORT",
    "Domain",
    "HostKind",
    "Hostname",
    "parse_host",
    "parse_host_port",
    "render_host",
]
