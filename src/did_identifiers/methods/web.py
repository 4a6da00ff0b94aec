"""did:web — identifiers anchored to a web domain.

DID format
----------
::

    did:web:<host>[%3A<port>][:<path-segment>]*

Examples::

    did:web:example.com
    did:web:example.com:users:alice
    did:web:localhost%3A8080

The colon between host and port is written as ``%3A`` so that it cannot be
mistaken for the path separator. Path segments are percent-encoded; every
segment must be non-empty and spelled in canonical form (uppercase hex,
unreserved characters left literal), so each DID has exactly one text form.

Resolution
----------
:func:`to_resolution_url` maps the DID to the HTTPS location of its DID
document::

    did:web:example.com            -> https://example.com/.well-known/did.json
    did:web:localhost%3A8080:a:b   -> https://localhost:8080/a/b/.well-known/did.json

Fetching the document is left to the caller.

Reference: https://w3c-ccg.github.io/did-method-web/
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from did_identifiers.config import ParserConfig
from did_identifiers.encoding import percent
from did_identifiers.errors import (
    ContractViolationError,
    DIDError,
    ErrorKind,
    PathEncodingError,
    PercentEncodingError,
)
from did_identifiers.hosts import (
    MAX_PORT,
    HostKind,
    parse_host,
    parse_host_port,
    render_host,
)

METHOD: str = "web"
PREFIX: str = "did:web:"

ENCODED_COLON: str = "%3A"
WELL_KNOWN_SUFFIX: str = "/.well-known/did.json"


@dataclass(frozen=True)
class WebPayload:
    """The decoded content of a did:web identifier.

    Parameters
    ----------
    host:
        A :class:`~did_identifiers.hosts.Domain` or
        :class:`~did_identifiers.hosts.Hostname`.
    port:
        Optional TCP port.
    path:
        Decoded path segments, in order. Never contains empty strings.
    """

    host: HostKind
    port: int | None = None
    path: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    @property
    def host_text(self) -> str:
        """``host[:port]`` as it appears in the resolution URL."""
        return render_host(self.host, self.port)


def from_host_and_path(
    host: str | HostKind,
    path: Sequence[str] = (),
    port: int | None = None,
) -> WebPayload:
    """Build a :class:`WebPayload` from a host and decoded path segments.

    Parameters
    ----------
    host:
        ``"example.com"``, ``"localhost:8080"``, or an already parsed host.
    path:
        Decoded path segments, e.g. ``["users", "alice"]``.
    port:
        Port, when not already part of *host*.

    Raises
    ------
    DIDError
        ``INVALID_DOMAIN`` or ``UNSUPPORTED_HOST_FORM`` for a bad host or
        port. A port must be an ``int`` (not ``bool``) in ``0..65535``; a
        host object must be of the kind its text parses to.
    PathEncodingError
        If a path segment is empty.
    """
    if isinstance(host, str):
        parsed_host, host_port = parse_host_port(host)
    else:
        parsed_host, host_port = _validate_host(host), None

    if host_port is not None and port is not None:
        raise DIDError(
            ErrorKind.INVALID_DOMAIN, f"port given both in host {host!r} and as {port}"
        )
    if port is not None:
        _validate_port(port)

    segments = tuple(path)
    for segment in segments:
        if not segment:
            raise PathEncodingError(segment, "path segments must not be empty")
    return WebPayload(host=parsed_host, port=host_port if port is None else port, path=segments)


def parse(text: str, config: ParserConfig | None = None) -> WebPayload:
    """Parse a ``did:web:...`` string.

    *config* is accepted for symmetry with the other methods; no did:web
    rule depends on it.

    Raises
    ------
    DIDError
        ``MISSING_PREFIX``, ``EMPTY_IDENTIFIER``, ``INVALID_DOMAIN`` or
        ``UNSUPPORTED_HOST_FORM``.
    PathEncodingError
        If a path segment is empty, malformed, or not canonically encoded.
    """
    if not text.startswith(PREFIX):
        raise DIDError(
            ErrorKind.MISSING_PREFIX, f"expected text to start with {PREFIX!r}", text
        )
    tail = text[len(PREFIX):]
    if not tail:
        raise DIDError(ErrorKind.EMPTY_IDENTIFIER, "did:web identifier is empty", text)

    encoded_host, *encoded_path = tail.split(":")
    # Brackets are decoded only so that IPv6 literals are reported as such.
    host_text = (
        encoded_host.replace(ENCODED_COLON, ":").replace("%5B", "[").replace("%5D", "]")
    )
    host, port = parse_host_port(host_text)
    path = tuple(_decode_segment(segment) for segment in encoded_path)
    return WebPayload(host=host, port=port, path=path)


def format(payload: WebPayload) -> str:  # noqa: A001
    """Render *payload* as ``did:web:...``.

    Raises
    ------
    ContractViolationError
        If the payload holds an invalid host or port, or an empty path
        segment.
    """
    _check_payload(payload)
    encoded_host = render_host(payload.host, payload.port).replace(":", ENCODED_COLON)
    return ":".join([f"{PREFIX}{encoded_host}", *(percent.encode(s) for s in payload.path)])


def to_resolution_url(payload: WebPayload) -> str:
    """Return the HTTPS URL of the DID document for *payload*."""
    _check_payload(payload)
    url = f"https://{render_host(payload.host, payload.port)}"
    if payload.path:
        url += "/" + "/".join(percent.encode_url_path_segment(s) for s in payload.path)
    return url + WELL_KNOWN_SUFFIX


def equal(left: WebPayload, right: WebPayload) -> bool:
    """Host, port and path compared exactly; path order matters."""
    return (
        left.host == right.host
        and left.port == right.port
        and tuple(left.path) == tuple(right.path)
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decode_segment(segment: str) -> str:
    if not segment:
        raise PathEncodingError(segment, "path segments must not be empty")
    try:
        decoded = percent.decode(segment)
    except PercentEncodingError as exc:
        raise PathEncodingError(segment, exc.detail) from exc
    if percent.encode(decoded) != segment:
        raise PathEncodingError(
            segment, f"not in canonical form (expected {percent.encode(decoded)!r})"
        )
    return decoded


def _validate_host(host: HostKind) -> HostKind:
    parsed = parse_host(str(host))
    if type(parsed) is not type(host):
        raise DIDError(
            ErrorKind.INVALID_DOMAIN,
            f"{type(host).__name__} {str(host)!r} parses as a {type(parsed).__name__}",
            str(host),
        )
    return parsed


def _validate_port(port: object) -> None:
    if not isinstance(port, int) or isinstance(port, bool):
        raise DIDError(ErrorKind.INVALID_DOMAIN, f"port must be an int, got {port!r}")
    if not 0 <= port <= MAX_PORT:
        raise DIDError(ErrorKind.INVALID_DOMAIN, f"port {port} is out of range")


def _check_payload(payload: WebPayload) -> None:
    try:
        _validate_host(payload.host)
        if payload.port is not None:
            _validate_port(payload.port)
    except DIDError as exc:
        raise ContractViolationError(
            f"did:web payload holds an invalid host or port: {exc.detail}"
        ) from exc
    if any(not segment for segment in payload.path):
        raise ContractViolationError(
            f"did:web payload for {payload.host} holds an empty path segment"
        )


__all__ = [
    "ENCODED_COLON",
    "METHOD",
    "PREFIX",
    "WELL_KNOWN_SUFFIX",
    "WebPayload",
    "equal",
    "format",
    "from_host_and_path",
    "parse",
    "to_resolution_url",
]
