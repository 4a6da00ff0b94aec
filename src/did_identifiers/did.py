"""DID — the method-tagged identifier value and its dispatcher.

:func:`parse` splits ``did:<method>:<method-specific-id>``, picks the codec
named by ``<method>`` and returns a :class:`DID` wrapping that codec's
payload. Once a method has been selected its error is final: there is no
fallback to another method.

Example
-------
::

    from did_identifiers import parse, try_parse

    did = parse("did:web:localhost%3A8080")
    assert did.method == "web"
    assert did.payload.port == 8080
    assert str(did) == "did:web:localhost%3A8080"

    result = try_parse("did:unsupported:123")
    assert not result.ok
    assert result.error.kind == "unsupported_method"
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType, ModuleType

from did_identifiers.config import ParserConfig
from did_identifiers.errors import DIDError, ErrorKind
from did_identifiers.hosts import HostKind
from did_identifiers.methods import key, plc, web
from did_identifiers.methods.key import KeyPayload, KeyType
from did_identifiers.methods.plc import PlcPayload
from did_identifiers.methods.web import WebPayload

logger = logging.getLogger(__name__)

DID_SCHEME: str = "did"

Payload = KeyPayload | PlcPayload | WebPayload

_CODECS_BY_METHOD: MappingProxyType[str, ModuleType] = MappingProxyType(
    {key.METHOD: key, plc.METHOD: plc, web.METHOD: web}
)
_CODECS_BY_PAYLOAD: MappingProxyType[type, ModuleType] = MappingProxyType(
    {KeyPayload: key, PlcPayload: plc, WebPayload: web}
)

SUPPORTED_METHODS: tuple[str, ...] = tuple(_CODECS_BY_METHOD)


@dataclass(frozen=True, eq=False)
class DID:
    """A parsed Decentralized Identifier.

    Exactly one payload is held; its type determines the method. Two DIDs
    are equal when they have the same method and their payloads compare
    equal under that method's rules.

    Parameters
    ----------
    payload:
        A :class:`~did_identifiers.methods.key.KeyPayload`,
        :class:`~did_identifiers.methods.plc.PlcPayload` or
        :class:`~did_identifiers.methods.web.WebPayload`.
    """

    payload: Payload

    def __post_init__(self) -> None:
        if type(self.payload) not in _CODECS_BY_PAYLOAD:
            raise TypeError(
                f"DID payload must be one of "
                f"{[cls.__name__ for cls in _CODECS_BY_PAYLOAD]}, "
                f"got {type(self.payload).__name__}"
            )

    @property
    def method(self) -> str:
        """The method name: ``"key"``, ``"plc"`` or ``"web"``."""
        return _codec_for(self.payload).METHOD

    # ------------------------------------------------------------------
    # Validating constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_public_key(
        cls,
        key_type: KeyType | str,
        public_key: bytes,
        config: ParserConfig | None = None,
    ) -> "DID":
        """Build a did:key DID; see :func:`did_identifiers.methods.key.from_public_key`."""
        return cls(key.from_public_key(key_type, public_key, config))

    @classmethod
    def from_identifier(cls, identifier: str, config: ParserConfig | None = None) -> "DID":
        """Build a did:plc DID; see :func:`did_identifiers.methods.plc.from_identifier`."""
        policy = config.plc if config is not None else None
        return cls(plc.from_identifier(identifier, policy))

    @classmethod
    def from_host_and_path(
        cls,
        host: str | HostKind,
        path: Sequence[str] = (),
        port: int | None = None,
    ) -> "DID":
        """Build a did:web DID; see :func:`did_identifiers.methods.web.from_host_and_path`."""
        return cls(web.from_host_and_path(host, path, port))

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DID):
            return NotImplemented
        return equal(self, other)

    def __hash__(self) -> int:
        return hash((self.method, self.payload))


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`try_parse`.

    Parameters
    ----------
    ok:
        ``True`` when the text parsed.
    did:
        The parsed :class:`DID`, or ``None`` on failure.
    error:
        The :class:`~did_identifiers.errors.DIDError` on failure, ``None``
        otherwise.
    """

    ok: bool
    did: DID | None = None
    error: DIDError | None = None

    @property
    def kind(self) -> ErrorKind | None:
        """The error kind, or ``None`` on success."""
        return self.error.kind if self.error is not None else None


def parse(text: str, config: ParserConfig | None = None) -> DID:
    """Parse *text* into a :class:`DID`.

    Parameters
    ----------
    text:
        A ``did:<method>:<method-specific-id>`` string.
    config:
        Optional :class:`~did_identifiers.config.ParserConfig`.

    Raises
    ------
    DIDError
        ``MALFORMED_DID`` when *text* has fewer than three colon-separated
        segments or does not start with ``did``; ``UNSUPPORTED_METHOD`` for
        an unknown method; otherwise the error of the selected method.
    """
    segments = text.split(":")
    if len(segments) < 3 or segments[0] != DID_SCHEME or not segments[1]:
        logger.debug("Rejected %r: not a did:<method>:<id> string", text)
        raise DIDError(
            ErrorKind.MALFORMED_DID,
            "expected did:<method>:<method-specific-id>",
            text,
        )

    method = segments[1]
    codec = _CODECS_BY_METHOD.get(method)
    if codec is None:
        logger.debug("Rejected %r: unsupported method %r", text, method)
        raise DIDError(
            ErrorKind.UNSUPPORTED_METHOD,
            f"unsupported DID method {method!r}; supported: {list(SUPPORTED_METHODS)}",
            text,
        )

    # Re-join so colons inside the method-specific id survive the split.
    method_text = ":".join([DID_SCHEME, method, ":".join(segments[2:])])
    try:
        payload = codec.parse(method_text, config)
    except DIDError as exc:
        logger.debug("Rejected %r as did:%s: %s", text, method, exc)
        raise
    return DID(payload)


def try_parse(text: str, config: ParserConfig | None = None) -> ParseResult:
    """Like :func:`parse`, but report malformed input in a :class:`ParseResult`."""
    try:
        did = parse(text, config)
    except DIDError as exc:
        return ParseResult(ok=False, error=exc)
    return ParseResult(ok=True, did=did)


def format(did: DID) -> str:  # noqa: A001
    """Render *did* in its canonical text form."""
    return _codec_for(did.payload).format(did.payload)


def equal(left: DID, right: DID) -> bool:
    """Structural equality; DIDs of different methods are never equal."""
    if type(left.payload) is not type(right.payload):
        return False
    return _codec_for(left.payload).equal(left.payload, right.payload)


def is_valid(text: str, config: ParserConfig | None = None) -> bool:
    """Return ``True`` when *text* parses as a supported DID."""
    return try_parse(text, config).ok


def _codec_for(payload: Payload) -> ModuleType:
    return _CODECS_BY_PAYLOAD[type(payload)]


__all__ = [
    "DID",
    "DID_SCHEME",
    "SUPPORTED_METHODS",
    "ParseResult",
    "Payload",
    "equal",
    "format",
    "is_valid",
    "parse",
    "try_parse",
]
