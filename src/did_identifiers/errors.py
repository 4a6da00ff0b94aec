"""Error kinds and exceptions raised while parsing or formatting DIDs.

Every rejection of malformed input is a :class:`DIDError` carrying an
:class:`ErrorKind`. Callers that prefer not to use exceptions can go through
:func:`did_identifiers.try_parse`, which wraps the same error in a
:class:`~did_identifiers.did.ParseResult`.

:class:`ContractViolationError` is deliberately *not* a :class:`DIDError`:
it signals a caller bug (a payload built without validation), not bad input.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying why a DID was rejected."""

    # dispatcher
    MALFORMED_DID = "malformed_did"
    UNSUPPORTED_METHOD = "unsupported_method"
    # shared by the method codecs
    MISSING_PREFIX = "missing_prefix"
    EMPTY_IDENTIFIER = "empty_identifier"
    # did:key
    BASE58_DECODE_ERROR = "base58_decode_error"
    INSUFFICIENT_BYTES = "insufficient_bytes"
    MULTICODEC_DECODE_ERROR = "multicodec_decode_error"
    UNSUPPORTED_KEY_TYPE = "unsupported_key_type"
    INVALID_KEY_LENGTH = "invalid_key_length"
    # did:plc
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_CHARACTER = "invalid_character"
    # did:web
    INVALID_DOMAIN = "invalid_domain"
    UNSUPPORTED_HOST_FORM = "unsupported_host_form"
    PERCENT_ENCODING_ERROR = "percent_encoding_error"
    PATH_ENCODING_ERROR = "path_encoding_error"


class DIDError(ValueError):
    """Raised when a DID (or one of its parts) is malformed.

    Parameters
    ----------
    kind:
        The :class:`ErrorKind` describing the failure.
    detail:
        Human-readable explanation.
    value:
        The offending input, when one is available.
    """

    def __init__(self, kind: ErrorKind, detail: str, value: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.value = value
        super().__init__(f"{kind.value}: {detail}")


class InvalidKeyLengthError(DIDError):
    """Raised when a public key does not have a length accepted by its key type."""

    def __init__(self, key_type: str, expected: tuple[int, ...], actual: int) -> None:
        self.key_type = key_type
        self.expected = expected
        self.actual = actual
        accepted = " or ".join(str(length) for length in expected)
        super().__init__(
            ErrorKind.INVALID_KEY_LENGTH,
            f"{key_type} public key must be {accepted} bytes, got {actual}",
        )


class InvalidCharacterError(DIDError):
    """Raised when an identifier contains a character outside its alphabet."""

    def __init__(self, character: str, position: int, value: str) -> None:
        self.character = character
        self.position = position
        super().__init__(
            ErrorKind.INVALID_CHARACTER,
            f"invalid character {character!r} at position {position}",
            value,
        )


class PercentEncodingError(DIDError):
    """Raised when a percent-encoded string holds a malformed ``%XX`` escape."""

    def __init__(self, segment: str, reason: str) -> None:
        self.segment = segment
        super().__init__(
            ErrorKind.PERCENT_ENCODING_ERROR,
            f"{reason} in {segment!r}",
            segment,
        )


class PathEncodingError(DIDError):
    """Raised when a did:web path segment cannot be decoded.

    ``segment`` is the segment as it appeared in the DID text.
    """

    def __init__(self, segment: str, reason: str) -> None:
        self.segment = segment
        super().__init__(
            ErrorKind.PATH_ENCODING_ERROR,
            f"path segment {segment!r}: {reason}",
            segment,
        )


class ContractViolationError(RuntimeError):
    """Raised when a payload that bypassed validation reaches a formatter."""


__all__ = [
    "ContractViolationError",
    "DIDError",
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidKeyLengthError",
    "PathEncodingError",
    "PercentEncodingError",
]
