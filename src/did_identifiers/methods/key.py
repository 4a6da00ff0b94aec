"""did:key — public keys encoded directly in the identifier.

Encoding
--------
1. Look up the multicodec tag for the key type (``0xed`` Ed25519,
   ``0xe7`` secp256k1, ``0x1200`` P-256).
2. Prepend the varint encoding of the tag to the raw public key bytes.
3. Encode the result as base58btc multibase (leading ``z``).
4. Assemble: ``did:key:z<base58btc>``.

Ed25519 keys are always 32 bytes. secp256k1 and P-256 keys are accepted in
SEC1 compressed (33 bytes) or uncompressed (65 bytes) form, and are stored
exactly as given so that formatting reproduces the parsed text.

Reference: https://w3c-ccg.github.io/did-method-key/
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from did_identifiers.config import DEFAULT_CONFIG, ParserConfig
from did_identifiers.encoding import multiformat
from did_identifiers.encoding.varint import VarintError
from did_identifiers.errors import (
    ContractViolationError,
    DIDError,
    ErrorKind,
    InvalidKeyLengthError,
)

METHOD: str = "key"
PREFIX: str = "did:key:"

_COMPRESSED_EC_LENGTH = 33
_UNCOMPRESSED_EC_LENGTH = 65


class KeyType(str, Enum):
    """Public key algorithms supported by did:key."""

    ED25519 = "ed25519"
    SECP256K1 = "secp256k1"
    P256 = "p256"

    @property
    def multicodec(self) -> int:
        """The multicodec tag identifying this key type."""
        return _KEY_SPECS[self].tag

    @property
    def multicodec_name(self) -> str:
        """The multicodec table name, e.g. ``"ed25519-pub"``."""
        return _KEY_SPECS[self].codec_name

    @property
    def key_lengths(self) -> tuple[int, ...]:
        """Raw public key lengths accepted for this key type."""
        return _KEY_SPECS[self].lengths


@dataclass(frozen=True)
class _KeySpec:
    tag: int
    codec_name: str
    lengths: tuple[int, ...]


_KEY_SPECS = MappingProxyType(
    {
        KeyType.ED25519: _KeySpec(0xED, "ed25519-pub", (32,)),
        KeyType.SECP256K1: _KeySpec(
            0xE7, "secp256k1-pub", (_COMPRESSED_EC_LENGTH, _UNCOMPRESSED_EC_LENGTH)
        ),
        KeyType.P256: _KeySpec(
            0x1200, "p256-pub", (_COMPRESSED_EC_LENGTH, _UNCOMPRESSED_EC_LENGTH)
        ),
    }
)

_KEY_TYPE_BY_TAG = MappingProxyType({spec.tag: key_type for key_type, spec in _KEY_SPECS.items()})


@dataclass(frozen=True)
class KeyPayload:
    """The decoded content of a did:key identifier.

    Construct through :func:`from_public_key` or :func:`parse`; both check
    the key length. Building the dataclass directly skips that check, and
    :func:`format` then refuses to emit a mismatched key.

    Parameters
    ----------
    key_type:
        The public key algorithm.
    public_key:
        Raw public key bytes.
    """

    key_type: KeyType
    public_key: bytes

    @property
    def fingerprint(self) -> str:
        """The multibase method-specific identifier (``z...``)."""
        return _fingerprint(self)


def from_public_key(
    key_type: KeyType | str,
    public_key: bytes,
    config: ParserConfig | None = None,
) -> KeyPayload:
    """Build a :class:`KeyPayload` from raw public key bytes.

    Parameters
    ----------
    key_type:
        A :class:`KeyType` or its string value (``"ed25519"``, ...).
    public_key:
        Raw public key bytes.
    config:
        Optional parser configuration (uncompressed-key policy).

    Raises
    ------
    DIDError
        ``UNSUPPORTED_KEY_TYPE`` for an unknown *key_type*.
    InvalidKeyLengthError
        If *public_key* has the wrong length for *key_type*.
    """
    try:
        resolved = KeyType(key_type)
    except ValueError:
        raise DIDError(
            ErrorKind.UNSUPPORTED_KEY_TYPE,
            f"unsupported key type {key_type!r}; expected one of "
            f"{[member.value for member in KeyType]}",
        ) from None
    key_bytes = bytes(public_key)
    _check_length(resolved, len(key_bytes), config or DEFAULT_CONFIG)
    return KeyPayload(key_type=resolved, public_key=key_bytes)


def parse(text: str, config: ParserConfig | None = None) -> KeyPayload:
    """Parse a ``did:key:z...`` string.

    Raises
    ------
    DIDError
        ``MISSING_PREFIX``, ``EMPTY_IDENTIFIER``, ``BASE58_DECODE_ERROR``
        (including non-canonical base58btc text), ``INSUFFICIENT_BYTES``,
        ``MULTICODEC_DECODE_ERROR`` or ``UNSUPPORTED_KEY_TYPE``.
    InvalidKeyLengthError
        If the decoded key has the wrong length for its type.
    """
    if not text.startswith(PREFIX):
        raise DIDError(
            ErrorKind.MISSING_PREFIX, f"expected text to start with {PREFIX!r}", text
        )
    encoded = text[len(PREFIX):]
    if not encoded:
        raise DIDError(ErrorKind.EMPTY_IDENTIFIER, "did:key identifier is empty", text)

    try:
        data, base = multiformat.text_decode(encoded)
    except multiformat.MultibaseError as exc:
        raise DIDError(ErrorKind.BASE58_DECODE_ERROR, str(exc), text) from exc
    if base != multiformat.BASE58BTC:
        raise DIDError(
            ErrorKind.BASE58_DECODE_ERROR,
            f"did:key requires base58btc multibase ('z'), got {base}",
            text,
        )
    # The decoder drops leading '1' digits (zero bytes); the tag is never zero.
    if multiformat.text_encode(data, base) != encoded:
        raise DIDError(
            ErrorKind.BASE58_DECODE_ERROR,
            f"{encoded!r} is not the canonical base58btc spelling of its bytes",
            text,
        )
    if len(data) < 2:
        raise DIDError(
            ErrorKind.INSUFFICIENT_BYTES,
            f"decoded identifier holds {len(data)} byte(s), need at least 2",
            text,
        )

    try:
        tag, public_key = multiformat.codec_decode(data)
    except VarintError as exc:
        raise DIDError(ErrorKind.MULTICODEC_DECODE_ERROR, str(exc), text) from exc
    key_type = _KEY_TYPE_BY_TAG.get(tag)
    if key_type is None:
        raise DIDError(
            ErrorKind.UNSUPPORTED_KEY_TYPE, f"unsupported multicodec tag 0x{tag:x}", text
        )

    _check_length(key_type, len(public_key), config or DEFAULT_CONFIG)
    return KeyPayload(key_type=key_type, public_key=public_key)


def format(payload: KeyPayload) -> str:  # noqa: A001
    """Render *payload* as ``did:key:z...``.

    Raises
    ------
    ContractViolationError
        If the payload's key length does not match its key type.
    """
    return f"{PREFIX}{_fingerprint(payload)}"


def equal(left: KeyPayload, right: KeyPayload) -> bool:
    """Exact comparison of key type and raw key bytes."""
    return left.key_type == right.key_type and left.public_key == right.public_key


def verification_method_id(payload: KeyPayload) -> str:
    """The conventional verification method id, ``did:key:<fp>#<fp>``."""
    fingerprint = _fingerprint(payload)
    return f"{PREFIX}{fingerprint}#{fingerprint}"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fingerprint(payload: KeyPayload) -> str:
    spec = _KEY_SPECS.get(payload.key_type)
    if spec is None:
        raise ContractViolationError(f"unknown key type {payload.key_type!r}")
    if len(payload.public_key) not in spec.lengths:
        raise ContractViolationError(
            f"{spec.codec_name} payload holds a {len(payload.public_key)}-byte "
            f"key; expected {spec.lengths}"
        )
    prefixed = multiformat.codec_encode(spec.tag, payload.public_key)
    return multiformat.text_encode(prefixed, multiformat.BASE58BTC)


def _check_length(key_type: KeyType, actual: int, config: ParserConfig) -> None:
    expected = key_type.key_lengths
    if not config.allow_uncompressed_keys:
        expected = tuple(length for length in expected if length != _UNCOMPRESSED_EC_LENGTH)
    if actual not in expected:
        raise InvalidKeyLengthError(key_type.value, expected, actual)


__all__ = [
    "METHOD",
    "PREFIX",
    "KeyPayload",
    "KeyType",
    "equal",
    "format",
    "from_public_key",
    "parse",
    "verification_method_id",
]
