"""did:plc — ledger-anchored identifiers.

A did:plc identifier is a lowercase base32 string (``a-z`` and ``2-7``).
Identifiers are case-insensitive: parsing folds them to lowercase, and
:func:`equal` folds both sides so that payloads built by hand still compare
correctly.

Length bounds come from :class:`~did_identifiers.config.PlcPolicy`. The
default accepts 4 to 64 characters; ``CANONICAL_PLC_POLICY`` pins the length
to the 24 characters issued by the PLC directory.
"""
from __future__ import annotations

import string
from dataclasses import dataclass

from did_identifiers.config import DEFAULT_PLC_POLICY, ParserConfig, PlcPolicy
from did_identifiers.errors import DIDError, ErrorKind, InvalidCharacterError

METHOD: str = "plc"
PREFIX: str = "did:plc:"

BASE32_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz234567")

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True, eq=False)
class PlcPayload:
    """The identifier of a did:plc DID (stored lowercase after parsing)."""

    identifier: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlcPayload):
            return NotImplemented
        return equal(self, other)

    def __hash__(self) -> int:
        return hash(normalize(self.identifier))


def normalize(identifier: str) -> str:
    """Fold the ASCII letters of *identifier* to lowercase."""
    return identifier.translate(_ASCII_FOLD)


def from_identifier(identifier: str, policy: PlcPolicy | None = None) -> PlcPayload:
    """Validate *identifier* and wrap it in a :class:`PlcPayload`.

    Raises
    ------
    DIDError
        ``EMPTY_IDENTIFIER``, ``TOO_SHORT`` or ``TOO_LONG``.
    InvalidCharacterError
        If a character falls outside the base32 alphabet.
    """
    policy = policy or DEFAULT_PLC_POLICY
    if not identifier:
        raise DIDError(ErrorKind.EMPTY_IDENTIFIER, "did:plc identifier is empty", identifier)
    if len(identifier) < policy.min_length:
        raise DIDError(
            ErrorKind.TOO_SHORT,
            f"identifier has {len(identifier)} characters, minimum is {policy.min_length}",
            identifier,
        )
    if len(identifier) > policy.max_length:
        raise DIDError(
            ErrorKind.TOO_LONG,
            f"identifier has {len(identifier)} characters, maximum is {policy.max_length}",
            identifier,
        )
    folded = normalize(identifier)
    for position, (original, char) in enumerate(zip(identifier, folded)):
        if char not in BASE32_ALPHABET:
            raise InvalidCharacterError(original, position, identifier)
    return PlcPayload(identifier=folded)


def parse(text: str, config: ParserConfig | None = None) -> PlcPayload:
    """Parse a ``did:plc:<identifier>`` string.

    Raises
    ------
    DIDError
        ``MISSING_PREFIX`` when *text* is not a did:plc string, otherwise any
        error raised by :func:`from_identifier`.
    """
    if not text.startswith(PREFIX):
        raise DIDError(
            ErrorKind.MISSING_PREFIX, f"expected text to start with {PREFIX!r}", text
        )
    policy = config.plc if config is not None else None
    return from_identifier(text[len(PREFIX):], policy)


def format(payload: PlcPayload) -> str:  # noqa: A001
    """Render *payload* as ``did:plc:<identifier>`` without transformation."""
    return f"{PREFIX}{payload.identifier}"


def equal(left: PlcPayload, right: PlcPayload) -> bool:
    """Case-insensitive comparison of two identifiers."""
    return normalize(left.identifier) == normalize(right.identifier)


__all__ = [
    "BASE32_ALPHABET",
    "METHOD",
    "PREFIX",
    "PlcPayload",
    "equal",
    "format",
    "from_identifier",
    "normalize",
    "parse",
]
