"""Adapters between did:key payloads and ``cryptography`` public key objects.

:func:`from_crypto_key` turns an Ed25519, secp256k1 or P-256 public key into
a :class:`~did_identifiers.methods.key.KeyPayload` (EC keys use the 33-byte
compressed point). :func:`to_crypto_key` goes the other way and, for EC
keys, checks that the encoded point lies on the curve.

Optional dependency
-------------------
Requires the ``cryptography`` package. Install via::

    pip install did-identifiers[crypto]
"""
from __future__ import annotations

from did_identifiers.errors import DIDError, ErrorKind
from did_identifiers.methods.key import KeyPayload, KeyType, from_public_key

try:
    from cryptography.hazmat.primitives.asymmetric import ec
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
    from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

    _CRYPTO_AVAILABLE = True
except ImportError:
    _CRYPTO_AVAILABLE = False


def _require_crypto() -> None:
    if not _CRYPTO_AVAILABLE:
        raise ImportError(
            "The 'cryptography' package is required for key object conversion. "
            "Install it with: pip install did-identifiers[crypto]"
        )


def _curves() -> dict[KeyType, "ec.EllipticCurve"]:
    return {KeyType.SECP256K1: ec.SECP256K1(), KeyType.P256: ec.SECP256R1()}


def from_crypto_key(public_key: object) -> KeyPayload:
    """Build a :class:`KeyPayload` from a ``cryptography`` public key.

    Parameters
    ----------
    public_key:
        An ``Ed25519PublicKey`` or an ``EllipticCurvePublicKey`` on
        secp256k1 or secp256r1 (P-256).

    Raises
    ------
    ImportError
        If ``cryptography`` is not installed.
    DIDError
        ``UNSUPPORTED_KEY_TYPE`` for any other key type or curve.
    """
    _require_crypto()
    if isinstance(public_key, Ed25519PublicKey):
        raw = public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)
        return from_public_key(KeyType.ED25519, raw)
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        for key_type, curve in _curves().items():
            if public_key.curve.name == curve.name:
                point = public_key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)
                return from_public_key(key_type, point)
        raise DIDError(
            ErrorKind.UNSUPPORTED_KEY_TYPE,
            f"unsupported elliptic curve {public_key.curve.name!r}",
        )
    raise DIDError(
        ErrorKind.UNSUPPORTED_KEY_TYPE,
        f"unsupported public key object {type(public_key).__name__}",
    )


def to_crypto_key(payload: KeyPayload) -> object:
    """Load the public key held by *payload* as a ``cryptography`` object.

    Raises
    ------
    ImportError
        If ``cryptography`` is not installed.
    ValueError
        If the key bytes are not a valid key for the payload's key type
        (for EC keys: the point is not on the curve).
    """
    _require_crypto()
    if payload.key_type is KeyType.ED25519:
        return Ed25519PublicKey.from_public_bytes(payload.public_key)
    curve = _curves()[payload.key_type]
    return ec.EllipticCurvePublicKey.from_encoded_point(curve, payload.public_key)


__all__ = ["from_crypto_key", "to_crypto_key"]
