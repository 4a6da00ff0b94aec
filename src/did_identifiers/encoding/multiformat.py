"""Multicodec framing and multibase text encoding.

Two small layers sit between raw key bytes and the did:key text form:

* multicodec: ``varint(tag) ++ payload`` (:func:`codec_encode`,
  :func:`codec_decode`);
* multibase: a one-character base prefix followed by the encoded bytes
  (:func:`text_encode`, :func:`text_decode`), backed by ``py-multibase``.
"""
from __future__ import annotations

import multibase

from did_identifiers.encoding import varint

BASE58BTC: str = "base58btc"


class MultibaseError(ValueError):
    """Raised when text is not valid multibase."""


def codec_encode(tag: int, payload: bytes) -> bytes:
    """Prefix *payload* with the varint encoding of *tag*."""
    return varint.encode(tag) + payload


def codec_decode(data: bytes) -> tuple[int, bytes]:
    """Split *data* into its multicodec tag and the remaining payload.

    Raises
    ------
    varint.VarintError
        If *data* does not begin with a valid varint.
    """
    tag, consumed = varint.decode(data)
    return tag, data[consumed:]


def text_encode(data: bytes, base: str = BASE58BTC) -> str:
    """Render *data* as multibase text in the named *base*."""
    return multibase.encode(base, data).decode("ascii")


def text_decode(text: str) -> tuple[bytes, str]:
    """Decode multibase *text*.

    Returns
    -------
    tuple[bytes, str]
        ``(data, base)`` where *base* is the multibase encoding name
        (for example ``"base58btc"``).

    Raises
    ------
    MultibaseError
        If the base prefix is unknown or the body does not decode.
    """
    if not text:
        raise MultibaseError("empty multibase text")
    try:
        base = multibase.get_codec(text).encoding
        data = multibase.decode(text)
    except Exception as exc:
        raise MultibaseError(f"cannot decode multibase text {text!r}: {exc}") from exc
    return bytes(data), base


__all__ = [
    "BASE58BTC",
    "MultibaseError",
    "codec_decode",
    "codec_encode",
    "text_decode",
    "text_encode",
]
