"""Unsigned LEB128 varints, as used for multicodec tags.

Each byte carries seven bits of the value, least significant group first.
The high bit is set on every byte except the last.

Only minimal encodings are accepted by :func:`decode`: a trailing ``0x00``
continuation group would let two byte strings name the same tag.
"""
from __future__ import annotations

_CONTINUATION: int = 0x80
_PAYLOAD_MASK: int = 0x7F

# Multicodec caps varints at nine bytes (63 bits of payload).
MAX_VARINT_BYTES: int = 9


class VarintError(ValueError):
    """Raised when a byte string does not start with a valid varint."""


def encode(value: int) -> bytes:
    """Encode a non-negative integer as a varint.

    Raises
    ------
    ValueError
        If *value* is negative.
    """
    if value < 0:
        raise ValueError(f"varint value must be non-negative, got {value}")
    out = bytearray()
    while True:
        group = value & _PAYLOAD_MASK
        value >>= 7
        if value:
            out.append(group | _CONTINUATION)
        else:
            out.append(group)
            return bytes(out)


def decode(data: bytes) -> tuple[int, int]:
    """Decode the varint at the start of *data*.

    Returns
    -------
    tuple[int, int]
        ``(value, consumed)`` where *consumed* is the number of bytes read.

    Raises
    ------
    VarintError
        If *data* is empty, ends mid-varint, exceeds :data:`MAX_VARINT_BYTES`
        or is not minimally encoded.
    """
    value = 0
    for index, byte in enumerate(data):
        if index >= MAX_VARINT_BYTES:
            break
        value |= (byte & _PAYLOAD_MASK) << (7 * index)
        if not byte & _CONTINUATION:
            if byte == 0 and index > 0:
                raise VarintError("varint is not minimally encoded")
            return value, index + 1
    if not data:
        raise VarintError("cannot decode varint from empty input")
    if len(data) > MAX_VARINT_BYTES:
        raise VarintError(f"varint longer than {MAX_VARINT_BYTES} bytes")
    raise VarintError("input ends before the varint terminates")


__all__ = ["MAX_VARINT_BYTES", "VarintError", "decode", "encode"]
