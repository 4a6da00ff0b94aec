"""Percent-encoding helpers for did:web identifiers and resolution URLs.

Encoding leaves the RFC 3986 unreserved set (ASCII letters, digits and
``-._~``) untouched and escapes every other UTF-8 byte as ``%XX`` with
uppercase hex digits. Decoding is strict: a ``%`` that is not followed by
two hex digits is an error instead of being passed through literally, and
the decoded bytes must be valid UTF-8.
"""
from __future__ import annotations

import re
import urllib.parse

from did_identifiers.errors import PercentEncodingError

_ESCAPE = re.compile(r"%(?P<hex>.{0,2})", re.DOTALL)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def encode(text: str) -> str:
    """Percent-encode *text*, escaping everything outside the unreserved set.

    ``/`` and ``:`` are escaped too, so the result is safe to use as a single
    colon-separated DID segment.
    """
    return urllib.parse.quote(text, safe="")


def encode_url_path_segment(text: str) -> str:
    """Percent-encode *text* for a URL path, leaving ``/`` verbatim."""
    return urllib.parse.quote(text, safe="/")


def decode(segment: str) -> str:
    """Decode every ``%XX`` escape in *segment*.

    Raises
    ------
    PercentEncodingError
        If an escape is truncated or holds non-hex digits, or if the decoded
        bytes are not valid UTF-8.
    """
    for match in _ESCAPE.finditer(segment):
        digits = match.group("hex")
        if len(digits) < 2:
            raise PercentEncodingError(
                segment, f"truncated escape at position {match.start()}"
            )
        if not all(char in _HEX_DIGITS for char in digits):
            raise PercentEncodingError(
                segment, f"non-hex escape {match.group(0)!r} at position {match.start()}"
            )
    raw = urllib.parse.unquote_to_bytes(segment)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PercentEncodingError(segment, "escapes do not decode to UTF-8") from exc


__all__ = ["decode", "encode", "encode_url_path_segment"]
