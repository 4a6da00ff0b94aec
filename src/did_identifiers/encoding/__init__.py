"""Byte- and character-level encodings used by the DID method codecs.

Submodules
----------
varint
    Unsigned LEB128 integers for multicodec tags.
percent
    Strict percent-encoding for did:web segments and URLs.
multiformat
    Multicodec framing and multibase text (``py-multibase``).
"""
from __future__ import annotations

from did_identifiers.encoding import multiformat, percent, varint

__all__ = ["multiformat", "percent", "varint"]
