"""Per-method codecs: did:key, did:plc and did:web.

Each submodule is a set of pure functions over an immutable payload type and
exposes the same core surface: ``parse``, ``format`` and ``equal``, plus a
validating constructor.

Submodules
----------
key
    :class:`KeyPayload`, :class:`KeyType`, ``from_public_key``.
plc
    :class:`PlcPayload`, ``from_identifier``, ``normalize``.
web
    :class:`WebPayload`, ``from_host_and_path``, ``to_resolution_url``.
"""
from __future__ import annotations

from did_identifiers.methods import key, plc, web
from did_identifiers.methods.key import KeyPayload, KeyType
from did_identifiers.methods.plc import PlcPayload
from did_identifiers.methods.web import WebPayload

__all__ = [
    "KeyPayload",
    "KeyType",
    "PlcPayload",
    "WebPayload",
    "key",
    "plc",
    "web",
]
