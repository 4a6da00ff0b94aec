"""did-identifiers — parse, format and compare did:key, did:plc and did:web.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import did_identifiers
>>> did_identifiers.__version__
'0.1.0'

Quick start
-----------
::

    from did_identifiers import DID, KeyType, parse, try_parse
    from did_identifiers.methods import web

    did = parse("did:web:example.com:users:alice")
    did.payload.path                 # ('users', 'alice')
    web.to_resolution_url(did.payload)

    key_did = DID.from_public_key(KeyType.ED25519, public_key_bytes)
    str(key_did)                     # 'did:key:z6Mk...'

    result = try_parse("did:plc:!!")
    result.kind                      # ErrorKind.TOO_SHORT
"""
from __future__ import annotations

__version__: str = "0.1.0"

from did_identifiers import methods
from did_identifiers.config import (
    CANONICAL_PLC_POLICY,
    DEFAULT_CONFIG,
    ParserConfig,
    PlcPolicy,
)
from did_identifiers.did import (
    DID,
    SUPPORTED_METHODS,
    ParseResult,
    equal,
    format,
    is_valid,
    parse,
    try_parse,
)
from did_identifiers.errors import (
    ContractViolationError,
    DIDError,
    ErrorKind,
    InvalidCharacterError,
    InvalidKeyLengthError,
    PathEncodingError,
    PercentEncodingError,
)
from did_identifiers.hosts import Domain, Hostname
from did_identifiers.methods.key import KeyPayload, KeyType
from did_identifiers.methods.plc import PlcPayload
from did_identifiers.methods.web import WebPayload

__all__ = [
    # version
    "__version__",
    # dispatcher
    "DID",
    "ParseResult",
    "SUPPORTED_METHODS",
    "equal",
    "format",
    "is_valid",
    "parse",
    "try_parse",
    # payloads
    "Domain",
    "Hostname",
    "KeyPayload",
    "KeyType",
    "PlcPayload",
    "WebPayload",
    "methods",
    # configuration
    "CANONICAL_PLC_POLICY",
    "DEFAULT_CONFIG",
    "ParserConfig",
    "PlcPolicy",
    # errors
    "ContractViolationError",
    "DIDError",
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidKeyLengthError",
    "PathEncodingError",
    "PercentEncodingError",
]
