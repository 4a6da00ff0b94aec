"""ParserConfig and PlcPolicy — tunable validation bounds.

The defaults accept every identifier the DID grammars allow. Operators that
only deal with canonical did:plc identifiers can tighten the length policy::

    from did_identifiers import parse
    from did_identifiers.config import CANONICAL_PLC_POLICY, ParserConfig

    strict = ParserConfig(plc=CANONICAL_PLC_POLICY)
    parse("did:plc:yk4dd2qkboz2yv6tpubpc6co", config=strict)

Both models are frozen, so a single instance can be shared between threads.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLC_MIN_LENGTH: int = 4
PLC_MAX_LENGTH: int = 64
PLC_CANONICAL_LENGTH: int = 24


class PlcPolicy(BaseModel):
    """Length bounds applied to did:plc identifiers.

    Parameters
    ----------
    min_length:
        Shortest identifier accepted (inclusive).
    max_length:
        Longest identifier accepted (inclusive).
    """

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=PLC_MIN_LENGTH, ge=1)
    max_length: int = Field(default=PLC_MAX_LENGTH, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "PlcPolicy":
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed "
                f"max_length ({self.max_length})"
            )
        return self


DEFAULT_PLC_POLICY = PlcPolicy()
CANONICAL_PLC_POLICY = PlcPolicy(
    min_length=PLC_CANONICAL_LENGTH, max_length=PLC_CANONICAL_LENGTH
)


class ParserConfig(BaseModel):
    """Options threaded through :func:`did_identifiers.parse`.

    Parameters
    ----------
    plc:
        Length policy for did:plc identifiers.
    allow_uncompressed_keys:
        When ``False``, 65-byte uncompressed secp256k1/P-256 keys are
        rejected by did:key parsing and construction.
    """

    model_config = ConfigDict(frozen=True)

    plc: PlcPolicy = Field(default_factory=PlcPolicy)
    allow_uncompressed_keys: bool = True


DEFAULT_CONFIG = ParserConfig()


__all__ = [
    "CANONICAL_PLC_POLICY",
    "DEFAULT_CONFIG",
    "DEFAULT_PLC_POLICY",
    "PLC_CANONICAL_LENGTH",
    "PLC_MAX_LENGTH",
    "PLC_MIN_LENGTH",
    "ParserConfig",
    "PlcPolicy",
]
