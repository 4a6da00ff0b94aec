"""Command-line interface for did-identifiers."""
from __future__ import annotations

from did_identifiers.cli.main import cli

__all__ = ["cli"]
