"""CLI entry point for did-identifiers.

Invoked as::

    did-identifiers [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m did_identifiers.cli.main

Commands
--------
parse            Parse a DID and show its structure
normalize        Print the canonical text of a DID
key-from-hex     Build a did:key from a hex-encoded public key
resolution-url   Print the HTTPS URL of a did:web document
version          Show version information
"""
from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from did_identifiers.config import CANONICAL_PLC_POLICY, ParserConfig
from did_identifiers.did import DID, parse
from did_identifiers.errors import DIDError
from did_identifiers.methods import key, web
from did_identifiers.methods.key import KeyPayload, KeyType
from did_identifiers.methods.plc import PlcPayload
from did_identifiers.methods.web import WebPayload

console = Console()


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="did-identifiers")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """Parse, format and inspect did:key, did:plc and did:web identifiers"""
    logging.basicConfig(level=getattr(logging, log_level.upper()))


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from did_identifiers import __version__

    console.print(f"[bold]did-identifiers[/bold] v{__version__}")


# ------------------------------------------------------------------
# parse
# ------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("did_text")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
@click.option(
    "--canonical-plc",
    is_flag=True,
    help="Require did:plc identifiers to be exactly 24 characters.",
)
def parse_command(did_text: str, as_json: bool, canonical_plc: bool) -> None:
    """Parse DID_TEXT and show its method and payload."""
    config = ParserConfig(plc=CANONICAL_PLC_POLICY) if canonical_plc else None
    did = _parse_or_exit(did_text, config)
    fields = _describe(did)

    if as_json:
        click.echo(json.dumps(fields, indent=2))
        return

    table = Table(title=f"did:{did.method}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in fields.items():
        table.add_row(name, "(none)" if value is None else str(value))
    console.print(table)


# ------------------------------------------------------------------
# normalize
# ------------------------------------------------------------------


@cli.command(name="normalize")
@click.argument("did_text")
def normalize_command(did_text: str) -> None:
    """Print the canonical text form of DID_TEXT."""
    click.echo(str(_parse_or_exit(did_text)))


# ------------------------------------------------------------------
# key-from-hex
# ------------------------------------------------------------------


@cli.command(name="key-from-hex")
@click.argument("key_type", type=click.Choice([member.value for member in KeyType]))
@click.argument("public_key_hex")
def key_from_hex_command(key_type: str, public_key_hex: str) -> None:
    """Build a did:key from KEY_TYPE and a hex-encoded PUBLIC_KEY_HEX."""
    try:
        public_key = bytes.fromhex(public_key_hex)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] public key is not valid hex: {exc}")
        sys.exit(1)
    try:
        did = DID.from_public_key(key_type, public_key)
    except DIDError as exc:
        console.print(f"[red]Error ({exc.kind.value}):[/red] {escape(exc.detail)}")
        sys.exit(1)
    click.echo(str(did))


# ------------------------------------------------------------------
# resolution-url
# ------------------------------------------------------------------


@cli.command(name="resolution-url")
@click.argument("did_text")
def resolution_url_command(did_text: str) -> None:
    """Print the HTTPS URL of the DID document for a did:web DID_TEXT."""
    did = _parse_or_exit(did_text)
    if not isinstance(did.payload, WebPayload):
        console.print(
            f"[red]Error:[/red] only did:web has a resolution URL, got did:{did.method}"
        )
        sys.exit(1)
    click.echo(web.to_resolution_url(did.payload))


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _parse_or_exit(did_text: str, config: ParserConfig | None = None) -> DID:
    try:
        return parse(did_text, config)
    except DIDError as exc:
        console.print(f"[red]Error ({exc.kind.value}):[/red] {escape(exc.detail)}")
        sys.exit(1)


def _describe(did: DID) -> dict[str, object]:
    payload = did.payload
    fields: dict[str, object] = {"did": str(did), "method": did.method}
    if isinstance(payload, KeyPayload):
        fields["key_type"] = payload.key_type.value
        fields["multicodec"] = payload.key_type.multicodec_name
        fields["public_key_hex"] = payload.public_key.hex()
        fields["verification_method"] = key.verification_method_id(payload)
    elif isinstance(payload, PlcPayload):
        fields["identifier"] = payload.identifier
    elif isinstance(payload, WebPayload):
        fields["host"] = str(payload.host)
        fields["port"] = payload.port
        fields["path"] = list(payload.path)
        fields["resolution_url"] = web.to_resolution_url(payload)
    return fields


if __name__ == "__main__":
    cli()
