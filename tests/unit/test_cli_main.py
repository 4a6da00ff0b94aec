"""Tests for did_identifiers.cli.main — CLI commands via Click test runner."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from did_identifiers.cli.main import cli


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# Root CLI
# ---------------------------------------------------------------------------


class TestRootCLI:
    def test_help_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "did-identifiers" in result.output.lower()

    def test_log_level_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "DEBUG", "normalize", "did:plc:abcd"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_json_output_for_web(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "did:web:localhost%3A8080:users", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["method"] == "web"
        assert data["host"] == "localhost"
        assert data["port"] == 8080
        assert data["path"] == ["users"]
        assert data["resolution_url"] == "https://localhost:8080/users/.well-known/did.json"

    def test_json_output_for_key(self, runner: CliRunner) -> None:
        did = "did:key:z6MkhaXgBZDvotDkL5257faiztiGiC2QtKLGpbnnEGta2doK"
        result = runner.invoke(cli, ["parse", did, "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["key_type"] == "ed25519"
        assert len(bytes.fromhex(data["public_key_hex"])) == 32

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "did:plc:yk4dd2qkboz2yv6tpubpc6co"])
        assert result.exit_code == 0
        assert "yk4dd2qkboz2yv6tpubpc6co" in result.output

    def test_error_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "did:unsupported:123"])
        assert result.exit_code == 1
        assert "unsupported_method" in result.output

    def test_canonical_plc_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "did:plc:abcd", "--canonical-plc"])
        assert result.exit_code == 1
        assert "too_short" in result.output


# ---------------------------------------------------------------------------
# normalize / key-from-hex / resolution-url
# ---------------------------------------------------------------------------


class TestNormalizeCommand:
    def test_plc_is_lowercased(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["normalize", "did:plc:ABCD"])
        assert result.exit_code == 0
        assert result.output.strip() == "did:plc:abcd"


class TestKeyFromHexCommand:
    def test_ed25519(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["key-from-hex", "ed25519", "00" * 32])
        assert result.exit_code == 0
        assert result.output.strip().startswith("did:key:z6Mk")

    def test_wrong_length(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["key-from-hex", "ed25519", "00" * 31])
        assert result.exit_code == 1
        assert "invalid_key_length" in result.output

    def test_bad_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["key-from-hex", "p256", "zz"])
        assert result.exit_code == 1

    def test_unknown_key_type(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["key-from-hex", "rsa", "00"])
        assert result.exit_code != 0


class TestResolutionUrlCommand:
    def test_web(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolution-url", "did:web:example.com"])
        assert result.exit_code == 0
        assert result.output.strip() == "https://example.com/.well-known/did.json"

    def test_non_web_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolution-url", "did:plc:abcd"])
        assert result.exit_code == 1
