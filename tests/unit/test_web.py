"""Tests for did_identifiers.methods.web and did_identifiers.hosts."""
from __future__ import annotations

import pytest

from did_identifiers.errors import (
    ContractViolationError,
    DIDError,
    ErrorKind,
    PathEncodingError,
    PercentEncodingError,
)
from did_identifiers.hosts import Domain, Hostname, parse_host, parse_host_port
from did_identifiers.methods import web
from did_identifiers.methods.web import WebPayload


def _kind(text: str) -> ErrorKind:
    with pytest.raises(DIDError) as exc_info:
        web.parse(text)
    return exc_info.value.kind


# ---------------------------------------------------------------------------
# Hosts
# ---------------------------------------------------------------------------


class TestHosts:
    def test_domain_structure(self) -> None:
        host = parse_host("api.eu.example.com")
        assert isinstance(host, Domain)
        assert host.suffix == "com"
        assert host.name == "example"
        assert host.subdomains == ("api", "eu")
        assert str(host) == "api.eu.example.com"

    def test_single_label_is_hostname(self) -> None:
        assert parse_host("localhost") == Hostname("localhost")

    def test_host_and_port_parsed_together(self) -> None:
        assert parse_host_port("localhost:8080") == (Hostname("localhost"), 8080)
        assert parse_host_port("example.com") == (Domain(("example", "com")), None)

    def test_domain_and_hostname_never_equal(self) -> None:
        assert Domain(("localhost",)) != Hostname("localhost")

    @pytest.mark.parametrize("text", ["127.0.0.1", "::1", "[::1]", "[::1]:8080", "10.0.0.1:80"])
    def test_ip_literals_rejected(self, text: str) -> None:
        with pytest.raises(DIDError) as exc_info:
            parse_host_port(text)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_HOST_FORM

    @pytest.mark.parametrize(
        "text",
        ["", "-example.com", "example.com-", ".example.com", "example.com.",
         "example..com", "exa_mple.com", "ex%41mple.com", "a" * 254],
    )
    def test_invalid_domains(self, text: str) -> None:
        with pytest.raises(DIDError) as exc_info:
            parse_host(text)
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    def test_maximum_length_domain_accepted(self) -> None:
        text = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 61])
        assert len(text) == 253
        assert isinstance(parse_host(text), Domain)

    @pytest.mark.parametrize("text", ["example.com:8080:90", "localhost:1:2:3"])
    def test_extra_colons_are_a_bad_port(self, text: str) -> None:
        with pytest.raises(DIDError) as exc_info:
            parse_host_port(text)
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    @pytest.mark.parametrize("port", ["", "http", "080", "65536", "-1"])
    def test_invalid_ports(self, port: str) -> None:
        with pytest.raises(DIDError) as exc_info:
            parse_host_port(f"example.com:{port}")
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParse:
    def test_domain_only(self) -> None:
        payload = web.parse("did:web:example.com")
        assert payload.host == Domain(("example", "com"))
        assert payload.port is None
        assert payload.path == ()

    def test_path_segments(self) -> None:
        payload = web.parse("did:web:example.com:users:alice")
        assert payload.path == ("users", "alice")

    def test_encoded_port(self) -> None:
        payload = web.parse("did:web:localhost%3A8080")
        assert payload.host == Hostname("localhost")
        assert payload.port == 8080
        assert payload.path == ()

    def test_percent_encoded_path_segment(self) -> None:
        payload = web.parse("did:web:example.com:path%20with%20spaces")
        assert payload.path == ("path with spaces",)

    def test_missing_prefix(self) -> None:
        assert _kind("did:plc:example") is ErrorKind.MISSING_PREFIX

    def test_empty_identifier(self) -> None:
        assert _kind("did:web:") is ErrorKind.EMPTY_IDENTIFIER

    def test_empty_host(self) -> None:
        assert _kind("did:web::users") is ErrorKind.INVALID_DOMAIN

    def test_ipv4_host(self) -> None:
        assert _kind("did:web:127.0.0.1") is ErrorKind.UNSUPPORTED_HOST_FORM

    def test_ipv6_host(self) -> None:
        assert _kind("did:web:%5B%3A%3A1%5D") is ErrorKind.UNSUPPORTED_HOST_FORM

    def test_unbracketed_ipv6_host(self) -> None:
        assert _kind("did:web:%3A%3A1") is ErrorKind.UNSUPPORTED_HOST_FORM

    def test_second_port_separator_is_invalid_domain(self) -> None:
        assert _kind("did:web:example.com%3A8080%3A90") is ErrorKind.INVALID_DOMAIN

    def test_invalid_port(self) -> None:
        assert _kind("did:web:example.com%3Ahttps") is ErrorKind.INVALID_DOMAIN

    def test_malformed_escape_names_segment(self) -> None:
        with pytest.raises(PathEncodingError) as exc_info:
            web.parse("did:web:example.com:ok:bad%2")
        assert exc_info.value.kind is ErrorKind.PATH_ENCODING_ERROR
        assert exc_info.value.segment == "bad%2"
        assert isinstance(exc_info.value.__cause__, PercentEncodingError)

    def test_empty_path_segment(self) -> None:
        assert _kind("did:web:example.com:") is ErrorKind.PATH_ENCODING_ERROR
        assert _kind("did:web:example.com:a::b") is ErrorKind.PATH_ENCODING_ERROR

    @pytest.mark.parametrize("segment", ["a%41", "a%2f", "a/b", "a b"])
    def test_non_canonical_segments_rejected(self, segment: str) -> None:
        assert _kind(f"did:web:example.com:{segment}") is ErrorKind.PATH_ENCODING_ERROR


# ---------------------------------------------------------------------------
# format and construction
# ---------------------------------------------------------------------------


class TestFormat:
    def test_port_colon_is_escaped(self) -> None:
        payload = web.from_host_and_path("localhost", port=8080)
        assert web.format(payload) == "did:web:localhost%3A8080"

    def test_host_with_port_string(self) -> None:
        payload = web.from_host_and_path("localhost:8080")
        assert web.format(payload) == "did:web:localhost%3A8080"

    def test_path_segments_joined_with_colons(self) -> None:
        payload = web.from_host_and_path("example.com", ["users", "alice"])
        assert web.format(payload) == "did:web:example.com:users:alice"

    def test_path_with_spaces(self) -> None:
        payload = web.from_host_and_path("example.com", ["path with spaces"])
        text = web.format(payload)
        assert text == "did:web:example.com:path%20with%20spaces"
        assert web.parse(text).path == ("path with spaces",)

    def test_reserved_characters_in_segment(self) -> None:
        payload = web.from_host_and_path("example.com", ["a:b/c"])
        text = web.format(payload)
        assert text == "did:web:example.com:a%3Ab%2Fc"
        assert web.parse(text) == payload

    def test_path_list_is_stored_as_tuple(self) -> None:
        payload = WebPayload(host=Hostname("localhost"), path=["a"])
        assert payload.path == ("a",)

    def test_empty_segment_rejected_at_construction(self) -> None:
        with pytest.raises(PathEncodingError):
            web.from_host_and_path("example.com", ["a", ""])

    def test_empty_segment_rejected_at_format(self) -> None:
        payload = WebPayload(host=Domain(("example", "com")), path=("",))
        with pytest.raises(ContractViolationError):
            web.format(payload)

    def test_port_given_twice(self) -> None:
        with pytest.raises(DIDError) as exc_info:
            web.from_host_and_path("localhost:8080", port=9090)
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    def test_port_out_of_range(self) -> None:
        with pytest.raises(DIDError):
            web.from_host_and_path("localhost", port=70000)

    def test_parsed_host_object_accepted(self) -> None:
        payload = web.from_host_and_path(Domain(("example", "com")), ["a"])
        assert web.format(payload) == "did:web:example.com:a"

    def test_invalid_host_object_rejected(self) -> None:
        with pytest.raises(DIDError) as exc_info:
            web.from_host_and_path(Domain(("bad_label", "com")))
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    @pytest.mark.parametrize("port", [True, False, "8080", 80.0])
    def test_non_int_port_rejected(self, port: object) -> None:
        with pytest.raises(DIDError) as exc_info:
            web.from_host_and_path("localhost", port=port)  # type: ignore[arg-type]
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    @pytest.mark.parametrize("host", [Hostname("a.b"), Domain(("localhost",))])
    def test_host_object_of_wrong_kind_rejected(self, host: object) -> None:
        with pytest.raises(DIDError) as exc_info:
            web.from_host_and_path(host)  # type: ignore[arg-type]
        assert exc_info.value.kind is ErrorKind.INVALID_DOMAIN

    def test_host_object_kind_preserved(self) -> None:
        assert web.from_host_and_path(Hostname("localhost")).host == Hostname("localhost")

    @pytest.mark.parametrize(
        "payload",
        [
            WebPayload(host=Hostname("bad host")),
            WebPayload(host=Domain(("localhost",))),
            WebPayload(host=Hostname("localhost"), port=True),
            WebPayload(host=Hostname("localhost"), port=70000),
        ],
    )
    def test_unchecked_host_or_port_rejected_at_format(self, payload: WebPayload) -> None:
        with pytest.raises(ContractViolationError):
            web.format(payload)
        with pytest.raises(ContractViolationError):
            web.to_resolution_url(payload)

    def test_host_text(self) -> None:
        assert web.from_host_and_path("localhost", port=8080).host_text == "localhost:8080"


# ---------------------------------------------------------------------------
# Resolution URL and equality
# ---------------------------------------------------------------------------


class TestResolutionUrl:
    def test_domain_only(self) -> None:
        payload = web.parse("did:web:example.com")
        assert web.to_resolution_url(payload) == "https://example.com/.well-known/did.json"

    def test_port_and_path(self) -> None:
        payload = web.parse("did:web:localhost%3A8080:users:alice")
        assert web.to_resolution_url(payload) == (
            "https://localhost:8080/users/alice/.well-known/did.json"
        )

    def test_path_segments_are_url_encoded(self) -> None:
        payload = web.from_host_and_path("example.com", ["a b", "c/d"])
        assert web.to_resolution_url(payload) == (
            "https://example.com/a%20b/c/d/.well-known/did.json"
        )


class TestEqual:
    def test_equal_payloads(self) -> None:
        assert web.equal(
            web.parse("did:web:example.com:a"), web.from_host_and_path("example.com", ["a"])
        )

    def test_host_kind_mismatch(self) -> None:
        left = WebPayload(host=Hostname("localhost"))
        right = WebPayload(host=Domain(("localhost",)))
        assert not web.equal(left, right)

    def test_port_differs(self) -> None:
        assert not web.equal(
            web.from_host_and_path("localhost", port=80),
            web.from_host_and_path("localhost", port=8080),
        )

    def test_path_order_matters(self) -> None:
        assert not web.equal(
            web.from_host_and_path("example.com", ["a", "b"]),
            web.from_host_and_path("example.com", ["b", "a"]),
        )
