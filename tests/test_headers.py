"""Tests for roost.http.headers: ASGI header decoding."""

import pytest

from roost.http.headers import parse_headers


class TestParseHeaders:
    def test_empty(self) -> None:
        assert parse_headers(()) == {}

    def test_names_lowercased(self) -> None:
        headers = parse_headers([(b"Content-Type", b"application/json"), (b"X-Trace", b"1")])
        assert headers == {"content-type": "application/json", "x-trace": "1"}

    def test_repeated_header_joined_with_comma(self) -> None:
        headers = parse_headers([(b"accept", b"text/html"), (b"Accept", b"*/*")])
        assert headers["accept"] == "text/html, */*"

    def test_repeated_cookie_joined_with_semicolon(self) -> None:
        headers = parse_headers([(b"cookie", b"a=1"), (b"cookie", b"token=x")])
        assert headers["cookie"] == "a=1; token=x"

    def test_singleton_keeps_first(self) -> None:
        headers = parse_headers([(b"content-length", b"5"), (b"content-length", b"500")])
        assert headers["content-length"] == "5"

    def test_latin1_values(self) -> None:
        headers = parse_headers([(b"x-name", "café".encode("latin-1"))])
        assert headers["x-name"] == "café"

    @pytest.mark.parametrize(
        "name", [b"referer", b"if-modified-since", b"from", b"authorization", b"user-agent"]
    )
    def test_singletons_never_joined(self, name: bytes) -> None:
        headers = parse_headers([(name, b"first"), (name.upper(), b"second")])
        assert headers[name.decode()] == "first"
