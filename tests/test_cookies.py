"""Tests for roost.http.cookies: Cookie header decoding."""

from roost.http.cookies import parse_cookies


class TestParseCookies:
    def test_empty_string(self) -> None:
        assert parse_cookies("") == {}

    def test_single_cookie(self) -> None:
        assert parse_cookies("token=abc123") == {"token": "abc123"}

    def test_multiple_cookies(self) -> None:
        result = parse_cookies("token=abc; theme=dark; lang=en")
        assert result == {"token": "abc", "theme": "dark", "lang": "en"}

    def test_whitespace_handling(self) -> None:
        result = parse_cookies("  token = abc ;  theme = dark  ")
        assert result == {"token": "abc", "theme": "dark"}

    def test_value_with_equals(self) -> None:
        """Values can contain '=' (e.g. base64 padding)."""
        assert parse_cookies("token=abc=def=") == {"token": "abc=def="}

    def test_jwt_value_kept_intact(self) -> None:
        value = "eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxIn0.sig-_part"
        assert parse_cookies(f"token={value}") == {"token": value}

    def test_empty_value(self) -> None:
        assert parse_cookies("flag=") == {"flag": ""}

    def test_no_equals_ignored(self) -> None:
        result = parse_cookies("token=abc; broken; theme=dark")
        assert result == {"token": "abc", "theme": "dark"}

    def test_duplicate_keys_first_wins(self) -> None:
        assert parse_cookies("a=1; a=2") == {"a": "1"}

    def test_quoted_value_unwrapped(self) -> None:
        assert parse_cookies('name="hello world"') == {"name": "hello world"}

    def test_percent_escapes_decoded(self) -> None:
        assert parse_cookies("name=caf%C3%A9%20au%20lait") == {"name": "café au lait"}
