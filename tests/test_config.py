"""Tests for roost.config: ServerConfig frozen dataclass."""

import pytest

from roost.config import DEFAULT_BODY_LIMIT, ServerConfig


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()

        assert cfg.jwt_secret == ""
        assert cfg.jwt_algorithms == ("HS256", "HS384", "HS512")
        assert cfg.jwt_audience is None
        assert cfg.token_cookie == "token"
        assert cfg.default_limit == DEFAULT_BODY_LIMIT == 1_048_576
        assert cfg.routes_attribute == "routes"

    def test_override(self) -> None:
        cfg = ServerConfig(jwt_secret="s3cret", token_cookie="sid", default_limit=512)

        assert cfg.jwt_secret == "s3cret"
        assert cfg.token_cookie == "sid"
        assert cfg.default_limit == 512

    def test_frozen(self) -> None:
        cfg = ServerConfig()

        with pytest.raises(AttributeError):
            cfg.jwt_secret = "changed"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ServerConfig(jwt_secret="a") == ServerConfig(jwt_secret="a")
        assert ServerConfig(jwt_secret="a") != ServerConfig(jwt_secret="b")
