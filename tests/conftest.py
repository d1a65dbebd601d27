"""Shared fixtures for roost tests."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
import pytest

from roost.config import ServerConfig

SECRET = "test-secret-key-long-enough-for-hs256-hs384-and-hs512-signing-0123"


def make_token(
    claims: dict[str, Any] | None = None,
    *,
    secret: str = SECRET,
    expires_in: timedelta = timedelta(minutes=5),
    algorithm: str = "HS256",
) -> str:
    """Sign a session token the way a login route would."""
    payload = {"sub": "user-1", **(claims or {})}
    payload["exp"] = datetime.now(tz=UTC) + expires_in
    return jwt.encode(payload, secret, algorithm=algorithm)


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(jwt_secret=SECRET)


@pytest.fixture
def token() -> str:
    return make_token()


@pytest.fixture
def sign():
    """The token signer, for tests that need custom claims or expiry."""
    return make_token
