"""Cookie token authentication.

Reads the session token from a cookie and verifies it with PyJWT against
the secret captured in ``ServerConfig``. Every failure (no cookie, bad
signature, expired, malformed) raises the same ``Forbidden``, so the
client cannot tell them apart.
"""

import logging
from typing import Any

import jwt

from roost.config import ServerConfig
from roost.errors import Forbidden
from roost.http.request import RequestContext

logger = logging.getLogger("roost.server")


def verify_token(token: str, config: ServerConfig) -> dict[str, Any]:
    """Verify *token* and return its claims.

    Signature and ``exp`` are checked. ``aud`` is checked only when
    ``config.jwt_audience`` is set. Raises ``Forbidden`` on any
    verification failure.
    """
    try:
        return jwt.decode(
            token,
            config.jwt_secret,
            algorithms=list(config.jwt_algorithms),
            audience=config.jwt_audience,
            options={"verify_aud": config.jwt_audience is not None},
        )
    except jwt.InvalidTokenError as exc:
        logger.debug("Token rejected: %s", type(exc).__name__)
        raise Forbidden from None


def authenticate(request: RequestContext, config: ServerConfig) -> dict[str, Any]:
    """Attach verified session claims to *request* and return them.

    Raises ``Forbidden`` when the token cookie is missing or invalid.
    """
    token = request.cookies.get(config.token_cookie)
    if not token:
        raise Forbidden
    claims = verify_token(token, config)
    request.session = claims
    return claims
