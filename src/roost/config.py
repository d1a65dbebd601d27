"""Server configuration.

ServerConfig is a frozen dataclass: immutable after creation, passed
explicitly to ``ApiServer`` and captured once. Nothing is read from
globals or the environment.
"""

from dataclasses import dataclass

DEFAULT_BODY_LIMIT = 1_048_576  # 1 MiB


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = ServerConfig(jwt_secret="s3cr3t")

    ``jwt_secret`` must be non-empty when any route sets ``authenticate``.
    """

    # Authentication
    jwt_secret: str = ""
    jwt_algorithms: tuple[str, ...] = ("HS256", "HS384", "HS512")
    jwt_audience: str | None = None  # Checked against "aud" only when set
    token_cookie: str = "token"

    # Limits
    default_limit: int = DEFAULT_BODY_LIMIT

    # Route modules
    routes_attribute: str = "routes"  # Module attribute holding the route mapping
