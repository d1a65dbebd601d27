"""Roost application.

``ApiServer`` is an ASGI application built from route mappings. Every
route is compiled when the server is constructed, so configuration
mistakes surface at startup. After that the server holds only read-only
state and is safe to share across concurrent requests.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from roost._internal.asgi import Receive, Scope, Send
from roost.config import ServerConfig
from roost.errors import ConfigurationError
from roost.routing.loader import load_route_modules
from roost.routing.table import RouteTable
from roost.server.handler import handle_request


class ApiServer:
    """A JSON API as one ASGI application.

    Usage::

        from roost import ApiServer, ServerConfig

        async def hello(request, response, services):
            return {"hello": request.query.get("name", "world")}

        app = ApiServer(
            [{"GET /hello": {"respond": hello}}],
            ServerConfig(jwt_secret="s3cr3t"),
        )

    Serve ``app`` with any ASGI server. *services* is handed to every
    ``prepare`` and ``respond`` delegate as its third argument.
    """

    __slots__ = ("config", "services", "table")

    def __init__(
        self,
        routes: Iterable[Mapping[str, Any]] | RouteTable,
        config: ServerConfig | None = None,
        *,
        services: Any = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self.services = services
        self.table: RouteTable = (
            routes if isinstance(routes, RouteTable) else RouteTable.from_mappings(routes)
        )

        if self.table.requires_authentication and not self.config.jwt_secret:
            msg = "ServerConfig.jwt_secret must not be empty when a route sets 'authenticate'."
            raise ConfigurationError(msg)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        await handle_request(
            scope,
            receive,
            send,
            table=self.table,
            config=self.config,
            services=self.services,
        )


def create_api_server(
    routes_dir: str | Path,
    config: ServerConfig | None = None,
    *,
    services: Any = None,
) -> ApiServer:
    """Load every route module under *routes_dir* and build the server.

    Raises:
        FileNotFoundError: If *routes_dir* is not a directory.
        ConfigurationError: If a route, key, schema, or the config is invalid.
    """
    config = config or ServerConfig()
    mappings = load_route_modules(routes_dir, attribute=config.routes_attribute)
    return ApiServer(mappings, config, services=services)
