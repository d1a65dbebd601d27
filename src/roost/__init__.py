"""Roost: a request-dispatch pipeline for JSON APIs.

Point it at a directory of route modules and get one ASGI application
that resolves requests by method and path, checks the session cookie,
bounds and parses the JSON body, validates the message, and hands off to
the route.

Basic usage::

    # routes/notes.py
    async def list_notes(request, response, services):
        return await services.notes.all()

    routes = {
        "GET /notes": {"authenticate": True, "respond": list_notes},
    }

    # app.py
    from roost import ServerConfig, create_api_server

    app = create_api_server("routes", ServerConfig(jwt_secret="s3cr3t"), services=services)

Every response is JSON: ``{"success": payload}`` or ``{"failure": message}``.
"""

__version__ = "0.1.0"
__all__ = [
    "ApiServer",
    "BadRequest",
    "ConfigurationError",
    "Forbidden",
    "HTTPError",
    "NotFound",
    "PayloadTooLarge",
    "RequestContext",
    "ResponseWriter",
    "RoostError",
    "Route",
    "ServerConfig",
    "UnsupportedMediaType",
    "create_api_server",
    "send",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name in ("ApiServer", "create_api_server"):
        from roost import app as _app

        return getattr(_app, name)

    if name == "ServerConfig":
        from roost.config import ServerConfig

        return ServerConfig

    if name == "RequestContext":
        from roost.http.request import RequestContext

        return RequestContext

    if name == "ResponseWriter":
        from roost.http.response import ResponseWriter

        return ResponseWriter

    if name == "Route":
        from roost.routing.route import Route

        return Route

    if name == "send":
        from roost.server.sender import send

        return send

    if name in (
        "BadRequest",
        "ConfigurationError",
        "Forbidden",
        "HTTPError",
        "NotFound",
        "PayloadTooLarge",
        "RoostError",
        "UnsupportedMediaType",
    ):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
