"""ASGI handler: the per-request dispatch pipeline.

The only component that touches raw ASGI scope directly. Builds the
request context, runs the stages in order, and owns error
short-circuiting:

    resolve -> authenticate -> headers -> body -> prepare -> validate -> respond

A stage rejects a request by raising an ``HTTPError``; it is answered as
``{"failure": detail}``. Anything else is logged and answered with a
generic 500. In both cases nothing is written if a response has already
gone out, so each request gets exactly one response.
"""

import logging
from typing import Any

from roost._internal.asgi import Receive, Scope, Send
from roost._internal.invoke import invoke
from roost.config import ServerConfig
from roost.errors import INTERNAL_ERROR_MESSAGE, BadRequest, HTTPError, NotFound
from roost.http.request import RequestContext
from roost.http.response import ResponseWriter
from roost.routing.table import RouteTable
from roost.server.auth import authenticate
from roost.server.body import read_json_body
from roost.server.sender import send as send_json

logger = logging.getLogger("roost.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    table: RouteTable,
    config: ServerConfig,
    services: Any = None,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    response = ResponseWriter(send)
    method = scope.get("method", "")
    path = scope.get("path", "")

    try:
        request = RequestContext.from_asgi(scope, receive)
        await dispatch(request, response, table=table, config=config, services=services)
    except HTTPError as exc:
        await _send_http_error(exc, response, method, path)
    except Exception:
        logger.exception("500 %s %s", method, path)
        if not response.finished:
            await send_json(response, 500, {"failure": INTERNAL_ERROR_MESSAGE})


async def dispatch(
    request: RequestContext,
    response: ResponseWriter,
    *,
    table: RouteTable,
    config: ServerConfig,
    services: Any = None,
) -> None:
    """Run the pipeline stages for one request.

    Raises ``HTTPError`` for any rejected request. Route delegates may
    raise ``HTTPError`` too and get the same treatment.
    """
    entry = table.lookup(request.method, request.path)
    if entry is None:
        raise NotFound
    route = entry.route

    if route.authenticate:
        authenticate(request, config)

    for name, value in route.headers:
        response.set_header(name, value)

    if route.parses_body(request.method):
        await read_json_body(request, route.limit or config.default_limit)

    if route.prepare is not None:
        await invoke(route.prepare, request, response, services)
        if response.finished:
            return

    if not entry.accepts(request.message()):
        raise BadRequest

    result = await invoke(route.respond, request, response, services)

    # Delegates may write the response themselves or return a payload
    if not response.finished:
        await send_json(response, response.status, {"success": result})


async def _send_http_error(
    exc: HTTPError,
    response: ResponseWriter,
    method: str,
    path: str,
) -> None:
    """Answer a rejected request with its fixed failure message."""
    logger.debug("%d %s %s - %s", exc.status, method, path, exc.detail)
    if response.finished:
        return
    for name, value in exc.headers:
        response.set_header(name, value)
    await send_json(response, exc.status, {"failure": exc.detail})
