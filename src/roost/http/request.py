"""In-flight request context.

One ``RequestContext`` per request, owned by the dispatcher for the
duration of that request. Unlike the route table it is mutable: the
pipeline attaches the parsed body and session claims to it, and
``prepare`` delegates may edit it before validation.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from roost._internal.asgi import Receive, Scope
from roost.errors import ClientDisconnected
from roost.http.cookies import parse_cookies
from roost.http.headers import parse_headers
from roost.http.limits import BoundedReader
from roost.http.query import parse_query


@dataclass(slots=True)
class RequestContext:
    """A request as seen by the pipeline and by route delegates.

    ``query`` and ``headers`` are plain dicts (headers keyed by lower-cased
    name). ``body`` is ``None`` until the body ingestor parses it; check
    ``body_parsed`` to tell a parsed JSON ``null`` from no body at all.
    ``session`` holds verified token claims on authenticated routes.
    """

    method: str
    path: str
    query: dict[str, str | list[str]]
    headers: dict[str, str]
    cookies: dict[str, str]
    body: Any = None
    body_parsed: bool = False
    session: dict[str, Any] | None = None

    # Free-form per-request storage for prepare/respond delegates
    state: dict[str, Any] = field(default_factory=dict)

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _consumed: bool = field(default=False, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def content_length(self) -> int | None:
        """The Content-Length header as int, ``None`` if absent or not all digits."""
        value = self.headers.get("content-length", "").strip()
        if not (value.isascii() and value.isdigit()):
            return None
        return int(value)

    # -- Body access --

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks.

        The body can be streamed once. ``http.disconnect`` before the last
        chunk raises ``ClientDisconnected``.
        """
        if self._consumed or self._receive is None:
            return
        self._consumed = True
        while True:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                raise ClientDisconnected("Client disconnected while sending the body.")
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def read(self, limit: int | None = None) -> bytes:
        """Read the full request body, optionally bounded by *limit* bytes.

        Raises ``PayloadTooLarge`` when the body grows past *limit*.
        """
        if limit is None:
            return b"".join([chunk async for chunk in self.stream()])
        return await BoundedReader(self.stream(), limit).read()

    def set_body(self, body: Any) -> None:
        """Attach a parsed body."""
        self.body = body
        self.body_parsed = True

    # -- Validation --

    def message(self) -> dict[str, Any]:
        """The object checked by the route's schema predicate.

        ``body`` is present only when the body was parsed.
        """
        data: dict[str, Any] = {"query": self.query, "headers": self.headers}
        if self.body_parsed:
            data["body"] = self.body
        return data

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> RequestContext:
        """Create a RequestContext from an ASGI scope and receive callable.

        The path is taken from ``raw_path`` with percent-escapes kept, so
        ``/a%2Fb`` and ``/a/b`` are different endpoints. Servers that omit
        ``raw_path`` fall back to the decoded ``path``. The query is
        decoded once here, before route resolution.
        """
        headers = parse_headers(scope.get("headers", ()))
        raw_path = scope.get("raw_path")
        return cls(
            method=scope["method"].upper(),
            path=raw_path.decode("latin-1") if raw_path else scope["path"],
            query=parse_query(scope.get("query_string", b"")),
            headers=headers,
            cookies=parse_cookies(headers.get("cookie", "")),
            _receive=receive,
        )
