"""Response writer.

Wraps the ASGI ``send`` callable for one request. Headers accumulate on
the writer (route headers, delegate headers) and go out with the single
terminal write. ``finished`` flips once that write is made; a second
write raises ``ResponseAlreadySent``.
"""

from __future__ import annotations

from roost._internal.asgi import Send
from roost.errors import ResponseAlreadySent


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


class ResponseWriter:
    """The response side of one request.

    Route delegates receive this as their second argument. Most write
    through ``roost.send`` (or the ``success``/``failure`` shortcuts);
    ``end`` is the raw primitive underneath.
    """

    __slots__ = ("_headers", "_send", "finished", "status")

    def __init__(self, send: Send) -> None:
        self._send = send
        self._headers: dict[str, tuple[str, str]] = {}
        self.status = 200
        self.finished = False

    # -- Headers --

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any earlier value for the same name."""
        self._headers[name.lower()] = (name, value)

    def get_header(self, name: str) -> str | None:
        """Return a pending header value, or ``None``."""
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else None

    def remove_header(self, name: str) -> None:
        """Drop a pending header if present."""
        self._headers.pop(name.lower(), None)

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        """Pending headers in the order they were first set."""
        return tuple(self._headers.values())

    # -- Terminal write --

    async def end(self, body: bytes = b"") -> None:
        """Send status, pending headers, and *body* as the terminal response."""
        if self.finished:
            msg = "A response has already been sent for this request."
            raise ResponseAlreadySent(msg)
        self.finished = True

        if not _body_allowed(self.status):
            body = b""
        self.set_header("Content-Length", str(len(body)))

        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self._headers.values()
        ]
        await self._send(
            {
                "type": "http.response.start",
                "status": self.status,
                "headers": raw_headers,
            }
        )
        await self._send(
            {
                "type": "http.response.body",
                "body": body,
            }
        )

    # -- JSON shortcuts --

    async def success(self, payload: object, status: int = 200) -> None:
        """Send ``{"success": payload}``."""
        from roost.server.sender import send

        await send(self, status, {"success": payload})

    async def failure(self, message: str, status: int) -> None:
        """Send ``{"failure": message}``."""
        from roost.server.sender import send

        await send(self, status, {"failure": message})
