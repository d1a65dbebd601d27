"""Roost exception hierarchy.

Shared across the route table, the dispatcher, and the pipeline stages
so every module raises and catches the same types.

Every ``HTTPError`` carries a fixed public message. The dispatcher sends
that message verbatim as ``{"failure": detail}``; nothing else about the
error reaches the client.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when routes or server configuration are invalid.

    Always raised while the server is being constructed, never per request.
    """


class ResponseAlreadySent(RoostError):  # noqa: N818
    """A second terminal write was attempted on the same response."""


class ClientDisconnected(RoostError):  # noqa: N818
    """The client went away while the request body was being read."""


@dataclass(frozen=True, slots=True)
class HTTPError(RoostError):
    """An error that maps directly to an HTTP status code.

    Raised by the pipeline stages. The dispatcher catches these and sends
    ``{"failure": detail}`` with ``status``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route is registered for the endpoint key."""

    def __init__(self, detail: str = "Not found.") -> None:
        super().__init__(status=404, detail=detail)


class Forbidden(HTTPError):  # noqa: N818
    """403: the session token is missing or failed verification.

    The cause is never distinguished in the response.
    """

    def __init__(self, detail: str = "Forbidden.") -> None:
        super().__init__(status=403, detail=detail)


class UnsupportedMediaType(HTTPError):  # noqa: N818
    """406: a Content-Type was declared and it is not JSON."""

    def __init__(self, detail: str = "Content-Type is not application/json.") -> None:
        super().__init__(status=406, detail=detail)


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413: declared or observed body size is over the route's limit.

    Asks the server to close the connection, since the rest of the body
    is left unread.
    """

    def __init__(self, detail: str = "Content was too large for this request.") -> None:
        super().__init__(status=413, detail=detail, headers=(("Connection", "close"),))


class BadRequest(HTTPError):  # noqa: N818
    """400: the body did not parse or the message failed validation."""

    def __init__(self, detail: str = "Message is invalid.") -> None:
        super().__init__(status=400, detail=detail)


INTERNAL_ERROR_MESSAGE = "Internal server error."
JSON_PARSE_MESSAGE = "Message could not parse as JSON."
