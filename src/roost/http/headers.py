"""Request header decoding.

ASGI delivers headers as raw byte pairs. The pipeline works with a plain
``dict`` keyed by lower-cased name, since the same mapping is validated
against the route schema and may be edited by ``prepare`` delegates.
"""

from collections.abc import Iterable

# Repeated occurrences of these are joined with "; " instead of ", "
_SEMICOLON_JOINED = frozenset({"cookie"})

# Repeated occurrences of these keep only the first value
_SINGLETONS = frozenset(
    {
        "age",
        "authorization",
        "content-length",
        "content-type",
        "etag",
        "expires",
        "from",
        "host",
        "if-modified-since",
        "if-unmodified-since",
        "last-modified",
        "location",
        "max-forwards",
        "proxy-authorization",
        "referer",
        "retry-after",
        "server",
        "user-agent",
    }
)


def parse_headers(raw: Iterable[tuple[bytes, bytes]]) -> dict[str, str]:
    """Decode ASGI header pairs into a lower-cased name-value dict."""
    headers: dict[str, str] = {}
    for name_b, value_b in raw:
        name = name_b.decode("latin-1").lower()
        value = value_b.decode("latin-1")
        if name not in headers:
            headers[name] = value
        elif name in _SINGLETONS:
            continue
        elif name in _SEMICOLON_JOINED:
            headers[name] = f"{headers[name]}; {value}"
        else:
            headers[name] = f"{headers[name]}, {value}"
    return headers
