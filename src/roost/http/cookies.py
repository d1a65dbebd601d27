"""Cookie header decoding.

Read side only. Roost never issues cookies itself; route delegates that
log a user in set ``Set-Cookie`` through ``ResponseWriter.set_header``.
"""

from urllib.parse import unquote


def parse_cookies(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Values wrapped in double quotes are unwrapped and percent-escapes
    are decoded. When a name repeats, the first occurrence wins.
    Returns an empty dict for empty or missing headers.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in cookies:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        cookies[key] = unquote(value) if "%" in value else value
    return cookies
