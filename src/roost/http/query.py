"""Query string decoding.

Produces a plain dict so the result can be handed straight to the
schema predicate: a key that appears once maps to a string, a repeated
key maps to the list of its values in order.
"""

from urllib.parse import parse_qsl


def parse_query(query_string: bytes | str) -> dict[str, str | list[str]]:
    """Decode a raw query string.

    ``+`` decodes to a space and percent-escapes are decoded as UTF-8.
    Blank values are kept (``?flag`` gives ``{"flag": ""}``).
    """
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    query: dict[str, str | list[str]] = {}
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        existing = query.get(key)
        if existing is None:
            query[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            query[key] = [existing, value]
    return query
