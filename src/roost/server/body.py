"""JSON body ingestion.

Checks run in a fixed order and each raises the matching ``HTTPError``:

1. A declared Content-Type that is not JSON -> ``UnsupportedMediaType``.
   A missing Content-Type is accepted.
2. A declared Content-Length over the limit -> ``PayloadTooLarge``,
   before any byte is read.
3. The body is streamed through ``BoundedReader``; crossing the limit
   mid-stream -> ``PayloadTooLarge`` and no further chunks are read.
4. The joined body must parse as JSON -> ``BadRequest`` otherwise.

Transport problems (``ClientDisconnected``) are not handled here.
"""

import json
import re
from typing import Any

from roost.errors import JSON_PARSE_MESSAGE, BadRequest, PayloadTooLarge, UnsupportedMediaType
from roost.http.limits import BoundedReader
from roost.http.request import RequestContext

_JSON_CONTENT_TYPE_RE = re.compile(r"^application/json\s*(?:;|$)", re.IGNORECASE)


def is_json_content_type(content_type: str | None) -> bool:
    """True when *content_type* is absent or declares ``application/json``."""
    if content_type is None:
        return True
    return _JSON_CONTENT_TYPE_RE.match(content_type.strip()) is not None


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(name)


async def read_json_body(request: RequestContext, limit: int) -> Any:
    """Ingest the request body as JSON, bounded by *limit* bytes.

    The parsed value is attached to *request* and returned.
    """
    if not is_json_content_type(request.content_type):
        raise UnsupportedMediaType

    declared = request.content_length
    if declared is not None and declared > limit:
        raise PayloadTooLarge

    raw = await BoundedReader(request.stream(), limit).read()

    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise BadRequest(JSON_PARSE_MESSAGE) from None

    request.set_body(body)
    return body
