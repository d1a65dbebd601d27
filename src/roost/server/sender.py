"""JSON response sending.

Every response the pipeline produces goes through ``send``: a JSON body,
``application/json; charset=utf-8``, and an explicit Content-Length.
Route delegates use the same function to answer in the same shape.
"""

import json
from typing import Any

from roost.http.response import ResponseWriter

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def encode_message(message: Any) -> bytes:
    """Serialize *message* the way browsers' ``JSON.stringify`` does: compact UTF-8."""
    return json.dumps(message, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


async def send(response: ResponseWriter, status: int, message: Any) -> None:
    """Write *message* as the terminal JSON response with *status*.

    *message* is normally ``{"success": payload}`` or
    ``{"failure": text}``.

    Raises ``ResponseAlreadySent`` if the response is already finished,
    and ``TypeError`` if *message* is not JSON serializable (in which case
    nothing has been written).
    """
    data = encode_message(message)
    response.status = status
    response.set_header("Content-Type", JSON_CONTENT_TYPE)
    await response.end(data)
