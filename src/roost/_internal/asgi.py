"""ASGI type aliases.

Only ``roost.server`` and ``roost.http`` touch raw ASGI messages. Route
delegates see ``RequestContext`` and ``ResponseWriter`` instead.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
