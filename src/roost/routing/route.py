"""Route descriptor and endpoint keys.

Route modules export plain mappings, the way route authors like to write
them::

    routes = {
        "POST /notes": {
            "authenticate": True,
            "validate": {"body": {"type": "object", "required": ["text"]}},
            "respond": create_note,
        },
    }

``Route.from_mapping`` turns each mapping into a frozen ``Route`` at
construction time, so the dispatcher only ever sees explicit optional
fields.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, TypeAlias

from roost.errors import ConfigurationError

# Route delegate: (request, response, services) -> Any, sync or async
Delegate: TypeAlias = Callable[..., Any]

_METHOD_RE = re.compile(r"^[A-Za-z]+$")


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route descriptor.

    A route without ``respond`` is kept in the table but never matched.
    ``accept`` is tri-state: ``None`` means the pipeline parses the body of
    non-GET requests as JSON; any other value means the route reads the
    body itself (unless ``json`` forces parsing).
    """

    respond: Delegate | None = None
    authenticate: bool = False
    headers: tuple[tuple[str, str], ...] = ()
    json: bool = False
    accept: bool | None = None
    limit: int | None = None
    validate: Mapping[str, Any] | None = None
    prepare: Delegate | None = None

    def parses_body(self, method: str) -> bool:
        """Whether the pipeline should ingest and parse the body as JSON."""
        return self.json or (self.accept is None and method != "GET")

    @classmethod
    def from_mapping(cls, descriptor: Route | Mapping[str, Any], *, key: str = "") -> Route:
        """Build a Route from a descriptor mapping.

        Raises ``ConfigurationError`` for unknown fields and for values of
        the wrong kind. *key* is only used in error messages.
        """
        if isinstance(descriptor, Route):
            return descriptor
        where = f" for {key!r}" if key else ""
        if not isinstance(descriptor, Mapping):
            msg = f"Route descriptor{where} must be a mapping, got {type(descriptor).__name__}."
            raise ConfigurationError(msg)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(descriptor) - known)
        if unknown:
            msg = f"Unknown route field(s){where}: {', '.join(unknown)}."
            raise ConfigurationError(msg)

        for name in ("respond", "prepare"):
            value = descriptor.get(name)
            if value is not None and not callable(value):
                msg = f"Route field {name!r}{where} must be callable."
                raise ConfigurationError(msg)

        limit = descriptor.get("limit")
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0
        ):
            msg = f"Route field 'limit'{where} must be a positive integer."
            raise ConfigurationError(msg)

        headers = descriptor.get("headers") or {}
        if not isinstance(headers, Mapping):
            msg = f"Route field 'headers'{where} must be a mapping of name to value."
            raise ConfigurationError(msg)

        validate = descriptor.get("validate")
        if validate is not None:
            if not isinstance(validate, Mapping):
                msg = f"Route field 'validate'{where} must be a mapping."
                raise ConfigurationError(msg)
            validate = MappingProxyType(dict(validate))

        accept = descriptor.get("accept")
        return cls(
            respond=descriptor.get("respond"),
            authenticate=bool(descriptor.get("authenticate", False)),
            headers=tuple((str(name), str(value)) for name, value in headers.items()),
            json=bool(descriptor.get("json", False)),
            accept=None if accept is None else bool(accept),
            limit=limit,
            validate=validate,
            prepare=descriptor.get("prepare"),
        )


def parse_endpoint(key: str) -> tuple[str, str]:
    """Split an endpoint key ``"<METHOD> <path>"`` into method and path.

    The method is upper-cased. Raises ``ConfigurationError`` when the key
    does not have that shape.
    """
    if not isinstance(key, str):
        msg = f"Endpoint key must be a string, got {type(key).__name__}."
        raise ConfigurationError(msg)
    method, sep, path = key.partition(" ")
    if not sep or not _METHOD_RE.match(method) or not path.startswith("/") or " " in path:
        msg = f"Invalid endpoint key {key!r}: expected '<METHOD> <path>', e.g. 'GET /notes'."
        raise ConfigurationError(msg)
    return method.upper(), path


def endpoint_key(method: str, path: str) -> str:
    """Build the endpoint key for a method and path."""
    return f"{method.upper()} {path}"
