"""Compiled route table.

Built once from route mappings and read-only afterwards. Lookup is a
single dict access on the endpoint key; there are no path parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from roost.routing.route import Route, endpoint_key, parse_endpoint
from roost.validation.schema import SchemaPredicate, compile_schema

logger = logging.getLogger("roost.routing")


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """A route with its endpoint and compiled schema predicate."""

    method: str
    path: str
    route: Route
    accepts: SchemaPredicate

    @property
    def key(self) -> str:
        return endpoint_key(self.method, self.path)


class RouteTable:
    """Immutable mapping of endpoint key to ``CompiledRoute``.

    Usage::

        table = RouteTable.from_mappings([
            {"GET /notes": {"respond": list_notes}},
            {"POST /notes": {"respond": create_note}},
        ])
        entry = table.lookup("GET", "/notes")
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, CompiledRoute]) -> None:
        self._entries: Mapping[str, CompiledRoute] = MappingProxyType(dict(entries))

    @classmethod
    def from_mappings(cls, mappings: Iterable[Mapping[str, Any]]) -> RouteTable:
        """Merge route mappings and compile every route.

        Later mappings overwrite earlier ones on key collision. Raises
        ``ConfigurationError`` for malformed keys, descriptors, or schemas.
        """
        merged: dict[str, tuple[str, str, Route]] = {}
        for mapping in mappings:
            for raw_key, descriptor in mapping.items():
                method, path = parse_endpoint(raw_key)
                key = endpoint_key(method, path)
                if key in merged:
                    logger.debug("Route %s overridden by a later definition", key)
                merged[key] = (method, path, Route.from_mapping(descriptor, key=key))

        entries = {
            key: CompiledRoute(
                method=method,
                path=path,
                route=route,
                accepts=compile_schema(route.validate, key=key),
            )
            for key, (method, path, route) in merged.items()
        }
        return cls(entries)

    def lookup(self, method: str, path: str) -> CompiledRoute | None:
        """Return the entry for an endpoint, or ``None``.

        Entries whose route has no ``respond`` delegate are treated as
        unregistered.
        """
        entry = self._entries.get(endpoint_key(method, path))
        if entry is None or entry.route.respond is None:
            return None
        return entry

    @property
    def requires_authentication(self) -> bool:
        """True if any registered route sets ``authenticate``."""
        return any(entry.route.authenticate for entry in self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> CompiledRoute:
        return self._entries[key]

    def __iter__(self) -> Iterator[CompiledRoute]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({sorted(self._entries)!r})"
