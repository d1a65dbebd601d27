"""Schema compilation.

Each route's ``validate`` fragment names schemas for the ``query``,
``headers`` and ``body`` parts of a request. They are combined into one
object schema and compiled with ``jsonschema`` once, at construction.
The result is a plain predicate the dispatcher calls per request.

Compiled validators are read-only, so one predicate is safely shared by
every request for its route.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from jsonschema import validators
from jsonschema.exceptions import SchemaError

from roost.errors import ConfigurationError

SchemaPredicate: TypeAlias = Callable[[Any], bool]


def build_schema(fragment: Mapping[str, Any] | None) -> dict[str, Any]:
    """Wrap a ``validate`` fragment into the schema for the whole message."""
    schema: dict[str, Any] = {"type": "object"}
    if fragment is not None:
        schema["properties"] = {name: _plain(part) for name, part in fragment.items()}
    return schema


def compile_schema(fragment: Mapping[str, Any] | None, *, key: str = "") -> SchemaPredicate:
    """Compile a ``validate`` fragment into a predicate over request messages.

    An absent fragment compiles to a predicate that accepts any object.
    A malformed schema raises ``ConfigurationError`` here rather than on
    the first request.

    Example::

        accepts = compile_schema({"query": {"required": ["q"]}})
        accepts({"query": {"q": "x"}, "headers": {}})   # True
        accepts({"query": {}, "headers": {}})           # False
    """
    schema = build_schema(fragment)
    cls = validators.validator_for(schema)
    try:
        cls.check_schema(schema)
    except SchemaError as exc:
        where = f" for {key!r}" if key else ""
        msg = f"Invalid validation schema{where}: {exc.message}"
        raise ConfigurationError(msg) from exc

    validator = cls(schema)

    def accepts(message: Any) -> bool:
        return validator.is_valid(message)

    return accepts


def _plain(value: Any) -> Any:
    """Convert read-only mappings back to dicts; jsonschema type-checks dicts."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value
