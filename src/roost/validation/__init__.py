"""Schema compilation for route validation."""

from roost.validation.schema import SchemaPredicate, build_schema, compile_schema

__all__ = ["SchemaPredicate", "build_schema", "compile_schema"]
