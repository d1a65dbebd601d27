"""Tests for roost.validation.schema: compiling validate fragments."""

import pytest

from roost.errors import ConfigurationError
from roost.validation.schema import build_schema, compile_schema


class TestBuildSchema:
    def test_absent_fragment(self) -> None:
        assert build_schema(None) == {"type": "object"}

    def test_parts_become_properties(self) -> None:
        schema = build_schema({"query": {"type": "object"}})
        assert schema == {"type": "object", "properties": {"query": {"type": "object"}}}


class TestCompileSchema:
    def test_absent_fragment_accepts_any_object(self) -> None:
        accepts = compile_schema(None)
        assert accepts({"query": {}, "headers": {}}) is True
        assert accepts({"query": {"x": "1"}, "headers": {}, "body": [1, 2]}) is True

    def test_rejects_non_object(self) -> None:
        assert compile_schema(None)([]) is False

    def test_query_required(self) -> None:
        accepts = compile_schema({"query": {"type": "object", "required": ["q"]}})

        assert accepts({"query": {"q": "x"}, "headers": {}}) is True
        assert accepts({"query": {}, "headers": {}}) is False

    def test_header_pattern(self) -> None:
        accepts = compile_schema(
            {"headers": {"properties": {"x-api-version": {"enum": ["1", "2"]}}}}
        )
        assert accepts({"query": {}, "headers": {"x-api-version": "2"}}) is True
        assert accepts({"query": {}, "headers": {"x-api-version": "3"}}) is False

    def test_body_schema(self) -> None:
        accepts = compile_schema(
            {
                "body": {
                    "type": "object",
                    "properties": {"text": {"type": "string", "minLength": 1}},
                    "required": ["text"],
                    "additionalProperties": False,
                }
            }
        )
        assert accepts({"query": {}, "headers": {}, "body": {"text": "hi"}}) is True
        assert accepts({"query": {}, "headers": {}, "body": {"text": ""}}) is False
        assert accepts({"query": {}, "headers": {}, "body": {"text": "hi", "x": 1}}) is False

    def test_body_schema_ignored_without_body(self) -> None:
        accepts = compile_schema({"body": {"type": "object", "required": ["text"]}})
        assert accepts({"query": {}, "headers": {}}) is True

    def test_malformed_schema_fails_at_compile(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid validation schema for 'POST /x'"):
            compile_schema({"body": {"type": "not-a-type"}}, key="POST /x")

    def test_compiling_twice_agrees(self) -> None:
        fragment = {"query": {"type": "object", "required": ["page"]}}
        first = compile_schema(fragment)
        second = compile_schema(fragment)

        inputs = [
            {"query": {"page": "1"}, "headers": {}},
            {"query": {}, "headers": {}},
            {"query": "page=1", "headers": {}},
            [],
        ]
        assert [first(i) for i in inputs] == [second(i) for i in inputs]
