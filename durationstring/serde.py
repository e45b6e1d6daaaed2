"""Pydantic support: ``DurationString`` fields travel as duration strings."""

from __future__ import annotations

from typing import Any, Callable

from pydantic_core import PydanticCustomError, core_schema

from .errors import DurationError


def duration_string_schema(cls: type) -> core_schema.CoreSchema:
    """Build the core schema used by ``DurationString.__get_pydantic_core_schema__``.

    Strings are parsed with ``cls.from_string``; parse failures become a
    ``duration_string`` validation error quoting the parser's message.
    Existing instances pass through untouched in python mode, and values are
    always serialized with ``str()``.
    """

    def from_text(value: str) -> Any:
        try:
            return cls.from_string(value)
        except DurationError as exc:
            raise PydanticCustomError(
                "duration_string", "invalid value: {error}", {"error": str(exc)}
            ) from exc

    def from_python(value: Any) -> Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return from_text(value)
        raise PydanticCustomError(
            "duration_string_type",
            "expected a duration string, got {type}",
            {"type": type(value).__name__},
        )

    serializer: Callable[[Any], str] = str
    return core_schema.json_or_python_schema(
        json_schema=core_schema.no_info_after_validator_function(
            from_text, core_schema.str_schema()
        ),
        python_schema=core_schema.no_info_plain_validator_function(from_python),
        serialization=core_schema.plain_serializer_function_ser_schema(
            serializer, when_used="always"
        ),
    )
