"""
Serialization helpers shared by the model dataclasses.

Response models implement their own ``from_dict``; request models get
``to_dict`` from RequestModel, which writes camelCase keys and drops fields
left as None.
"""

from collections.abc import Callable
from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


def camel(name: str) -> str:
    """snake_case -> camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_json_value(value: Any) -> Any:
    """Convert a model value into something json.dumps accepts."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class RequestModel:
    """Mixin for request dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        result: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.metadata.get("json", camel(f.name))] = to_json_value(value)
        return result


class QueryParams(RequestModel):
    """Mixin for list/query parameter dataclasses; values stay unconverted for the query encoder."""

    def to_params(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is not None:
                result[f.metadata.get("json", camel(f.name))] = value
        return result


def optional(parser: Callable[[Any], T], value: Any) -> T | None:
    """Parse value unless it is absent."""
    if value is None:
        return None
    return parser(value)


def list_of(parser: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Lift an item parser to a parser for JSON arrays."""

    def parse(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [parser(item) for item in data]

    return parse


def require_dict(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{name} expects a JSON object, got {type(data).__name__}")
    return data
