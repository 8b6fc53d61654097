"""JSON value entities and parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeAlias


class MalformedInputError(Exception):
    """Raised when body text is not valid JSON."""


@dataclass(frozen=True)
class JsonNull:
    """JSON null."""


@dataclass(frozen=True)
class JsonBool:
    """JSON boolean."""

    value: bool


@dataclass(frozen=True)
class JsonNumber:
    """JSON number with the integral/fractional distinction kept."""

    value: int | float
    is_integer: bool


@dataclass(frozen=True)
class JsonString:
    """JSON string."""

    value: str


@dataclass(frozen=True)
class JsonArray:
    """Ordered JSON array."""

    items: tuple[JsonValue, ...]


@dataclass(frozen=True)
class JsonObject:
    """JSON object with key insertion order preserved."""

    entries: tuple[tuple[str, JsonValue], ...]

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)


JsonValue: TypeAlias = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

# Nesting deeper than this is rejected before conversion or inference recurse.
MAX_NESTING_DEPTH = 128


def parse_json_value(text: str) -> JsonValue:
    """Parse JSON text into a JsonValue tree.

    Raises:
      MalformedInputError: If the text is not valid JSON, contains NaN or
        Infinity, or nests arrays/objects deeper than MAX_NESTING_DEPTH.
    """
    try:
        native = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON body: {exc}") from exc
    except RecursionError as exc:
        raise MalformedInputError("JSON body is nested too deeply") from exc
    return to_json_value(native)


def _reject_constant(constant: str) -> Any:
    raise MalformedInputError(f"Invalid JSON body: {constant} is not a JSON number")


def to_json_value(native: Any, depth: int = 0) -> JsonValue:
    """Convert decoded Python JSON data into a JsonValue tree."""
    if native is None:
        return JsonNull()
    if isinstance(native, bool):
        return JsonBool(native)
    if isinstance(native, int):
        return JsonNumber(native, is_integer=True)
    if isinstance(native, float):
        return JsonNumber(native, is_integer=False)
    if isinstance(native, str):
        return JsonString(native)
    if isinstance(native, (list, dict)) and depth >= MAX_NESTING_DEPTH:
        raise MalformedInputError("JSON body is nested too deeply")
    if isinstance(native, list):
        return JsonArray(tuple(to_json_value(item, depth + 1) for item in native))
    if isinstance(native, dict):
        return JsonObject(
            tuple((str(key), to_json_value(value, depth + 1)) for key, value in native.items())
        )
    raise TypeError(f"Unsupported JSON value type: {type(native).__name__}")
