"""Document editing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from openapi_sketcher.component_registration.registration_outcomes import ComponentRegistration
from openapi_sketcher.schema_inference.json_values import JsonValue


class EditorInputError(Exception):
    """Raised when an insertion cannot be applied to the document."""


class HttpMethod(str, Enum):
    """HTTP methods an operation can be inserted for."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    @property
    def has_request_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)

    @staticmethod
    def from_text(text: str) -> HttpMethod | None:
        """Return the method named by `text`, or None when it is not supported."""
        try:
            return HttpMethod(text.strip().lower())
        except ValueError:
            return None


class ParameterLocation(str, Enum):
    PATH = "path"
    QUERY = "query"


@dataclass(frozen=True)
class OperationParameter:
    """String-typed path or query parameter."""

    name: str
    location: ParameterLocation

    def to_openapi(self) -> dict[str, Any]:
        is_path = self.location == ParameterLocation.PATH
        return {
            "name": self.name,
            "in": self.location.value,
            "required": is_path,
            "style": "simple" if is_path else "form",
            "schema": {"type": "string"},
        }


@dataclass(frozen=True)
class OperationDraft:
    """Fully gathered input for inserting one operation.

    `url` is already normalised against the document's servers and stripped
    of any query string.
    """

    url: str
    method: HttpMethod
    response_body: JsonValue
    operation_id: str | None = None
    parameters: tuple[OperationParameter, ...] = ()
    request_body: JsonValue | None = None


@dataclass(frozen=True)
class InsertionReport:
    """What one insertion did to the document."""

    target: str
    registrations: tuple[ComponentRegistration, ...]

    @property
    def collisions(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.registrations if item.is_collision)
