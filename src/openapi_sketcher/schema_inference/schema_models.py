"""OpenAPI schema entities produced by inference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

COMPONENT_SCHEMA_PREFIX = "#/components/schemas/"


@dataclass(frozen=True)
class BooleanSchema:
    def to_openapi(self) -> dict[str, Any]:
        return {"type": "boolean"}


@dataclass(frozen=True)
class IntegerSchema:
    def to_openapi(self) -> dict[str, Any]:
        return {"type": "integer"}


@dataclass(frozen=True)
class NumberSchema:
    def to_openapi(self) -> dict[str, Any]:
        return {"type": "number"}


@dataclass(frozen=True)
class StringSchema:
    def to_openapi(self) -> dict[str, Any]:
        return {"type": "string"}


@dataclass(frozen=True)
class AnyTypeSchema:
    """Schema accepting any value."""

    def to_openapi(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class SchemaReference:
    """Named reference to a component schema, resolved by name on read."""

    name: str

    @property
    def ref(self) -> str:
        return f"{COMPONENT_SCHEMA_PREFIX}{self.name}"

    def to_openapi(self) -> dict[str, Any]:
        return {"$ref": self.ref}


@dataclass(frozen=True)
class ArraySchema:
    """Array schema; `items` is None when the item type is unknown."""

    items: SchemaRef | None = None

    def to_openapi(self) -> dict[str, Any]:
        item_schema = self.items if self.items is not None else AnyTypeSchema()
        return {"type": "array", "items": item_schema.to_openapi()}


@dataclass(frozen=True)
class ObjectSchema:
    """Object schema with ordered properties."""

    properties: dict[str, SchemaRef] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def to_openapi(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"type": "object"}
        if self.required:
            rendered["required"] = list(self.required)
        if self.properties:
            rendered["properties"] = {
                name: schema.to_openapi() for name, schema in self.properties.items()
            }
        return rendered


Schema: TypeAlias = (
    BooleanSchema
    | IntegerSchema
    | NumberSchema
    | StringSchema
    | ArraySchema
    | ObjectSchema
    | AnyTypeSchema
)
SchemaRef: TypeAlias = Schema | SchemaReference


@dataclass(frozen=True)
class NamedSchema:
    """Dependent schema that must be registered as a component under `name`."""

    name: str
    schema: Schema


@dataclass(frozen=True)
class InferenceResult:
    """Top-level schema plus the dependencies it references, children first."""

    schema: Schema
    dependencies: tuple[NamedSchema, ...] = ()
