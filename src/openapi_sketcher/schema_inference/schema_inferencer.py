"""Schema inference from example JSON values."""

from __future__ import annotations

from typing import assert_never

from .json_values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .naming import pascal_case
from .schema_models import (
    ArraySchema,
    BooleanSchema,
    InferenceResult,
    IntegerSchema,
    NamedSchema,
    NumberSchema,
    ObjectSchema,
    SchemaRef,
    SchemaReference,
    StringSchema,
)
from .value_classifier import is_primitive

ARRAY_ITEM_SCHEMA_NAME = "Inner"


def infer_schema(value: JsonValue) -> InferenceResult:
    """Derive an OpenAPI schema for an example JSON value.

    Non-primitive nested schemas are not inlined: they are returned as named
    dependencies and referenced by name from their parent. Dependencies are
    ordered children first, so registering them in order never leaves a
    dangling reference behind a newer entry.

    Only the first element of a non-empty array is inspected. Object property
    schemas are named after the PascalCase key and array item schemas always
    use ARRAY_ITEM_SCHEMA_NAME, so distinct shapes may share a name; the
    component registry keeps whichever was registered first.
    """
    if isinstance(value, JsonNull):
        return InferenceResult(ObjectSchema())
    if isinstance(value, JsonBool):
        return InferenceResult(BooleanSchema())
    if isinstance(value, JsonNumber):
        return InferenceResult(IntegerSchema() if value.is_integer else NumberSchema())
    if isinstance(value, JsonString):
        return InferenceResult(StringSchema())
    if isinstance(value, JsonArray):
        return _infer_array(value)
    if isinstance(value, JsonObject):
        return _infer_object(value)
    assert_never(value)


def _infer_array(value: JsonArray) -> InferenceResult:
    if not value.items:
        return InferenceResult(ArraySchema())

    item = infer_schema(value.items[0])
    dependencies = list(item.dependencies)
    item_ref: SchemaRef
    if is_primitive(item.schema):
        item_ref = item.schema
    else:
        dependencies.append(NamedSchema(ARRAY_ITEM_SCHEMA_NAME, item.schema))
        item_ref = SchemaReference(ARRAY_ITEM_SCHEMA_NAME)
    return InferenceResult(ArraySchema(item_ref), tuple(dependencies))


def _infer_object(value: JsonObject) -> InferenceResult:
    properties: dict[str, SchemaRef] = {}
    required: list[str] = []
    dependencies: list[NamedSchema] = []

    for key, child in value.entries:
        inferred = infer_schema(child)
        # Buried composites must surface even when this property is inlined.
        dependencies.extend(inferred.dependencies)
        if is_primitive(inferred.schema):
            properties[key] = inferred.schema
        else:
            name = pascal_case(key)
            dependencies.append(NamedSchema(name, inferred.schema))
            properties[key] = SchemaReference(name)
        required.append(key)

    return InferenceResult(ObjectSchema(properties, tuple(required)), tuple(dependencies))
