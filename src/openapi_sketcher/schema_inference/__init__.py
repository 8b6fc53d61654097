"""Schema inference exports."""

from .json_values import (
    MAX_NESTING_DEPTH,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    MalformedInputError,
    parse_json_value,
    to_json_value,
)
from .naming import pascal_case
from .schema_inferencer import ARRAY_ITEM_SCHEMA_NAME, infer_schema
from .schema_models import (
    AnyTypeSchema,
    ArraySchema,
    BooleanSchema,
    InferenceResult,
    IntegerSchema,
    NamedSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    SchemaRef,
    SchemaReference,
    StringSchema,
)
from .value_classifier import is_primitive

__all__ = [
    "ARRAY_ITEM_SCHEMA_NAME",
    "MAX_NESTING_DEPTH",
    "AnyTypeSchema",
    "ArraySchema",
    "BooleanSchema",
    "InferenceResult",
    "IntegerSchema",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "MalformedInputError",
    "NamedSchema",
    "NumberSchema",
    "ObjectSchema",
    "Schema",
    "SchemaRef",
    "SchemaReference",
    "StringSchema",
    "infer_schema",
    "is_primitive",
    "parse_json_value",
    "pascal_case",
    "to_json_value",
]
