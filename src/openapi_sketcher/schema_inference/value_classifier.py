"""Primitive-versus-composite classification of inferred schemas."""

from __future__ import annotations

from .schema_models import ArraySchema, ObjectSchema, Schema


def is_primitive(schema: Schema) -> bool:
    """Return True when the schema is inlined rather than extracted as a component.

    Objects and arrays count as primitive only while empty; there is nothing in
    them to extract. Scalars and the any-type schema are always inlined.
    """
    if isinstance(schema, ObjectSchema):
        return not schema.properties
    if isinstance(schema, ArraySchema):
        return schema.items is None
    return True
