"""Insertion of inferred schemas and operations into an OpenAPI document."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from openapi_sketcher.component_registration import ComponentRegistration, ComponentRegistry
from openapi_sketcher.configuration.runtime_settings import OperationSettings
from openapi_sketcher.document_io.openapi_document import (
    DocumentStructureError,
    OpenApiDocument,
)
from openapi_sketcher.schema_inference import JsonValue, infer_schema

from .operation_models import EditorInputError, InsertionReport, OperationDraft

logger = logging.getLogger(__name__)


def insert_schema(document: OpenApiDocument, name: str, body: JsonValue) -> InsertionReport:
    """Infer a schema from `body` and store it in the top-level `schemas` map.

    Dependencies go through the component registry first. The top-level entry
    itself overwrites any schema already stored under `name`.
    """
    schema_name = name.strip()
    if not schema_name:
        raise EditorInputError("Schema name must not be empty.")

    inferred = infer_schema(body)
    try:
        registry = ComponentRegistry(document.component_schemas())
        top_level_schemas = document.top_level_schemas()
    except DocumentStructureError as exc:
        raise EditorInputError(str(exc)) from exc

    registrations = registry.register_all(inferred.dependencies)
    if schema_name in top_level_schemas:
        logger.info("Replacing top-level schema %s", schema_name)
    top_level_schemas[schema_name] = inferred.schema.to_openapi()
    return InsertionReport(target=schema_name, registrations=tuple(registrations))


def insert_operation(
    document: OpenApiDocument,
    draft: OperationDraft,
    settings: OperationSettings | None = None,
) -> InsertionReport:
    """Insert or update the operation for `draft.method` at `draft.url`.

    An existing operation is updated in place: unrelated fields survive, new
    parameters are appended, and the inferred body schemas replace the ones
    stored for the configured media type.
    """
    resolved_settings = settings or OperationSettings()
    try:
        registry = ComponentRegistry(document.component_schemas())
        path_item = document.path_item(draft.url)
    except DocumentStructureError as exc:
        raise EditorInputError(str(exc)) from exc

    operation = _mapping_slot(path_item, draft.method.value, f"{draft.url} {draft.method.value}")
    if draft.operation_id:
        operation["operationId"] = draft.operation_id
    _merge_parameters(operation, draft)

    registrations: list[ComponentRegistration] = []
    if draft.method.has_request_body and draft.request_body is not None:
        request = infer_schema(draft.request_body)
        request_body = _mapping_slot(operation, "requestBody", "requestBody")
        request_body.setdefault("required", True)
        _attach_schema(request_body, resolved_settings.media_type, request.schema.to_openapi())
        registrations.extend(registry.register_all(request.dependencies))

    response = infer_schema(draft.response_body)
    responses = _mapping_slot(operation, "responses", "responses")
    success = _mapping_slot(responses, resolved_settings.success_status, "success response")
    success.setdefault("description", resolved_settings.success_description)
    _attach_schema(success, resolved_settings.media_type, response.schema.to_openapi())
    registrations.extend(registry.register_all(response.dependencies))

    logger.debug("Inserted %s %s", draft.method.value.upper(), draft.url)
    return InsertionReport(
        target=f"{draft.method.value.upper()} {draft.url}",
        registrations=tuple(registrations),
    )


def _merge_parameters(operation: MutableMapping[str, Any], draft: OperationDraft) -> None:
    if not draft.parameters:
        return
    parameters = operation.setdefault("parameters", [])
    if not isinstance(parameters, list):
        raise EditorInputError("Operation parameters must be a list.")
    present = {
        (parameter.get("name"), parameter.get("in"))
        for parameter in parameters
        if isinstance(parameter, MutableMapping)
    }
    for parameter in draft.parameters:
        key = (parameter.name, parameter.location.value)
        if key in present:
            continue
        parameters.append(parameter.to_openapi())
        present.add(key)


def _attach_schema(
    container: MutableMapping[str, Any], media_type: str, schema: dict[str, Any]
) -> None:
    content = _mapping_slot(container, "content", "content")
    media = _mapping_slot(content, media_type, media_type)
    media["schema"] = schema


def _mapping_slot(
    parent: MutableMapping[str, Any], key: str, label: str
) -> MutableMapping[str, Any]:
    value = parent.get(key)
    if value is None:
        value = {}
        parent[key] = value
    if not isinstance(value, MutableMapping):
        raise EditorInputError(f"Document entry '{label}' must be a mapping.")
    return value
