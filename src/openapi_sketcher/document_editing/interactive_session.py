"""Interactive gathering of insertion input."""

from __future__ import annotations

from typing import Protocol

import click

from openapi_sketcher.configuration.runtime_settings import Configuration
from openapi_sketcher.document_io.openapi_document import OpenApiDocument
from openapi_sketcher.schema_inference import JsonValue, parse_json_value

from .document_editor import insert_operation, insert_schema
from .operation_models import EditorInputError, HttpMethod, InsertionReport, OperationDraft
from .url_parsing import build_parameters, normalize_url, split_query

TARGET_PROMPT = "What do you want to insert? start with slash for a URL."
METHOD_PROMPT = "What http method?"
OPERATION_ID_PROMPT = "Name the operation id:"
QUERY_PARAM_PROMPT = "Enter a query param (blank to skip):"


class InputProvider(Protocol):
    """Source of operator answers."""

    def ask(self, message: str, default: str | None = None) -> str: ...

    def edit_json(self, message: str, placeholder: str) -> str: ...

    def notify(self, message: str) -> None: ...


class ClickInputProvider:
    """Terminal input provider backed by click prompts and the user's editor."""

    def ask(self, message: str, default: str | None = None) -> str:
        return click.prompt(
            message,
            default=default if default is not None else "",
            show_default=default is not None,
        )

    def edit_json(self, message: str, placeholder: str) -> str:
        click.echo(message)
        edited = click.edit(placeholder, extension=".json", require_save=False)
        return placeholder if edited is None else edited

    def notify(self, message: str) -> None:
        click.echo(message)


def run_insert_session(
    document: OpenApiDocument,
    provider: InputProvider,
    configuration: Configuration | None = None,
) -> InsertionReport:
    """Ask what to insert, gather every input, then apply exactly one insertion.

    Bodies are parsed before the document is touched, so malformed JSON leaves
    it unchanged.
    """
    resolved = configuration or Configuration()
    target = provider.ask(TARGET_PROMPT).strip()
    if not target:
        raise EditorInputError("Nothing to insert.")

    if target.startswith(("/", ":")):
        draft = gather_operation_draft(document, target, provider, resolved)
        return insert_operation(document, draft, resolved.operations)

    body = _edit_body(provider, "What is the schema body?", "schema body")
    return insert_schema(document, target, body)


def gather_operation_draft(
    document: OpenApiDocument,
    url: str,
    provider: InputProvider,
    configuration: Configuration,
) -> OperationDraft:
    method = _ask_method(provider, configuration.prompts.default_method)
    operation_id = provider.ask(OPERATION_ID_PROMPT).strip() or None

    path, query_names = split_query(normalize_url(url, document.server_urls()))
    wants_query_prompt = configuration.prompts.prompt_query_params and method == HttpMethod.GET
    if wants_query_prompt and not query_names:
        query_names = _ask_query_names(provider)

    request_body = None
    if method.has_request_body:
        request_body = _edit_body(provider, "What is the request body?", "request body")
    response_body = _edit_body(provider, "What is the response body?", "response body")

    return OperationDraft(
        url=path,
        method=method,
        operation_id=operation_id,
        parameters=build_parameters(path, query_names),
        request_body=request_body,
        response_body=response_body,
    )


def _ask_method(provider: InputProvider, default_method: str) -> HttpMethod:
    while True:
        method = HttpMethod.from_text(provider.ask(METHOD_PROMPT, default=default_method))
        if method is not None:
            return method
        provider.notify("Invalid method")


def _ask_query_names(provider: InputProvider) -> tuple[str, ...]:
    names: list[str] = []
    while True:
        name = provider.ask(QUERY_PARAM_PROMPT).strip()
        if not name:
            return tuple(names)
        names.append(name)


def _edit_body(provider: InputProvider, message: str, label: str) -> JsonValue:
    placeholder = f'{{"$comment": "Replace this JSON with the {label}"}}'
    return parse_json_value(provider.edit_json(message, placeholder))
