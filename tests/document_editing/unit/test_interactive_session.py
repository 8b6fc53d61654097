"""Interactive session tests driven by a scripted input provider."""

from __future__ import annotations

from collections import deque

import pytest
from openapi_sketcher.configuration import Configuration, PromptSettings
from openapi_sketcher.document_editing import (
    EditorInputError,
    HttpMethod,
    run_insert_session,
)
from openapi_sketcher.document_editing.interactive_session import (
    METHOD_PROMPT,
    QUERY_PARAM_PROMPT,
)
from openapi_sketcher.document_io import OpenApiDocument
from openapi_sketcher.schema_inference import MalformedInputError


class ScriptedInputProvider:
    """Answers prompts from queues and records what was asked."""

    def __init__(self, answers: list[str], bodies: list[str] | None = None) -> None:
        self._answers = deque(answers)
        self._bodies = deque(bodies or [])
        self.asked: list[str] = []
        self.edited: list[tuple[str, str]] = []
        self.notices: list[str] = []

    def ask(self, message: str, default: str | None = None) -> str:
        self.asked.append(message)
        answer = self._answers.popleft()
        return default if answer == "" and default is not None else answer

    def edit_json(self, message: str, placeholder: str) -> str:
        self.edited.append((message, placeholder))
        return self._bodies.popleft()

    def notify(self, message: str) -> None:
        self.notices.append(message)


def test_schema_target_inserts_named_schema() -> None:
    document = OpenApiDocument()
    provider = ScriptedInputProvider(["Foo"], ['{"a": 1}'])

    report = run_insert_session(document, provider)

    assert report.target == "Foo"
    assert document.top_level_schemas()["Foo"]["properties"] == {"a": {"type": "integer"}}
    assert provider.edited == [
        (
            "What is the schema body?",
            '{"$comment": "Replace this JSON with the schema body"}',
        )
    ]


def test_post_url_gathers_request_and_response_bodies() -> None:
    document = OpenApiDocument(root={"servers": [{"url": "https://api.example.com/v2"}]})
    provider = ScriptedInputProvider(
        ["/v2/widgets", "post", "createWidget"],
        ['{"name": "x"}', '{"id": 1, "name": "x"}'],
    )

    report = run_insert_session(document, provider)

    assert report.target == "POST /widgets"
    operation = document.paths()["/widgets"]["post"]
    assert operation["operationId"] == "createWidget"
    assert "requestBody" in operation
    assert [message for message, _ in provider.edited] == [
        "What is the request body?",
        "What is the response body?",
    ]
    assert QUERY_PARAM_PROMPT not in provider.asked


def test_invalid_method_is_asked_again() -> None:
    document = OpenApiDocument()
    provider = ScriptedInputProvider(["/widgets", "patch", "FETCH", "delete", ""], ["{}"])

    run_insert_session(document, provider)

    assert provider.asked.count(METHOD_PROMPT) == 3
    assert provider.notices == ["Invalid method", "Invalid method"]
    assert "delete" in document.paths()["/widgets"]


def test_blank_method_uses_configured_default() -> None:
    document = OpenApiDocument()
    configuration = Configuration(prompts=PromptSettings(default_method="put"))
    provider = ScriptedInputProvider(["/widgets/{id}", "", ""], ['{"id": 1}', '{"id": 1}'])

    run_insert_session(document, provider, configuration)

    operation = document.paths()["/widgets/{id}"][HttpMethod.PUT.value]
    assert "operationId" not in operation
    assert operation["parameters"][0]["name"] == "id"
    assert operation["parameters"][0]["in"] == "path"


def test_get_without_inline_query_asks_for_query_params() -> None:
    document = OpenApiDocument()
    provider = ScriptedInputProvider(
        ["/widgets", "get", "listWidgets", "page", "size", ""],
        ["[]"],
    )

    run_insert_session(document, provider)

    parameters = document.paths()["/widgets"]["get"]["parameters"]
    assert [(p["name"], p["in"]) for p in parameters] == [("page", "query"), ("size", "query")]


def test_get_with_inline_query_does_not_prompt() -> None:
    document = OpenApiDocument()
    provider = ScriptedInputProvider(["/widgets?page=1&size=10", "get", ""], ["[]"])

    run_insert_session(document, provider)

    assert QUERY_PARAM_PROMPT not in provider.asked
    assert list(document.paths()) == ["/widgets"]
    parameters = document.paths()["/widgets"]["get"]["parameters"]
    assert [p["name"] for p in parameters] == ["page", "size"]


def test_query_prompt_can_be_disabled() -> None:
    document = OpenApiDocument()
    configuration = Configuration(prompts=PromptSettings(prompt_query_params=False))
    provider = ScriptedInputProvider(["/widgets", "get", ""], ["[]"])

    run_insert_session(document, provider, configuration)

    assert QUERY_PARAM_PROMPT not in provider.asked


def test_malformed_response_body_leaves_document_untouched() -> None:
    document = OpenApiDocument(root={"openapi": "3.0.3"})
    provider = ScriptedInputProvider(["/widgets", "post", ""], ['{"name": "x"}', "{oops"])

    with pytest.raises(MalformedInputError):
        run_insert_session(document, provider)

    assert document.root == {"openapi": "3.0.3"}


def test_empty_target_is_rejected() -> None:
    with pytest.raises(EditorInputError, match="Nothing to insert"):
        run_insert_session(OpenApiDocument(), ScriptedInputProvider(["   "]))
