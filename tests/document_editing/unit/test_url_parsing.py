"""URL normalisation and parameter extraction tests."""

from __future__ import annotations

import pytest
from openapi_sketcher.document_editing import (
    EditorInputError,
    OperationParameter,
    ParameterLocation,
    build_parameters,
    normalize_url,
    path_parameter_names,
    split_query,
)

_SERVERS = ("http://localhost:5000/v1/api",)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/v1/api/iserver/account/{}/summary", "/iserver/account/{}/summary"),
        (":5000/v1/api/iserver/account/{}/summary", "/iserver/account/{}/summary"),
        ("/iserver/account/{}/summary", "/iserver/account/{}/summary"),
        ("/v1/apiary/hives", "/v1/apiary/hives"),
        ("/v1/api", "/"),
    ],
)
def test_normalize_url_strips_server_base_path(url: str, expected: str) -> None:
    assert normalize_url(url, _SERVERS) == expected


def test_normalize_url_skips_servers_without_base_path() -> None:
    assert normalize_url("/items", ("https://api.example.com", "https://api.example.com/")) == (
        "/items"
    )


def test_normalize_url_rejects_port_shorthand_without_path() -> None:
    with pytest.raises(EditorInputError):
        normalize_url(":5000", _SERVERS)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/items", ("/items", ())),
        ("/items?limit=10&offset=5", ("/items", ("limit", "offset"))),
        ("/items?flag", ("/items", ("flag",))),
        ("/items limit=10 offset", ("/items", ("limit", "offset"))),
    ],
)
def test_split_query(url: str, expected: tuple) -> None:
    assert split_query(url) == expected


def test_path_parameters_are_listed_in_order() -> None:
    assert path_parameter_names("/accounts/{account_id}/orders/{order_id}") == (
        "account_id",
        "order_id",
    )


def test_build_parameters_renders_path_then_query() -> None:
    parameters = build_parameters("/accounts/{id}", ("page",))

    assert parameters == (
        OperationParameter("id", ParameterLocation.PATH),
        OperationParameter("page", ParameterLocation.QUERY),
    )
    assert [parameter.to_openapi() for parameter in parameters] == [
        {
            "name": "id",
            "in": "path",
            "required": True,
            "style": "simple",
            "schema": {"type": "string"},
        },
        {
            "name": "page",
            "in": "query",
            "required": False,
            "style": "form",
            "schema": {"type": "string"},
        },
    ]
