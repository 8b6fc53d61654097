"""Component name derivation tests."""

from __future__ import annotations

import pytest
from openapi_sketcher.schema_inference import pascal_case


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("user_id", "UserId"),
        ("createdAt", "CreatedAt"),
        ("HTTPServer", "HttpServer"),
        ("address-line2", "AddressLine2"),
        ("line items", "LineItems"),
        ("ID", "Id"),
        ("already_Pascal_Case", "AlreadyPascalCase"),
        ("owner", "Owner"),
        ("straße_name", "StraßeName"),
        ("café", "Café"),
        ("ÉtatCivil", "ÉtatCivil"),
        ("größe2", "Größe2"),
    ],
)
def test_pascal_case(key: str, expected: str) -> None:
    assert pascal_case(key) == expected
