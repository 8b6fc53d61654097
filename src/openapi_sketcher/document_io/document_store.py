"""YAML persistence for OpenAPI documents."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

import yaml

from .openapi_document import OpenApiDocument

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when the OpenAPI document cannot be read or written."""


def load_document(document_path: Path | str) -> OpenApiDocument:
    """Load a full OpenAPI document from its YAML file."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"OpenAPI document not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to read OpenAPI document: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Failed to parse OpenAPI document: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise DocumentError("OpenAPI document root must be a mapping.")

    root = dict(parsed)
    _normalize_response_codes(root.get("paths"))
    logger.debug("Loaded OpenAPI document from %s", path)
    return OpenApiDocument(root=root)


def save_document(document: OpenApiDocument, document_path: Path | str) -> Path:
    """Serialize the whole document back to YAML, replacing the file."""
    path = Path(document_path)
    text = yaml.safe_dump(document.root, sort_keys=False, allow_unicode=True)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to write OpenAPI document: {exc}") from exc
    logger.info("Saved OpenAPI document to %s", path.resolve())
    return path.resolve()


def _normalize_response_codes(paths: Any) -> None:
    # Unquoted YAML keys such as `200:` load as integers.
    if not isinstance(paths, Mapping):
        return
    for path_item in paths.values():
        if not isinstance(path_item, Mapping):
            continue
        for operation in path_item.values():
            if not isinstance(operation, Mapping):
                continue
            responses = operation.get("responses")
            if isinstance(responses, MutableMapping):
                normalized = {str(code): response for code, response in responses.items()}
                responses.clear()
                responses.update(normalized)
