"""URL normalisation and parameter extraction for typed operation targets."""

from __future__ import annotations

import re
from collections.abc import Sequence
from urllib.parse import urlsplit

from .operation_models import EditorInputError, OperationParameter, ParameterLocation

_PATH_PARAMETER = re.compile(r"\{([^{}]+)\}")


def normalize_url(url: str, server_urls: Sequence[str]) -> str:
    """Reduce a typed URL to a path relative to the document's servers.

    A leading `:port` shorthand (`:5000/v1/api/items`) is dropped up to the
    first slash, then the base path of the first matching server is removed.
    """
    normalized = url.strip()
    if normalized.startswith(":"):
        slash = normalized.find("/")
        if slash == -1:
            raise EditorInputError(f"URL has no path: {url}")
        normalized = normalized[slash:]

    for server_url in server_urls:
        base_path = urlsplit(server_url).path.rstrip("/")
        if not base_path:
            continue
        if normalized == base_path or normalized.startswith(f"{base_path}/"):
            normalized = normalized[len(base_path) :] or "/"
            break
    return normalized


def split_query(url: str) -> tuple[str, tuple[str, ...]]:
    """Split a URL into its path and the query parameter names it carries.

    Both `/items?limit=10&offset` and the shorthand `/items limit=10 offset`
    yield `("/items", ("limit", "offset"))`.
    """
    if " " in url:
        path, *tokens = url.split()
        return path, tuple(_parameter_name(token) for token in tokens)
    if "?" in url:
        path, query = url.split("?", 1)
        return path, tuple(_parameter_name(part) for part in query.split("&") if part)
    return url, ()


def path_parameter_names(path: str) -> tuple[str, ...]:
    return tuple(_PATH_PARAMETER.findall(path))


def build_parameters(path: str, query_names: Sequence[str]) -> tuple[OperationParameter, ...]:
    path_params = [
        OperationParameter(name, ParameterLocation.PATH) for name in path_parameter_names(path)
    ]
    query_params = [OperationParameter(name, ParameterLocation.QUERY) for name in query_names]
    return tuple(path_params + query_params)


def _parameter_name(token: str) -> str:
    return token.split("=", 1)[0]
