"""OpenAPI document entity."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any


class DocumentStructureError(Exception):
    """Raised when a document section the editor writes to is not a mapping."""


@dataclass
class OpenApiDocument:
    """Mutable in-memory OpenAPI document.

    The document is kept as the plain mapping tree it was loaded from so that
    sections the editor never touches are written back unchanged.
    """

    root: dict[str, Any] = field(default_factory=dict)

    def server_urls(self) -> tuple[str, ...]:
        servers = self.root.get("servers") or []
        return tuple(
            server["url"]
            for server in servers
            if isinstance(server, MutableMapping) and isinstance(server.get("url"), str)
        )

    def paths(self) -> MutableMapping[str, Any]:
        return _section(self.root, "paths")

    def path_item(self, url: str) -> MutableMapping[str, Any]:
        """Return the path item for `url`, creating an empty one when missing."""
        return _section(self.paths(), url)

    def component_schemas(self) -> MutableMapping[str, Any]:
        return _section(_section(self.root, "components"), "schemas")

    def top_level_schemas(self) -> MutableMapping[str, Any]:
        return _section(self.root, "schemas")


def _section(parent: MutableMapping[str, Any], key: str) -> MutableMapping[str, Any]:
    value = parent.get(key)
    if value is None:
        value = {}
        parent[key] = value
    if not isinstance(value, MutableMapping):
        raise DocumentStructureError(f"Document section '{key}' must be a mapping.")
    return value
