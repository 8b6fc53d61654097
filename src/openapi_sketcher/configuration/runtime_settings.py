"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

SUPPORTED_METHODS = ("get", "post", "put", "delete")


@dataclass(frozen=True)
class PromptSettings:
    """Interactive prompting behaviour."""

    default_method: str = "get"
    prompt_query_params: bool = True


@dataclass(frozen=True)
class OperationSettings:
    """How inferred bodies are attached to operations."""

    success_status: str = "200"
    media_type: str = "application/json"
    success_description: str = "OK"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    prompts: PromptSettings = field(default_factory=PromptSettings)
    operations: OperationSettings = field(default_factory=OperationSettings)
