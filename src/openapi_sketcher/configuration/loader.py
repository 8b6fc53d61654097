"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .config_scaffold_builder import DEFAULT_CONFIG_FILENAME
from .runtime_settings import SUPPORTED_METHODS, Configuration, OperationSettings, PromptSettings

_STATUS_CODE = re.compile(r"^[1-5][0-9]{2}$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file.

    Without an explicit path the default file in the working directory is used
    when it exists; otherwise built-in defaults apply.
    """
    if config_path is None:
        default_path = Path(DEFAULT_CONFIG_FILENAME)
        if not default_path.exists():
            return Configuration()
        path = default_path
    else:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path.resolve(),
        prompts=_parse_prompts_section(parsed.get("prompts")),
        operations=_parse_operations_section(parsed.get("operations")),
    )


def _parse_prompts_section(value: Any) -> PromptSettings:
    section = _optional_mapping(value, "prompts")
    default_method = _require_non_empty_string(
        section.get("default_method", "get"), "prompts.default_method"
    ).lower()
    if default_method not in SUPPORTED_METHODS:
        raise ConfigurationError(
            f"prompts.default_method must be one of: {', '.join(SUPPORTED_METHODS)}."
        )
    prompt_query_params = _require_bool(
        section.get("prompt_query_params", True), "prompts.prompt_query_params"
    )
    return PromptSettings(default_method=default_method, prompt_query_params=prompt_query_params)


def _parse_operations_section(value: Any) -> OperationSettings:
    section = _optional_mapping(value, "operations")
    raw_status = section.get("success_status", "200")
    if isinstance(raw_status, int) and not isinstance(raw_status, bool):
        raw_status = str(raw_status)
    success_status = _require_non_empty_string(raw_status, "operations.success_status")
    if not _STATUS_CODE.match(success_status):
        raise ConfigurationError("operations.success_status must be a three-digit HTTP status.")
    media_type = _require_non_empty_string(
        section.get("media_type", "application/json"), "operations.media_type"
    )
    success_description = _require_non_empty_string(
        section.get("success_description", "OK"), "operations.success_description"
    )
    return OperationSettings(
        success_status=success_status,
        media_type=media_type,
        success_description=success_description,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
