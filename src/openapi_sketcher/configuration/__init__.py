"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    SUPPORTED_METHODS,
    Configuration,
    OperationSettings,
    PromptSettings,
)

__all__ = [
    "Configuration",
    "OperationSettings",
    "PromptSettings",
    "SUPPORTED_METHODS",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
