"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = ".openapi-sketcher.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Editor configuration for openapi-sketcher.
# Every key is optional; remove a key to fall back to its default.

prompts:
  # Method offered by default at the "What http method?" prompt (get, post, put or delete).
  default_method: get
  # Ask for query parameter names on GET operations whose URL carries none.
  prompt_query_params: true

operations:
  # Response code that receives the inferred response body schema.
  success_status: "200"
  # Media type used for inferred request and response bodies.
  media_type: application/json
  # Description written on newly created success responses.
  success_description: OK
"""


def build_placeholder_configuration() -> str:
    """Build a YAML editor configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the editor configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
