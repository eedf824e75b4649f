"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "bridge.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Bridge configuration template for schema-form-bridge.
# Replace every <REQUIRED> placeholder before running fields, describe or validate.

schema:
  # Provide either inline JSON schema text or a schema file path (relative to this file).
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

options:
  # Report every validation error instead of only the first one.
  all_errors: true
  # Fill missing properties from schema defaults while validating.
  use_defaults: false
  # Drop undeclared properties: false, true (where additionalProperties is false) or "all".
  remove_additional: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML bridge configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder bridge configuration to the requested output path.

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
