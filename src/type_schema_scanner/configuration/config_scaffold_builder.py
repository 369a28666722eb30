"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "scan.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Scan configuration template for type-schema-scanner.
# Replace every <REQUIRED> placeholder before running scan-config.

catalog:
  # YAML or JSON type catalog; relative paths resolve against this file.
  path: "<REQUIRED>"

scan:
  # Root types written as type references, e.g. com.example.Order
  # or com.example.Page<com.example.Order>.
  roots:
    - "<REQUIRED>"
  # Infer schemas for fields without a schema annotation.
  infer_unannotated_types: true

output:
  # json or yaml
  format: json
"""


def build_placeholder_configuration() -> str:
    """Build a YAML scan configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder scan configuration template to the requested output path.

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
        raise FileExistsError(f"Scan configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
