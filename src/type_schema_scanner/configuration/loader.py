"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from type_schema_scanner.document_rendering import OutputFormat, RenderError, parse_output_format
from type_schema_scanner.schema_scanning import ScanSettings
from type_schema_scanner.type_catalog import CatalogError, TypeRef, parse_type_ref

from .runtime_settings import CatalogConfig, OutputConfig, ScanConfiguration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ScanConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    catalog = _parse_catalog_section(parsed.get("catalog"), path.parent)
    roots, settings = _parse_scan_section(parsed.get("scan"))
    output = _parse_output_section(parsed.get("output"))

    return ScanConfiguration(
        path=path,
        catalog=catalog,
        roots=roots,
        settings=settings,
        output=output,
    )


def _parse_catalog_section(value: Any, base_path: Path) -> CatalogConfig:
    section = _require_mapping(value, "catalog")
    raw_path = _require_non_empty_string(section.get("path"), "catalog.path")
    catalog_path = _resolve_path(base_path, raw_path)
    if not catalog_path.exists():
        raise ConfigurationError(f"Catalog file not found: {catalog_path}")
    return CatalogConfig(path=catalog_path)


def _parse_scan_section(value: Any) -> tuple[tuple[TypeRef, ...], ScanSettings]:
    section = _require_mapping(value, "scan")
    raw_roots = section.get("roots")
    if isinstance(raw_roots, str):
        raw_roots = [raw_roots]
    if not isinstance(raw_roots, Sequence) or not raw_roots:
        raise ConfigurationError("scan.roots must contain at least one type.")
    roots = tuple(_parse_root(item) for item in raw_roots)
    infer = section.get("infer_unannotated_types", True)
    if not isinstance(infer, bool):
        raise ConfigurationError("scan.infer_unannotated_types must be a boolean.")
    return roots, ScanSettings(infer_unannotated_types=infer)


def _parse_root(value: Any) -> TypeRef:
    text = _require_non_empty_string(value, "scan.roots entry")
    try:
        return parse_type_ref(text)
    except CatalogError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_output_section(value: Any) -> OutputConfig:
    if value is None:
        return OutputConfig(output_format=OutputFormat.JSON)
    section = _require_mapping(value, "output")
    raw_format = _require_non_empty_string(section.get("format", "json"), "output.format")
    try:
        output_format = parse_output_format(raw_format)
    except RenderError as exc:
        raise ConfigurationError(f"output.format: {exc}") from exc
    return OutputConfig(output_format=output_format)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
