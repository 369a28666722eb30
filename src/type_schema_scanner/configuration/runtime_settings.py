"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from type_schema_scanner.document_rendering import OutputFormat
from type_schema_scanner.schema_scanning import ScanSettings
from type_schema_scanner.type_catalog import TypeRef


@dataclass(frozen=True)
class CatalogConfig:
    """Location of the type catalog document."""

    path: Path


@dataclass(frozen=True)
class OutputConfig:
    """Rendering settings for generated documents."""

    output_format: OutputFormat


@dataclass(frozen=True)
class ScanConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    catalog: CatalogConfig
    roots: tuple[TypeRef, ...]
    settings: ScanSettings
    output: OutputConfig
