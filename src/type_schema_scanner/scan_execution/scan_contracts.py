"""Scan execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from type_schema_scanner.document_rendering import OutputFormat
from type_schema_scanner.schema_models import SchemaNode
from type_schema_scanner.schema_scanning import DEFAULT_SCAN_SETTINGS, ScanSettings


@dataclass(frozen=True)
class ScanRequest:
    """Input contract for scanning one catalog."""

    catalog_path: str
    roots: tuple[str, ...]
    settings: ScanSettings = DEFAULT_SCAN_SETTINGS
    output_format: OutputFormat = OutputFormat.JSON


@dataclass(frozen=True)
class ScanOutcome:
    """Output contract for one completed scan run."""

    schemas: dict[str, SchemaNode | None]
    document_text: str

    @property
    def unresolved_roots(self) -> tuple[str, ...]:
        """Root types that produced no schema because they are not catalogued."""
        return tuple(name for name, node in self.schemas.items() if node is None)
