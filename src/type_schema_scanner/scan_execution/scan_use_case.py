"""Scan execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from type_schema_scanner.configuration import ConfigurationError, load_configuration
from type_schema_scanner.document_rendering import (
    OutputFormat,
    RenderError,
    build_components_document,
    render_document,
)
from type_schema_scanner.schema_models import SchemaNode
from type_schema_scanner.schema_scanning import ScanError, ScanSettings, scan_data_object
from type_schema_scanner.type_catalog import (
    CatalogError,
    TypeCatalog,
    TypeRef,
    load_type_catalog,
    parse_type_ref,
)

from .scan_contracts import ScanOutcome, ScanRequest

_LOGGER = logging.getLogger("type_schema_scanner.execution")


class ScanExecutionError(Exception):
    """Raised when a scan use case cannot be completed."""


def execute_scan(request: ScanRequest) -> ScanOutcome:
    """Load the catalog, scan every requested root and render a components document."""
    try:
        catalog = load_type_catalog(request.catalog_path)
        roots = tuple(parse_type_ref(root) for root in request.roots)
    except CatalogError as exc:
        raise ScanExecutionError(str(exc)) from exc
    return _scan_and_render(catalog, roots, request.settings, request.output_format)


def execute_configured_scan(config_path: Path | str) -> ScanOutcome:
    """Run the scans described by a scan configuration file."""
    try:
        configuration = load_configuration(config_path)
        catalog = load_type_catalog(configuration.catalog.path)
    except (ConfigurationError, CatalogError) as exc:
        raise ScanExecutionError(str(exc)) from exc
    return _scan_and_render(
        catalog,
        configuration.roots,
        configuration.settings,
        configuration.output.output_format,
    )


def _scan_and_render(
    catalog: TypeCatalog,
    roots: Sequence[TypeRef],
    settings: ScanSettings,
    output_format: OutputFormat,
) -> ScanOutcome:
    if not roots:
        raise ScanExecutionError("At least one root type is required.")
    schemas: dict[str, SchemaNode | None] = {}
    for root in roots:
        try:
            schemas[str(root)] = scan_data_object(catalog, root, settings)
        except ScanError as exc:
            raise ScanExecutionError(str(exc)) from exc
        if schemas[str(root)] is None:
            _LOGGER.warning("Root type %s is not in the catalog; no schema generated.", root)
    try:
        document_text = render_document(build_components_document(schemas), output_format)
    except RenderError as exc:
        raise ScanExecutionError(str(exc)) from exc
    return ScanOutcome(schemas=schemas, document_text=document_text)
