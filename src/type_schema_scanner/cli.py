"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from type_schema_scanner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from type_schema_scanner.document_rendering import OutputFormat
from type_schema_scanner.scan_execution import (
    ScanExecutionError,
    ScanOutcome,
    ScanRequest,
    execute_configured_scan,
    execute_scan,
)
from type_schema_scanner.schema_scanning import ScanSettings

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="type-schema-scanner")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostics level written to stderr",
)
def cli(log_level: str) -> None:
    """Generate OpenAPI schemas from a static type catalog."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML scan configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML scan configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="scan")
@click.option(
    "--catalog",
    "catalog_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON type catalog",
)
@click.option(
    "--root",
    "roots",
    required=True,
    multiple=True,
    help="Root type to scan, e.g. com.example.Order; repeat for several roots",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([item.value for item in OutputFormat], case_sensitive=False),
    default=OutputFormat.JSON.value,
    show_default=True,
    help="Serialization of the generated document",
)
@click.option(
    "--infer-unannotated-types/--no-infer-unannotated-types",
    default=True,
    show_default=True,
    help="Infer schemas for fields without a schema annotation",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the generated document; printed to stdout otherwise",
)
def scan(
    catalog_path: str,
    roots: tuple[str, ...],
    output_format: str,
    infer_unannotated_types: bool,
    output_path: str | None,
) -> None:
    """Scan root types from a type catalog into a components document."""
    try:
        outcome = execute_scan(
            ScanRequest(
                catalog_path=catalog_path,
                roots=roots,
                settings=ScanSettings(infer_unannotated_types=infer_unannotated_types),
                output_format=OutputFormat(output_format.lower()),
            )
        )
    except ScanExecutionError as exc:
        raise CliError(str(exc)) from exc
    _emit(outcome, output_path)


@cli.command(name="scan-config")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON scan configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the generated document; printed to stdout otherwise",
)
def scan_config(config_path: str, output_path: str | None) -> None:
    """Run the scans described by a configuration file."""
    try:
        outcome = execute_configured_scan(config_path)
    except ScanExecutionError as exc:
        raise CliError(str(exc)) from exc
    _emit(outcome, output_path)


def _emit(outcome: ScanOutcome, output_path: str | None) -> None:
    for root in outcome.unresolved_roots:
        click.echo(f"warning: {root} is not in the catalog", err=True)
    if output_path is None:
        click.echo(outcome.document_text, nl=False)
        return
    destination = Path(output_path)
    try:
        destination.write_text(outcome.document_text, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
