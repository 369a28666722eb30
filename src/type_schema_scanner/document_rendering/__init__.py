"""Document rendering exports."""

from .schema_document import (
    OutputFormat,
    RenderError,
    build_components_document,
    parse_output_format,
    render_document,
    to_mapping,
)

__all__ = [
    "OutputFormat",
    "RenderError",
    "build_components_document",
    "parse_output_format",
    "render_document",
    "to_mapping",
]
