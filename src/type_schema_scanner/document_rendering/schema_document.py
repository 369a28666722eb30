"""Conversion of schema trees into OpenAPI-style documents."""

from __future__ import annotations

import json
import logging
import re
from collections import Counter
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

import yaml

from type_schema_scanner.schema_models import SchemaNode

_LOGGER = logging.getLogger("type_schema_scanner.rendering")
_QUALIFIED_NAME = re.compile(r"[\w$.]+")


class OutputFormat(str, Enum):
    """Supported document serializations."""

    JSON = "json"
    YAML = "yaml"


class RenderError(Exception):
    """Raised when a document cannot be rendered."""


_SCALAR_KEYS = (
    ("ref", "$ref"),
    ("title", "title"),
    ("description", "description"),
    ("format", "format"),
    ("default_value", "default"),
    ("example", "example"),
    ("pattern", "pattern"),
    ("nullable", "nullable"),
    ("read_only", "readOnly"),
    ("write_only", "writeOnly"),
    ("deprecated", "deprecated"),
    ("multiple_of", "multipleOf"),
    ("minimum", "minimum"),
    ("exclusive_minimum", "exclusiveMinimum"),
    ("maximum", "maximum"),
    ("exclusive_maximum", "exclusiveMaximum"),
    ("min_length", "minLength"),
    ("max_length", "maxLength"),
    ("min_items", "minItems"),
    ("max_items", "maxItems"),
    ("unique_items", "uniqueItems"),
    ("min_properties", "minProperties"),
    ("max_properties", "maxProperties"),
)


def to_mapping(node: SchemaNode) -> dict[str, Any]:
    """Return ``node`` as a plain mapping; hidden properties are left out."""
    document: dict[str, Any] = {}
    if node.kind is not None:
        document["type"] = node.kind.value
    for attribute, key in _SCALAR_KEYS:
        value = getattr(node, attribute)
        if value is not None:
            document[key] = _plain_number(value) if isinstance(value, Decimal) else value
    if node.enumeration:
        document["enum"] = list(node.enumeration)
    visible = {name: child for name, child in node.properties.items() if not child.hidden}
    if visible:
        document["properties"] = {name: to_mapping(child) for name, child in visible.items()}
    required = [name for name in node.required if name not in node.properties or name in visible]
    if required:
        document["required"] = required
    if node.items is not None:
        document["items"] = to_mapping(node.items)
    if node.additional_properties is not None:
        document["additionalProperties"] = to_mapping(node.additional_properties)
    return document


def build_components_document(
    schemas: Mapping[str, SchemaNode | None],
) -> dict[str, Any]:
    """Splice scan results keyed by class name into a ``components.schemas`` section.

    Roots are keyed by simple name. Roots whose simple names clash fall back
    to the simple names of their type arguments, then to their qualified
    names. Roots without a schema are left out.
    """
    present = {class_name: node for class_name, node in schemas.items() if node is not None}
    keys = _component_keys(list(present))
    return {
        "components": {
            "schemas": {keys[class_name]: to_mapping(node) for class_name, node in present.items()}
        }
    }


def render_document(document: Mapping[str, Any], output_format: OutputFormat | str) -> str:
    """Serialize ``document`` as JSON or YAML text."""
    resolved = parse_output_format(output_format)
    if resolved is OutputFormat.JSON:
        return json.dumps(document, indent=2) + "\n"
    return yaml.safe_dump(dict(document), sort_keys=False, default_flow_style=False)


def parse_output_format(value: OutputFormat | str) -> OutputFormat:
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(value.strip().lower())
    except (AttributeError, ValueError) as exc:
        raise RenderError(f"Unsupported output format: {value}") from exc


def _plain_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _component_keys(class_names: list[str]) -> dict[str, str]:
    keys: dict[str, str] = {}
    pending = class_names
    for naming in (_simple_name, _argument_name, _qualified_name):
        candidates = {class_name: naming(class_name) for class_name in pending}
        counts = Counter(candidates.values())
        taken = set(keys.values())
        unresolved = []
        for class_name, key in candidates.items():
            if counts[key] == 1 and key not in taken:
                keys[class_name] = key
            else:
                unresolved.append(class_name)
        pending = unresolved
    if pending:
        raise RenderError(f"Schema names cannot be told apart: {', '.join(pending)}")
    for class_name, key in keys.items():
        if key != _simple_name(class_name):
            _LOGGER.warning("Schema name for %s is ambiguous; using %s", class_name, key)
    return keys


def _simple_name(class_name: str) -> str:
    raw_name = class_name.split("<", 1)[0].strip()
    return raw_name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]


def _argument_name(class_name: str) -> str:
    return _flatten(_QUALIFIED_NAME.sub(lambda match: _simple_name(match.group(0)), class_name))


def _qualified_name(class_name: str) -> str:
    return _flatten(class_name.replace("$", "."))


def _flatten(type_text: str) -> str:
    flat = type_text.replace("[]", "Array").replace(" ", "").replace(">", "")
    return flat.replace("<", "_").replace(",", "_").replace("?", "Any")
