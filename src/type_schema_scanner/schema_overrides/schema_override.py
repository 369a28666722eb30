"""Explicit schema annotation values applied over inferred defaults."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from type_schema_scanner.annotation_reading import (
    PROP_FORMAT,
    PROP_HIDDEN,
    PROP_IMPLEMENTATION,
    PROP_REQUIRED,
    PROP_TYPE,
    is_ref,
    read_bool,
    read_bool_with_default,
    read_decimal,
    read_enum,
    read_int,
    read_string,
    read_string_list,
    read_type,
)
from type_schema_scanner.schema_models import SchemaKind, SchemaNode, merge_nodes
from type_schema_scanner.type_catalog import Annotation, TypeRef

_LOGGER = logging.getLogger("type_schema_scanner.overrides")

_STRING_PROPERTIES = ("title", "description", "default_value", "example", "pattern", "ref")
_BOOL_PROPERTIES = (
    "nullable",
    "read_only",
    "write_only",
    "deprecated",
    "unique_items",
    "exclusive_minimum",
    "exclusive_maximum",
)
_DECIMAL_PROPERTIES = ("minimum", "maximum", "multiple_of")
_INT_PROPERTIES = (
    "min_length",
    "max_length",
    "min_items",
    "max_items",
    "min_properties",
    "max_properties",
)

Introspector = Callable[[TypeRef], SchemaNode | None]


@dataclass(frozen=True)
class InferredDefaults:
    """Kind and format inferred from a field's resolved type."""

    kind: SchemaKind | None
    format: str | None = None


@dataclass(frozen=True)
class OverrideResult:
    """Node to use after an override; ``replaced`` is True when it is a different node."""

    node: SchemaNode
    replaced: bool = False


def is_hidden(annotation: Annotation) -> bool:
    return read_bool(annotation, PROP_HIDDEN) is True


def apply_override(
    node: SchemaNode,
    annotation: Annotation,
    defaults: InferredDefaults | None = None,
    *,
    introspect: Introspector,
    parent: SchemaNode | None = None,
    property_name: str | None = None,
) -> OverrideResult:
    """Apply the explicit values of ``annotation`` to ``node``.

    Hidden elements are only flagged. ``required`` registers
    ``property_name`` on ``parent``. Explicit values always win; absent
    ones fall back to ``defaults`` and then to what the node already
    holds. An ``implementation`` type is introspected and either becomes
    the array items (explicit ARRAY type) or the base the explicit values
    are merged onto, in which case a replacement node is returned and
    callers must rebind to it.

    Every value is read before ``node`` or ``parent`` is touched, so an
    AnnotationValueError leaves both as they were.
    """
    if is_hidden(annotation):
        node.hidden = True
        return OverrideResult(node)

    required = False
    if parent is not None and property_name is not None:
        required = read_bool_with_default(annotation, PROP_REQUIRED)
    implementation = None if is_ref(annotation) else read_type(annotation, PROP_IMPLEMENTATION)
    explicit_kind = read_enum(annotation, PROP_TYPE, SchemaKind)
    explicit_format = read_string(annotation, PROP_FORMAT)
    explicit_values = _read_explicit_values(annotation)
    enumeration = read_string_list(annotation, "enumeration")
    required_properties = read_string_list(annotation, "required_properties") or []

    if required and parent is not None and property_name is not None:
        parent.add_required(property_name)
    if implementation is None and defaults is not None:
        node.kind = explicit_kind or defaults.kind
        node.format = explicit_format if explicit_format is not None else defaults.format
    else:
        node.kind = explicit_kind or node.kind
        node.format = explicit_format if explicit_format is not None else node.format
    for name, value in explicit_values.items():
        setattr(node, name, value)
    if enumeration is not None:
        node.enumeration = enumeration
    for required_name in required_properties:
        node.add_required(required_name)

    if implementation is None:
        return OverrideResult(node)

    implementation_schema = introspect(implementation)
    if implementation_schema is None:
        _LOGGER.debug("Implementation %s could not be introspected; keeping node.", implementation)
        return OverrideResult(node)
    if explicit_kind is SchemaKind.ARRAY:
        node.items = implementation_schema
        return OverrideResult(node)
    return OverrideResult(merge_nodes(implementation_schema, node), replaced=True)


def _read_explicit_values(annotation: Annotation) -> dict[str, object]:
    readers = (
        (_STRING_PROPERTIES, read_string),
        (_BOOL_PROPERTIES, read_bool),
        (_DECIMAL_PROPERTIES, read_decimal),
        (_INT_PROPERTIES, read_int),
    )
    values: dict[str, object] = {}
    for property_names, reader in readers:
        for name in property_names:
            value = reader(annotation, name)  # type: ignore[operator]
            if value is not None:
                values[name] = value
    return values
