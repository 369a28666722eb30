"""Catalog document loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .catalog_models import (
    SCHEMA_ANNOTATION_NAME,
    Annotation,
    AnnotationValue,
    AnnotationValueKind,
    ClassDescriptor,
    FieldDescriptor,
)
from .type_catalog import CatalogError, TypeCatalog
from .type_ref_parser import parse_type_ref
from .type_references import ClassRef, ParameterizedRef, type_name


def load_type_catalog(catalog_path: Path | str) -> TypeCatalog:
    """Load a YAML or JSON catalog document from disk."""
    path = Path(catalog_path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    return parse_type_catalog(path.read_text(encoding="utf-8"))


def parse_type_catalog(text: str) -> TypeCatalog:
    """Parse catalog document text into a type catalog."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse catalog document: {exc}") from exc
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError("Catalog root must be a mapping.")
    return build_type_catalog(parsed)


def build_type_catalog(document: Mapping[str, Any]) -> TypeCatalog:
    """Build a type catalog from an already-parsed catalog mapping."""
    entries = document.get("classes", [])
    if not isinstance(entries, Sequence) or isinstance(entries, str):
        raise CatalogError("Catalog 'classes' must be a list.")
    return TypeCatalog(_parse_class(entry, index) for index, entry in enumerate(entries))


def _parse_class(value: Any, index: int) -> ClassDescriptor:
    entry = _require_mapping(value, f"classes[{index}]")
    name = _require_name(entry.get("name"), f"classes[{index}].name")
    label = f"class {name}"
    type_parameters = _string_tuple(entry.get("type_parameters"), f"{label} type_parameters")
    field_entries = entry.get("fields", [])
    if not isinstance(field_entries, Sequence) or isinstance(field_entries, str):
        raise CatalogError(f"{label} fields must be a list.")
    fields = tuple(
        _parse_field(field_entry, type_parameters, f"{label} fields[{position}]")
        for position, field_entry in enumerate(field_entries)
    )
    supertype = entry.get("supertype")
    if supertype is not None:
        supertype = _class_name(supertype, type_parameters, f"{label} supertype")
    interfaces = tuple(
        _class_name(interface, type_parameters, f"{label} interfaces")
        for interface in _string_tuple(entry.get("interfaces"), f"{label} interfaces")
    )
    return ClassDescriptor(
        name=name,
        fields=fields,
        type_parameters=type_parameters,
        annotations=_parse_annotations(entry, label),
        supertype=supertype,
        interfaces=interfaces,
    )


def _parse_field(value: Any, type_parameters: tuple[str, ...], label: str) -> FieldDescriptor:
    entry = _require_mapping(value, label)
    name = _require_name(entry.get("name"), f"{label}.name")
    raw_type = entry.get("type")
    if not isinstance(raw_type, str):
        raise CatalogError(f"Field '{name}' ({label}) requires a type string.")
    return FieldDescriptor(
        name=name,
        type=parse_type_ref(raw_type, type_parameters),
        annotations=_parse_annotations(entry, f"field {name}"),
        is_static=bool(entry.get("static", False)),
    )


def _parse_annotations(entry: Mapping[str, Any], label: str) -> tuple[Annotation, ...]:
    annotations: list[Annotation] = []
    raw_annotations = entry.get("annotations", [])
    if not isinstance(raw_annotations, Sequence) or isinstance(raw_annotations, str):
        raise CatalogError(f"{label} annotations must be a list.")
    for position, raw in enumerate(raw_annotations):
        mapping = _require_mapping(raw, f"{label} annotations[{position}]")
        name = _require_name(mapping.get("name"), f"{label} annotations[{position}].name")
        values = _parse_values(mapping.get("values"), label)
        annotations.append(Annotation(name=name, values=values))

    shorthand = entry.get("schema")
    if shorthand is not None:
        if any(annotation.name == SCHEMA_ANNOTATION_NAME for annotation in annotations):
            raise CatalogError(f"{label} declares the schema annotation twice.")
        annotations.append(
            Annotation(name=SCHEMA_ANNOTATION_NAME, values=_parse_values(shorthand, label))
        )
    return tuple(annotations)


def _parse_values(value: Any, label: str) -> dict[str, AnnotationValue]:
    if value is None:
        return {}
    mapping = _require_mapping(value, f"{label} annotation values")
    return {str(key): _annotation_value(item, label, str(key)) for key, item in mapping.items()}


def _annotation_value(value: Any, label: str, property_name: str) -> AnnotationValue:
    if isinstance(value, bool):
        return AnnotationValue(AnnotationValueKind.BOOLEAN, value)
    if isinstance(value, int):
        return AnnotationValue(AnnotationValueKind.INTEGER, value)
    if isinstance(value, float):
        return AnnotationValue(AnnotationValueKind.DOUBLE, value)
    if isinstance(value, str):
        return AnnotationValue(AnnotationValueKind.STRING, value)
    if isinstance(value, Sequence):
        return AnnotationValue(
            AnnotationValueKind.ARRAY,
            tuple(_annotation_value(item, label, property_name) for item in value),
        )
    raise CatalogError(
        f"{label} annotation property '{property_name}' has an unsupported value: {value!r}"
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise CatalogError(f"Catalog entry '{section_name}' must be a mapping.")
    return value


def _require_name(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise CatalogError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise CatalogError(f"{field_name} must not be empty.")
    return stripped


def _class_name(value: Any, type_parameters: tuple[str, ...], field_name: str) -> str:
    """Return the raw class name of a supertype, dropping any type arguments."""
    ref = parse_type_ref(_require_name(value, field_name), type_parameters)
    if not isinstance(ref, ClassRef | ParameterizedRef):
        raise CatalogError(f"{field_name} must name a class, not {ref}.")
    return type_name(ref)


def _string_tuple(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise CatalogError(f"{field_name} must be a list of strings.")
    return tuple(_require_name(item, field_name) for item in value)
