"""Typed accessors for annotation property values.

Every reader returns None when the property is absent and raises
``AnnotationValueError`` when the property holds a value of the wrong kind.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from type_schema_scanner.type_catalog import (
    Annotation,
    AnnotationValue,
    AnnotationValueKind,
    CatalogError,
    TypeRef,
    parse_type_ref,
)

PROP_HIDDEN = "hidden"
PROP_REQUIRED = "required"
PROP_REF = "ref"
PROP_TYPE = "type"
PROP_FORMAT = "format"
PROP_IMPLEMENTATION = "implementation"

_EnumT = TypeVar("_EnumT", bound=Enum)


class AnnotationValueError(Exception):
    """Raised when an annotation property holds a value of an unexpected kind."""


def read_string(annotation: Annotation, property_name: str) -> str | None:
    value = annotation.value(property_name)
    if value is None:
        return None
    _require_kind(annotation, property_name, value, AnnotationValueKind.STRING)
    return str(value.value)


def read_bool(annotation: Annotation, property_name: str) -> bool | None:
    value = annotation.value(property_name)
    if value is None:
        return None
    _require_kind(annotation, property_name, value, AnnotationValueKind.BOOLEAN)
    return bool(value.value)


def read_bool_with_default(
    annotation: Annotation, property_name: str, default: bool = False
) -> bool:
    value = read_bool(annotation, property_name)
    return default if value is None else value


def read_int(annotation: Annotation, property_name: str) -> int | None:
    value = annotation.value(property_name)
    if value is None:
        return None
    _require_kind(annotation, property_name, value, AnnotationValueKind.INTEGER)
    return int(value.value)  # type: ignore[call-overload]


def read_decimal(annotation: Annotation, property_name: str) -> Decimal | None:
    """Read a numeric property written either as a number or as a decimal string."""
    value = annotation.value(property_name)
    if value is None:
        return None
    if value.kind in (AnnotationValueKind.INTEGER, AnnotationValueKind.DOUBLE):
        return Decimal(str(value.value))
    if value.kind is AnnotationValueKind.STRING:
        try:
            return Decimal(str(value.value))
        except InvalidOperation as exc:
            raise AnnotationValueError(
                f"{_label(annotation, property_name)} is not a decimal number: {value.value!r}"
            ) from exc
    raise AnnotationValueError(
        f"{_label(annotation, property_name)} must be a number or a string, not {value.kind.value}."
    )


def read_string_list(annotation: Annotation, property_name: str) -> list[str] | None:
    """Read an array of strings; a single string is accepted as a one-element array."""
    value = annotation.value(property_name)
    if value is None:
        return None
    if value.kind is AnnotationValueKind.STRING:
        return [str(value.value)]
    _require_kind(annotation, property_name, value, AnnotationValueKind.ARRAY)
    items: list[str] = []
    for item in value.value:  # type: ignore[attr-defined]
        _require_kind(annotation, property_name, item, AnnotationValueKind.STRING)
        items.append(str(item.value))
    return items


def read_enum(
    annotation: Annotation, property_name: str, enum_type: type[_EnumT]
) -> _EnumT | None:
    """Read an enum constant by name, exact match first, then ignoring case.

    Unknown names read as absent.
    """
    text = read_string(annotation, property_name)
    if text is None:
        return None
    members = list(enum_type)
    for member in members:
        if member.name == text:
            return member
    for member in members:
        if member.name.lower() == text.lower():
            return member
    return None


def read_type(annotation: Annotation, property_name: str) -> TypeRef | None:
    """Read a class-valued property written as type reference text."""
    text = read_string(annotation, property_name)
    if text is None:
        return None
    try:
        return parse_type_ref(text)
    except CatalogError as exc:
        raise AnnotationValueError(f"{_label(annotation, property_name)}: {exc}") from exc


def is_ref(annotation: Annotation) -> bool:
    """Return True when the annotation points at another schema by reference."""
    return annotation.value(PROP_REF) is not None


def _require_kind(
    annotation: Annotation,
    property_name: str,
    value: AnnotationValue,
    expected: AnnotationValueKind,
) -> None:
    if value.kind is not expected:
        raise AnnotationValueError(
            f"{_label(annotation, property_name)} must be {expected.value}, "
            f"not {value.kind.value}."
        )


def _label(annotation: Annotation, property_name: str) -> str:
    return f"@{annotation.name.rsplit('.', 1)[-1]}.{property_name}"
