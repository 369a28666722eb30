"""Annotation reading exports."""

from .annotation_values import (
    PROP_FORMAT,
    PROP_HIDDEN,
    PROP_IMPLEMENTATION,
    PROP_REF,
    PROP_REQUIRED,
    PROP_TYPE,
    AnnotationValueError,
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

__all__ = [
    "AnnotationValueError",
    "PROP_FORMAT",
    "PROP_HIDDEN",
    "PROP_IMPLEMENTATION",
    "PROP_REF",
    "PROP_REQUIRED",
    "PROP_TYPE",
    "is_ref",
    "read_bool",
    "read_bool_with_default",
    "read_decimal",
    "read_enum",
    "read_int",
    "read_string",
    "read_string_list",
    "read_type",
]
