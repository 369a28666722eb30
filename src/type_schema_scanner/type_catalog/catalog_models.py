"""Structural catalog entities: classes, fields and attached annotations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from .type_references import TypeRef

SCHEMA_ANNOTATION_NAME = "org.eclipse.microprofile.openapi.annotations.media.Schema"


class AnnotationValueKind(str, Enum):
    """Kinds of values an annotation property can carry."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    ARRAY = "array"


@dataclass(frozen=True)
class AnnotationValue:
    """One annotation property value together with its declared kind."""

    kind: AnnotationValueKind
    value: object


@dataclass(frozen=True)
class Annotation:
    """Annotation instance attached to a class or field."""

    name: str
    values: Mapping[str, AnnotationValue] = field(default_factory=dict)

    def value(self, property_name: str) -> AnnotationValue | None:
        return self.values.get(property_name)


@dataclass(frozen=True)
class FieldDescriptor:
    """Declared field of a class."""

    name: str
    type: TypeRef
    annotations: tuple[Annotation, ...] = ()
    is_static: bool = False

    def annotation(self, annotation_name: str) -> Annotation | None:
        return _find_annotation(self.annotations, annotation_name)


@dataclass(frozen=True)
class ClassDescriptor:
    """Declared structure of one class as recorded in the catalog."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    type_parameters: tuple[str, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    supertype: str | None = None
    interfaces: tuple[str, ...] = ()

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]

    def annotation(self, annotation_name: str) -> Annotation | None:
        return _find_annotation(self.annotations, annotation_name)


def _find_annotation(
    annotations: tuple[Annotation, ...], annotation_name: str
) -> Annotation | None:
    for annotation in annotations:
        if annotation.name == annotation_name:
            return annotation
    return None
