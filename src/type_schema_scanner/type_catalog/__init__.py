"""Type catalog exports."""

from .catalog_loader import build_type_catalog, load_type_catalog, parse_type_catalog
from .catalog_models import (
    SCHEMA_ANNOTATION_NAME,
    Annotation,
    AnnotationValue,
    AnnotationValueKind,
    ClassDescriptor,
    FieldDescriptor,
)
from .type_catalog import CatalogError, TypeCatalog
from .type_ref_parser import TypeRefSyntaxError, parse_type_ref
from .type_references import (
    OBJECT_ARRAY_TYPE,
    OBJECT_TYPE,
    STRING_TYPE,
    ArrayRef,
    ClassRef,
    ParameterizedRef,
    PrimitiveRef,
    TypeRef,
    TypeVariableRef,
    WildcardRef,
    type_name,
)

__all__ = [
    "Annotation",
    "AnnotationValue",
    "AnnotationValueKind",
    "ArrayRef",
    "CatalogError",
    "ClassDescriptor",
    "ClassRef",
    "FieldDescriptor",
    "OBJECT_ARRAY_TYPE",
    "OBJECT_TYPE",
    "ParameterizedRef",
    "PrimitiveRef",
    "SCHEMA_ANNOTATION_NAME",
    "STRING_TYPE",
    "TypeCatalog",
    "TypeRef",
    "TypeRefSyntaxError",
    "TypeVariableRef",
    "WildcardRef",
    "build_type_catalog",
    "load_type_catalog",
    "parse_type_catalog",
    "parse_type_ref",
    "type_name",
]
