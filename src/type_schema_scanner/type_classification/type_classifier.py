"""Mapping of type references to schema kinds and formats."""

from __future__ import annotations

from dataclasses import dataclass

from type_schema_scanner.schema_models import SchemaKind
from type_schema_scanner.type_catalog import ArrayRef, ClassRef, PrimitiveRef, TypeRef


@dataclass(frozen=True)
class TypeWithFormat:
    """Schema kind and optional format for one type."""

    kind: SchemaKind
    format: str | None = None

    @property
    def has_format(self) -> bool:
        return self.format is not None

    @property
    def is_terminal(self) -> bool:
        return self.kind not in (SchemaKind.OBJECT, SchemaKind.ARRAY)


_STRING = TypeWithFormat(SchemaKind.STRING)
_BYTE = TypeWithFormat(SchemaKind.STRING, "byte")
_BINARY = TypeWithFormat(SchemaKind.STRING, "binary")
_BOOLEAN = TypeWithFormat(SchemaKind.BOOLEAN)
_INT32 = TypeWithFormat(SchemaKind.INTEGER, "int32")
_INT64 = TypeWithFormat(SchemaKind.INTEGER, "int64")
_INTEGER = TypeWithFormat(SchemaKind.INTEGER)
_FLOAT = TypeWithFormat(SchemaKind.NUMBER, "float")
_DOUBLE = TypeWithFormat(SchemaKind.NUMBER, "double")
_NUMBER = TypeWithFormat(SchemaKind.NUMBER)
_DATE = TypeWithFormat(SchemaKind.STRING, "date")
_DATE_TIME = TypeWithFormat(SchemaKind.STRING, "date-time")
_TIME = TypeWithFormat(SchemaKind.STRING, "time")
_URI = TypeWithFormat(SchemaKind.STRING, "uri")
_UUID = TypeWithFormat(SchemaKind.STRING, "uuid")
_OBJECT = TypeWithFormat(SchemaKind.OBJECT)
_ARRAY = TypeWithFormat(SchemaKind.ARRAY)

_TYPE_FORMATS: dict[str, TypeWithFormat] = {
    "java.lang.String": _STRING,
    "char": _STRING,
    "java.lang.Character": _STRING,
    "byte": _BYTE,
    "java.lang.Byte": _BYTE,
    "boolean": _BOOLEAN,
    "java.lang.Boolean": _BOOLEAN,
    "short": _INT32,
    "java.lang.Short": _INT32,
    "int": _INT32,
    "java.lang.Integer": _INT32,
    "long": _INT64,
    "java.lang.Long": _INT64,
    "java.math.BigInteger": _INTEGER,
    "float": _FLOAT,
    "java.lang.Float": _FLOAT,
    "double": _DOUBLE,
    "java.lang.Double": _DOUBLE,
    "java.math.BigDecimal": _NUMBER,
    "java.lang.Number": _NUMBER,
    "java.util.Date": _DATE_TIME,
    "java.time.LocalDateTime": _DATE_TIME,
    "java.time.OffsetDateTime": _DATE_TIME,
    "java.time.ZonedDateTime": _DATE_TIME,
    "java.time.Instant": _DATE_TIME,
    "java.time.LocalDate": _DATE,
    "java.time.LocalTime": _TIME,
    "java.time.OffsetTime": _TIME,
    "java.net.URI": _URI,
    "java.net.URL": _URI,
    "java.util.UUID": _UUID,
}

_BINARY_COMPONENTS = frozenset({"byte", "java.lang.Byte"})


def classify(ref: TypeRef) -> TypeWithFormat:
    """Return the schema kind and format for ``ref``.

    Known primitive and platform value types map to their schema kinds,
    byte arrays map to binary strings, any other array is ARRAY and
    every remaining reference is OBJECT.
    """
    if isinstance(ref, ArrayRef):
        component = ref.component
        if isinstance(component, PrimitiveRef | ClassRef) and component.name in _BINARY_COMPONENTS:
            return _BINARY
        return _ARRAY
    if isinstance(ref, PrimitiveRef | ClassRef):
        return _TYPE_FORMATS.get(ref.name, _OBJECT)
    return _OBJECT


def is_terminal(ref: TypeRef) -> bool:
    """Return True when ``ref`` needs no further expansion."""
    return classify(ref).is_terminal
