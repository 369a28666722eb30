"""Type reference entities used by catalog entries and field declarations."""

from __future__ import annotations

from dataclasses import dataclass

OBJECT_CLASS_NAME = "java.lang.Object"

PRIMITIVE_TYPE_NAMES = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double"}
)


@dataclass(frozen=True)
class PrimitiveRef:
    """Language primitive such as ``int`` or ``boolean``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassRef:
    """Reference to a named class."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ArrayRef:
    """Array of a component type."""

    component: TypeRef

    def __str__(self) -> str:
        return f"{self.component}[]"


@dataclass(frozen=True)
class ParameterizedRef:
    """Generic class applied to type arguments, e.g. ``Foo<A, B>``."""

    raw: ClassRef
    arguments: tuple[TypeRef, ...]

    @property
    def name(self) -> str:
        return self.raw.name

    def __str__(self) -> str:
        return f"{self.raw}<{', '.join(str(argument) for argument in self.arguments)}>"


@dataclass(frozen=True)
class TypeVariableRef:
    """Reference to a declared type parameter, e.g. ``T``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class WildcardRef:
    """Wildcard type argument with an optional upper bound."""

    upper_bound: TypeRef | None = None

    def __str__(self) -> str:
        if self.upper_bound is None:
            return "?"
        return f"? extends {self.upper_bound}"


TypeRef = PrimitiveRef | ClassRef | ArrayRef | ParameterizedRef | TypeVariableRef | WildcardRef

OBJECT_TYPE = ClassRef(OBJECT_CLASS_NAME)
STRING_TYPE = ClassRef("java.lang.String")
OBJECT_ARRAY_TYPE = ArrayRef(OBJECT_TYPE)


def type_name(ref: TypeRef) -> str:
    """Return the class name a reference points at, as used for catalog lookups."""
    if isinstance(ref, ParameterizedRef):
        return ref.raw.name
    if isinstance(ref, ArrayRef):
        return type_name(ref.component)
    if isinstance(ref, WildcardRef):
        return type_name(ref.upper_bound) if ref.upper_bound is not None else OBJECT_CLASS_NAME
    return ref.name
