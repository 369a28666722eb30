"""Generic type-parameter binding and resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from type_schema_scanner.type_catalog import (
    OBJECT_TYPE,
    ArrayRef,
    ClassDescriptor,
    ParameterizedRef,
    TypeRef,
    TypeVariableRef,
    WildcardRef,
)

_LOGGER = logging.getLogger("type_schema_scanner.generics")

BindingTable = Mapping[str, TypeRef]

EMPTY_BINDINGS: BindingTable = MappingProxyType({})


def build_bindings(descriptor: ClassDescriptor, parameterized: ParameterizedRef) -> BindingTable:
    """Zip the declared type parameters of ``descriptor`` with the use-site arguments.

    A count mismatch is reported and the shorter length wins; parameters
    left without an argument later resolve to the universal object type.
    """
    parameters = descriptor.type_parameters
    arguments = parameterized.arguments
    if len(parameters) != len(arguments):
        _LOGGER.warning(
            "Type argument count mismatch for %s: parameters %s, arguments %s.",
            descriptor.name,
            list(parameters),
            [str(argument) for argument in arguments],
        )
    return MappingProxyType(dict(zip(parameters, arguments, strict=False)))


def resolve_type_variable(variable: TypeVariableRef, bindings: BindingTable) -> TypeRef:
    """Resolve ``variable`` against ``bindings``, unwrapping wildcards to their bound."""
    resolved = bindings.get(variable.name)
    if resolved is None:
        _LOGGER.warning(
            "Type variable %s has no binding; treating it as %s.", variable.name, OBJECT_TYPE
        )
        return OBJECT_TYPE
    if isinstance(resolved, WildcardRef):
        return resolve_wildcard(resolved)
    return resolved


def resolve_wildcard(wildcard: WildcardRef) -> TypeRef:
    """Return the upper bound of ``wildcard`` or the object type when unbounded."""
    if wildcard.upper_bound is None:
        return OBJECT_TYPE
    return wildcard.upper_bound


def substitute_type_variables(ref: TypeRef, bindings: BindingTable) -> TypeRef:
    """Rewrite ``ref`` so that no type variable of the enclosing class remains inside it.

    Used at a use site before handing type arguments to another frame,
    whose binding table only knows that frame's own parameters.
    """
    if isinstance(ref, TypeVariableRef):
        return resolve_type_variable(ref, bindings)
    if isinstance(ref, WildcardRef):
        if ref.upper_bound is None:
            return ref
        return WildcardRef(substitute_type_variables(ref.upper_bound, bindings))
    if isinstance(ref, ArrayRef):
        return ArrayRef(substitute_type_variables(ref.component, bindings))
    if isinstance(ref, ParameterizedRef):
        return ParameterizedRef(
            ref.raw,
            tuple(substitute_type_variables(argument, bindings) for argument in ref.arguments),
        )
    return ref
