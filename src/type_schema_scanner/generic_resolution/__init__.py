"""Generic resolution exports."""

from .type_bindings import (
    EMPTY_BINDINGS,
    BindingTable,
    build_bindings,
    resolve_type_variable,
    resolve_wildcard,
    substitute_type_variables,
)

__all__ = [
    "BindingTable",
    "EMPTY_BINDINGS",
    "build_bindings",
    "resolve_type_variable",
    "resolve_wildcard",
    "substitute_type_variables",
]
