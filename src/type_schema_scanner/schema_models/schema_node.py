"""Mutable schema tree produced by a scan."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum


class SchemaKind(str, Enum):
    """Schema data kinds."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


_LIST_ATTRIBUTES = frozenset({"required", "enumeration"})


@dataclass(eq=False)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """One node of the output schema tree.

    Nodes compare by identity: a scan mutates them in place and callers
    rebind whenever an override hands back a replacement node.
    """

    kind: SchemaKind | None = None
    format: str | None = None
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    items: SchemaNode | None = None
    additional_properties: SchemaNode | None = None
    required: list[str] = field(default_factory=list)
    enumeration: list[str] = field(default_factory=list)
    hidden: bool = False
    ref: str | None = None
    title: str | None = None
    description: str | None = None
    default_value: str | None = None
    example: str | None = None
    pattern: str | None = None
    nullable: bool | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    deprecated: bool | None = None
    unique_items: bool | None = None
    exclusive_minimum: bool | None = None
    exclusive_maximum: bool | None = None
    minimum: Decimal | None = None
    maximum: Decimal | None = None
    multiple_of: Decimal | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    min_properties: int | None = None
    max_properties: int | None = None

    def add_property(self, name: str, node: SchemaNode) -> SchemaNode:
        self.properties[name] = node
        return node

    def add_required(self, name: str) -> None:
        if name not in self.required:
            self.required.append(name)

    def add_enumeration(self, value: str) -> None:
        self.enumeration.append(value)

    def set_type(self, kind: SchemaKind | None, format_name: str | None = None) -> None:
        self.kind = kind
        self.format = format_name


def merge_nodes(base: SchemaNode, overlay: SchemaNode) -> SchemaNode:
    """Return a new node holding ``base`` values overridden by every value set on ``overlay``.

    Scalar attributes of ``overlay`` win when they are not None; property
    maps are combined key by key, required names and enumerations are
    taken from ``overlay`` when it has any.
    """
    merged = copy.copy(base)
    merged.properties = dict(base.properties)
    merged.required = list(base.required)
    merged.enumeration = list(base.enumeration)
    for attribute in fields(SchemaNode):
        name = attribute.name
        value = getattr(overlay, name)
        if name == "properties":
            merged.properties.update(value)
        elif name in _LIST_ATTRIBUTES:
            if value:
                setattr(merged, name, list(value))
        elif name == "hidden":
            merged.hidden = base.hidden or overlay.hidden
        elif value is not None:
            setattr(merged, name, value)
    return merged
