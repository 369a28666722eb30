"""Traversal frames and attachment slots used by the depth-first scan."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from type_schema_scanner.generic_resolution import EMPTY_BINDINGS, BindingTable
from type_schema_scanner.schema_models import SchemaNode
from type_schema_scanner.type_catalog import ClassDescriptor

PROPERTIES_SLOT = "properties"
ITEMS_SLOT = "items"
ADDITIONAL_PROPERTIES_SLOT = "additional_properties"


@dataclass(frozen=True)
class NodeSlot:
    """Place in the tree a node is attached at, so a replacement can be written back."""

    owner: SchemaNode
    attribute: str
    key: str | None = None

    def rebind(self, node: SchemaNode) -> None:
        if self.attribute == PROPERTIES_SLOT:
            if self.key is None:
                raise ValueError("Property slots require a key.")
            self.owner.properties[self.key] = node
        else:
            setattr(self.owner, self.attribute, node)


@dataclass(frozen=True, eq=False)
class TraversalFrame:
    """One pending class expansion.

    Frames link to the frame that pushed them; that parent chain, not the
    work stack, is what the cycle guard inspects.
    """

    descriptor: ClassDescriptor
    node: SchemaNode
    bindings: BindingTable
    parent: TraversalFrame | None = None
    slot: NodeSlot | None = None

    @classmethod
    def root(
        cls, descriptor: ClassDescriptor, node: SchemaNode, bindings: BindingTable
    ) -> TraversalFrame:
        return cls(descriptor=descriptor, node=node, bindings=bindings)

    def child(
        self,
        descriptor: ClassDescriptor,
        node: SchemaNode,
        slot: NodeSlot,
        bindings: BindingTable = EMPTY_BINDINGS,
    ) -> TraversalFrame:
        return TraversalFrame(
            descriptor=descriptor, node=node, bindings=bindings, parent=self, slot=slot
        )

    def ancestry(self) -> Iterator[TraversalFrame]:
        """Yield this frame followed by each of its ancestors."""
        frame: TraversalFrame | None = self
        while frame is not None:
            yield frame
            frame = frame.parent

    def has_ancestor(self, class_name: str) -> bool:
        """Return True when this frame or an ancestor expands ``class_name``."""
        return any(frame.descriptor.name == class_name for frame in self.ancestry())

    def describe_path(self) -> str:
        return " <- ".join(frame.descriptor.name for frame in self.ancestry())
