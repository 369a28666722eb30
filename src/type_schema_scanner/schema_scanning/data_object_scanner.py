"""Depth-first conversion of a class graph into a schema tree.

The scan walks types, never objects: every structured field becomes a
frame on an explicit work stack, and a frame is only pushed when its class
is not already being expanded somewhere up its own parent chain.
"""

from __future__ import annotations

import logging
from typing import cast

from type_schema_scanner.annotation_reading import AnnotationValueError
from type_schema_scanner.generic_resolution import (
    EMPTY_BINDINGS,
    BindingTable,
    build_bindings,
    resolve_type_variable,
    resolve_wildcard,
    substitute_type_variables,
)
from type_schema_scanner.schema_models import SchemaKind, SchemaNode
from type_schema_scanner.schema_overrides import InferredDefaults, apply_override, is_hidden
from type_schema_scanner.type_catalog import (
    OBJECT_ARRAY_TYPE,
    OBJECT_TYPE,
    SCHEMA_ANNOTATION_NAME,
    STRING_TYPE,
    Annotation,
    ArrayRef,
    ClassDescriptor,
    ClassRef,
    FieldDescriptor,
    ParameterizedRef,
    TypeCatalog,
    TypeRef,
    TypeVariableRef,
    WildcardRef,
    type_name,
)
from type_schema_scanner.type_catalog.well_known_types import (
    COLLECTION_INTERFACE_NAME,
    ENUM_CLASS_NAME,
    MAP_INTERFACE_NAME,
)
from type_schema_scanner.type_classification import classify, is_terminal

from .scan_settings import DEFAULT_SCAN_SETTINGS, ScanSettings
from .traversal_frames import (
    ADDITIONAL_PROPERTIES_SLOT,
    ITEMS_SLOT,
    PROPERTIES_SLOT,
    NodeSlot,
    TraversalFrame,
)

_LOGGER = logging.getLogger("type_schema_scanner.scanner")


class ScanError(Exception):
    """Raised when a scan cannot be started for the requested root type."""


def scan_data_object(
    catalog: TypeCatalog,
    root_type: TypeRef | None,
    settings: ScanSettings = DEFAULT_SCAN_SETTINGS,
) -> SchemaNode | None:
    """Build the schema for ``root_type``.

    Returns None when the root class is not in the catalog.
    """
    return DataObjectScanner(catalog, root_type, settings).process()


class DataObjectScanner:
    """Single-use scanner owning the work stack and output tree of one scan."""

    def __init__(
        self,
        catalog: TypeCatalog,
        root_type: TypeRef | None,
        settings: ScanSettings = DEFAULT_SCAN_SETTINGS,
        *,
        introspecting: frozenset[str] = frozenset(),
    ) -> None:
        if root_type is None:
            raise ScanError("A root type is required.")
        if not is_terminal(root_type) and not isinstance(root_type, ClassRef | ParameterizedRef):
            raise ScanError(
                f"Root type must be a class or parameterized class reference: {root_type}"
            )
        self._catalog = catalog
        self._root_type = root_type
        self._settings = settings
        self._introspecting = introspecting | {type_name(root_type)}
        self._stack: list[TraversalFrame] = []
        self._root_node = SchemaNode()

    def process(self) -> SchemaNode | None:
        _LOGGER.debug("Starting processing with root class: %s", self._root_type)

        root_format = classify(self._root_type)
        if root_format.is_terminal:
            return SchemaNode(kind=root_format.kind, format=root_format.format)

        descriptor = self._catalog.lookup_type(self._root_type)
        if descriptor is None:
            _LOGGER.debug("Root class %s is not in the catalog.", self._root_type)
            return None

        self._root_node.set_type(root_format.kind)
        bindings = EMPTY_BINDINGS
        if isinstance(self._root_type, ParameterizedRef):
            bindings = build_bindings(descriptor, self._root_type)
        self._stack.append(TraversalFrame.root(descriptor, self._root_node, bindings))

        while self._stack:
            frame = self._stack.pop()
            node = self._read_class(frame)
            for field in self._catalog.all_fields(frame.descriptor):
                _LOGGER.debug("Iterating field %s.%s", frame.descriptor.name, field.name)
                self._process_field(field, node, frame)
        return self._root_node

    def _read_class(self, frame: TraversalFrame) -> SchemaNode:
        annotation = frame.descriptor.annotation(SCHEMA_ANNOTATION_NAME)
        if annotation is None:
            return frame.node
        try:
            result = apply_override(frame.node, annotation, introspect=self._introspect)
        except AnnotationValueError as exc:
            _LOGGER.warning("Ignoring schema annotation on %s: %s", frame.descriptor.name, exc)
            return frame.node
        if result.replaced:
            if frame.slot is None:
                self._root_node = result.node
            else:
                frame.slot.rebind(result.node)
        return result.node

    def _process_field(
        self, field: FieldDescriptor, parent: SchemaNode, frame: TraversalFrame
    ) -> None:
        node = parent.add_property(field.name, SchemaNode())
        slot = NodeSlot(parent, PROPERTIES_SLOT, field.name)
        annotation = field.annotation(SCHEMA_ANNOTATION_NAME)
        if annotation is not None:
            self._read_annotated_field(annotation, field, parent, node, frame, slot)
        elif self._settings.infer_unannotated_types:
            _LOGGER.debug("Processing unannotated field %s", field.name)
            self._infer_into(field.type, node, frame, slot)

    def _read_annotated_field(  # pylint: disable=too-many-arguments
        self,
        annotation: Annotation,
        field: FieldDescriptor,
        parent: SchemaNode,
        node: SchemaNode,
        frame: TraversalFrame,
        slot: NodeSlot,
    ) -> None:
        _LOGGER.debug("Processing schema annotation on field %s", field.name)
        try:
            hidden = is_hidden(annotation)
        except AnnotationValueError as exc:
            _LOGGER.warning("Ignoring hidden flag on field %s: %s", field.name, exc)
            hidden = False
        if hidden:
            node.hidden = True
            return

        resolved = self._resolve_type(field.type, node, frame, slot)
        type_format = classify(resolved)
        defaults = InferredDefaults(type_format.kind, type_format.format)
        try:
            result = apply_override(
                node,
                annotation,
                defaults,
                introspect=self._introspect,
                parent=parent,
                property_name=field.name,
            )
        except AnnotationValueError as exc:
            _LOGGER.warning(
                "Schema annotation on field %s is malformed, using inferred type: %s",
                field.name,
                exc,
            )
            node.set_type(defaults.kind, defaults.format)
            return
        if result.replaced:
            slot.rebind(result.node)

    def _infer_into(
        self, ref: TypeRef, node: SchemaNode, frame: TraversalFrame, slot: NodeSlot
    ) -> None:
        type_format = classify(self._resolve_type(ref, node, frame, slot))
        node.kind = type_format.kind
        if type_format.has_format:
            node.format = type_format.format

    def _resolve_type(
        self, ref: TypeRef, node: SchemaNode, frame: TraversalFrame, slot: NodeSlot
    ) -> TypeRef:
        """Schedule expansion of ``ref`` into ``node`` and return its logical type."""
        if is_terminal(ref):
            return ref
        if isinstance(ref, WildcardRef):
            return self._resolve_type(resolve_wildcard(ref), node, frame, slot)
        if isinstance(ref, ClassRef) and self._catalog.is_a(ref, ENUM_CLASS_NAME):
            return self._read_enum(ref, node)
        if isinstance(ref, ParameterizedRef):
            return self._read_parameterized(ref, node, frame, slot)
        if isinstance(ref, ArrayRef):
            _LOGGER.debug("Processing an array %s", ref)
            items = SchemaNode()
            node.kind = SchemaKind.ARRAY
            node.items = items
            self._infer_into(ref.component, items, frame, NodeSlot(node, ITEMS_SLOT))
            return ref
        if isinstance(ref, TypeVariableRef):
            resolved = resolve_type_variable(ref, frame.bindings)
            _LOGGER.debug("Resolved type %s -> %s", ref, resolved)
            if isinstance(resolved, TypeVariableRef):
                return OBJECT_TYPE
            return self._resolve_type(resolved, node, frame, slot)

        descriptor = self._catalog.lookup_class(ref.name)
        if descriptor is None:
            _LOGGER.debug("Class %s is not in the catalog; leaving it unexpanded.", ref.name)
        else:
            self._push(frame, descriptor, node, slot)
        return ref

    def _read_enum(self, ref: ClassRef, node: SchemaNode) -> TypeRef:
        _LOGGER.debug("Processing an enum %s", ref)
        descriptor = self._catalog.lookup_class(ref.name)
        if descriptor is not None:
            for constant in self._catalog.enum_constants(descriptor):
                node.add_enumeration(constant)
        return STRING_TYPE

    def _read_parameterized(
        self, ref: ParameterizedRef, node: SchemaNode, frame: TraversalFrame, slot: NodeSlot
    ) -> TypeRef:
        _LOGGER.debug("Processing parameterized type %s", ref)
        ref = cast(ParameterizedRef, substitute_type_variables(ref, frame.bindings))

        if self._catalog.is_a(ref, COLLECTION_INTERFACE_NAME):
            _LOGGER.debug("Processing collection %s. Will treat as an array.", ref)
            items = SchemaNode()
            node.kind = SchemaKind.ARRAY
            node.items = items
            for argument in ref.arguments:
                self._infer_into(argument, items, frame, NodeSlot(node, ITEMS_SLOT))
            return OBJECT_ARRAY_TYPE

        if self._catalog.is_a(ref, MAP_INTERFACE_NAME):
            _LOGGER.debug("Processing map %s. Will treat as an object.", ref)
            node.kind = SchemaKind.OBJECT
            if len(ref.arguments) == 2:
                values = SchemaNode()
                node.additional_properties = values
                self._infer_into(
                    ref.arguments[1], values, frame, NodeSlot(node, ADDITIONAL_PROPERTIES_SLOT)
                )
            return OBJECT_TYPE

        descriptor = self._catalog.lookup_class(ref.raw.name)
        if descriptor is None:
            _LOGGER.debug("Class %s is not in the catalog; leaving it unexpanded.", ref.raw.name)
            return ref
        self._push(frame, descriptor, node, slot, build_bindings(descriptor, ref))
        return ref

    def _push(
        self,
        parent: TraversalFrame,
        descriptor: ClassDescriptor,
        node: SchemaNode,
        slot: NodeSlot,
        bindings: BindingTable = EMPTY_BINDINGS,
    ) -> None:
        if parent.has_ancestor(descriptor.name):
            _LOGGER.debug(
                "Possible cycle was detected in: %s. Will not search further. Path: %s",
                descriptor.name,
                parent.describe_path(),
            )
            return
        _LOGGER.debug("Adding child node to path: %s", descriptor.name)
        self._stack.append(parent.child(descriptor, node, slot, bindings))

    def _introspect(self, ref: TypeRef) -> SchemaNode | None:
        type_format = classify(ref)
        if type_format.is_terminal:
            return SchemaNode(kind=type_format.kind, format=type_format.format)
        if not isinstance(ref, ClassRef | ParameterizedRef):
            _LOGGER.debug("Implementation %s is not a class; skipping.", ref)
            return None
        if type_name(ref) in self._introspecting:
            _LOGGER.debug("Implementation %s is already being introspected; skipping.", ref)
            return None
        nested = DataObjectScanner(
            self._catalog, ref, self._settings, introspecting=self._introspecting
        )
        return nested.process()
