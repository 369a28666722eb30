"""Data object scanner tests."""

from __future__ import annotations

import logging

import pytest
from type_schema_scanner.schema_models import SchemaKind
from type_schema_scanner.schema_scanning import ScanError, ScanSettings, scan_data_object
from type_schema_scanner.type_catalog import (
    ArrayRef,
    ClassRef,
    TypeCatalog,
    parse_type_catalog,
    parse_type_ref,
)

NODE_CATALOG = """
classes:
  - name: com.example.Node
    fields:
      - {name: label, type: java.lang.String}
      - {name: children, type: "java.util.List<com.example.Node>"}
"""


def _catalog(text: str) -> TypeCatalog:
    return parse_type_catalog(text)


def _scan(catalog: TypeCatalog, root: str, settings: ScanSettings | None = None):
    if settings is None:
        return scan_data_object(catalog, parse_type_ref(root))
    return scan_data_object(catalog, parse_type_ref(root), settings)


def test_self_referencing_collection_expands_only_once() -> None:
    schema = _scan(_catalog(NODE_CATALOG), "com.example.Node")

    assert schema is not None
    assert schema.kind is SchemaKind.OBJECT
    assert list(schema.properties) == ["label", "children"]
    assert schema.properties["label"].kind is SchemaKind.STRING
    children = schema.properties["children"]
    assert children.kind is SchemaKind.ARRAY
    assert children.items is not None
    assert children.items.kind is SchemaKind.OBJECT
    assert children.items.properties == {}


def test_mutually_referencing_classes_terminate() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.A
    fields:
      - {name: b, type: com.example.B}
  - name: com.example.B
    fields:
      - {name: a, type: com.example.A}
      - {name: note, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.A")

    assert schema is not None
    b_node = schema.properties["b"]
    assert b_node.kind is SchemaKind.OBJECT
    assert set(b_node.properties) == {"a", "note"}
    assert b_node.properties["a"].kind is SchemaKind.OBJECT
    assert b_node.properties["a"].properties == {}


def test_cycle_is_reported_as_diagnostic(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="type_schema_scanner.scanner")

    _scan(_catalog(NODE_CATALOG), "com.example.Node")

    assert any("cycle" in record.getMessage() for record in caplog.records)


def test_list_of_strings_maps_to_string_items() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Tags
    fields:
      - {name: values, type: "java.util.List<java.lang.String>"}
      - {name: unique, type: "java.util.Set<java.lang.Long>"}
"""
    )

    schema = _scan(catalog, "com.example.Tags")

    values = schema.properties["values"]
    assert values.kind is SchemaKind.ARRAY
    assert values.items.kind is SchemaKind.STRING
    unique = schema.properties["unique"]
    assert unique.kind is SchemaKind.ARRAY
    assert (unique.items.kind, unique.items.format) == (SchemaKind.INTEGER, "int64")


def test_map_value_type_becomes_additional_properties() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Counts
    fields:
      - {name: byName, type: "java.util.Map<java.lang.String, java.lang.Integer>"}
"""
    )

    schema = _scan(catalog, "com.example.Counts")

    by_name = schema.properties["byName"]
    assert by_name.kind is SchemaKind.OBJECT
    assert by_name.additional_properties is not None
    assert by_name.additional_properties.kind is SchemaKind.INTEGER
    assert by_name.additional_properties.format == "int32"


def test_map_of_structured_values_expands_value_class() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Registry
    fields:
      - {name: entries, type: "java.util.HashMap<java.lang.String, com.example.Entry>"}
  - name: com.example.Entry
    fields:
      - {name: key, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.Registry")

    values = schema.properties["entries"].additional_properties
    assert values.kind is SchemaKind.OBJECT
    assert values.properties["key"].kind is SchemaKind.STRING


def test_enum_field_lists_constants_as_string_values() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Color
    supertype: java.lang.Enum
    fields:
      - {name: A, type: com.example.Color, static: true}
      - {name: B, type: com.example.Color, static: true}
      - {name: $VALUES, type: "com.example.Color[]", static: true}
  - name: com.example.Paint
    fields:
      - {name: color, type: com.example.Color}
"""
    )

    schema = _scan(catalog, "com.example.Paint")

    color = schema.properties["color"]
    assert color.kind is SchemaKind.STRING
    assert color.enumeration == ["A", "B"]


def test_required_field_is_registered_on_parent() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    fields:
      - name: id
        type: java.lang.String
        schema: {required: true}
      - {name: note, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.Order")

    assert schema.required == ["id"]
    assert schema.properties["id"].required == []
    assert schema.properties["id"].kind is SchemaKind.STRING


def test_type_variable_resolves_through_root_bindings() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Wrapper
    type_parameters: [T]
    fields:
      - {name: value, type: T}
"""
    )

    schema = _scan(catalog, "com.example.Wrapper<java.lang.String>")

    assert schema.properties["value"].kind is SchemaKind.STRING


def test_type_variable_bound_to_parameterized_type_gets_fresh_bindings() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Holder
    type_parameters: [T]
    fields:
      - {name: content, type: T}
  - name: com.example.Wrapper
    type_parameters: [V]
    fields:
      - {name: value, type: V}
"""
    )

    schema = _scan(catalog, "com.example.Holder<com.example.Wrapper<java.lang.Double>>")

    content = schema.properties["content"]
    assert content.kind is SchemaKind.OBJECT
    assert content.properties["value"].kind is SchemaKind.NUMBER
    assert content.properties["value"].format == "double"


def test_collection_of_type_variable_uses_enclosing_bindings() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Page
    type_parameters: [T]
    fields:
      - {name: items, type: "java.util.List<T>"}
      - {name: total, type: long}
  - name: com.example.Item
    fields:
      - {name: sku, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.Page<com.example.Item>")

    items = schema.properties["items"]
    assert items.kind is SchemaKind.ARRAY
    assert items.items.properties["sku"].kind is SchemaKind.STRING
    assert schema.properties["total"].format == "int64"


WILDCARD_CATALOG = """
classes:
  - name: com.example.Shape
    fields:
      - {name: area, type: double}
  - name: com.example.Drawing
    fields:
      - {name: shapes, type: "java.util.List<? extends com.example.Shape>"}
      - {name: extras, type: "java.util.List<?>"}
  - name: com.example.Holder
    type_parameters: [T]
    fields:
      - {name: content, type: T}
      - {name: contents, type: "java.util.List<T>"}
"""


def test_bounded_wildcard_collection_expands_upper_bound() -> None:
    schema = _scan(_catalog(WILDCARD_CATALOG), "com.example.Drawing")

    shapes = schema.properties["shapes"]
    assert shapes.kind is SchemaKind.ARRAY
    assert shapes.items.kind is SchemaKind.OBJECT
    assert shapes.items.properties["area"].format == "double"
    extras = schema.properties["extras"]
    assert extras.kind is SchemaKind.ARRAY
    assert extras.items.kind is SchemaKind.OBJECT
    assert extras.items.properties == {}


def test_type_variable_bound_to_wildcard_uses_its_upper_bound() -> None:
    schema = _scan(_catalog(WILDCARD_CATALOG), "com.example.Holder<? extends com.example.Shape>")

    content = schema.properties["content"]
    assert content.kind is SchemaKind.OBJECT
    assert list(content.properties) == ["area"]
    assert list(schema.properties["contents"].items.properties) == ["area"]


def test_type_variable_bound_to_unbounded_wildcard_is_object() -> None:
    schema = _scan(_catalog(WILDCARD_CATALOG), "com.example.Holder<?>")

    content = schema.properties["content"]
    assert content.kind is SchemaKind.OBJECT
    assert content.properties == {}
    assert schema.properties["contents"].items.kind is SchemaKind.OBJECT


def test_same_generic_class_with_other_bindings_collapses_as_cycle() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Box
    type_parameters: [T]
    fields:
      - {name: value, type: T}
      - {name: inner, type: "com.example.Box<java.lang.Integer>"}
"""
    )

    schema = _scan(catalog, "com.example.Box<java.lang.String>")

    assert schema.properties["value"].kind is SchemaKind.STRING
    inner = schema.properties["inner"]
    assert inner.kind is SchemaKind.OBJECT
    assert inner.properties == {}


def test_type_argument_count_mismatch_is_not_fatal(caplog: pytest.LogCaptureFixture) -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Pair
    type_parameters: [A, B]
    fields:
      - {name: first, type: A}
      - {name: second, type: B}
"""
    )

    with caplog.at_level(logging.WARNING):
        schema = _scan(catalog, "com.example.Pair<java.lang.String>")

    assert schema.properties["first"].kind is SchemaKind.STRING
    assert schema.properties["second"].kind is SchemaKind.OBJECT
    assert any("mismatch" in record.getMessage() for record in caplog.records)


def test_explicit_type_overrides_inferred_type() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Metric
    fields:
      - name: count
        type: int
        schema: {type: STRING, description: "Rendered as text"}
"""
    )

    schema = _scan(catalog, "com.example.Metric")

    count = schema.properties["count"]
    assert count.kind is SchemaKind.STRING
    assert count.format == "int32"
    assert count.description == "Rendered as text"


def test_explicit_format_overrides_inferred_format() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Account
    fields:
      - name: email
        type: java.lang.String
        schema: {format: email}
"""
    )

    schema = _scan(catalog, "com.example.Account")

    assert schema.properties["email"].kind is SchemaKind.STRING
    assert schema.properties["email"].format == "email"


def test_disabled_inference_leaves_unannotated_fields_untyped() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    fields:
      - {name: lines, type: "java.util.List<com.example.Line>"}
      - name: id
        type: java.lang.String
        schema: {description: identifier}
  - name: com.example.Line
    fields:
      - {name: qty, type: int}
"""
    )

    schema = _scan(catalog, "com.example.Order", ScanSettings(infer_unannotated_types=False))

    lines = schema.properties["lines"]
    assert lines.kind is None
    assert lines.items is None
    assert schema.properties["id"].kind is SchemaKind.STRING


def test_hidden_field_keeps_flagged_placeholder() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.User
    fields:
      - name: password
        type: java.lang.String
        schema: {hidden: true, required: true}
"""
    )

    schema = _scan(catalog, "com.example.User")

    password = schema.properties["password"]
    assert password.hidden is True
    assert password.kind is None
    assert schema.required == []


def test_field_implementation_replaces_property_node() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Drawing
    fields:
      - name: shape
        type: com.example.Shape
        schema: {implementation: com.example.Circle, description: round}
  - name: com.example.Shape
    fields:
      - {name: sides, type: int}
  - name: com.example.Circle
    fields:
      - {name: radius, type: double}
"""
    )

    schema = _scan(catalog, "com.example.Drawing")

    shape = schema.properties["shape"]
    assert shape.description == "round"
    assert shape.kind is SchemaKind.OBJECT
    assert list(shape.properties) == ["radius"]


def test_array_implementation_becomes_items() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Drawing
    fields:
      - name: shapes
        type: java.lang.Object
        schema: {type: ARRAY, implementation: com.example.Circle}
  - name: com.example.Circle
    fields:
      - {name: radius, type: double}
"""
    )

    schema = _scan(catalog, "com.example.Drawing")

    shapes = schema.properties["shapes"]
    assert shapes.kind is SchemaKind.ARRAY
    assert shapes.items.properties["radius"].kind is SchemaKind.NUMBER


def test_class_level_replacement_is_rebound_into_parent() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Root
    fields:
      - {name: holder, type: com.example.Holder}
  - name: com.example.Holder
    schema: {implementation: com.example.Circle, title: Holder}
    fields:
      - {name: label, type: java.lang.String}
  - name: com.example.Circle
    fields:
      - {name: radius, type: double}
"""
    )

    schema = _scan(catalog, "com.example.Root")

    holder = schema.properties["holder"]
    assert holder.title == "Holder"
    assert set(holder.properties) == {"radius", "label"}


def test_self_implementation_does_not_recurse() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Loop
    schema: {implementation: com.example.Loop, description: loop}
    fields:
      - {name: next, type: com.example.Loop}
"""
    )

    schema = _scan(catalog, "com.example.Loop")

    assert schema.description == "loop"
    assert schema.properties["next"].kind is SchemaKind.OBJECT


def test_malformed_annotation_degrades_to_inferred_type(
    caplog: pytest.LogCaptureFixture,
) -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    fields:
      - name: amount
        type: java.math.BigDecimal
        schema: {required: "yes"}
"""
    )

    with caplog.at_level(logging.WARNING):
        schema = _scan(catalog, "com.example.Order")

    assert schema.properties["amount"].kind is SchemaKind.NUMBER
    assert any("malformed" in record.getMessage() for record in caplog.records)


def test_malformed_class_annotation_keeps_node_and_fields(
    caplog: pytest.LogCaptureFixture,
) -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    schema: {description: An order, title: 5}
    fields:
      - {name: id, type: long}
"""
    )

    with caplog.at_level(logging.WARNING, logger="type_schema_scanner.scanner"):
        schema = _scan(catalog, "com.example.Order")

    assert schema.kind is SchemaKind.OBJECT
    assert schema.description is None
    assert schema.title is None
    assert schema.properties["id"].kind is SchemaKind.INTEGER
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Ignoring schema annotation on com.example.Order" in warnings[0].getMessage()


def test_malformed_field_annotation_applies_none_of_its_values(
    caplog: pytest.LogCaptureFixture,
) -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    fields:
      - name: amount
        type: java.math.BigDecimal
        schema: {required: true, title: Amount, min_length: three}
"""
    )

    with caplog.at_level(logging.WARNING):
        schema = _scan(catalog, "com.example.Order")

    amount = schema.properties["amount"]
    assert amount.kind is SchemaKind.NUMBER
    assert amount.title is None
    assert amount.min_length is None
    assert schema.required == []
    assert any("malformed" in record.getMessage() for record in caplog.records)


def test_inherited_fields_precede_declared_fields_and_statics_are_skipped() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Base
    fields:
      - {name: id, type: long}
      - {name: VERSION, type: int, static: true}
  - name: com.example.Child
    supertype: com.example.Base
    fields:
      - {name: name, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.Child")

    assert list(schema.properties) == ["id", "name"]


def test_array_fields_expand_component_class() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Basket
    fields:
      - {name: items, type: "com.example.Item[]"}
      - {name: payload, type: "byte[]"}
      - {name: scores, type: "int[]"}
  - name: com.example.Item
    fields:
      - {name: sku, type: java.lang.String}
"""
    )

    schema = _scan(catalog, "com.example.Basket")

    items = schema.properties["items"]
    assert items.kind is SchemaKind.ARRAY
    assert items.items.kind is SchemaKind.OBJECT
    assert items.items.properties["sku"].kind is SchemaKind.STRING
    payload = schema.properties["payload"]
    assert (payload.kind, payload.format) == (SchemaKind.STRING, "binary")
    scores = schema.properties["scores"]
    assert (scores.items.kind, scores.items.format) == (SchemaKind.INTEGER, "int32")


def test_field_of_uncatalogued_class_is_left_unexpanded() -> None:
    catalog = _catalog(
        """
classes:
  - name: com.example.Order
    fields:
      - {name: customer, type: com.other.Customer}
"""
    )

    schema = _scan(catalog, "com.example.Order")

    customer = schema.properties["customer"]
    assert customer.kind is SchemaKind.OBJECT
    assert customer.properties == {}


def test_terminal_root_returns_single_node() -> None:
    schema = scan_data_object(TypeCatalog(), ClassRef("java.time.LocalDate"))

    assert schema is not None
    assert (schema.kind, schema.format) == (SchemaKind.STRING, "date")
    assert schema.properties == {}


@pytest.mark.parametrize(
    ("root", "kind", "type_format"),
    [
        ("int", SchemaKind.INTEGER, "int32"),
        ("byte[]", SchemaKind.STRING, "binary"),
        ("java.lang.Byte[]", SchemaKind.STRING, "binary"),
    ],
)
def test_terminal_non_class_roots_return_single_node(
    root: str, kind: SchemaKind, type_format: str
) -> None:
    schema = _scan(TypeCatalog(), root)

    assert schema is not None
    assert (schema.kind, schema.format) == (kind, type_format)
    assert schema.items is None


def test_uncatalogued_root_returns_none() -> None:
    assert scan_data_object(TypeCatalog(), ClassRef("com.example.Missing")) is None


def test_missing_root_is_rejected() -> None:
    with pytest.raises(ScanError, match="root type is required"):
        scan_data_object(TypeCatalog(), None)


def test_array_root_is_rejected() -> None:
    with pytest.raises(ScanError, match="class or parameterized"):
        scan_data_object(TypeCatalog(), ArrayRef(ClassRef("com.example.Item")))


def test_repeated_scans_share_catalog_without_shared_output() -> None:
    catalog = _catalog(NODE_CATALOG)

    first = _scan(catalog, "com.example.Node")
    second = _scan(catalog, "com.example.Node")

    assert first is not second
    assert first.properties["label"] is not second.properties["label"]
    assert list(first.properties) == list(second.properties)
