"""Schema model exports."""

from .schema_node import SchemaKind, SchemaNode, merge_nodes

__all__ = ["SchemaKind", "SchemaNode", "merge_nodes"]
