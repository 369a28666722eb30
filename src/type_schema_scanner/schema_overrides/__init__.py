"""Schema override exports."""

from .schema_override import (
    InferredDefaults,
    Introspector,
    OverrideResult,
    apply_override,
    is_hidden,
)

__all__ = ["InferredDefaults", "Introspector", "OverrideResult", "apply_override", "is_hidden"]
