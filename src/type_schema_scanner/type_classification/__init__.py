"""Type classification exports."""

from .type_classifier import TypeWithFormat, classify, is_terminal

__all__ = ["TypeWithFormat", "classify", "is_terminal"]
