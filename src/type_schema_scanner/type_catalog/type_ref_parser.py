"""Parser for Java-like type reference text such as ``java.util.Map<K, V>``."""

from __future__ import annotations

import re
from collections.abc import Collection

from .type_catalog import CatalogError
from .type_references import (
    PRIMITIVE_TYPE_NAMES,
    ArrayRef,
    ClassRef,
    ParameterizedRef,
    PrimitiveRef,
    TypeRef,
    TypeVariableRef,
    WildcardRef,
)

_TOKEN_PATTERN = re.compile(
    r"\s*(?:(?P<name>[A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)|(?P<punct>[<>,?\[\]]))"
)


class TypeRefSyntaxError(CatalogError):
    """Raised when type reference text cannot be parsed."""


def parse_type_ref(text: str, type_parameters: Collection[str] = ()) -> TypeRef:
    """Parse ``text`` into a type reference.

    Bare identifiers listed in ``type_parameters`` become type-variable
    references; primitive keywords become primitive references; every
    other name is a class reference.
    """
    if not isinstance(text, str) or not text.strip():
        raise TypeRefSyntaxError("Type reference must be a non-empty string.")
    parser = _TypeRefParser(text, frozenset(type_parameters))
    ref = parser.parse_type()
    parser.expect_end()
    return ref


class _TypeRefParser:
    def __init__(self, text: str, type_parameters: frozenset[str]) -> None:
        self._text = text
        self._type_parameters = type_parameters
        self._tokens = _tokenize(text)
        self._position = 0

    def parse_type(self) -> TypeRef:
        if self._peek() == "?":
            return self._parse_wildcard()
        ref = self._parse_base()
        while self._peek() == "[":
            self._advance()
            self._expect("]")
            ref = ArrayRef(ref)
        return ref

    def expect_end(self) -> None:
        if self._position != len(self._tokens):
            raise self._error(f"unexpected '{self._tokens[self._position]}'")

    def _parse_wildcard(self) -> WildcardRef:
        self._advance()
        keyword = self._peek()
        if keyword == "extends":
            self._advance()
            return WildcardRef(self.parse_type())
        if keyword == "super":
            self._advance()
            self.parse_type()
            return WildcardRef()
        return WildcardRef()

    def _parse_base(self) -> TypeRef:
        token = self._advance()
        if token is None or not _is_name(token):
            raise self._error("expected a type name")
        if self._peek() == "<":
            self._advance()
            arguments = [self.parse_type()]
            while self._peek() == ",":
                self._advance()
                arguments.append(self.parse_type())
            self._expect(">")
            return ParameterizedRef(ClassRef(token), tuple(arguments))
        if token in PRIMITIVE_TYPE_NAMES:
            return PrimitiveRef(token)
        if token in self._type_parameters:
            return TypeVariableRef(token)
        return ClassRef(token)

    def _peek(self) -> str | None:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _advance(self) -> str | None:
        token = self._peek()
        if token is not None:
            self._position += 1
        return token

    def _expect(self, expected: str) -> None:
        token = self._advance()
        if token != expected:
            found = "end of text" if token is None else f"'{token}'"
            raise self._error(f"expected '{expected}' but found {found}")

    def _error(self, detail: str) -> TypeRefSyntaxError:
        return TypeRefSyntaxError(f"Invalid type reference '{self._text}': {detail}.")


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    stripped_end = len(text.rstrip())
    while position < stripped_end:
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            raise TypeRefSyntaxError(
                f"Invalid type reference '{text}': unexpected character at offset {position}."
            )
        name = match.group("name")
        tokens.append(re.sub(r"\s+", "", name) if name else match.group("punct"))
        position = match.end()
    return tokens


def _is_name(token: str) -> bool:
    return token not in {"<", ">", ",", "?", "[", "]"}
