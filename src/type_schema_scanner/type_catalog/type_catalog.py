"""Read-only index of class descriptors consulted during scans."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .catalog_models import ClassDescriptor, FieldDescriptor
from .type_references import ClassRef, TypeRef, type_name
from .well_known_types import PLATFORM_SUPERTYPES

_LOGGER = logging.getLogger("type_schema_scanner.catalog")


class CatalogError(Exception):
    """Raised when a type catalog cannot be built from its source."""


class TypeCatalog:
    """Queryable mapping of class name to its structural description."""

    def __init__(self, classes: Iterable[ClassDescriptor] = ()) -> None:
        entries: dict[str, ClassDescriptor] = {}
        for descriptor in classes:
            if descriptor.name in entries:
                raise CatalogError(f"Duplicate class in catalog: {descriptor.name}")
            entries[descriptor.name] = descriptor
        self._classes: Mapping[str, ClassDescriptor] = entries

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[ClassDescriptor]:
        return iter(self._classes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def lookup_class(self, name: str) -> ClassDescriptor | None:
        """Return the descriptor for ``name`` or None when it is not catalogued."""
        return self._classes.get(name)

    def lookup_type(self, ref: TypeRef) -> ClassDescriptor | None:
        """Return the descriptor for the class a type reference points at."""
        return self.lookup_class(type_name(ref))

    def all_fields(self, descriptor: ClassDescriptor) -> list[FieldDescriptor]:
        """Return instance fields including inherited ones, superclass fields first."""
        lineage: list[ClassDescriptor] = []
        seen: set[str] = set()
        current: ClassDescriptor | None = descriptor
        while current is not None and current.name not in seen:
            seen.add(current.name)
            lineage.append(current)
            if current.supertype is None:
                break
            parent = self.lookup_class(current.supertype)
            if parent is None:
                _LOGGER.debug(
                    "Supertype %s of %s is not in the catalog; inherited fields end there.",
                    current.supertype,
                    current.name,
                )
            current = parent

        fields: list[FieldDescriptor] = []
        for klass in reversed(lineage):
            fields.extend(field for field in klass.fields if not field.is_static)
        return fields

    def enum_constants(self, descriptor: ClassDescriptor) -> list[str]:
        """Return the constant names declared by an enum class."""
        return [
            field.name
            for field in descriptor.fields
            if field.name != "$VALUES"
            and isinstance(field.type, ClassRef)
            and field.type.name == descriptor.name
        ]

    def is_a(self, ref: TypeRef, capability_name: str) -> bool:
        """Return True when ``ref`` is assignable to the named class or interface."""
        pending = [type_name(ref)]
        visited: set[str] = set()
        while pending:
            name = pending.pop()
            if name == capability_name:
                return True
            if name in visited:
                continue
            visited.add(name)
            pending.extend(self._direct_supertypes(name))
        return False

    def _direct_supertypes(self, name: str) -> tuple[str, ...]:
        descriptor = self.lookup_class(name)
        if descriptor is None:
            return PLATFORM_SUPERTYPES.get(name, ())
        parents = descriptor.interfaces
        if descriptor.supertype is not None:
            parents = (descriptor.supertype, *parents)
        return parents
