"""
package_types.py

Responsibility: The closed `PackageType` enumeration and its string lookup table.

Members are created once at import from the declared names (see `settings.py`).
Each member's value is its textual name, which is what documents carry. Decoding
goes through an explicit name -> member table; matching is case-sensitive.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from package_descriptor.errors import UnknownEnumValueError
from package_descriptor.settings import check_package_type_names, resolve_package_type_names


@dataclass(frozen=True)
class PackageTypeTable:
    """Explicit mapping from document tokens to enumeration members."""

    enum: type[Enum]
    by_name: Mapping[str, Enum]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.by_name)

    def parse(self, token: str, *, field: str = "type") -> Enum:
        member = self.by_name.get(token)
        if member is None:
            raise UnknownEnumValueError(
                f"Unknown package type {token!r}; expected one of: {', '.join(self.names)}",
                value=token,
                allowed=self.names,
                field=field,
            )
        return member

    def __contains__(self, member: object) -> bool:
        return isinstance(member, self.enum)


# Enumerations created by `build_package_types`; descriptors accept only their members.
_DECLARED_ENUMS: set[type[Enum]] = set()


def is_package_type(member: object) -> bool:
    return type(member) in _DECLARED_ENUMS


def build_package_types(names: Iterable[str], *, enum_name: str = "PackageType") -> PackageTypeTable:
    """Create a package type enumeration plus its lookup table from declared names."""
    declared = list(names)
    check_package_type_names(declared)

    enum = Enum(enum_name, [(name, name) for name in declared], module=__name__)
    _DECLARED_ENUMS.add(enum)
    return PackageTypeTable(enum=enum, by_name=MappingProxyType({member.name: member for member in enum}))


PACKAGE_TYPES = build_package_types(resolve_package_type_names())
PackageType = PACKAGE_TYPES.enum
