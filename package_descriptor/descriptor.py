"""
descriptor.py

Responsibility: The `PackageDescriptor` value object and its document codec.

A package document is a flat object:

    {"name_template": "pkg-{version}", "type": "Zip", "compressionLevel": 9}

`name_template` and `type` are well-known fields; every other key is an
extension field and is kept verbatim in `configuration`. Encoding flattens the
extension fields back out next to the well-known ones.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from package_descriptor.errors import MissingFieldError, ReservedKeyError, TypeMismatchError
from package_descriptor.package_types import PACKAGE_TYPES, PackageTypeTable, is_package_type
from package_descriptor.values import ExtensionValue, freeze_mapping, thaw_value

logger = logging.getLogger(__name__)

NAME_TEMPLATE_KEY = "name_template"
TYPE_KEY = "type"
RESERVED_KEYS = frozenset({NAME_TEMPLATE_KEY, TYPE_KEY})


def _require_str(node: Mapping[Any, Any], key: str) -> str:
    if key not in node:
        raise MissingFieldError(f"Package must define `{key}`.", field=key)
    value = node[key]
    if not isinstance(value, str):
        raise TypeMismatchError(
            f"`{key}` must be a string, got {type(value).__name__}",
            field=key,
        )
    return value


@dataclass(frozen=True)
class PackageDescriptor:
    """One package's declarative build configuration."""

    name_template: str
    package_type: Enum
    configuration: Mapping[str, ExtensionValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name_template, str):
            raise TypeMismatchError(
                f"`{NAME_TEMPLATE_KEY}` must be a string, got {type(self.name_template).__name__}",
                field=NAME_TEMPLATE_KEY,
            )
        if not is_package_type(self.package_type):
            raise TypeMismatchError(
                f"`package_type` must be a package type member, got {type(self.package_type).__name__}",
                field=TYPE_KEY,
            )
        if not isinstance(self.configuration, Mapping):
            raise TypeMismatchError("`configuration` must be a mapping.", field="configuration")

        clash = sorted(RESERVED_KEYS.intersection(self.configuration))
        if clash:
            raise ReservedKeyError(
                f"`configuration` cannot hold well-known fields: {', '.join(clash)}",
                field=clash[0],
            )
        object.__setattr__(self, "configuration", freeze_mapping(self.configuration))

    @classmethod
    def from_document(cls, node: Any, *, types: PackageTypeTable = PACKAGE_TYPES) -> PackageDescriptor:
        """
        Decode one package object.

        Raises:
        - MissingFieldError if `name_template` or `type` is absent
        - TypeMismatchError if either is not a string, or the node is not a mapping
        - UnknownEnumValueError if `type` is not a declared package type
        """
        if not isinstance(node, Mapping):
            raise TypeMismatchError(f"Package must be an object/mapping, got {type(node).__name__}")

        name_template = _require_str(node, NAME_TEMPLATE_KEY)
        package_type = types.parse(_require_str(node, TYPE_KEY), field=TYPE_KEY)
        extensions = {key: value for key, value in node.items() if key not in RESERVED_KEYS}

        descriptor = cls(
            name_template=name_template,
            package_type=package_type,
            configuration=extensions,
        )
        logger.debug(
            "Decoded package %r (type=%s, %d extension field(s))",
            name_template,
            package_type.name,
            len(extensions),
        )
        return descriptor

    def to_document(self) -> dict[str, Any]:
        """Encode back to a flat object: well-known fields first, then extension fields."""
        doc: dict[str, Any] = {
            NAME_TEMPLATE_KEY: self.name_template,
            TYPE_KEY: self.package_type.name,
        }
        doc.update(self.extension_fields())
        return doc

    def extension_fields(self) -> dict[str, Any]:
        """Return `configuration` as plain dicts and lists, e.g. for comparing against parsed documents."""
        return thaw_value(self.configuration)

    def replace(self, **changes: Any) -> PackageDescriptor:
        return dataclasses.replace(self, **changes)

    def with_configuration(self, entries: Mapping[str, Any] | None = None, /, **more: Any) -> PackageDescriptor:
        """Return a new descriptor whose configuration is merged with `entries` and `more`."""
        merged: dict[str, Any] = dict(self.configuration)
        merged.update(entries or {})
        merged.update(more)
        return self.replace(configuration=merged)


def decode_package(node: Any, *, types: PackageTypeTable = PACKAGE_TYPES) -> PackageDescriptor:
    return PackageDescriptor.from_document(node, types=types)


def encode_package(descriptor: PackageDescriptor) -> dict[str, Any]:
    return descriptor.to_document()
