"""
documents.py

Responsibility: Move package descriptors to and from structured text.

Input text is parsed as JSON first, then as YAML with `yaml.safe_load`.
Reading and writing files is left to the caller; this module only deals in strings
and already-parsed document nodes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Literal

import yaml

from package_descriptor.descriptor import PackageDescriptor
from package_descriptor.errors import DescriptorError, DocumentSyntaxError, TypeMismatchError
from package_descriptor.package_types import PACKAGE_TYPES, PackageTypeTable

logger = logging.getLogger(__name__)

TextFormat = Literal["json", "yaml"]


def _parse_text(text: str) -> Any:
    # YAML 1.1 reads JSON exponent numbers such as `1e5` as strings, so JSON goes first.
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentSyntaxError(f"Package document is not valid JSON/YAML: {e}") from e


def decode_packages(nodes: Any, *, types: PackageTypeTable = PACKAGE_TYPES) -> list[PackageDescriptor]:
    """
    Decode a sequence of package objects.

    A failure re-raises the same error type with `location` set to the item index, e.g. `[2]`.
    """
    if not isinstance(nodes, (list, tuple)):
        raise TypeMismatchError(f"Package list must be a sequence, got {type(nodes).__name__}")

    out: list[PackageDescriptor] = []
    for i, node in enumerate(nodes):
        try:
            out.append(PackageDescriptor.from_document(node, types=types))
        except DescriptorError as e:
            raise e.with_location(f"[{i}]") from e
    logger.debug("Decoded %d package(s)", len(out))
    return out


def loads_package(text: str, *, types: PackageTypeTable = PACKAGE_TYPES) -> PackageDescriptor:
    return PackageDescriptor.from_document(_parse_text(text), types=types)


def loads_packages(text: str, *, types: PackageTypeTable = PACKAGE_TYPES) -> list[PackageDescriptor]:
    return decode_packages(_parse_text(text), types=types)


def _dump(data: Any, fmt: TextFormat) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported document format: {fmt!r} (expected 'json' or 'yaml')")


def dumps_package(descriptor: PackageDescriptor, format: TextFormat = "json") -> str:
    return _dump(descriptor.to_document(), format)


def dumps_packages(descriptors: Iterable[PackageDescriptor], format: TextFormat = "json") -> str:
    return _dump([d.to_document() for d in descriptors], format)
