"""
values.py

Responsibility: The closed set of values allowed inside a descriptor's configuration.

An extension value is one of: str, int, float, bool, None, a sequence of
extension values, or a mapping of str to extension values. Nested structure is
otherwise opaque: numbers, strings and key order pass through untouched.

Frozen form (held by descriptors): sequences are tuples, mappings are
read-only `MappingProxyType`s. Thawed form (emitted by encode): plain lists
and dicts.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Union

from package_descriptor.errors import TypeMismatchError

Scalar = Union[str, int, float, bool, None]
ExtensionValue = Union[Scalar, Sequence["ExtensionValue"], Mapping[str, "ExtensionValue"]]

_SCALARS = (str, int, float, bool, type(None))


def _child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def freeze_value(value: Any, path: str = "") -> ExtensionValue:
    """
    Validate `value` against the extension value union and return an immutable copy.

    Raises TypeMismatchError naming `path` for anything outside the union
    (bytes, sets, YAML timestamps, NaN/infinity, non-string mapping keys, ...).
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatchError(f"`{path}` holds a non-finite number ({value!r})", field=path or None)
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, Mapping):
        return freeze_mapping(value, path)
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item, f"{path}[{i}]") for i, item in enumerate(value))
    raise TypeMismatchError(
        f"`{path}` holds an unsupported value of type {type(value).__name__}",
        field=path or None,
    )


def freeze_mapping(value: Mapping[Any, Any], path: str = "") -> Mapping[str, ExtensionValue]:
    out: dict[str, ExtensionValue] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeMismatchError(
                f"`{path or '<root>'}` has a non-string key {key!r}",
                field=path or None,
            )
        child = _child_path(path, key)
        out[key] = freeze_value(item, child)
    return MappingProxyType(out)


def thaw_value(value: ExtensionValue) -> Any:
    """Return a plain dict/list copy of a frozen extension value."""
    if isinstance(value, Mapping):
        return {key: thaw_value(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_value(item) for item in value]
    return value
