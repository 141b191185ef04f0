"""
package_descriptor package

Declarative build package records and their document codec.

Key responsibilities are split across modules:
- `descriptor.py`: the immutable `PackageDescriptor` plus decode/encode
- `package_types.py`: the declared `PackageType` members and name lookup
- `values.py`: the closed set of extension values kept in `configuration`
- `documents.py`: JSON/YAML text helpers and collection decoding
- `settings.py`: where the declared package type names come from
- `errors.py`: the decode error taxonomy
"""

from __future__ import annotations

from package_descriptor.descriptor import PackageDescriptor, decode_package, encode_package
from package_descriptor.documents import (
    decode_packages,
    dumps_package,
    dumps_packages,
    loads_package,
    loads_packages,
)
from package_descriptor.errors import (
    DescriptorError,
    DocumentSyntaxError,
    MissingFieldError,
    ReservedKeyError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from package_descriptor.package_types import PACKAGE_TYPES, PackageType, PackageTypeTable, build_package_types

__all__ = [
    "__version__",
    "DescriptorError",
    "DocumentSyntaxError",
    "MissingFieldError",
    "PACKAGE_TYPES",
    "PackageDescriptor",
    "PackageType",
    "PackageTypeTable",
    "ReservedKeyError",
    "TypeMismatchError",
    "UnknownEnumValueError",
    "build_package_types",
    "decode_package",
    "decode_packages",
    "dumps_package",
    "dumps_packages",
    "encode_package",
    "loads_package",
    "loads_packages",
]

__version__ = "0.1.0"
