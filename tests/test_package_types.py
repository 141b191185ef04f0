from enum import Enum

import pytest

from package_descriptor.errors import UnknownEnumValueError
from package_descriptor.package_types import PACKAGE_TYPES, PackageType, build_package_types, is_package_type


def test_default_members_use_their_name_as_value() -> None:
    assert PackageType.Zip.value == "Zip"
    assert PACKAGE_TYPES.parse("Zip") is PackageType.Zip
    assert PackageType.Zip in PACKAGE_TYPES


def test_table_preserves_declaration_order() -> None:
    types = build_package_types(["Zip", "Installer", "Directory"])

    assert types.names == ("Zip", "Installer", "Directory")
    assert [m.name for m in types.enum] == ["Zip", "Installer", "Directory"]


def test_parse_unknown_token() -> None:
    types = build_package_types(["Zip", "Installer"])

    with pytest.raises(UnknownEnumValueError, match="expected one of: Zip, Installer") as exc:
        types.parse("ZIP")
    assert exc.value.field == "type"


def test_members_from_other_tables_are_not_contained() -> None:
    other = build_package_types(["Zip"])

    assert other.enum.Zip not in PACKAGE_TYPES
    assert other.enum.Zip is not PackageType.Zip


@pytest.mark.parametrize("names", [[], ["Zip", "Zip"], ["has space"], ["_private"], [""]])
def test_invalid_declarations(names: list[str]) -> None:
    with pytest.raises(ValueError):
        build_package_types(names)


def test_only_members_of_built_tables_count_as_package_types() -> None:
    other = build_package_types(["Tarball"])

    assert is_package_type(PackageType.Zip)
    assert is_package_type(other.enum.Tarball)
    assert not is_package_type(Enum("Foreign", ["Zip"]).Zip)
    assert not is_package_type("Zip")
