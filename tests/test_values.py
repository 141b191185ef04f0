import datetime
from types import MappingProxyType

import pytest

from package_descriptor.errors import TypeMismatchError
from package_descriptor.values import freeze_mapping, freeze_value, thaw_value


def test_scalars_pass_through() -> None:
    for value in ["s", 0, -3, 1.5, True, False, None]:
        assert freeze_value(value) is value


def test_nested_structure_is_frozen() -> None:
    frozen = freeze_value({"a": [1, {"b": [2, 3]}]})

    assert isinstance(frozen, MappingProxyType)
    assert isinstance(frozen["a"], tuple)
    assert isinstance(frozen["a"][1], MappingProxyType)
    assert frozen["a"][1]["b"] == (2, 3)


def test_thaw_returns_plain_containers() -> None:
    frozen = freeze_value({"a": [1, {"b": (2, 3)}]})

    assert thaw_value(frozen) == {"a": [1, {"b": [2, 3]}]}
    assert type(thaw_value(frozen)) is dict


def test_key_order_is_kept() -> None:
    frozen = freeze_mapping({"z": 1, "a": 2, "m": 3})

    assert list(frozen) == ["z", "a", "m"]


@pytest.mark.parametrize(
    "value,path",
    [
        ({"when": datetime.date(2024, 1, 1)}, "when"),
        ({"items": [1, {2, 3}]}, "items[1]"),
        ({"outer": {"inner": b"x"}}, "outer.inner"),
    ],
)
def test_unsupported_values_name_their_path(value: object, path: str) -> None:
    with pytest.raises(TypeMismatchError) as exc:
        freeze_value(value)
    assert exc.value.field == path
    assert path in str(exc.value)


def test_non_string_keys_are_rejected() -> None:
    with pytest.raises(TypeMismatchError, match="non-string key"):
        freeze_value({"outer": {1: "one"}})


@pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_are_rejected(number: float) -> None:
    with pytest.raises(TypeMismatchError, match="non-finite") as exc:
        freeze_value({"limits": [1.0, number]})
    assert exc.value.field == "limits[1]"
