from __future__ import annotations

import pytest

from recordwire import CamelCaseWire, CaseTransform, IdentityCase, SnakeCaseWire
from recordwire.casing import camel_to_snake, case_transform_for, snake_to_camel
from tests.record_fixtures import Address


@pytest.mark.parametrize(
    ("camel", "snake"),
    [
        ("streetAddress", "street_address"),
        ("country", "country"),
        ("addressLine1", "address_line1"),
        ("HTTPServer", "http_server"),
    ],
)
def test_camel_to_snake(camel: str, snake: str) -> None:
    assert camel_to_snake(camel) == snake


def test_camel_to_snake_leaves_snake_case_alone() -> None:
    assert camel_to_snake("other_addresses") == "other_addresses"


def test_snake_to_camel() -> None:
    assert snake_to_camel("street_address") == "streetAddress"
    assert snake_to_camel("address_line1") == "addressLine1"
    assert snake_to_camel("country") == "country"


def test_camel_transform_recurses_through_plain_data() -> None:
    tree = {"outerKey": [{"innerKey": 1}, ("tupleItem",)], "plain": {"deepNested": {"x": 1}}}
    internal = CamelCaseWire().to_internal(tree)
    assert internal == {
        "outer_key": [{"inner_key": 1}, ["tupleItem"]],
        "plain": {"deep_nested": {"x": 1}},
    }
    assert tree["outerKey"][0] == {"innerKey": 1}


def test_camel_transform_leaves_records_untouched() -> None:
    address = Address(street_address="1 Main St")
    external = CamelCaseWire().to_external({"home_address": address})
    assert external["homeAddress"] is address


def test_identity_transforms_return_tree() -> None:
    tree = {"some_key": 1}
    assert IdentityCase().to_internal(tree) is tree
    assert SnakeCaseWire().to_external(tree) is tree


def test_case_transform_lookup() -> None:
    assert isinstance(case_transform_for(" Camel "), CamelCaseWire)
    assert isinstance(case_transform_for("snake"), CaseTransform)
    with pytest.raises(ValueError, match="unknown wire case"):
        case_transform_for("kebab")
