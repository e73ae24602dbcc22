# tests/test_validation.py
import pytest

from catalog.core import validate_product, _make_product

VALID = {"name": "Mug", "description": "", "price": 10, "category": "kitchen", "inStock": True}


def test_valid_product_has_no_errors():
    assert validate_product(VALID) == []
    assert validate_product({**VALID, "price": 9.99}) == []


@pytest.mark.parametrize("field,value,message", [
    ("name", "", "Invalid or missing name"),
    ("name", 42, "Invalid or missing name"),
    ("description", None, "Invalid description"),
    ("price", "10", "Invalid price"),
    ("price", True, "Invalid price"),
    ("price", float("nan"), "Invalid price"),
    ("price", float("inf"), "Invalid price"),
    ("category", "", "Invalid or missing category"),
    ("inStock", 1, "Invalid inStock value"),
])
def test_single_violation(field, value, message):
    assert validate_product({**VALID, field: value}) == [message]


def test_missing_description_is_an_error():
    body = {k: v for k, v in VALID.items() if k != "description"}
    assert validate_product(body) == ["Invalid description"]


def test_non_object_is_checked_as_empty():
    assert len(validate_product(["Mug"])) == 5
    assert validate_product(None) == validate_product({})


def test_make_product_keeps_given_id():
    product = _make_product("abc", {**VALID, "id": "ignored"})
    assert product.id == "abc"
    assert product.in_stock is True
    assert product.to_json() == {"id": "abc", **VALID}
