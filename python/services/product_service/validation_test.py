import pytest

from product_service.errors import ErrorKind, ValidationError
from product_service.validation import INVALID_TYPES, MISSING_FIELDS, validate_product

VALID = {
    "name": "Lamp",
    "description": "Desk lamp",
    "price": 25.5,
    "category": "home",
    "inStock": True,
}


def test_valid_payload():
    fields = validate_product(VALID)
    assert fields.name == "Lamp"
    assert fields.in_stock is True


def test_zero_price_and_out_of_stock_are_valid():
    fields = validate_product({**VALID, "price": 0, "inStock": False})
    assert fields.price == 0
    assert fields.in_stock is False


def test_unknown_keys_are_dropped():
    fields = validate_product({**VALID, "id": "mine", "color": "red"})
    assert "id" not in fields.model_dump()


@pytest.mark.parametrize("field", ["name", "description", "price", "category", "inStock"])
def test_missing_field(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    with pytest.raises(ValidationError) as excinfo:
        validate_product(payload)
    assert excinfo.value.message == MISSING_FIELDS


@pytest.mark.parametrize("field", ["name", "description", "category"])
def test_empty_text_counts_as_missing(field):
    with pytest.raises(ValidationError) as excinfo:
        validate_product({**VALID, field: ""})
    assert excinfo.value.message == MISSING_FIELDS


def test_null_price_counts_as_missing():
    with pytest.raises(ValidationError) as excinfo:
        validate_product({**VALID, "price": None})
    assert excinfo.value.message == MISSING_FIELDS


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": "25"},
        {"price": True},
        {"inStock": "true"},
        {"inStock": 1},
        {"name": 42},
    ],
)
def test_wrong_types(overrides):
    with pytest.raises(ValidationError) as excinfo:
        validate_product({**VALID, **overrides})
    assert excinfo.value.message == INVALID_TYPES


def test_non_object_payload():
    with pytest.raises(ValidationError):
        validate_product(["not", "an", "object"])


def test_validation_error_kind():
    err = ValidationError(MISSING_FIELDS)
    assert err.kind is ErrorKind.VALIDATION
    assert err.status_code == 400


@pytest.mark.parametrize("price", [10**400, -(10**400), float("nan"), float("inf"), float("-inf")])
def test_price_must_be_finite_float(price):
    with pytest.raises(ValidationError) as excinfo:
        validate_product({**VALID, "price": price})
    assert excinfo.value.message == INVALID_TYPES


def test_large_finite_price_is_valid():
    assert validate_product({**VALID, "price": 10**20}).price == 1e20
