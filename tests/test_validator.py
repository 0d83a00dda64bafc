"""Tests for product business rules."""
import pytest

from warehouse_api.exceptions import ProductValidationError
from warehouse_api.schemas.product import ProductCandidate
from warehouse_api.validators.product import ProductValidator


@pytest.fixture
def validator():
    return ProductValidator()


def test_valid_candidate_passes(validator):
    assert validator.validate(ProductCandidate(name="Bolt", price=1, stock=0)) is None


@pytest.mark.parametrize(
    "fields,reason",
    [
        ({"name": "", "price": 5, "stock": 5}, "name required"),
        ({"name": "Bolt", "price": 0, "stock": 5}, "price must be greater than zero"),
        ({"name": "Bolt", "price": -3, "stock": 5}, "price must be greater than zero"),
        ({"name": "Bolt", "price": 5, "stock": -1}, "stock cannot be negative"),
        # Several rules broken: the first in name, price, stock order wins
        ({"name": "", "price": 0, "stock": -1}, "name required"),
        ({"name": "Bolt", "price": 0, "stock": -1}, "price must be greater than zero"),
    ],
)
def test_invalid_candidate_reports_reason(validator, fields, reason):
    with pytest.raises(ProductValidationError) as exc_info:
        validator.validate(ProductCandidate(**fields))

    assert exc_info.value.message == reason
    assert exc_info.value.status_code == 400


def test_missing_fields_default_to_zero_values(validator):
    """An empty payload is reported as a missing name."""
    with pytest.raises(ProductValidationError, match="name required"):
        validator.validate(ProductCandidate())
