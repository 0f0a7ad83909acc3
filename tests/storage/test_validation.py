"""
Tests — Form Validation Helpers
===================================
"""

from __future__ import annotations

import pytest

from core.storage import (
    NewCustomer,
    NewProduct,
    ValidationFailed,
    ValidationRule,
    validate_new_customer,
    validate_new_product,
)


def _customer(**overrides) -> NewCustomer:
    defaults = dict(
        name="Ana Lima", email="ana@email.com",
        phone="(21) 91234-5678", city="Niterói",
    )
    defaults.update(overrides)
    return NewCustomer(**defaults)


def _product(**overrides) -> NewProduct:
    defaults = dict(
        name="Webcam HD", sku="WC-HD-010", category="Acessórios",
        price="199.90", stock=0,
    )
    defaults.update(overrides)
    return NewProduct(**defaults)


class TestCustomerForm:
    def test_valid_passes_through(self):
        data = _customer()
        assert validate_new_customer(data) is data

    @pytest.mark.parametrize(
        "overrides,field,rule",
        [
            ({"name": "A"}, "name", ValidationRule.MIN_LENGTH),
            ({"email": "ana.email.com"}, "email", ValidationRule.EMAIL_FORMAT),
            ({"email": "ana@local"}, "email", ValidationRule.EMAIL_FORMAT),
            ({"phone": "12345"}, "phone", ValidationRule.MIN_LENGTH),
            ({"city": "X"}, "city", ValidationRule.MIN_LENGTH),
        ],
    )
    def test_rule_violations(self, overrides, field, rule):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_new_customer(_customer(**overrides))
        assert exc_info.value.field == field
        assert exc_info.value.rule == rule

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_new_customer(_customer(name=""))


class TestProductForm:
    def test_valid_passes_through(self):
        data = _product()
        assert validate_new_product(data) is data

    @pytest.mark.parametrize(
        "overrides,field,rule",
        [
            ({"name": "W"}, "name", ValidationRule.MIN_LENGTH),
            ({"sku": "WC"}, "sku", ValidationRule.MIN_LENGTH),
            ({"category": "A"}, "category", ValidationRule.MIN_LENGTH),
            ({"price": ""}, "price", ValidationRule.REQUIRED),
            ({"price": "abc"}, "price", ValidationRule.DECIMAL_FORMAT),
            ({"price": "NaN"}, "price", ValidationRule.DECIMAL_FORMAT),
            ({"stock": -1}, "stock", ValidationRule.NON_NEGATIVE),
        ],
    )
    def test_rule_violations(self, overrides, field, rule):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_new_product(_product(**overrides))
        assert exc_info.value.field == field
        assert exc_info.value.rule == rule

    def test_message_names_rule_and_field(self):
        with pytest.raises(ValidationFailed, match=r"\[MIN_LENGTH\] sku"):
            validate_new_product(_product(sku="X"))
