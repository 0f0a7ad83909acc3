"""
Painel Storage — Form Validation Helpers
===========================================
Field rules for customer and product forms, for the layer that
shapes requests before they reach the store.

The store itself never calls these: it assumes well-formed input.

If a rule is violated → ValidationFailed (field + rule, first failure wins).
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from core.storage.models import NewCustomer, NewProduct


# ══════════════════════════════════════════════════════════════
# RULE CODES
# ══════════════════════════════════════════════════════════════

class ValidationRule:
    MIN_LENGTH = "MIN_LENGTH"
    EMAIL_FORMAT = "EMAIL_FORMAT"
    REQUIRED = "REQUIRED"
    DECIMAL_FORMAT = "DECIMAL_FORMAT"
    NON_NEGATIVE = "NON_NEGATIVE"


class ValidationFailed(ValueError):
    """A single field failed a single rule."""

    def __init__(self, field: str, rule: str, message: str):
        self.field = field
        self.rule = rule
        self.message = message
        super().__init__(f"[{rule}] {field}: {message}")


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _min_length(field: str, value: str, minimum: int, message: str) -> None:
    if len(value) < minimum:
        raise ValidationFailed(field, ValidationRule.MIN_LENGTH, message)


# ══════════════════════════════════════════════════════════════
# CUSTOMER FORM
# ══════════════════════════════════════════════════════════════

def validate_new_customer(data: NewCustomer) -> NewCustomer:
    _min_length("name", data.name, 2, "Name must be at least 2 characters")
    if not _EMAIL_RE.match(data.email):
        raise ValidationFailed(
            "email", ValidationRule.EMAIL_FORMAT, "Invalid email format"
        )
    _min_length("phone", data.phone, 10, "Phone must be at least 10 characters")
    _min_length("city", data.city, 2, "City must be at least 2 characters")
    return data


# ══════════════════════════════════════════════════════════════
# PRODUCT FORM
# ══════════════════════════════════════════════════════════════

def validate_new_product(data: NewProduct) -> NewProduct:
    _min_length("name", data.name, 2, "Product name must be at least 2 characters")
    _min_length("sku", data.sku, 3, "SKU must be at least 3 characters")
    _min_length("category", data.category, 2, "Category must be at least 2 characters")

    if not data.price:
        raise ValidationFailed("price", ValidationRule.REQUIRED, "Price is required")
    try:
        price = Decimal(data.price)
    except InvalidOperation:
        raise ValidationFailed(
            "price", ValidationRule.DECIMAL_FORMAT, "Price must be a decimal number"
        ) from None
    if not price.is_finite():
        raise ValidationFailed(
            "price", ValidationRule.DECIMAL_FORMAT, "Price must be a decimal number"
        )

    if data.stock < 0:
        raise ValidationFailed(
            "stock", ValidationRule.NON_NEGATIVE, "Stock cannot be negative"
        )
    return data
