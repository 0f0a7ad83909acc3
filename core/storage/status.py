"""
Painel Storage — Product Status Derivation
=============================================
A product's status is a pure function of its stock:

    stock == 0                     → out_of_stock
    0 < stock <= threshold (10)    → low_stock
    stock > threshold              → active

Enforced by the store on every product create and update.
"""

from __future__ import annotations

from dataclasses import replace

from core.config.store import LOW_STOCK_THRESHOLD
from core.storage.models import Product, ProductStatus

__all__ = ["LOW_STOCK_THRESHOLD", "derive_status", "apply_stock_status"]


def derive_status(
    stock: int, low_stock_threshold: int = LOW_STOCK_THRESHOLD
) -> ProductStatus:
    if stock < 0:
        raise ValueError(f"Stock cannot be negative, got {stock}.")
    if stock == 0:
        return ProductStatus.OUT_OF_STOCK
    if stock <= low_stock_threshold:
        return ProductStatus.LOW_STOCK
    return ProductStatus.ACTIVE


def apply_stock_status(
    product: Product, low_stock_threshold: int = LOW_STOCK_THRESHOLD
) -> Product:
    """Return the product with its status recomputed from stock."""
    status = derive_status(product.stock, low_stock_threshold)
    if product.status == status:
        return product
    return replace(product, status=status)
