"""
Painel Storage — Capability Set
=================================
What the request-routing layer (outside this package) may call.

Implementations may back this with a database or an in-memory store.
Callers receive an instance explicitly; there is no module-level store.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from core.storage.models import (
    Customer,
    CustomerUpdate,
    NewCustomer,
    NewOrder,
    NewOrderItem,
    NewProduct,
    Order,
    OrderItem,
    OrderStatus,
    OrderUpdate,
    Product,
    ProductUpdate,
)


class Storage(Protocol):

    # ── Customers ─────────────────────────────────────────────
    def list_customers(self) -> List[Customer]:
        ...  # pragma: no cover

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        ...  # pragma: no cover

    def create_customer(self, data: NewCustomer) -> Customer:
        ...  # pragma: no cover

    def update_customer(
        self, customer_id: int, data: CustomerUpdate
    ) -> Optional[Customer]:
        ...  # pragma: no cover

    def delete_customer(self, customer_id: int) -> bool:
        ...  # pragma: no cover

    # ── Products ──────────────────────────────────────────────
    def list_products(self) -> List[Product]:
        ...  # pragma: no cover

    def get_product(self, product_id: int) -> Optional[Product]:
        ...  # pragma: no cover

    def create_product(self, data: NewProduct) -> Product:
        ...  # pragma: no cover

    def update_product(
        self, product_id: int, data: ProductUpdate
    ) -> Optional[Product]:
        ...  # pragma: no cover

    def delete_product(self, product_id: int) -> bool:
        ...  # pragma: no cover

    # ── Orders ────────────────────────────────────────────────
    def list_orders(self) -> List[Order]:
        ...  # pragma: no cover

    def get_order(self, order_id: int) -> Optional[Order]:
        ...  # pragma: no cover

    def create_order(self, data: NewOrder) -> Order:
        ...  # pragma: no cover

    def update_order(
        self, order_id: int, data: OrderUpdate
    ) -> Optional[Order]:
        ...  # pragma: no cover

    def update_order_status(
        self, order_id: int, status: OrderStatus
    ) -> Optional[Order]:
        ...  # pragma: no cover

    def delete_order(self, order_id: int) -> bool:
        ...  # pragma: no cover

    # ── Order items ───────────────────────────────────────────
    def list_order_items(self, order_id: int) -> List[OrderItem]:
        ...  # pragma: no cover

    def create_order_item(self, data: NewOrderItem) -> OrderItem:
        ...  # pragma: no cover
