"""
Painel Storage — Entity Rows and Request DTOs
================================================
Customers, products, orders and order items held by the in-memory store.

RULES:
- Rows are frozen; an update stores a new row (dataclasses.replace)
- Identifiers are assigned by the store, never by the caller
- Money stays a decimal string ("2499.90"), parsed only when aggregated
- No referential checks between entities (denormalized names are copies)

This file contains NO storage logic.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class CustomerStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ProductStatus(Enum):
    """Product lifecycle status, always derived from stock."""
    ACTIVE = "active"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ══════════════════════════════════════════════════════════════
# ROWS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Customer:
    id: int
    name: str
    email: str
    phone: str
    city: str
    status: CustomerStatus = CustomerStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "city": self.city,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    sku: str
    category: str
    price: str
    stock: int = 0
    status: ProductStatus = ProductStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Order:
    id: int
    customer_id: int
    customer_name: str    # denormalized, not synced with Customer
    total: str
    date: str
    status: OrderStatus = OrderStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "total": self.total,
            "status": self.status.value,
            "date": self.date,
        }


@dataclass(frozen=True)
class OrderItem:
    id: int
    order_id: int
    product_id: int
    product_name: str     # denormalized
    quantity: int
    price: str
    total: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "orderId": self.order_id,
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
            "price": self.price,
            "total": self.total,
        }


# ══════════════════════════════════════════════════════════════
# INSERT REQUESTS (frozen, no id)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class NewCustomer:
    name: str
    email: str
    phone: str
    city: str
    status: CustomerStatus = CustomerStatus.ACTIVE

    def build(self, customer_id: int) -> Customer:
        return Customer(
            id=customer_id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            city=self.city,
            status=self.status,
        )


@dataclass(frozen=True)
class NewProduct:
    name: str
    sku: str
    category: str
    price: str
    stock: int = 0
    # Accepted for wire compatibility; the store recomputes it from stock.
    status: Optional[ProductStatus] = None

    def build(self, product_id: int) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            sku=self.sku,
            category=self.category,
            price=self.price,
            stock=self.stock,
            status=self.status or ProductStatus.ACTIVE,
        )


@dataclass(frozen=True)
class NewOrder:
    customer_id: int
    customer_name: str
    total: str
    date: str
    status: OrderStatus = OrderStatus.PENDING

    def build(self, order_id: int) -> Order:
        return Order(
            id=order_id,
            customer_id=self.customer_id,
            customer_name=self.customer_name,
            total=self.total,
            date=self.date,
            status=self.status,
        )


@dataclass(frozen=True)
class NewOrderItem:
    order_id: int
    product_id: int
    product_name: str
    quantity: int
    price: str
    total: str

    def build(self, item_id: int) -> OrderItem:
        return OrderItem(
            id=item_id,
            order_id=self.order_id,
            product_id=self.product_id,
            product_name=self.product_name,
            quantity=self.quantity,
            price=self.price,
            total=self.total,
        )


# ══════════════════════════════════════════════════════════════
# PARTIAL UPDATES (None means "not provided")
# ══════════════════════════════════════════════════════════════

class _PartialUpdate:
    """Mixin for update DTOs whose fields are all Optional."""

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()


@dataclass(frozen=True)
class CustomerUpdate(_PartialUpdate):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    status: Optional[CustomerStatus] = None


@dataclass(frozen=True)
class ProductUpdate(_PartialUpdate):
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    price: Optional[str] = None
    stock: Optional[int] = None
    status: Optional[ProductStatus] = None


@dataclass(frozen=True)
class OrderUpdate(_PartialUpdate):
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    total: Optional[str] = None
    date: Optional[str] = None
    status: Optional[OrderStatus] = None


@dataclass(frozen=True)
class OrderItemUpdate(_PartialUpdate):
    order_id: Optional[int] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[str] = None
    total: Optional[str] = None
