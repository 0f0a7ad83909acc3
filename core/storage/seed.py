"""
Painel Storage — Sample Seeder
=================================
Fixed bootstrap rows loaded once, when the store is constructed.

Customers 1..3, products 1..4, orders 1..2, no order items.
Counters end at 4 / 5 / 3 / 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from core.storage.models import (
    Customer,
    CustomerStatus,
    Order,
    OrderStatus,
    Product,
    ProductStatus,
)

if TYPE_CHECKING:
    from core.storage.memory import MemStorage


SAMPLE_CUSTOMERS: Tuple[Customer, ...] = (
    Customer(
        id=1,
        name="João Silva",
        email="joao@email.com",
        phone="(11) 99999-9999",
        city="São Paulo",
        status=CustomerStatus.ACTIVE,
    ),
    Customer(
        id=2,
        name="Maria Santos",
        email="maria@email.com",
        phone="(11) 88888-8888",
        city="Rio de Janeiro",
        status=CustomerStatus.ACTIVE,
    ),
    Customer(
        id=3,
        name="Pedro Costa",
        email="pedro@email.com",
        phone="(11) 77777-7777",
        city="Belo Horizonte",
        status=CustomerStatus.ACTIVE,
    ),
)

SAMPLE_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Notebook Dell Inspiron",
        sku="NB-DELL-001",
        category="Eletrônicos",
        price="2499.90",
        stock=45,
        status=ProductStatus.ACTIVE,
    ),
    Product(
        id=2,
        name="Mouse Wireless",
        sku="MS-WLS-002",
        category="Acessórios",
        price="89.90",
        stock=5,
        status=ProductStatus.LOW_STOCK,
    ),
    Product(
        id=3,
        name="Teclado Mecânico",
        sku="KB-MEC-003",
        category="Acessórios",
        price="299.90",
        stock=20,
        status=ProductStatus.ACTIVE,
    ),
    Product(
        id=4,
        name="Monitor 24 polegadas",
        sku="MN-24-004",
        category="Eletrônicos",
        price="899.90",
        stock=0,
        status=ProductStatus.OUT_OF_STOCK,
    ),
)

SAMPLE_ORDERS: Tuple[Order, ...] = (
    Order(
        id=1,
        customer_id=1,
        customer_name="João Silva",
        total="567.89",
        status=OrderStatus.COMPLETED,
        date="2023-12-15",
    ),
    Order(
        id=2,
        customer_id=2,
        customer_name="Maria Santos",
        total="1234.50",
        status=OrderStatus.PENDING,
        date="2023-12-15",
    ),
)


def seed_sample_data(storage: "MemStorage") -> None:
    """Load the sample rows. A second call on the same store raises RuntimeError."""
    storage.seed(
        customers=SAMPLE_CUSTOMERS,
        products=SAMPLE_PRODUCTS,
        orders=SAMPLE_ORDERS,
    )
