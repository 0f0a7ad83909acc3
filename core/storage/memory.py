"""
Painel Storage — In-Memory Store
===================================
Four independent keyed collections (customers, products, orders,
order items), each with its own id counter.

Invariants (store-level, not caller responsibility):
- Ids are assigned here, strictly increasing, never reused
- Product status is recomputed from stock on every create/update,
  overriding whatever status the caller supplied
- No referential checks: orders may name unknown customers,
  items may name unknown orders/products

Not-found is None (get/update) or False (delete). Nothing here
raises for well-typed input; field validation happens upstream.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from core.config import StoreConfig
from core.storage.collection import EntityCollection
from core.storage.models import (
    Customer,
    CustomerUpdate,
    NewCustomer,
    NewOrder,
    NewOrderItem,
    NewProduct,
    Order,
    OrderItem,
    OrderItemUpdate,
    OrderStatus,
    OrderUpdate,
    Product,
    ProductUpdate,
)
from core.storage.seed import seed_sample_data
from core.storage.status import apply_stock_status

logger = logging.getLogger("painel.storage")


class MemStorage:
    """
    Explicitly constructed in-memory store.

    Usage:
        storage = MemStorage()                      # seeded sample rows
        empty = MemStorage(seed=False)              # nothing seeded
        custom = MemStorage(StoreConfig(low_stock_threshold=5))
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        seed: Optional[bool] = None,
    ) -> None:
        self.config = config or StoreConfig()
        self.customers: EntityCollection[Customer] = EntityCollection("customers")
        self.products: EntityCollection[Product] = EntityCollection("products")
        self.orders: EntityCollection[Order] = EntityCollection("orders")
        self.order_items: EntityCollection[OrderItem] = EntityCollection("order_items")
        self._seeded = False

        should_seed = self.config.seed_sample_data if seed is None else seed
        if should_seed:
            seed_sample_data(self)

    @property
    def low_stock_threshold(self) -> int:
        return self.config.low_stock_threshold

    @property
    def seeded(self) -> bool:
        return self._seeded

    def seed(
        self,
        customers: Iterable[Customer] = (),
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
    ) -> None:
        """
        One-time bootstrap load of rows with explicit ids.

        Products go through the status rule like any other write.
        Raises RuntimeError if the store was already seeded.
        """
        if self._seeded:
            raise RuntimeError("Store has already been seeded.")
        self.customers.seed(customers)
        self.products.seed(self._with_status(p) for p in products)
        self.orders.seed(orders)
        self._seeded = True
        logger.info("Sample data seeded: %s", self.counts())

    def counts(self) -> Dict[str, int]:
        return {
            c.name: c.count
            for c in (self.customers, self.products, self.orders, self.order_items)
        }

    def _with_status(self, product: Product) -> Product:
        return apply_stock_status(product, self.low_stock_threshold)

    # ══════════════════════════════════════════════════════════
    # CUSTOMERS
    # ══════════════════════════════════════════════════════════

    def list_customers(self) -> List[Customer]:
        return self.customers.list()

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get(customer_id)

    def create_customer(self, data: NewCustomer) -> Customer:
        return self.customers.insert(data.build)

    def update_customer(
        self, customer_id: int, data: CustomerUpdate
    ) -> Optional[Customer]:
        return self.customers.replace(
            customer_id, lambda old: replace(old, **data.changes())
        )

    def delete_customer(self, customer_id: int) -> bool:
        return self.customers.delete(customer_id)

    # ══════════════════════════════════════════════════════════
    # PRODUCTS
    # ══════════════════════════════════════════════════════════

    def list_products(self) -> List[Product]:
        return self.products.list()

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def create_product(self, data: NewProduct) -> Product:
        return self.products.insert(
            lambda new_id: self._with_status(data.build(new_id))
        )

    def update_product(
        self, product_id: int, data: ProductUpdate
    ) -> Optional[Product]:
        return self.products.replace(
            product_id,
            lambda old: self._with_status(replace(old, **data.changes())),
        )

    def delete_product(self, product_id: int) -> bool:
        return self.products.delete(product_id)

    # ══════════════════════════════════════════════════════════
    # ORDERS
    # ══════════════════════════════════════════════════════════

    def list_orders(self) -> List[Order]:
        return self.orders.list()

    def get_order(self, order_id: int) -> Optional[Order]:
        return self.orders.get(order_id)

    def create_order(self, data: NewOrder) -> Order:
        return self.orders.insert(data.build)

    def update_order(
        self, order_id: int, data: OrderUpdate
    ) -> Optional[Order]:
        return self.orders.replace(
            order_id, lambda old: replace(old, **data.changes())
        )

    def update_order_status(
        self, order_id: int, status: OrderStatus
    ) -> Optional[Order]:
        return self.update_order(order_id, OrderUpdate(status=status))

    def delete_order(self, order_id: int) -> bool:
        return self.orders.delete(order_id)

    # ══════════════════════════════════════════════════════════
    # ORDER ITEMS
    # ══════════════════════════════════════════════════════════

    def list_order_items(self, order_id: int) -> List[OrderItem]:
        """Items whose order_id matches, in insertion order."""
        return self.order_items.filter(lambda item: item.order_id == order_id)

    def list_all_order_items(self) -> List[OrderItem]:
        return self.order_items.list()

    def get_order_item(self, item_id: int) -> Optional[OrderItem]:
        return self.order_items.get(item_id)

    def create_order_item(self, data: NewOrderItem) -> OrderItem:
        return self.order_items.insert(data.build)

    def update_order_item(
        self, item_id: int, data: OrderItemUpdate
    ) -> Optional[OrderItem]:
        return self.order_items.replace(
            item_id, lambda old: replace(old, **data.changes())
        )

    def delete_order_item(self, item_id: int) -> bool:
        return self.order_items.delete(item_id)
