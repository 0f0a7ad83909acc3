"""
Painel Storage — Public API
==============================
In-memory entity store for the admin dashboard.
"""

from core.storage.collection import EntityCollection
from core.storage.memory import MemStorage
from core.storage.models import (
    Customer,
    CustomerStatus,
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
    ProductStatus,
    ProductUpdate,
)
from core.storage.protocol import Storage
from core.storage.seed import seed_sample_data
from core.storage.status import LOW_STOCK_THRESHOLD, apply_stock_status, derive_status
from core.storage.validation import (
    ValidationFailed,
    ValidationRule,
    validate_new_customer,
    validate_new_product,
)

__all__ = [
    "EntityCollection",
    "MemStorage",
    "Storage",
    "Customer",
    "CustomerStatus",
    "CustomerUpdate",
    "NewCustomer",
    "Product",
    "ProductStatus",
    "ProductUpdate",
    "NewProduct",
    "Order",
    "OrderStatus",
    "OrderUpdate",
    "NewOrder",
    "OrderItem",
    "OrderItemUpdate",
    "NewOrderItem",
    "LOW_STOCK_THRESHOLD",
    "derive_status",
    "apply_stock_status",
    "seed_sample_data",
    "ValidationFailed",
    "ValidationRule",
    "validate_new_customer",
    "validate_new_product",
]
