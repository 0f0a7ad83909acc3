"""
Painel Bootstrap — Invariant Checks
======================================
Each function verifies one store law against a freshly built store.
If any check fails → SystemBootstrapError is raised.

These checks do NOT auto-fix anything.
"""

import logging

from core.bootstrap.errors import SystemBootstrapError
from core.storage.memory import MemStorage
from core.storage.status import derive_status

logger = logging.getLogger("painel.bootstrap")


def _fail(invariant: str, detail: str) -> None:
    logger.error("Bootstrap invariant %s violated: %s", invariant, detail)
    raise SystemBootstrapError(invariant=invariant, detail=detail)


def _collections(storage: MemStorage):
    return (storage.customers, storage.products, storage.orders, storage.order_items)


# ══════════════════════════════════════════════════════════════
# CHECK 1: Ids are positive integers
# ══════════════════════════════════════════════════════════════

def check_positive_ids(storage: MemStorage) -> None:
    for collection in _collections(storage):
        for row in collection.list():
            if not isinstance(row.id, int) or row.id < 1:
                _fail(
                    "POSITIVE_IDS",
                    f"{collection.name} holds a row with id {row.id!r}.",
                )
    logger.info("✓ Ids are positive integers.")


# ══════════════════════════════════════════════════════════════
# CHECK 2: Counters sit past every stored id
# ══════════════════════════════════════════════════════════════

def check_id_counters(storage: MemStorage) -> None:
    for collection in _collections(storage):
        if collection.next_id <= collection.highest_id:
            _fail(
                "ID_COUNTERS",
                f"{collection.name} next id {collection.next_id} would reuse "
                f"existing id {collection.highest_id}.",
            )
    logger.info("✓ Id counters are ahead of stored ids.")


# ══════════════════════════════════════════════════════════════
# CHECK 3: Product status matches stock
# ══════════════════════════════════════════════════════════════

def check_product_status(storage: MemStorage) -> None:
    threshold = storage.low_stock_threshold
    for product in storage.list_products():
        expected = derive_status(product.stock, threshold)
        if product.status != expected:
            _fail(
                "PRODUCT_STATUS",
                f"Product {product.id} has stock {product.stock} and status "
                f"'{product.status.value}', expected '{expected.value}'.",
            )
    logger.info("✓ Product statuses match stock.")
