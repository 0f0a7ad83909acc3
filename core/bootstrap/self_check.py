"""
Painel Bootstrap — Self-Check Orchestrator
=============================================
Runs all invariant checks on the store before it is exposed.
If any check fails → SystemBootstrapError propagates.

Check order:
1. Ids are positive
2. Id counters never reuse an id
3. Product status derived from stock
"""

import logging

from core.bootstrap.invariants import (
    check_id_counters,
    check_positive_ids,
    check_product_status,
)
from core.storage.memory import MemStorage

logger = logging.getLogger("painel.bootstrap")


def run_bootstrap_checks(storage: MemStorage) -> None:
    logger.info("═══ Painel Bootstrap Self-Check Starting ═══")

    check_positive_ids(storage)
    check_id_counters(storage)
    check_product_status(storage)

    logger.info("═══ Painel Bootstrap Self-Check PASSED ═══")
