"""
Painel Bootstrap — Wiring
============================
Builds the store and the dashboard service for one process.

The process entry point (BootstrapConfig.ready) owns the instances;
tests build their own isolated ones with build_storage().
"""

from __future__ import annotations

import logging
from typing import Optional

from core.bootstrap.self_check import run_bootstrap_checks
from core.config import StoreConfig
from core.reporting.dashboard import DashboardService
from core.storage.memory import MemStorage

logger = logging.getLogger("painel.bootstrap")


def build_storage(config: Optional[StoreConfig] = None) -> MemStorage:
    """Construct (and seed, if configured) a store, then self-check it."""
    config = config or StoreConfig()
    storage = MemStorage(config)
    run_bootstrap_checks(storage)
    logger.info(
        "Store ready (seeded=%s, low_stock_threshold=%s): %s",
        storage.seeded,
        storage.low_stock_threshold,
        storage.counts(),
    )
    return storage


def build_dashboard(storage: MemStorage) -> DashboardService:
    return DashboardService(storage)
