"""
Painel Reporting — Dashboard Aggregation
===========================================
Read-only figures for the admin dashboard, computed on demand
from the current store contents.

Derived from the store:
  - customer / product counts, pending orders, monthly revenue
  - products per category

Placeholder (core.reporting.samples, never read the store):
  - growth percentages, recent activity feed, sales and financial series
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List

from core.reporting.samples import (
    SAMPLE_ACTIVITY,
    SAMPLE_FINANCIAL_SERIES,
    SAMPLE_GROWTH,
    SAMPLE_SALES_SERIES,
    FinancialPoint,
    GrowthFigures,
    RecentActivity,
    SalesPoint,
)
from core.storage.models import OrderStatus
from core.storage.protocol import Storage

logger = logging.getLogger("painel.reporting")


# ══════════════════════════════════════════════════════════════
# DASHBOARD DATA MODELS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers. Everything but `growth` comes from the store."""
    total_customers: int
    total_products: int
    pending_orders: int
    monthly_revenue: Decimal
    growth: GrowthFigures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCustomers": self.total_customers,
            "totalProducts": self.total_products,
            "monthlyRevenue": float(self.monthly_revenue),
            "pendingOrders": self.pending_orders,
            "salesGrowth": self.growth.sales,
            "productsGrowth": self.growth.products,
            "revenueGrowth": self.growth.revenue,
        }


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "count": self.count}


# ══════════════════════════════════════════════════════════════
# DASHBOARD SERVICE (read-only aggregation)
# ══════════════════════════════════════════════════════════════

class DashboardService:
    """
    Read-only dashboard aggregation over a Storage.

    Each call takes a fresh snapshot of the collections it needs;
    nothing is cached and nothing is written back.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def get_dashboard_stats(self) -> DashboardStats:
        customers = self._storage.list_customers()
        products = self._storage.list_products()
        orders = self._storage.list_orders()

        pending = sum(1 for o in orders if o.status == OrderStatus.PENDING)
        revenue = sum(
            (Decimal(o.total) for o in orders if o.status == OrderStatus.COMPLETED),
            Decimal("0"),
        )

        stats = DashboardStats(
            total_customers=len(customers),
            total_products=len(products),
            pending_orders=pending,
            monthly_revenue=revenue,
            growth=SAMPLE_GROWTH,
        )
        logger.debug(
            "Dashboard stats: customers=%s products=%s pending=%s revenue=%s",
            stats.total_customers,
            stats.total_products,
            stats.pending_orders,
            stats.monthly_revenue,
        )
        return stats

    def get_category_data(self) -> List[CategoryCount]:
        """Products per category, in first-seen order."""
        counts: Dict[str, int] = {}
        for product in self._storage.list_products():
            counts[product.category] = counts.get(product.category, 0) + 1
        return [CategoryCount(category=c, count=n) for c, n in counts.items()]

    # ── Placeholder series ────────────────────────────────────

    def get_recent_activity(self) -> List[RecentActivity]:
        return list(SAMPLE_ACTIVITY)

    def get_sales_data(self) -> List[SalesPoint]:
        return list(SAMPLE_SALES_SERIES)

    def get_financial_data(self) -> List[FinancialPoint]:
        return list(SAMPLE_FINANCIAL_SERIES)
