"""
Painel Reporting — Public API
================================
Dashboard figures: store-derived stats plus fixed sample series.
"""

from core.reporting.dashboard import CategoryCount, DashboardService, DashboardStats
from core.reporting.samples import (
    ActivityType,
    FinancialPoint,
    GrowthFigures,
    RecentActivity,
    SalesPoint,
)

__all__ = [
    "DashboardService",
    "DashboardStats",
    "CategoryCount",
    "GrowthFigures",
    "ActivityType",
    "RecentActivity",
    "SalesPoint",
    "FinancialPoint",
]
