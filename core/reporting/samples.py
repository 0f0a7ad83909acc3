"""
Painel Reporting — Placeholder Content
=========================================
Fixed sample figures shown by the dashboard until real history
is tracked. Nothing here reads the store.

Kept apart from the derived figures in core.reporting.dashboard
so callers can tell the two kinds apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


# ══════════════════════════════════════════════════════════════
# PLACEHOLDER TYPES
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GrowthFigures:
    """Growth percentages. Placeholders, not computed from history."""
    sales: int
    products: int
    revenue: int

    is_placeholder = True


class ActivityType(Enum):
    CUSTOMER = "customer"
    ORDER = "order"
    PRODUCT = "product"


@dataclass(frozen=True)
class RecentActivity:
    id: str
    type: ActivityType
    message: str
    time: str
    icon: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "message": self.message,
            "time": self.time,
            "icon": self.icon,
            "color": self.color,
        }


@dataclass(frozen=True)
class SalesPoint:
    month: str
    sales: int

    def to_dict(self) -> Dict[str, Any]:
        return {"month": self.month, "sales": self.sales}


@dataclass(frozen=True)
class FinancialPoint:
    month: str
    revenue: int
    expenses: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "revenue": self.revenue,
            "expenses": self.expenses,
        }


# ══════════════════════════════════════════════════════════════
# SAMPLE DATA
# ══════════════════════════════════════════════════════════════

SAMPLE_GROWTH = GrowthFigures(sales=12, products=-2, revenue=8)

SAMPLE_ACTIVITY: Tuple[RecentActivity, ...] = (
    RecentActivity(
        id="1",
        type=ActivityType.CUSTOMER,
        message="Novo cliente cadastrado: Maria Santos",
        time="há 2 minutos",
        icon="user-plus",
        color="green",
    ),
    RecentActivity(
        id="2",
        type=ActivityType.ORDER,
        message="Venda realizada: Pedido #1234 - R$ 567,89",
        time="há 15 minutos",
        icon="shopping-cart",
        color="blue",
    ),
    RecentActivity(
        id="3",
        type=ActivityType.PRODUCT,
        message="Estoque baixo: Mouse Wireless - 5 unidades",
        time="há 1 hora",
        icon="alert-triangle",
        color="orange",
    ),
)

SAMPLE_SALES_SERIES: Tuple[SalesPoint, ...] = (
    SalesPoint("Jan", 12000),
    SalesPoint("Fev", 19000),
    SalesPoint("Mar", 15000),
    SalesPoint("Abr", 25000),
    SalesPoint("Mai", 22000),
    SalesPoint("Jun", 30000),
)

SAMPLE_FINANCIAL_SERIES: Tuple[FinancialPoint, ...] = (
    FinancialPoint("Jan", 45000, 32000),
    FinancialPoint("Fev", 52000, 38000),
    FinancialPoint("Mar", 48000, 35000),
    FinancialPoint("Abr", 61000, 42000),
    FinancialPoint("Mai", 55000, 39000),
    FinancialPoint("Jun", 67000, 45000),
)
