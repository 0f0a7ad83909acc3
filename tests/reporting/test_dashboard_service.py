"""
Tests — Dashboard Aggregation
=================================
Derived figures follow the store; placeholder figures never do.
"""

from __future__ import annotations

from decimal import Decimal

from core.reporting import (
    ActivityType,
    CategoryCount,
    DashboardService,
    FinancialPoint,
    SalesPoint,
)
from core.storage import (
    MemStorage,
    NewCustomer,
    NewOrder,
    NewProduct,
    OrderStatus,
)


def _setup(seed: bool = True):
    storage = MemStorage(seed=seed)
    return storage, DashboardService(storage)


def _product(category: str, stock: int = 20) -> NewProduct:
    return NewProduct(
        name=f"Item {category}", sku=f"SKU-{category}", category=category,
        price="10.00", stock=stock,
    )


class TestDashboardStats:
    def test_seeded_store(self):
        _, dash = _setup()
        stats = dash.get_dashboard_stats()
        assert stats.total_customers == 3
        assert stats.total_products == 4
        assert stats.pending_orders == 1
        assert stats.monthly_revenue == Decimal("567.89")

    def test_empty_store(self):
        _, dash = _setup(seed=False)
        stats = dash.get_dashboard_stats()
        assert stats.total_customers == 0
        assert stats.total_products == 0
        assert stats.pending_orders == 0
        assert stats.monthly_revenue == Decimal("0")

    def test_revenue_follows_completed_orders(self):
        storage, dash = _setup()
        storage.update_order_status(2, OrderStatus.COMPLETED)
        storage.create_order(NewOrder(
            customer_id=3, customer_name="Pedro Costa",
            total="0.11", date="2024-01-02", status=OrderStatus.COMPLETED,
        ))
        storage.create_order(NewOrder(
            customer_id=3, customer_name="Pedro Costa",
            total="999.99", date="2024-01-03", status=OrderStatus.CANCELLED,
        ))
        stats = dash.get_dashboard_stats()
        assert stats.monthly_revenue == Decimal("1802.50")
        assert stats.pending_orders == 0

    def test_counts_follow_mutations(self):
        storage, dash = _setup()
        storage.delete_customer(1)
        storage.create_product(_product("Games"))
        stats = dash.get_dashboard_stats()
        assert stats.total_customers == 2
        assert stats.total_products == 5

    def test_growth_is_placeholder(self):
        storage, dash = _setup()
        before = dash.get_dashboard_stats().growth
        storage.create_customer(NewCustomer(
            name="Ana Lima", email="ana@email.com",
            phone="(21) 91234-5678", city="Niterói",
        ))
        after = dash.get_dashboard_stats().growth
        assert before == after
        assert after.is_placeholder
        assert (after.sales, after.products, after.revenue) == (12, -2, 8)

    def test_wire_shape(self):
        _, dash = _setup()
        assert dash.get_dashboard_stats().to_dict() == {
            "totalCustomers": 3,
            "totalProducts": 4,
            "monthlyRevenue": 567.89,
            "pendingOrders": 1,
            "salesGrowth": 12,
            "productsGrowth": -2,
            "revenueGrowth": 8,
        }

    def test_read_only(self):
        storage, dash = _setup()
        before = (storage.list_customers(), storage.list_products(), storage.list_orders())
        dash.get_dashboard_stats()
        dash.get_category_data()
        after = (storage.list_customers(), storage.list_products(), storage.list_orders())
        assert before == after


class TestCategoryData:
    def test_seeded_categories(self):
        _, dash = _setup()
        pairs = {(c.category, c.count) for c in dash.get_category_data()}
        assert pairs == {("Eletrônicos", 2), ("Acessórios", 2)}

    def test_first_seen_order(self):
        storage, dash = _setup(seed=False)
        for category in ("Games", "Áudio", "Games"):
            storage.create_product(_product(category))
        assert dash.get_category_data() == [
            CategoryCount("Games", 2),
            CategoryCount("Áudio", 1),
        ]

    def test_empty(self):
        _, dash = _setup(seed=False)
        assert dash.get_category_data() == []

    def test_to_dict(self):
        assert CategoryCount("Games", 2).to_dict() == {"category": "Games", "count": 2}


class TestPlaceholderSeries:
    def test_recent_activity(self):
        _, dash = _setup()
        activity = dash.get_recent_activity()
        assert [a.id for a in activity] == ["1", "2", "3"]
        assert [a.type for a in activity] == [
            ActivityType.CUSTOMER, ActivityType.ORDER, ActivityType.PRODUCT,
        ]
        assert activity[2].to_dict()["icon"] == "alert-triangle"

    def test_activity_ignores_store(self):
        storage, dash = _setup()
        before = dash.get_recent_activity()
        storage.delete_product(2)
        assert dash.get_recent_activity() == before

    def test_sales_series(self):
        _, dash = _setup(seed=False)
        series = dash.get_sales_data()
        assert len(series) == 6
        assert series[0] == SalesPoint("Jan", 12000)
        assert series[-1].to_dict() == {"month": "Jun", "sales": 30000}

    def test_financial_series(self):
        _, dash = _setup(seed=False)
        series = dash.get_financial_data()
        assert [p.month for p in series] == ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun"]
        assert series[3] == FinancialPoint("Abr", 61000, 42000)

    def test_returned_lists_are_copies(self):
        _, dash = _setup()
        series = dash.get_sales_data()
        series.clear()
        assert len(dash.get_sales_data()) == 6
