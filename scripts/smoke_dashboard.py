"""
Manual smoke runner for the in-memory dashboard store.

Usage:
    python scripts/smoke_dashboard.py
    python scripts/smoke_dashboard.py --no-seed --threshold 5
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def _print_case(label: str, payload) -> None:
    print(f"\n[{label}]")
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def run(seed: bool, threshold: int) -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

    import django
    from django.conf import settings

    settings.DASHBOARD_STORE = {
        "SEED_SAMPLE_DATA": seed,
        "LOW_STOCK_THRESHOLD": threshold,
    }
    django.setup()

    from core.bootstrap import get_dashboard, get_storage
    from core.storage import NewProduct, OrderStatus, ProductUpdate

    storage = get_storage()
    dashboard = get_dashboard()

    product = storage.create_product(NewProduct(
        name="Cadeira Gamer", sku="CG-001", category="Móveis",
        price="1299.00", stock=0,
    ))
    _print_case("create product", product.to_dict())

    product = storage.update_product(product.id, ProductUpdate(stock=50))
    _print_case("restock product", product.to_dict())

    if storage.get_order(2) is not None:
        order = storage.update_order_status(2, OrderStatus.COMPLETED)
        _print_case("complete order 2", order.to_dict())

    _print_case("dashboard stats", dashboard.get_dashboard_stats().to_dict())
    _print_case("categories", [c.to_dict() for c in dashboard.get_category_data()])
    _print_case("recent activity", [a.to_dict() for a in dashboard.get_recent_activity()])
    _print_case("sales", [p.to_dict() for p in dashboard.get_sales_data()])
    _print_case("financial", [p.to_dict() for p in dashboard.get_financial_data()])


def main() -> None:
    parser = argparse.ArgumentParser(description="Painel store smoke run")
    parser.add_argument("--no-seed", action="store_true", help="start with an empty store")
    parser.add_argument("--threshold", type=int, default=10, help="low stock threshold")
    args = parser.parse_args()
    run(seed=not args.no_seed, threshold=args.threshold)


if __name__ == "__main__":
    main()
