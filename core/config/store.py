"""
Painel Core Config — Store Settings
======================================
Settings for the in-memory store, read from the Django settings
module (DASHBOARD_STORE dict) at bootstrap.

Keys are upper-case; missing keys fall back to defaults,
unknown keys are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

LOW_STOCK_THRESHOLD = 10

SETTINGS_KEY = "DASHBOARD_STORE"

_KEY_TO_FIELD = {
    "SEED_SAMPLE_DATA": "seed_sample_data",
    "LOW_STOCK_THRESHOLD": "low_stock_threshold",
}


@dataclass(frozen=True)
class StoreConfig:
    """
    seed_sample_data: load the fixed sample rows at construction.
    low_stock_threshold: highest stock still reported as low_stock.
    """

    seed_sample_data: bool = True
    low_stock_threshold: int = LOW_STOCK_THRESHOLD

    def __post_init__(self) -> None:
        if not isinstance(self.seed_sample_data, bool):
            raise ValueError(
                f"seed_sample_data must be bool, got {self.seed_sample_data!r}."
            )
        if (
            isinstance(self.low_stock_threshold, bool)
            or not isinstance(self.low_stock_threshold, int)
            or self.low_stock_threshold < 0
        ):
            raise ValueError(
                "low_stock_threshold must be a non-negative int, "
                f"got {self.low_stock_threshold!r}."
            )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "StoreConfig":
        mapping = mapping or {}
        unknown = sorted(set(mapping) - set(_KEY_TO_FIELD))
        if unknown:
            raise ValueError(f"Unknown {SETTINGS_KEY} keys: {', '.join(unknown)}.")
        return cls(**{_KEY_TO_FIELD[key]: value for key, value in mapping.items()})


def load_store_config() -> StoreConfig:
    """Build the StoreConfig from django.conf.settings."""
    from django.conf import settings

    return StoreConfig.from_mapping(getattr(settings, SETTINGS_KEY, None))
