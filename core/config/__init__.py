"""
Painel Core Config — Public API
==================================
Store settings sourced from the Django settings module.
"""

from core.config.store import SETTINGS_KEY, StoreConfig, load_store_config

__all__ = [
    "SETTINGS_KEY",
    "StoreConfig",
    "load_store_config",
]
