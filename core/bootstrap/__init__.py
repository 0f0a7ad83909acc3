"""
Painel Bootstrap — Store Lifecycle
=====================================
Builds, self-checks and hands out the process store.
"""

from core.bootstrap.apps import get_dashboard, get_storage
from core.bootstrap.errors import SystemBootstrapError
from core.bootstrap.self_check import run_bootstrap_checks
from core.bootstrap.wiring import build_dashboard, build_storage

__all__ = [
    "SystemBootstrapError",
    "run_bootstrap_checks",
    "build_storage",
    "build_dashboard",
    "get_storage",
    "get_dashboard",
]
