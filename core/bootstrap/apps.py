"""
Painel Bootstrap — App Configuration
=======================================
Builds the process-wide store when Django finishes loading.

Rules:
- Runs once via ready()
- Store settings come from settings.DASHBOARD_STORE
- If self-check fails → SystemBootstrapError prevents startup
- Callers reach the store through get_storage(), never a module global
"""

from django.apps import AppConfig, apps

APP_LABEL = "bootstrap"


class BootstrapConfig(AppConfig):
    name = "core.bootstrap"
    label = APP_LABEL
    verbose_name = "Painel Bootstrap"

    storage = None
    dashboard = None

    def ready(self):
        from core.bootstrap.wiring import build_dashboard, build_storage
        from core.config import load_store_config

        config = load_store_config()
        self.storage = build_storage(config)
        self.dashboard = build_dashboard(self.storage)


def _app_config() -> BootstrapConfig:
    config = apps.get_app_config(APP_LABEL)
    if config.storage is None:
        raise RuntimeError(
            "Painel store is not built yet. Call django.setup() first."
        )
    return config


def get_storage():
    return _app_config().storage


def get_dashboard():
    return _app_config().dashboard
