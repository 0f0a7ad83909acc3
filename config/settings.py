"""
Painel – Django Settings
===========================
Django is the framework container: it loads the bootstrap app,
which builds the in-memory store, and configures logging.

There is no database. All data lives in memory for the
lifetime of the process.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("PAINEL_SECRET_KEY", "painel-dev-key-replace-before-deployment")

DEBUG = os.environ.get("PAINEL_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "core.bootstrap",
]

# ── Database ──────────────────────────────────────────────────
# None. Storage is in-memory (core.storage.MemStorage).
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

# ── Store ─────────────────────────────────────────────────────
DASHBOARD_STORE = {
    "SEED_SAMPLE_DATA": os.environ.get("PAINEL_SEED_SAMPLE_DATA", "1") == "1",
    "LOW_STOCK_THRESHOLD": 10,
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "painel": {
            "handlers": ["console"],
            "level": os.environ.get("PAINEL_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
