"""
Tests — Store Settings
==========================
"""

from __future__ import annotations

import pytest
from django.test import override_settings

from core.config import StoreConfig, load_store_config


class TestStoreConfig:
    def test_defaults(self):
        config = StoreConfig()
        assert config.seed_sample_data is True
        assert config.low_stock_threshold == 10

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError, match="low_stock_threshold"):
            StoreConfig(low_stock_threshold=-1)

    def test_bool_threshold_rejected(self):
        with pytest.raises(ValueError, match="low_stock_threshold"):
            StoreConfig(low_stock_threshold=True)

    def test_non_bool_seed_flag_rejected(self):
        with pytest.raises(ValueError, match="seed_sample_data"):
            StoreConfig(seed_sample_data="yes")


class TestFromMapping:
    def test_empty_mapping_gives_defaults(self):
        assert StoreConfig.from_mapping({}) == StoreConfig()
        assert StoreConfig.from_mapping(None) == StoreConfig()

    def test_reads_upper_case_keys(self):
        config = StoreConfig.from_mapping(
            {"SEED_SAMPLE_DATA": False, "LOW_STOCK_THRESHOLD": 3}
        )
        assert config == StoreConfig(seed_sample_data=False, low_stock_threshold=3)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="LOW_STOCK"):
            StoreConfig.from_mapping({"LOW_STOCK": 3})


class TestLoadFromDjangoSettings:
    def test_project_settings(self):
        config = load_store_config()
        assert config.low_stock_threshold == 10

    def test_overridden_settings(self):
        with override_settings(DASHBOARD_STORE={"LOW_STOCK_THRESHOLD": 7}):
            assert load_store_config().low_stock_threshold == 7

    def test_missing_setting_gives_defaults(self):
        with override_settings():
            from django.conf import settings

            del settings.DASHBOARD_STORE
            assert load_store_config() == StoreConfig()
