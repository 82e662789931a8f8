"""
Tests for environment-backed pricing defaults (config.py).

Tests:
1. default_pricing_settings mirrors the loaded settings
2. COSTING_-prefixed environment variables override the defaults
"""

from jewelry_costing.config import Settings, default_pricing_settings, settings


def test_default_pricing_settings_follow_environment_settings():
    pricing = default_pricing_settings()
    assert pricing.metal_unit_price == settings.DEFAULT_METAL_UNIT_PRICE
    assert pricing.loss_percentage == settings.DEFAULT_LOSS_PERCENTAGE


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("COSTING_DEFAULT_METAL_UNIT_PRICE", "1.05")
    monkeypatch.setenv("COSTING_DEFAULT_LOSS_PERCENTAGE", "8")
    fresh = Settings()
    assert fresh.DEFAULT_METAL_UNIT_PRICE == 1.05
    assert fresh.DEFAULT_LOSS_PERCENTAGE == 8.0
