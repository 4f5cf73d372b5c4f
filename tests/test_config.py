from __future__ import annotations

import pytest

import config


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert config.get_config() is config.DevelopmentConfig


def test_get_config_rejects_unknown_env():
    with pytest.raises(KeyError, match="staging"):
        config.get_config("staging")


def test_provider_aliases_are_normalized(monkeypatch):
    monkeypatch.setattr(config.ProductionConfig, "FX_RATE_PROVIDER", "ECB")

    assert config.get_config("production").FX_RATE_PROVIDER == "frankfurter"


def test_unsupported_provider_is_rejected(monkeypatch):
    monkeypatch.setattr(config.ProductionConfig, "FX_RATE_PROVIDER", "bloomberg")

    with pytest.raises(ValueError, match="Unsupported FX_RATE_PROVIDER"):
        config.get_config("production")
