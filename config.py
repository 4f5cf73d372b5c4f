"""Application configuration classes."""

from __future__ import annotations

import os
from pathlib import Path

SUPPORTED_RATE_PROVIDERS = {"exchange", "exchangerate_host", "frankfurter", "ecb", "mock"}
PROVIDER_ALIASES = {"exchangerate_host": "exchange", "ecb": "frankfurter"}

DEFAULT_SNAPSHOT_PATH = Path(__file__).resolve().parent / "data" / "rates.csv"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "fx-rate-board"
    SECRET_KEY = _get_env("SECRET_KEY", "change-me")
    REQUEST_TIMEOUT_SECONDS = float(_get_env("REQUEST_TIMEOUT_SECONDS", "5"))
    FX_RATE_PROVIDER = _get_env("FX_RATE_PROVIDER", "frankfurter")
    RATES_API_BASE_URL = _get_env("RATES_API_BASE_URL", "https://api.exchangerate.host")
    FRANKFURTER_API_BASE_URL = _get_env("FRANKFURTER_API_BASE_URL", "https://api.frankfurter.app")
    LIVE_RATES_BASE = _get_env("LIVE_RATES_BASE", "USD")
    LIVE_RATES_SYMBOLS = _get_env("LIVE_RATES_SYMBOLS", "JPY,EUR,GBP,AUD,CAD,CHF,CNY")
    HISTORY_TARGET_CURRENCIES = _get_env("HISTORY_TARGET_CURRENCIES", "USD,EUR,GBP,AUD")
    HISTORY_WINDOW_DAYS = int(_get_env("HISTORY_WINDOW_DAYS", "5"))
    HISTORY_MAX_DAYS = int(_get_env("HISTORY_MAX_DAYS", "31"))
    HISTORY_MAX_WORKERS = int(_get_env("HISTORY_MAX_WORKERS", "4"))
    SNAPSHOT_PATH = _get_env("SNAPSHOT_PATH", str(DEFAULT_SNAPSHOT_PATH))
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "false").lower() == "true"
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")
    TIMING_LOGS_ENABLED = _get_env("TIMING_LOGS_ENABLED", "false").lower() == "true"
    TIMING_MIN_DURATION_MS = float(_get_env("TIMING_MIN_DURATION_MS", "2000"))
    CORS_ALLOWED_ORIGINS = _get_env("CORS_ALLOWED_ORIGINS", "http://localhost:5173")
    CORS_ALLOWED_HEADERS = _get_env("CORS_ALLOWED_HEADERS", "Content-Type,X-Request-ID")
    CORS_ALLOWED_METHODS = _get_env("CORS_ALLOWED_METHODS", "GET,OPTIONS")
    CORS_MAX_AGE = int(_get_env("CORS_MAX_AGE", "600"))


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False


class TestingConfig(BaseConfig):
    """Offline configuration used by the test suite."""

    DEBUG = False
    TESTING = True
    FX_RATE_PROVIDER = "mock"
    HISTORY_MAX_WORKERS = 1
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
        ValueError: If the configured rate provider is not supported.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    _validate_provider(config_cls)
    return config_cls


def _validate_provider(config_cls: type[BaseConfig]) -> None:
    normalized = _normalize_provider(config_cls.FX_RATE_PROVIDER)
    if normalized not in SUPPORTED_RATE_PROVIDERS:
        raise ValueError(
            f"Unsupported FX_RATE_PROVIDER '{config_cls.FX_RATE_PROVIDER}'. "
            f"Allowed values: {sorted(SUPPORTED_RATE_PROVIDERS)}"
        )
    config_cls.FX_RATE_PROVIDER = normalized


def _normalize_provider(value: str | None) -> str:
    if not value:
        return ""
    normalized = value.strip().lower()
    return PROVIDER_ALIASES.get(normalized, normalized)
