"""Registry and factory for FX rate providers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List

from .base import BaseRateProvider

ProviderFactory = Callable[[Mapping[str, Any]], BaseRateProvider]

_PROVIDER_FACTORIES: Dict[str, ProviderFactory] = {}


def _default_factories() -> Iterable[tuple[str, ProviderFactory]]:
    from .exchangerate_provider import ExchangeRateHostProvider
    from .frankfurter_provider import FrankfurterProvider
    from .mock import MockRateProvider

    return [
        (MockRateProvider.name, lambda _config: MockRateProvider()),
        (ExchangeRateHostProvider.name, ExchangeRateHostProvider.from_config),
        (FrankfurterProvider.name, FrankfurterProvider.from_config),
    ]


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register a provider factory under the given name."""

    if not name:
        raise ValueError("Provider name cannot be empty.")
    _PROVIDER_FACTORIES[name.lower()] = factory


def list_providers() -> List[str]:
    """Return the registered provider identifiers."""

    return sorted(_PROVIDER_FACTORIES.keys())


def get_provider(name: str | None, config: Mapping[str, Any] | None = None) -> BaseRateProvider:
    """Instantiate the named provider from application settings.

    Raises:
        ValueError: If no provider is registered under ``name``.
    """

    provider_name = (name or "mock").lower()
    try:
        factory = _PROVIDER_FACTORIES[provider_name]
    except KeyError as exc:
        available = ", ".join(list_providers()) or "none registered"
        raise ValueError(
            f"Unknown provider '{provider_name}'. Available providers: {available}"
        ) from exc
    return factory(config or {})


def init_provider(app) -> BaseRateProvider:
    """Build the configured provider and attach it to the Flask app."""

    provider = get_provider(app.config.get("FX_RATE_PROVIDER"), app.config)
    app.extensions["rate_provider"] = provider
    return provider


def reset_registry(default_factories: Iterable[tuple[str, ProviderFactory]] | None = None) -> None:
    """Reset provider registry; useful for tests."""

    _PROVIDER_FACTORIES.clear()

    factories = default_factories or _default_factories()
    for name, factory in factories:
        register_provider(name, factory)


reset_registry()
