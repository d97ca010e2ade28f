"""Provider selection."""

from __future__ import annotations

from enum import Enum
from typing import Callable

import httpx

from unipay.client import PayPalClient
from unipay.config import Config, PayPalSettings
from unipay.registry import SessionRegistry, default_registry


class Provider(str, Enum):
    PAYPAL = "paypal"


def _paypal(
    config: Config, registry: SessionRegistry, http: httpx.Client | None
) -> PayPalClient:
    settings = config.paypal
    # Fail before anything is cached
    settings.require_credentials()

    def build(s: PayPalSettings) -> PayPalClient:
        return PayPalClient(s, http=http)

    return registry.get_or_create(settings, build)


_BUILDERS: dict[Provider, Callable[[Config, SessionRegistry, httpx.Client | None], PayPalClient]] = {
    Provider.PAYPAL: _paypal,
}


def new_client(
    provider: Provider | str,
    config: Config,
    *,
    registry: SessionRegistry | None = None,
    http: httpx.Client | None = None,
) -> PayPalClient:
    """Return the (cached) client for a provider.

    Raises:
        ValueError: Unknown provider.
        ConfigurationError: Required credentials are missing.
    """
    try:
        provider = Provider(provider)
    except ValueError:
        available = ", ".join(p.value for p in Provider)
        raise ValueError(f"Unknown provider '{provider}'. Available: {available}") from None

    if registry is None:
        registry = default_registry
    return _BUILDERS[provider](config, registry, http)
