"""Middleware package — error hierarchy and request ID."""

from esteticapro.middleware.error_handler import (
    AuthProviderError,
    HubError,
    PriceParseError,
    PricingError,
    SettingsStoreError,
    UpstreamError,
    register_error_handlers,
)
from esteticapro.middleware.request_id import RequestIdMiddleware

__all__ = [
    "AuthProviderError",
    "HubError",
    "PriceParseError",
    "PricingError",
    "RequestIdMiddleware",
    "SettingsStoreError",
    "UpstreamError",
    "register_error_handlers",
]
