"""Clients for the external collaborators: auth provider, settings store, PayPal."""

from esteticapro.integration.auth_client import SupabaseAuthClient
from esteticapro.integration.paypal import PayPalClient
from esteticapro.integration.settings_store import SettingsStore

__all__ = [
    "PayPalClient",
    "SettingsStore",
    "SupabaseAuthClient",
]
