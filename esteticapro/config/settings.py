"""Pydantic Settings for the hub service.

All environment variables use the ESTETICAPRO_ prefix.
Example: ESTETICAPRO_PORT=8000, ESTETICAPRO_SUPABASE_URL=https://xyz.supabase.co
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent


class HubSettings(BaseSettings):
    """Hub service configuration validated from environment variables."""

    # Service
    port: int = 8000
    log_level: str = "INFO"

    # Supabase (auth provider + settings store)
    supabase_url: str  # e.g. "https://spasxtbjvsdlbhgaqivw.supabase.co"
    supabase_anon_key: str  # Public key used for GoTrue calls
    supabase_service_role_key: str  # Server-side key for app_settings reads

    # PayPal (pricing provider)
    paypal_environment: Literal["sandbox", "production"] = "sandbox"
    paypal_client_id: str | None = None
    paypal_client_secret: str | None = None
    paypal_plan_id: str | None = None  # Subscription plan carrying the price

    # Upstream calls
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # Session cookies cleared on logout
    session_cookie_name: str = "sb-access-token"
    refresh_cookie_name: str = "sb-refresh-token"

    # Remote image allow-list
    image_hosts_path: str = str(_PACKAGE_DIR / "image_hosts.yaml")

    model_config = {"env_prefix": "ESTETICAPRO_"}
