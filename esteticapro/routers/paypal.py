"""PayPal configuration endpoints.

- GET /api/paypal/config — public payment switches (auto-renewal)
"""

from __future__ import annotations

from fastapi import APIRouter

from esteticapro.services.feature_flags import FeatureFlagReader


def create_paypal_router(*, flag_reader: FeatureFlagReader) -> APIRouter:
    """Factory that creates the PayPal config router with injected dependencies."""

    paypal_router = APIRouter(prefix="/api/paypal", tags=["paypal"])

    @paypal_router.get("/config")
    async def config() -> dict:
        """Return ``{autoRenewal: bool}``. Store faults propagate."""
        flags = await flag_reader.auto_renewal()
        return flags.model_dump(by_alias=True)

    return paypal_router
