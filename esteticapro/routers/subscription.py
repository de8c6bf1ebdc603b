"""Subscription endpoints.

- GET /api/subscription-price — live price, or the fallback price on failure
"""

from __future__ import annotations

from fastapi import APIRouter

from esteticapro.services.pricing import PriceQuoter


def create_subscription_router(*, price_quoter: PriceQuoter) -> APIRouter:
    """Factory that creates the subscription router with injected dependencies."""

    subscription_router = APIRouter(prefix="/api", tags=["subscription"])

    @subscription_router.get("/subscription-price")
    async def subscription_price() -> dict:
        """Always 200: ``{success: true, price}`` or ``{success: false, price: 10.0}``."""
        quote = await price_quoter.quote_response()
        return quote.model_dump()

    return subscription_router
