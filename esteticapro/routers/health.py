"""Liveness endpoint.

- GET /health — service status plus which collaborators are configured

Collaborators are not called; the probe stays cheap and never fails on an
upstream outage.
"""

from __future__ import annotations

from fastapi import APIRouter

from esteticapro import __version__
from esteticapro.models.responses import DataEnvelope


def create_health_router(*, pricing_configured: bool = False) -> APIRouter:
    """Factory that creates the health router with injected dependencies."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        """Service health check."""
        return DataEnvelope(
            data={
                "status": "healthy",
                "version": __version__,
                "pricing": "live" if pricing_configured else "fallback",
            },
        ).model_dump()

    return health_router
