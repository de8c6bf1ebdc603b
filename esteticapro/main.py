"""FastAPI application entry point with lifespan management.

Startup: configure JSON logging, load the remote image allow-list.
Collaborator clients (auth provider, settings store, PayPal) are built once in
``create_app`` and handed to the router factories; tests pass their own.

Run with ``uvicorn esteticapro.main:create_app --factory`` or the
``esteticapro-hub`` console script.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from esteticapro import __version__
from esteticapro.config.image_hosts import img_src_policy, load_remote_patterns
from esteticapro.config.settings import HubSettings
from esteticapro.integration.auth_client import SupabaseAuthClient
from esteticapro.integration.paypal import PayPalClient
from esteticapro.integration.settings_store import SettingsStore
from esteticapro.logging_config import configure_logging
from esteticapro.middleware.error_handler import register_error_handlers
from esteticapro.middleware.request_id import RequestIdMiddleware
from esteticapro.routers.auth import create_auth_router
from esteticapro.routers.health import create_health_router
from esteticapro.routers.pages import create_pages_router
from esteticapro.routers.paypal import create_paypal_router
from esteticapro.routers.subscription import create_subscription_router
from esteticapro.services.feature_flags import FeatureFlagReader, FlagSource
from esteticapro.services.pricing import PriceQuoter, PricingProvider
from esteticapro.services.session import AuthProvider, SessionTerminator

logger = logging.getLogger(__name__)


def _lifespan(settings: HubSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown logging."""
        configure_logging(settings.log_level)
        logger.info("Starting hub service on port %d", settings.port)

        yield

        logger.info("Hub service shut down")

    return lifespan


def create_app(
    settings: HubSettings | None = None,
    *,
    auth_provider: AuthProvider | None = None,
    flag_source: FlagSource | None = None,
    pricing_provider: PricingProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads ``HubSettings`` eagerly so that a missing Supabase environment
    variable causes an immediate startup failure rather than a fault on the
    first request.
    """
    settings = settings or HubSettings()  # type: ignore[call-arg]
    timeout = settings.upstream_timeout_seconds

    if auth_provider is None:
        auth_provider = SupabaseAuthClient(
            supabase_url=settings.supabase_url,
            anon_key=settings.supabase_anon_key,
            timeout_seconds=timeout,
        )
    if flag_source is None:
        flag_source = SettingsStore(
            supabase_url=settings.supabase_url,
            service_role_key=settings.supabase_service_role_key,
            timeout_seconds=timeout,
        )
    if pricing_provider is None:
        pricing_provider = PayPalClient(
            client_id=settings.paypal_client_id,
            client_secret=settings.paypal_client_secret,
            plan_id=settings.paypal_plan_id,
            environment=settings.paypal_environment,
            timeout_seconds=timeout,
        )

    remote_patterns = load_remote_patterns(settings.image_hosts_path)

    app = FastAPI(
        title="EsteticaPro Hub API",
        version=__version__,
        lifespan=_lifespan(settings),
    )

    # Register error handlers
    register_error_handlers(app)

    app.add_middleware(RequestIdMiddleware)

    # Mount routers
    app.include_router(
        create_health_router(
            pricing_configured=bool(
                settings.paypal_client_id
                and settings.paypal_client_secret
                and settings.paypal_plan_id
            ),
        )
    )
    app.include_router(
        create_auth_router(
            session_terminator=SessionTerminator(auth_provider),
            session_cookie_name=settings.session_cookie_name,
            refresh_cookie_name=settings.refresh_cookie_name,
        )
    )
    app.include_router(
        create_paypal_router(flag_reader=FeatureFlagReader(flag_source))
    )
    app.include_router(
        create_subscription_router(price_quoter=PriceQuoter(pricing_provider))
    )
    app.include_router(create_pages_router(img_src=img_src_policy(remote_patterns)))

    app.state.settings = settings

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = HubSettings()  # type: ignore[call-arg]
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
