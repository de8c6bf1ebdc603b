"""HTTP routers, each built by a factory that receives its collaborators."""

from esteticapro.routers.auth import create_auth_router
from esteticapro.routers.health import create_health_router
from esteticapro.routers.pages import create_pages_router
from esteticapro.routers.paypal import create_paypal_router
from esteticapro.routers.subscription import create_subscription_router

__all__ = [
    "create_auth_router",
    "create_health_router",
    "create_pages_router",
    "create_paypal_router",
    "create_subscription_router",
]
