"""Service layer: one class per handler, collaborators injected."""

from esteticapro.services.feature_flags import FeatureFlagReader
from esteticapro.services.pricing import FALLBACK_PRICE, PriceQuoter, parse_price
from esteticapro.services.session import SessionTerminator

__all__ = [
    "FALLBACK_PRICE",
    "FeatureFlagReader",
    "PriceQuoter",
    "SessionTerminator",
    "parse_price",
]
