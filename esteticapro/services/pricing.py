"""Subscription price quoting with a static fallback.

The live price comes from the pricing provider as a decimal string. Any
failure, whether the provider raises or the string is not a usable price,
degrades to ``FALLBACK_PRICE``; callers never see the fault.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from esteticapro.middleware.error_handler import PriceParseError
from esteticapro.models.responses import PriceQuote
from esteticapro.models.result import Err, Ok, Result

logger = logging.getLogger(__name__)

FALLBACK_PRICE = 10.00


class PricingProvider(Protocol):
    async def get_dynamic_price(self) -> str: ...


def parse_price(raw: object) -> float:
    """Parse a decimal price string into a non-negative finite float.

    Raises
    ------
    PriceParseError
        If *raw* is not numeric, is NaN or infinite, or is negative.
    """
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise PriceParseError(f"Price {raw!r} is not numeric") from exc

    if not math.isfinite(value) or value < 0:
        raise PriceParseError(f"Price {raw!r} is out of range")
    return value


class PriceQuoter:
    """Quotes the subscription price, falling back to ``FALLBACK_PRICE``."""

    def __init__(
        self,
        provider: PricingProvider,
        fallback_price: float = FALLBACK_PRICE,
    ) -> None:
        self._provider = provider
        self.fallback_price = fallback_price

    async def quote(self) -> Result[float]:
        try:
            raw = await self._provider.get_dynamic_price()
            return Ok(parse_price(raw))
        except Exception as exc:
            logger.error(
                "Error getting subscription price: %s",
                exc,
                extra={"upstream": "pricing", "error_reason": str(exc)},
            )
            return Err(str(exc) or exc.__class__.__name__)

    async def quote_response(self) -> PriceQuote:
        return PriceQuote.from_result(await self.quote(), fallback=self.fallback_price)
