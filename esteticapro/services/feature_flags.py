"""Feature flag lookups backed by the settings store."""

from __future__ import annotations

from typing import Protocol

from esteticapro.models.responses import AutoRenewalConfig


class FlagSource(Protocol):
    async def is_auto_renewal_enabled(self) -> bool: ...


class FeatureFlagReader:
    """Reads public feature flags.

    Store faults are not handled here; they propagate to the application's
    exception handlers.
    """

    def __init__(self, source: FlagSource) -> None:
        self._source = source

    async def auto_renewal(self) -> AutoRenewalConfig:
        enabled = await self._source.is_auto_renewal_enabled()
        return AutoRenewalConfig(auto_renewal=bool(enabled))
