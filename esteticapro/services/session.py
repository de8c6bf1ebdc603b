"""Session termination (logout)."""

from __future__ import annotations

import logging
from typing import Protocol

from esteticapro.middleware.error_handler import INTERNAL_ERROR_MESSAGE
from esteticapro.models.responses import SuccessFlag
from esteticapro.models.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class AuthProvider(Protocol):
    async def sign_out(self, access_token: str | None) -> None: ...


class SessionTerminator:
    """Ends the caller's session through the auth provider.

    Sign-out is atomic: either the provider call completes and the result is
    ``Ok(SuccessFlag)``, or any exception is logged and turned into
    ``Err("Internal server error")``.
    """

    def __init__(self, auth_provider: AuthProvider) -> None:
        self._auth_provider = auth_provider

    async def terminate(self, access_token: str | None) -> Result[SuccessFlag]:
        try:
            await self._auth_provider.sign_out(access_token)
        except Exception as exc:
            logger.exception(
                "Sign-out failed",
                extra={"upstream": "auth", "error_reason": str(exc)},
            )
            return Err(INTERNAL_ERROR_MESSAGE)

        return Ok(SuccessFlag(success=True))
