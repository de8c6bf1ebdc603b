"""Auth client for ending a user session with the Supabase auth provider.

Calls POST {supabase_url}/auth/v1/logout with the caller's access token. The
provider revokes the session's refresh tokens; an already-expired or unknown
session (401/404) means there is nothing left to revoke and counts as done.

SECURITY: Never logs access tokens or API keys.
"""

from __future__ import annotations

import logging

import httpx

from esteticapro.middleware.error_handler import AuthProviderError

logger = logging.getLogger(__name__)

# Replies that mean the session is already gone
_ALREADY_SIGNED_OUT = {401, 403, 404}


class SupabaseAuthClient:
    """HTTP client for the Supabase GoTrue sign-out endpoint.

    Parameters
    ----------
    supabase_url:
        Project URL (e.g. "https://spasxtbjvsdlbhgaqivw.supabase.co").
    anon_key:
        Public API key sent as the ``apikey`` header.
    timeout_seconds:
        Transport timeout for the upstream call.
    """

    def __init__(
        self,
        supabase_url: str,
        anon_key: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._logout_url = f"{supabase_url.rstrip('/')}/auth/v1/logout"
        self._anon_key = anon_key
        self._timeout_seconds = timeout_seconds

    async def sign_out(self, access_token: str | None) -> None:
        """Revoke the session identified by *access_token*.

        A missing token means the caller holds no session; nothing is sent.

        Raises
        ------
        AuthProviderError
            If the provider is unreachable or answers with an unexpected
            error status.
        """
        if not access_token:
            logger.debug("Sign-out without a session token, nothing to revoke")
            return

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._logout_url,
                    headers={
                        "apikey": self._anon_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                    timeout=self._timeout_seconds,
                )
        except httpx.HTTPError as exc:
            raise AuthProviderError(
                f"Auth provider unreachable: {exc.__class__.__name__}"
            ) from exc

        if response.status_code in _ALREADY_SIGNED_OUT:
            logger.info(
                "Session already ended upstream (status %d)",
                response.status_code,
                extra={"upstream": "auth"},
            )
            return

        if response.is_error:
            raise AuthProviderError(
                f"Auth provider returned status {response.status_code}"
            )
