"""Settings store client for application-wide switches.

Reads rows of the ``app_settings`` table through the Supabase REST API
(GET /rest/v1/app_settings?key=eq.<KEY>&select=value) using the service-role
key. Values are stored as strings.
"""

from __future__ import annotations

import logging

import httpx

from esteticapro.middleware.error_handler import SettingsStoreError

logger = logging.getLogger(__name__)

AUTO_RENEWAL_KEY = "ENABLE_AUTO_RENEWAL"


class SettingsStore:
    """HTTP client for the ``app_settings`` table.

    Parameters
    ----------
    supabase_url:
        Project URL.
    service_role_key:
        Server-side key, sent both as ``apikey`` and as bearer token.
    timeout_seconds:
        Transport timeout for the upstream call.
    """

    def __init__(
        self,
        supabase_url: str,
        service_role_key: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._table_url = f"{supabase_url.rstrip('/')}/rest/v1/app_settings"
        self._service_role_key = service_role_key
        self._timeout_seconds = timeout_seconds

    async def get_app_setting(self, key: str) -> str | None:
        """Return the stored value for *key*, or None when it is not set.

        Raises
        ------
        SettingsStoreError
            If the store is unreachable, answers with an error status or
            returns a body that is not a list of rows.
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self._table_url,
                    params={"key": f"eq.{key}", "select": "value"},
                    headers={
                        "apikey": self._service_role_key,
                        "Authorization": f"Bearer {self._service_role_key}",
                    },
                    timeout=self._timeout_seconds,
                )
            response.raise_for_status()
            rows = response.json()
        except httpx.HTTPStatusError as exc:
            self._log_failure(key, f"status {exc.response.status_code}")
            raise SettingsStoreError() from exc
        except (httpx.HTTPError, ValueError) as exc:
            self._log_failure(key, exc.__class__.__name__)
            raise SettingsStoreError() from exc

        if not isinstance(rows, list):
            self._log_failure(key, "reply is not a list of rows")
            raise SettingsStoreError()

        if not rows:
            logger.debug("Setting %s is not set", key)
            return None

        value = rows[0].get("value") if isinstance(rows[0], dict) else None
        return value or None

    async def is_auto_renewal_enabled(self) -> bool:
        value = await self.get_app_setting(AUTO_RENEWAL_KEY)
        return value == "true"

    @staticmethod
    def _log_failure(key: str, reason: str) -> None:
        logger.error(
            "Failed to read setting %s: %s",
            key,
            reason,
            extra={"upstream": "settings", "error_reason": reason},
        )
