"""PayPal client for the subscription price quote.

The live price is the fixed price of the REGULAR billing cycle of the
configured subscription plan:

1. POST /v1/oauth2/token (client credentials) for an access token
2. GET  /v1/billing/plans/{plan_id} with that token

The value is returned exactly as PayPal formats it (e.g. "10.00"); parsing is
left to the caller.

SECURITY: Never logs the client secret or access tokens.
"""

from __future__ import annotations

import logging

import httpx

from esteticapro.middleware.error_handler import PricingError

logger = logging.getLogger(__name__)

PAYPAL_BASE_URLS = {
    "production": "https://api.paypal.com",
    "sandbox": "https://api.sandbox.paypal.com",
}


class PayPalClient:
    """HTTP client for PayPal's OAuth2 and billing plan endpoints.

    Parameters
    ----------
    client_id, client_secret:
        REST app credentials. When either is missing every quote fails with
        ``PricingError``.
    plan_id:
        Billing plan whose price is quoted.
    environment:
        "sandbox" or "production"; selects the API base URL.
    timeout_seconds:
        Transport timeout for each upstream call.
    """

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        plan_id: str | None,
        environment: str = "sandbox",
        timeout_seconds: float = 10.0,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._plan_id = plan_id
        self._base_url = PAYPAL_BASE_URLS.get(environment, PAYPAL_BASE_URLS["sandbox"])
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_dynamic_price(self) -> str:
        """Return the current subscription price as a decimal string.

        Raises
        ------
        PricingError
            If credentials or the plan id are not configured, PayPal is
            unreachable or answers with an error, or the plan carries no
            regular fixed price.
        """
        if not (self._client_id and self._client_secret and self._plan_id):
            raise PricingError("PayPal credentials or plan id not configured")

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, timeout=self._timeout_seconds
            ) as client:
                token = await self._get_access_token(client)
                response = await client.get(
                    f"/v1/billing/plans/{self._plan_id}",
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
                plan = response.json()
        except httpx.HTTPStatusError as exc:
            raise PricingError(
                f"PayPal returned status {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise PricingError(
                f"PayPal unreachable: {exc.__class__.__name__}"
            ) from exc

        return _regular_price(plan)

    async def _get_access_token(self, client: httpx.AsyncClient) -> str:
        response = await client.post(
            "/v1/oauth2/token",
            auth=(self._client_id or "", self._client_secret or ""),
            data={"grant_type": "client_credentials"},
        )
        response.raise_for_status()
        token = response.json().get("access_token")
        if not token:
            raise PricingError("PayPal token response carried no access_token")
        return token


def _regular_price(plan: object) -> str:
    """Extract the REGULAR cycle's fixed price value from a plan document."""
    if not isinstance(plan, dict):
        raise PricingError("Unexpected PayPal plan document")

    for cycle in plan.get("billing_cycles") or []:
        if cycle.get("tenure_type") != "REGULAR":
            continue
        fixed_price = (cycle.get("pricing_scheme") or {}).get("fixed_price") or {}
        value = fixed_price.get("value")
        if value is not None:
            return str(value)

    raise PricingError("PayPal plan has no regular fixed price")
