"""Unit tests for the Supabase auth client."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from esteticapro.integration.auth_client import SupabaseAuthClient
from esteticapro.middleware.error_handler import AuthProviderError

_LOGOUT_URL = "https://project.supabase.co/auth/v1/logout"


@pytest.fixture
def client() -> SupabaseAuthClient:
    return SupabaseAuthClient(
        supabase_url="https://project.supabase.co/",
        anon_key="test-anon-key",
        timeout_seconds=3.0,
    )


def _response(status: int) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("POST", _LOGOUT_URL))


class TestSignOut:
    @pytest.mark.asyncio
    async def test_posts_token_to_logout_endpoint(self, client: SupabaseAuthClient) -> None:
        with patch(
            "httpx.AsyncClient.post", new_callable=AsyncMock, return_value=_response(204)
        ) as mock_post:
            await client.sign_out("access-123")

        mock_post.assert_awaited_once()
        args, kwargs = mock_post.call_args
        assert args[0] == _LOGOUT_URL
        assert kwargs["headers"]["Authorization"] == "Bearer access-123"
        assert kwargs["headers"]["apikey"] == "test-anon-key"
        assert kwargs["timeout"] == 3.0

    @pytest.mark.asyncio
    async def test_no_token_is_noop(self, client: SupabaseAuthClient) -> None:
        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            await client.sign_out(None)
            await client.sign_out("")

        mock_post.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403, 404])
    async def test_already_ended_session_is_success(
        self, client: SupabaseAuthClient, status: int
    ) -> None:
        with patch(
            "httpx.AsyncClient.post", new_callable=AsyncMock, return_value=_response(status)
        ):
            await client.sign_out("stale-token")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 500, 503])
    async def test_error_status_raises(self, client: SupabaseAuthClient, status: int) -> None:
        with patch(
            "httpx.AsyncClient.post", new_callable=AsyncMock, return_value=_response(status)
        ):
            with pytest.raises(AuthProviderError, match=str(status)):
                await client.sign_out("access-123")

    @pytest.mark.asyncio
    async def test_unreachable_provider_raises(self, client: SupabaseAuthClient) -> None:
        with patch(
            "httpx.AsyncClient.post",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("connection refused"),
        ):
            with pytest.raises(AuthProviderError, match="ConnectError"):
                await client.sign_out("access-123")

    @pytest.mark.asyncio
    async def test_timeout_raises(self, client: SupabaseAuthClient) -> None:
        with patch(
            "httpx.AsyncClient.post",
            new_callable=AsyncMock,
            side_effect=httpx.ReadTimeout("slow"),
        ):
            with pytest.raises(AuthProviderError):
                await client.sign_out("access-123")
