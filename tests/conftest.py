"""Shared test fixtures and hypothesis strategies for the hub test suite."""

from __future__ import annotations

import math
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from hypothesis import strategies as st

from esteticapro.config.settings import HubSettings
from esteticapro.main import create_app


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

TEST_SETTINGS_KWARGS = {
    "supabase_url": "https://project.supabase.co",
    "supabase_anon_key": "test-anon-key",
    "supabase_service_role_key": "test-service-role-key",
}


def make_settings(**overrides: object) -> HubSettings:
    """HubSettings with safe test values; usable outside fixtures."""
    return HubSettings(**{**TEST_SETTINGS_KWARGS, **overrides})


def make_collaborators() -> tuple[AsyncMock, AsyncMock, AsyncMock]:
    """Mock auth provider, flag source and pricing provider."""
    auth = AsyncMock()
    auth.sign_out.return_value = None

    flags = AsyncMock()
    flags.is_auto_renewal_enabled.return_value = False

    pricing = AsyncMock()
    pricing.get_dynamic_price.return_value = "10.00"

    return auth, flags, pricing


@pytest.fixture
def settings() -> HubSettings:
    return make_settings()


# ---------------------------------------------------------------------------
# Collaborator and app fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def collaborators() -> tuple[AsyncMock, AsyncMock, AsyncMock]:
    return make_collaborators()


@pytest.fixture
def auth_provider(collaborators) -> AsyncMock:
    return collaborators[0]


@pytest.fixture
def flag_source(collaborators) -> AsyncMock:
    return collaborators[1]


@pytest.fixture
def pricing_provider(collaborators) -> AsyncMock:
    return collaborators[2]


@pytest.fixture
def app(settings: HubSettings, collaborators) -> FastAPI:
    auth, flags, pricing = collaborators
    return create_app(
        settings,
        auth_provider=auth,
        flag_source=flags,
        pricing_provider=pricing,
    )


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------


def is_valid_price(text: str) -> bool:
    """Mirror of the accepted price grammar: non-negative finite float."""
    try:
        value = float(text.strip())
    except ValueError:
        return False
    return math.isfinite(value) and value >= 0


_price_values = st.floats(
    min_value=0, max_value=1e9, allow_nan=False, allow_infinity=False
)

# Decimal strings the pricing provider may return
price_strings = st.one_of(
    _price_values.map(lambda v: f"{v:.2f}"),
    _price_values.map(repr),
    st.integers(min_value=0, max_value=10**6).map(str),
)

# Strings that must take the fallback path
invalid_price_strings = st.one_of(
    st.sampled_from(["", "abc", "12.50abc", "nan", "inf", "-inf", "-1", "-0.01", "1,50", "$10"]),
    st.text(max_size=30).filter(lambda s: not is_valid_price(s)),
)

# Post identifiers reachable over HTTP: "." and ".." are collapsed by URL
# normalization
post_ids = st.text(max_size=200).filter(lambda s: s not in {".", ".."})
