"""
Shared test fixtures for the ALFA paper trading backend tests.

Provides reusable fixtures for:
- Test settings (fixed JWT secret, rate limiting off)
- Fresh service bundles (price table, ledger, order log, processor)
- FastAPI test client backed by its own service bundle
- Token helpers
"""

import random

import pytest
from starlette.testclient import TestClient

from alfa_trading.auth.identity import create_access_token
from alfa_trading.config import Settings
from alfa_trading.dependencies import build_services
from alfa_trading.main import create_app
from alfa_trading.services import InMemoryBalanceStore, OrderLog, OrderProcessor, PriceTable

TEST_SECRET = "test-secret-key-for-unit-tests"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings():
    return Settings(
        jwt_secret_key=TEST_SECRET,
        jwt_algorithm="HS256",
        rate_limit_enabled=False,
        default_balance=100000.0,
        currency="INR",
        guest_user_id="demo",
        _env_file=None,
    )


# ---------------------------------------------------------------------------
# Service fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def price_table():
    return PriceTable()


@pytest.fixture
def ledger():
    return InMemoryBalanceStore(default_balance=100000.0)


@pytest.fixture
def order_log():
    return OrderLog()


@pytest.fixture
def processor(price_table, ledger, order_log):
    return OrderProcessor(price_table, ledger, order_log)


@pytest.fixture
def services(test_settings):
    return build_services(test_settings, rng=random.Random(42))


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------


@pytest.fixture
def app(test_settings, services):
    return create_app(test_settings, services=services)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(test_settings):
    """Build an Authorization header for a user id."""
    def _make(user_id: str) -> dict:
        token = create_access_token(user_id, app_settings=test_settings)
        return {"Authorization": f"Bearer {token}"}
    return _make
