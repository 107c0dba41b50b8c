"""
Tests for RateLimitMiddleware in alfa_trading/middleware/rate_limit.py.

Uses a minimal FastAPI app and a controllable clock.
"""

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from alfa_trading.config import Settings
from alfa_trading.main import create_app
from alfa_trading.middleware import RateLimitMiddleware


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limited_client(clock):
    test_app = FastAPI()
    test_app.add_middleware(RateLimitMiddleware, max_requests=3, window_seconds=60, clock=clock)

    @test_app.get("/ok")
    async def ok_endpoint():
        return {"status": "ok"}

    return TestClient(test_app)


class TestRateLimitMiddleware:
    def test_allows_up_to_limit(self, limited_client):
        for _ in range(3):
            assert limited_client.get("/ok").status_code == 200

    def test_blocks_over_limit(self, limited_client):
        for _ in range(3):
            limited_client.get("/ok")
        response = limited_client.get("/ok")
        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "error": "Too many requests, please try again later.",
        }
        assert response.headers["retry-after"] == "60"

    def test_window_slides(self, limited_client, clock):
        """Edge case: requests older than the window no longer count."""
        for _ in range(3):
            limited_client.get("/ok")
        clock.now += 61
        assert limited_client.get("/ok").status_code == 200


class TestRateLimitWiring:
    def test_enabled_from_settings(self):
        app_settings = Settings(rate_limit_enabled=True, rate_limit_max_requests=2, _env_file=None)
        client = TestClient(create_app(app_settings))
        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200
        assert client.get("/api/market/prices").status_code == 429

    def test_disabled_from_settings(self, client):
        for _ in range(150):
            assert client.get("/health").status_code == 200
