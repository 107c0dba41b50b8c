"""
Tests for alfa_trading/routers/market_router.py, signal_router.py and
system_router.py, plus the shared 404 envelope.
"""

from alfa_trading.constants import MOCK_PRICES


class TestMarketPrices:
    def test_returns_price_table(self, client):
        response = client.get("/api/market/prices")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == MOCK_PRICES
        assert "timestamp" in body

    def test_repeated_calls_identical(self, client):
        """Idempotence: the table never changes within a process."""
        first = client.get("/api/market/prices").json()["data"]
        second = client.get("/api/market/prices").json()["data"]
        assert first == second


class TestEntrySignal:
    def test_signal_shape_and_levels(self, client):
        for _ in range(20):
            response = client.get("/api/signal/entry")
            assert response.status_code == 200
            signal = response.json()["data"]
            assert signal["symbol"] in MOCK_PRICES
            assert signal["price"] == MOCK_PRICES[signal["symbol"]]
            assert 60 <= signal["confidence"] < 100
            assert signal["validity"] == "1 hour"
            if signal["signal"] == "BUY":
                assert signal["stopLoss"] < signal["price"] < signal["targetPrice"]
            else:
                assert signal["signal"] == "SELL"
                assert signal["targetPrice"] < signal["price"] < signal["stopLoss"]

    def test_signal_does_not_touch_ledger(self, client, services):
        client.get("/api/signal/entry")
        assert services.ledger._balances == {}
        assert len(services.order_log) == 0

    def test_generator_failure_returns_500(self, client, services, monkeypatch):
        def boom():
            raise RuntimeError("rng exploded")

        monkeypatch.setattr(services.signal_generator, "generate_signal", boom)
        response = client.get("/api/signal/entry")
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to generate signal"
        assert response.json()["details"] == "rng exploded"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["success"] is True
        assert body["data"]["status"] == "OK"
        assert body["data"]["timestamp"] == body["timestamp"]


class TestRouteNotFound:
    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Route not found"}
