"""
API Routers

One router per dashboard panel, plus the health check.
"""

from alfa_trading.routers import funds_router
from alfa_trading.routers import market_router
from alfa_trading.routers import order_router
from alfa_trading.routers import signal_router
from alfa_trading.routers import system_router

__all__ = [
    "funds_router",
    "market_router",
    "order_router",
    "signal_router",
    "system_router",
]
