"""
Application Constants

Reference prices, signal multipliers and order vocabulary.
"""

from enum import StrEnum
from typing import Dict

# Static NSE reference prices (INR) served to the dashboard and used to price orders
MOCK_PRICES: Dict[str, float] = {
    "RELIANCE": 2850.75,
    "TCS": 3420.50,
    "HDFC": 1650.25,
    "INFY": 1890.80,
    "ICICIBANK": 1050.30,
    "SBIN": 720.45,
    "BHARTIARTL": 1180.90,
    "ITC": 285.60,
    "KOTAKBANK": 1890.75,
    "LT": 3450.20,
}


class Side(StrEnum):
    """Order / signal direction"""
    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(StrEnum):
    # Paper orders fill immediately; there is no pending or cancelled state
    EXECUTED = "executed"


# Signal target/stop multipliers relative to the reference price
SIGNAL_LEVELS: Dict[Side, Dict[str, float]] = {
    Side.BUY: {"target": 1.03, "stop": 0.98},
    Side.SELL: {"target": 0.97, "stop": 1.02},
}

SIGNAL_CONFIDENCE_MIN = 60
SIGNAL_CONFIDENCE_MAX = 100  # exclusive
SIGNAL_VALIDITY = "1 hour"
