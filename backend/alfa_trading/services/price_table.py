"""
Price Table

Static symbol -> reference price lookup. Built once at startup and never
mutated; every reader gets a copy.
"""

from typing import Dict, Mapping, Optional

from alfa_trading.constants import MOCK_PRICES


class PriceTable:
    def __init__(self, prices: Optional[Mapping[str, float]] = None):
        source = MOCK_PRICES if prices is None else prices
        self._prices: Dict[str, float] = {symbol.upper(): float(price) for symbol, price in source.items()}

    def get_price(self, symbol: str) -> Optional[float]:
        """Reference price for a symbol (case-insensitive), or None if unknown"""
        if not symbol:
            return None
        return self._prices.get(symbol.strip().upper())

    def list_all(self) -> Dict[str, float]:
        return dict(self._prices)

    def symbols(self) -> list:
        return list(self._prices)

    def __contains__(self, symbol: str) -> bool:
        return self.get_price(symbol) is not None

    def __len__(self) -> int:
        return len(self._prices)
