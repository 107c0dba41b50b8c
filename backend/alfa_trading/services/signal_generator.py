"""
Signal Generator

Produces a randomized entry signal for the dashboard: a random symbol from the
price table, a random direction, a confidence score and target/stop levels
derived from the reference price. Nothing is persisted or correlated with
later orders.
"""

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from alfa_trading.constants import (
    SIGNAL_CONFIDENCE_MAX,
    SIGNAL_CONFIDENCE_MIN,
    SIGNAL_LEVELS,
    SIGNAL_VALIDITY,
    Side,
)
from alfa_trading.schemas.signal import Signal
from alfa_trading.services.price_table import PriceTable

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SignalGenerator:
    def __init__(
        self,
        price_table: PriceTable,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.price_table = price_table
        self.rng = rng or random.Random()
        self.clock = clock

    def generate_signal(self) -> Signal:
        symbols = self.price_table.symbols()
        if not symbols:
            raise RuntimeError("Price table is empty")

        symbol = self.rng.choice(symbols)
        price = self.price_table.get_price(symbol)
        direction = self.rng.choice([Side.BUY, Side.SELL])
        levels = SIGNAL_LEVELS[direction]

        signal = Signal(
            id=str(uuid.uuid4()),
            symbol=symbol,
            direction=direction,
            price=price,
            confidence=self.rng.randrange(SIGNAL_CONFIDENCE_MIN, SIGNAL_CONFIDENCE_MAX),
            target_price=price * levels["target"],
            stop_loss=price * levels["stop"],
            reasoning=f"Technical analysis suggests {direction} signal based on momentum indicators",
            timestamp=self.clock(),
            validity=SIGNAL_VALIDITY,
        )
        logger.debug(f"Generated {direction} signal for {symbol} @ {price} (confidence {signal.confidence})")
        return signal
