"""Trading signal schema"""

from datetime import datetime

from pydantic import Field

from alfa_trading.constants import Side
from alfa_trading.schemas.base import CamelModel


class Signal(CamelModel):
    id: str
    symbol: str
    direction: Side = Field(alias="signal")
    price: float
    confidence: int
    target_price: float
    stop_loss: float
    reasoning: str
    timestamp: datetime
    validity: str

    class Config:
        frozen = True
