"""Paper order schemas"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from alfa_trading.constants import OrderStatus, Side
from alfa_trading.schemas.base import CamelModel


class Order(CamelModel):
    """An executed paper order. Immutable once created."""
    id: str
    user_id: str
    symbol: str
    side: Side = Field(alias="type")
    quantity: int
    price: float
    status: OrderStatus = OrderStatus.EXECUTED
    created_at: datetime
    executed_at: datetime

    class Config:
        frozen = True


class OrderRequest(BaseModel):
    """
    Body of POST /api/order/paper.

    Fields are loose here; OrderProcessor.place_order validates them.
    """
    symbol: Optional[str] = None
    type: Optional[str] = None
    quantity: Optional[Any] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
