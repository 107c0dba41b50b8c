"""Centralized Pydantic schemas for API requests/responses"""

from .base import CamelModel
from .funds import BalanceResponse
from .order import Order, OrderRequest
from .signal import Signal

__all__ = [
    "CamelModel",
    # Funds schemas
    "BalanceResponse",
    # Order schemas
    "Order",
    "OrderRequest",
    # Signal schemas
    "Signal",
]
