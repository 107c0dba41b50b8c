"""Funds / balance schemas"""

from datetime import datetime

from alfa_trading.schemas.base import CamelModel


class BalanceResponse(CamelModel):
    # No margin model: available, total and available margin are the same figure
    available_balance: float
    total_balance: float
    used_margin: float = 0.0
    available_margin: float
    currency: str
    last_updated: datetime

    @classmethod
    def from_amount(cls, amount: float, currency: str, as_of: datetime) -> "BalanceResponse":
        return cls(
            available_balance=amount,
            total_balance=amount,
            available_margin=amount,
            currency=currency,
            last_updated=as_of,
        )
