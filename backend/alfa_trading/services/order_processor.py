"""
Paper Order Processor

Validates a paper order, prices it against the price table, checks
affordability against the ledger, records it in the order log and applies
the balance change. Orders fill immediately at the resolved price.

Known limitation: SELL orders are not checked against holdings (positions are
not tracked), so a SELL always credits the full order value.
"""

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from alfa_trading.constants import OrderStatus, Side
from alfa_trading.exceptions import InsufficientFundsError, UnknownSymbolError, ValidationError
from alfa_trading.schemas.order import Order
from alfa_trading.services.keyed_lock import KeyedLock
from alfa_trading.services.ledger import BalanceStore
from alfa_trading.services.order_log import OrderLog
from alfa_trading.services.price_table import PriceTable

logger = logging.getLogger(__name__)


def parse_side(side: Any) -> Side:
    if not isinstance(side, str) or not side.strip():
        raise ValidationError("Symbol, type, and quantity are required")
    try:
        return Side(side.strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid order type '{side}'. Must be BUY or SELL")


def parse_quantity(quantity: Any) -> int:
    """Accept ints and integral numeric strings; reject bools, fractions and non-positive values."""
    if quantity is None or quantity == "":
        raise ValidationError("Symbol, type, and quantity are required")
    if isinstance(quantity, bool):
        raise ValidationError("Quantity must be a positive integer")

    if isinstance(quantity, int):
        value = quantity
    elif isinstance(quantity, float):
        if not quantity.is_integer():
            raise ValidationError("Quantity must be a positive integer")
        value = int(quantity)
    elif isinstance(quantity, str):
        try:
            value = int(quantity.strip())
        except ValueError:
            raise ValidationError("Quantity must be a positive integer")
    else:
        raise ValidationError("Quantity must be a positive integer")

    if value <= 0:
        raise ValidationError("Quantity must be a positive integer")
    return value


class OrderProcessor:
    def __init__(self, price_table: PriceTable, ledger: BalanceStore, order_log: OrderLog):
        self.price_table = price_table
        self.ledger = ledger
        self.order_log = order_log
        # Per-user locks serialize check -> record -> adjust so two orders
        # for the same user cannot both pass the affordability check
        self._user_locks = KeyedLock()

    def resolve_price(self, symbol: str, price: Optional[float] = None) -> float:
        """Explicit positive price wins, then the price table; otherwise UnknownSymbolError."""
        if price is not None and not math.isfinite(price):
            raise ValidationError("Price must be a finite number")
        if price is not None and price > 0:
            return float(price)
        table_price = self.price_table.get_price(symbol)
        if table_price is None:
            raise UnknownSymbolError(symbol)
        return table_price

    async def place_order(
        self,
        user_id: str,
        symbol: Any,
        side: Any,
        quantity: Any,
        price: Optional[float] = None,
    ) -> Order:
        """
        Execute a paper order.

        Args:
            user_id: Owner of the order (guest id for anonymous requests)
            symbol: Instrument symbol, case-insensitive
            side: "BUY" or "SELL", case-insensitive
            quantity: Positive integer (integral strings accepted)
            price: Optional execution price; must be finite, ignored unless positive

        Returns:
            The executed Order

        Raises:
            ValidationError: missing or malformed input
            UnknownSymbolError: no usable price
            InsufficientFundsError: BUY value exceeds the balance
        """
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValidationError("Symbol, type, and quantity are required")
        order_side = parse_side(side)
        order_quantity = parse_quantity(quantity)
        order_symbol = symbol.strip().upper()
        order_price = self.resolve_price(order_symbol, price)
        try:
            order_value = order_quantity * order_price
        except OverflowError:
            raise ValidationError("Order value is too large")
        if not math.isfinite(order_value):
            raise ValidationError("Order value is too large")

        async with self._user_locks.hold(user_id):
            current_balance = await self.ledger.get_balance(user_id)

            if order_side == Side.SELL and not math.isfinite(current_balance + order_value):
                raise ValidationError("Order value is too large")

            if order_side == Side.BUY and order_value > current_balance:
                logger.info(
                    f"Rejected paper BUY: user={user_id}, symbol={order_symbol}, "
                    f"value={order_value}, available={current_balance}"
                )
                raise InsufficientFundsError(
                    "Insufficient balance",
                    available=current_balance,
                    required=order_value,
                )

            now = datetime.now(timezone.utc)
            order = Order(
                id=str(uuid.uuid4()),
                user_id=user_id,
                symbol=order_symbol,
                side=order_side,
                quantity=order_quantity,
                price=order_price,
                status=OrderStatus.EXECUTED,
                created_at=now,
                executed_at=now,
            )
            await self.order_log.append(order)

            delta = -order_value if order_side == Side.BUY else order_value
            try:
                new_balance = await self.ledger.adjust(user_id, delta)
            except Exception as e:
                logger.error(f"Ledger adjustment failed for order {order.id}, rolling back: {e}")
                await self.order_log.discard(order.id)
                raise

        logger.info(
            f"Paper order executed: id={order.id}, user={user_id}, {order_side} "
            f"{order_quantity} {order_symbol} @ {order_price}, new_balance={new_balance}"
        )
        return order
