"""
Order Log

Append-only record of executed paper orders, keyed by order id. The only
removal path is discard(), used by the order processor to roll back an order
whose ledger adjustment failed.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from alfa_trading.schemas.order import Order

logger = logging.getLogger(__name__)


class OrderLog:
    def __init__(self):
        self._orders: Dict[str, Order] = {}  # insertion-ordered
        self._lock = asyncio.Lock()

    async def append(self, order: Order) -> Order:
        async with self._lock:
            if order.id in self._orders:
                raise ValueError(f"Duplicate order id: {order.id}")
            self._orders[order.id] = order
        return order

    async def discard(self, order_id: str) -> Optional[Order]:
        async with self._lock:
            order = self._orders.pop(order_id, None)
        if order:
            logger.warning(f"Discarded order {order_id} from order log")
        return order

    async def get(self, order_id: str) -> Optional[Order]:
        async with self._lock:
            return self._orders.get(order_id)

    async def list_for_user(self, user_id: str) -> List[Order]:
        async with self._lock:
            return [o for o in self._orders.values() if o.user_id == user_id]

    async def list_all(self) -> List[Order]:
        async with self._lock:
            return list(self._orders.values())

    def __len__(self) -> int:
        return len(self._orders)
