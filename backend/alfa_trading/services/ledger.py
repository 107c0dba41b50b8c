"""
Account Ledger

Per-user available balance for paper trading. Balances are created lazily
with the configured default on first read or write and live only for the
process lifetime (a restart resets every account).

BalanceStore is the interface routers and the order processor depend on;
InMemoryBalanceStore is the only backend today.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict

from alfa_trading.services.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class BalanceStore(ABC):
    """Storage interface for user balances."""

    @abstractmethod
    async def get_balance(self, user_id: str) -> float:
        """Current balance, initializing it to the default on first access."""
        pass

    @abstractmethod
    async def set_balance(self, user_id: str, amount: float) -> float:
        """Overwrite a balance (account reset)."""
        pass

    @abstractmethod
    async def adjust(self, user_id: str, delta: float) -> float:
        """
        Atomically add a signed delta to a user's balance.

        Returns:
            The new balance
        """
        pass

    @abstractmethod
    async def snapshot(self) -> Dict[str, float]:
        """Copy of every known balance."""
        pass


class InMemoryBalanceStore(BalanceStore):
    """
    Process-local balance store.

    Read-modify-write on a user's balance happens under that user's
    asyncio.Lock, so concurrent adjust() calls for the same user serialize
    and no update is lost.
    """

    def __init__(self, default_balance: float = 100000.0):
        self.default_balance = float(default_balance)
        self._balances: Dict[str, float] = {}
        self._locks = KeyedLock()

    def _read(self, user_id: str) -> float:
        # Caller must hold the user's lock
        if user_id not in self._balances:
            self._balances[user_id] = self.default_balance
            logger.debug(f"Initialized balance for {user_id}: {self.default_balance}")
        return self._balances[user_id]

    async def get_balance(self, user_id: str) -> float:
        async with self._locks.hold(user_id):
            return self._read(user_id)

    async def set_balance(self, user_id: str, amount: float) -> float:
        async with self._locks.hold(user_id):
            self._balances[user_id] = float(amount)
            return self._balances[user_id]

    async def adjust(self, user_id: str, delta: float) -> float:
        async with self._locks.hold(user_id):
            new_balance = self._read(user_id) + delta
            self._balances[user_id] = new_balance
            return new_balance

    async def snapshot(self) -> Dict[str, float]:
        return dict(self._balances)
